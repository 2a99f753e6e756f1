"""Path pickers and confirmation prompts, with a tkinter implementation."""

import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

ALL_FILES = ("All files", "*.*")

# "Text Documents (*.txt; *.md)"
_FILTER_PATTERN = re.compile(r'^\s*(?P<label>[^()]*?)\s*\((?P<patterns>[^()]*)\)\s*$')


def parse_file_filter(expr: Optional[str]) -> List[Tuple[str, str]]:
    """
    Convert a filter expression into tkinter `filetypes`.

    'Text Documents (*.txt; *.md)' -> [('Text Documents', '*.txt *.md')].
    Several filters can be joined with '|'. A bare pattern list such as
    '*.txt;*.log' gets the label 'Files'. An empty expression means all files.
    """
    if not expr or not expr.strip():
        return [ALL_FILES]

    filetypes: List[Tuple[str, str]] = []
    for part in expr.split('|'):
        part = part.strip()
        if not part:
            continue
        match = _FILTER_PATTERN.match(part)
        if match:
            label = match.group('label') or "Files"
            raw_patterns = match.group('patterns')
        else:
            label, raw_patterns = "Files", part
        patterns = [p.strip() for p in re.split(r'[;,\s]+', raw_patterns) if p.strip()]
        if patterns:
            filetypes.append((label, ' '.join(patterns)))

    return filetypes or [ALL_FILES]


class PathPicker(ABC):
    """Asks the user for a file path. Both methods return '' on cancel."""

    @abstractmethod
    def ask_save_path(self, suggested_name: str, title: str, file_filter: str) -> str:
        pass

    @abstractmethod
    def ask_open_path(self, title: str, file_filter: str) -> str:
        pass


class ConfirmPrompt(ABC):
    """Asks the user a yes/no question."""

    @abstractmethod
    def ask_yes_no(self, message: str, title: str) -> bool:
        pass


class TkDialogs(PathPicker, ConfirmPrompt):
    """Modal tkinter dialogs shown over a hidden root window."""

    def __init__(self, parent=None):
        self.parent = parent

    def _with_parent(self, show):
        if self.parent is not None:
            return show(self.parent)

        import tkinter as tk

        root = tk.Tk()
        root.withdraw()
        try:
            root.attributes('-topmost', True)
            return show(root)
        finally:
            root.destroy()

    def ask_save_path(self, suggested_name: str, title: str, file_filter: str) -> str:
        from tkinter import filedialog

        filetypes = parse_file_filter(file_filter)
        path = self._with_parent(lambda parent: filedialog.asksaveasfilename(
            parent=parent,
            title=title,
            initialfile=suggested_name or None,
            filetypes=filetypes,
        ))
        logger.debug(f"Save dialog returned {path!r}")
        return path or ""

    def ask_open_path(self, title: str, file_filter: str) -> str:
        from tkinter import filedialog

        filetypes = parse_file_filter(file_filter)
        path = self._with_parent(lambda parent: filedialog.askopenfilename(
            parent=parent,
            title=title,
            filetypes=filetypes,
        ))
        logger.debug(f"Open dialog returned {path!r}")
        return path or ""

    def ask_yes_no(self, message: str, title: str) -> bool:
        from tkinter import messagebox

        return bool(self._with_parent(
            lambda parent: messagebox.askyesno(title, message, parent=parent)
        ))
