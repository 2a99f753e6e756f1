"""Window title and visibility helpers."""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "*"


def is_modified(title: str, marker: str = DEFAULT_MARKER) -> bool:
    """True when the title carries the modified marker."""
    return title.startswith(marker)


def set_modified(title: str, modified: bool, marker: str = DEFAULT_MARKER) -> str:
    """Return the title with the marker added or removed. Safe to call repeatedly."""
    if modified:
        return title if is_modified(title, marker) else marker + title
    if is_modified(title, marker):
        return title[len(marker):]
    return title


def toggle_modified(title: str, marker: str = DEFAULT_MARKER) -> str:
    return set_modified(title, not is_modified(title, marker), marker)


class WindowHandle(ABC):
    """A window that can be shown and hidden."""

    @abstractmethod
    def is_visible(self) -> bool:
        pass

    @abstractmethod
    def show(self) -> None:
        pass

    @abstractmethod
    def hide(self) -> None:
        pass


class TkWindow(WindowHandle):
    """WindowHandle over a tkinter Tk or Toplevel."""

    def __init__(self, widget: Any):
        self.widget = widget

    def is_visible(self) -> bool:
        return bool(self.widget.winfo_viewable())

    def show(self) -> None:
        self.widget.deiconify()

    def hide(self) -> None:
        self.widget.withdraw()


def toggle_visibility(window: WindowHandle) -> bool:
    """Hide a visible window or show a hidden one. Returns the new visibility."""
    if window.is_visible():
        window.hide()
        logger.debug("Window hidden")
        return False
    window.show()
    logger.debug("Window shown")
    return True
