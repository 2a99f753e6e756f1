"""Pure helpers and result records."""

from .results import FailureReason, LoadResult, SaveResult
from .hotkeys import format_hotkey, format_key
from .paths import (
    PathParts,
    directory,
    extension,
    file_name,
    name_no_ext,
    shorten_path,
    split_path,
)
from .text import edit_width, measure_char_width, repeat
from .window import (
    TkWindow,
    WindowHandle,
    is_modified,
    set_modified,
    toggle_modified,
    toggle_visibility,
)

__all__ = [
    "FailureReason",
    "LoadResult",
    "SaveResult",
    "format_hotkey",
    "format_key",
    "PathParts",
    "directory",
    "extension",
    "file_name",
    "name_no_ext",
    "shorten_path",
    "split_path",
    "edit_width",
    "measure_char_width",
    "repeat",
    "TkWindow",
    "WindowHandle",
    "is_modified",
    "set_modified",
    "toggle_modified",
    "toggle_visibility",
]
