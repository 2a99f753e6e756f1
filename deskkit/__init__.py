"""
deskkit - small helpers for desktop scripting.
"""

__version__ = "1.0.0"

from .core import (
    LoadResult,
    PathParts,
    SaveResult,
    format_hotkey,
    edit_width,
    repeat,
    set_modified,
    shorten_path,
    split_path,
    toggle_modified,
    toggle_visibility,
)
from .io import FileOperations, load_file, save_file

__all__ = [
    "LoadResult",
    "PathParts",
    "SaveResult",
    "format_hotkey",
    "edit_width",
    "repeat",
    "set_modified",
    "shorten_path",
    "split_path",
    "toggle_modified",
    "toggle_visibility",
    "FileOperations",
    "load_file",
    "save_file",
]
