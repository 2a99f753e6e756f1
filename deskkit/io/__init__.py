"""File I/O and dialog collaborators."""

from .dialogs import ConfirmPrompt, PathPicker, TkDialogs, parse_file_filter
from .file_system import FileSystem, LocalFileSystem
from .file_operations import FileOperations, load_file, save_file

__all__ = [
    "ConfirmPrompt",
    "PathPicker",
    "TkDialogs",
    "parse_file_filter",
    "FileSystem",
    "LocalFileSystem",
    "FileOperations",
    "load_file",
    "save_file",
]
