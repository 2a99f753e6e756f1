"""Human-readable fragments of Windows and POSIX file paths."""

import ntpath
import re
from dataclasses import dataclass
from typing import List

SEPARATORS = '\\/'
ELLIPSIS = '...'


@dataclass(frozen=True)
class PathParts:
    """The pieces of a path. Missing pieces are empty strings."""

    file_name: str = ""
    directory: str = ""
    extension: str = ""
    name_no_ext: str = ""
    drive: str = ""


def split_path(path: str) -> PathParts:
    """
    Split a path into file name, directory, extension, bare name and drive.

    Both backslash and forward slash are treated as separators, so Windows,
    UNC and POSIX paths all work. The directory has no trailing separator
    except when it is the root itself. The extension has no leading dot.
    """
    if not path:
        return PathParts()

    # ntpath understands both separators as well as "C:" and "\\server\share"
    directory, name = ntpath.split(path)
    drive, _ = ntpath.splitdrive(path)
    # "/" stays "/", "C:\" becomes "C:"
    directory = directory.rstrip(SEPARATORS) or directory

    stem, ext = ntpath.splitext(name)
    return PathParts(
        file_name=name,
        directory=directory,
        extension=ext[1:],
        name_no_ext=stem,
        drive=drive,
    )


def file_name(path: str) -> str:
    return split_path(path).file_name


def name_no_ext(path: str) -> str:
    return split_path(path).name_no_ext


def extension(path: str) -> str:
    return split_path(path).extension


def directory(path: str) -> str:
    return split_path(path).directory


def _separator(path: str) -> str:
    return '\\' if '\\' in path else '/'


def shorten_path(path: str, max_length: int = 40) -> str:
    """
    Shorten a path for display by replacing leading directories with '...'.

    The drive (or root) and the file name are always kept, so the result can
    still be longer than max_length when those alone do not fit.
    """
    if len(path) <= max_length:
        return path

    drive, rest = ntpath.splitdrive(path)
    root = rest[:1] if rest[:1] and rest[:1] in SEPARATORS else ''
    pieces: List[str] = [p for p in re.split(r'[\\/]+', rest) if p]
    if len(pieces) <= 1:
        return path

    sep = _separator(path)
    # "C:dir" stays drive-relative
    head = drive + root
    middle, tail = pieces[:-1], pieces[-1]

    while middle:
        middle = middle[1:]
        candidate = head + sep.join([ELLIPSIS] + middle + [tail])
        if len(candidate) <= max_length:
            return candidate
    return head + sep.join([ELLIPSIS, tail])
