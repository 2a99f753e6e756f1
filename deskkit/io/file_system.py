"""File system access used by the save and load operations."""

import codecs
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class FileSystem(ABC):
    """The file operations need only these four calls."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        pass

    @abstractmethod
    def delete(self, path: PathLike) -> None:
        pass

    @abstractmethod
    def write_text(self, path: PathLike, text: str, encoding: str = 'utf-8') -> None:
        pass

    @abstractmethod
    def read_text(self, path: PathLike, encoding: str = 'utf-8') -> str:
        pass


def _bom_encoding(encoding: str) -> str:
    """Use utf-8-sig for UTF-8: writes add a byte-order mark and reads remove it."""
    if codecs.lookup(encoding).name == 'utf-8':
        return 'utf-8-sig'
    return encoding


class LocalFileSystem(FileSystem):
    """Reads and writes files on the local disk, keeping newlines as-is."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def delete(self, path: PathLike) -> None:
        Path(path).unlink()

    def write_text(self, path: PathLike, text: str, encoding: str = 'utf-8') -> None:
        """Write text to a file, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('w', encoding=_bom_encoding(encoding), newline='') as f:
            f.write(text)

    def read_text(self, path: PathLike, encoding: str = 'utf-8') -> str:
        """Read a whole file as text."""
        with Path(path).open('r', encoding=_bom_encoding(encoding), newline='') as f:
            return f.read()
