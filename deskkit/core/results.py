"""Result records returned by the file operations."""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict


class FailureReason(Enum):
    """Why an operation reported error=1. Used for logging only."""
    USER_CANCELLED = "user_cancelled"
    FILE_NOT_FOUND = "file_not_found"
    WRITE_VERIFICATION_FAILED = "write_verification_failed"
    WRITE_FAILED = "write_failed"
    READ_FAILED = "read_failed"
    RETRY_LIMIT_REACHED = "retry_limit_reached"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save: the written path, or an empty path with error=1."""

    path: str = ""
    error: int = 0

    @property
    def ok(self) -> bool:
        return self.error == 0

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def failed(cls) -> "SaveResult":
        return cls(path="", error=1)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load: path and contents, or empty fields with error=1."""

    path: str = ""
    contents: str = ""
    error: int = 0

    @property
    def ok(self) -> bool:
        return self.error == 0

    def __bool__(self) -> bool:
        return self.ok

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def failed(cls) -> "LoadResult":
        return cls(path="", contents="", error=1)
