"""Save and load text files through a path picker, with retry on missing files."""

import logging
from typing import Optional

from ..config import Settings, get_settings
from ..core.results import FailureReason, LoadResult, SaveResult
from .dialogs import ConfirmPrompt, PathPicker, TkDialogs
from .file_system import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "File not found:\n{path}\n\nChoose a different file?"


class FileOperations:
    """
    Save and load operations over injectable collaborators.

    Neither operation raises for expected failures: cancelled dialogs,
    declined retries and I/O errors all come back as a result with error=1.
    """

    def __init__(
        self,
        picker: Optional[PathPicker] = None,
        prompt: Optional[ConfirmPrompt] = None,
        file_system: Optional[FileSystem] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        dialogs = None
        if picker is None or prompt is None:
            dialogs = TkDialogs()
        self.picker = picker or dialogs
        self.prompt = prompt or dialogs
        self.file_system = file_system or LocalFileSystem()

    def save(
        self,
        contents: str,
        path: Optional[str] = None,
        suggested_name: str = "",
        dialog_title: Optional[str] = None,
        file_filter: Optional[str] = None,
    ) -> SaveResult:
        """
        Write contents to path, asking the user for a path when none is given.

        An existing file at the target is deleted first, so this is a plain
        overwrite rather than an atomic replace.
        """
        if not path:
            path = self.picker.ask_save_path(
                suggested_name,
                dialog_title or self.settings.save_dialog_title,
                self.settings.file_filter if file_filter is None else file_filter,
            )
            if not path:
                logger.info(f"Save not performed: {FailureReason.USER_CANCELLED.value}")
                return SaveResult.failed()

        try:
            contents.encode(self.settings.encoding)
        except UnicodeEncodeError as e:
            logger.warning(f"Save failed ({FailureReason.WRITE_FAILED.value}) for {path}: {e}")
            return SaveResult.failed()

        writing = False
        try:
            if self.file_system.exists(path):
                logger.debug(f"Replacing existing file {path}")
                self.file_system.delete(path)
            writing = True
            self.file_system.write_text(path, contents, encoding=self.settings.encoding)
        except (OSError, UnicodeEncodeError) as e:
            logger.warning(f"Save failed ({FailureReason.WRITE_FAILED.value}) for {path}: {e}")
            if writing:
                self._remove_partial(path)
            return SaveResult.failed()

        if not self.file_system.exists(path):
            logger.warning(
                f"Save failed ({FailureReason.WRITE_VERIFICATION_FAILED.value}): "
                f"{path} missing after write"
            )
            return SaveResult.failed()

        logger.info(f"Saved {len(contents)} characters to {path}")
        return SaveResult(path=str(path), error=0)

    def _remove_partial(self, path: str) -> None:
        try:
            if self.file_system.exists(path):
                self.file_system.delete(path)
        except OSError as e:
            logger.error(f"Could not remove partial file {path}: {e}")

    def load(
        self,
        path: Optional[str] = None,
        dialog_title: Optional[str] = None,
        file_filter: Optional[str] = None,
    ) -> LoadResult:
        """
        Read a file, asking the user for a path when none is given.

        If the path does not exist the user may pick another file. Each pick
        counts as an attempt; after `max_load_attempts` the load gives up.
        """
        max_attempts = self.settings.max_load_attempts
        if max_attempts < 1:
            raise ValueError(f"max_load_attempts must be >= 1, got {max_attempts}")

        title = dialog_title or self.settings.open_dialog_title
        filter_expr = self.settings.file_filter if file_filter is None else file_filter

        for attempt in range(1, max_attempts + 1):
            if not path:
                path = self.picker.ask_open_path(title, filter_expr)
                if not path:
                    logger.info(f"Load not performed: {FailureReason.USER_CANCELLED.value}")
                    return LoadResult.failed()

            if self.file_system.exists(path):
                return self._read(path)

            logger.info(f"Attempt {attempt}: {path} does not exist")
            retry = self.prompt.ask_yes_no(
                NOT_FOUND_MESSAGE.format(path=path),
                self.settings.not_found_title,
            )
            if not retry:
                logger.info(f"Load not performed: {FailureReason.FILE_NOT_FOUND.value}")
                return LoadResult.failed()
            path = None

        logger.warning(
            f"Load not performed: {FailureReason.RETRY_LIMIT_REACHED.value} "
            f"after {max_attempts} attempts"
        )
        return LoadResult.failed()

    def _read(self, path: str) -> LoadResult:
        try:
            contents = self.file_system.read_text(path, encoding=self.settings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Load failed ({FailureReason.READ_FAILED.value}) for {path}: {e}")
            return LoadResult.failed()
        logger.info(f"Loaded {len(contents)} characters from {path}")
        return LoadResult(path=str(path), contents=contents, error=0)


def save_file(
    contents: str,
    path: Optional[str] = None,
    suggested_name: str = "",
    dialog_title: Optional[str] = None,
    file_filter: Optional[str] = None,
    **collaborators,
) -> SaveResult:
    """Save contents with default collaborators; override any by keyword."""
    return FileOperations(**collaborators).save(
        contents,
        path=path,
        suggested_name=suggested_name,
        dialog_title=dialog_title,
        file_filter=file_filter,
    )


def load_file(
    path: Optional[str] = None,
    dialog_title: Optional[str] = None,
    file_filter: Optional[str] = None,
    **collaborators,
) -> LoadResult:
    """Load a file with default collaborators; override any by keyword."""
    return FileOperations(**collaborators).load(
        path=path,
        dialog_title=dialog_title,
        file_filter=file_filter,
    )
