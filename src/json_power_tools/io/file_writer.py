"""File writer that replaces documents in place."""

import logging
import os
import stat
import tempfile
from typing import Optional
from ..types import ProcessingError, ErrorType


class FileWriter:
    """
    File writer for in-place document replacement.

    Content goes to a temporary file in the target's directory which is then
    renamed over the target, so readers see either the old or the new
    document and a failed write leaves the original untouched.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write_text_atomic(self, path: str, text: str) -> int:
        """
        Replace a file's contents.

        Args:
            path: File to overwrite
            text: New contents

        Returns:
            Number of bytes written

        Raises:
            ProcessingError: If writing fails
        """
        path = os.fspath(path)
        directory = os.path.dirname(os.path.abspath(path))
        temp_path = None

        try:
            data = text.encode("utf-8")
            fd, temp_path = tempfile.mkstemp(
                prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())

            self._copy_permissions(path, temp_path)
            os.replace(temp_path, path)
            temp_path = None

        except (OSError, UnicodeEncodeError) as e:
            raise ProcessingError(f"Cannot write {path}: {e}",
                                  ErrorType.FILESYSTEM, path=path)
        finally:
            if temp_path is not None:
                self._discard(temp_path)

        self.logger.debug(f"Wrote {len(data)} bytes to {path}")
        return len(data)

    def _copy_permissions(self, source: str, target: str) -> None:
        """Give the replacement file the permission bits of the original."""
        try:
            mode = stat.S_IMODE(os.stat(source).st_mode)
        except FileNotFoundError:
            return
        os.chmod(target, mode)

    def _discard(self, temp_path: str) -> None:
        try:
            os.unlink(temp_path)
        except OSError as e:
            self.logger.warning(f"Could not remove temporary file {temp_path}: {e}")
