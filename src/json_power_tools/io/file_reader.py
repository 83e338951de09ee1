"""File reader for documents being normalized."""

import logging
from typing import Optional
from ..types import ProcessingError, ErrorType


class FileReader:
    """Read whole text files as UTF-8."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def read_text(self, path: str) -> str:
        """
        Read the full contents of a file.

        Args:
            path: File to read

        Returns:
            File contents

        Raises:
            ProcessingError: If the file cannot be read or decoded
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, ValueError, TypeError) as e:
            raise ProcessingError(f"Cannot read {path}: {e}",
                                  ErrorType.FILESYSTEM, path=str(path))
