"""Traversal engine: enumerate candidate files under a directory tree."""

import logging
import os
import stat
from typing import List, Optional
from .types import FileDiscoveryInterface
from .config import FormatterConfig


class FileDiscovery(FileDiscoveryInterface):
    """
    Depth-first directory walker applying the ignore list, the extension
    allow-list and the depth bound.

    Depth 0 is the root. A directory at depth ``max_depth`` is refused before
    it is listed, so with ``max_depth=2`` the root and its children are
    listed but grandchildren are not. Entries keep the order in which the
    operating system lists them; callers should not rely on it being sorted.
    """

    def __init__(self, config: Optional[FormatterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        self.config = config or FormatterConfig()
        self.logger = logger or logging.getLogger(__name__)

    def discover_files(self, root_path: str, current_depth: int = 0) -> List[str]:
        """
        Recursively find every file with an allowed extension.

        Args:
            root_path: Directory to search; need not exist
            current_depth: Depth of root_path within the walk

        Returns:
            Absolute file paths, depth-first; empty when root_path cannot be
            read
        """
        if current_depth >= self.config.max_depth:
            self.logger.warning(f"Maximum depth ({self.config.max_depth}) reached at: {root_path}")
            return []

        try:
            directory = os.path.abspath(os.fspath(root_path))
            entries = os.listdir(directory)
        except (OSError, TypeError, ValueError) as e:
            self.logger.warning(f"Cannot read directory {root_path}: {e}")
            return []

        results: List[str] = []
        for name in entries:
            entry_path = os.path.join(directory, name)

            try:
                mode = os.stat(entry_path).st_mode
            except (OSError, ValueError) as e:
                self.logger.warning(f"Cannot access {entry_path}: {e}")
                continue

            if stat.S_ISDIR(mode):
                if self.config.is_folder_ignored(name):
                    self.logger.info(f"Ignoring folder: {entry_path} ({name})")
                    continue
                results.extend(self.discover_files(entry_path, current_depth + 1))
            elif self.config.is_extension_allowed(entry_path):
                results.append(entry_path)

        return results
