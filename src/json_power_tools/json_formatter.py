"""Main JSON Power Tools formatter."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional
from .types import (
    JSONFormatterInterface,
    FormatResult,
    BulkFormatResult,
    ProcessingError,
    ErrorType
)
from .config import FormatterConfig, get_config
from .traversal import FileDiscovery
from .normalizer import JSONNormalizer
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class JSONFormatter(JSONFormatterInterface):
    """
    Caller-facing entry point for formatting text, files and directory trees.

    Every operation works on one configuration snapshot: the config passed
    to the constructor, or else the active configuration at the moment the
    operation starts. Files are processed independently, so a batch can be
    fanned out over a thread pool without changing its outcome.
    """

    def __init__(self, config: Optional[FormatterConfig] = None,
                 logger: Optional[logging.Logger] = None,
                 enable_parallel_processing: bool = False,
                 max_workers: Optional[int] = None):
        """
        Initialize the formatter.

        Args:
            config: Fixed configuration; None reads the active configuration
                at the start of each operation
            logger: Optional logger instance
            enable_parallel_processing: Format files of a batch concurrently
            max_workers: Maximum number of worker threads (None = auto-detect)
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.enable_parallel_processing = enable_parallel_processing
        self.max_workers = max_workers
        self.error_handler = ErrorHandler(self.logger)
        # Aggregates finished batches; each batch profiles with its own instance.
        self.profiler = PerformanceProfiler(self.logger)

    def format_text(self, text: str) -> Optional[str]:
        """
        Format JSON text.

        Returns:
            Formatted text, or None if the text is not valid JSON
        """
        return self.format_text_result(text).text

    def format_text_result(self, text: str) -> FormatResult:
        return self._normalizer(self._snapshot()).normalize_text(text)

    def format_file(self, path: str) -> bool:
        """
        Format a JSON file in place.

        Returns:
            True if the file was rewritten
        """
        return self.format_file_result(path).success

    def format_file_result(self, path: str) -> FormatResult:
        return self._normalizer(self._snapshot()).normalize_file(path)

    def enumerate_files(self, root_path: str) -> List[str]:
        """List the files format_tree would process."""
        return FileDiscovery(self._snapshot(), self.logger).discover_files(root_path)

    def format_tree(self, root_path: str) -> BulkFormatResult:
        """
        Format every candidate file under a directory.

        Args:
            root_path: Root directory of the batch

        Returns:
            BulkFormatResult with counts and wall-clock duration
        """
        config = self._snapshot()
        self._log_batch_settings(root_path, config)

        normalizer = self._normalizer(config)
        results: List[FormatResult] = []

        profiler = PerformanceProfiler(self.logger)
        with profiler.profile_operation("format_tree"):
            files = FileDiscovery(config, self.logger).discover_files(root_path)
            self.logger.info(f"Found {len(files)} files to process")

            if self.enable_parallel_processing and len(files) > 1:
                with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                    results = list(executor.map(
                        lambda path: self._format_one(normalizer, path), files
                    ))
            else:
                results = [self._format_one(normalizer, path) for path in files]

            for result in results:
                written = len(result.text.encode("utf-8")) if result.success else 0
                profiler.record_file(written)

        metrics = profiler.last_metrics
        self.profiler.add_metrics(metrics)
        success_count = sum(1 for result in results if result.success)

        stats = BulkFormatResult(
            total_files=len(results),
            success_count=success_count,
            error_count=len(results) - success_count,
            duration=metrics.duration,
            failed_files=[result.path for result in results if not result.success]
        )

        self.logger.info("Formatting completed:")
        self.logger.info(f"- Total files: {stats.total_files}")
        self.logger.info(f"- Successful: {stats.success_count}")
        self.logger.info(f"- Errors: {stats.error_count}")
        self.logger.info(f"- Duration: {stats.duration_label}")

        return stats

    async def format_tree_async(self, root_path: str) -> BulkFormatResult:
        """Run format_tree without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.format_tree, root_path)

    def _format_one(self, normalizer: JSONNormalizer, path: str) -> FormatResult:
        try:
            return normalizer.normalize_file(path)
        except Exception as e:
            return self.error_handler.failure_result(
                ProcessingError(f"Unexpected error: {e}", ErrorType.UNEXPECTED), path
            )

    def _snapshot(self) -> FormatterConfig:
        return self.config.copy() if self.config is not None else get_config()

    def _normalizer(self, config: FormatterConfig) -> JSONNormalizer:
        return JSONNormalizer(config, self.logger)

    def _log_batch_settings(self, root_path: str, config: FormatterConfig) -> None:
        ignored = config.ignored_folders
        shown = ", ".join(ignored[:5]) + ("..." if len(ignored) > 5 else "")

        self.logger.info(f"Starting JSON formatting in: {root_path}")
        self.logger.info(f"Maximum depth limit: {config.max_depth}")
        self.logger.info(f"Ignoring {len(ignored)} folder types: {shown}")
        self.logger.info(f"Allowed extensions: {', '.join(config.allowed_extensions)}")
