"""Performance profiler for batch formatting operations."""

import time
import psutil
import logging
import threading
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from contextlib import contextmanager


@dataclass
class PerformanceMetrics:
    """Performance metrics for one profiled operation."""
    operation_name: str
    start_time: float
    end_time: float
    duration: float
    files_processed: int
    bytes_written: int
    memory_start_mb: float
    memory_end_mb: float
    memory_peak_mb: float
    throughput_files_per_second: float


class PerformanceProfiler:
    """
    Profiler recording wall-clock time, memory and throughput.

    Durations come from ``time.perf_counter``; memory is the resident set
    size of the current process as reported by psutil.
    An instance profiles one operation at a time; concurrent operations
    each use their own instance and may share a history via add_metrics.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the performance profiler.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.metrics_history: List[PerformanceMetrics] = []
        self._history_lock = threading.Lock()
        self.current_operation: Optional[str] = None
        self.start_time: Optional[float] = None
        self.start_memory: float = 0.0
        self.peak_memory: float = 0.0
        self.files_processed = 0
        self.bytes_written = 0

    @property
    def last_metrics(self) -> Optional[PerformanceMetrics]:
        return self.metrics_history[-1] if self.metrics_history else None

    @contextmanager
    def profile_operation(self, operation_name: str):
        """
        Context manager for profiling operations.

        Args:
            operation_name: Name of the operation being profiled
        """
        self.start_profiling(operation_name)
        try:
            yield self
        finally:
            self.stop_profiling()

    def start_profiling(self, operation_name: str) -> None:
        """Start profiling an operation."""
        self.current_operation = operation_name
        self.start_time = time.perf_counter()
        self.start_memory = self._memory_mb()
        self.peak_memory = self.start_memory
        self.files_processed = 0
        self.bytes_written = 0

        self.logger.debug(f"Started profiling: {operation_name}")

    def record_file(self, bytes_written: int = 0) -> None:
        """Count a processed file and sample memory."""
        if not self.current_operation:
            return

        self.files_processed += 1
        self.bytes_written += bytes_written
        self.peak_memory = max(self.peak_memory, self._memory_mb())

    def stop_profiling(self) -> PerformanceMetrics:
        """
        Stop profiling and return metrics.

        Returns:
            PerformanceMetrics object with collected data

        Raises:
            ValueError: If no operation is being profiled
        """
        if not self.current_operation or self.start_time is None:
            raise ValueError("No active profiling session")

        end_time = time.perf_counter()
        duration = end_time - self.start_time
        end_memory = self._memory_mb()
        self.peak_memory = max(self.peak_memory, end_memory)
        throughput = self.files_processed / duration if duration > 0 else 0.0

        metrics = PerformanceMetrics(
            operation_name=self.current_operation,
            start_time=self.start_time,
            end_time=end_time,
            duration=duration,
            files_processed=self.files_processed,
            bytes_written=self.bytes_written,
            memory_start_mb=self.start_memory,
            memory_end_mb=end_memory,
            memory_peak_mb=self.peak_memory,
            throughput_files_per_second=throughput
        )

        self.add_metrics(metrics)

        self.logger.debug(f"Performance Summary - {self.current_operation}:")
        self.logger.debug(f"  Duration: {duration:.2f}s")
        self.logger.debug(f"  Files: {self.files_processed} ({throughput:.1f} files/s)")
        self.logger.debug(f"  Memory Peak: {self.peak_memory:.1f} MB")

        self.current_operation = None
        self.start_time = None

        return metrics

    def add_metrics(self, metrics: PerformanceMetrics) -> None:
        """Append metrics of a finished operation to the history."""
        with self._history_lock:
            self.metrics_history.append(metrics)

    def get_performance_summary(self) -> Dict[str, Any]:
        """
        Get summary of all recorded operations.

        Returns:
            Dictionary with performance summary
        """
        if not self.metrics_history:
            return {"total_operations": 0}

        total_duration = sum(m.duration for m in self.metrics_history)
        total_files = sum(m.files_processed for m in self.metrics_history)

        return {
            "total_operations": len(self.metrics_history),
            "total_duration": total_duration,
            "total_files": total_files,
            "total_bytes_written": sum(m.bytes_written for m in self.metrics_history),
            "max_memory_peak_mb": max(m.memory_peak_mb for m in self.metrics_history),
            "average_files_per_second": total_files / total_duration if total_duration > 0 else 0.0
        }

    def _memory_mb(self) -> float:
        try:
            return psutil.Process().memory_info().rss / 1024 / 1024
        except (psutil.Error, OSError) as e:
            self.logger.warning(f"Performance sampling failed: {e}")
            return self.start_memory
