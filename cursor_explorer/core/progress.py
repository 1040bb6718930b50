"""
Progress tracking abstractions for file copies
Clean separation between progress reporting and display implementation
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import time
import logging


@dataclass
class ProgressStats:
    """Statistics for progress tracking"""
    processed_files: int = 0
    total_bytes: int = 0
    processed_bytes: int = 0
    start_time: float = None
    current_file: str = None
    errors: int = 0

    def __post_init__(self):
        if self.start_time is None:
            self.start_time = time.time()

    @property
    def elapsed_time(self) -> float:
        """Get elapsed time in seconds"""
        return time.time() - self.start_time

    @property
    def progress_percentage(self) -> float:
        """Percentage of the current file's bytes processed"""
        if self.total_bytes > 0:
            return (self.processed_bytes / self.total_bytes) * 100
        return 0.0


class ProgressTracker(ABC):
    """
    Abstract base class for progress tracking
    Implementations can use tqdm, logging, or nothing at all
    """

    def __init__(self):
        self.stats = ProgressStats()
        self.logger = logging.getLogger(f'cursor_explorer.{self.__class__.__name__}')

    @abstractmethod
    def start_file(self, filename: str, file_size: int = 0):
        """
        Start tracking a new file

        Args:
            filename: Name of the file being copied
            file_size: Size of file in bytes
        """
        pass

    @abstractmethod
    def update_progress(self, bytes_processed: int = 0):
        """
        Record bytes copied since the last update

        Args:
            bytes_processed: Additional bytes processed
        """
        pass

    @abstractmethod
    def complete_file(self, success: bool = True, error_message: Optional[str] = None):
        """
        Mark current file as complete

        Args:
            success: Whether the file was copied successfully
            error_message: Error message if failed
        """
        pass

    @abstractmethod
    def close(self):
        """Clean up any resources"""
        pass

    def get_stats(self) -> ProgressStats:
        """Get current progress statistics"""
        return self.stats

    def _reset_file(self, filename: str, file_size: int):
        self.stats.current_file = filename
        self.stats.total_bytes = file_size
        self.stats.processed_bytes = 0
        self.stats.start_time = time.time()


class NoOpProgressTracker(ProgressTracker):
    """
    No-operation progress tracker for quiet mode or testing
    Updates stats but doesn't display anything
    """

    def start_file(self, filename: str, file_size: int = 0):
        self._reset_file(filename, file_size)
        self.logger.debug(f"Starting file: {filename}")

    def update_progress(self, bytes_processed: int = 0):
        self.stats.processed_bytes += bytes_processed

    def complete_file(self, success: bool = True, error_message: Optional[str] = None):
        self.stats.processed_files += 1
        if not success:
            self.stats.errors += 1
            self.logger.warning(f"File failed: {error_message}")
        self.stats.current_file = None

    def close(self):
        self.logger.debug("Progress tracking complete")


class LoggingProgressTracker(ProgressTracker):
    """
    Progress tracker that uses logging instead of visual progress bars
    Good for non-interactive environments
    """

    def __init__(self, log_interval: int = 10):
        """
        Initialize logging progress tracker

        Args:
            log_interval: Seconds between progress log messages
        """
        super().__init__()
        self.log_interval = log_interval
        self.last_log_time = 0

    def start_file(self, filename: str, file_size: int = 0):
        self._reset_file(filename, file_size)
        size_str = f" ({file_size / (1024**2):.1f} MB)" if file_size > 0 else ""
        self.logger.info(f"Copying {filename}{size_str}")

    def update_progress(self, bytes_processed: int = 0):
        self.stats.processed_bytes += bytes_processed

        current_time = time.time()
        if current_time - self.last_log_time >= self.log_interval:
            self._log_progress()
            self.last_log_time = current_time

    def complete_file(self, success: bool = True, error_message: Optional[str] = None):
        self.stats.processed_files += 1

        if success:
            self.logger.info(f"  Completed: {self.stats.current_file}")
        else:
            self.stats.errors += 1
            self.logger.error(f"  Failed: {self.stats.current_file} - {error_message}")

        self.stats.current_file = None

    def close(self):
        self.logger.info(f"Copied {self.stats.processed_files} file(s) this session")
        if self.stats.errors > 0:
            self.logger.warning(f"Completed with {self.stats.errors} errors")

    def _log_progress(self):
        """Log current progress"""
        self.logger.info(
            f"Progress: {self.stats.processed_bytes:,}/{self.stats.total_bytes:,} bytes "
            f"({self.stats.progress_percentage:.1f}%), Elapsed: {self.stats.elapsed_time:.1f}s"
        )
