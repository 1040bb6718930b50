"""
Visual progress tracking using tqdm
"""

import sys
from typing import Optional

from tqdm import tqdm

from cursor_explorer.core.progress import ProgressTracker


class TqdmProgressTracker(ProgressTracker):
    """
    Progress tracker drawing a byte bar per copied file
    """

    def __init__(self, position: int = 0, leave: bool = False):
        """
        Initialize tqdm progress tracker

        Args:
            position: Screen row offset for the bar
            leave: Whether to leave the bar on screen after completion
        """
        super().__init__()
        self.position = position
        self.leave = leave
        self.bar = None

    def start_file(self, filename: str, file_size: int = 0):
        """Open a bar for a new file"""
        self._reset_file(filename, file_size)

        if self.bar is not None:
            self.bar.close()

        self.bar = tqdm(
            total=file_size,
            desc=f"Copying {filename}",
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            position=self.position,
            leave=self.leave,
            file=sys.stderr
        )

    def update_progress(self, bytes_processed: int = 0):
        self.stats.processed_bytes += bytes_processed
        if self.bar is not None and bytes_processed:
            self.bar.update(bytes_processed)

    def complete_file(self, success: bool = True, error_message: Optional[str] = None):
        self.stats.processed_files += 1
        if not success:
            self.stats.errors += 1
            self.logger.warning(f"File failed: {error_message}")
            if self.bar is not None:
                self.bar.set_postfix_str("failed")

        if self.bar is not None:
            self.bar.close()
            self.bar = None
        self.stats.current_file = None

    def close(self):
        if self.bar is not None:
            self.bar.close()
            self.bar = None
