"""
Application Context for Dependency Injection
Manages shared resources across the application lifecycle
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any, Union

from cursor_explorer.utils.config_manager import ConfigManager
from cursor_explorer.utils.logging_config import setup_logging


class ApplicationContext:
    """
    Central context for managing application-wide resources.

    The context is created once at startup and passed to the navigation
    loop and to every file operation. It owns the configuration, the
    prompt used for user interaction and the progress tracker.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        log_dir: Optional[Union[str, Path]] = None,
        log_level: Optional[str] = None,
        log_console: bool = False,
        json_logs: Optional[bool] = None,
        quiet: bool = False,
        prompt=None,
        overrides: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize application context with shared resources

        Args:
            config_path: Path to an optional JSON configuration file
            log_dir: Directory for the log file (overrides config)
            log_level: Logging level (overrides config)
            log_console: Also log to stderr
            json_logs: Write the log file as JSON lines (overrides config)
            quiet: Disable progress bars
            prompt: Prompt implementation; a CursesPrompt is created lazily
            overrides: Extra configuration values taking precedence over the file
        """
        self.config_manager = ConfigManager()
        self._config_path = Path(config_path) if config_path else None
        self._config = self.config_manager.load_config(config_path)

        cli_overrides = dict(overrides or {})
        if log_dir is not None:
            cli_overrides['log_dir'] = str(log_dir)
        if log_level is not None:
            cli_overrides['log_level'] = log_level
        if json_logs is not None:
            cli_overrides['json_logs'] = json_logs
        if cli_overrides:
            self._config.update(cli_overrides)
            self.config_manager.validate_config(self._config)

        # Logging needs the merged configuration, so it comes second
        self.log_dir = Path(self._config['log_dir']).expanduser()
        self.quiet = quiet
        setup_logging(
            log_dir=self.log_dir,
            log_file=self._config['log_file'],
            level=self._config['log_level'],
            json_format=self._config['json_logs'],
            console=log_console
        )
        self.logger = logging.getLogger('cursor_explorer')
        self.logger.info("Initializing application context")
        if self._config_path:
            self.logger.info(f"Loaded configuration from {self._config_path}")

        self._prompt = prompt
        self._operations = {}
        self._progress_tracker = None

    @property
    def config(self) -> Dict[str, Any]:
        """Get current configuration"""
        return self._config

    @property
    def open_extensions(self):
        """Lower-cased extensions the Open action accepts"""
        return {ext.lower() for ext in self._config['open_extensions']}

    @property
    def prompt(self):
        """
        Get or create the interactive prompt (lazy initialization)

        Returns:
            Prompt instance
        """
        if self._prompt is None:
            from cursor_explorer.ui.prompt import CursesPrompt
            self._prompt = CursesPrompt(page_size=self._config['page_size'])
            self.logger.debug("Using curses selection prompt")
        return self._prompt

    @property
    def progress_tracker(self):
        """
        Get or create progress tracker (lazy initialization)

        NoOp when quiet or show_progress is off, log messages when stderr
        is not a terminal, tqdm bars otherwise.

        Returns:
            ProgressTracker instance
        """
        if self._progress_tracker is None:
            if self.quiet or not self._config['show_progress']:
                from cursor_explorer.core.progress import NoOpProgressTracker
                self._progress_tracker = NoOpProgressTracker()
            elif not sys.stderr.isatty():
                # Redirected stderr: report copies in the log instead of bars
                from cursor_explorer.core.progress import LoggingProgressTracker
                self._progress_tracker = LoggingProgressTracker()
            else:
                from cursor_explorer.ui.progress_bars import TqdmProgressTracker
                self._progress_tracker = TqdmProgressTracker()

            self.logger.info(f"Using progress tracker: {self._progress_tracker.__class__.__name__}")

        return self._progress_tracker

    def set_progress_tracker(self, tracker):
        """
        Set a custom progress tracker

        Args:
            tracker: ProgressTracker instance
        """
        self._progress_tracker = tracker
        self.logger.info(f"Progress tracker set to: {tracker.__class__.__name__}")

    def get_operation(self, operation_name: str):
        """
        Get a file operation handler

        Args:
            operation_name: 'open', 'delete' or 'copy'

        Returns:
            Operation handler instance
        """
        if operation_name not in self._operations:
            self._load_operation(operation_name)
        return self._operations[operation_name]

    def _load_operation(self, operation_name: str):
        """
        Create an operation handler on first use

        Args:
            operation_name: Name of the operation to load
        """
        # Import here to avoid circular dependencies
        from cursor_explorer.operations import (
            OpenOperation,
            DeleteOperation,
            CopyOperation
        )

        operation_classes = {
            'open': OpenOperation,
            'delete': DeleteOperation,
            'copy': CopyOperation
        }

        if operation_name not in operation_classes:
            raise ValueError(f"Unknown operation: {operation_name}")

        self.logger.debug(f"Loading operation: {operation_name}")
        self._operations[operation_name] = operation_classes[operation_name](self)

    def register_operation(self, name: str, operation_instance):
        """
        Register an operation handler

        Args:
            name: Operation name
            operation_instance: Operation handler instance
        """
        self._operations[name] = operation_instance
        self.logger.debug(f"Registered operation: {name}")

    def cleanup(self):
        """Clean up resources on shutdown"""
        self.logger.info("Cleaning up application context")

        self.config_manager.clear_cache()
        self._operations.clear()

        if self._progress_tracker is not None:
            self._progress_tracker.close()
            self.logger.info("Closed progress tracker")

        self.logger.info("Application context cleanup complete")

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources"""
        self.cleanup()


class BaseOperation:
    """
    Base class for all file operations
    Operations receive the application context for accessing shared resources
    """

    def __init__(self, context: ApplicationContext):
        """
        Initialize operation with application context

        Args:
            context: Application context with shared resources
        """
        self.context = context
        self.logger = logging.getLogger(f'cursor_explorer.{self.__class__.__name__}')
        self.config = context.config

    @property
    def prompt(self):
        return self.context.prompt

    @property
    def progress_tracker(self):
        return self.context.progress_tracker

    def execute(self, path: str) -> str:
        """
        Execute the operation on a file

        Args:
            path: Full path of the selected file

        Returns:
            Message to show the user on success
        """
        raise NotImplementedError("Subclasses must implement execute()")
