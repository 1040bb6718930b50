"""
Unit tests for ApplicationContext and dependency injection
"""

import json
import logging
import pytest
from unittest.mock import MagicMock, patch
from pathlib import Path

from cursor_explorer.core.application_context import ApplicationContext, BaseOperation
from cursor_explorer.core.progress import LoggingProgressTracker, NoOpProgressTracker
from cursor_explorer.operations import OpenOperation, DeleteOperation, CopyOperation


class TestApplicationContext:
    """Test suite for ApplicationContext"""

    def test_log_file_created_in_log_dir(self, app_context, temp_dir):
        log_file = temp_dir / "logs" / "cursor_explorer.log"
        for handler in logging.getLogger('cursor_explorer').handlers:
            handler.flush()

        assert log_file.exists()
        assert "Initializing application context" in log_file.read_text()

    def test_log_file_is_appended(self, temp_dir, scripted_prompt):
        log_dir = temp_dir / "append"
        for _ in range(2):
            context = ApplicationContext(log_dir=log_dir, quiet=True, prompt=scripted_prompt)
            context.cleanup()
        for handler in logging.getLogger('cursor_explorer').handlers:
            handler.flush()

        text = (log_dir / "cursor_explorer.log").read_text()
        assert text.count("Initializing application context") == 2

    def test_config_file_and_overrides(self, temp_dir, scripted_prompt):
        config_path = temp_dir / "explorer.json"
        config_path.write_text(json.dumps({"page_size": 20, "log_level": "WARNING"}))

        context = ApplicationContext(
            config_path=config_path,
            log_dir=temp_dir / "logs",
            log_level="DEBUG",
            prompt=scripted_prompt
        )

        assert context.config['page_size'] == 20
        assert context.config['log_level'] == "DEBUG"
        assert context.log_dir == temp_dir / "logs"

    def test_open_extensions_lowercased(self, temp_dir, scripted_prompt):
        context = ApplicationContext(
            log_dir=temp_dir / "logs",
            prompt=scripted_prompt,
            overrides={"open_extensions": [".TXT", ".Md"]}
        )
        assert context.open_extensions == {".txt", ".md"}

    def test_get_operation(self, app_context):
        assert isinstance(app_context.get_operation('open'), OpenOperation)
        assert isinstance(app_context.get_operation('delete'), DeleteOperation)
        assert isinstance(app_context.get_operation('copy'), CopyOperation)
        assert app_context.get_operation('copy') is app_context.get_operation('copy')

    def test_unknown_operation(self, app_context):
        with pytest.raises(ValueError):
            app_context.get_operation('rename')

    def test_register_operation(self, app_context):
        custom = MagicMock()
        app_context.register_operation('open', custom)
        assert app_context.get_operation('open') is custom

    def test_quiet_uses_noop_tracker(self, app_context):
        assert isinstance(app_context.progress_tracker, NoOpProgressTracker)

    def test_progress_disabled_in_config_uses_noop_tracker(self, temp_dir, scripted_prompt):
        context = ApplicationContext(
            log_dir=temp_dir / "logs",
            prompt=scripted_prompt,
            overrides={"show_progress": False}
        )
        assert isinstance(context.progress_tracker, NoOpProgressTracker)

    @patch('cursor_explorer.core.application_context.sys')
    def test_terminal_uses_tqdm_tracker(self, mock_sys, temp_dir, scripted_prompt):
        from cursor_explorer.ui.progress_bars import TqdmProgressTracker
        mock_sys.stderr.isatty.return_value = True

        context = ApplicationContext(log_dir=temp_dir / "logs", prompt=scripted_prompt)
        assert isinstance(context.progress_tracker, TqdmProgressTracker)

    @patch('cursor_explorer.core.application_context.sys')
    def test_redirected_stderr_uses_logging_tracker(self, mock_sys, temp_dir, scripted_prompt):
        mock_sys.stderr.isatty.return_value = False

        context = ApplicationContext(log_dir=temp_dir / "logs", prompt=scripted_prompt)
        assert isinstance(context.progress_tracker, LoggingProgressTracker)

    def test_copy_progress_logged_when_redirected(self, temp_dir, scripted_prompt, browse_root):
        scripted_prompt.texts = [str(temp_dir / "out.log")]
        with patch('cursor_explorer.core.application_context.sys') as mock_sys:
            mock_sys.stderr.isatty.return_value = False
            context = ApplicationContext(log_dir=temp_dir / "logs", prompt=scripted_prompt)

            context.get_operation('copy').execute(str(browse_root / "Zeta.log"))
        context.cleanup()

        for handler in logging.getLogger('cursor_explorer').handlers:
            handler.flush()
        log_text = (temp_dir / "logs" / "cursor_explorer.log").read_text()
        assert "Copying Zeta.log" in log_text
        assert "Completed: Zeta.log" in log_text

    def test_default_prompt_is_curses(self, temp_dir):
        from cursor_explorer.ui.prompt import CursesPrompt

        context = ApplicationContext(log_dir=temp_dir / "logs", overrides={"page_size": 7})
        assert isinstance(context.prompt, CursesPrompt)
        assert context.prompt.page_size == 7

    def test_cleanup_closes_tracker(self, app_context):
        tracker = MagicMock()
        app_context.set_progress_tracker(tracker)

        app_context.cleanup()

        tracker.close.assert_called_once()

    def test_context_manager(self, temp_dir, scripted_prompt):
        with ApplicationContext(log_dir=temp_dir / "logs", prompt=scripted_prompt) as context:
            tracker = MagicMock()
            context.set_progress_tracker(tracker)
        tracker.close.assert_called_once()


class TestBaseOperation:
    """Test suite for BaseOperation"""

    def test_execute_must_be_overridden(self, app_context):
        with pytest.raises(NotImplementedError):
            BaseOperation(app_context).execute("/tmp/x")

    def test_shares_context_resources(self, app_context, scripted_prompt):
        op = BaseOperation(app_context)
        assert op.prompt is scripted_prompt
        assert op.config is app_context.config
        assert op.logger.name == 'cursor_explorer.BaseOperation'
