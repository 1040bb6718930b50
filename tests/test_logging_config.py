"""
Tests for logging configuration
"""

import json
import logging

from cursor_explorer.utils.logging_config import (
    JsonFormatter,
    get_logging_config,
    setup_logging
)


def make_record(**extra):
    record = logging.LogRecord(
        name='cursor_explorer.test', level=logging.INFO, pathname=__file__,
        lineno=10, msg="Entered directory %s", args=("/tmp",), exc_info=None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    """Test suite for JsonFormatter"""

    def test_basic_fields(self):
        data = json.loads(JsonFormatter().format(make_record()))

        assert data['message'] == "Entered directory /tmp"
        assert data['level'] == "INFO"
        assert data['name'] == "cursor_explorer.test"

    def test_extra_fields_included(self):
        data = json.loads(JsonFormatter().format(make_record(path="/tmp", action="Copy")))

        assert data['path'] == "/tmp"
        assert data['action'] == "Copy"


class TestLoggingConfig:
    """Test suite for get_logging_config and setup_logging"""

    def test_file_handler_appends(self, temp_dir):
        config = get_logging_config(temp_dir)

        handler = config['handlers']['event_file']
        assert handler['mode'] == 'a'
        assert handler['filename'] == str(temp_dir / 'cursor_explorer.log')

    def test_console_off_by_default(self, temp_dir):
        config = get_logging_config(temp_dir)
        assert 'console' not in config['loggers']['cursor_explorer']['handlers']

    def test_console_enabled(self, temp_dir):
        config = get_logging_config(temp_dir, console=True)
        assert config['loggers']['cursor_explorer']['handlers'][0] == 'console'

    def test_json_format(self, temp_dir):
        config = get_logging_config(temp_dir, json_format=True)
        assert config['handlers']['event_file']['formatter'] == 'json'

    def test_creates_log_dir(self, temp_dir):
        get_logging_config(temp_dir / "a" / "b")
        assert (temp_dir / "a" / "b").is_dir()

    def test_setup_writes_json_lines(self, temp_dir):
        setup_logging(log_dir=temp_dir, log_file="events.log", json_format=True)
        logging.getLogger("cursor_explorer.test").info("hello", extra={'path': '/srv'})
        for handler in logging.getLogger("cursor_explorer").handlers:
            handler.flush()

        lines = (temp_dir / "events.log").read_text().splitlines()
        last = json.loads(lines[-1])
        assert last['message'] == "hello"
        assert last['path'] == "/srv"

    def test_file_handler_escapes_undecodable_text(self, temp_dir):
        config = get_logging_config(temp_dir)
        assert config['handlers']['event_file']['errors'] == 'backslashreplace'

        setup_logging(log_dir=temp_dir, log_file="names.log")
        logging.getLogger("cursor_explorer.test").info("Entered directory /srv/bad\udcff")
        for handler in logging.getLogger("cursor_explorer").handlers:
            handler.flush()

        assert "Entered directory /srv/bad\\udcff" in (temp_dir / "names.log").read_text(encoding="utf-8")
