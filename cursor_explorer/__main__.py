#!/usr/bin/env python3
"""
Package entry point for cursor_explorer.
Allows the package to be run as: python -m cursor_explorer
"""

import argparse
import json
import logging
import os
import sys

from jsonschema import ValidationError as ConfigValidationError

from . import __version__
from .core.application_context import ApplicationContext
from .core.exceptions import FatalBrowseError
from .core.navigation import NavigationLoop
from .ui.terminal import TerminalSession
from .utils.formatting import display_safe


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='cursor-explorer',
        description='Cursor Explorer - interactive terminal file browser',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--start-dir', '-d',
        type=str,
        help='Directory to start browsing in (default: current directory)'
    )
    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Path to an optional JSON configuration file'
    )
    parser.add_argument(
        '--log-dir',
        type=str,
        help='Directory for the log file (default: current directory)'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (default: INFO)'
    )
    parser.add_argument(
        '--log-console',
        action='store_true',
        help='Also write log messages to stderr'
    )
    parser.add_argument(
        '--json-logs',
        action='store_true',
        default=None,
        help='Write the log file as JSON lines'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Hide copy progress bars'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(args=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(args)

    print("Initializing application...")
    try:
        context = ApplicationContext(
            config_path=args.config,
            log_dir=args.log_dir,
            log_level=args.log_level,
            log_console=args.log_console,
            json_logs=args.json_logs,
            quiet=args.quiet
        )
    except (FileNotFoundError, json.JSONDecodeError, ConfigValidationError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error opening log file: {e}", file=sys.stderr)
        return 1
    print("Application initialized")

    logger = logging.getLogger('cursor_explorer')
    start_dir = os.path.expanduser(args.start_dir or context.config['start_dir'] or os.getcwd())

    with context:
        try:
            with TerminalSession(title=context.config['title']):
                NavigationLoop(context).run(start_dir)
        except FatalBrowseError as e:
            logger.error(f"Failed to execute command: {e}")
            print(display_safe(e))
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
