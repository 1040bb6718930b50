"""
Launch files with the platform's default application
"""

import logging
import subprocess
import sys
from typing import List

logger = logging.getLogger(__name__)


def opener_command(path: str, platform: str = None) -> List[str]:
    """Command line that hands path to the desktop's default handler"""
    platform = platform or sys.platform
    if platform.startswith('win'):
        return ['rundll32', 'url.dll,FileProtocolHandler', path]
    if platform == 'darwin':
        return ['open', path]
    return ['xdg-open', path]


def open_externally(path: str) -> subprocess.Popen:
    """
    Start the default application for a file without waiting for it.

    Raises:
        OSError: If the opener executable cannot be started
    """
    command = opener_command(path)
    logger.debug(f"Launching {command[0]} for {path}")
    return subprocess.Popen(
        command,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=not sys.platform.startswith('win')
    )
