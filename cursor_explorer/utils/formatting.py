"""
Display helpers for sizes and paths.

Paths are split on '/' after converting the native separator, so a POSIX
absolute path has an empty first segment standing for the root.
"""

import math
import os
from typing import List

SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']

# Paths with more segments than this are shortened by breadcrumb()
BREADCRUMB_MAX_SEGMENTS = 4


def format_size(size_bytes: int) -> str:
    """
    Format a byte count for display.

    Args:
        size_bytes: Non-negative number of bytes

    Returns:
        "<N> B" below 1024, otherwise two decimals and a binary unit,
        e.g. "1.50 MB"
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    index = int(math.log2(size_bytes) / 10)
    index = min(index, len(SIZE_UNITS) - 1)
    return f"{size_bytes / math.pow(1024, index):.2f} {SIZE_UNITS[index]}"


def display_safe(text) -> str:
    """
    Make text printable on a UTF-8 console.

    File names that are not valid UTF-8 reach Python as lone surrogates
    (surrogateescape); writing those to a terminal raises, so the
    undecodable bytes are shown as U+FFFD instead.
    """
    text = str(text)
    try:
        raw = text.encode('utf-8', 'surrogateescape')
    except UnicodeEncodeError:
        raw = text.encode('utf-8', 'replace')
    return raw.decode('utf-8', 'replace')


def _to_slash(path: str, sep: str) -> str:
    if sep != '/':
        return path.replace(sep, '/')
    return path


def _from_slash(path: str, sep: str) -> str:
    if sep != '/':
        return path.replace('/', sep)
    return path


def split_segments(path: str, sep: str = os.sep) -> List[str]:
    """Split a path into its segments, ignoring trailing separators"""
    parts = _to_slash(str(path), sep).split('/')
    while len(parts) > 1 and parts[-1] == '':
        parts.pop()
    return parts


def breadcrumb(path: str, sep: str = os.sep) -> str:
    """
    Shorten a long path to its first segment and last three segments.

    Args:
        path: Path to shorten
        sep: Separator used in the output

    Returns:
        The path unchanged when it has at most four segments, otherwise
        "first/.../a/b/c" with the native separator
    """
    parts = split_segments(path, sep)
    if len(parts) <= BREADCRUMB_MAX_SEGMENTS:
        return str(path)
    short = f"{parts[0]}/.../{parts[-3]}/{parts[-2]}/{parts[-1]}"
    return _from_slash(short, sep)


def numbered_segments(path: str, sep: str = os.sep) -> List[str]:
    """
    Number every segment of a path for the change-directory menu.

    Returns:
        Lines such as ["0: C:", "1: Users", "2: me"]; an empty POSIX root
        segment is shown as the separator
    """
    numbered = []
    for index, part in enumerate(split_segments(path, sep)):
        numbered.append(f"{index}: {part or sep}")
    return numbered


def truncate_to_segment(path: str, index: int, sep: str = os.sep) -> str:
    """
    Cut a path after the segment at index (inclusive).

    Raises:
        IndexError: If index is not a valid segment position
    """
    parts = split_segments(path, sep)
    if index < 0 or index >= len(parts):
        raise IndexError(f"Segment index {index} out of range for {path}")

    truncated = '/'.join(parts[:index + 1])
    if truncated == '':
        truncated = '/'
    elif truncated.endswith(':'):
        # A bare drive letter means "current directory on that drive"
        truncated += '/'
    return _from_slash(truncated, sep)
