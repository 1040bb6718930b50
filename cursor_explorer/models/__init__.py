"""
Data models for Cursor Explorer
"""

from .actions import (
    Action,
    GoToParent,
    OpenCdMenu,
    Quit,
    EnterDirectory,
    ActOnFile
)
from .dir_entry import DirEntry, Listing

__all__ = [
    'Action',
    'GoToParent',
    'OpenCdMenu',
    'Quit',
    'EnterDirectory',
    'ActOnFile',
    'DirEntry',
    'Listing'
]
