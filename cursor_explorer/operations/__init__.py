"""
File operations offered from the file action menu
"""

from .open_operation import OpenOperation
from .delete_operation import DeleteOperation
from .copy_operation import CopyOperation

__all__ = [
    'OpenOperation',
    'DeleteOperation',
    'CopyOperation'
]
