"""
Open a file with the platform's default application
"""

import os

from ..core.application_context import BaseOperation
from ..core.exceptions import OpenError, UnsupportedTypeError
from ..utils.opener import open_externally


class OpenOperation(BaseOperation):
    """
    Hands a file to the desktop's default application.

    Only extensions in the configured allow-list are opened; the launched
    process is not waited on.
    """

    def is_supported(self, path: str) -> bool:
        return os.path.splitext(path)[1].lower() in self.context.open_extensions

    def execute(self, path: str) -> str:
        """
        Open a file.

        Raises:
            UnsupportedTypeError: If the extension is not allowed
            OpenError: If the opener could not be started
        """
        if not self.is_supported(path):
            self.logger.info(f"Refused to open unsupported file type: {path}",
                             extra={'file': path})
            raise UnsupportedTypeError(
                f"Cannot open file: {path}\nFile type not supported for opening."
            )

        try:
            open_externally(path)
        except OSError as e:
            self.logger.error(f"Failed to open file {path}: {e}",
                              extra={'file': path, 'error': str(e)})
            raise OpenError(f"Error opening file: {e}") from e

        self.logger.info(f"Opened file {path}", extra={'file': path})
        return f"Opening file: {path}"
