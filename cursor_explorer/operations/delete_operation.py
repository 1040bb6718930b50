"""
Delete operation for removing a single file after confirmation.
"""

import os

from ..core.application_context import BaseOperation
from ..core.exceptions import CancelledError, DeleteError


class DeleteOperation(BaseOperation):
    """
    Removes a file once the user has confirmed.

    Any answer other than yes leaves the file untouched.
    """

    def execute(self, path: str) -> str:
        """
        Delete a file after asking for confirmation.

        Args:
            path: File to delete

        Returns:
            Message naming the deleted file

        Raises:
            CancelledError: If the user did not confirm
            DeleteError: If the operating system refused the removal
        """
        name = os.path.basename(path)

        if not self.prompt.confirm(f"Are you sure you want to delete {name}"):
            self.logger.info(f"Cancelled file deletion: {name}", extra={'file': path})
            raise CancelledError(f"Cancelled deletion of {name}")

        try:
            os.remove(path)
        except OSError as e:
            self.logger.error(f"Failed to delete file {name}: {e}",
                              extra={'file': path, 'error': str(e)})
            raise DeleteError(f"Unable to delete {name} ({e.strerror or e})") from e

        self.logger.info(f"File deleted: {name}", extra={'file': path})
        return f"File deleted: {name}"
