"""
Copy operation: stream a file to a user-supplied destination.
Uses ApplicationContext for the prompt and the progress tracker.
"""

import os
import stat

from ..core.application_context import BaseOperation
from ..core.exceptions import CancelledError, CopyError, ValidationError


def validate_destination(value: str) -> None:
    """
    Reject an empty destination.

    Raises:
        ValidationError: If value is empty or only whitespace
    """
    if not value or not value.strip():
        raise ValidationError("Destination path cannot be empty")


class CopyOperation(BaseOperation):
    """
    Copies a file byte-for-byte.

    A destination that is an existing directory receives the file under
    its own name; a destination that does not exist gets its parent
    directories created first. A failed copy may leave a partial file.
    """

    def __init__(self, context):
        super().__init__(context)
        self.chunk_size = self.config['copy_chunk_size']

    def execute(self, path: str) -> str:
        """
        Ask for a destination and copy the file there.

        Args:
            path: Source file

        Returns:
            Message naming the copied file and its destination

        Raises:
            CancelledError: If the destination prompt was aborted
            ValidationError: If the destination is empty
            CopyError: If the destination cannot be prepared or written
        """
        name = os.path.basename(path)

        destination = self.prompt.prompt_text("Enter destination path", validate=validate_destination)
        if destination is None:
            self.logger.info(f"Cancelled file copy: {name}", extra={'file': path})
            raise CancelledError(f"Cancelled copying of {name}")
        try:
            validate_destination(destination)
        except ValidationError as e:
            self.logger.error(f"Invalid destination for {name}: {e}", extra={'file': path})
            raise

        target = self.resolve_target(path, os.path.expanduser(destination.strip()))
        self.copy_file(path, target)

        self.logger.info(f"File copied: {name} -> {target}",
                         extra={'file': path, 'destination': target})
        return f"File copied successfully: {name} -> {target}"

    def resolve_target(self, source: str, destination: str) -> str:
        """
        Work out the final file path and create missing parent directories.

        Args:
            source: Source file path
            destination: Path entered by the user

        Returns:
            Path the bytes will be written to

        Raises:
            CopyError: If the destination cannot be checked or prepared
        """
        try:
            dest_stat = os.stat(destination)
        except FileNotFoundError:
            dest_dir = os.path.dirname(destination)
            if dest_dir:
                try:
                    os.makedirs(dest_dir, exist_ok=True)
                except OSError as e:
                    self.logger.error(f"Failed to create destination directory {dest_dir}: {e}")
                    raise CopyError(f"Unable to create destination directory {dest_dir}: {e}") from e
                self.logger.debug(f"Created destination directory {dest_dir}")
            return destination
        except OSError as e:
            self.logger.error(f"Error checking destination path {destination}: {e}")
            raise CopyError(f"Error checking destination path: {e}") from e

        if stat.S_ISDIR(dest_stat.st_mode):
            target = os.path.join(destination, os.path.basename(source))
        else:
            target = destination

        if os.path.exists(target) and os.path.samefile(source, target):
            raise CopyError(f"Source and destination are the same file: {target}")
        return target

    def copy_file(self, source: str, target: str) -> int:
        """
        Stream source into target in chunks.

        Returns:
            Number of bytes copied

        Raises:
            CopyError: On any read or write failure
        """
        name = os.path.basename(source)
        tracker = self.progress_tracker
        copied = 0

        try:
            size = os.path.getsize(source)
            tracker.start_file(name, size)
            with open(source, 'rb') as src, open(target, 'wb') as dst:
                while True:
                    chunk = src.read(self.chunk_size)
                    if not chunk:
                        break
                    dst.write(chunk)
                    copied += len(chunk)
                    tracker.update_progress(len(chunk))
        except OSError as e:
            tracker.complete_file(success=False, error_message=str(e))
            self.logger.error(f"Failed to copy {name} to {target}: {e}",
                              extra={'file': source, 'destination': target, 'error': str(e)})
            raise CopyError(f"Unable to copy {name} to {os.path.basename(target)}: {e}") from e

        tracker.complete_file(success=True)
        return copied
