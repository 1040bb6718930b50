"""
Exception hierarchy for Cursor Explorer.

Per-action errors are reported to the user and the browser keeps running;
only FatalBrowseError ends the program.
"""


class ExplorerError(Exception):
    """Base class for all browser errors"""


class ReadError(ExplorerError):
    """A directory could not be opened for listing"""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


class StatError(ExplorerError):
    """Metadata for a single directory entry could not be read"""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class FatalBrowseError(ExplorerError):
    """No directory up to the filesystem root could be listed"""


class SelectionError(ExplorerError):
    """A menu line could not be mapped back to an action"""


class UnsupportedTypeError(ExplorerError):
    """The file extension is not in the open allow-list"""


class OpenError(ExplorerError):
    """The default application could not be launched"""


class CancelledError(ExplorerError):
    """The user declined a confirmation or cancelled a prompt"""


class DeleteError(ExplorerError):
    """The operating system refused to remove a file"""


class CopyError(ExplorerError):
    """Reading the source or writing the destination failed"""


class ValidationError(ExplorerError):
    """User input failed validation"""


class PromptError(Exception):
    """The interactive prompt could not be shown or read"""


class PromptInterrupted(PromptError):
    """The user aborted the prompt (Ctrl-C or end of input)"""
