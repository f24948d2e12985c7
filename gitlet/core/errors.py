"""Exceptions raised by the Gitlet core.

The CLI catches GitletError at the command boundary and turns it into a
user-facing message; nothing below the CLI prints.
"""


class GitletError(Exception):
    """Base class for every recoverable Gitlet failure."""

    message = "Gitlet operation failed."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)


class AlreadyInitializedError(GitletError):
    """Raised by init when a repository already exists."""

    message = "A gitlet version-control system already exists in the current directory."


class NotInitializedError(GitletError):
    """Raised by every operation except init outside a repository."""

    message = "Not in an initialized gitlet directory."


class FileNotFoundInTreeError(GitletError):
    """Raised by add when the target is not a regular file in the working tree."""

    message = "File does not exist."


class NothingToRemoveError(GitletError):
    """Raised by rm when the path is neither staged nor tracked."""

    message = "No reason to remove the file."


class CorruptStoreError(GitletError):
    """Raised when persisted repository state cannot be decoded."""

    message = "Repository data is corrupt."


class UnsupportedCommandError(GitletError):
    """Raised for commands that are declared but not available."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"'{command}' is not supported yet.")


class InvalidConfigError(GitletError):
    """Raised when a configuration value has the wrong form."""

    message = "Invalid configuration value."
