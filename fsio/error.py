# error.py
# Error types raised by the filesystem helpers.


class FsIOError(Exception):
    """Base error. ``cause`` keeps the underlying exception, if any."""

    def __init__(self, message: str, cause=None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return self.message
        return f'{self.message}\n{self.cause}'


class AlreadyExistsError(FsIOError):
    """The path already exists with the wrong kind."""


class NotFileError(FsIOError):
    """The path is not of the kind the operation expects."""


class IOFailureError(FsIOError):
    """The operating system reported an error; ``cause`` is the OSError."""


class SystemTimeError(FsIOError):
    """A file timestamp could not be expressed relative to the Unix epoch."""
