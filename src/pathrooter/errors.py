"""Exception hierarchy shared by the resolver, finder and loader."""

from __future__ import annotations


class RooterError(Exception):
    """Base for all pathrooter errors."""


class InvalidArgument(RooterError, TypeError):
    """Raised when a fragment or pattern is not a string or path-like object."""


class FileNotFound(RooterError, FileNotFoundError):
    """Raised when a resolved load target does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No such file to load: {path}")
        self.path = path


class ModuleLoadError(RooterError):
    """
    Raised when a located file cannot be evaluated (syntax error, exception at
    import time, invalid JSON). The original exception is the __cause__.
    """

    def __init__(self, path: str, error: BaseException) -> None:
        super().__init__(f"Failed to load {path}: {type(error).__name__}: {error}")
        self.path = path
        self.error = error
