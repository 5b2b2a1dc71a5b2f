"""Errors raised by collaborators around the checking core."""


class DotenvLinterError(Exception):
    """Base class for dotenv-linter errors."""


class FileReadError(DotenvLinterError):
    """A file selected for scanning could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason
