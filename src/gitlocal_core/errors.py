"""Exception hierarchy raised by the repository adapter and settings loader."""

from __future__ import annotations


class GitLocalError(Exception):
    """Base class for gitlocal errors."""


class ConfigError(GitLocalError):
    """Settings file could not be read or has the wrong shape."""


class RepositoryOpenError(GitLocalError):
    """No repository could be opened at the given path."""

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class HeadNotFoundError(GitLocalError):
    """HEAD does not resolve to a commit (unborn branch, broken reference)."""


class CommitNotFoundError(GitLocalError):
    """No commit exists for the requested hash."""

    def __init__(self, hash_value: str, reason: str):
        super().__init__(reason)
        self.hash = hash_value


class RemoteNotFoundError(GitLocalError):
    """No remote is configured under the requested name."""

    def __init__(self, name: str, reason: str):
        super().__init__(reason)
        self.name = name


class RemoteEnumerationError(GitLocalError):
    """The remote configuration could not be listed."""
