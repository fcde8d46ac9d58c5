"""VCS abstraction base types."""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol


@dataclass(frozen=True)
class CommitInfo:
    """Snapshot of one commit."""
    hash: str  # full 40-char hex
    date: str  # RFC 3339, author time in the author's offset
    message: str  # verbatim, trailing newline kept


@dataclass(frozen=True)
class RemoteInfo:
    """Snapshot of one configured remote."""
    name: str
    urls: List[str] = field(default_factory=list)  # config order, duplicates kept


class RepositoryHandle(Protocol):
    """Read-only view of an opened repository."""

    @property
    def path(self) -> Path:
        """Path the repository was opened at."""
        ...

    def head_hash(self) -> str:
        """Hash of the commit HEAD resolves to."""
        ...

    def commit(self, hash_value: str) -> CommitInfo:
        """Look up a commit by hash."""
        ...

    def remote(self, name: str) -> RemoteInfo:
        """Look up a remote by name."""
        ...

    def remotes(self) -> List[RemoteInfo]:
        """All remotes, in the order the backend lists them."""
        ...
