from .base import CommitInfo, RemoteInfo, RepositoryHandle
from .git_adapter import GitRepository, open_repository, backend_versions

__all__ = [
    "CommitInfo",
    "RemoteInfo",
    "RepositoryHandle",
    "GitRepository",
    "open_repository",
    "backend_versions",
]
