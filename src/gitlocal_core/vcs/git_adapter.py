"""Git VCS adapter backed by pygit2."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import pygit2
from pygit2.enums import RepositoryOpenFlag

from ..errors import (
    CommitNotFoundError,
    HeadNotFoundError,
    RemoteEnumerationError,
    RemoteNotFoundError,
    RepositoryOpenError,
)
from ..timefmt import format_rfc3339
from .base import CommitInfo, RemoteInfo

logger = logging.getLogger(__name__)

# Errors libgit2 lookups surface through pygit2
_LOOKUP_ERRORS = (pygit2.GitError, KeyError, ValueError, OSError)


def _error_text(exc: BaseException) -> str:
    # KeyError wraps its message in quotes when str()'d
    if exc.args and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc) or exc.__class__.__name__


def open_repository(path: Union[str, Path]) -> "GitRepository":
    """Open the repository rooted exactly at ``path``.

    Parent directories are not searched.
    """
    try:
        repo = pygit2.Repository(str(path), RepositoryOpenFlag.NO_SEARCH)
    except _LOOKUP_ERRORS as e:
        raise RepositoryOpenError(str(path), _error_text(e)) from e
    logger.debug(f"Opened git repository at {path} (git dir {repo.path})")
    return GitRepository(repo, Path(path))


class GitRepository:
    """Read-only repository handle shared by every data source."""

    def __init__(self, repo: pygit2.Repository, path: Path):
        self._repo = repo
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def head_hash(self) -> str:
        try:
            if self._repo.head_is_unborn:
                raise HeadNotFoundError("reference not found: HEAD points to an unborn branch")
            return str(self._repo.head.target)
        except _LOOKUP_ERRORS as e:
            raise HeadNotFoundError(_error_text(e)) from e

    def commit(self, hash_value: str) -> CommitInfo:
        try:
            obj = self._repo.get(hash_value)
        except _LOOKUP_ERRORS as e:
            raise CommitNotFoundError(hash_value, _error_text(e)) from e
        if obj is None:
            raise CommitNotFoundError(hash_value, "object not found")
        if not isinstance(obj, pygit2.Commit):
            raise CommitNotFoundError(hash_value, f"object {obj.id} is not a commit")

        author = obj.author
        try:
            date = format_rfc3339(author.time, author.offset)
        except (ValueError, OverflowError, OSError) as e:
            raise CommitNotFoundError(
                hash_value, f"author time {author.time} cannot be represented: {e}"
            ) from e
        return CommitInfo(
            hash=str(obj.id),
            date=date,
            message=_decode_message(obj.raw_message, obj.message_encoding),
        )

    def remote(self, name: str) -> RemoteInfo:
        try:
            config = self._local_config()
            if name not in _remote_names(config):
                raise RemoteNotFoundError(name, f"remote '{name}' does not exist")
            urls = _remote_urls(config, name)
        except _LOOKUP_ERRORS as e:
            raise RemoteNotFoundError(name, _error_text(e)) from e
        return RemoteInfo(name=name, urls=urls)

    def remotes(self) -> List[RemoteInfo]:
        try:
            config = self._local_config()
            result = [RemoteInfo(name=n, urls=_remote_urls(config, n)) for n in _remote_names(config)]
        except _LOOKUP_ERRORS as e:
            raise RemoteEnumerationError(_error_text(e)) from e
        logger.debug(f"Enumerated {len(result)} remote(s) in {self._path}")
        return result

    def _local_config(self) -> pygit2.Config:
        # Remotes come from the repository's own config file only.
        return pygit2.Config(os.path.join(self._repo.path, "config"))


def _decode_message(raw: bytes, encoding: Optional[str]) -> str:
    try:
        return raw.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        logger.debug(f"Unknown commit encoding {encoding!r}, decoding as utf-8")
        return raw.decode("utf-8", errors="replace")


def _remote_names(config: pygit2.Config) -> List[str]:
    """Remote names in config order, including remotes without a url."""
    names: List[str] = []
    for entry in config:
        section, _, rest = entry.name.partition(".")
        subsection, _, _ = rest.rpartition(".")
        if section == "remote" and subsection and subsection not in names:
            names.append(subsection)
    return names


def _remote_urls(config: pygit2.Config, name: str) -> List[str]:
    # Every remote.<name>.url entry, in config order; libgit2's Remote only exposes the first.
    return list(config.get_multivar(f"remote.{name}.url"))


def backend_versions() -> dict:
    """Versions of the git backend, for diagnostics output."""
    return {"pygit2": pygit2.__version__, "libgit2": pygit2.LIBGIT2_VERSION}
