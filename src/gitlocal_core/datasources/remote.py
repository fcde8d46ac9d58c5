"""Single remote looked up by name."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..diagnostics import Diagnostics
from ..errors import RemoteNotFoundError
from ..schema import Schema, remote_attributes
from ..vcs.base import RepositoryHandle
from .base import DataSource


class RemoteDataSource(DataSource):
    type_suffix = "remote"

    def schema(self) -> Schema:
        return Schema(
            attributes=remote_attributes(single=True),
            description="A remote configured in the repository",
        )

    def _read(
        self,
        repo: RepositoryHandle,
        config: Dict[str, Any],
        diagnostics: Diagnostics,
    ) -> Optional[Dict[str, Any]]:
        remote_name = config.get("name") or ""

        try:
            remote = repo.remote(remote_name)
        except RemoteNotFoundError as e:
            diagnostics.add_error(f"Unable to Read Git Remote `{remote_name}`", str(e))
            return None

        return {"name": remote_name, "urls": list(remote.urls)}
