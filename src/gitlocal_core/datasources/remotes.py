"""Every remote configured in the repository."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..diagnostics import Diagnostics
from ..errors import RemoteEnumerationError
from ..schema import Schema, list_nested_attribute, remote_attributes
from ..vcs.base import RepositoryHandle
from .base import DataSource


class RemotesDataSource(DataSource):
    type_suffix = "remotes"

    def schema(self) -> Schema:
        return Schema(
            attributes={
                "remotes": list_nested_attribute(
                    "List of remotes in the repository",
                    remote_attributes(single=False),
                ),
            },
            description="All remotes configured in the repository",
        )

    def _read(
        self,
        repo: RepositoryHandle,
        config: Dict[str, Any],
        diagnostics: Diagnostics,
    ) -> Optional[Dict[str, Any]]:
        try:
            remotes = repo.remotes()
        except RemoteEnumerationError as e:
            diagnostics.add_error("Unable to Read Git Remotes", str(e))
            return None

        # Library order; not sorted.
        return {
            "remotes": [{"name": r.name, "urls": list(r.urls)} for r in remotes],
        }
