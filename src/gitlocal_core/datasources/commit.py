"""Single commit looked up by hash."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..diagnostics import Diagnostics
from ..errors import CommitNotFoundError
from ..schema import Schema, string_attribute
from ..vcs.base import RepositoryHandle
from .base import DataSource


class CommitDataSource(DataSource):
    type_suffix = "commit"

    def schema(self) -> Schema:
        return Schema(
            attributes={
                "hash": string_attribute("Hash of the commit", required=True),
                "date": string_attribute("Date of the commit in RFC 3339", computed=True),
                "message": string_attribute("Message of the commit", computed=True),
            },
            description="A commit of the repository",
        )

    def _read(
        self,
        repo: RepositoryHandle,
        config: Dict[str, Any],
        diagnostics: Diagnostics,
    ) -> Optional[Dict[str, Any]]:
        hash_arg = config.get("hash") or ""

        try:
            commit = repo.commit(hash_arg)
        except CommitNotFoundError as e:
            diagnostics.add_error(f"Unable to Read Commit `{hash_arg}`", str(e))
            return None

        # The hash is echoed as given, even when it was an abbreviated prefix.
        return {
            "hash": hash_arg,
            "date": commit.date,
            "message": commit.message,
        }
