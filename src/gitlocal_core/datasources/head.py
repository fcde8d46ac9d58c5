"""Current HEAD commit."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..diagnostics import Diagnostics
from ..errors import HeadNotFoundError
from ..schema import Schema, string_attribute
from ..vcs.base import RepositoryHandle
from .base import DataSource


class HeadDataSource(DataSource):
    type_suffix = "head"

    def schema(self) -> Schema:
        return Schema(
            attributes={
                "hash": string_attribute("Hash of the commit", computed=True),
            },
            description="Commit currently checked out in the repository",
        )

    def _read(
        self,
        repo: RepositoryHandle,
        config: Dict[str, Any],
        diagnostics: Diagnostics,
    ) -> Optional[Dict[str, Any]]:
        try:
            head = repo.head_hash()
        except HeadNotFoundError as e:
            diagnostics.add_error("Unable to Read Git Head", str(e))
            return None

        return {"hash": head}
