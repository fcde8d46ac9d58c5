"""Base class for the read-only data sources."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..diagnostics import Diagnostics
from ..schema import Schema
from ..vcs.base import RepositoryHandle
from ..vcs.git_adapter import GitRepository

logger = logging.getLogger(__name__)


class DataSource(ABC):
    """A point query against the shared repository handle.

    The host calls ``configure`` with the provider's data before any
    ``read``. The handle is only ever read from.
    """

    type_suffix: str = ""

    def __init__(self) -> None:
        self._repo: Optional[GitRepository] = None

    def metadata(self, provider_type_name: str) -> str:
        """Full type name, e.g. ``gitlocal_head``."""
        return f"{provider_type_name}_{self.type_suffix}"

    @abstractmethod
    def schema(self) -> Schema:
        """Attributes accepted and produced by this data source."""

    def configure(self, provider_data: Any, diagnostics: Diagnostics) -> None:
        # Hosts may configure data sources before the provider itself is configured.
        if provider_data is None:
            return

        if not isinstance(provider_data, GitRepository):
            diagnostics.add_error(
                "Unexpected Data Source Configure Type",
                f"Expected {GitRepository.__module__}.{GitRepository.__name__}, "
                f"got: {type(provider_data).__name__}. "
                "Please report this issue to the provider developers.",
            )
            return

        self._repo = provider_data

    def read(self, config: Dict[str, Any], diagnostics: Diagnostics) -> Optional[Dict[str, Any]]:
        """Run the query; returns the state mapping, or None when an error was reported."""
        if self._repo is None:
            diagnostics.add_error(
                "Unconfigured Data Source",
                f"The {self.type_suffix} data source has no repository. "
                "The provider must be configured with a valid path before data sources are read.",
            )
            return None

        logger.debug(f"Reading {self.type_suffix} with {config!r}")
        return self._read(self._repo, config, diagnostics)

    @abstractmethod
    def _read(
        self,
        repo: RepositoryHandle,
        config: Dict[str, Any],
        diagnostics: Diagnostics,
    ) -> Optional[Dict[str, Any]]:
        """Query ``repo`` and build the state mapping; None after reporting an error."""
