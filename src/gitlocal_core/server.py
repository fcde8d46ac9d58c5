"""In-process host harness for the provider.

Plays the host's part of the protocol: configures the provider once, then
builds, configures and reads data sources by type name. Used by the CLI and
the test suite; host adapters can drive the provider the same way.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .datasources import DataSource
from .diagnostics import Diagnostics
from .provider import GitLocalProvider

logger = logging.getLogger(__name__)


@dataclass
class ReadResult:
    """State and diagnostics of one data source read."""
    type_name: str
    state: Optional[Dict[str, Any]] = None
    diagnostics: Diagnostics = field(default_factory=Diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()


class ProviderServer:
    """Drives one provider session."""

    def __init__(self, provider: GitLocalProvider):
        self._provider = provider
        self._provider_data: Any = None
        self._configured = False
        self._factories: Dict[str, Callable[[], DataSource]] = {}
        for factory in provider.data_sources():
            self._factories[factory().metadata(self.type_name)] = factory

    @property
    def type_name(self) -> str:
        return self._provider.metadata()["type_name"]

    @property
    def configured(self) -> bool:
        return self._configured

    def data_source_types(self) -> List[str]:
        return list(self._factories)

    def schema(self) -> Dict[str, Any]:
        return {
            "provider": {
                **self._provider.metadata(),
                "schema": self._provider.schema().to_dict(),
            },
            "data_sources": {
                name: factory().schema().to_dict() for name, factory in self._factories.items()
            },
        }

    def configure(self, config: Mapping[str, Any]) -> Diagnostics:
        diagnostics = Diagnostics()
        # One repository open per session.
        if self._configured:
            diagnostics.add_error(
                "Provider Already Configured",
                "The provider was already configured for this session; the repository is not reopened.",
            )
            _log_diagnostics(self.type_name, diagnostics)
            return diagnostics

        self._provider.schema().validate_config(dict(config), diagnostics)
        if not diagnostics.has_error():
            resp = self._provider.configure(config)
            diagnostics.extend(resp.diagnostics)
            self._provider_data = resp.data_source_data

        self._configured = not diagnostics.has_error()
        _log_diagnostics(self.type_name, diagnostics)
        return diagnostics

    def read_data_source(self, type_name: str, config: Optional[Mapping[str, Any]] = None) -> ReadResult:
        result = ReadResult(type_name=type_name)
        request = dict(config or {})

        factory = self._factories.get(type_name)
        if factory is None:
            known = ", ".join(sorted(self._factories))
            result.diagnostics.add_error(
                "Unknown Data Source",
                f'The provider does not support data source "{type_name}". Supported: {known}.',
            )
            _log_diagnostics(type_name, result.diagnostics)
            return result

        data_source = factory()
        data_source.schema().validate_config(request, result.diagnostics)
        if not result.diagnostics.has_error():
            data_source.configure(self._provider_data, result.diagnostics)
        if not result.diagnostics.has_error():
            state = data_source.read(request, result.diagnostics)
            if not result.diagnostics.has_error():
                result.state = state

        _log_diagnostics(type_name, result.diagnostics)
        return result


def _log_diagnostics(source: str, diagnostics: Diagnostics) -> None:
    for diag in diagnostics.errors():
        logger.warning(f"{source}: {diag.summary}: {diag.detail}")
