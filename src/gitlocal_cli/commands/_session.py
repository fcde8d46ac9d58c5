"""Shared plumbing for commands that talk to the provider."""

from __future__ import annotations

from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitlocal_core import GitLocalProvider, ProviderServer, __version__
from gitlocal_core.config import default_config, provider_config
from gitlocal_core.diagnostics import SEVERITY_ERROR, Diagnostics

err_console = Console(stderr=True)


def print_diagnostics(diagnostics: Diagnostics) -> None:
    for diag in diagnostics:
        color = "red" if diag.severity == SEVERITY_ERROR else "yellow"
        label = "Error" if diag.severity == SEVERITY_ERROR else "Warning"
        where = f" (attribute: {diag.attribute})" if diag.attribute else ""
        err_console.print(f"[{color}]{label}:[/{color}] {escape(diag.summary)}{escape(where)}", soft_wrap=True)
        if diag.detail:
            err_console.print(escape(diag.detail), soft_wrap=True)


def settings_from(ctx: typer.Context) -> Dict[str, Any]:
    return ctx.obj if isinstance(ctx.obj, dict) else default_config()


def open_session(ctx: typer.Context, path: Optional[str]) -> ProviderServer:
    """Configure a provider server or exit 1 with its diagnostics."""
    server = ProviderServer(GitLocalProvider(version=__version__))
    diagnostics = server.configure(provider_config(settings_from(ctx), path))
    if diagnostics.has_error():
        print_diagnostics(diagnostics)
        raise typer.Exit(1)
    return server


def read_or_exit(server: ProviderServer, suffix: str, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    result = server.read_data_source(f"{server.type_name}_{suffix}", config)
    if len(result.diagnostics):
        print_diagnostics(result.diagnostics)
    if not result.ok:
        raise typer.Exit(1)
    return result.state or {}
