from __future__ import annotations

import json

import typer

from gitlocal_core import GitLocalProvider, ProviderServer, __version__


def schema():
    """Print provider and data source schemas as JSON."""
    server = ProviderServer(GitLocalProvider(version=__version__))
    typer.echo(json.dumps(server.schema(), indent=2))
