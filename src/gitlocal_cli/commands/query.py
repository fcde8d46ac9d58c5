"""head / commit / remote / remotes commands."""

from __future__ import annotations

import json
from typing import Any, Dict

import typer

from ._session import open_session, read_or_exit

_PATH_HELP = "Repository root (overrides the settings file and $GIT_LOCAL_PATH)"
_FORMAT_HELP = "Output format: json|markdown"


def _emit(title: str, state: Dict[str, Any], output_format: str) -> None:
    if output_format == "json":
        typer.echo(json.dumps(state, ensure_ascii=False, indent=2))
        return

    typer.echo(f"# {title}")
    for key, value in state.items():
        if key == "remotes":
            for remote in value:
                typer.echo(f"- {remote['name']}: {', '.join(remote['urls'])}")
        elif isinstance(value, list):
            typer.echo(f"- {key}: {', '.join(value)}")
        elif key == "message":
            typer.echo(f"- {key}:")
            typer.echo(value.rstrip("\n"))
        else:
            typer.echo(f"- {key}: {value}")


def _check_format(output_format: str) -> None:
    if output_format not in ("json", "markdown"):
        raise typer.BadParameter("must be json or markdown", param_hint="--format")


def head(
    ctx: typer.Context,
    path: str | None = typer.Option(None, "--path", help=_PATH_HELP),
    output_format: str = typer.Option("json", "--format", help=_FORMAT_HELP),
):
    """Print the commit HEAD resolves to."""
    _check_format(output_format)
    server = open_session(ctx, path)
    _emit("Head", read_or_exit(server, "head"), output_format)


def commit(
    ctx: typer.Context,
    hash_value: str = typer.Argument(..., metavar="HASH", help="Commit hash"),
    path: str | None = typer.Option(None, "--path", help=_PATH_HELP),
    output_format: str = typer.Option("json", "--format", help=_FORMAT_HELP),
):
    """Print the date and message of a commit."""
    _check_format(output_format)
    server = open_session(ctx, path)
    _emit(f"Commit {hash_value}", read_or_exit(server, "commit", {"hash": hash_value}), output_format)


def remote(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Remote name"),
    path: str | None = typer.Option(None, "--path", help=_PATH_HELP),
    output_format: str = typer.Option("json", "--format", help=_FORMAT_HELP),
):
    """Print the URLs of one remote."""
    _check_format(output_format)
    server = open_session(ctx, path)
    _emit(f"Remote {name}", read_or_exit(server, "remote", {"name": name}), output_format)


def remotes(
    ctx: typer.Context,
    path: str | None = typer.Option(None, "--path", help=_PATH_HELP),
    output_format: str = typer.Option("json", "--format", help=_FORMAT_HELP),
):
    """Print every remote and its URLs."""
    _check_format(output_format)
    server = open_session(ctx, path)
    _emit("Remotes", read_or_exit(server, "remotes"), output_format)
