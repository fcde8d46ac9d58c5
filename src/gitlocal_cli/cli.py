from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.markup import escape

from gitlocal_core.config import LOG_LEVELS, load_settings
from gitlocal_core.errors import ConfigError

from .commands._session import err_console

app = typer.Typer(help="gitlocal: read-only views of a local git repository")


@app.callback()
def _init(
    ctx: typer.Context,
    config: Path | None = typer.Option(None, "--config", help="Settings file (default: $GIT_LOCAL_CONFIG or ./gitlocal.toml)"),
    log_level: str | None = typer.Option(None, "--log-level", help="Log level: debug|info|warning|error"),
):
    try:
        settings = load_settings(config)
    except ConfigError as e:
        err_console.print(f"[red]Config error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(2)

    level = (log_level or settings["log"]["verbosity"]).strip().lower()
    if level not in LOG_LEVELS:
        err_console.print(f"[red]Invalid --log-level:[/red] {escape(level)}", soft_wrap=True)
        raise typer.Exit(2)
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


# Subcommands are registered in commands/*.py
from .commands import query as query_cmd  # noqa: E402
from .commands.doctor import doctor as doctor_fn  # noqa: E402
from .commands.schema_cmd import schema as schema_fn  # noqa: E402

app.command(name="head")(query_cmd.head)
app.command(name="commit")(query_cmd.commit)
app.command(name="remote")(query_cmd.remote)
app.command(name="remotes")(query_cmd.remotes)
app.command(name="schema")(schema_fn)
app.command(name="doctor")(doctor_fn)


def main():
    app()
