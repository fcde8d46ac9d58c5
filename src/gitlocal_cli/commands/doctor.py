"""
doctor.py - Environment health check command.

Checks prerequisites and that the configured repository can be queried.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional, List

import typer
from rich.console import Console
from rich.table import Table

from gitlocal_core import ENV_PATH, GitLocalProvider, ProviderServer, __version__
from gitlocal_core.config import provider_config
from gitlocal_core.vcs import backend_versions

from ._session import settings_from

console = Console()


@dataclass
class CheckResult:
    """Result of a single check."""
    name: str
    passed: bool
    message: str
    details: Optional[str] = None


@dataclass
class DoctorResult:
    """Overall doctor check result."""
    all_passed: bool
    checks: List[CheckResult]


MIN_LIBGIT2 = (1, 7)


def check_git_backend() -> CheckResult:
    """Check that pygit2 is linked against a supported libgit2."""
    versions = backend_versions()
    message = f"pygit2 {versions['pygit2']} (libgit2 {versions['libgit2']})"
    linked = tuple(int(part) for part in versions["libgit2"].split(".")[:2])

    if linked < MIN_LIBGIT2:
        return CheckResult(
            name="Git Backend",
            passed=False,
            message=message,
            details=f"libgit2 {'.'.join(map(str, MIN_LIBGIT2))} or newer is required; upgrade pygit2.",
        )

    return CheckResult(name="Git Backend", passed=True, message=message)

def check_repository_path(configured: Optional[str]) -> CheckResult:
    """Check that a repository path is set and points at a directory."""
    git_path = configured if configured is not None else os.environ.get(ENV_PATH, "")
    source = "configuration" if configured is not None else ENV_PATH

    if not git_path:
        return CheckResult(
            name="Repository Path",
            passed=False,
            message="No repository path set",
            details=f"Pass --path, set [provider].path in gitlocal.toml, or export {ENV_PATH}.",
        )

    if not Path(git_path).is_dir():
        return CheckResult(
            name="Repository Path",
            passed=False,
            message=f"Not a directory: {git_path}",
            details=f"Path taken from {source}.",
        )

    return CheckResult(
        name="Repository Path",
        passed=True,
        message=f"{git_path} (from {source})",
    )


def check_repository(server: ProviderServer, config: dict) -> List[CheckResult]:
    """Open the repository through the provider and resolve HEAD."""
    diagnostics = server.configure(config)
    if diagnostics.has_error():
        first = diagnostics.errors()[0]
        return [
            CheckResult(
                name="Repository Opens",
                passed=False,
                message=first.summary,
                details=first.detail,
            )
        ]

    checks = [CheckResult(name="Repository Opens", passed=True, message="Repository opened")]

    head = server.read_data_source(f"{server.type_name}_head")
    if head.ok:
        checks.append(CheckResult(name="Head", passed=True, message=head.state["hash"]))
    else:
        first = head.diagnostics.errors()[0]
        checks.append(
            CheckResult(name="Head", passed=False, message=first.summary, details=first.detail)
        )
    return checks


def run_doctor(config: dict) -> DoctorResult:
    """Run all doctor checks."""
    checks = [
        check_git_backend(),
        check_repository_path(config.get("path")),
    ]
    if all(c.passed for c in checks):
        server = ProviderServer(GitLocalProvider(version=__version__))
        checks.extend(check_repository(server, config))

    all_passed = all(c.passed for c in checks)
    return DoctorResult(all_passed=all_passed, checks=checks)


def format_result_plain(result: DoctorResult) -> None:
    """Print result in plain text format."""
    table = Table(title="gitlocal doctor", show_header=True)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Message")

    for check in result.checks:
        status = "[green]PASS[/green]" if check.passed else "[red]FAIL[/red]"
        table.add_row(check.name, status, check.message)
        if check.details:
            table.add_row("", "", f"[dim]{check.details}[/dim]")

    console.print(table)

    if result.all_passed:
        console.print("\n[green bold]All checks passed![/green bold]")
    else:
        console.print("\n[red bold]Some checks failed.[/red bold]")


def format_result_json(result: DoctorResult) -> None:
    """Print result in JSON format."""
    output = {
        "all_passed": result.all_passed,
        "checks": [asdict(c) for c in result.checks],
    }
    typer.echo(json.dumps(output, indent=2))


def doctor(
    ctx: typer.Context,
    path: Optional[str] = typer.Option(
        None, "--path",
        help="Repository root (overrides the settings file and $GIT_LOCAL_PATH)",
    ),
    format: str = typer.Option(
        "plain", "--format", "-f",
        help="Output format: plain, json",
    ),
) -> None:
    """
    Check environment health.

    Verifies:
    - pygit2 is linked against a supported libgit2
    - A repository path is configured
    - The repository opens and HEAD resolves
    """
    result = run_doctor(provider_config(settings_from(ctx), path))

    if format == "json":
        format_result_json(result)
    else:
        format_result_plain(result)

    raise typer.Exit(0 if result.all_passed else 1)
