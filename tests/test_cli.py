"""Tests for the gitlocal CLI."""

import json
from pathlib import Path

from typer.testing import CliRunner

from conftest import FIRST_MESSAGE, ORIGIN_URL
from gitlocal_cli.cli import app
from gitlocal_core import ENV_PATH

runner = CliRunner()


def test_head_json(sample_repo):
    result = runner.invoke(app, ["head", "--path", str(sample_repo.path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"hash": sample_repo.head}


def test_head_uses_env_fallback(sample_repo, monkeypatch):
    monkeypatch.setenv(ENV_PATH, str(sample_repo.path))
    result = runner.invoke(app, ["head"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["hash"] == sample_repo.head


def test_head_uses_settings_file(sample_repo, tmp_path: Path):
    cfg = tmp_path / "gitlocal.toml"
    cfg.write_text(f'[provider]\npath = "{sample_repo.path.as_posix()}"\n', encoding="utf-8")
    result = runner.invoke(app, ["--config", str(cfg), "head"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["hash"] == sample_repo.head


def test_commit_json(sample_repo):
    result = runner.invoke(app, ["commit", sample_repo.first_commit, "--path", str(sample_repo.path)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["date"] == "2025-05-14T09:08:28-04:00"
    assert data["message"] == FIRST_MESSAGE


def test_commit_markdown(sample_repo):
    result = runner.invoke(
        app,
        ["commit", sample_repo.first_commit, "--path", str(sample_repo.path), "--format", "markdown"],
    )
    assert result.exit_code == 0, result.output
    assert f"# Commit {sample_repo.first_commit}" in result.output
    assert "- date: 2025-05-14T09:08:28-04:00" in result.output
    assert "Add head data source" in result.output


def test_unknown_commit_exits_1(sample_repo):
    missing = "f" * 40
    result = runner.invoke(app, ["commit", missing, "--path", str(sample_repo.path)])
    assert result.exit_code == 1
    assert f"Unable to Read Commit `{missing}`" in result.output


def test_remote_and_remotes(sample_repo):
    remote = runner.invoke(app, ["remote", "origin", "--path", str(sample_repo.path)])
    assert remote.exit_code == 0, remote.output
    assert json.loads(remote.output) == {"name": "origin", "urls": [ORIGIN_URL]}

    remotes = runner.invoke(app, ["remotes", "--path", str(sample_repo.path), "--format", "markdown"])
    assert remotes.exit_code == 0, remotes.output
    assert f"- origin: {ORIGIN_URL}" in remotes.output


def test_missing_path_exits_1():
    result = runner.invoke(app, ["head"])
    assert result.exit_code == 1
    assert "Missing Git Local Path" in result.output


def test_bad_format_is_usage_error(sample_repo):
    result = runner.invoke(app, ["head", "--path", str(sample_repo.path), "--format", "yaml"])
    assert result.exit_code == 2


def test_bad_log_level(sample_repo):
    result = runner.invoke(app, ["--log-level", "loud", "head", "--path", str(sample_repo.path)])
    assert result.exit_code == 2


def test_missing_config_file(tmp_path: Path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.toml"), "head"])
    assert result.exit_code == 2
    assert "Config error" in result.output


def test_schema_command():
    result = runner.invoke(app, ["schema"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert set(data["data_sources"]) == {
        "gitlocal_commit",
        "gitlocal_head",
        "gitlocal_remote",
        "gitlocal_remotes",
    }


def test_doctor_passes(sample_repo):
    result = runner.invoke(app, ["doctor", "--path", str(sample_repo.path), "--format", "json"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["all_passed"] is True
    assert [c["name"] for c in data["checks"]] == [
        "Git Backend",
        "Repository Path",
        "Repository Opens",
        "Head",
    ]


def test_doctor_reports_unborn_head(empty_repo):
    result = runner.invoke(app, ["doctor", "--path", str(empty_repo), "--format", "json"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    head = data["checks"][-1]
    assert head["name"] == "Head" and head["passed"] is False


def test_doctor_without_path():
    result = runner.invoke(app, ["doctor", "--format", "json"])
    assert result.exit_code == 1
    data = json.loads(result.output)
    assert data["checks"][-1]["message"] == "No repository path set"


def test_git_backend_check_rejects_old_libgit2(monkeypatch):
    from gitlocal_cli.commands import doctor as doctor_mod

    monkeypatch.setattr(doctor_mod, "backend_versions", lambda: {"pygit2": "1.0.0", "libgit2": "1.1.0"})
    check = doctor_mod.check_git_backend()
    assert check.passed is False
    assert "1.7" in check.details


def test_git_backend_check_passes_for_installed_pygit2():
    from gitlocal_cli.commands.doctor import check_git_backend

    assert check_git_backend().passed is True
