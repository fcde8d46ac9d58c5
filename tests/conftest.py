from dataclasses import dataclass
from pathlib import Path

import pygit2
import pytest
from hypothesis import settings

from gitlocal_core import ENV_PATH, GitLocalProvider, ProviderServer
from gitlocal_core.config import ENV_CONFIG_PATH

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("gitlocal-tests", database=None)
settings.load_profile("gitlocal-tests")

ORIGIN_URL = "https://github.com/example/gitlocal"
FIRST_MESSAGE = "Add head data source\n"
FIRST_TIME = 1747228108  # 2025-05-14T09:08:28-04:00
FIRST_OFFSET = -240
SECOND_MESSAGE = "Add remote data sources\n\nAlso shares the remote schema.\n"
SECOND_TIME = FIRST_TIME + 3600  # 2025-05-14T14:08:28Z
SECOND_OFFSET = 0


@dataclass
class SampleRepo:
    path: Path
    first_commit: str
    head: str
    tree: str


def _commit(repo: pygit2.Repository, message: str, time: int, offset: int, parents: list) -> pygit2.Oid:
    sig = pygit2.Signature("Test Author", "author@example.com", time, offset)
    tree = repo.TreeBuilder().write()
    return repo.create_commit("HEAD", sig, sig, message, tree, parents)


def append_git_config(repo_path: Path, text: str) -> None:
    config_file = repo_path / ".git" / "config"
    with config_file.open("a", encoding="utf-8") as fh:
        fh.write(text)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv(ENV_PATH, raising=False)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    # Keep a stray ./gitlocal.toml out of the picture.
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_repo(tmp_path: Path) -> SampleRepo:
    """Two commits on main and one remote, origin, with one URL."""
    path = tmp_path / "sample"
    repo = pygit2.init_repository(str(path), initial_head="main")
    first = _commit(repo, FIRST_MESSAGE, FIRST_TIME, FIRST_OFFSET, [])
    second = _commit(repo, SECOND_MESSAGE, SECOND_TIME, SECOND_OFFSET, [first])
    repo.remotes.create("origin", ORIGIN_URL)
    return SampleRepo(
        path=path,
        first_commit=str(first),
        head=str(second),
        tree=str(repo[first].tree_id),
    )


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """Freshly initialised repository: unborn HEAD, no remotes."""
    path = tmp_path / "empty"
    pygit2.init_repository(str(path), initial_head="main")
    return path


@pytest.fixture
def server(sample_repo: SampleRepo) -> ProviderServer:
    srv = ProviderServer(GitLocalProvider(version="test"))
    diagnostics = srv.configure({"path": str(sample_repo.path)})
    assert not diagnostics.has_error(), diagnostics
    return srv


def write_raw_commit(repo_path: Path, headers: bytes, message: bytes) -> str:
    """Write a commit object byte for byte, bypassing signature/message encoding."""
    repo = pygit2.Repository(str(repo_path))
    tree = repo.TreeBuilder().write()
    data = b"tree " + str(tree).encode("ascii") + b"\n" + headers + b"\n" + message
    return str(repo.odb.write(pygit2.enums.ObjectType.COMMIT, data))
