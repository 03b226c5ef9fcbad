"""Shared test fixtures for git-cloner."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from git_cloner.config.models import ClonerConfig, SyncConfig
from git_cloner.vcs.base import GitBackend, WorkingCopy
from git_cloner.vcs.gitpython import GitPythonBackend


@pytest.fixture
def sample_config():
    return ClonerConfig()


@pytest.fixture
def sync_config():
    return SyncConfig()


@pytest.fixture
def mock_working_copy():
    """Working copy whose origin/main already matches HEAD."""
    wc = MagicMock(spec=WorkingCopy)
    wc.head_sha = "aaa111"
    wc.remote_url.return_value = "https://github.com/acme/widgets.git"
    wc.tracking_sha.side_effect = lambda remote, branch: "aaa111" if branch == "main" else None
    wc.__enter__.return_value = wc
    wc.__exit__.return_value = None
    return wc


@pytest.fixture
def mock_backend(mock_working_copy):
    backend = MagicMock(spec=GitBackend)
    backend.clone.side_effect = lambda url, path: Path(path).mkdir(parents=True)
    backend.open.return_value = mock_working_copy
    return backend


@pytest.fixture
def permission_fixer():
    return MagicMock(name="fix_permissions", return_value=0)


# ── real repositories ───────────────────────────────────────────────


class UpstreamRepo:
    """A local non-bare repository standing in for a GitHub remote."""

    def __init__(self, path: Path, branch: str = "main") -> None:
        from git import Repo

        path.mkdir(parents=True)
        self.path = path
        self.repo = Repo.init(path, initial_branch=branch)
        with self.repo.config_writer() as cw:
            cw.set_value("user", "name", "Test User")
            cw.set_value("user", "email", "test@example.com")

    def commit(self, files: dict[str, str], message: str = "update") -> str:
        for rel, content in files.items():
            target = self.path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            target.chmod(0o644)
        self.repo.index.add(list(files))
        return self.repo.index.commit(message).hexsha

    @property
    def head_sha(self) -> str:
        return self.repo.head.commit.hexsha


class UrlRewritingBackend(GitPythonBackend):
    """Clones GitHub URLs from local upstream directories instead of the network."""

    def __init__(self, mapping: dict[str, Path]) -> None:
        self.mapping = mapping

    def clone(self, url: str, path: Path) -> None:
        super().clone(str(self.mapping[url]), path)


@pytest.fixture
def make_upstream(tmp_path):
    created = []

    def _make(name: str, branch: str = "main") -> UpstreamRepo:
        upstream = UpstreamRepo(tmp_path / "upstream" / name, branch=branch)
        created.append(upstream)
        return upstream

    yield _make
    for upstream in created:
        upstream.repo.close()
