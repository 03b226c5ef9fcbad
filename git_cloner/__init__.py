"""git-cloner: clone or fast-forward a list of GitHub repositories."""

from git_cloner.config import ClonerConfig, load_config
from git_cloner.output import ResultSink, RichResultRenderer
from git_cloner.sync import RepoRef, RepoSynchronizer, SyncOutcome, SyncStatus, parse_repo_url
from git_cloner.vcs import GitBackend, GitPythonBackend, create_backend

__version__ = "0.1.0"

__all__ = [
    "ClonerConfig",
    "GitBackend",
    "GitPythonBackend",
    "RepoRef",
    "RepoSynchronizer",
    "ResultSink",
    "RichResultRenderer",
    "SyncOutcome",
    "SyncStatus",
    "create_backend",
    "load_config",
    "parse_repo_url",
]
