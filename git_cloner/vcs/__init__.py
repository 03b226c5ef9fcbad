"""Version-control backends for git-cloner."""

import git

from git_cloner.config.models import VCSConfig
from git_cloner.vcs.base import GitBackend, WorkingCopy
from git_cloner.vcs.gitpython import GitPythonBackend, GitPythonWorkingCopy


def create_backend(config: VCSConfig) -> GitBackend:
    """Create a version-control backend from config.

    Points GitPython at config.git_executable when one is set.
    """
    if config.backend != "gitpython":
        raise ValueError(
            f"Unsupported VCS backend: {config.backend!r}. "
            "Currently only 'gitpython' is supported."
        )
    if config.git_executable:
        try:
            git.refresh(config.git_executable)
        except (ImportError, git.GitError) as e:
            raise ValueError(f"Unusable git executable {config.git_executable!r}: {e}") from e
    return GitPythonBackend()


__all__ = [
    "GitBackend",
    "GitPythonBackend",
    "GitPythonWorkingCopy",
    "WorkingCopy",
    "create_backend",
]
