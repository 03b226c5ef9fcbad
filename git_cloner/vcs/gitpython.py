"""GitPython implementation of the version-control backend."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path

from git import Repo
from git.exc import GitError
from git.refs.remote import RemoteReference

from git_cloner.errors import SyncError
from git_cloner.vcs.base import GitBackend, WorkingCopy

logger = logging.getLogger(__name__)

# Exceptions GitPython raises for missing refs, bad paths, config and failed commands
_GIT_FAILURES = (GitError, ValueError, OSError, configparser.Error)


class GitPythonWorkingCopy(WorkingCopy):
    """WorkingCopy backed by a ``git.Repo``."""

    def __init__(self, repo: Repo, path: Path) -> None:
        self._repo = repo
        self.path = path

    @property
    def head_sha(self) -> str | None:
        try:
            return self._repo.head.commit.hexsha
        except ValueError:
            # HEAD points at an unborn branch
            return None

    def remote_url(self, remote: str) -> str | None:
        try:
            return self._repo.remote(remote).url
        except _GIT_FAILURES as e:
            raise SyncError("open", self.path.name, e) from e

    def fetch(self, remote: str) -> None:
        try:
            origin = self._repo.remote(remote)
            logger.debug("fetching %s from %s", self.path.name, origin.url)
            origin.fetch()
        except _GIT_FAILURES as e:
            raise SyncError("fetch", self.path.name, e) from e

    def _tracking_ref(self, remote: str, branch: str) -> RemoteReference | None:
        wanted = f"{remote}/{branch}"
        for ref in self._repo.refs:
            if isinstance(ref, RemoteReference) and ref.name == wanted:
                return ref
        return None

    def tracking_sha(self, remote: str, branch: str) -> str | None:
        ref = self._tracking_ref(remote, branch)
        if ref is None:
            return None
        try:
            return ref.commit.hexsha
        except _GIT_FAILURES as e:
            raise SyncError("fetch", self.path.name, e) from e

    def checkout(self, remote: str, branch: str) -> None:
        ref = self._tracking_ref(remote, branch)
        if ref is None:
            raise SyncError("checkout", self.path.name, f"no such branch {remote}/{branch}")
        try:
            # Leaves HEAD detached at the tracking branch tip
            self._repo.git.checkout(ref.name)
        except _GIT_FAILURES as e:
            raise SyncError("checkout", self.path.name, e) from e

    def hard_reset(self, sha: str) -> None:
        try:
            self._repo.head.reset(sha, index=True, working_tree=True)
        except _GIT_FAILURES as e:
            raise SyncError("reset", self.path.name, e) from e

    def close(self) -> None:
        self._repo.close()


class GitPythonBackend(GitBackend):
    """GitBackend that shells out to git through GitPython."""

    def clone(self, url: str, path: Path) -> None:
        try:
            repo = Repo.clone_from(url, str(path))
        except _GIT_FAILURES as e:
            raise SyncError("clone", path.name, e) from e
        repo.close()

    def open(self, path: Path) -> WorkingCopy:
        try:
            repo = Repo(str(path))
        except _GIT_FAILURES as e:
            raise SyncError("open", path.name, e) from e
        return GitPythonWorkingCopy(repo, path)
