"""Abstract version-control interface used by the synchronizer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class WorkingCopy(ABC):
    """An opened on-disk repository.

    Implementations raise SyncError for every engine-level failure so that
    callers only need to handle one exception type.
    """

    @property
    @abstractmethod
    def head_sha(self) -> str | None:
        """Commit hash of HEAD, or None for an empty repository."""
        ...

    @abstractmethod
    def remote_url(self, remote: str) -> str | None:
        """URL configured for *remote*, or None if it has no URL."""
        ...

    @abstractmethod
    def fetch(self, remote: str) -> None:
        """Fetch from *remote* using its configured refspecs."""
        ...

    @abstractmethod
    def tracking_sha(self, remote: str, branch: str) -> str | None:
        """Tip of ``<remote>/<branch>``, or None if that ref does not exist."""
        ...

    @abstractmethod
    def checkout(self, remote: str, branch: str) -> None:
        """Check out the remote tracking branch ``<remote>/<branch>``."""
        ...

    @abstractmethod
    def hard_reset(self, sha: str) -> None:
        """Reset index and working tree to *sha*, discarding local changes."""
        ...

    def close(self) -> None:
        """Release any handles held on the repository."""

    def __enter__(self) -> WorkingCopy:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class GitBackend(ABC):
    """Engine-agnostic entry points for cloning and opening repositories."""

    @abstractmethod
    def clone(self, url: str, path: Path) -> None:
        """Clone *url* into *path*."""
        ...

    @abstractmethod
    def open(self, path: Path) -> WorkingCopy:
        """Open an existing working copy at *path*."""
        ...
