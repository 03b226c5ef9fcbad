"""Exception types raised while synchronizing repositories."""

from __future__ import annotations


class SyncError(Exception):
    """Wraps backend-specific exceptions with the failing operation and repository."""

    def __init__(self, operation: str, repo: str, cause: Exception | str) -> None:
        self.operation = operation
        self.repo = repo
        super().__init__(f"{operation} failed for {repo}: {cause}")
        if isinstance(cause, Exception):
            self.__cause__ = cause
