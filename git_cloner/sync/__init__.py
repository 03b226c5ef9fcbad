"""Repository synchronization: URL parsing, clone-or-update, permission fix-up."""

from git_cloner.sync.models import RepoRef, SyncOutcome, SyncStatus, SyncSummary
from git_cloner.sync.permissions import fix_permissions
from git_cloner.sync.synchronizer import RepoSynchronizer, is_comment
from git_cloner.sync.urls import parse_repo_url

__all__ = [
    "RepoRef",
    "RepoSynchronizer",
    "SyncOutcome",
    "SyncStatus",
    "SyncSummary",
    "fix_permissions",
    "is_comment",
    "parse_repo_url",
]
