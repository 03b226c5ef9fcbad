"""Repository synchronizer: clone missing repos, fast-forward existing ones."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from git_cloner.config.models import SyncConfig
from git_cloner.errors import SyncError
from git_cloner.sync.models import RepoRef, SyncOutcome, SyncStatus
from git_cloner.sync.permissions import fix_permissions
from git_cloner.sync.urls import parse_repo_url
from git_cloner.vcs.base import GitBackend, WorkingCopy

logger = logging.getLogger(__name__)

INVALID_URL = "Invalid URL"


def is_comment(line: str) -> bool:
    """Blank lines and lines starting with ``#`` are not repository references."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


class RepoSynchronizer:
    """Brings one working copy per repository line in sync with its remote.

    Absent directories are cloned. Present ones are fetched and, when the
    remote tracking branch moved, checked out and hard-reset to it, so local
    edits in a working copy are discarded.
    """

    def __init__(
        self,
        backend: GitBackend,
        config: SyncConfig | None = None,
        permission_fixer: Callable[[Path], object] = fix_permissions,
    ) -> None:
        self.backend = backend
        self.config = config or SyncConfig()
        self._fix_permissions = permission_fixer

    def sync(self, raw_line: str, dest_root: str | Path) -> SyncOutcome:
        """Process a single repository line. Never raises."""
        url = raw_line.strip()
        ref = parse_repo_url(url)
        if ref is None:
            logger.warning("Invalid repository URL: %r", url)
            return SyncOutcome.failure(INVALID_URL)

        try:
            repo_path = Path(dest_root) / ref.name
            if not repo_path.exists():
                self._clone(url, repo_path)
                return SyncOutcome(
                    owner=ref.owner, repo=ref.name, status=SyncStatus.new, changed=True
                )

            changed = self._update(ref, repo_path)
            status = SyncStatus.updated if changed else SyncStatus.existing
            return SyncOutcome(owner=ref.owner, repo=ref.name, status=status, changed=changed)
        except Exception as e:
            logger.error("Failed to sync %s: %s", ref.full_name, e)
            return SyncOutcome.failure(str(e), ref)

    async def run(
        self,
        lines: Iterable[str],
        dest_root: str | Path,
        on_progress: Callable[[], object] | None = None,
    ) -> list[SyncOutcome]:
        """Sync every non-comment line in order.

        Each blocking sync runs in a worker thread and is awaited before the
        next one starts. *on_progress* is called once per input line,
        comments included.
        """
        outcomes: list[SyncOutcome] = []
        for line in lines:
            if not is_comment(line):
                outcome = await asyncio.to_thread(self.sync, line, dest_root)
                outcomes.append(outcome)
            if on_progress is not None:
                on_progress()
        return outcomes

    # -- clone / update ----------------------------------------------------

    def _clone(self, url: str, repo_path: Path) -> None:
        logger.info("Cloning %s into %s", url, repo_path)
        self.backend.clone(url, repo_path)
        self._apply_permissions(repo_path)

    def _update(self, ref: RepoRef, repo_path: Path) -> bool:
        remote = self.config.remote
        with self.backend.open(repo_path) as wc:
            self._verify_remote(ref, wc)

            before = wc.head_sha
            wc.fetch(remote)

            branch, after = self._resolve_tracking(wc)
            if branch is None:
                logger.info(
                    "%s has no %s branch among %s; leaving as is",
                    ref.full_name,
                    remote,
                    self.config.tracking_branches,
                )
                return False

            changed = before != after
            if not changed:
                logger.debug("%s is up to date at %s", ref.full_name, after)
                return False

            logger.info("Fast-forwarding %s to %s/%s (%s)", ref.full_name, remote, branch, after)
            try:
                wc.checkout(remote, branch)
                wc.hard_reset(after)
            except Exception as e:
                logger.warning("Could not fast-forward %s: %s", ref.full_name, e)
                return True

        self._apply_permissions(repo_path)
        return True

    def _resolve_tracking(self, wc: WorkingCopy) -> tuple[str | None, str | None]:
        for branch in self.config.tracking_branches:
            sha = wc.tracking_sha(self.config.remote, branch)
            if sha is not None:
                return branch, sha
        return None, None

    def _verify_remote(self, ref: RepoRef, wc: WorkingCopy) -> None:
        """Warn (or fail, when strict) if the directory tracks a different repository."""
        url = wc.remote_url(self.config.remote)
        existing = parse_repo_url(url) if url else None
        if existing is None:
            return
        if (existing.owner.lower(), existing.name.lower()) == (ref.owner.lower(), ref.name.lower()):
            return

        detail = f"directory {ref.name} tracks {existing.full_name}, not {ref.full_name}"
        if self.config.strict_remote_match:
            raise SyncError("verify-remote", ref.name, detail)
        logger.warning("Remote mismatch: %s", detail)

    def _apply_permissions(self, repo_path: Path) -> None:
        if self.config.fix_permissions:
            self._fix_permissions(repo_path)
