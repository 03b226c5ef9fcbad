"""Pydantic models for repository synchronization results."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "Unknown"


class RepoRef(BaseModel):
    """Owner and name of a GitHub repository, derived from its URL."""

    model_config = ConfigDict(frozen=True)

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def https_url(self) -> str:
        # The parser strips one trailing .git, so a name that keeps one needs another
        suffix = ".git" if self.name.endswith(".git") else ""
        return f"https://github.com/{self.owner}/{self.name}{suffix}"


class SyncStatus(str, Enum):
    """Outcome of processing one repository line."""

    new = "new"
    updated = "updated"
    existing = "existing"
    error = "error"


class SyncOutcome(BaseModel):
    """Result of synchronizing a single repository. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    status: SyncStatus
    message: str | None = None
    timestamp: datetime = Field(default_factory=datetime.now)
    changed: bool = False

    @classmethod
    def failure(cls, message: str, ref: RepoRef | None = None) -> SyncOutcome:
        return cls(
            owner=ref.owner if ref else UNKNOWN,
            repo=ref.name if ref else UNKNOWN,
            status=SyncStatus.error,
            message=message,
            changed=False,
        )

    @property
    def status_label(self) -> str:
        if self.status is SyncStatus.error:
            return f"Error: {self.message}" if self.message else "Error"
        return self.status.value.capitalize()


class SyncSummary(BaseModel):
    """Per-status counts for a finished run."""

    new: int = 0
    updated: int = 0
    existing: int = 0
    error: int = 0

    @classmethod
    def from_outcomes(cls, outcomes: list[SyncOutcome]) -> SyncSummary:
        counts = {status.value: 0 for status in SyncStatus}
        for outcome in outcomes:
            counts[outcome.status.value] += 1
        return cls(**counts)

    @property
    def total(self) -> int:
        return self.new + self.updated + self.existing + self.error
