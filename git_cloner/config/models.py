from pydantic import BaseModel, Field
from typing import Literal


class SyncConfig(BaseModel):
    repo_list: str = "repos.txt"
    clone_dir: str = "cloned-repos"
    remote: str = "origin"
    tracking_branches: list[str] = ["main", "master"]
    fix_permissions: bool = True
    strict_remote_match: bool = False


class VCSConfig(BaseModel):
    backend: Literal["gitpython"] = "gitpython"
    git_executable: str | None = None


class OutputConfig(BaseModel):
    show_banner: bool = True
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"


class ClonerConfig(BaseModel):
    sync: SyncConfig = Field(default_factory=SyncConfig)
    vcs: VCSConfig = Field(default_factory=VCSConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
