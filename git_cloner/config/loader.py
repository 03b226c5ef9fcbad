"""YAML config loading with env var expansion."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import ClonerConfig

CONFIG_FILENAME = "git-cloner.yaml"


def load_config(cli_path: str | None = None) -> ClonerConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    config_paths = [
        Path(cli_path) if cli_path else None,
        Path(".") / CONFIG_FILENAME,
        Path.home() / ".git-cloner" / "config.yaml",
    ]

    for path in config_paths:
        if path and path.exists():
            try:
                with open(path, encoding="utf-8") as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                if not isinstance(raw, dict):
                    raise ValueError(f"Invalid config in {path}: expected a mapping")
                raw = _expand_env_vars(raw)
                return ClonerConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
            except ValidationError as e:
                raise ValueError(f"Invalid config in {path}: {e}") from e

    if cli_path:
        raise ValueError(f"Config file not found: {cli_path}")
    return ClonerConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return re.sub(r"\$\{(\w+)\}", lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `git-cloner --init-config`
DEFAULT_CONFIG_TEMPLATE = """\
# git-cloner.yaml

# Synchronization
sync:
  repo_list: "repos.txt"       # one repository URL per line, '#' starts a comment
  clone_dir: "cloned-repos"
  remote: "origin"
  tracking_branches:           # first one present on the remote wins
    - main
    - master
  fix_permissions: true        # add execute bits to *.sh files (ignored on Windows)
  strict_remote_match: false   # error instead of warn when a directory tracks another remote

# Version control backend
vcs:
  backend: "gitpython"
  # git_executable: "/usr/bin/git"

# Output
output:
  show_banner: true
  timestamp_format: "%Y-%m-%d %H:%M:%S"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
