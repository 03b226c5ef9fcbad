"""Extract owner/name pairs from GitHub repository URLs."""

from __future__ import annotations

from .models import RepoRef

# HTTPS and SSH shapes accepted for github.com
_PREFIXES = ("https://github.com/", "git@github.com:")

# Segments that would resolve outside the destination root when joined to it
_RESERVED_SEGMENTS = (".", "..")


def _is_safe_segment(segment: str) -> bool:
    return bool(segment) and segment not in _RESERVED_SEGMENTS and "\\" not in segment


def parse_repo_url(url: str) -> RepoRef | None:
    """Parse a GitHub HTTPS or SSH URL into a RepoRef.

    Returns None for any other host, for paths without both an owner and
    a name segment, and for ``.``/``..`` or backslash-bearing segments.
    Segments past the second are ignored.
    """
    if not isinstance(url, str):
        return None
    url = url.strip()
    for prefix in _PREFIXES:
        if url.startswith(prefix):
            path = url[len(prefix):]
            break
    else:
        return None

    parts = path.rstrip("/").split("/")
    if len(parts) < 2:
        return None
    owner, name = parts[0], parts[1].removesuffix(".git")
    if not (_is_safe_segment(owner) and _is_safe_segment(name)):
        return None
    return RepoRef(owner=owner, name=name)
