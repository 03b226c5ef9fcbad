"""Mark shell scripts inside a working copy as executable."""

from __future__ import annotations

import logging
import stat
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _is_windows() -> bool:
    return sys.platform == "win32"


def fix_permissions(root: str | Path) -> int:
    """Add u+x, g+x and o+x to every ``*.sh`` file under *root*.

    Existing mode bits are kept. Failures on individual files are logged and
    skipped. Returns the number of scripts found; always 0 on Windows.
    """
    if _is_windows():
        return 0

    root = Path(root)
    if not root.is_dir():
        return 0
    scripts = [p for p in root.rglob("*.sh") if p.is_file()]
    for script in scripts:
        try:
            mode = script.stat().st_mode
            script.chmod(mode | _EXEC_BITS)
        except OSError as e:
            logger.warning("Failed to set permissions on %s: %s", script, e)

    if scripts:
        logger.info(
            "Set execute permissions on %d shell script(s) in %s", len(scripts), root.name
        )
    return len(scripts)
