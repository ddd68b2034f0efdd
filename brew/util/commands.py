# SPDX-License-Identifier: MIT
"""Process and filesystem helpers used by the orchestrator and tools.

Tool processes inherit the standard streams of brew itself so compiler
diagnostics reach the terminal unchanged.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def run(cmd: Sequence[str | Path], cwd: Path | str | None = None) -> int:
    """Run a command and wait for it.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the command.

    Returns:
        The command's exit status.

    Raises:
        OSError: If the command could not be started.
    """
    args = [str(arg) for arg in cmd]
    logger.debug("Running: %s", " ".join(args))
    result = subprocess.run(args, cwd=cwd)
    return result.returncode


def copy(src: Path | str, dest: Path | str) -> None:
    """Copy a file, creating parent directories as needed."""
    dest_path = Path(dest)
    dest_path.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dest)


def is_newer_or_equal(target: Path, source: Path) -> bool:
    """True if ``target`` exists and is at least as new as ``source``.

    Any error reading either timestamp counts as out of date.
    """
    try:
        return target.stat().st_mtime_ns >= source.stat().st_mtime_ns
    except OSError:
        return False


def is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def list_directory(path: Path) -> list[Path]:
    """Entries of a directory in name order.

    Raises:
        OSError: If the directory cannot be read.
    """
    return sorted(path.iterdir(), key=lambda p: p.name)
