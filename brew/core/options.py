# SPDX-License-Identifier: MIT
"""Run options for brew.

Options carry everything the orchestrator needs to know about a single
invocation: which command to run, how chatty to be, and where the target
sysroot and install prefix live.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_SYSROOT = "/"
DEFAULT_PREFIX = "/los/"


class Command(Enum):
    BUILD = "build"
    INSTALL = "install"
    CLEAN = "clean"

    def __str__(self) -> str:
        return self.value


@dataclass
class Options:
    """Options for one brew invocation.

    Attributes:
        command: What to do (build, install or clean).
        verbose: Print extra diagnostics.
        quiet: Suppress progress messages.
        sysroot: Target system root passed to the toolchain.
        prefix: Root of the staged install tree.
    """

    command: Command = Command.BUILD
    verbose: bool = False
    quiet: bool = False
    sysroot: Path = Path(DEFAULT_SYSROOT)
    prefix: Path = Path(DEFAULT_PREFIX)

    def __post_init__(self) -> None:
        self.sysroot = Path(self.sysroot)
        self.prefix = Path(self.prefix)

    def describe(self) -> str:
        return "\n".join(
            [
                f"Command: {self.command}",
                f"Verbose: {self.verbose}",
                f"Quiet: {self.quiet}",
                f"System Root: {self.sysroot}",
                f"Prefix: {self.prefix}",
            ]
        )


def get_var(name: str, default: str | None = None) -> str | None:
    """Get a brew variable from the environment.

    Variables are read with a ``BREW_`` prefix, so ``get_var("CC")`` looks
    at ``BREW_CC``. Recursive sub-builds inherit the environment, so a
    variable set for the top-level group applies to every subproject.

    Args:
        name: Variable name without the prefix.
        default: Default value if not set.

    Returns:
        The variable value, or default if not set.
    """
    value = os.environ.get(f"BREW_{name}")
    if value:
        return value
    return default
