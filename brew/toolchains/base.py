# SPDX-License-Identifier: MIT
"""Tool and toolchain base classes.

A Toolchain is a coordinated set of tools that work together: one
compiler per source language, a linker for executables and an archiver
for static libraries. Compilers double as language resolvers: given a
source file they decide whether the file is theirs to compile, theirs to
ignore (headers), or not theirs at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from brew.core.errors import (
    CompileFailedError,
    CompileToolUnavailableError,
    LinkerUnavailableError,
    LinkFailedError,
)
from brew.util import commands

if TYPE_CHECKING:
    from brew.core.options import Options
    from brew.manifest.model import Language

logger = logging.getLogger(__name__)


class CompileStatus(Enum):
    """Outcome of offering a file to a compiler."""

    NOT_MINE = "not_mine"
    IGNORE = "ignore"
    COMPILED = "compiled"


def sysroot_flag(sysroot: Path) -> str:
    return f"--sysroot={sysroot}"


class BaseTool:
    """A single external program with a fixed flag list.

    Attributes:
        name: Tool name within the toolchain (e.g. 'cc', 'ar').
        cmd: Program to run.
        flags: Flags placed right after the program name.
    """

    def __init__(self, name: str, cmd: str, flags: Sequence[str] = ()) -> None:
        self.name = name
        self.cmd = cmd
        self.flags = list(flags)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.cmd!r}, flags={self.flags!r})"


class CompilerTool(BaseTool):
    """Compiles single source files of one language to objects.

    Subclasses set the class attributes below.

    Attributes:
        language: Language this tool resolves.
        src_suffixes: Extensions this tool compiles.
        ignore_suffixes: Extensions this tool claims but never compiles.
        use_sysroot: Whether to append ``--sysroot=<sysroot>``.
        verb: Progress message verb.
    """

    language: Language
    src_suffixes: tuple[str, ...] = ()
    ignore_suffixes: tuple[str, ...] = ()
    use_sysroot: bool = True
    verb: str = "Compiling"

    def claim(self, source: Path) -> CompileStatus:
        """Classify a file by extension, without touching the filesystem.

        Returns COMPILED for files this tool compiles.
        """
        suffix = source.suffix
        if suffix in self.src_suffixes:
            return CompileStatus.COMPILED
        if suffix in self.ignore_suffixes:
            return CompileStatus.IGNORE
        return CompileStatus.NOT_MINE

    def command(self, source: Path, destination: Path, sysroot: Path) -> list[str]:
        cmd = [self.cmd, *self.flags, "-o", str(destination), str(source)]
        if self.use_sysroot:
            cmd.append(sysroot_flag(sysroot))
        return cmd

    def compile(
        self,
        source: Path,
        destination: Path,
        options: Options,
        cwd: Path | None = None,
    ) -> CompileStatus:
        """Compile ``source`` to ``destination`` if it is out of date.

        Relative paths are taken relative to ``cwd``, which is also the
        compiler's working directory.

        Returns:
            NOT_MINE if the extension is not handled by this tool, IGNORE
            for ancillary files, COMPILED once the object is up to date.

        Raises:
            CompileToolUnavailableError: If the compiler could not start.
            CompileFailedError: If the compiler exited with an error.
        """
        status = self.claim(source)
        if status is not CompileStatus.COMPILED:
            return status

        base = cwd if cwd is not None else Path()
        if commands.is_newer_or_equal(base / destination, base / source):
            logger.debug("%s is up to date", destination)
            return CompileStatus.COMPILED

        logger.info("%s %s to %s . . .", self.verb, source, destination)
        try:
            returncode = commands.run(
                self.command(source, destination, options.sysroot), cwd=cwd
            )
        except OSError as e:
            raise CompileToolUnavailableError(str(self.language), self.cmd, e) from e
        if returncode != 0:
            raise CompileFailedError(source, returncode)
        return CompileStatus.COMPILED


class LinkTool(BaseTool):
    """Combines object files into a single output."""

    def command(
        self, output: str, objects: Sequence[Path], sysroot: Path
    ) -> list[str]:
        return [
            self.cmd,
            *self.flags,
            "-o",
            output,
            *(str(o) for o in objects),
            sysroot_flag(sysroot),
        ]

    def link(
        self,
        output: str,
        objects: Sequence[Path],
        options: Options,
        cwd: Path | None = None,
    ) -> None:
        """Produce ``output`` from ``objects``.

        Raises:
            LinkerUnavailableError: If the tool could not start.
            LinkFailedError: If the tool exited with an error.
        """
        logger.info("Linking %s . . .", output)
        try:
            returncode = commands.run(
                self.command(output, objects, options.sysroot), cwd=cwd
            )
        except OSError as e:
            raise LinkerUnavailableError(self.cmd, e) from e
        if returncode != 0:
            raise LinkFailedError(output, returncode)


class ArchiveTool(LinkTool):
    """Static library archiver: ``<cmd> <flags> <output> <objects...>``."""

    def command(
        self, output: str, objects: Sequence[Path], sysroot: Path
    ) -> list[str]:
        return [self.cmd, *self.flags, output, *(str(o) for o in objects)]


class BaseToolchain(ABC):
    """Abstract base class for toolchains.

    Subclasses provide one compiler per supported language plus a linker
    and an archiver.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    @abstractmethod
    def compilers(self) -> dict[Language, CompilerTool]:
        """Compilers keyed by language."""
        ...

    @property
    @abstractmethod
    def linker(self) -> LinkTool: ...

    @property
    @abstractmethod
    def archiver(self) -> ArchiveTool: ...

    def compiler_for(self, language: Language) -> CompilerTool:
        return self.compilers[language]

    def __repr__(self) -> str:
        languages = ", ".join(str(lang) for lang in self.compilers)
        return f"{self.__class__.__name__}({self.name!r}, languages=[{languages}])"
