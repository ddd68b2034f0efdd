# SPDX-License-Identifier: MIT
"""Build orchestration.

The Orchestrator executes a parsed Manifest against a project directory:

- executables and libraries: compile the ``src`` tree into ``obj``,
  link, compile explicit build objects, and on install copy everything
  into the prefix;
- groups: run brew in each subproject directory, priority entries first;
- clean: remove everything a build produced.

Every path is resolved against the orchestrator's ``root`` directory,
never against the process working directory, and external tools run
with ``root`` as their working directory. The first failure aborts the
run; artifacts already written are left in place.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

from brew.core.errors import (
    DirectoryCreationError,
    DirectoryReadError,
    InstallError,
    NoBrewTypeError,
    RemoveError,
    SubprojectFailedError,
    SubprojectUnavailableError,
    UncompiledFileError,
)
from brew.core.options import Command, Options
from brew.manifest.model import BrewType, BuildObject, Manifest
from brew.toolchains.base import BaseToolchain, CompileStatus
from brew.toolchains.los import LosToolchain
from brew.util import commands

logger = logging.getLogger(__name__)

SOURCES_PATH = Path("src")
OBJECTS_PATH = Path("obj")
INCLUDE_PATH = Path("include")
OBJECT_SUFFIX = ".o"


def default_brew_command() -> list[str]:
    """Command used to run brew recursively in subprojects."""
    return [sys.executable, "-m", "brew.cli"]


def relative_to_subproject(path: Path) -> Path:
    """Adjust a path for a process running one directory deeper."""
    if path.is_absolute():
        return path
    return Path("..") / path


class Orchestrator:
    """Executes a manifest in a project directory.

    Example:
        manifest = load_manifest("kernel")
        Orchestrator(Options(command=Command.INSTALL), root="kernel").execute(manifest)

    Attributes:
        options: Options for this run.
        root: Project directory holding the brewfile.
        toolchain: Tools used to compile, link and archive.
        brew_command: Program and leading arguments used to run brew in
            subprojects.
    """

    def __init__(
        self,
        options: Options,
        root: Path | str = ".",
        toolchain: BaseToolchain | None = None,
        brew_command: list[str] | None = None,
    ) -> None:
        self.options = options
        self.root = Path(root)
        self.toolchain = toolchain if toolchain is not None else LosToolchain()
        self.brew_command = (
            brew_command if brew_command is not None else default_brew_command()
        )

    def execute(self, manifest: Manifest) -> None:
        """Run the selected command for ``manifest``.

        Raises:
            BrewError: On the first failure.
        """
        if manifest.brew_type is BrewType.NONE:
            raise NoBrewTypeError()
        if manifest.brew_type is BrewType.GROUP:
            self.brew_subprojects(manifest)
            return

        if self.options.command is Command.CLEAN:
            self.clean(manifest)
            return

        objects = self.compile_source_directory(manifest)
        self.link(manifest, objects)
        for obj in manifest.objects:
            self.compile_object(obj)

        if self.options.command is Command.INSTALL:
            self.install(manifest)

    # =========================================================================
    # Compilation
    # =========================================================================

    def compile_source_directory(self, manifest: Manifest) -> list[Path]:
        """Compile the whole ``src`` tree.

        Returns:
            Object paths, relative to the project directory, in link order.
        """
        return self._compile_directory(manifest, SOURCES_PATH, OBJECTS_PATH)

    def _compile_directory(
        self, manifest: Manifest, source_dir: Path, object_dir: Path
    ) -> list[Path]:
        try:
            (self.root / object_dir).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreationError(self.root / object_dir, e) from e

        try:
            entries = commands.list_directory(self.root / source_dir)
        except OSError as e:
            raise DirectoryReadError(self.root / source_dir, e) from e

        objects: list[Path] = []
        for entry in entries:
            if commands.is_hidden(entry):
                continue
            source = source_dir / entry.name
            if entry.is_dir():
                objects.extend(
                    self._compile_directory(manifest, source, object_dir / entry.name)
                )
                continue

            destination = (object_dir / entry.name).with_suffix(OBJECT_SUFFIX)
            status = self._compile_file(manifest, source, destination)
            if status is CompileStatus.COMPILED:
                objects.append(destination)
        return objects

    def _compile_file(
        self, manifest: Manifest, source: Path, destination: Path
    ) -> CompileStatus:
        """Offer a file to each declared language in order."""
        for language in manifest.languages:
            compiler = self.toolchain.compiler_for(language)
            status = compiler.compile(source, destination, self.options, cwd=self.root)
            if status is not CompileStatus.NOT_MINE:
                return status
        raise UncompiledFileError(source)

    def compile_object(self, obj: BuildObject) -> None:
        """Compile an explicit build object through its own language."""
        compiler = self.toolchain.compiler_for(obj.language)
        status = compiler.compile(obj.source, obj.output, self.options, cwd=self.root)
        if status is CompileStatus.NOT_MINE:
            raise UncompiledFileError(obj.source)

    # =========================================================================
    # Linking
    # =========================================================================

    def link(self, manifest: Manifest, objects: list[Path]) -> None:
        """Link an executable or archive a library from ``objects``."""
        output = manifest.target_filename()
        logger.debug("Objects to link:")
        for obj in objects:
            logger.debug(" - %s", obj)

        if manifest.brew_type is BrewType.EXECUTABLE:
            tool = self.toolchain.linker
        else:
            tool = self.toolchain.archiver
        tool.link(output, objects, self.options, cwd=self.root)

    # =========================================================================
    # Installation
    # =========================================================================

    @property
    def prefix(self) -> Path:
        return self.root / self.options.prefix

    def install(self, manifest: Manifest) -> None:
        """Copy build objects, the linked target and headers to the prefix."""
        for obj in manifest.objects:
            self._install_file(obj.output, self.prefix / obj.install_target)

        target = manifest.target_filename()
        subdir = "bin" if manifest.brew_type is BrewType.EXECUTABLE else "lib"
        self._install_file(Path(target), self.prefix / subdir / target)

        if manifest.brew_type is BrewType.LIBRARY:
            include_dir = self.root / INCLUDE_PATH
            if include_dir.exists():
                self.install_include_directory(include_dir, self.prefix / "include")

    def _install_file(self, source: Path, destination: Path) -> None:
        logger.info("Installing %s to %s . . .", source, destination)
        try:
            commands.copy(self.root / source, destination)
        except OSError as e:
            raise InstallError(source, e) from e

    def install_include_directory(self, source: Path, destination: Path) -> None:
        """Recursively copy a header tree, keeping its structure."""
        try:
            entries = commands.list_directory(source)
        except OSError as e:
            raise DirectoryReadError(source, e) from e

        for entry in entries:
            target = destination / entry.name
            if entry.is_dir():
                try:
                    target.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise DirectoryCreationError(target, e) from e
                self.install_include_directory(entry, target)
            else:
                logger.info("Installing %s . . .", entry)
                try:
                    commands.copy(entry, target)
                except OSError as e:
                    raise InstallError(entry, e) from e

    # =========================================================================
    # Cleaning
    # =========================================================================

    def clean(self, manifest: Manifest) -> None:
        """Remove the object tree, build objects and the linked target.

        Missing files are skipped, so cleaning twice is harmless.
        """
        object_dir = self.root / OBJECTS_PATH
        if object_dir.exists():
            logger.info("Removing %s . . .", object_dir)
            try:
                shutil.rmtree(object_dir)
            except OSError as e:
                raise RemoveError(object_dir, e) from e

        for obj in manifest.objects:
            self._remove_file(self.root / obj.output)

        self._remove_file(self.root / manifest.target_filename())

    def _remove_file(self, path: Path) -> None:
        if not path.exists():
            return
        logger.info("Removing %s . . .", path)
        try:
            path.unlink()
        except OSError as e:
            raise RemoveError(path, e) from e

    # =========================================================================
    # Groups
    # =========================================================================

    def subproject_order(self, manifest: Manifest) -> list[Path]:
        """Subproject directories in the order they are brewed.

        Priority entries come first in declaration order, followed by the
        remaining non-hidden directories in name order.
        """
        ordered = [Path(name) for name in manifest.priority]
        prioritized = set(ordered)
        try:
            entries = commands.list_directory(self.root)
        except OSError as e:
            raise DirectoryReadError(self.root, e) from e

        for entry in entries:
            if commands.is_hidden(entry) or Path(entry.name) in prioritized:
                continue
            if entry.is_dir():
                ordered.append(Path(entry.name))
        return ordered

    def brew_subprojects(self, manifest: Manifest) -> None:
        for subproject in self.subproject_order(manifest):
            self.brew_subproject(subproject)

    def subproject_command(self) -> list[str]:
        """Arguments for a recursive brew, adjusted for one level deeper."""
        options = self.options
        cmd = [
            *self.brew_command,
            str(options.command),
            "--sysroot",
            str(relative_to_subproject(options.sysroot)),
            "--prefix",
            str(relative_to_subproject(options.prefix)),
        ]
        if options.verbose:
            cmd.append("-v")
        if options.quiet:
            cmd.append("-q")
        return cmd

    def brew_subproject(self, subproject: Path) -> None:
        """Run brew in a subproject directory and wait for it.

        Raises:
            SubprojectUnavailableError: If brew could not be started.
            SubprojectFailedError: If brew exited with an error.
        """
        logger.info("Brewing %s . . .", subproject)
        try:
            returncode = commands.run(
                self.subproject_command(), cwd=self.root / subproject
            )
        except OSError as e:
            raise SubprojectUnavailableError(subproject, e) from e
        if returncode != 0:
            raise SubprojectFailedError(subproject, returncode)
