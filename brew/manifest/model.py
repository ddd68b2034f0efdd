# SPDX-License-Identifier: MIT
"""In-memory model of a brewfile.

A Manifest is filled in by the parser one command at a time and then
handed to the orchestrator. Single-valued fields (name, brew type) may
only be assigned once, and languages and dependencies may not repeat.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from brew.core.errors import (
    DuplicateBrewTypeError,
    DuplicateDependencyError,
    DuplicateLanguageError,
    DuplicateNameError,
    NoNameError,
    UnknownBrewTypeError,
    UnknownLanguageError,
)

if TYPE_CHECKING:
    from brew.util.source_location import SourceLocation


class BrewType(Enum):
    NONE = "none"
    EXECUTABLE = "executable"
    LIBRARY = "library"
    GROUP = "group"

    @classmethod
    def parse(
        cls, name: str, location: SourceLocation | None = None
    ) -> BrewType:
        """Parse a ``type`` value. ``none`` cannot be written in a brewfile."""
        for brew_type in (cls.EXECUTABLE, cls.LIBRARY, cls.GROUP):
            if brew_type.value == name:
                return brew_type
        raise UnknownBrewTypeError(name, location)

    def __str__(self) -> str:
        return self.value.capitalize()


class Language(Enum):
    ASSEMBLY = "Assembly"
    C = "C"
    CXX = "C++"

    @classmethod
    def parse(
        cls, name: str, location: SourceLocation | None = None
    ) -> Language:
        """Parse a language name as written in a brewfile."""
        language = _LANGUAGE_NAMES.get(name)
        if language is None:
            raise UnknownLanguageError(name, location)
        return language

    def __str__(self) -> str:
        return self.value


_LANGUAGE_NAMES = {
    "assembly": Language.ASSEMBLY,
    "asm": Language.ASSEMBLY,
    "c": Language.C,
    "cpp": Language.CXX,
    "c++": Language.CXX,
    "cplusplus": Language.CXX,
}


@dataclass
class BuildObject:
    """An explicitly declared artifact.

    Build objects are compiled from a single source file, independently
    of the ``src`` tree scan, and installed to their own location.

    Attributes:
        name: Output file name, relative to the project directory.
        language: Language used to compile the source.
        source: Source file, relative to the project directory.
        install_target: Install path, relative to the prefix.
    """

    name: str
    language: Language
    source: Path
    install_target: Path

    def __post_init__(self) -> None:
        self.source = Path(self.source)
        self.install_target = Path(self.install_target)

    @property
    def output(self) -> Path:
        return Path(self.name)

    def __str__(self) -> str:
        return f"{self.name} ({self.language}, {self.source} -> {self.install_target})"


@dataclass
class Manifest:
    """A parsed brewfile.

    Attributes:
        name: Project name, used to name the linked target.
        brew_type: What the project builds.
        languages: Languages in declaration order. Source files are
            offered to languages in this order.
        dependencies: Library names the project depends on. These are
            recorded and shown in verbose output but not yet used when
            compiling or linking.
        objects: Explicit build objects.
        priority: Subproject directories a group builds first, in order.
    """

    name: str | None = None
    brew_type: BrewType = BrewType.NONE
    languages: list[Language] = field(default_factory=list)
    dependencies: list[str] = field(default_factory=list)
    objects: list[BuildObject] = field(default_factory=list)
    priority: list[str] = field(default_factory=list)

    def set_name(self, name: str, location: SourceLocation | None = None) -> None:
        if self.name is not None:
            raise DuplicateNameError(location)
        self.name = name

    def set_brew_type(
        self, brew_type: BrewType, location: SourceLocation | None = None
    ) -> None:
        if self.brew_type is not BrewType.NONE:
            raise DuplicateBrewTypeError(location)
        self.brew_type = brew_type

    def add_language(
        self, language: Language, location: SourceLocation | None = None
    ) -> None:
        if language in self.languages:
            raise DuplicateLanguageError(str(language), location)
        self.languages.append(language)

    def add_dependency(
        self, dependency: str, location: SourceLocation | None = None
    ) -> None:
        if dependency in self.dependencies:
            raise DuplicateDependencyError(dependency, location)
        self.dependencies.append(dependency)

    def add_object(self, obj: BuildObject) -> None:
        self.objects.append(obj)

    def add_priority(self, subproject: str) -> None:
        self.priority.append(subproject)

    def require_name(self) -> str:
        """Return the project name, raising NoNameError if unset."""
        if self.name is None:
            raise NoNameError()
        return self.name

    def target_filename(self) -> str:
        """File name of the linked target: ``<name>.app`` or ``lib<name>.a``."""
        name = self.require_name()
        if self.brew_type is BrewType.EXECUTABLE:
            return f"{name}.app"
        return f"lib{name}.a"

    def describe(self) -> str:
        lines: list[str] = []
        if self.name is not None:
            lines.append(f"Name: {self.name}")
        lines.append(f"Brew Type: {self.brew_type}")
        sections: list[tuple[str, list]] = [
            ("Languages", self.languages),
            ("Dependencies", self.dependencies),
            ("Objects", self.objects),
            ("Priority", self.priority),
        ]
        for title, items in sections:
            if items:
                lines.append(f"{title}:")
                lines.extend(f" - {item}" for item in items)
        return "\n".join(lines)
