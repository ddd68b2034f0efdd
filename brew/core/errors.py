# SPDX-License-Identifier: MIT
"""Custom exceptions for brew.

All brew exceptions inherit from BrewError, which includes
optional source location information for better error messages.
The command-line front end catches BrewError, prints it and exits
with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brew.manifest.lexer import Token
    from brew.util.source_location import SourceLocation


class BrewError(Exception):
    """Base class for all brew exceptions.

    Attributes:
        message: The error message.
        location: Optional source location where the error occurred.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation | None = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


# =============================================================================
# Manifest syntax
# =============================================================================


class ManifestSyntaxError(BrewError):
    """The brewfile could not be tokenized or parsed."""


class UnknownCharacterError(ManifestSyntaxError):
    """A character outside the manifest charset was found.

    Attributes:
        character: The offending character.
    """

    def __init__(self, character: str, location: SourceLocation) -> None:
        self.character = character
        super().__init__(f"unknown character {character!r} in brewfile", location)


class UnexpectedTokenError(ManifestSyntaxError):
    """The parser found a token it did not expect.

    Attributes:
        expected: Description of what the parser expected.
        token: The token actually found.
    """

    def __init__(self, expected: str, token: Token) -> None:
        self.expected = expected
        self.token = token
        super().__init__(
            f"expected {expected}, instead found {token.describe()} in brewfile",
            token.location,
        )


class ParameterCountError(ManifestSyntaxError):
    """A command was given the wrong number of parameters.

    Attributes:
        command: The command name (``object <name>`` for build objects).
        expected: Required parameter count.
        actual: Parameter count found.
        at_least: True if ``expected`` is a minimum rather than exact.
    """

    def __init__(
        self,
        command: str,
        expected: int,
        actual: int,
        *,
        at_least: bool = False,
        location: SourceLocation | None = None,
    ) -> None:
        self.command = command
        self.expected = expected
        self.actual = actual
        self.at_least = at_least
        qualifier = "at least " if at_least else ""
        super().__init__(
            f"{command} requires {qualifier}{expected} parameters "
            f"but {actual} are specified in brewfile",
            location,
        )


class UnknownBrewTypeError(ManifestSyntaxError):
    """The ``type`` command named an unknown brew type."""

    def __init__(self, value: str, location: SourceLocation | None = None) -> None:
        self.value = value
        super().__init__(f'unknown brew type "{value}" in brewfile', location)


class UnknownLanguageError(ManifestSyntaxError):
    """A language name is not recognized."""

    def __init__(self, value: str, location: SourceLocation | None = None) -> None:
        self.value = value
        super().__init__(f'unknown language "{value}" in brewfile', location)


# =============================================================================
# Manifest semantics
# =============================================================================


class ManifestError(BrewError):
    """The manifest contents are inconsistent or incomplete."""


class DuplicateNameError(ManifestError):
    def __init__(self, location: SourceLocation | None = None) -> None:
        super().__init__(
            "attempting to specify more than one name in brewfile", location
        )


class DuplicateBrewTypeError(ManifestError):
    def __init__(self, location: SourceLocation | None = None) -> None:
        super().__init__(
            "attempting to specify more than one brew type in brewfile", location
        )


class DuplicateLanguageError(ManifestError):
    """A language was listed twice.

    Attributes:
        language: Display name of the repeated language.
    """

    def __init__(self, language: str, location: SourceLocation | None = None) -> None:
        self.language = language
        super().__init__(
            f"attempting to specify language '{language}' twice in brewfile", location
        )


class DuplicateDependencyError(ManifestError):
    """A dependency was listed twice.

    Attributes:
        dependency: The repeated dependency name.
    """

    def __init__(
        self, dependency: str, location: SourceLocation | None = None
    ) -> None:
        self.dependency = dependency
        super().__init__(
            f"attempting to specify dependency '{dependency}' twice in brewfile",
            location,
        )


class NoBrewTypeError(ManifestError):
    def __init__(self) -> None:
        super().__init__("no brew type specified in brewfile")


class NoNameError(ManifestError):
    def __init__(self) -> None:
        super().__init__("no name specified in brewfile")


class ManifestReadError(BrewError):
    """The brewfile could not be read.

    Attributes:
        path: Path of the brewfile.
        error: The underlying OS or decoding error.
    """

    def __init__(self, path: Path, error: OSError | UnicodeDecodeError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"unable to read brewfile {path} ({error})")


# =============================================================================
# Filesystem
# =============================================================================


class FilesystemError(BrewError):
    """A filesystem operation failed.

    Attributes:
        path: The path being operated on.
        error: The underlying OS error.
    """

    action = "access"

    def __init__(self, path: Path | str, error: OSError) -> None:
        self.path = Path(path)
        self.error = error
        super().__init__(f"unable to {self.action} {path} ({error})")


class DirectoryCreationError(FilesystemError):
    action = "create directory"


class DirectoryReadError(FilesystemError):
    action = "read directory"


class InstallError(FilesystemError):
    action = "install"


class RemoveError(FilesystemError):
    action = "remove"


# =============================================================================
# Toolchain
# =============================================================================


class ToolchainError(BrewError):
    """A compiler, linker or archiver could not run or reported failure."""


class CompileToolUnavailableError(ToolchainError):
    """The compiler for a language could not be started.

    Attributes:
        language: Language display name.
        tool: The command that failed to start.
        error: The underlying OS error.
    """

    def __init__(self, language: str, tool: str, error: OSError) -> None:
        self.language = language
        self.tool = tool
        self.error = error
        super().__init__(f"unable to run {language} compiler {tool} ({error})")


class CompileFailedError(ToolchainError):
    """The compiler ran and returned a non-zero exit status.

    Attributes:
        path: Source file that failed to compile.
        returncode: Exit status of the compiler.
    """

    def __init__(self, path: Path, returncode: int | None = None) -> None:
        self.path = path
        self.returncode = returncode
        super().__init__(f"error while compiling {path}")


class LinkerUnavailableError(ToolchainError):
    def __init__(self, tool: str, error: OSError) -> None:
        self.tool = tool
        self.error = error
        super().__init__(f"unable to run linker {tool} ({error})")


class LinkFailedError(ToolchainError):
    """The linker or archiver returned a non-zero exit status.

    Attributes:
        output: The target being linked.
    """

    def __init__(self, output: str, returncode: int | None = None) -> None:
        self.output = output
        self.returncode = returncode
        super().__init__(f"error while linking {output}")


# =============================================================================
# Build tree
# =============================================================================


class UncompiledFileError(BrewError):
    """No declared language claimed a source file.

    Attributes:
        path: The unclaimed file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"could not find appropriate language for {path}")


class SubprojectUnavailableError(BrewError):
    """A recursive brew could not be started.

    Attributes:
        path: Subproject directory.
        error: The underlying OS error.
    """

    def __init__(self, path: Path, error: OSError) -> None:
        self.path = path
        self.error = error
        super().__init__(f"unable to run brew in {path} ({error})")


class SubprojectFailedError(BrewError):
    """A recursive brew returned a non-zero exit status.

    Attributes:
        path: Subproject directory.
    """

    def __init__(self, path: Path, returncode: int | None = None) -> None:
        self.path = path
        self.returncode = returncode
        super().__init__(f"error while brewing {path}")
