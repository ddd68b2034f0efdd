# SPDX-License-Identifier: MIT
"""Parser for brewfile manifests.

Grammar (one statement per line):

    statement := NEWLINE
               | STRING (NEWLINE | EOF)
               | STRING '=' paramlist (NEWLINE | EOF)
    paramlist := STRING (',' STRING)*

Each statement is a command applied to the Manifest being built. The
built-in commands are ``name``, ``type``, ``languages``, ``dependencies``
and ``priority``; any other command declares a build object and takes
exactly three parameters: language, source path and install target.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from brew.core.errors import (
    ManifestReadError,
    ParameterCountError,
    UnexpectedTokenError,
)
from brew.manifest.lexer import Lexer, Token, TokenKind
from brew.manifest.model import BrewType, BuildObject, Language, Manifest

logger = logging.getLogger(__name__)

BREWFILE_NAME = "brewfile"

_STATEMENT_END = (TokenKind.NEWLINE, TokenKind.EOF)


class Parser:
    """Builds a Manifest from a token stream."""

    def __init__(self, tokens: Iterator[Token]) -> None:
        self._tokens = tokens
        self.manifest = Manifest()

    def _next(self) -> Token:
        return next(self._tokens)

    def parse(self) -> Manifest:
        """Consume statements up to EOF and return the manifest."""
        while True:
            token = self._next()
            if token.kind is TokenKind.EOF:
                return self.manifest
            if token.kind is TokenKind.NEWLINE:
                continue
            if token.kind is not TokenKind.STRING:
                raise UnexpectedTokenError("command", token)

            last = self._statement(token)
            if last.kind is TokenKind.EOF:
                return self.manifest

    def _statement(self, command: Token) -> Token:
        """Parse the rest of a statement. Returns the terminating token."""
        token = self._next()
        if token.kind in _STATEMENT_END:
            self._apply(command, [])
            return token
        if token.kind is not TokenKind.EQUALS:
            raise UnexpectedTokenError("equals or newline", token)

        parameters: list[Token] = []
        while True:
            token = self._next()
            if token.kind is not TokenKind.STRING:
                raise UnexpectedTokenError("parameter", token)
            parameters.append(token)

            token = self._next()
            if token.kind in _STATEMENT_END:
                break
            if token.kind is not TokenKind.COMMA:
                raise UnexpectedTokenError("comma or newline", token)

        self._apply(command, parameters)
        return token

    def _apply(self, command: Token, parameters: list[Token]) -> None:
        name = command.value
        manifest = self.manifest
        logger.debug(
            "%s: %s = %s", command.location, name, [p.value for p in parameters]
        )

        if name == "name":
            _expect_exactly(command, parameters, 1)
            manifest.set_name(parameters[0].value, command.location)
        elif name == "type":
            _expect_exactly(command, parameters, 1)
            brew_type = BrewType.parse(parameters[0].value, parameters[0].location)
            manifest.set_brew_type(brew_type, command.location)
        elif name == "languages":
            _expect_at_least(command, parameters, 1)
            for param in parameters:
                language = Language.parse(param.value, param.location)
                manifest.add_language(language, param.location)
        elif name == "dependencies":
            _expect_at_least(command, parameters, 1)
            for param in parameters:
                manifest.add_dependency(param.value, param.location)
        elif name == "priority":
            _expect_at_least(command, parameters, 1)
            for param in parameters:
                manifest.add_priority(param.value)
        else:
            _expect_exactly(command, parameters, 3, label=f"object {name}")
            language_param, source_param, target_param = parameters
            manifest.add_object(
                BuildObject(
                    name=name,
                    language=Language.parse(
                        language_param.value, language_param.location
                    ),
                    source=Path(source_param.value),
                    install_target=Path(target_param.value),
                )
            )


def _expect_exactly(
    command: Token, parameters: list[Token], count: int, label: str | None = None
) -> None:
    if len(parameters) != count:
        raise ParameterCountError(
            label or command.value,
            count,
            len(parameters),
            location=command.location,
        )


def _expect_at_least(command: Token, parameters: list[Token], count: int) -> None:
    if len(parameters) < count:
        raise ParameterCountError(
            command.value,
            count,
            len(parameters),
            at_least=True,
            location=command.location,
        )


def parse_manifest(text: str, filename: str = BREWFILE_NAME) -> Manifest:
    """Parse brewfile text into a Manifest.

    Args:
        text: Manifest source.
        filename: Name used in error locations.

    Returns:
        The parsed manifest.

    Raises:
        ManifestSyntaxError: On lexical or syntax errors.
        ManifestError: On duplicate assignments.
    """
    return Parser(iter(Lexer(text, filename))).parse()


def load_manifest(directory: Path | str) -> Manifest:
    """Read and parse the brewfile in a project directory."""
    path = Path(directory) / BREWFILE_NAME
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(path, e) from e
    logger.debug("Parsing %s", path)
    return parse_manifest(text, str(path))
