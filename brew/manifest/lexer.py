# SPDX-License-Identifier: MIT
"""Tokenizer for the brewfile manifest language.

The manifest language is line oriented: newlines separate statements
and are emitted as tokens, all other whitespace is skipped. Words are
runs of letters, digits and the path characters ``_ . - + / \\``.
A ``#`` starts a comment that runs to the end of the line.

Example:
    name = hello   # the project name

tokenizes to STRING("name") EQUALS STRING("hello") NEWLINE EOF.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from brew.core.errors import UnknownCharacterError
from brew.util.source_location import SourceLocation

WORD_PUNCTUATION = frozenset("_.-+/\\")


class TokenKind(Enum):
    STRING = "string"
    COMMA = "comma"
    EQUALS = "equals"
    NEWLINE = "newline"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    """A single manifest token.

    Attributes:
        kind: Token kind.
        value: Word text for STRING tokens, empty otherwise.
        location: Where the token starts.
    """

    kind: TokenKind
    value: str
    location: SourceLocation

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column

    def describe(self) -> str:
        """Human-readable token text for diagnostics."""
        if self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        if self.kind is TokenKind.COMMA:
            return "','"
        if self.kind is TokenKind.EQUALS:
            return "'='"
        if self.kind is TokenKind.NEWLINE:
            return "newline"
        return "end of file"


def is_word_char(c: str) -> bool:
    return c.isalnum() or c in WORD_PUNCTUATION


class Lexer:
    """Lazy tokenizer over manifest text.

    Iterating a Lexer tokenizes from the start of the text each time,
    so a Lexer may be walked more than once. The last token is always
    EOF. Errors are raised when the bad character is reached, not up
    front.
    """

    def __init__(self, text: str, filename: str = "brewfile") -> None:
        self.text = text
        self.filename = filename

    def __iter__(self) -> Iterator[Token]:
        return self._tokens()

    def _location(self, line: int, column: int) -> SourceLocation:
        return SourceLocation(self.filename, line, column)

    def _tokens(self) -> Iterator[Token]:
        text = self.text
        end = len(text)
        pos = 0
        line = 1
        column = 1

        while pos < end:
            c = text[pos]

            if c == "\n":
                yield Token(TokenKind.NEWLINE, "", self._location(line, column))
                pos += 1
                line += 1
                column = 1
            elif c.isspace():
                pos += 1
                column += 1
            elif c == "#":
                # Stop at the newline so it is still emitted
                while pos < end and text[pos] != "\n":
                    pos += 1
                    column += 1
            elif c == ",":
                yield Token(TokenKind.COMMA, "", self._location(line, column))
                pos += 1
                column += 1
            elif c == "=":
                yield Token(TokenKind.EQUALS, "", self._location(line, column))
                pos += 1
                column += 1
            elif is_word_char(c):
                start = pos
                while pos < end and is_word_char(text[pos]):
                    pos += 1
                yield Token(
                    TokenKind.STRING, text[start:pos], self._location(line, column)
                )
                column += pos - start
            else:
                raise UnknownCharacterError(c, self._location(line, column))

        yield Token(TokenKind.EOF, "", self._location(line, column))


def tokenize(text: str, filename: str = "brewfile") -> list[Token]:
    """Tokenize manifest text into a list ending with EOF."""
    return list(Lexer(text, filename))
