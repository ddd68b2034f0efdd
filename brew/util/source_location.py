# SPDX-License-Identifier: MIT
"""Source locations for manifest diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A position in a manifest file.

    Attributes:
        filename: Manifest file name (as given to the parser).
        line: 1-based line number.
        column: 1-based column number.
    """

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"
