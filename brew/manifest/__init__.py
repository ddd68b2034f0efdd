# SPDX-License-Identifier: MIT
"""Brewfile manifest language: lexer, parser and model."""

from brew.manifest.lexer import Lexer, Token, TokenKind, tokenize
from brew.manifest.model import BrewType, BuildObject, Language, Manifest
from brew.manifest.parser import BREWFILE_NAME, load_manifest, parse_manifest

__all__ = [
    "BREWFILE_NAME",
    "BrewType",
    "BuildObject",
    "Language",
    "Lexer",
    "Manifest",
    "Token",
    "TokenKind",
    "load_manifest",
    "parse_manifest",
    "tokenize",
]
