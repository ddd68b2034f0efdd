# SPDX-License-Identifier: MIT
"""Toolchain definitions."""

from brew.toolchains.base import (
    ArchiveTool,
    BaseToolchain,
    CompilerTool,
    CompileStatus,
    LinkTool,
)
from brew.toolchains.los import (
    Archiver,
    ClangCCompiler,
    ClangCxxCompiler,
    ClangLinker,
    LosToolchain,
    NasmAssembler,
)

__all__ = [
    # Base classes
    "ArchiveTool",
    "BaseToolchain",
    "CompileStatus",
    "CompilerTool",
    "LinkTool",
    # LOS toolchain
    "Archiver",
    "ClangCCompiler",
    "ClangCxxCompiler",
    "ClangLinker",
    "LosToolchain",
    "NasmAssembler",
]
