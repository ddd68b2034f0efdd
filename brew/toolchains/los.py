# SPDX-License-Identifier: MIT
"""LOS cross toolchain.

Provides the tools used to build native LOS programs:
- NASM assembler (nasm)
- Clang C compiler (clang)
- Clang C++ compiler (clang++)
- Linker (using clang)
- Archiver (ar)

Each program name can be overridden with a BREW_* environment variable
(BREW_AS, BREW_CC, BREW_CXX, BREW_LD, BREW_AR).
"""

from __future__ import annotations

from brew.core.options import get_var
from brew.manifest.model import Language
from brew.toolchains.base import (
    ArchiveTool,
    BaseToolchain,
    CompilerTool,
    LinkTool,
)

TARGET_FLAG = "--target=x86_64-los"

C_FLAGS = (TARGET_FLAG, "-Wall", "-g", "-c", "-I./include")
CXX_FLAGS = C_FLAGS
ASSEMBLER_FLAGS = ("-f", "elf64", "-g", "-F", "dwarf")
LINKER_FLAGS = (TARGET_FLAG,)
ARCHIVER_FLAGS = ("rcs",)


class NasmAssembler(CompilerTool):
    """NASM assembler producing 64-bit ELF objects with DWARF info."""

    language = Language.ASSEMBLY
    src_suffixes = (".asm", ".s")
    use_sysroot = False
    verb = "Assembling"

    def __init__(self) -> None:
        super().__init__("as", get_var("AS", "nasm"), ASSEMBLER_FLAGS)


class ClangCCompiler(CompilerTool):
    language = Language.C
    src_suffixes = (".c",)
    ignore_suffixes = (".h",)

    def __init__(self) -> None:
        super().__init__("cc", get_var("CC", "clang"), C_FLAGS)


class ClangCxxCompiler(CompilerTool):
    language = Language.CXX
    src_suffixes = (".cpp",)
    ignore_suffixes = (".h", ".hpp")

    def __init__(self) -> None:
        super().__init__("cxx", get_var("CXX", "clang++"), CXX_FLAGS)


class ClangLinker(LinkTool):
    def __init__(self) -> None:
        super().__init__("link", get_var("LD", "clang"), LINKER_FLAGS)


class Archiver(ArchiveTool):
    def __init__(self) -> None:
        super().__init__("ar", get_var("AR", "ar"), ARCHIVER_FLAGS)


class LosToolchain(BaseToolchain):
    """Clang/NASM toolchain targeting x86_64-los."""

    def __init__(self) -> None:
        super().__init__("los")
        self._compilers: dict[Language, CompilerTool] = {
            tool.language: tool
            for tool in (NasmAssembler(), ClangCCompiler(), ClangCxxCompiler())
        }
        self._linker = ClangLinker()
        self._archiver = Archiver()

    @property
    def compilers(self) -> dict[Language, CompilerTool]:
        return self._compilers

    @property
    def linker(self) -> LinkTool:
        return self._linker

    @property
    def archiver(self) -> ArchiveTool:
        return self._archiver
