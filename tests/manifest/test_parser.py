# SPDX-License-Identifier: MIT
"""Tests for brew.manifest.parser."""

from __future__ import annotations

from pathlib import Path

import pytest

from brew.core.errors import (
    DuplicateBrewTypeError,
    DuplicateDependencyError,
    DuplicateLanguageError,
    DuplicateNameError,
    ManifestReadError,
    ParameterCountError,
    UnexpectedTokenError,
    UnknownBrewTypeError,
    UnknownCharacterError,
    UnknownLanguageError,
)
from brew.manifest.model import BrewType, BuildObject, Language
from brew.manifest.parser import load_manifest, parse_manifest


class TestParseCommands:
    def test_type_and_languages(self) -> None:
        manifest = parse_manifest("type = library\nlanguages = c, assembly\n")
        assert manifest.brew_type is BrewType.LIBRARY
        assert set(manifest.languages) == {Language.C, Language.ASSEMBLY}

    def test_languages_keep_declaration_order(self) -> None:
        manifest = parse_manifest("languages = cpp, asm, c\n")
        assert manifest.languages == [Language.CXX, Language.ASSEMBLY, Language.C]

    def test_full_manifest(self) -> None:
        text = (
            "# kernel brewfile\n"
            "name = kernel\n"
            "type = executable\n"
            "\n"
            "languages = c, asm\n"
            "dependencies = libc, libk\n"
            "boot.o = asm, boot/boot.asm, boot/boot.o\n"
        )
        manifest = parse_manifest(text)
        assert manifest.name == "kernel"
        assert manifest.brew_type is BrewType.EXECUTABLE
        assert manifest.dependencies == ["libc", "libk"]
        assert manifest.objects == [
            BuildObject(
                name="boot.o",
                language=Language.ASSEMBLY,
                source=Path("boot/boot.asm"),
                install_target=Path("boot/boot.o"),
            )
        ]

    def test_priority_order_preserved(self) -> None:
        manifest = parse_manifest("type = group\npriority = libc, kernel\npriority = a\n")
        assert manifest.brew_type is BrewType.GROUP
        assert manifest.priority == ["libc", "kernel", "a"]

    def test_unknown_command_is_build_object(self) -> None:
        manifest = parse_manifest("mything = c, src/x.c, lib/x")
        assert len(manifest.objects) == 1
        obj = manifest.objects[0]
        assert obj.name == "mything"
        assert obj.language is Language.C
        assert obj.source == Path("src/x.c")
        assert obj.install_target == Path("lib/x")

    def test_last_statement_without_newline(self) -> None:
        manifest = parse_manifest("name = foo")
        assert manifest.name == "foo"

    def test_blank_lines_and_comments(self) -> None:
        manifest = parse_manifest("\n\n# nothing\n\n")
        assert manifest.name is None
        assert manifest.brew_type is BrewType.NONE


class TestParameterCount:
    def test_name_with_two_parameters(self) -> None:
        with pytest.raises(ParameterCountError) as excinfo:
            parse_manifest("name = a, b\n")
        err = excinfo.value
        assert err.command == "name"
        assert err.expected == 1
        assert err.actual == 2
        assert not err.at_least
        assert err.location is not None
        assert err.location.line == 1

    def test_zero_parameter_command(self) -> None:
        with pytest.raises(ParameterCountError) as excinfo:
            parse_manifest("type\n")
        assert excinfo.value.expected == 1
        assert excinfo.value.actual == 0

    def test_languages_requires_at_least_one(self) -> None:
        with pytest.raises(ParameterCountError) as excinfo:
            parse_manifest("name = x\nlanguages\n")
        err = excinfo.value
        assert err.command == "languages"
        assert err.at_least
        assert err.location.line == 2
        assert "at least 1" in str(err)

    def test_object_requires_three(self) -> None:
        with pytest.raises(ParameterCountError) as excinfo:
            parse_manifest("thing = c, src/x.c\n")
        err = excinfo.value
        assert err.command == "object thing"
        assert err.expected == 3
        assert err.actual == 2


class TestDuplicates:
    def test_duplicate_type(self) -> None:
        with pytest.raises(DuplicateBrewTypeError) as excinfo:
            parse_manifest("type = library\ntype = executable\n")
        assert excinfo.value.location.line == 2

    def test_duplicate_name(self) -> None:
        with pytest.raises(DuplicateNameError):
            parse_manifest("name = a\nname = a\n")

    def test_duplicate_language_alias(self) -> None:
        with pytest.raises(DuplicateLanguageError) as excinfo:
            parse_manifest("languages = cpp, c++\n")
        assert excinfo.value.language == "C++"
        assert excinfo.value.location.column == 18

    def test_duplicate_dependency(self) -> None:
        with pytest.raises(DuplicateDependencyError) as excinfo:
            parse_manifest("dependencies = libc\ndependencies = libc\n")
        assert excinfo.value.dependency == "libc"


class TestUnknownValues:
    def test_unknown_brew_type(self) -> None:
        with pytest.raises(UnknownBrewTypeError) as excinfo:
            parse_manifest("type = plugin\n")
        assert excinfo.value.value == "plugin"
        assert excinfo.value.location.column == 8

    def test_none_is_not_a_brew_type(self) -> None:
        with pytest.raises(UnknownBrewTypeError):
            parse_manifest("type = none\n")

    def test_unknown_language(self) -> None:
        with pytest.raises(UnknownLanguageError) as excinfo:
            parse_manifest("languages = c, rust\n")
        assert excinfo.value.value == "rust"

    def test_unknown_object_language(self) -> None:
        with pytest.raises(UnknownLanguageError):
            parse_manifest("x.o = fortran, src/x.f, lib/x.o\n")

    def test_language_names_are_case_sensitive(self) -> None:
        with pytest.raises(UnknownLanguageError):
            parse_manifest("languages = C\n")


class TestUnexpectedTokens:
    def test_statement_starting_with_equals(self) -> None:
        with pytest.raises(UnexpectedTokenError) as excinfo:
            parse_manifest("= foo\n")
        assert excinfo.value.expected == "command"

    def test_missing_equals(self) -> None:
        with pytest.raises(UnexpectedTokenError) as excinfo:
            parse_manifest("name foo\n")
        err = excinfo.value
        assert err.expected == "equals or newline"
        assert err.token.value == "foo"
        assert "brewfile:1:6" in str(err)

    def test_trailing_comma(self) -> None:
        with pytest.raises(UnexpectedTokenError) as excinfo:
            parse_manifest("languages = c,\n")
        assert excinfo.value.expected == "parameter"

    def test_empty_parameter_list(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse_manifest("name =\n")

    def test_missing_comma(self) -> None:
        with pytest.raises(UnexpectedTokenError) as excinfo:
            parse_manifest("languages = c asm\n")
        assert excinfo.value.expected == "comma or newline"

    def test_lexical_errors_propagate(self) -> None:
        with pytest.raises(UnknownCharacterError):
            parse_manifest("name = foo;\n")


class TestLoadManifest:
    def test_reads_brewfile(self, tmp_path: Path) -> None:
        (tmp_path / "brewfile").write_text("name = hello\ntype = executable\n")
        manifest = load_manifest(tmp_path)
        assert manifest.name == "hello"

    def test_errors_name_the_file(self, tmp_path: Path) -> None:
        (tmp_path / "brewfile").write_text("name = a, b\n")
        with pytest.raises(ParameterCountError) as excinfo:
            load_manifest(tmp_path)
        assert str(tmp_path / "brewfile") in str(excinfo.value)

    def test_missing_brewfile(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestReadError) as excinfo:
            load_manifest(tmp_path)
        assert excinfo.value.path == tmp_path / "brewfile"
        assert isinstance(excinfo.value.error, FileNotFoundError)

    def test_invalid_utf8(self, tmp_path: Path) -> None:
        (tmp_path / "brewfile").write_bytes(b"name = \xff\n")
        with pytest.raises(ManifestReadError) as excinfo:
            load_manifest(tmp_path)
        assert isinstance(excinfo.value.error, UnicodeDecodeError)
        assert "unable to read brewfile" in str(excinfo.value)
