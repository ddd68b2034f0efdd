# SPDX-License-Identifier: MIT
"""Tests for brew.manifest.model."""

from pathlib import Path

import pytest

from brew.core.errors import NoNameError, UnknownLanguageError
from brew.manifest.model import BrewType, BuildObject, Language, Manifest


class TestLanguage:
    @pytest.mark.parametrize(
        "name,language",
        [
            ("assembly", Language.ASSEMBLY),
            ("asm", Language.ASSEMBLY),
            ("c", Language.C),
            ("cpp", Language.CXX),
            ("c++", Language.CXX),
            ("cplusplus", Language.CXX),
        ],
    )
    def test_parse(self, name, language):
        assert Language.parse(name) is language

    def test_parse_unknown(self):
        with pytest.raises(UnknownLanguageError, match='"go"'):
            Language.parse("go")

    def test_display(self):
        assert str(Language.CXX) == "C++"


class TestManifest:
    def test_defaults(self):
        manifest = Manifest()
        assert manifest.name is None
        assert manifest.brew_type is BrewType.NONE
        assert manifest.languages == []
        assert manifest.objects == []

    def test_target_filename(self):
        manifest = Manifest(name="hello", brew_type=BrewType.EXECUTABLE)
        assert manifest.target_filename() == "hello.app"
        manifest = Manifest(name="c", brew_type=BrewType.LIBRARY)
        assert manifest.target_filename() == "libc.a"

    def test_target_filename_requires_name(self):
        with pytest.raises(NoNameError):
            Manifest(brew_type=BrewType.LIBRARY).target_filename()

    def test_describe(self):
        manifest = Manifest()
        manifest.set_name("kernel")
        manifest.set_brew_type(BrewType.EXECUTABLE)
        manifest.add_language(Language.C)
        manifest.add_dependency("libc")
        manifest.add_object(
            BuildObject("boot.o", Language.ASSEMBLY, Path("boot.asm"), Path("boot/boot.o"))
        )
        text = manifest.describe()
        assert text.splitlines()[:2] == ["Name: kernel", "Brew Type: Executable"]
        assert " - C" in text
        assert " - libc" in text
        assert "boot.o (Assembly" in text
        assert "Priority" not in text


class TestBuildObject:
    def test_paths_are_normalized(self):
        obj = BuildObject("x.o", Language.C, "src/x.c", "lib/x.o")
        assert obj.source == Path("src/x.c")
        assert obj.install_target == Path("lib/x.o")
        assert obj.output == Path("x.o")
