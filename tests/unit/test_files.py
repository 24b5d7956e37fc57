"""Tests for the File collaborator and concatenation."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetmix.core.files import (
    ConcatenateFailed,
    File,
    LineStripMinifier,
    Minifier,
    MinifyFailed,
    concatenate,
)


class UpperMinifier:
    def minify(self, text: str, suffix: str) -> str:
        return text.upper() + suffix


class TestFile:
    def test_write_read_delete(self, tmp_path: Path):
        f = File(tmp_path / "nested" / "hot")
        f.write("hot reloading enabled")
        assert f.exists()
        assert f.read() == "hot reloading enabled"
        f.delete()
        assert not f.exists()

    def test_delete_missing_is_noop(self, tmp_path: Path):
        File(tmp_path / "absent").delete()

    def test_exists_at(self, tmp_path: Path):
        assert File.exists_at(tmp_path) is True
        assert File.exists_at(tmp_path / "absent") is False

    def test_minify_default(self, tmp_path: Path):
        f = File(tmp_path / "app.js").write("  var a = 1;\n\n    var b = 2;  \n")
        f.minify()
        assert f.read() == "var a = 1;\nvar b = 2;"

    def test_minify_custom_backend(self, tmp_path: Path):
        f = File(tmp_path / "app.css", UpperMinifier()).write("a{}")
        f.minify()
        assert f.read() == "A{}.css"

    def test_minify_missing_file(self, tmp_path: Path):
        with pytest.raises(MinifyFailed):
            File(tmp_path / "absent.js").minify()

    def test_protocol(self):
        assert isinstance(LineStripMinifier(), Minifier)
        assert isinstance(UpperMinifier(), Minifier)


class TestConcatenate:
    def test_order_preserved(self, tmp_path: Path):
        (tmp_path / "a.js").write_text("a();\n", encoding="utf-8")
        (tmp_path / "b.js").write_text("b();", encoding="utf-8")
        out = concatenate([tmp_path / "b.js", tmp_path / "a.js"], tmp_path / "out" / "all.js")
        assert out.read_text(encoding="utf-8") == "b();\na();\n"

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(ConcatenateFailed):
            concatenate([tmp_path / "absent.js"], tmp_path / "all.js")
        assert not (tmp_path / "all.js").exists()
