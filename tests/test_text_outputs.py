"""
Archive and local save helper tests
"""
import io
import zipfile
from pathlib import Path

import pytest

import text_outputs
from text_outputs import (
    build_zip,
    is_pdf,
    open_folder,
    open_folder_command,
    relative_output_path,
    resolve_output_root,
    split_relative,
    txt_name,
)


class TestNames:

    @pytest.mark.parametrize("name,expected", [
        ("report.pdf", "report.txt"),
        ("REPORT.PDF", "REPORT.txt"),
        ("a.b.pdf", "a.b.txt"),
        ("noext", "noext.txt"),
        ("dir/inner.pdf", "inner.txt"),
        ("..\\..\\evil.pdf", "evil.txt"),
        ("C:\\Users\\me\\scan.pdf", "scan.txt"),
        (".pdf", ".txt"),
        ("..", "document.txt"),
    ])
    def test_txt_name(self, name, expected):
        assert txt_name(name) == expected

    def test_is_pdf(self):
        assert is_pdf("x.pdf")
        assert is_pdf("X.PdF")
        assert not is_pdf("x.pdf.txt")
        assert not is_pdf("")
        assert not is_pdf(None)


class TestBuildZip:

    def test_entries_are_utf8_text(self):
        data = build_zip([("a.txt", "alpha"), ("b.txt", "bêta")])
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            assert zf.namelist() == ["a.txt", "b.txt"]
            assert zf.read("b.txt").decode("utf-8") == "bêta"

    def test_duplicate_names_are_numbered(self):
        data = build_zip([("a.txt", "1"), ("a.txt", "2"), ("a.txt", "3")])
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            assert zf.namelist() == ["a.txt", "a (2).txt", "a (3).txt"]
            assert zf.read("a (3).txt") == b"3"


class TestRelativePaths:
    """Rebuilding the uploaded folder structure"""

    def test_split_relative_drops_unsafe_parts(self):
        assert split_relative("top/../sub/./x.pdf") == ["top", "sub", "x.pdf"]
        assert split_relative("top\\sub\\x.pdf") == ["top", "sub", "x.pdf"]
        assert split_relative("") == []

    def test_root_uses_output_dir_and_top_folder(self, tmp_path):
        root = resolve_output_root(str(tmp_path), ["papers/2024/a.pdf"], Path("/unused"))
        assert root == tmp_path / "papers"

    def test_root_defaults_without_output_dir(self, tmp_path):
        assert resolve_output_root("", [], tmp_path) == tmp_path
        assert resolve_output_root(None, [""], tmp_path) == tmp_path

    def test_nested_path_drops_top_folder(self, tmp_path):
        path = relative_output_path(tmp_path / "papers", "papers/2024/a.pdf", "a.pdf")
        assert path == tmp_path / "papers" / "2024" / "a.txt"

    def test_single_component_path(self, tmp_path):
        assert relative_output_path(tmp_path, "a.pdf", "a.pdf") == tmp_path / "a.txt"

    def test_missing_path_uses_filename(self, tmp_path):
        assert relative_output_path(tmp_path, None, "Scan.PDF") == tmp_path / "Scan.txt"
        assert relative_output_path(tmp_path, "", "scan.pdf") == tmp_path / "scan.txt"

    def test_backslash_filename_stays_inside_root(self, tmp_path):
        path = relative_output_path(tmp_path, None, "..\\..\\evil.pdf")
        assert path == tmp_path / "evil.txt"

    def test_traversal_stays_inside_root(self, tmp_path):
        path = relative_output_path(tmp_path, "top/../../etc/x.pdf", "x.pdf")
        assert path == tmp_path / "etc" / "x.txt"


class TestOpenFolder:

    @pytest.mark.parametrize("system,program", [
        ("Darwin", "open"),
        ("Linux", "xdg-open"),
        ("Windows", "explorer"),
    ])
    def test_command_per_platform(self, system, program, tmp_path):
        assert open_folder_command(tmp_path, system) == [program, str(tmp_path)]

    def test_open_folder_does_not_wait(self, monkeypatch, tmp_path):
        started = []

        class FakePopen:
            def __init__(self, cmd, **kwargs):
                started.append(cmd)

        monkeypatch.setattr(text_outputs.platform, "system", lambda: "Linux")
        monkeypatch.setattr(text_outputs.subprocess, "Popen", FakePopen)

        open_folder(tmp_path)
        assert started == [["xdg-open", str(tmp_path)]]
