from __future__ import annotations

from pathlib import Path

import pytest

from xmlcompare_web.domain.errors import ReadError
from xmlcompare_web.repositories.file_repository import FileRepository


def test_load_reads_bytes_and_extension(tmp_path: Path):
    p = tmp_path / "Doc.XML"
    p.write_bytes(b"<a/>")

    got = FileRepository().load(p)

    assert got.content == b"<a/>"
    assert got.extension == "xml"
    assert got.name == str(p)


def test_load_accepts_str_path(tmp_path: Path):
    p = tmp_path / "notes.txt"
    p.write_text("hi", encoding="utf-8")

    assert FileRepository().load(str(p)).extension == "txt"


def test_load_missing_file_raises_read_error(tmp_path: Path):
    with pytest.raises(ReadError, match="No such file"):
        FileRepository().load(tmp_path / "nope.xml")


def test_load_directory_raises_read_error(tmp_path: Path):
    with pytest.raises(ReadError, match="Not a regular file"):
        FileRepository().load(tmp_path)


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_load_empty_path_raises_read_error(raw):
    with pytest.raises(ReadError):
        FileRepository().load(raw)


def test_load_os_error_is_wrapped(tmp_path: Path, monkeypatch):
    p = tmp_path / "locked.xml"
    p.write_bytes(b"<a/>")

    def boom(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_bytes", boom)

    with pytest.raises(ReadError, match="Permission denied"):
        FileRepository().load(p)


def test_from_upload_without_extension():
    got = FileRepository().from_upload("README", b"x")
    assert got.extension == ""
    assert got.name == "README"


def test_from_upload_requires_a_name():
    with pytest.raises(ReadError):
        FileRepository().from_upload("  ", b"x")


def test_load_unknown_home_directory_raises_read_error():
    with pytest.raises(ReadError):
        FileRepository().load("~no_such_user_for_xmlcompare/a.xml")


def test_load_overlong_name_raises_read_error(tmp_path: Path):
    with pytest.raises(ReadError):
        FileRepository().load(tmp_path / ("x" * 300 + ".xml"))


def test_load_exists_failure_is_wrapped(tmp_path: Path, monkeypatch):
    def boom(self):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "exists", boom)

    with pytest.raises(ReadError, match="Permission denied: a.xml"):
        FileRepository().load(tmp_path / "a.xml")
