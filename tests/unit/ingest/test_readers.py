from __future__ import annotations

from pathlib import Path

import pytest

from bizadmin.ingest.readers import ImportFileError, decode_csv_bytes, read_csv_text


def test_reads_text_untouched(tmp_path: Path) -> None:
    path = tmp_path / "x.csv"
    path.write_bytes(b"a,b\r\n1,2\r\n")
    assert read_csv_text(path) == "a,b\r\n1,2\r\n"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ImportFileError, match="cannot read file"):
        read_csv_text(tmp_path / "nope.csv")


def test_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(ImportFileError):
        read_csv_text(tmp_path)


def test_bad_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin1.csv"
    path.write_bytes("name\nCafé\n".encode("latin-1"))
    with pytest.raises(ImportFileError, match="not valid UTF-8"):
        read_csv_text(path)


def test_import_file_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        decode_csv_bytes(b"\xff\xfe", source="upload")
