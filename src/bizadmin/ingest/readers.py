from __future__ import annotations

from pathlib import Path


class ImportFileError(ValueError):
    """The import file could not be read or decoded. Fatal, nothing is parsed."""


def decode_csv_bytes(data: bytes, *, source: str = "<bytes>") -> str:
    """
    Decode uploaded CSV bytes as UTF-8.

    A leading BOM is kept in the text; the tokenizer drops it.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ImportFileError(f"{source}: not valid UTF-8 ({e.reason} at byte {e.start})") from e


def read_csv_text(path: Path) -> str:
    """
    Read a whole CSV file into memory as text.

    Read as bytes so line endings stay untouched, the tokenizer handles `\\n`, `\\r\\n` and `\\r`.
    Raise `ImportFileError` on a missing/unreadable file or bad encoding.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImportFileError(f"{path}: cannot read file ({e.strerror or e})") from e
    return decode_csv_bytes(data, source=str(path))
