from __future__ import annotations

from typing import Iterator

_BOM = "\ufeff"


def _iter_rows(text: str) -> Iterator[list[str]]:
    """
    Scan `text` character by character and yield each row's raw fields.

    Outside quotes:
    - `,` ends a field,
    - `\\n`, `\\r` or a `\\r\\n` pair ends a row,
    - `"` switches into quoted mode (also mid-field).

    Inside quotes:
    - `""` is one literal quote,
    - a lone `"` switches back out,
    - everything else (commas and line breaks too) is literal.
    """
    row: list[str] = []
    buf: list[str] = []
    in_quotes = False
    i, n = 0, len(text)

    while i < n:
        ch = text[i]

        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    buf.append('"')
                    i += 1              # consume the escaped quote
                else:
                    in_quotes = False
            else:
                buf.append(ch)

        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(buf))
            buf.clear()
        elif ch == "\n" or ch == "\r":
            row.append("".join(buf))
            buf.clear()
            yield row
            row = []
            if ch == "\r" and i + 1 < n and text[i + 1] == "\n":
                i += 1                  # CRLF is one terminator
        else:
            buf.append(ch)

        i += 1

    # last row without a trailing newline (an unterminated quote runs to EOF).
    if buf or row:
        row.append("".join(buf))
        yield row


def _is_blank(row: list[str]) -> bool:
    return len(row) == 1 and row[0].strip() == ""


def parse_csv_text(text: str) -> list[list[str]]:
    """
    Tokenize decoded CSV text into rows of raw (untrimmed) string fields.

    A single leading BOM is dropped. Blank lines are discarded wherever they occur,
    so a trailing newline (or several) never produces an empty row.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return [row for row in _iter_rows(text) if not _is_blank(row)]
