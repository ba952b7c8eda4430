"""CSV manifest reader: header row, # comments, double-quote quoting."""

from __future__ import annotations

import asyncio
from pathlib import Path

COMMENT_MARKER = "#"


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line into raw field values.

    Commas inside a double-quoted field do not split it, and ``""`` inside a
    quoted field becomes a single literal quote.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and line[i + 1] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


def parse_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text into records keyed by the trimmed header tokens.

    Blank lines and lines starting with ``#`` are skipped. Rows shorter than
    the header are padded with empty strings; extra trailing fields are
    dropped.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = [
        line for line in text.split("\n") if line.strip() and not line.startswith(COMMENT_MARKER)
    ]
    if len(lines) < 2:
        return []

    headers = [h.strip() for h in parse_csv_line(lines[0])]
    records: list[dict[str, str]] = []
    for line in lines[1:]:
        values = parse_csv_line(line)
        records.append(
            {h: (values[i] if i < len(values) else "").strip() for i, h in enumerate(headers)}
        )
    return records


def load_csv(path: Path) -> list[dict[str, str]]:
    """Read and parse a manifest file. Missing or unreadable files give ``[]``."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    return parse_csv(content)


async def read_manifest(path: Path) -> list[dict[str, str]]:
    return await asyncio.to_thread(load_csv, path)


def count_rows(path: Path) -> int | None:
    """Number of data rows in a manifest, or None if the file is absent."""
    try:
        if not path.is_file():
            return None
    except OSError:
        return None
    return len(load_csv(path))
