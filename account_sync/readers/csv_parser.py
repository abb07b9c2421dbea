"""
Line-oriented CSV parsing for account imports.

Two quote modes are supported:

- ``toggle`` (default): every double quote flips the in-quotes state and is
  dropped. A doubled quote inside a quoted field is therefore not an escaped
  quote. Files exported before strict mode existed parse exactly as they
  always have.
- ``strict``: RFC 4180 quoting, where ``""`` inside a quoted field is a
  literal quote and a quoted field may span line breaks. Whole files read
  with ``read_rows`` round-trip what the exporter writes.

In both modes every field is trimmed of surrounding whitespace.
"""

import csv
import io
import re
from typing import Literal

QuoteMode = Literal["toggle", "strict"]

QUOTE_MODES: tuple[str, ...] = ("toggle", "strict")

_HEADER_INVALID_CHARS = re.compile(r"[^a-z0-9_]")


def parse_line(line: str, quote_mode: QuoteMode = "toggle") -> list[str]:
    """
    Split one CSV line into trimmed fields.

    Args:
        line: A single line without embedded line breaks
        quote_mode: "toggle" or "strict"

    Returns:
        Fields in source order; always separators + 1 entries

    Raises:
        ValueError: If quote_mode is unknown
    """
    if quote_mode == "toggle":
        return _parse_toggle(line)
    if quote_mode == "strict":
        return _parse_strict(line)
    raise ValueError(f"Unsupported quote mode: {quote_mode}")


def _parse_toggle(line: str) -> list[str]:
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def _parse_strict(line: str) -> list[str]:
    # skipinitialspace lets `a, "b,c"` open a quoted field after the comma
    reader = csv.reader([line.rstrip("\r\n")], skipinitialspace=True, strict=False)
    row = next(reader, [])
    if not row:
        return [""]
    return [field.strip() for field in row]


def normalize_header(header: str) -> str:
    """
    Map a raw header to its canonical key.

    Lower-cases the header and replaces every character outside [a-z0-9_]
    with an underscore. "Company Name!" becomes "company_name_".
    """
    return _HEADER_INVALID_CHARS.sub("_", header.lower())


def normalize_headers(headers: list[str]) -> list[str]:
    """Normalize every header; duplicates are kept as-is."""
    return [normalize_header(h) for h in headers]


def split_lines(text: str) -> list[str]:
    """
    Split file content into lines, dropping lines that are blank.

    Lines are split on "\\n" only; a trailing "\\r" is left on the line
    and removed later by field trimming.
    """
    return [line for line in text.split("\n") if line.strip()]


def read_rows(text: str, quote_mode: QuoteMode = "toggle") -> list[list[str]]:
    """
    Parse whole file content into rows of trimmed fields, dropping blank rows.

    In toggle mode every non-blank line is one row. In strict mode a quoted
    field may contain line breaks, so one row can span several lines.

    Args:
        text: Whole file content
        quote_mode: "toggle" or "strict"

    Returns:
        Rows in file order, header row first

    Raises:
        ValueError: If quote_mode is unknown
    """
    if quote_mode == "toggle":
        return [_parse_toggle(line) for line in split_lines(text)]
    if quote_mode != "strict":
        raise ValueError(f"Unsupported quote mode: {quote_mode}")

    rows = []
    for row in csv.reader(io.StringIO(text, newline=""), skipinitialspace=True, strict=False):
        # A blank line reads as [] or a single whitespace-only field
        if not row or (len(row) == 1 and not row[0].strip()):
            continue
        rows.append([field.strip() for field in row])
    return rows
