"""
Readers for account import files.
"""

from .csv_parser import QUOTE_MODES, normalize_header, normalize_headers, parse_line, read_rows, split_lines

__all__ = ["QUOTE_MODES", "parse_line", "read_rows", "normalize_header", "normalize_headers", "split_lines"]
