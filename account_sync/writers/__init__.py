"""
Writers for account export files.
"""

from .csv_writer import EXPORT_COLUMNS, AccountCsvWriter, export_filename, format_value

__all__ = ["EXPORT_COLUMNS", "AccountCsvWriter", "export_filename", "format_value"]
