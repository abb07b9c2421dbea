"""
CSV serialization of stored accounts for export.
"""

import csv
import io
from datetime import date, datetime
from typing import Any, Iterable, Mapping

EXPORT_COLUMNS: tuple[str, ...] = (
    "id",
    "company_name",
    "email",
    "company_type",
    "industry",
    "tags",
    "country",
    "status",
    "website",
    "region",
    "notes",
    "phone",
    "account_owner",
    "created_by",
    "modified_by",
    "created_at",
    "updated_at",
)

TAG_SEPARATOR = ";"


def format_value(value: Any) -> str:
    """
    Render one stored value as CSV text (before quoting).

    Lists are joined with semicolons, datetimes use ISO 8601 and None
    becomes an empty string.
    """
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return TAG_SEPARATOR.join(str(item) for item in value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


class AccountCsvWriter:
    """
    Renders accounts to CSV with a fixed header row.

    Fields containing a comma, a double quote or a line break are wrapped in
    double quotes with inner quotes doubled; all other fields are written bare.
    """

    def __init__(self, columns: Iterable[str] = EXPORT_COLUMNS):
        """
        Initialize CSV writer.

        Args:
            columns: Column order for the header and every row
        """
        self.columns = tuple(columns)

    def render_row(self, account: Mapping[str, Any]) -> list[str]:
        return [format_value(account.get(column)) for column in self.columns]

    def write(self, accounts: Iterable[Mapping[str, Any]]) -> str:
        """
        Serialize accounts to CSV text.

        Args:
            accounts: Stored account rows, already in export order

        Returns:
            CSV text with one header line and one line per account
        """
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(self.columns)
        for account in accounts:
            writer.writerow(self.render_row(account))
        return buffer.getvalue()


def export_filename(today: date | None = None) -> str:
    """File name for an export taken on the given day, e.g. accounts_export_2024-05-01.csv."""
    day = today or date.today()
    return f"accounts_export_{day.isoformat()}.csv"
