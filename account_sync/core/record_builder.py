"""
Turns the lines of an import file into validated ImportRecords.

Flow per data row: parse -> zip against normalized headers -> resolve
company name, status and tags -> attach audit fields.
"""

from typing import Any

from account_sync.core.exceptions import InsufficientRowsError
from account_sync.core.models import ImportRecord, RecordBatch
from account_sync.core.validators import (
    AllowedValueValidator,
    RequiredFieldValidator,
    TagSetValidator,
    ValidationError,
)
from account_sync.core.vocabulary import DEFAULT_VOCABULARY, AccountVocabulary
from account_sync.observability.logger import get_logger
from account_sync.readers.csv_parser import QuoteMode, normalize_headers, parse_line, read_rows

logger = get_logger(__name__)

# Header aliases for the natural key, in priority order
COMPANY_NAME_ALIASES: tuple[str, ...] = ("company_name", "name", "company")

PASSTHROUGH_FIELDS: tuple[str, ...] = (
    "email",
    "region",
    "country",
    "website",
    "company_type",
    "notes",
    "industry",
    "phone",
)


def row_to_mapping(headers: list[str], values: list[str]) -> dict[str, str | None]:
    """
    Zip values against headers.

    Missing trailing values and empty strings map to None. When two headers
    share a key the later column wins. Values past the last header are ignored.
    """
    record: dict[str, str | None] = {}
    for idx, header in enumerate(headers):
        value = values[idx] if idx < len(values) else None
        record[header] = value or None
    return record


class RecordBuilder:
    """
    Builds ImportRecords from CSV lines against an account vocabulary.

    Rows without a company name are rejected with a line-numbered message;
    every other row yields a record. Status and tags are normalized silently.
    """

    def __init__(
        self,
        vocabulary: AccountVocabulary | None = None,
        quote_mode: QuoteMode = "toggle"
    ):
        """
        Initialize record builder.

        Args:
            vocabulary: Valid statuses and tags (built-in set if None)
            quote_mode: CSV quote handling, see readers.csv_parser
        """
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY
        self.quote_mode = quote_mode

        self.company_name_validator = RequiredFieldValidator(
            "company_name", {"aliases": list(COMPANY_NAME_ALIASES)}
        )
        self.status_validator = AllowedValueValidator(
            "status",
            {"allowed": self.vocabulary.statuses, "default": self.vocabulary.default_status}
        )
        self.tags_validator = TagSetValidator("tags", {"allowed": self.vocabulary.tags})

    def build(self, lines: list[str], acting_user_id: str) -> RecordBatch:
        """
        Build records from non-blank file lines.

        Args:
            lines: Header line followed by data lines
            acting_user_id: User performing the import (audit fields)

        Returns:
            RecordBatch with accepted records and per-row error messages

        Raises:
            InsufficientRowsError: If fewer than two lines are given
        """
        return self.build_rows([parse_line(line, self.quote_mode) for line in lines], acting_user_id)

    def build_text(self, text: str, acting_user_id: str) -> RecordBatch:
        """
        Build records from whole file content.

        In strict quote mode a quoted field may span line breaks.
        """
        return self.build_rows(read_rows(text, self.quote_mode), acting_user_id)

    def build_rows(self, rows: list[list[str]], acting_user_id: str) -> RecordBatch:
        """
        Build records from parsed rows, header row first.

        Row numbers in error messages count the header as row 1.

        Raises:
            InsufficientRowsError: If there is no header or no data row
        """
        if len(rows) < 2:
            raise InsufficientRowsError()

        headers = normalize_headers(rows[0])
        batch = RecordBatch()

        for idx, values in enumerate(rows[1:], start=2):
            row = row_to_mapping(headers, values)
            try:
                batch.records.append(self.build_record(row, acting_user_id, line_number=idx))
            except ValidationError as e:
                message = f"Row {idx}: {e.message}"
                logger.warning(message, extra={"line_number": idx, "rule": e.rule_name})
                batch.errors.append(message)

        return batch

    def build_record(
        self,
        row: dict[str, Any],
        acting_user_id: str,
        line_number: int | None = None
    ) -> ImportRecord:
        """
        Validate one raw row.

        Raises:
            ValidationError: If the row has no company name under any alias
        """
        company_name = self.company_name_validator.validate(row)

        fields = {name: row.get(name) or None for name in PASSTHROUGH_FIELDS}

        return ImportRecord(
            id=row.get("id") or None,
            company_name=company_name,
            status=self.status_validator.validate(row),
            tags=self.tags_validator.validate(row),
            created_by=row.get("created_by") or acting_user_id,
            account_owner=row.get("account_owner") or acting_user_id,
            modified_by=acting_user_id,
            line_number=line_number,
            **fields,
        )
