"""
Command-line interface for account import and export.

Usage:
    account-sync import --input <file_path> --user <user_id> [options]
    account-sync export [--output-dir <dir>] [options]
"""

import argparse
import os
import sys
from pathlib import Path

from account_sync.core.models import OperationReport, OperationState
from account_sync.core.vocabulary import AccountVocabulary
from account_sync.observability.logger import get_logger
from account_sync.observability.metrics import write_metrics_file
from account_sync.readers.csv_parser import QUOTE_MODES
from account_sync.service import ImportExportService
from account_sync.store import AccountStore, DatabaseConnectionPool, InMemoryAccountStore, PostgresAccountStore

logger = get_logger(__name__)


def open_store(args) -> tuple[AccountStore, DatabaseConnectionPool | None]:
    """
    Build the account store for a command.

    Returns:
        (store, pool) where pool is None for the in-memory dry-run store
    """
    if args.dry_run:
        logger.info("DRY RUN MODE: reconciling against an empty in-memory store")
        return InMemoryAccountStore(), None

    pool = DatabaseConnectionPool(
        host=args.db_host,
        port=args.db_port,
        database=args.db_name,
        user=args.db_user,
        password=args.db_password
    )
    pool.open()
    return PostgresAccountStore(pool), pool


def print_report(report: OperationReport) -> None:
    notification = report.notification
    stream = sys.stderr if notification.is_error else sys.stdout
    print(f"{notification.title}: {notification.description}", file=stream)

    if report.summary is not None:
        for message in report.summary.errors + report.summary.failures:
            print(f"  {message}", file=stream)


def import_command(args) -> int:
    """
    Execute the import command.

    Returns:
        Process exit code
    """
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    vocabulary = AccountVocabulary.from_yaml(args.vocabulary) if args.vocabulary else None
    text = input_path.read_text(encoding="utf-8-sig")

    store, pool = open_store(args)
    try:
        service = ImportExportService(store, vocabulary=vocabulary, quote_mode=args.quote_mode)
        report = service.handle_import(text, args.user, OperationState())
    finally:
        if pool is not None:
            pool.close()

    print_report(report)
    return 1 if report.notification.is_error else 0


def export_command(args) -> int:
    """
    Execute the export command.

    Returns:
        Process exit code
    """
    store, pool = open_store(args)
    try:
        report = ImportExportService(store).handle_export(OperationState())
    finally:
        if pool is not None:
            pool.close()

    if report.export_file is not None:
        output_dir = Path(args.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / report.export_file.filename
        output_path.write_text(report.export_file.content, encoding="utf-8")
        logger.info(f"Wrote {report.export_file.row_count} accounts to {output_path}")

    print_report(report)
    return 1 if report.notification.is_error else 0


def add_db_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--db-host",
        default=os.getenv("DB_HOST", "localhost"),
        help="Database host (default: $DB_HOST or localhost)"
    )
    parser.add_argument(
        "--db-port",
        type=int,
        default=int(os.getenv("DB_PORT", "5432")),
        help="Database port (default: $DB_PORT or 5432)"
    )
    parser.add_argument(
        "--db-name",
        default=os.getenv("DB_NAME", "crm"),
        help="Database name (default: $DB_NAME or crm)"
    )
    parser.add_argument(
        "--db-user",
        default=os.getenv("DB_USER", "crm"),
        help="Database user (default: $DB_USER or crm)"
    )
    parser.add_argument(
        "--db-password",
        default=os.getenv("DB_PASSWORD"),
        help="Database password (default: $DB_PASSWORD)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Use an empty in-memory store instead of the database"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="account-sync",
        description="Import and export CRM accounts as CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Import a CSV file as user u-123
  account-sync import --input accounts.csv --user u-123

  # Validate a file without touching the database
  account-sync import --input accounts.csv --user u-123 --dry-run

  # Import a file whose quoted fields contain escaped quotes ("")
  account-sync import --input accounts.csv --user u-123 --quote-mode strict

  # Export all accounts to ./exports
  account-sync export --output-dir exports
        """
    )

    parser.add_argument(
        "--metrics-file",
        default=None,
        help="Write Prometheus metrics to this file when the command finishes"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    import_parser = subparsers.add_parser("import", help="Import accounts from a CSV file")
    import_parser.add_argument("--input", required=True, help="Path to CSV file")
    import_parser.add_argument("--user", required=True, help="Id of the user performing the import")
    import_parser.add_argument(
        "--quote-mode",
        default="toggle",
        choices=list(QUOTE_MODES),
        help="Quote handling (default: toggle)"
    )
    import_parser.add_argument(
        "--vocabulary",
        default=None,
        help="YAML file overriding valid statuses and tags"
    )
    add_db_arguments(import_parser)

    export_parser = subparsers.add_parser("export", help="Export accounts to a CSV file")
    export_parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the export file (default: current directory)"
    )
    add_db_arguments(export_parser)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "import":
            exit_code = import_command(args)
        else:
            exit_code = export_command(args)
    except Exception as e:
        logger.error(f"Error during {args.command}: {e}", exc_info=True)
        exit_code = 1

    if args.metrics_file:
        write_metrics_file(args.metrics_file)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
