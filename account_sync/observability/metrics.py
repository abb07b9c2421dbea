"""
Prometheus metrics for account imports and exports

Counters live on a private registry so tests and embedding applications
can read them without touching the global default registry.
"""
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
    write_to_textfile,
)

from account_sync.core.models import ImportSummary

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# IMPORT METRICS
# =======================

# Rows by reconciliation outcome
import_rows_total = Counter(
    name="account_import_rows_total",
    documentation="Total number of import rows by outcome",
    labelnames=["outcome"],  # outcome: created, updated, skipped, failed
    registry=REGISTRY,
)

# Import runs
imports_total = Counter(
    name="account_imports_total",
    documentation="Total number of import runs",
    labelnames=["status"],  # status: success, failure
    registry=REGISTRY,
)

import_duration_seconds = Histogram(
    name="account_import_duration_seconds",
    documentation="Time spent on a whole import run in seconds",
    buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0, 120.0],
    registry=REGISTRY,
)

# =======================
# EXPORT METRICS
# =======================

exports_total = Counter(
    name="account_exports_total",
    documentation="Total number of export runs",
    labelnames=["status"],  # status: success, empty, failure
    registry=REGISTRY,
)

export_rows_total = Counter(
    name="account_export_rows_total",
    documentation="Total number of accounts written to export files",
    registry=REGISTRY,
)

# =======================
# STORE METRICS
# =======================

store_errors_total = Counter(
    name="account_store_errors_total",
    documentation="Total number of store calls that reported an error",
    labelnames=["operation"],  # operation: find_one, insert, update, list_accounts
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """Generate Prometheus metrics in text format"""
    return generate_latest(REGISTRY)


def write_metrics_file(path: str) -> None:
    """
    Write current metrics for the node_exporter textfile collector

    Args:
        path: Target .prom file; written atomically
    """
    write_to_textfile(path, REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


def record_import_summary(summary: ImportSummary, duration_seconds: float) -> None:
    """
    Record the outcome of a completed import.

    Args:
        summary: Tallies of the run
        duration_seconds: Wall-clock time of the run
    """
    for outcome in ("created", "updated", "skipped", "failed"):
        count = getattr(summary, outcome)
        if count > 0:
            increment_counter(import_rows_total, count, outcome=outcome)

    import_duration_seconds.observe(duration_seconds)
    increment_counter(imports_total, 1, status="success")


def record_import_failure() -> None:
    increment_counter(imports_total, 1, status="failure")


def record_export(status: str, row_count: int = 0) -> None:
    """
    Record an export run.

    Args:
        status: "success", "empty" or "failure"
        row_count: Accounts written to the file
    """
    increment_counter(exports_total, 1, status=status)
    if row_count > 0:
        increment_counter(export_rows_total, row_count)


def record_store_error(operation: str) -> None:
    increment_counter(store_errors_total, 1, operation=operation)
