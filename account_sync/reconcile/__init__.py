"""
Reconciliation of imported accounts against the account store.
"""

from .engine import ReconciliationEngine

__all__ = ["ReconciliationEngine"]
