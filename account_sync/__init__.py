"""
account-sync: CSV import/export and reconciliation of CRM accounts.
"""

__version__ = "0.1.0"
