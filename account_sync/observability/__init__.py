"""
Logging and metrics for account-sync.
"""
