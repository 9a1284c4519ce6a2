"""Core ledger, search, summary and manual-parsing utilities."""
