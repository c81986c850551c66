"""Ledger reporting application packages."""
