"""Interface adapters rendering the general ledger."""

__all__ = ["ledger_projection"]
