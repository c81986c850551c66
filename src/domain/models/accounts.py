"""Domain models for chart-of-accounts entries."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountDTO:
    """Serializable representation of an active ledger account."""

    id: str
    code: str
    name: str

    @property
    def label(self) -> str:
        """Return the ``code - name`` label used by account pickers."""
        return f"{self.code} - {self.name}"


__all__ = ["AccountDTO"]
