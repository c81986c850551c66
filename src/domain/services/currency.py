"""Currency lookup built once per report session."""

from collections.abc import Iterable

from src.domain.models import CurrencyRow
from src.domain.services.normalization import normalize_code


class CurrencyResolver:
    """Map currency identifiers to display codes."""

    def __init__(self, codes: dict[str, str], base_code: str = "") -> None:
        self._codes = dict(codes)
        self._base_code = base_code

    @classmethod
    def from_rows(cls, rows: Iterable[CurrencyRow]) -> "CurrencyResolver":
        """Build a resolver from a snapshot of currency rows.

        Args:
            rows: Currencies fetched from the store.

        Returns:
            CurrencyResolver: Resolver over the snapshot.
        """
        codes: dict[str, str] = {}
        base_code = ""
        for row in rows:
            code = normalize_code(row.code)
            codes[str(row.id)] = code
            if row.is_base and not base_code:
                base_code = code
        return cls(codes, base_code=base_code)

    @classmethod
    def empty(cls) -> "CurrencyResolver":
        return cls({})

    def resolve(self, currency_id: str | None) -> str:
        """Return the code for ``currency_id`` or ``""`` when unknown."""
        if currency_id is None:
            return ""
        return self._codes.get(str(currency_id), "")

    def base_currency_code(self) -> str:
        """Return the code of the base currency, if flagged."""
        return self._base_code

    def __len__(self) -> int:
        return len(self._codes)


__all__ = ["CurrencyResolver"]
