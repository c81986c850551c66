"""Error taxonomy for ledger reporting."""


class LedgerError(Exception):
    """Base class for ledger reporting errors."""


class QueryFailureError(LedgerError):
    """The ledger store is unreachable or rejected a query."""


class InvalidRangeError(LedgerError):
    """The requested report window is unparsable or inverted."""


class ReferentialGapError(LedgerError):
    """A posting line references a header outside the fetched window.

    The assembler does not raise it: the line is dropped and the error only
    carries the diagnostic message written to the logs.
    """

    def __init__(self, line_id: str, header_id: str) -> None:
        super().__init__(
            f"Posting line {line_id} references unknown header {header_id}"
        )
        self.line_id = line_id
        self.header_id = header_id


__all__ = [
    "LedgerError",
    "QueryFailureError",
    "InvalidRangeError",
    "ReferentialGapError",
]
