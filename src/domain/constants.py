"""Domain constants for the general ledger report."""

POSTED_STATUS = "posted"

RANGE_LAST_WEEK = "last_week"
RANGE_LAST_MONTH = "last_month"
RANGE_CUSTOM = "custom"
DATE_RANGE_KINDS = (RANGE_LAST_WEEK, RANGE_LAST_MONTH, RANGE_CUSTOM)
TRAILING_WEEK_DAYS = 7

DISPLAY_LOCAL = "local"
DISPLAY_DOCUMENT = "document"
DISPLAY_MODES = (DISPLAY_LOCAL, DISPLAY_DOCUMENT)

DATE_LABEL_FORMAT = "%d/%m/%Y"

SEARCH_ALL = "all"
SEARCH_COLUMNS = ("all", "date", "type", "narration", "currency", "amount")

SORT_COLUMNS = (
    "date",
    "type",
    "narration",
    "currency",
    "rate",
    "debit",
    "credit",
    "balance",
)
SORT_ASCENDING = "asc"
SORT_DESCENDING = "desc"

# Fields of MergedTransaction that column filters may target.
FILTER_COLUMNS = (
    "date",
    "transaction_type",
    "narration",
    "document_currency_amount",
    "currency_code",
    "exchange_rate",
    "debit",
    "credit",
    "debit_doc",
    "credit_doc",
    "running_balance",
    "running_balance_doc",
)

OPENING_BALANCE_LABEL = "Opening Balance"
CLOSING_BALANCE_LABEL = "Closing Balance"


__all__ = [
    "POSTED_STATUS",
    "RANGE_LAST_WEEK",
    "RANGE_LAST_MONTH",
    "RANGE_CUSTOM",
    "DATE_RANGE_KINDS",
    "TRAILING_WEEK_DAYS",
    "DISPLAY_LOCAL",
    "DISPLAY_DOCUMENT",
    "DISPLAY_MODES",
    "DATE_LABEL_FORMAT",
    "SEARCH_ALL",
    "SEARCH_COLUMNS",
    "SORT_COLUMNS",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "FILTER_COLUMNS",
    "OPENING_BALANCE_LABEL",
    "CLOSING_BALANCE_LABEL",
]
