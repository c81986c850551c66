"""Streamlit general ledger entry point."""

from collections.abc import Sequence
from datetime import date

import altair as alt
import streamlit as st

from src.adapters.interface.ledger_projection import format_amount, project
from src.application.use_cases.general_ledger_session import (
    GeneralLedgerSession,
)
from src.domain.constants import (
    DISPLAY_DOCUMENT,
    DISPLAY_LOCAL,
    FILTER_COLUMNS,
    RANGE_CUSTOM,
    RANGE_LAST_MONTH,
    RANGE_LAST_WEEK,
    SEARCH_COLUMNS,
    SORT_COLUMNS,
)
from src.domain.models import AccountDTO, DateRangeSelection, MergedTransaction
from src.domain.policies.account_filters import filter_accounts
from src.infrastructure.container import (
    build_accounts_use_case,
    build_general_ledger_session,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerSettings

SESSION_KEY = "general_ledger_session"
SELECTION_KEY = "general_ledger_selection"

RANGE_LABELS = {
    RANGE_LAST_WEEK: "Last Week",
    RANGE_LAST_MONTH: "Last Month",
    RANGE_CUSTOM: "Custom Range",
}
SEARCH_LABELS = {
    "all": "All Columns",
    "date": "Date",
    "type": "Type",
    "narration": "Description",
    "currency": "Currency",
    "amount": "Amount",
}
FILTER_LABELS = {
    "date": "Date",
    "transaction_type": "Transaction Type",
    "narration": "Description",
    "document_currency_amount": "Doc. Amount",
    "currency_code": "Currency",
    "exchange_rate": "Exchange Rate",
    "debit": "Debit",
    "credit": "Credit",
    "debit_doc": "Debit (document currency)",
    "credit_doc": "Credit (document currency)",
    "running_balance": "Balance",
    "running_balance_doc": "Balance (document currency)",
}
DISPLAY_LABELS = {
    DISPLAY_LOCAL: "Display without document currency",
    DISPLAY_DOCUMENT: "Display with document currency",
}


def _fetch_accounts() -> Sequence[AccountDTO]:
    """Fetch active accounts from the ledger database."""
    use_case = build_accounts_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_accounts() -> Sequence[AccountDTO]:
    """Cached wrapper around _fetch_accounts for Streamlit sessions."""
    return _fetch_accounts()


def _get_session() -> GeneralLedgerSession:
    """Return the report session stored in ``st.session_state``."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = build_general_ledger_session()
    return st.session_state[SESSION_KEY]


def _refresh_if_needed(
    session: GeneralLedgerSession,
    account: AccountDTO,
    selection: DateRangeSelection,
    today: date | None = None,
) -> None:
    """Reload the report when the account, range or current day changed.

    Relative ranges trail the current day, so a new day invalidates them.
    """
    today = today or date.today()
    key = (account.id, selection, today)
    if st.session_state.get(SELECTION_KEY) == key:
        return
    st.session_state[SELECTION_KEY] = key
    session.load(account.id, selection, today=today)
    get_usage_logger().info(
        f"General ledger loaded for account {account.code} "
        f"({selection.kind})"
    )


def _select_account(accounts: Sequence[AccountDTO]) -> AccountDTO | None:
    """Render the searchable account picker."""
    term = st.text_input("Account", placeholder="Search accounts...")
    matches = filter_accounts(accounts, term)
    if not matches:
        st.caption("No accounts found")
        return None
    return st.selectbox(
        "Matching accounts",
        options=matches,
        format_func=lambda account: account.label,
        index=None,
        placeholder="Please select an account",
    )


def _select_range(default_range: str) -> DateRangeSelection:
    """Render the date range selector."""
    kinds = list(RANGE_LABELS)
    kind = st.selectbox(
        "Date Range",
        options=kinds,
        index=kinds.index(default_range),
        format_func=RANGE_LABELS.get,
    )
    if kind != RANGE_CUSTOM:
        return DateRangeSelection(kind=kind)
    start_col, end_col = st.columns(2)
    start = start_col.date_input("From Date", value=None)
    end = end_col.date_input("To Date", value=None)
    return DateRangeSelection(
        kind=kind,
        custom_start=start.isoformat() if isinstance(start, date) else None,
        custom_end=end.isoformat() if isinstance(end, date) else None,
    )


def _render_view_controls(session: GeneralLedgerSession) -> None:
    """Render search, filter and sort controls bound to the view state."""
    state = session.view_state
    search_col, column_col = st.columns([3, 1])
    search_text = search_col.text_input(
        "Search transactions",
        value=state.search_text,
    )
    search_column = column_col.selectbox(
        "Search in",
        options=list(SEARCH_COLUMNS),
        index=SEARCH_COLUMNS.index(state.search_column),
        format_func=SEARCH_LABELS.get,
    )
    session.update_view(search_text=search_text, search_column=search_column)

    filter_col, value_col = st.columns([1, 3])
    filter_column = filter_col.selectbox(
        "Filter column",
        options=list(FILTER_COLUMNS),
        format_func=FILTER_LABELS.get,
    )
    current = next(
        (
            item.value
            for item in state.column_filters
            if item.column == filter_column
        ),
        "",
    )
    filter_value = value_col.text_input("Filter value", value=current)
    session.set_filter(filter_column, filter_value)

    sort_col, toggle_col = st.columns([3, 1])
    sort_column = sort_col.selectbox(
        "Sort by",
        options=list(SORT_COLUMNS),
        index=SORT_COLUMNS.index(session.view_state.sort.column),
    )
    if sort_column != session.view_state.sort.column:
        session.toggle_sort(sort_column)
    arrow = "▼" if session.view_state.sort.descending else "▲"
    if toggle_col.button(f"{arrow} Direction"):
        session.toggle_sort(sort_column)


def _render_balance_chart(rows: Sequence[MergedTransaction]) -> None:
    """Render the running balance over time as a line chart."""
    if not rows:
        return
    data = [
        {
            "date": row.transaction_date.isoformat(),
            "balance": float(row.running_balance),
            "balance_label": format_amount(row.running_balance),
        }
        for row in rows
    ]
    chart = alt.Chart(alt.Data(values=data)).mark_line(
        point=True,
        interpolate="step-after",
    ).encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y("balance:Q", title="Running balance"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("balance_label:N", title="Balance"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="General Ledger", layout="wide")
    st.title("General Ledger")

    settings = LedgerSettings.from_env()
    accounts = _load_accounts()
    if not accounts:
        st.warning("No active accounts found.")
        return

    session = _get_session()
    account = _select_account(accounts)
    selection = _select_range(settings.default_range)
    modes = list(DISPLAY_LABELS)
    display_mode = st.radio(
        "Currency Display",
        options=modes,
        index=modes.index(settings.display_mode),
        format_func=DISPLAY_LABELS.get,
        horizontal=True,
    )

    if account is None:
        session.clear()
        st.session_state.pop(SELECTION_KEY, None)
        st.info("Please select an account to view transactions")
        return

    _refresh_if_needed(session, account, selection)
    if session.error:
        st.error(session.error)
        return
    report = session.report
    if report is None:
        return
    for notice in report.notices:
        st.warning(notice)

    st.metric("Opening Balance", format_amount(report.opening_balance.balance))
    if display_mode == DISPLAY_DOCUMENT and report.base_currency_code:
        st.caption(
            f"Debit, Credit and Balance are in the base currency "
            f"{report.base_currency_code}"
        )
    _render_view_controls(session)
    rows = session.visible_rows()
    table = project(
        rows,
        report.opening_balance,
        display_mode,
        closing_balance=report.closing_balance,
    )
    st.caption(
        f"{len(rows)} of {len(report.postings)} transactions shown, "
        f"{report.window.start:%d/%m/%Y} to {report.window.end:%d/%m/%Y}"
    )
    st.dataframe(
        table.records,
        column_order=list(table.columns),
        width="stretch",
        hide_index=True,
    )
    _render_balance_chart(report.postings)


if __name__ == "__main__":  # pragma: no cover
    main()
