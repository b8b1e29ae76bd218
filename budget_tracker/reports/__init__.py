"""Summary and display package."""

from budget_tracker.reports.formatting import format_amount, format_transaction_line
from budget_tracker.reports.summary import (
    ChartBar,
    LedgerSummary,
    SummaryBuilder,
    bar_length,
    render_text_chart,
)

__all__ = [
    "ChartBar",
    "LedgerSummary",
    "SummaryBuilder",
    "bar_length",
    "format_amount",
    "format_transaction_line",
    "render_text_chart",
]
