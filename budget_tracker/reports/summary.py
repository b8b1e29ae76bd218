"""
Ledger Summary and Text Chart

DESIGN DECISION: Summaries are DERIVED, never stored.
A LedgerSummary is a snapshot computed from the store at the moment it
is requested. Nothing here mutates the ledger.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from budget_tracker.ledger.store import LedgerStore
from budget_tracker.models.transaction import CategoryTotal


DEFAULT_CHART_SCALE = Decimal("10")
DEFAULT_CHART_MARKER = "#"


class ChartBar(BaseModel):
    """One line of the expense bar chart."""
    model_config = ConfigDict(frozen=True)

    category: str
    total: Decimal
    bar: str = Field(
        ...,
        description="Repeated marker characters proportional to total"
    )

    @property
    def length(self) -> int:
        return len(self.bar)


class LedgerSummary(BaseModel):
    """
    Snapshot of the ledger's aggregates.

    This is what the "view summary" action displays.
    """
    model_config = ConfigDict(frozen=True)

    transaction_count: int = Field(ge=0)
    total_income: Decimal
    total_expenses: Decimal
    net_savings: Decimal
    spending_by_category: dict[str, Decimal] = Field(default_factory=dict)
    largest_category: Optional[CategoryTotal] = None
    chart: list[ChartBar] = Field(default_factory=list)

    @property
    def has_expenses(self) -> bool:
        return bool(self.spending_by_category)


def bar_length(total: Decimal, scale: Decimal = DEFAULT_CHART_SCALE) -> int:
    """
    Number of marker characters for a category total.

    Truncates toward zero: 29.99 at scale 10 is two characters.
    Negative totals produce no bar.
    """
    if scale <= 0:
        raise ValueError("Chart scale must be positive")
    return max(int(total / scale), 0)


def render_text_chart(
    spending: dict[str, Decimal],
    scale: Decimal = DEFAULT_CHART_SCALE,
    marker: str = DEFAULT_CHART_MARKER,
) -> list[ChartBar]:
    """Build one bar per category, in the order of the given mapping."""
    return [
        ChartBar(
            category=category,
            total=total,
            bar=marker * bar_length(total, scale),
        )
        for category, total in spending.items()
    ]


class SummaryBuilder:
    """
    Builds LedgerSummary snapshots from a store.

    GUARANTEES:
    - Every figure is computed from the store's current records
    - An empty ledger yields zeros and no largest category
    """

    def __init__(
        self,
        chart_scale: Decimal = DEFAULT_CHART_SCALE,
        chart_marker: str = DEFAULT_CHART_MARKER,
    ):
        if chart_scale <= 0:
            raise ValueError("Chart scale must be positive")
        self._chart_scale = chart_scale
        self._chart_marker = chart_marker

    def build(self, store: LedgerStore) -> LedgerSummary:
        spending = store.spending_by_category()

        return LedgerSummary(
            transaction_count=len(store),
            total_income=store.total_income(),
            total_expenses=store.total_expenses(),
            net_savings=store.net_savings(),
            spending_by_category=spending,
            largest_category=store.largest_category(),
            chart=render_text_chart(spending, self._chart_scale, self._chart_marker),
        )
