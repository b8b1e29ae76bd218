"""
Property Tests for the Ledger

INVARIANTS:

    total_income() - total_expenses() == net_savings()
    sum(spending_by_category().values()) == total_expenses()
    load(save(records)) == records        (no delimiter in text fields)
    sort("date")   → dates non-decreasing
    sort("amount") → amounts non-increasing
"""

import tempfile
from decimal import Decimal
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from budget_tracker.ledger import LedgerStore
from budget_tracker.models.transaction import Transaction, TransactionKind
from budget_tracker.services.storage import DELIMITER, FlatFileLedgerStorage


# =============================================================================
# STRATEGIES
# =============================================================================

safe_text = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs",),
        exclude_characters=DELIMITER + "\n\r",
    ),
    max_size=30,
)

amounts = st.decimals(
    min_value=Decimal("-100000"),
    max_value=Decimal("1000000"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)


@st.composite
def transactions(draw):
    return Transaction(
        description=draw(safe_text),
        amount=draw(amounts),
        kind=draw(st.sampled_from(TransactionKind)),
        category=draw(st.sampled_from(["Food", "Rent", "Travel", "food", "Bills"])),
        date=draw(st.dates()),
    )


ledgers = st.lists(transactions(), max_size=40)


# =============================================================================
# AGGREGATION LAWS
# =============================================================================

@given(records=ledgers)
def test_net_savings_is_income_minus_expenses(records):
    """Net savings is income minus expenses."""
    store = LedgerStore()
    for record in records:
        store.add(record)

    assert store.total_income() - store.total_expenses() == store.net_savings()


@given(records=ledgers)
def test_category_totals_sum_to_total_expenses(records):
    """Category totals partition total expenses."""
    store = LedgerStore(records)
    spending = store.spending_by_category()

    assert sum(spending.values(), Decimal("0")) == store.total_expenses()
    assert set(spending) == {r.category for r in records if r.is_expense}


@given(records=ledgers)
def test_largest_category_is_a_maximum(records):
    """The largest category holds the maximum total."""
    store = LedgerStore(records)
    largest = store.largest_category()
    spending = store.spending_by_category()

    if not spending:
        assert largest is None
    else:
        assert largest.total == max(spending.values())
        assert spending[largest.category] == largest.total


# =============================================================================
# SORTING
# =============================================================================

@given(records=ledgers)
def test_sort_by_date_is_non_decreasing(records):
    """Date sorting yields non-decreasing dates."""
    store = LedgerStore(records)
    store.sort("date")
    ordered = store.transactions

    assert all(ordered[i].date <= ordered[i + 1].date for i in range(len(ordered) - 1))


@given(records=ledgers)
def test_sort_by_amount_is_non_increasing(records):
    """Amount sorting yields non-increasing amounts."""
    store = LedgerStore(records)
    store.sort("amount")
    ordered = store.transactions

    assert all(ordered[i].amount >= ordered[i + 1].amount for i in range(len(ordered) - 1))


@given(records=ledgers)
def test_sort_is_a_permutation(records):
    """Sorting never adds or drops records."""
    store = LedgerStore(records)
    store.sort("category")

    assert sorted(store.transactions, key=repr) == sorted(records, key=repr)


# =============================================================================
# PERSISTENCE
# =============================================================================

@settings(max_examples=50, deadline=None)
@given(records=st.lists(transactions(), min_size=1, max_size=20))
def test_save_then_load_round_trips(records):
    """Saved ledgers load back unchanged."""
    storage = FlatFileLedgerStorage()
    with tempfile.TemporaryDirectory() as directory:
        path = Path(directory) / "transactions.txt"
        storage.save(path, records)
        assert storage.load(path) == records
