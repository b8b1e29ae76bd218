"""Shared fixtures for the budget tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from budget_tracker.config import get_settings
from budget_tracker.ledger import LedgerStore
from budget_tracker.models.transaction import Transaction, TransactionKind


def make_transaction(
    description="Groceries",
    amount="10.00",
    kind=TransactionKind.EXPENSE,
    category="Food",
    on=date(2024, 1, 15),
) -> Transaction:
    return Transaction(
        description=description,
        amount=Decimal(amount),
        kind=kind,
        category=category,
        date=on,
    )


class RecordingLogger:
    """Stands in for a structlog logger and remembers every call."""

    def __init__(self):
        self.calls = []

    def _record(self, level, event, **kw):
        self.calls.append((level, event, kw))

    def debug(self, event, **kw):
        self._record("debug", event, **kw)

    def info(self, event, **kw):
        self._record("info", event, **kw)

    def warning(self, event, **kw):
        self._record("warning", event, **kw)

    def error(self, event, **kw):
        self._record("error", event, **kw)

    @property
    def event_types(self):
        return [kw["event_type"] for _, _, kw in self.calls]


@pytest.fixture
def sample_transactions():
    return [
        make_transaction("Salary", "2500.00", TransactionKind.INCOME, "Job", date(2024, 1, 1)),
        make_transaction("Rent", "100.00", TransactionKind.EXPENSE, "Rent", date(2024, 1, 3)),
        make_transaction("Lunch", "12.50", TransactionKind.EXPENSE, "Food", date(2024, 1, 2)),
        make_transaction("Dinner", "17.50", TransactionKind.EXPENSE, "Food", date(2024, 1, 5)),
        make_transaction("Refund", "20.00", TransactionKind.INCOME, "Shopping", date(2024, 1, 4)),
    ]


@pytest.fixture
def store(sample_transactions):
    return LedgerStore(sample_transactions)


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test from an empty directory with no ledger env vars."""
    for var in (
        "LEDGER_FILE_PATH",
        "LEDGER_STRICT_SORT",
        "DISPLAY_CHART_SCALE",
        "DISPLAY_CHART_MARKER",
        "DISPLAY_CURRENCY_SYMBOL",
        "LOG_LEVEL",
        "LOG_JSON",
        "DEBUG_MODE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_tx():
    return make_transaction
