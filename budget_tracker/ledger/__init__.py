"""In-memory ledger package."""

from budget_tracker.ledger.store import LedgerStore

__all__ = ["LedgerStore"]
