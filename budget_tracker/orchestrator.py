"""
Main Orchestrator for the Budget Tracker

This module ties together the ledger store, the storage backend and the
audit logger, and defines the operations the console shell offers:
1. Add a transaction
2. View the summary (totals, categories, chart)
3. View all transactions
4. Sort the ledger
5. Save and exit

DESIGN DECISION: The orchestrator enforces the boundaries:
- A failed load leaves the ledger untouched
- Rejected input never reaches the ledger
- Every ledger change is audited
"""

from pathlib import Path
from typing import Optional, Union

from budget_tracker.audit import AuditLogger
from budget_tracker.config import get_settings
from budget_tracker.exceptions import (
    FormatError,
    InvalidSortKeyError,
    ParseError,
    StorageError,
)
from budget_tracker.ledger import LedgerStore
from budget_tracker.models.transaction import SortKey, Transaction
from budget_tracker.reports import LedgerSummary, SummaryBuilder
from budget_tracker.services.storage import (
    FlatFileLedgerStorage,
    LedgerStorageInterface,
)
from budget_tracker.validation import TransactionParser


class LedgerSession:
    """
    One run of the budget tracker against one ledger file.

    Flow:
    1. load() → Replace the store's records with the file's
    2. add / sort / summary / list → Operate on the in-memory store
    3. save() → Write the store back to the file

    The session owns nothing global; the store, storage and logger are
    all handed in.
    """

    def __init__(
        self,
        store: LedgerStore,
        storage: LedgerStorageInterface,
        file_path: Union[str, Path],
        summary_builder: Optional[SummaryBuilder] = None,
        parser: Optional[TransactionParser] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._store = store
        self._storage = storage
        self._file_path = Path(file_path)
        self._summary_builder = summary_builder or SummaryBuilder()
        self._parser = parser or TransactionParser()
        self._audit_logger = audit_logger or AuditLogger()

    @property
    def store(self) -> LedgerStore:
        return self._store

    @property
    def parser(self) -> TransactionParser:
        return self._parser

    @property
    def file_path(self) -> Path:
        return self._file_path

    def load(self) -> int:
        """
        Load the ledger file into the store.

        A missing file is a first run and yields an empty ledger.
        On any error the store keeps its current records.

        Returns:
            Number of transactions loaded

        Raises:
            FormatError, ParseError, StorageError: load aborted
        """
        try:
            records = self._storage.load(self._file_path)
        except (FormatError, ParseError, StorageError) as e:
            self._audit_logger.log_load_failed(str(self._file_path), e)
            raise

        self._store.replace_all(records)
        self._audit_logger.log_ledger_loaded(str(self._file_path), len(records))
        return len(records)

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Append an already-parsed transaction."""
        self._store.add(transaction)
        self._audit_logger.log_transaction_added(
            description=transaction.description,
            amount=str(transaction.amount),
            kind=transaction.kind.value,
        )
        return transaction

    def add_from_input(
        self,
        description: str,
        amount: str,
        kind: str,
        category: str,
        date: str,
    ) -> Transaction:
        """
        Parse raw text fields and append the result.

        Raises:
            ParseError: input rejected; the store is unchanged
        """
        try:
            transaction = self._parser.parse({
                "description": description,
                "amount": amount,
                "kind": kind,
                "category": category,
                "date": date,
            })
        except ParseError as e:
            self._audit_logger.log_invalid_input("transaction", e)
            raise

        return self.add_transaction(transaction)

    def record_invalid_input(self, field: str, error: Exception) -> None:
        """Audit input the shell rejected before building a transaction."""
        self._audit_logger.log_invalid_input(field, error)

    def summary(self) -> LedgerSummary:
        return self._summary_builder.build(self._store)

    def transactions(self) -> tuple[Transaction, ...]:
        return self._store.transactions

    def sort(self, key: Union[SortKey, str]) -> bool:
        """
        Sort the ledger.

        Returns False if the key was unknown and ignored.

        Raises:
            InvalidSortKeyError: unknown key under strict sorting
        """
        label = key.value if isinstance(key, SortKey) else key
        try:
            applied = self._store.sort(key)
        except InvalidSortKeyError:
            self._audit_logger.log_sort_key_ignored(label)
            raise

        if applied:
            sort_key = key if isinstance(key, SortKey) else SortKey.from_label(key)
            self._audit_logger.log_ledger_sorted(sort_key.value, len(self._store))
        else:
            self._audit_logger.log_sort_key_ignored(label)
        return applied

    def save(self) -> int:
        """
        Write the ledger to its file.

        Returns:
            Number of transactions written

        Raises:
            StorageError: file could not be written
        """
        try:
            count = self._storage.save(self._file_path, self._store.transactions)
        except StorageError as e:
            self._audit_logger.log_save_failed(str(self._file_path), e)
            raise

        self._audit_logger.log_ledger_saved(str(self._file_path), count)
        return count


def create_app_components(
    file_path: Optional[Union[str, Path]] = None,
    strict_sort: Optional[bool] = None,
) -> LedgerSession:
    """
    Factory function to create a ready-to-load session from settings.

    Args:
        file_path: Overrides the configured ledger file.
        strict_sort: Overrides the configured sort policy.

    Returns:
        A LedgerSession. Call load() on it before use.
    """
    settings = get_settings()
    ledger_settings = settings.ledger
    display_settings = settings.display

    store = LedgerStore(
        strict_sort=ledger_settings.strict_sort if strict_sort is None else strict_sort,
    )
    summary_builder = SummaryBuilder(
        chart_scale=display_settings.chart_scale,
        chart_marker=display_settings.chart_marker,
    )

    return LedgerSession(
        store=store,
        storage=FlatFileLedgerStorage(),
        file_path=file_path or ledger_settings.file_path,
        summary_builder=summary_builder,
        audit_logger=AuditLogger(),
    )
