"""
Ledger Store

DESIGN DECISION: The ordered transaction list is the single source of truth.
Totals and breakdowns are computed fresh on every call; nothing is cached,
so an aggregate can never be stale relative to the records.

The store is an explicit object owned by the caller. There is no
module-level ledger instance.
"""

from decimal import Decimal
from typing import Iterable, Iterator, Optional, Union

from budget_tracker.exceptions import InvalidSortKeyError
from budget_tracker.models.transaction import (
    CategoryTotal,
    SortKey,
    Transaction,
    TransactionKind,
)


class LedgerStore:
    """
    Holds the ordered sequence of transactions for one session.

    GUARANTEES:
    - Insertion order is preserved until sort() is called
    - Sorting is stable; equal keys keep their relative order
    - Aggregates on an empty ledger are zero, never an error
    """

    def __init__(
        self,
        transactions: Optional[Iterable[Transaction]] = None,
        strict_sort: bool = False,
    ):
        """
        Initialize the store.

        Args:
            transactions: Initial records, kept in the given order.
            strict_sort: If True, sort() raises InvalidSortKeyError for
                        unknown keys. Otherwise unknown keys are a no-op.
        """
        self._transactions: list[Transaction] = list(transactions or [])
        self._strict_sort = strict_sort

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only snapshot of the records in current order."""
        return tuple(self._transactions)

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add(self, transaction: Transaction) -> None:
        """Append a transaction to the end of the ledger."""
        self._transactions.append(transaction)

    def replace_all(self, transactions: Iterable[Transaction]) -> None:
        """Discard every record and take ownership of a new sequence."""
        self._transactions = list(transactions)

    def clear(self) -> None:
        self._transactions.clear()

    def sort(self, key: Union[SortKey, str]) -> bool:
        """
        Re-order the ledger in place.

        - date: oldest first
        - amount: largest first
        - category: ascending code-point order (case-sensitive)

        Returns True if the ledger was sorted, False if the key was not
        recognised and the order was left untouched.

        Raises:
            InvalidSortKeyError: unknown key and strict sorting enabled
        """
        sort_key = key if isinstance(key, SortKey) else SortKey.from_label(key)

        if sort_key is None:
            if self._strict_sort:
                valid = ", ".join(k.value for k in SortKey)
                raise InvalidSortKeyError(
                    f"Unknown sort key: {key!r}. Expected one of: {valid}"
                )
            return False

        if sort_key == SortKey.DATE:
            self._transactions.sort(key=lambda t: t.date)
        elif sort_key == SortKey.AMOUNT:
            self._transactions.sort(key=lambda t: t.amount, reverse=True)
        elif sort_key == SortKey.CATEGORY:
            self._transactions.sort(key=lambda t: t.category)

        return True

    # -------------------------------------------------------------------------
    # Aggregation
    # -------------------------------------------------------------------------

    def _total_for(self, kind: TransactionKind) -> Decimal:
        return sum(
            (t.amount for t in self._transactions if t.kind == kind),
            Decimal("0"),
        )

    def total_income(self) -> Decimal:
        """Sum of all Income amounts."""
        return self._total_for(TransactionKind.INCOME)

    def total_expenses(self) -> Decimal:
        """Sum of all Expense amounts."""
        return self._total_for(TransactionKind.EXPENSE)

    def net_savings(self) -> Decimal:
        return self.total_income() - self.total_expenses()

    def spending_by_category(self) -> dict[str, Decimal]:
        """
        Total expenses per category.

        Keys appear in the order each category was first seen.
        """
        groups: dict[str, Decimal] = {}

        for transaction in self._transactions:
            if not transaction.is_expense:
                continue
            groups[transaction.category] = (
                groups.get(transaction.category, Decimal("0")) + transaction.amount
            )

        return groups

    def largest_category(self) -> Optional[CategoryTotal]:
        """
        The expense category with the highest total.

        Ties go to the category encountered first. Returns None when
        the ledger holds no expenses.
        """
        spending = self.spending_by_category()
        if not spending:
            return None

        # max() keeps the first of equal maxima
        category = max(spending, key=spending.__getitem__)
        return CategoryTotal(category=category, total=spending[category])
