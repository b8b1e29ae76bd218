"""Input parsing package."""

from budget_tracker.validation.validator import (
    TransactionParser,
    parse_amount,
    parse_date,
    parse_kind,
    parse_transaction,
)

__all__ = [
    "TransactionParser",
    "parse_amount",
    "parse_date",
    "parse_kind",
    "parse_transaction",
]
