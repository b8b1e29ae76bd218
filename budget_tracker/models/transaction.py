"""
Core Data Models for the Budget Tracker

These models define the schemas for all data flowing through the ledger.
They are designed to:
1. Enforce type safety at construction time
2. Be immutable once created (transactions are never edited)
3. Be serializable for storage and display

DESIGN DECISION: Amounts are Decimal, never float.
Totals must add up to the cent, and float rounding would break that.
"""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class TransactionKind(str, Enum):
    """
    Whether a transaction is money coming in or going out.

    The values are the labels written to the ledger file.
    """
    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_label(cls, label: str) -> Optional["TransactionKind"]:
        """Look up a kind by label, ignoring case and surrounding whitespace."""
        normalized = label.strip().lower()
        for kind in cls:
            if kind.value.lower() == normalized:
                return kind
        return None


class SortKey(str, Enum):
    """Keys the ledger can be re-sorted by."""
    DATE = "date"            # oldest first
    AMOUNT = "amount"        # largest first
    CATEGORY = "category"    # alphabetical, case-sensitive

    @classmethod
    def from_label(cls, label: str) -> Optional["SortKey"]:
        """Look up a sort key by name, ignoring case. None if unknown."""
        try:
            return cls(label.strip().lower())
        except ValueError:
            return None


# =============================================================================
# CORE TRANSACTION MODEL
# =============================================================================

class Transaction(BaseModel):
    """
    A single income or expense entry.

    Transactions have no identity field; they are identified only by
    their position in the ledger. Once created they cannot be changed.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    description: str = Field(
        ...,
        description="What the money was for"
    )
    # Non-negative by convention, not enforced
    amount: Decimal = Field(
        ...,
        allow_inf_nan=False,
        description="Amount of the transaction"
    )
    kind: TransactionKind = Field(
        ...,
        description="Income or Expense"
    )
    category: str = Field(
        ...,
        description="Free-text label used to group expenses"
    )
    date: datetime.date = Field(
        ...,
        description="Calendar date of the transaction"
    )

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, v):
        """Accept kind labels in any case (e.g. "income", "EXPENSE")."""
        if isinstance(v, str):
            kind = TransactionKind.from_label(v)
            if kind is not None:
                return kind
        return v

    @property
    def is_income(self) -> bool:
        return self.kind == TransactionKind.INCOME

    @property
    def is_expense(self) -> bool:
        return self.kind == TransactionKind.EXPENSE


class CategoryTotal(BaseModel):
    """Summed expenses for one category."""
    model_config = ConfigDict(frozen=True)

    category: str
    total: Decimal
