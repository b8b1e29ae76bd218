"""
Data Models Package

This package contains all Pydantic models used in the Budget Tracker.
All data flowing through the ledger must conform to these schemas.
"""

from budget_tracker.models.transaction import (
    CategoryTotal,
    SortKey,
    Transaction,
    TransactionKind,
)
from budget_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Ledger models
    "CategoryTotal",
    "SortKey",
    "Transaction",
    "TransactionKind",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
