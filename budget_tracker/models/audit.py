"""
Audit Models for the Budget Tracker

Every action that touches the ledger is logged as an audit event.
This provides:
1. Traceability of what happened to the ledger in a session
2. Debugging information when a load or save fails

DESIGN DECISION: Audit events are append-only. We never modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every ledger operation has its own event type.
    """
    # Ledger mutations
    TRANSACTION_ADDED = "transaction_added"
    LEDGER_SORTED = "ledger_sorted"
    SORT_KEY_IGNORED = "sort_key_ignored"

    # Persistence
    LEDGER_LOADED = "ledger_loaded"
    LEDGER_SAVED = "ledger_saved"
    LOAD_FAILED = "load_failed"
    SAVE_FAILED = "save_failed"

    # User input
    INVALID_INPUT = "invalid_input"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    Every significant ledger action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Correlation - ties together all events of one session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.transaction_added("Salary", "2500.00", "Income", correlation_id)
        event = AuditEventBuilder.ledger_saved("transactions.txt", 12, correlation_id)
    """

    @staticmethod
    def transaction_added(
        description: str,
        amount: str,
        kind: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TRANSACTION_ADDED,
            correlation_id=correlation_id,
            description=f"{kind} added: {description} - {amount}"[:500],
            details={
                "amount": amount,
                "kind": kind,
            },
            is_user_action=True,
        )

    @staticmethod
    def ledger_sorted(
        sort_key: str,
        record_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SORTED,
            correlation_id=correlation_id,
            description=f"Ledger sorted by {sort_key}"[:500],
            details={
                "sort_key": sort_key,
                "record_count": record_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def sort_key_ignored(
        sort_key: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SORT_KEY_IGNORED,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Unknown sort key ignored: {sort_key!r}"[:500],
            details={
                "sort_key": sort_key,
            },
            is_user_action=True,
        )

    @staticmethod
    def ledger_loaded(
        path: str,
        record_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_LOADED,
            correlation_id=correlation_id,
            description=f"Loaded {record_count} transactions from {path}"[:500],
            details={
                "path": path,
                "record_count": record_count,
            },
        )

    @staticmethod
    def ledger_saved(
        path: str,
        record_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LEDGER_SAVED,
            correlation_id=correlation_id,
            description=f"Saved {record_count} transactions to {path}"[:500],
            details={
                "path": path,
                "record_count": record_count,
            },
        )

    @staticmethod
    def load_failed(
        path: str,
        error_type: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.LOAD_FAILED,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"Failed to load ledger from {path}"[:500],
            error_message=error_message,
            details={
                "path": path,
                "error_type": error_type,
            },
        )

    @staticmethod
    def save_failed(
        path: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"Failed to save ledger to {path}"[:500],
            error_message=error_message,
            details={
                "path": path,
            },
        )

    @staticmethod
    def invalid_input(
        field: str,
        error_message: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_INPUT,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Rejected input for {field}"[:500],
            error_message=error_message,
            details={
                "field": field,
            },
            is_user_action=True,
        )
