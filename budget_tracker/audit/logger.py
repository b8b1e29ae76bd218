"""
Audit Logger

DESIGN DECISION: Every action that touches the ledger is logged.
This provides:
1. Traceability of a session's changes
2. Debugging capability when a file fails to load or save

The audit logger:
- Is synchronous, like the rest of the ledger
- Supports correlation IDs to trace the events of one session
"""

import logging
import sys
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from budget_tracker.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


SHARED_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(level: str = "WARNING", json: bool = False) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    Logs go to stderr so they never interleave with the menu on stdout.
    Call once from the entrypoint.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=SHARED_PROCESSORS + [renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Emits one structured "audit_event" record per AuditEvent.
    """

    def __init__(
        self,
        correlation_id: Optional[UUID] = None,
        logger: Optional[Any] = None,
    ):
        """
        Initialize audit logger.

        Args:
            correlation_id: Attached to every event logged through this
                           logger. A new one is created if omitted.
            logger: structlog-compatible logger. Defaults to the
                   "budget_tracker.audit" logger.
        """
        self.correlation_id = correlation_id or create_correlation_id()
        self._logger = logger or structlog.get_logger("budget_tracker.audit")

    def log(self, event: AuditEvent) -> AuditEvent:
        """
        Log an audit event.

        Events without a correlation ID inherit this logger's.
        """
        if event.correlation_id is None:
            event = event.model_copy(update={"correlation_id": self.correlation_id})

        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        return event

    def log_transaction_added(self, description: str, amount: str, kind: str) -> None:
        """Log a new transaction."""
        self.log(AuditEventBuilder.transaction_added(
            description=description,
            amount=amount,
            kind=kind,
        ))

    def log_ledger_sorted(self, sort_key: str, record_count: int) -> None:
        self.log(AuditEventBuilder.ledger_sorted(
            sort_key=sort_key,
            record_count=record_count,
        ))

    def log_sort_key_ignored(self, sort_key: str) -> None:
        self.log(AuditEventBuilder.sort_key_ignored(sort_key=sort_key))

    def log_ledger_loaded(self, path: str, record_count: int) -> None:
        self.log(AuditEventBuilder.ledger_loaded(
            path=path,
            record_count=record_count,
        ))

    def log_ledger_saved(self, path: str, record_count: int) -> None:
        self.log(AuditEventBuilder.ledger_saved(
            path=path,
            record_count=record_count,
        ))

    def log_load_failed(self, path: str, error: Exception) -> None:
        """Log a load that was aborted."""
        self.log(AuditEventBuilder.load_failed(
            path=path,
            error_type=type(error).__name__,
            error_message=str(error),
        ))

    def log_save_failed(self, path: str, error: Exception) -> None:
        self.log(AuditEventBuilder.save_failed(
            path=path,
            error_message=str(error),
        ))

    def log_invalid_input(self, field: str, error: Exception) -> None:
        """Log rejected user input."""
        self.log(AuditEventBuilder.invalid_input(
            field=field,
            error_message=str(error),
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a session and pass it to the AuditLogger.
    """
    return uuid4()
