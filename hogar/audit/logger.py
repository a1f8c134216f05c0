"""
Audit Logger

DESIGN DECISION: Every money-changing action and every projection that a
screen relies on is logged. This provides:
1. Traceability of payments and period creation
2. A record of the budget and debts a plan was built from
3. Debugging capability for rounding questions ("why 99 and not 100?")

The audit logger:
- Is synchronous, like everything it observes
- Never changes the outcome of the action it logs
- Supports correlation IDs to trace related events
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from hogar.config.settings import AppSettings, get_settings
from hogar.models.audit import AuditEvent, AuditSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def get_logger(name: Optional[str] = None):
    """Module-level structured logger, configured as above."""
    return structlog.get_logger(name)


def configure_logging(app_settings: Optional[AppSettings] = None) -> str:
    """
    Apply the configured log level to every `hogar.*` logger.

    `debug_mode` forces DEBUG whatever `log_level` says. Returns the
    level name that was applied.
    """
    app_settings = app_settings or get_settings().app
    level = "DEBUG" if app_settings.debug_mode else app_settings.log_level

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("hogar").setLevel(level)
    return level


class AuditLogger:
    """
    Central audit logging service.

    Always logs to the structured local log. When `keep_history` is set,
    events are also kept in memory so callers (and tests) can inspect
    what was recorded.
    """

    def __init__(self, keep_history: bool = False):
        self._logger = get_logger("hogar.audit")
        self._keep_history = keep_history
        self._history: list[AuditEvent] = []

    @property
    def history(self) -> list[AuditEvent]:
        return list(self._history)

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._keep_history:
            self._history.append(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this once per caller action (e.g. one refresh of the debts screen)
    and pass it through every flow that action triggers.
    """
    return uuid4()
