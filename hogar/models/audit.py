"""
Audit Models for Hogar

Every action that changes money or produces a projection callers rely
on is described by an audit event:
1. Periods created and seeded
2. Debt payments applied
3. Payoff plans built (or refused for lack of budget)
4. Period settlements computed

DESIGN DECISION: Audit events are append-only descriptions. Building one
never changes the data it describes.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Periods
    PERIOD_CREATED = "period_created"
    PERIOD_REUSED = "period_reused"

    # Allocation
    SHARES_COMPUTED = "shares_computed"
    SETTLEMENT_COMPUTED = "settlement_computed"

    # Debts
    DEBT_PAYMENT_APPLIED = "debt_payment_applied"
    DEBT_PAID_OFF = "debt_paid_off"
    DEBT_PAYMENT_REJECTED = "debt_payment_rejected"

    # Planning
    PAYOFF_PLAN_BUILT = "payoff_plan_built"
    BUDGET_NOT_CONFIGURED = "budget_not_configured"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
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

    # Context - what entity is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'debt', 'period')"
    )
    entity_id: Optional[UUID] = Field(
        default=None,
        description="ID of the entity this event relates to"
    )

    # Correlation - for tracking related events
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., one screen refresh)"
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

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": str(self.entity_id) if self.entity_id else None,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.period_created(period_id, 2026, 10, 2)
        event = AuditEventBuilder.debt_payment_applied(debt_id, 50000, 0, cid)
    """

    @staticmethod
    def period_created(
        period_id: UUID,
        year: int,
        month: int,
        seeded_expenses: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PERIOD_CREATED,
            entity_type="period",
            entity_id=period_id,
            correlation_id=correlation_id,
            description=f"Period {year}-{month:02d} created",
            details={
                "year": year,
                "month": month,
                "seeded_expenses": seeded_expenses,
            },
        )

    @staticmethod
    def period_reused(
        period_id: UUID,
        year: int,
        month: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PERIOD_REUSED,
            severity=AuditSeverity.DEBUG,
            entity_type="period",
            entity_id=period_id,
            correlation_id=correlation_id,
            description=f"Period {year}-{month:02d} already exists",
            details={"year": year, "month": month},
        )

    @staticmethod
    def shares_computed(
        category: str,
        amount: int,
        shares: dict[str, int],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SHARES_COMPUTED,
            severity=AuditSeverity.DEBUG,
            entity_type="category",
            correlation_id=correlation_id,
            description=f"Split {amount} for {category}",
            details={
                "category": category,
                "amount": amount,
                "shares": shares,
                "rounding_gap": amount - sum(shares.values()),
            },
        )

    @staticmethod
    def settlement_computed(
        period_id: Optional[UUID],
        due: dict[str, int],
        pending: dict[str, int],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SETTLEMENT_COMPUTED,
            entity_type="period",
            entity_id=period_id,
            correlation_id=correlation_id,
            description="Period settlement computed",
            details={"due": due, "pending": pending},
        )

    @staticmethod
    def debt_payment_applied(
        debt_id: UUID,
        amount: int,
        remaining: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEBT_PAYMENT_APPLIED,
            entity_type="debt",
            entity_id=debt_id,
            correlation_id=correlation_id,
            description=f"Payment of {amount} applied",
            details={"amount": amount, "remaining": remaining},
        )

    @staticmethod
    def debt_paid_off(
        debt_id: UUID,
        creditor_name: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEBT_PAID_OFF,
            entity_type="debt",
            entity_id=debt_id,
            correlation_id=correlation_id,
            description=f"Debt with {creditor_name or 'unknown creditor'} paid off",
            details={"creditor_name": creditor_name},
        )

    @staticmethod
    def debt_payment_rejected(
        debt_id: UUID,
        reason: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.DEBT_PAYMENT_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="debt",
            entity_id=debt_id,
            correlation_id=correlation_id,
            description="Debt payment rejected",
            error_message=reason,
        )

    @staticmethod
    def payoff_plan_built(
        member: str,
        monthly_budget: int,
        debt_count: int,
        debt_free_date: Optional[str],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.PAYOFF_PLAN_BUILT,
            entity_type="member",
            correlation_id=correlation_id,
            description=f"Payoff plan built for {member}",
            details={
                "monthly_budget": monthly_budget,
                "debt_count": debt_count,
                "debt_free_date": debt_free_date,
            },
        )

    @staticmethod
    def budget_not_configured(
        member: str,
        debt_count: int,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_NOT_CONFIGURED,
            severity=AuditSeverity.WARNING,
            entity_type="member",
            correlation_id=correlation_id,
            description=f"No monthly budget configured for {member}",
            details={"debt_count": debt_count},
        )
