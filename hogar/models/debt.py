"""
Debt Models for Hogar

A debt is one creditor obligation held by a single member. Its
remaining balance only ever goes down, and once it reaches zero the
debt is paid off for good.

DESIGN DECISION: Plan items are projections, not records. They are
rebuilt on every planning call and never persisted.
"""

import math
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from hogar.models.household import Member


# Placeholder date returned when no payoff plan is possible (zero budget).
# Callers treat it as "no plan", never as a real projection.
NO_PLAN_DATE = date(2099, 12, 31)

# Months-to-payoff when no plan is possible.
NO_PLAN_MONTHS = math.inf


class DebtPriority(str, Enum):
    """
    Debt priority tiers, most pressing first.

    The declaration order IS the planning order.
    """
    URGENTE = "urgente"
    NORMAL = "normal"
    TRANQUI = "tranqui"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_PRIORITY_RANK = {priority: i for i, priority in enumerate(DebtPriority)}


class Debt(BaseModel):
    """
    One creditor obligation.

    When `original_amount` is omitted it is taken to be the remaining
    amount, which is how a debt looks on the day it is created.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    member: Member = Member.DUVAN
    creditor_name: str = Field(
        default="",
        max_length=200,
        description="Who the money is owed to"
    )
    original_amount: Optional[int] = Field(
        default=None,
        ge=0,
        description="Amount owed when the debt was created"
    )
    remaining_amount: int = Field(
        ...,
        ge=0,
        description="Amount still owed"
    )
    priority: DebtPriority = DebtPriority.NORMAL
    is_paid_off: bool = False
    paid_off_date: Optional[date] = None
    notes: Optional[str] = Field(default=None, max_length=1000)
    created_at: datetime = Field(default_factory=datetime.utcnow)

    @model_validator(mode='after')
    def default_original_amount(self) -> 'Debt':
        """Fill in the original amount and keep remaining within it."""
        if self.original_amount is None:
            self.original_amount = self.remaining_amount
        if self.remaining_amount > self.original_amount:
            raise ValueError(
                f"Remaining amount {self.remaining_amount} exceeds "
                f"original amount {self.original_amount}"
            )
        return self

    @property
    def amount_paid(self) -> int:
        return self.original_amount - self.remaining_amount


class DebtPayment(BaseModel):
    """A single payment made against a debt."""

    id: UUID = Field(default_factory=uuid4)
    debt_id: UUID
    amount: int = Field(..., gt=0)
    payment_date: date
    notes: Optional[str] = Field(default=None, max_length=500)


class PayoffPlanItem(BaseModel):
    """
    Planning projection for one debt.

    `months_to_payoff` is the debt's standalone duration if it alone got
    the whole budget from now on. `estimated_payoff_date` instead
    cascades: it includes the months of every debt ahead of it.
    """

    debt: Debt
    suggested_monthly: int = Field(
        ...,
        ge=0,
        description="Amount to pay this cycle (only the focused debt gets one)"
    )
    estimated_payoff_date: date = Field(
        ...,
        description="Sequential payoff estimate, NO_PLAN_DATE when no plan"
    )
    months_to_payoff: Union[int, float] = Field(
        ...,
        description="Standalone months at full budget, inf when no plan"
    )

    @property
    def is_projectable(self) -> bool:
        """False when the item carries the no-plan sentinels."""
        return not math.isinf(self.months_to_payoff)

    @property
    def is_focused(self) -> bool:
        return self.suggested_monthly > 0


class DebtSummary(BaseModel):
    """Aggregate view of a member's debts."""

    total_original: int = Field(..., ge=0)
    total_remaining: int = Field(
        ...,
        ge=0,
        description="Remaining balance across active debts"
    )
    total_paid: int = Field(
        ...,
        description="Paid so far across all debts, paid off or not"
    )
    active_count: int = Field(..., ge=0)
    paid_off_count: int = Field(..., ge=0)
    active_by_priority: dict[DebtPriority, int] = Field(default_factory=dict)

    @property
    def progress_percent(self) -> float:
        """Share of the original total already paid, 0-100."""
        if self.total_original <= 0:
            return 0.0
        return min(self.total_paid / self.total_original * 100, 100.0)


class DebtOverview(BaseModel):
    """
    Everything the debts screen shows, computed from one snapshot.

    `plan` holds the sequential per-debt estimates; `debt_free_date` is
    the aggregate estimate (None when no projection is possible).
    """

    monthly_budget: int
    plan: list[PayoffPlanItem] = Field(default_factory=list)
    debt_free_date: Optional[date] = None
    summary: DebtSummary

    @property
    def focused(self) -> Optional[PayoffPlanItem]:
        """The debt receiving this month's budget, if any."""
        for item in self.plan:
            if item.is_focused:
                return item
        return None

    @property
    def has_budget(self) -> bool:
        return self.monthly_budget > 0
