"""
Household Models for Hogar

These models describe who pays, what is paid for, and how each
category is split between contributors.

DESIGN DECISION: Members and categories are closed enums, never free
strings. The split-rule table is checked for totality once, when it is
built, so lookups never need a fallback.
"""

from datetime import date
from enum import Enum
from typing import Literal, Optional, Union
from uuid import UUID, uuid4

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from hogar.config.settings import HouseholdSettings


# Fixed number of paying members. Equal splits always divide by this,
# never by the size of whatever collection a caller iterates.
CONTRIBUTOR_COUNT = 3


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class MemberRole(str, Enum):
    """Whether a household identity pays or receives."""
    CONTRIBUTOR = "contributor"
    BENEFICIARY = "beneficiary"


class Member(str, Enum):
    """
    The contributors who pay shares of household expenses.

    The set is fixed at design time and is not user-extensible.
    """
    ALEX = "alex"
    DUVAN = "duvan"
    MANUEL = "manuel"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def emoji(self) -> str:
        return _MEMBER_EMOJI[self]

    @property
    def role(self) -> MemberRole:
        return MemberRole.CONTRIBUTOR


_MEMBER_EMOJI = {
    Member.ALEX: "🧑‍💻",
    Member.DUVAN: "🏍️",
    Member.MANUEL: "👷",
}


class Beneficiary(str, Enum):
    """
    Recipient of the support fund.

    Used only as a label for where the fund goes. Never a payer.
    """
    MAMA = "mama"

    @property
    def label(self) -> str:
        return "Mamá"

    @property
    def emoji(self) -> str:
        return "❤️"

    @property
    def role(self) -> MemberRole:
        return MemberRole.BENEFICIARY


class Category(str, Enum):
    """
    Allocation buckets.

    Four household-expense categories plus the support fund.
    """
    ARRIENDO = "arriendo"    # rent
    MERCADO = "mercado"      # groceries
    SERVICIOS = "servicios"  # utilities
    GARAJE = "garaje"        # parking
    MAMA_FUND = "mama_fund"

    @property
    def is_household_expense(self) -> bool:
        return self is not Category.MAMA_FUND

    @classmethod
    def household(cls) -> list["Category"]:
        """Household-expense categories, in display order."""
        return [c for c in cls if c.is_household_expense]


class PeriodStatus(str, Enum):
    """Monthly period lifecycle."""
    ACTIVE = "active"
    CLOSED = "closed"


# =============================================================================
# SPLIT RULES
# =============================================================================

class PercentageRule(BaseModel):
    """
    A fixed percentage per member.

    Percentages are expected to add up to 100 by convention but this is
    not enforced: a zero entry deliberately excludes a member.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["percentage"] = "percentage"
    percentages: dict[Member, int] = Field(
        ...,
        description="Share of the amount per member, in whole percent"
    )

    @field_validator('percentages')
    @classmethod
    def validate_percentages(cls, v: dict[Member, int]) -> dict[Member, int]:
        """Every member needs an entry, each between 0 and 100."""
        missing = [m.value for m in Member if m not in v]
        if missing:
            raise ValueError(f"Percentage rule is missing members: {missing}")
        for member, pct in v.items():
            if not 0 <= pct <= 100:
                raise ValueError(f"Percentage for {member.value} out of range: {pct}")
        return v

    def percentage_for(self, member: Member) -> int:
        return self.percentages[member]


class EqualSplit(BaseModel):
    """Divide the amount evenly across all contributors."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["equal"] = "equal"


SplitRule = Union[PercentageRule, EqualSplit]


class SplitRuleTable(BaseModel):
    """
    Category → rule mapping.

    Must be total over Category. Immutable once built.
    """
    model_config = ConfigDict(frozen=True)

    rules: dict[Category, SplitRule]

    @model_validator(mode='after')
    def validate_total(self) -> 'SplitRuleTable':
        """Reject a table that leaves any category unmapped."""
        missing = [c.value for c in Category if c not in self.rules]
        if missing:
            raise ValueError(f"Split rule table is missing categories: {missing}")
        return self

    def rule_for(self, category: Category) -> SplitRule:
        return self.rules[category]


# =============================================================================
# PERIOD RECORDS
# =============================================================================

class MonthlyPeriod(BaseModel):
    """A calendar-month bucket that groups expenses and payments."""

    id: UUID = Field(default_factory=uuid4)
    year: int = Field(..., ge=2000, le=9999)
    month: int = Field(..., ge=1, le=12)
    status: PeriodStatus = PeriodStatus.ACTIVE
    mama_fund_goal: int = Field(
        default_factory=lambda: HouseholdSettings().fund_goal,
        ge=0,
        description="Support fund goal for this month"
    )

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)


class HouseholdExpense(BaseModel):
    """A single shared expense recorded in a period."""
    model_config = ConfigDict(str_strip_whitespace=True)

    id: UUID = Field(default_factory=uuid4)
    period_id: UUID
    category: Category
    description: Optional[str] = Field(default=None, max_length=200)
    amount: int = Field(..., ge=0)
    expense_date: date = Field(default_factory=date.today)

    @field_validator('category')
    @classmethod
    def validate_household_category(cls, v: Category) -> Category:
        """The support fund is not a household expense."""
        if not v.is_household_expense:
            raise ValueError(f"{v.value} is not a household expense category")
        return v


class Payment(BaseModel):
    """What a member owes (and whether they paid) for one category in a period."""

    id: UUID = Field(default_factory=uuid4)
    member: Member
    period_id: UUID
    category: Category
    amount_due: int = Field(..., ge=0)
    paid: bool = False
    paid_date: Optional[date] = None


def expenses_by_category(expenses: list[HouseholdExpense]) -> dict[Category, int]:
    """Total expense amount per household category (zero for empty ones)."""
    totals: dict[Category, int] = {c: 0 for c in Category.household()}
    for expense in expenses:
        totals[expense.category] += expense.amount
    return totals


# =============================================================================
# SETTLEMENT VIEWS
# =============================================================================

class MemberSettlement(BaseModel):
    """What one member owes for a period, and how much is already paid."""

    member: Member
    breakdown: dict[Category, int] = Field(
        default_factory=dict,
        description="Share per category with a non-zero amount"
    )
    due: int = Field(..., ge=0)
    paid: int = Field(..., ge=0)
    paid_categories: list[Category] = Field(default_factory=list)

    @property
    def pending(self) -> int:
        return max(self.due - self.paid, 0)

    @property
    def is_settled(self) -> bool:
        return self.paid >= self.due


class PeriodSettlement(BaseModel):
    """Per-member settlement for a whole period."""

    period_id: Optional[UUID] = None
    total_expenses: int = Field(..., ge=0)
    fund_goal: int = Field(..., ge=0)
    members: dict[Member, MemberSettlement]

    def for_member(self, member: Member) -> MemberSettlement:
        return self.members[member]


class FundProgress(BaseModel):
    """How much of the support fund goal has been collected."""

    beneficiary: Beneficiary = Beneficiary.MAMA
    goal: int = Field(..., ge=0)
    collected: int = Field(..., ge=0)

    @property
    def missing(self) -> int:
        return max(self.goal - self.collected, 0)

    @property
    def progress_percent(self) -> float:
        if self.goal <= 0:
            return 0.0
        return min(self.collected / self.goal * 100, 100.0)
