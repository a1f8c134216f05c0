"""
Period settlement.

Combines the month's expenses, the fund goal and the payments already
made into what each member still owes.
"""

from typing import Optional
from uuid import UUID

from hogar.allocation.engine import compute_share
from hogar.models.household import (
    Category,
    FundProgress,
    HouseholdExpense,
    Member,
    MemberSettlement,
    Payment,
    PeriodSettlement,
    SplitRuleTable,
    expenses_by_category,
)


def summarize_period(
    expenses: list[HouseholdExpense],
    payments: list[Payment],
    fund_goal: int,
    period_id: Optional[UUID] = None,
    rules: Optional[SplitRuleTable] = None,
) -> PeriodSettlement:
    """
    Work out each member's due, paid and pending amounts for a period.

    Categories with a zero total are left out of the breakdown. Only
    payments flagged as paid count towards `paid`.
    """
    totals = expenses_by_category(expenses)
    amounts = dict(totals)
    amounts[Category.MAMA_FUND] = fund_goal

    members = {}
    for member in Member:
        breakdown = {}
        for category in Category:
            amount = amounts.get(category, 0)
            if amount == 0:
                continue
            breakdown[category] = compute_share(amount, category, member, rules)

        paid_payments = [p for p in payments if p.member == member and p.paid]
        members[member] = MemberSettlement(
            member=member,
            breakdown=breakdown,
            due=sum(breakdown.values()),
            paid=sum(p.amount_due for p in paid_payments),
            paid_categories=[p.category for p in paid_payments],
        )

    return PeriodSettlement(
        period_id=period_id,
        total_expenses=sum(totals.values()),
        fund_goal=fund_goal,
        members=members,
    )


def fund_progress(goal: int, payments: list[Payment]) -> FundProgress:
    """Collected so far towards the support fund, from paid fund payments."""
    collected = sum(
        p.amount_due
        for p in payments
        if p.category == Category.MAMA_FUND and p.paid
    )
    return FundProgress(goal=goal, collected=collected)
