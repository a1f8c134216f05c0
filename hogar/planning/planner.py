"""
Debt Planner

Orders a member's debts for payoff and projects when each one, and the
whole set, will be gone.

STRATEGY - "snowball":
- Most urgent priority tier first
- Within a tier, smallest remaining balance first
- The whole monthly budget goes to the first debt in that order (the
  focused debt); the rest wait their turn

Two different payoff estimates are exposed on purpose:
- build_payoff_plan: per debt, strictly one after another
- estimate_debt_free_date: everything at once, total / budget
They answer different questions and will usually disagree.

IMPORTANT: Paid-off debts never appear in any output. Every entry point
filters them itself, whatever the caller passed in.
"""

from datetime import date
from typing import Iterable, Optional

from hogar.audit.logger import get_logger
from hogar.models.debt import (
    NO_PLAN_DATE,
    NO_PLAN_MONTHS,
    Debt,
    DebtPayment,
    DebtPriority,
    DebtSummary,
    PayoffPlanItem,
)
from hogar.money import ceil_div
from hogar.planning.months import add_months


logger = get_logger(__name__)


class DebtPaymentError(ValueError):
    """A payment that cannot be applied to a debt."""
    pass


def active_debts(debts: Iterable[Debt]) -> list[Debt]:
    """
    Debts that still owe something, in their original order.

    A zero balance counts as paid off even when the flag was never set.
    """
    return [
        debt for debt in debts
        if not debt.is_paid_off and debt.remaining_amount > 0
    ]


def order_debts_for_payoff(debts: Iterable[Debt]) -> list[Debt]:
    """
    Sort unpaid debts by priority tier, then by remaining balance.

    Paid-off debts are dropped. Ties on both keys keep their input order.
    """
    return sorted(
        active_debts(debts),
        key=lambda debt: (debt.priority.rank, debt.remaining_amount),
    )


def build_payoff_plan(
    debts: Iterable[Debt],
    monthly_budget: int,
    today: Optional[date] = None,
) -> list[PayoffPlanItem]:
    """
    Build the month's snowball plan.

    With no budget (zero or negative) every item gets 0 per month,
    infinite months and NO_PLAN_DATE. Otherwise only the first debt is
    paid this month, capped at its balance, and each debt's date is
    `today` plus the months of every debt before it plus its own.
    """
    ordered = order_debts_for_payoff(debts)

    if monthly_budget <= 0:
        logger.debug("payoff_plan_without_budget", debt_count=len(ordered))
        return [
            PayoffPlanItem(
                debt=debt,
                suggested_monthly=0,
                estimated_payoff_date=NO_PLAN_DATE,
                months_to_payoff=NO_PLAN_MONTHS,
            )
            for debt in ordered
        ]

    today = today or date.today()
    plan = []
    months_before = 0

    for position, debt in enumerate(ordered):
        months = ceil_div(debt.remaining_amount, monthly_budget)
        suggested = min(monthly_budget, debt.remaining_amount) if position == 0 else 0
        plan.append(
            PayoffPlanItem(
                debt=debt,
                suggested_monthly=suggested,
                estimated_payoff_date=add_months(today, months_before + months),
                months_to_payoff=months,
            )
        )
        months_before += months

    logger.debug(
        "payoff_plan_built",
        debt_count=len(plan),
        monthly_budget=monthly_budget,
        total_months=months_before,
    )
    return plan


def estimate_debt_free_date(
    debts: Iterable[Debt],
    monthly_budget: int,
    today: Optional[date] = None,
) -> Optional[date]:
    """
    When everything is paid if the whole budget chips at the total.

    Returns None when there are no active debts or no budget.
    """
    remaining = [debt.remaining_amount for debt in active_debts(debts)]
    if not remaining or monthly_budget <= 0:
        return None

    months = ceil_div(sum(remaining), monthly_budget)
    return add_months(today or date.today(), months)


def apply_debt_payment(
    debt: Debt,
    amount: int,
    paid_on: Optional[date] = None,
    notes: Optional[str] = None,
) -> tuple[Debt, DebtPayment]:
    """
    Pay `amount` towards `debt`.

    The payment is capped at the remaining balance. Returns a new Debt
    (the input is not modified) and the payment record. When the balance
    reaches zero the debt is flagged paid off with `paid_on` as its date.

    Raises:
        DebtPaymentError: amount is not positive, or the debt is already
            paid off.
    """
    if debt.is_paid_off:
        raise DebtPaymentError(f"Debt {debt.id} is already paid off")
    if amount <= 0:
        raise DebtPaymentError(f"Payment amount must be positive, got {amount}")
    if debt.remaining_amount <= 0:
        raise DebtPaymentError(f"Debt {debt.id} has nothing left to pay")

    paid_on = paid_on or date.today()
    applied = min(amount, debt.remaining_amount)
    new_remaining = max(debt.remaining_amount - applied, 0)
    is_paid_off = new_remaining <= 0

    updated = debt.model_copy(
        update={
            "remaining_amount": new_remaining,
            "is_paid_off": is_paid_off,
            "paid_off_date": paid_on if is_paid_off else None,
        }
    )
    payment = DebtPayment(
        debt_id=debt.id,
        amount=applied,
        payment_date=paid_on,
        notes=notes or None,
    )

    logger.debug(
        "debt_payment_applied",
        debt_id=str(debt.id),
        requested=amount,
        applied=applied,
        remaining=new_remaining,
    )
    return updated, payment


def summarize_debts(debts: Iterable[Debt]) -> DebtSummary:
    """Totals across all of a member's debts, paid off or not."""
    debts = list(debts)
    active = active_debts(debts)

    by_priority = {priority: 0 for priority in DebtPriority}
    for debt in active:
        by_priority[debt.priority] += 1

    return DebtSummary(
        total_original=sum(debt.original_amount for debt in debts),
        total_remaining=sum(debt.remaining_amount for debt in active),
        total_paid=sum(debt.amount_paid for debt in debts),
        active_count=len(active),
        paid_off_count=len(debts) - len(active),
        active_by_priority=by_priority,
    )
