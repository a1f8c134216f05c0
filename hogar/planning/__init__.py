"""
Planning Package

Debt ordering, snowball payoff plans and debt-free date estimates.
"""

from hogar.planning.months import add_months
from hogar.planning.planner import (
    DebtPaymentError,
    active_debts,
    apply_debt_payment,
    build_payoff_plan,
    estimate_debt_free_date,
    order_debts_for_payoff,
    summarize_debts,
)

__all__ = [
    "DebtPaymentError",
    "active_debts",
    "add_months",
    "apply_debt_payment",
    "build_payoff_plan",
    "estimate_debt_free_date",
    "order_debts_for_payoff",
    "summarize_debts",
]
