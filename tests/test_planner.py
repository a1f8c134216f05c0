"""Tests for the debt planner."""

import math
import pytest
from datetime import date

from hogar.models.debt import NO_PLAN_DATE, Debt, DebtPriority
from hogar.planning import (
    DebtPaymentError,
    add_months,
    apply_debt_payment,
    build_payoff_plan,
    estimate_debt_free_date,
    order_debts_for_payoff,
    summarize_debts,
)


TODAY = date(2026, 1, 15)


def make_debt(creditor, remaining, priority=DebtPriority.NORMAL, **kwargs):
    return Debt(
        creditor_name=creditor,
        remaining_amount=remaining,
        priority=priority,
        **kwargs,
    )


class TestAddMonths:
    """Tests for calendar month arithmetic."""

    def test_simple(self):
        """Test adding months within a year."""
        assert add_months(date(2026, 1, 15), 2) == date(2026, 3, 15)

    def test_year_rollover(self):
        """Test months roll into the next year."""
        assert add_months(date(2026, 11, 10), 3) == date(2027, 2, 10)

    def test_clamps_to_month_end(self):
        """Test Jan 31 + 1 month is the last day of February."""
        assert add_months(date(2026, 1, 31), 1) == date(2026, 2, 28)
        assert add_months(date(2028, 1, 31), 1) == date(2028, 2, 29)

    def test_backwards(self):
        """Test negative months go back in time."""
        assert add_months(date(2026, 10, 18), -12) == date(2025, 10, 18)

    def test_zero(self):
        """Test zero months is the same day."""
        assert add_months(TODAY, 0) == TODAY


class TestOrderDebts:
    """Tests for order_debts_for_payoff."""

    def test_priority_beats_balance(self):
        """Test an urgent debt comes first even with a bigger balance."""
        a = make_debt("A", 200000, DebtPriority.URGENTE)
        b = make_debt("B", 50000, DebtPriority.NORMAL)
        assert order_debts_for_payoff([b, a]) == [a, b]

    def test_snowball_tie_break(self):
        """Test the smaller balance goes first within a tier."""
        big = make_debt("Big", 30000)
        small = make_debt("Small", 10000)
        assert order_debts_for_payoff([big, small]) == [small, big]

    def test_paid_off_excluded(self):
        """Test paid-off debts never appear."""
        done = make_debt("Done", 0, DebtPriority.URGENTE, original_amount=5000, is_paid_off=True)
        open_debt = make_debt("Open", 1000)
        assert order_debts_for_payoff([done, open_debt]) == [open_debt]

    def test_output_is_sorted(self):
        """Test every adjacent pair respects priority then balance."""
        debts = [
            make_debt("1", 5000, DebtPriority.TRANQUI),
            make_debt("2", 90000, DebtPriority.URGENTE),
            make_debt("3", 1000, DebtPriority.NORMAL),
            make_debt("4", 20000, DebtPriority.URGENTE),
            make_debt("5", 400, DebtPriority.TRANQUI),
            make_debt("6", 1000, DebtPriority.NORMAL),
        ]
        ordered = order_debts_for_payoff(debts)
        assert len(ordered) == len(debts)
        for first, second in zip(ordered, ordered[1:]):
            assert (first.priority.rank, first.remaining_amount) <= (
                second.priority.rank,
                second.remaining_amount,
            )

    def test_empty(self):
        """Test no debts gives an empty order."""
        assert order_debts_for_payoff([]) == []


class TestBuildPayoffPlan:
    """Tests for build_payoff_plan."""

    def test_priority_scenario(self):
        """Test the urgent-then-normal cascading plan."""
        a = make_debt("A", 200000, DebtPriority.URGENTE)
        b = make_debt("B", 50000, DebtPriority.NORMAL)

        plan = build_payoff_plan([b, a], 100000, today=TODAY)

        assert [item.debt.creditor_name for item in plan] == ["A", "B"]
        assert [item.months_to_payoff for item in plan] == [2, 1]
        assert [item.suggested_monthly for item in plan] == [100000, 0]
        assert plan[0].estimated_payoff_date == date(2026, 3, 15)
        assert plan[1].estimated_payoff_date == date(2026, 4, 15)

    def test_only_focused_debt_gets_budget(self):
        """Test exactly one item is suggested a payment."""
        debts = [make_debt(str(i), 10000 * (i + 1)) for i in range(4)]
        plan = build_payoff_plan(debts, 25000, today=TODAY)
        focused = [item for item in plan if item.suggested_monthly > 0]
        assert len(focused) == 1
        assert focused[0] is plan[0]
        assert plan[0].suggested_monthly == min(25000, plan[0].debt.remaining_amount)

    def test_focused_amount_capped_at_balance(self):
        """Test the plan never suggests paying more than is owed."""
        plan = build_payoff_plan([make_debt("A", 40000)], 100000, today=TODAY)
        assert plan[0].suggested_monthly == 40000
        assert plan[0].months_to_payoff == 1

    def test_months_are_standalone(self):
        """Test months_to_payoff ignores the wait behind earlier debts."""
        first = make_debt("First", 300000, DebtPriority.URGENTE)
        second = make_debt("Second", 100000, DebtPriority.TRANQUI)
        plan = build_payoff_plan([first, second], 100000, today=TODAY)
        assert plan[1].months_to_payoff == 1
        assert plan[1].estimated_payoff_date == date(2026, 5, 15)

    @pytest.mark.parametrize("budget", [0, -5000])
    def test_no_budget(self, budget):
        """Test a non-positive budget gives the no-plan sentinels."""
        a = make_debt("A", 200000, DebtPriority.URGENTE)
        b = make_debt("B", 50000, DebtPriority.NORMAL)
        plan = build_payoff_plan([b, a], budget, today=TODAY)

        assert [item.debt.creditor_name for item in plan] == ["A", "B"]
        for item in plan:
            assert item.suggested_monthly == 0
            assert math.isinf(item.months_to_payoff)
            assert item.estimated_payoff_date == NO_PLAN_DATE
            assert not item.is_projectable

    def test_paid_off_excluded(self):
        """Test the plan filters paid-off debts itself."""
        done = make_debt("Done", 0, original_amount=1000, is_paid_off=True)
        plan = build_payoff_plan([done, make_debt("Open", 1000)], 500, today=TODAY)
        assert [item.debt.creditor_name for item in plan] == ["Open"]

    def test_zero_balance_treated_as_paid_off(self):
        """Test an unflagged zero-balance debt never takes the budget."""
        real = make_debt("Real", 50000)
        empty = make_debt("Empty", 0, original_amount=20000)

        plan = build_payoff_plan([real, empty], 100000, today=TODAY)

        assert [item.debt.creditor_name for item in plan] == ["Real"]
        assert plan[0].suggested_monthly == 50000
        assert plan[0].is_focused

    def test_empty(self):
        """Test no debts gives an empty plan, not an error."""
        assert build_payoff_plan([], 100000, today=TODAY) == []
        assert build_payoff_plan([], 0, today=TODAY) == []

    def test_does_not_modify_debts(self):
        """Test planning leaves the input debts untouched."""
        debt = make_debt("A", 50000)
        build_payoff_plan([debt], 10000, today=TODAY)
        assert debt.remaining_amount == 50000


class TestEstimateDebtFreeDate:
    """Tests for estimate_debt_free_date."""

    def test_aggregate_estimate(self):
        """Test total / budget, rounded up, from today."""
        debts = [
            make_debt("A", 200000, DebtPriority.URGENTE),
            make_debt("B", 50000),
        ]
        assert estimate_debt_free_date(debts, 100000, today=TODAY) == date(2026, 4, 15)

    def test_can_be_earlier_than_sequential_plan(self):
        """Test the aggregate and sequential estimates disagree."""
        debts = [
            make_debt("A", 150000, DebtPriority.URGENTE),
            make_debt("B", 150000),
        ]
        plan = build_payoff_plan(debts, 100000, today=TODAY)
        aggregate = estimate_debt_free_date(debts, 100000, today=TODAY)
        assert plan[-1].estimated_payoff_date == date(2026, 5, 15)
        assert aggregate == date(2026, 4, 15)

    def test_none_without_debts(self):
        """Test no active debts gives no estimate."""
        done = make_debt("Done", 0, original_amount=1000, is_paid_off=True)
        assert estimate_debt_free_date([], 100000, today=TODAY) is None
        assert estimate_debt_free_date([done], 100000, today=TODAY) is None

    @pytest.mark.parametrize("budget", [0, -1])
    def test_none_without_budget(self, budget):
        """Test a non-positive budget gives no estimate."""
        assert estimate_debt_free_date([make_debt("A", 1000)], budget, today=TODAY) is None


class TestApplyDebtPayment:
    """Tests for apply_debt_payment."""

    def test_partial_payment(self):
        """Test a payment lowers the remaining balance."""
        debt = make_debt("A", 100000)
        updated, payment = apply_debt_payment(debt, 30000, paid_on=TODAY)
        assert updated.remaining_amount == 70000
        assert updated.original_amount == 100000
        assert not updated.is_paid_off
        assert updated.paid_off_date is None
        assert payment.amount == 30000
        assert payment.debt_id == debt.id
        assert payment.payment_date == TODAY

    def test_input_debt_unchanged(self):
        """Test the original debt object is not modified."""
        debt = make_debt("A", 100000)
        apply_debt_payment(debt, 30000, paid_on=TODAY)
        assert debt.remaining_amount == 100000

    def test_overpayment_capped_and_paid_off(self):
        """Test paying more than owed pays exactly the balance."""
        debt = make_debt("A", 100000)
        updated, payment = apply_debt_payment(debt, 150000, paid_on=TODAY)
        assert payment.amount == 100000
        assert updated.remaining_amount == 0
        assert updated.is_paid_off
        assert updated.paid_off_date == TODAY

    def test_paid_off_debt_rejected(self):
        """Test a paid-off debt cannot be paid again."""
        debt = make_debt("A", 0, original_amount=1000, is_paid_off=True)
        with pytest.raises(DebtPaymentError, match="already paid off"):
            apply_debt_payment(debt, 100, paid_on=TODAY)

    @pytest.mark.parametrize("amount", [0, -500])
    def test_non_positive_amount_rejected(self, amount):
        """Test payments must be positive."""
        with pytest.raises(DebtPaymentError, match="must be positive"):
            apply_debt_payment(make_debt("A", 1000), amount, paid_on=TODAY)


class TestSummarizeDebts:
    """Tests for summarize_debts."""

    def test_summary(self):
        """Test totals over active and paid-off debts."""
        debts = [
            make_debt("A", 40000, DebtPriority.URGENTE, original_amount=100000),
            make_debt("B", 0, original_amount=50000, is_paid_off=True),
            make_debt("C", 20000, DebtPriority.TRANQUI),
        ]
        summary = summarize_debts(debts)
        assert summary.total_original == 170000
        assert summary.total_remaining == 60000
        assert summary.total_paid == 110000
        assert summary.active_count == 2
        assert summary.paid_off_count == 1
        assert summary.active_by_priority == {
            DebtPriority.URGENTE: 1,
            DebtPriority.NORMAL: 0,
            DebtPriority.TRANQUI: 1,
        }

    def test_zero_balance_counts_as_paid_off(self):
        """Test an unflagged zero balance is summarized as paid off."""
        debts = [
            make_debt("Open", 30000),
            make_debt("Empty", 0, original_amount=20000),
        ]
        summary = summarize_debts(debts)
        assert summary.active_count == 1
        assert summary.paid_off_count == 1
        assert summary.total_paid == 20000
        assert estimate_debt_free_date(debts, 10000, today=TODAY) == date(2026, 4, 15)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
