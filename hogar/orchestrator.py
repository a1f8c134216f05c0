"""
Main Orchestrator for Hogar

This module ties the pure allocation and planning functions together
into the flows callers actually run:
1. Monthly split (open period → split expenses → settle payments)
2. Debt planning (order → plan → debt-free estimate → summary)
3. Debt payment (apply → flag paid off)

DESIGN DECISION: The orchestrator is where the boundary lives:
- Loaded data comes in as plain models, results go out as models
- "Today" is read here, once, and passed down explicitly
- Every step is audited

The functions underneath never log audit events or read the clock
themselves; only this layer does.
"""

from datetime import date
from typing import Iterable, Optional
from uuid import UUID

from hogar.allocation import fund_progress, split_amount, summarize_period
from hogar.audit import AuditLogger, configure_logging, create_correlation_id
from hogar.config import Settings, get_settings
from hogar.models.audit import AuditEventBuilder
from hogar.models.debt import Debt, DebtOverview, DebtPayment
from hogar.models.household import (
    Category,
    FundProgress,
    HouseholdExpense,
    Member,
    MonthlyPeriod,
    Payment,
    PeriodSettlement,
)
from hogar.periods import PeriodResolution, get_or_create_period
from hogar.planning import (
    DebtPaymentError,
    apply_debt_payment,
    build_payoff_plan,
    estimate_debt_free_date,
    summarize_debts,
)


class MonthlySplitFlow:
    """
    Orchestrates the household split for one month.

    Flow:
    1. Open → get or create the (year, month) period, seeding defaults
    2. Split → each member's share of an amount
    3. Settle → due / paid / pending per member, plus the fund progress
    """

    def __init__(
        self,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[Settings] = None,
    ):
        self._audit_logger = audit_logger
        self._settings = settings or get_settings()

    def open_period(
        self,
        periods: Iterable[MonthlyPeriod],
        year: int,
        month: int,
        correlation_id: Optional[UUID] = None,
    ) -> PeriodResolution:
        """Resolve the period for (year, month); creating it at most once."""
        correlation_id = correlation_id or create_correlation_id()
        resolution = get_or_create_period(
            periods, year, month, settings=self._settings.household
        )

        if self._audit_logger:
            if resolution.created:
                event = AuditEventBuilder.period_created(
                    period_id=resolution.period.id,
                    year=year,
                    month=month,
                    seeded_expenses=len(resolution.seeded_expenses),
                    correlation_id=correlation_id,
                )
            else:
                event = AuditEventBuilder.period_reused(
                    period_id=resolution.period.id,
                    year=year,
                    month=month,
                    correlation_id=correlation_id,
                )
            self._audit_logger.log(event)

        return resolution

    def split(
        self,
        amount: int,
        category: Category,
        correlation_id: Optional[UUID] = None,
    ) -> dict[Member, int]:
        """Each member's share of `amount`, rounding gap included."""
        shares = split_amount(amount, category)

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.shares_computed(
                category=category.value,
                amount=amount,
                shares={m.value: s for m, s in shares.items()},
                correlation_id=correlation_id,
            ))

        return shares

    def settle(
        self,
        period: MonthlyPeriod,
        expenses: list[HouseholdExpense],
        payments: list[Payment],
        correlation_id: Optional[UUID] = None,
    ) -> tuple[PeriodSettlement, FundProgress]:
        """
        Settle a period.

        Only expenses and payments belonging to `period` are considered.
        """
        expenses = [e for e in expenses if e.period_id == period.id]
        payments = [p for p in payments if p.period_id == period.id]

        settlement = summarize_period(
            expenses, payments, period.mama_fund_goal, period_id=period.id
        )
        progress = fund_progress(period.mama_fund_goal, payments)

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.settlement_computed(
                period_id=period.id,
                due={m.value: s.due for m, s in settlement.members.items()},
                pending={m.value: s.pending for m, s in settlement.members.items()},
                correlation_id=correlation_id,
            ))

        return settlement, progress


class DebtPlanningFlow:
    """
    Orchestrates debt tracking for one member.

    Flow:
    1. Overview → ordered snowball plan, aggregate debt-free date, totals
    2. Pay → apply a payment, flag the debt paid off when it hits zero

    The overview must be rebuilt after every change to debts or budget;
    nothing is cached between calls.
    """

    def __init__(
        self,
        member: Member = Member.DUVAN,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[Settings] = None,
    ):
        self._member = member
        self._audit_logger = audit_logger
        self._settings = settings or get_settings()

    def overview(
        self,
        debts: Iterable[Debt],
        monthly_budget: Optional[int] = None,
        today: Optional[date] = None,
        correlation_id: Optional[UUID] = None,
    ) -> DebtOverview:
        """
        Build the debt overview.

        Args:
            debts: All of the member's debts; paid-off ones are only
                   counted in the summary.
            monthly_budget: Configured budget. None falls back to the
                   planner default (0 = not configured).
            today: Date the projections start from. Defaults to today.
        """
        correlation_id = correlation_id or create_correlation_id()
        debts = [d for d in debts if d.member == self._member]
        if monthly_budget is None:
            monthly_budget = self._settings.planner.default_monthly_budget
        today = today or date.today()

        plan = build_payoff_plan(debts, monthly_budget, today=today)
        debt_free_date = estimate_debt_free_date(debts, monthly_budget, today=today)
        overview = DebtOverview(
            monthly_budget=monthly_budget,
            plan=plan,
            debt_free_date=debt_free_date,
            summary=summarize_debts(debts),
        )

        if self._audit_logger:
            if monthly_budget <= 0:
                event = AuditEventBuilder.budget_not_configured(
                    member=self._member.value,
                    debt_count=len(plan),
                    correlation_id=correlation_id,
                )
            else:
                event = AuditEventBuilder.payoff_plan_built(
                    member=self._member.value,
                    monthly_budget=monthly_budget,
                    debt_count=len(plan),
                    debt_free_date=debt_free_date.isoformat() if debt_free_date else None,
                    correlation_id=correlation_id,
                )
            self._audit_logger.log(event)

        return overview

    def pay(
        self,
        debt: Debt,
        amount: int,
        paid_on: Optional[date] = None,
        notes: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> tuple[Debt, DebtPayment]:
        """
        Apply a payment to a debt.

        Raises:
            DebtPaymentError: If the payment cannot be applied. The
                rejection is audited before re-raising.
        """
        correlation_id = correlation_id or create_correlation_id()

        try:
            updated, payment = apply_debt_payment(
                debt, amount, paid_on=paid_on or date.today(), notes=notes
            )
        except DebtPaymentError as e:
            if self._audit_logger:
                self._audit_logger.log(AuditEventBuilder.debt_payment_rejected(
                    debt_id=debt.id,
                    reason=str(e),
                    correlation_id=correlation_id,
                ))
            raise

        if self._audit_logger:
            self._audit_logger.log(AuditEventBuilder.debt_payment_applied(
                debt_id=debt.id,
                amount=payment.amount,
                remaining=updated.remaining_amount,
                correlation_id=correlation_id,
            ))
            if updated.is_paid_off:
                self._audit_logger.log(AuditEventBuilder.debt_paid_off(
                    debt_id=debt.id,
                    creditor_name=debt.creditor_name,
                    correlation_id=correlation_id,
                ))

        return updated, payment


def create_app_components(
    keep_audit_history: bool = False,
) -> tuple[MonthlySplitFlow, DebtPlanningFlow, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        keep_audit_history: Keep audit events in memory as well as
                    logging them. Useful for tests.

    Returns:
        (monthly_split_flow, debt_planning_flow, audit_logger)
    """
    settings = get_settings()
    configure_logging(settings.app)
    audit_logger = AuditLogger(keep_history=keep_audit_history)

    monthly_split_flow = MonthlySplitFlow(
        audit_logger=audit_logger,
        settings=settings,
    )
    debt_planning_flow = DebtPlanningFlow(
        audit_logger=audit_logger,
        settings=settings,
    )

    return monthly_split_flow, debt_planning_flow, audit_logger
