"""
Monthly periods.

Resolving "this month's" record is an explicit get-or-create keyed by
(year, month). The caller decides which month that is; nothing in here
reads the clock.
"""

from datetime import date
from typing import Iterable, NamedTuple, Optional

from hogar.config import HouseholdSettings, get_settings
from hogar.models.household import (
    Category,
    HouseholdExpense,
    MonthlyPeriod,
)


class PeriodResolution(NamedTuple):
    period: MonthlyPeriod
    seeded_expenses: list[HouseholdExpense]
    created: bool


def find_period(
    periods: Iterable[MonthlyPeriod],
    year: int,
    month: int,
) -> Optional[MonthlyPeriod]:
    for period in periods:
        if period.key == (year, month):
            return period
    return None


def seed_expenses(
    period: MonthlyPeriod,
    settings: HouseholdSettings,
) -> list[HouseholdExpense]:
    """Rent and garage rows every new period starts with."""
    first_day = date(period.year, period.month, 1)
    return [
        HouseholdExpense(
            period_id=period.id,
            category=Category.ARRIENDO,
            amount=settings.rent_amount,
            description=settings.rent_description,
            expense_date=first_day,
        ),
        HouseholdExpense(
            period_id=period.id,
            category=Category.GARAJE,
            amount=settings.garage_amount,
            description=settings.garage_description,
            expense_date=first_day,
        ),
    ]


def get_or_create_period(
    periods: Iterable[MonthlyPeriod],
    year: int,
    month: int,
    settings: Optional[HouseholdSettings] = None,
) -> PeriodResolution:
    """
    Return the existing period for (year, month), or a new seeded one.

    Calling it again with the new period included returns that same
    period with nothing seeded, so it is safe to retry.
    """
    existing = find_period(periods, year, month)
    if existing is not None:
        return PeriodResolution(period=existing, seeded_expenses=[], created=False)

    settings = settings or get_settings().household
    period = MonthlyPeriod(year=year, month=month, mama_fund_goal=settings.fund_goal)
    return PeriodResolution(
        period=period,
        seeded_expenses=seed_expenses(period, settings),
        created=True,
    )
