"""Monthly period package."""

from hogar.periods.ledger import (
    PeriodResolution,
    find_period,
    get_or_create_period,
    seed_expenses,
)

__all__ = [
    "PeriodResolution",
    "find_period",
    "get_or_create_period",
    "seed_expenses",
]
