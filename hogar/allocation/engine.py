"""
Allocation Engine

Given an amount and a category, work out what each member owes.

IMPORTANT: Each member's share is rounded on its own. The shares of one
amount do not have to add back up to it (100 split equally is 33 each,
99 in total) and that gap is left alone.
"""

from fractions import Fraction
from typing import Mapping, Optional

from hogar.allocation.rules import SPLIT_RULES
from hogar.models.household import (
    CONTRIBUTOR_COUNT,
    Category,
    EqualSplit,
    Member,
    SplitRuleTable,
)
from hogar.money import divide_round, round_half_up


class InvalidAmountError(ValueError):
    """A negative amount was handed to the allocation engine."""
    pass


def compute_share(
    amount: int,
    category: Category,
    member: Member,
    rules: Optional[SplitRuleTable] = None,
) -> int:
    """
    Return the part of `amount` that `member` owes for `category`.

    Equal splits always divide by CONTRIBUTOR_COUNT. A zero percentage
    short-circuits to 0.
    """
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}")

    rule = (rules or SPLIT_RULES).rule_for(category)

    if isinstance(rule, EqualSplit):
        return divide_round(amount, CONTRIBUTOR_COUNT)

    percentage = rule.percentage_for(member)
    if percentage == 0:
        return 0
    return round_half_up(Fraction(amount * percentage, 100))


def split_amount(
    amount: int,
    category: Category,
    rules: Optional[SplitRuleTable] = None,
) -> dict[Member, int]:
    """Every member's share of one amount."""
    return {
        member: compute_share(amount, category, member, rules)
        for member in Member
    }


def compute_member_total(
    expenses: Mapping[Category, int],
    fund_amount: int,
    member: Member,
    rules: Optional[SplitRuleTable] = None,
) -> int:
    """
    What a member owes for a whole month.

    `expenses` maps household categories to their totals; the support
    fund is passed separately as `fund_amount`.
    """
    total = 0
    for category, amount in expenses.items():
        total += compute_share(amount, category, member, rules)
    total += compute_share(fund_amount, Category.MAMA_FUND, member, rules)
    return total
