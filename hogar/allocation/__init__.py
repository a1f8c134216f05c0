"""
Allocation Package

Proportional and equal splitting of household expenses and the
support fund across contributors.
"""

from hogar.allocation.engine import (
    InvalidAmountError,
    compute_member_total,
    compute_share,
    split_amount,
)
from hogar.allocation.rules import SPLIT_RULES
from hogar.allocation.settlement import fund_progress, summarize_period

__all__ = [
    "InvalidAmountError",
    "SPLIT_RULES",
    "compute_member_total",
    "compute_share",
    "fund_progress",
    "split_amount",
    "summarize_period",
]
