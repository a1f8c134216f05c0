"""
Split rule table.

Fixed at design time. Built (and checked for totality) once at import.
"""

from hogar.models.household import (
    Category,
    EqualSplit,
    Member,
    PercentageRule,
    SplitRuleTable,
)


SPLIT_RULES = SplitRuleTable(
    rules={
        Category.ARRIENDO: PercentageRule(
            percentages={Member.ALEX: 70, Member.DUVAN: 15, Member.MANUEL: 15}
        ),
        Category.GARAJE: PercentageRule(
            percentages={Member.ALEX: 50, Member.DUVAN: 50, Member.MANUEL: 0}
        ),
        Category.MERCADO: EqualSplit(),
        Category.SERVICIOS: EqualSplit(),
        Category.MAMA_FUND: PercentageRule(
            percentages={Member.ALEX: 50, Member.DUVAN: 25, Member.MANUEL: 25}
        ),
    }
)
