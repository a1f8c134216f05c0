"""
Hogar - Household Finance Core

Shared household expense splitting, a recurring support fund, and
personal work-income and debt-payoff planning for one contributor.

DESIGN PRINCIPLES:
1. Pure functions over plain values; storage and UI live outside
2. Integer money, rounded half-up at the point of computation
3. Closed enumerations instead of free-form strings
4. Wall-clock reads happen at the boundary, never inside the rules
"""

__version__ = "1.0.0"
__author__ = "Hogar Team"
