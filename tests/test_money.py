"""Tests for rounding and currency formatting."""

import pytest
from decimal import Decimal
from fractions import Fraction

from hogar.money import (
    ceil_div,
    divide_round,
    format_cop,
    format_cop_short,
    round_half_up,
)


class TestRounding:
    """Tests for round_half_up, divide_round and ceil_div."""

    def test_half_up(self):
        """Test halves round away from zero, unlike round()."""
        assert round_half_up(Decimal("2.5")) == 3
        assert round_half_up(Decimal("-2.5")) == -3
        assert round_half_up(Fraction(9, 2)) == 5

    def test_nearest(self):
        """Test ordinary rounding to nearest."""
        assert round_half_up(Decimal("2.49")) == 2
        assert divide_round(100, 3) == 33
        assert divide_round(200, 3) == 67

    def test_ceil_div(self):
        """Test exact ceiling division."""
        assert ceil_div(5, 2) == 3
        assert ceil_div(4, 2) == 2
        assert ceil_div(0, 3) == 0
        assert ceil_div(200000, 100000) == 2
        assert ceil_div(200001, 100000) == 3


class TestFormatting:
    """Tests for format_cop and format_cop_short."""

    @pytest.mark.parametrize("amount,expected", [
        (900000, "$ 900.000"),
        (0, "$ 0"),
        (999, "$ 999"),
        (1234567, "$ 1.234.567"),
        (-5000, "-$ 5.000"),
    ])
    def test_format_cop(self, amount, expected):
        """Test dot thousands separators and no decimals."""
        assert format_cop(amount) == expected

    @pytest.mark.parametrize("amount,expected", [
        (1250000, "$1.3M"),
        (1000000, "$1.0M"),
        (350000, "$350K"),
        (1500, "$2K"),
        (999, "$ 999"),
    ])
    def test_format_cop_short(self, amount, expected):
        """Test compact millions and thousands."""
        assert format_cop_short(amount) == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
