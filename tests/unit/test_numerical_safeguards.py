"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. is_numeric: число в смысле JSON (bool — не число)
2. is_valid_float / is_finite_number: отсечение NaN/Inf, to_float
3. Epsilon-сравнения float
"""

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from unitopia.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_finite_number,
    is_numeric,
    is_valid_float,
    to_float,
)

# =============================================================================
# TYPE CHECKS
# =============================================================================


class TestIsNumeric:
    """Тесты для is_numeric"""

    @pytest.mark.parametrize("value", [0, 10, -3, 1.5, 1e300, math.nan, math.inf, -math.inf, Fraction(1, 3)])
    def test_numbers(self, value) -> None:
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [True, False, "10", None, [], {}, b"1"])
    def test_non_numbers(self, value) -> None:
        assert not is_numeric(value)

    def test_decimal_is_not_real(self) -> None:
        """Decimal не зарегистрирован как numbers.Real"""
        assert not is_numeric(Decimal("1.5"))


class TestFiniteness:
    """Тесты для is_valid_float / is_finite_number"""

    def test_is_valid_float(self) -> None:
        assert is_valid_float(1.0)
        assert is_valid_float(0.0)
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    @pytest.mark.parametrize("value", [0, 1715731200000, 1.5, -2.0])
    def test_finite_numbers(self, value) -> None:
        assert is_finite_number(value)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, 10**400, True, "1", None])
    def test_not_finite_numbers(self, value) -> None:
        assert not is_finite_number(value)


class TestToFloat:
    """Тесты для to_float"""

    def test_plain_numbers(self) -> None:
        assert to_float(3) == 3.0
        assert isinstance(to_float(3), float)
        assert to_float(Fraction(1, 4)) == 0.25

    def test_integer_overflow_becomes_infinity(self) -> None:
        assert to_float(10**400) == math.inf
        assert to_float(-(10**400)) == -math.inf


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e12, 1e12 * (1 + 1e-10))
        assert is_close(0.0, 1e-13)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-9)

    def test_custom_tolerance(self) -> None:
        assert is_close(1.0, 1.05, rel_tol=0.1)
        assert not is_close(1.0, 1.05, rel_tol=0.01)
