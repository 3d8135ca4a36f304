"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Приведение аргументов к float
2. Численное равенство (+0.0/-0.0, NaN)
3. NaN/Inf проверки и знаковый бит
4. Epsilon-сравнения float
"""

import math

import pytest

from src.core.errors import InvalidArgumentError
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    as_component,
    has_negative_sign,
    is_close,
    is_valid_float,
    numeric_equals,
)

# =============================================================================
# ТЕСТЫ ПРИВЕДЕНИЯ АРГУМЕНТОВ
# =============================================================================


class TestAsComponent:
    """Тесты для as_component"""

    def test_float_unchanged(self) -> None:
        assert as_component(1.5, "x") == 1.5

    def test_int_coerced(self) -> None:
        result = as_component(3, "x")
        assert result == 3.0
        assert isinstance(result, float)

    def test_non_finite_passed_through(self) -> None:
        """NaN/Inf не санитизируются"""
        assert math.isnan(as_component(float("nan"), "x"))
        assert as_component(float("-inf"), "x") == float("-inf")

    def test_none_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="x must not be None"):
            as_component(None, "x")

    @pytest.mark.parametrize("value", ["1.0", 1 + 0j, object(), [1.0]])
    def test_non_real_rejected(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="must be a real number"):
            as_component(value, "x")


# =============================================================================
# ТЕСТЫ РАВЕНСТВА И ПРОВЕРОК
# =============================================================================


class TestNumericEquals:
    """Тесты для numeric_equals"""

    def test_equal_values(self) -> None:
        assert numeric_equals(123.0, 123.0)

    def test_different_values(self) -> None:
        assert not numeric_equals(123.0, 123.0 + 1e-13)

    def test_signed_zero_equal(self) -> None:
        assert numeric_equals(0.0, -0.0)
        assert numeric_equals(-0.0, 0.0)

    def test_nan_never_equal(self) -> None:
        nan = float("nan")
        assert not numeric_equals(nan, nan)
        assert not numeric_equals(nan, 0.0)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestHasNegativeSign:
    """Тесты для has_negative_sign"""

    def test_positive_values(self) -> None:
        assert not has_negative_sign(1.0)
        assert not has_negative_sign(0.0)
        assert not has_negative_sign(float("inf"))

    def test_negative_values(self) -> None:
        assert has_negative_sign(-1.0)
        assert has_negative_sign(-0.0)
        assert has_negative_sign(float("-inf"))

    def test_nan_treated_as_positive(self) -> None:
        assert not has_negative_sign(float("nan"))
        assert not has_negative_sign(-float("nan"))


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_exact_equality(self) -> None:
        assert is_close(1.0, 1.0)

    def test_within_relative_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(1e10, 1e10 + 1.0)

    def test_within_absolute_tolerance(self) -> None:
        assert is_close(0.0, 1e-13)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)

    def test_custom_tolerances(self) -> None:
        assert is_close(1.0, 1.1, rel_tol=0.2)
        assert is_close(0.0, 0.05, abs_tol=0.1)

    def test_default_constants(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12
