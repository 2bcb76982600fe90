"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию
2. Поиск первого невалидного наблюдения
3. Округление вверх с нижней границей
"""

import pytest

from freqdist.core.math.numerical_safeguards import (
    ceil_at_least,
    first_non_finite_index,
    is_valid_float,
)

# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-12.5)
        assert is_valid_float(1e308)

    def test_non_finite_values(self) -> None:
        """NaN и ±Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_integer_beyond_float_range(self) -> None:
        """Целое вне диапазона float невалидно (без OverflowError)"""
        assert not is_valid_float(10**400)
        assert is_valid_float(10**300)


class TestFirstNonFiniteIndex:
    """Тесты для first_non_finite_index"""

    def test_all_finite(self) -> None:
        assert first_non_finite_index([1.0, 2.0, 3.0]) is None

    def test_empty(self) -> None:
        assert first_non_finite_index([]) is None

    def test_reports_first_offender(self) -> None:
        """Возвращается индекс первого NaN/Inf"""
        values = [1.0, 2.0, float("inf"), float("nan")]
        assert first_non_finite_index(values) == 2

    def test_reports_overflowing_integer(self) -> None:
        assert first_non_finite_index([1, 2, 10**400]) == 2


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


class TestCeilAtLeast:
    """Тесты для ceil_at_least"""

    def test_rounds_up(self) -> None:
        assert ceil_at_least(1.8, 1) == 2
        assert ceil_at_least(1.0000001, 1) == 2

    def test_integer_unchanged(self) -> None:
        assert ceil_at_least(4.0, 1) == 4

    def test_zero_clamped_to_minimum(self) -> None:
        """ceil(0) = 0 заменяется минимумом"""
        assert ceil_at_least(0.0, 1) == 1

    def test_returns_int(self) -> None:
        assert isinstance(ceil_at_least(2.5, 1), int)

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="not NaN/Inf"):
            ceil_at_least(float("nan"), 1)
