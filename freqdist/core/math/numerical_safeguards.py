"""
Numerical Safeguards — примитивы численной устойчивости

Модуль обеспечивает общие проверки для расчёта распределения частот:
- NaN/Inf детекция для входных наблюдений
- Округление вверх с нижней границей (ceiling с floor-guard)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в расчёт (отклоняются на входе)
2. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Iterable, Optional

# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN, Inf
        или целое, не представимое в float
    """
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def first_non_finite_index(values: Iterable[float]) -> Optional[int]:
    """
    Индекс первого NaN/Inf значения в последовательности.

    Args:
        values: Последовательность наблюдений

    Returns:
        Индекс первого невалидного элемента или None, если все finite

    Examples:
        >>> first_non_finite_index([1.0, 2.0, 3.0]) is None
        True
        >>> first_non_finite_index([1.0, float('nan'), float('inf')])
        1
    """
    for index, value in enumerate(values):
        if not is_valid_float(value):
            return index
    return None


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def ceil_at_least(value: float, minimum: int) -> int:
    """
    Округление вверх с нижней границей.

    ceil_at_least(x, m) = max(m, ceil(x))

    Обычный math.ceil(0.0) даёт 0, что недопустимо для ширины класса,
    поэтому нижняя граница задаётся явно.

    Args:
        value: Исходное значение (finite)
        minimum: Минимально допустимый результат

    Returns:
        Целое число >= minimum

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> ceil_at_least(1.8, 1)
        2
        >>> ceil_at_least(0.0, 1)
        1
        >>> ceil_at_least(4.0, 1)
        4
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    return max(minimum, math.ceil(value))
