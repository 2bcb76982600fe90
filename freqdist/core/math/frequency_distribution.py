"""
Frequency Distribution — группировка наблюдений по правилу Sturges

Модуль вычисляет распределение частот для числовых наблюдений:
- Размах: R = Xmax - Xmin
- Число классов: K = ceil(1 + 3.3 * log10(n))
- Ширина класса: PK = max(1, ceil(R / K))
- Классы с целочисленными пределами, смежные и непересекающиеся
- Частоты с включением обоих пределов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой вход → EmptyInputError (log10(0) никогда не вычисляется)
2. NaN/Inf во входе → NonFiniteValueError
3. Ширина класса >= 1 даже при R == 0
4. Округление K и PK выполняется независимо, в два шага (K первым).
   Верхний предел последнего класса может не достигать Xmax:
   такие наблюдения не попадают ни в один класс.
5. Результат не зависит от порядка входных данных

ФОРМУЛЫ:
    upper_limit_i = lower_limit_i + PK - 1
    lower_edge_i  = lower_limit_i - 0.5
    upper_edge_i  = upper_limit_i + 0.5
    midpoint_i    = (lower_limit_i + upper_limit_i) / 2
    lower_limit_{i+1} = upper_limit_i + 1
"""

import math
from bisect import bisect_left, bisect_right
from typing import Final, Sequence

from freqdist.core.domain.distribution import (
    BOUNDARY_OFFSET,
    ClassRecord,
    DistributionResult,
)
from freqdist.core.math.numerical_safeguards import (
    ceil_at_least,
    first_non_finite_index,
)

# =============================================================================
# ПАРАМЕТРЫ ПРАВИЛА STURGES
# =============================================================================

# Коэффициент при log10(n) в формуле числа классов
STURGES_COEFFICIENT: Final[float] = 3.3

# Минимальная ширина класса (защита от R == 0)
MIN_CLASS_WIDTH: Final[int] = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DistributionInputError(ValueError):
    """Нарушение предусловия расчёта распределения частот."""


class EmptyInputError(DistributionInputError):
    """Нет ни одного наблюдения: число классов не определено (log10(0))."""


class NonFiniteValueError(DistributionInputError):
    """Во входных данных присутствует NaN или ±Inf."""


# =============================================================================
# ШАГИ АЛГОРИТМА
# =============================================================================


def sturges_number_of_classes(n: int) -> tuple[int, float]:
    """
    Число классов по правилу Sturges.

    K_raw = 1 + 3.3 * log10(n)
    K = ceil(K_raw)

    Args:
        n: Размер выборки (>= 1)

    Returns:
        (number_of_classes, raw_number_of_classes)

    Raises:
        EmptyInputError: Если n < 1

    Examples:
        >>> sturges_number_of_classes(1)
        (1, 1.0)
        >>> sturges_number_of_classes(10)
        (5, 4.3)
    """
    if n < 1:
        raise EmptyInputError(f"number of classes is undefined for sample size {n}")

    raw_number_of_classes = 1 + STURGES_COEFFICIENT * math.log10(n)
    return math.ceil(raw_number_of_classes), raw_number_of_classes


def class_width_for(value_range: float, number_of_classes: int) -> tuple[int, float]:
    """
    Ширина класса.

    PK_raw = R / K
    PK = max(1, ceil(PK_raw))

    K передаётся уже округлённым: ширина считается от округлённого K,
    а не от K_raw.

    Args:
        value_range: Размах R (>= 0)
        number_of_classes: Округлённое число классов K (>= 1)

    Returns:
        (class_width, raw_class_width)

    Examples:
        >>> class_width_for(9, 5)
        (2, 1.8)
        >>> class_width_for(0, 3)
        (1, 0.0)
    """
    if number_of_classes < 1:
        raise ValueError(f"number_of_classes must be >= 1, got {number_of_classes}")

    raw_class_width = value_range / number_of_classes
    return ceil_at_least(raw_class_width, MIN_CLASS_WIDTH), raw_class_width


def build_classes(
    sorted_data: Sequence[float],
    number_of_classes: int,
    class_width: int,
) -> tuple[ClassRecord, ...]:
    """
    Построение таблицы классов и подсчёт частот.

    Первый класс начинается с минимального наблюдения, каждый следующий
    с upper_limit + 1 предыдущего. Частота считается по пределам
    включительно: lower_limit <= v <= upper_limit. Границы (edges)
    в подсчёте не участвуют.

    Args:
        sorted_data: Наблюдения по возрастанию (непустые)
        number_of_classes: Число классов K
        class_width: Ширина класса PK

    Returns:
        Кортеж ClassRecord в порядке возрастания
    """
    records = []
    lower_limit = sorted_data[0]

    for _ in range(number_of_classes):
        upper_limit = lower_limit + class_width - 1
        frequency = bisect_right(sorted_data, upper_limit) - bisect_left(
            sorted_data, lower_limit
        )

        records.append(
            ClassRecord(
                lower_limit=lower_limit,
                upper_limit=upper_limit,
                lower_edge=lower_limit - BOUNDARY_OFFSET,
                upper_edge=upper_limit + BOUNDARY_OFFSET,
                midpoint=(lower_limit + upper_limit) / 2,
                frequency=frequency,
            )
        )

        lower_limit = upper_limit + 1

    return tuple(records)


# =============================================================================
# РАСЧЁТ РАСПРЕДЕЛЕНИЯ
# =============================================================================


def compute_frequency_distribution(values: Sequence[float]) -> DistributionResult:
    """
    Расчёт распределения частот по правилу Sturges.

    Порядок:
    1. Валидация (непустой вход, все значения finite)
    2. Сортировка по возрастанию
    3. Размах R = max - min
    4. K = ceil(1 + 3.3 log10 n)
    5. PK = max(1, ceil(R / K))
    6. Классы и частоты

    Чистая функция: входная последовательность не изменяется, результат
    строится по собственному снапшоту входа.

    Args:
        values: Наблюдения в любом порядке (дубликаты учитываются)

    Returns:
        DistributionResult с сырыми и округлёнными значениями

    Raises:
        EmptyInputError: Если values пустая
        NonFiniteValueError: Если есть NaN/Inf
    """
    observations = tuple(values)

    if not observations:
        raise EmptyInputError("cannot compute a frequency distribution without observations")

    bad_index = first_non_finite_index(observations)
    if bad_index is not None:
        raise NonFiniteValueError(
            f"observation at index {bad_index} is not a finite number: {observations[bad_index]}"
        )

    sorted_data = tuple(sorted(observations))
    min_value = sorted_data[0]
    max_value = sorted_data[-1]
    value_range = max_value - min_value

    number_of_classes, raw_number_of_classes = sturges_number_of_classes(len(sorted_data))
    class_width, raw_class_width = class_width_for(value_range, number_of_classes)

    classes = build_classes(sorted_data, number_of_classes, class_width)

    return DistributionResult(
        sorted_data=sorted_data,
        min_value=min_value,
        max_value=max_value,
        range=value_range,
        number_of_classes=number_of_classes,
        raw_number_of_classes=raw_number_of_classes,
        class_width=class_width,
        raw_class_width=raw_class_width,
        classes=classes,
    )
