"""
Distribution — модели результата распределения частот

Immutable Pydantic модели, представляющие результат группировки наблюдений
по правилу Sturges:
- ClassRecord: один класс (пределы, границы, середина, частота)
- DistributionResult: полный результат расчёта с сырыми и округлёнными значениями

Инварианты проверяются при конструировании; модель после создания не меняется.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# Смещение границы класса относительно предела (целочисленные классы)
BOUNDARY_OFFSET: Final[float] = 0.5

# Толерантность сравнения пределов (дробные пределы накапливают ошибку)
LIMIT_REL_TOL: Final[float] = 1e-9
LIMIT_ABS_TOL: Final[float] = 1e-12


def _same(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=LIMIT_REL_TOL, abs_tol=LIMIT_ABS_TOL)


# =============================================================================
# CLASS RECORD
# =============================================================================


class ClassRecord(BaseModel):
    """
    Один класс распределения частот.

    Пределы (limits) используются для подсчёта частоты включительно с обеих сторон.
    Границы (edges) = предел ± 0.5, только для отображения.
    """

    lower_limit: float = Field(..., description="Нижний предел класса (включительно)")
    upper_limit: float = Field(..., description="Верхний предел класса (включительно)")
    lower_edge: float = Field(..., description="Нижняя граница класса (lower_limit - 0.5)")
    upper_edge: float = Field(..., description="Верхняя граница класса (upper_limit + 0.5)")
    midpoint: float = Field(..., description="Середина класса")
    frequency: int = Field(..., ge=0, description="Количество наблюдений в классе")

    model_config = {"frozen": True}

    @field_validator("upper_limit")
    @classmethod
    def validate_upper_limit(cls, v: float, info) -> float:
        """Проверка, что upper_limit >= lower_limit"""
        if "lower_limit" in info.data:
            lower = info.data["lower_limit"]
            if v < lower:
                raise ValueError(f"upper_limit {v} must be >= lower_limit {lower}")
        return v

    @model_validator(mode="after")
    def validate_edges(self) -> "ClassRecord":
        """Проверка производных значений: границы и середина"""
        if not _same(self.lower_edge, self.lower_limit - BOUNDARY_OFFSET):
            raise ValueError(
                f"lower_edge {self.lower_edge} must equal lower_limit - {BOUNDARY_OFFSET}"
            )
        if not _same(self.upper_edge, self.upper_limit + BOUNDARY_OFFSET):
            raise ValueError(
                f"upper_edge {self.upper_edge} must equal upper_limit + {BOUNDARY_OFFSET}"
            )
        if not _same(self.midpoint, (self.lower_limit + self.upper_limit) / 2):
            raise ValueError(
                f"midpoint {self.midpoint} must equal (lower_limit + upper_limit) / 2"
            )
        return self

    def contains(self, value: float) -> bool:
        """
        Принадлежность наблюдения классу.

        Проверка по пределам [lower_limit, upper_limit], не по границам.
        """
        return self.lower_limit <= value <= self.upper_limit


# =============================================================================
# DISTRIBUTION RESULT
# =============================================================================


class DistributionResult(BaseModel):
    """
    Результат расчёта распределения частот.

    Immutable модель (frozen=True). Содержит:
    - Отсортированные данные и их экстремумы
    - Число классов (сырое и округлённое вверх)
    - Ширину класса (сырую и округлённую вверх, минимум 1)
    - Таблицу классов в порядке возрастания
    """

    sorted_data: tuple[float, ...] = Field(
        ..., min_length=1, description="Наблюдения по возрастанию"
    )
    min_value: float = Field(..., description="Минимальное наблюдение")
    max_value: float = Field(..., description="Максимальное наблюдение")
    range: float = Field(..., ge=0, description="max_value - min_value")

    number_of_classes: int = Field(..., ge=1, description="K = ceil(1 + 3.3 log10 n)")
    raw_number_of_classes: float = Field(..., ge=1, description="1 + 3.3 log10 n")
    class_width: int = Field(..., ge=1, description="max(1, ceil(range / K))")
    raw_class_width: float = Field(..., ge=0, description="range / K")

    classes: tuple[ClassRecord, ...] = Field(..., min_length=1, description="Классы")

    model_config = {"frozen": True}

    @field_validator("sorted_data")
    @classmethod
    def validate_sorted(cls, v: tuple[float, ...]) -> tuple[float, ...]:
        """Проверка, что данные отсортированы по возрастанию"""
        for previous, current in zip(v, v[1:]):
            if current < previous:
                raise ValueError("sorted_data must be in ascending order")
        return v

    @model_validator(mode="after")
    def validate_classes(self) -> "DistributionResult":
        """
        Проверка таблицы классов.

        - Количество классов = number_of_classes
        - Первый класс начинается с min_value
        - Смежность: upper_limit[i] + 1 == lower_limit[i+1]
        - Сумма частот <= n (хвост может не покрывать max_value)
        """
        if len(self.classes) != self.number_of_classes:
            raise ValueError(
                f"classes has {len(self.classes)} records, "
                f"expected number_of_classes={self.number_of_classes}"
            )

        if not _same(self.classes[0].lower_limit, self.min_value):
            raise ValueError(
                f"first lower_limit {self.classes[0].lower_limit} "
                f"must equal min_value {self.min_value}"
            )

        for index, (current, following) in enumerate(zip(self.classes, self.classes[1:])):
            if not _same(current.upper_limit + 1, following.lower_limit):
                raise ValueError(
                    f"classes {index} and {index + 1} are not contiguous: "
                    f"{current.upper_limit} + 1 != {following.lower_limit}"
                )

        if self.total_frequency > self.n:
            raise ValueError(
                f"total frequency {self.total_frequency} exceeds sample size {self.n}"
            )

        return self

    @property
    def n(self) -> int:
        """Размер выборки"""
        return len(self.sorted_data)

    @property
    def total_frequency(self) -> int:
        """Сумма частот по всем классам"""
        return sum(record.frequency for record in self.classes)

    @property
    def uncounted(self) -> int:
        """Наблюдения за пределами последнего класса (хвостовой разрыв)"""
        return self.n - self.total_frequency

    @property
    def covers_max_value(self) -> bool:
        """True если верхний предел последнего класса >= max_value"""
        return self.classes[-1].upper_limit >= self.max_value
