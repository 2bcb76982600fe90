"""
Presenter — текстовое представление DistributionResult

Формирует:
- Сетку исходных/отсортированных данных (по умолчанию 10 столбцов)
- Сводку: n, min, max, размах, K и PK с записью округления
- Таблицу частот (pandas DataFrame): Lower Edge, Class Interval,
  Upper Edge, Midpoint, Frequency

Единственная настройка локали — десятичный разделитель.
"""

from dataclasses import dataclass
from typing import Final, Sequence

import pandas as pd

from freqdist.core.domain.distribution import ClassRecord, DistributionResult

# Колонки таблицы частот
FREQUENCY_COLUMNS: Final[tuple[str, ...]] = (
    "Lower Edge",
    "Class Interval",
    "Upper Edge",
    "Midpoint",
    "Frequency",
)


@dataclass(frozen=True)
class PresenterConfig:
    """Конфигурация Presenter."""

    # Столбцов в сетке данных
    columns: int = 10

    # Знаков после запятой для сырых K и PK
    raw_decimals: int = 3

    # Знаков после запятой для границ классов
    edge_decimals: int = 1

    decimal_separator: str = "."

    def __post_init__(self) -> None:
        if self.columns < 1:
            raise ValueError(f"columns must be >= 1, got {self.columns}")
        if self.raw_decimals < 0 or self.edge_decimals < 0:
            raise ValueError("decimal places must be non-negative")
        if not self.decimal_separator:
            raise ValueError("decimal_separator must not be empty")


class DistributionPresenter:
    """Текстовый рендеринг результата расчёта распределения частот."""

    def __init__(self, config: PresenterConfig | None = None):
        self.config = config or PresenterConfig()

    # -------------------------------------------------------------------------
    # Числа
    # -------------------------------------------------------------------------

    def format_number(self, value: float) -> str:
        """
        Число в кратчайшей записи: целые без дробной части.

        Examples (decimal_separator="."):
            5.0  -> "5"
            1.5  -> "1.5"
            -0.5 -> "-0.5"
        """
        if float(value).is_integer():
            text = str(int(value))
        else:
            text = repr(float(value))
        return self._localize(text)

    def format_fixed(self, value: float, decimals: int) -> str:
        """Число с фиксированным количеством знаков после запятой."""
        return self._localize(f"{value:.{decimals}f}")

    def _localize(self, text: str) -> str:
        if self.config.decimal_separator == ".":
            return text
        return text.replace(".", self.config.decimal_separator)

    # -------------------------------------------------------------------------
    # Блоки отчёта
    # -------------------------------------------------------------------------

    def class_interval(self, record: ClassRecord) -> str:
        """Запись интервала класса: '<lower> - <upper>'."""
        return (
            f"{self.format_number(record.lower_limit)} - "
            f"{self.format_number(record.upper_limit)}"
        )

    def summary_lines(self, result: DistributionResult) -> list[str]:
        """
        Сводка расчёта с записью округления K и PK.

        Сырые значения выводятся с raw_decimals знаками.
        """
        raw_k = self.format_fixed(result.raw_number_of_classes, self.config.raw_decimals)
        raw_width = self.format_fixed(result.raw_class_width, self.config.raw_decimals)
        coefficient = self._localize("3.3")

        lines = [
            f"Data: {result.n} values",
            f"Minimum: {self.format_number(result.min_value)}",
            f"Maximum: {self.format_number(result.max_value)}",
            f"Range (R): {self.format_number(result.range)}",
            (
                f"Number of classes (K): {result.number_of_classes} "
                f"(K = 1 + {coefficient} log {result.n} = {raw_k} -> rounded up)"
            ),
            (
                f"Class width (PK): {result.class_width} "
                f"(PK = {self.format_number(result.range)} / {result.number_of_classes}"
                f" = {raw_width} -> rounded up)"
            ),
        ]

        if result.uncounted:
            lines.append(
                f"Note: {result.uncounted} value(s) above the last class upper limit "
                f"{self.format_number(result.classes[-1].upper_limit)} are not counted"
            )

        return lines

    def frequency_frame(self, result: DistributionResult) -> pd.DataFrame:
        """Таблица частот как DataFrame (все ячейки уже отформатированы)."""
        decimals = self.config.edge_decimals
        rows = [
            (
                self.format_fixed(record.lower_edge, decimals),
                self.class_interval(record),
                self.format_fixed(record.upper_edge, decimals),
                self.format_number(record.midpoint),
                record.frequency,
            )
            for record in result.classes
        ]
        return pd.DataFrame(rows, columns=list(FREQUENCY_COLUMNS))

    def data_grid(self, values: Sequence[float]) -> list[list[str]]:
        """
        Сетка данных по config.columns столбцов.

        Последняя строка дополняется пустыми ячейками.
        """
        width = self.config.columns
        cells = [self.format_number(value) for value in values]
        grid = []
        for start in range(0, len(cells), width):
            row = cells[start:start + width]
            row.extend([""] * (width - len(row)))
            grid.append(row)
        return grid

    def render_grid(self, values: Sequence[float]) -> str:
        """Сетка данных как выровненный текст."""
        grid = self.data_grid(values)
        if not grid:
            return ""
        return pd.DataFrame(grid).to_string(index=False, header=False)

    # -------------------------------------------------------------------------
    # Полный отчёт
    # -------------------------------------------------------------------------

    def render(
        self,
        result: DistributionResult,
        original: Sequence[float] | None = None,
    ) -> str:
        """
        Полный текстовый отчёт.

        Args:
            result: Результат расчёта
            original: Исходные (неотсортированные) данные; если None, блок пропускается

        Returns:
            Многострочный отчёт
        """
        sections = []

        if original is not None:
            sections.append("Original Data\n" + self.render_grid(original))

        sections.append("Results\n" + "\n".join(self.summary_lines(result)))
        sections.append(
            "Frequency Table\n" + self.frequency_frame(result).to_string(index=False)
        )
        sections.append("Sorted Data\n" + self.render_grid(result.sorted_data))

        return "\n\n".join(sections)
