"""
Тесты для Presenter

Проверяет:
1. Форматирование чисел и десятичный разделитель
2. Сводку с записью округления K и PK
3. Таблицу частот (DataFrame)
4. Сетку данных по столбцам
5. Полный отчёт
"""

import pytest

from freqdist.core.math import compute_frequency_distribution
from freqdist.presentation import FREQUENCY_COLUMNS, DistributionPresenter, PresenterConfig


@pytest.fixture
def result_one_to_ten():
    return compute_frequency_distribution([10, 9, 8, 7, 6, 5, 4, 3, 2, 1])


@pytest.fixture
def presenter() -> DistributionPresenter:
    return DistributionPresenter()


# =============================================================================
# CONFIG
# =============================================================================


class TestPresenterConfig:
    """Тесты для PresenterConfig"""

    def test_defaults(self) -> None:
        config = PresenterConfig()
        assert config.columns == 10
        assert config.raw_decimals == 3
        assert config.edge_decimals == 1
        assert config.decimal_separator == "."

    def test_invalid_columns(self) -> None:
        with pytest.raises(ValueError, match="columns must be >= 1"):
            PresenterConfig(columns=0)

    def test_empty_separator(self) -> None:
        with pytest.raises(ValueError, match="decimal_separator"):
            PresenterConfig(decimal_separator="")


# =============================================================================
# ЧИСЛА
# =============================================================================


class TestNumberFormatting:
    """Тесты форматирования чисел"""

    def test_integral_without_fraction(self, presenter: DistributionPresenter) -> None:
        assert presenter.format_number(5.0) == "5"
        assert presenter.format_number(-3) == "-3"

    def test_fraction_kept(self, presenter: DistributionPresenter) -> None:
        assert presenter.format_number(1.5) == "1.5"
        assert presenter.format_number(-0.5) == "-0.5"

    def test_fixed(self, presenter: DistributionPresenter) -> None:
        assert presenter.format_fixed(4.3, 3) == "4.300"
        assert presenter.format_fixed(0.5, 1) == "0.5"

    def test_decimal_separator(self) -> None:
        presenter = DistributionPresenter(PresenterConfig(decimal_separator=","))
        assert presenter.format_number(1.5) == "1,5"
        assert presenter.format_fixed(2.574, 3) == "2,574"
        assert presenter.format_number(7.0) == "7"


# =============================================================================
# СВОДКА И ТАБЛИЦА
# =============================================================================


class TestSummaryAndTable:
    """Тесты сводки и таблицы частот"""

    def test_summary_lines(self, presenter, result_one_to_ten) -> None:
        lines = presenter.summary_lines(result_one_to_ten)

        assert lines[0] == "Data: 10 values"
        assert lines[1] == "Minimum: 1"
        assert lines[2] == "Maximum: 10"
        assert lines[3] == "Range (R): 9"
        assert lines[4] == (
            "Number of classes (K): 5 (K = 1 + 3.3 log 10 = 4.300 -> rounded up)"
        )
        assert lines[5] == "Class width (PK): 2 (PK = 9 / 5 = 1.800 -> rounded up)"
        assert len(lines) == 6

    def test_summary_notes_uncounted_tail(self, presenter) -> None:
        result = compute_frequency_distribution(list(range(0, 11)))
        lines = presenter.summary_lines(result)
        assert lines[-1].startswith("Note: 1 value(s) above the last class upper limit 9")

    def test_frequency_frame(self, presenter, result_one_to_ten) -> None:
        frame = presenter.frequency_frame(result_one_to_ten)

        assert list(frame.columns) == list(FREQUENCY_COLUMNS)
        assert len(frame) == 5
        assert frame.iloc[0].tolist() == ["0.5", "1 - 2", "2.5", "1.5", 2]
        assert frame.iloc[4].tolist() == ["8.5", "9 - 10", "10.5", "9.5", 2]
        assert frame["Frequency"].sum() == 10

    def test_frequency_frame_separator(self, result_one_to_ten) -> None:
        presenter = DistributionPresenter(PresenterConfig(decimal_separator=","))
        frame = presenter.frequency_frame(result_one_to_ten)
        assert frame.iloc[0]["Lower Edge"] == "0,5"
        assert frame.iloc[0]["Midpoint"] == "1,5"


# =============================================================================
# СЕТКА ДАННЫХ
# =============================================================================


class TestDataGrid:
    """Тесты сетки данных"""

    def test_rows_padded(self, presenter: DistributionPresenter) -> None:
        grid = presenter.data_grid(list(range(1, 13)))

        assert len(grid) == 2
        assert grid[0] == [str(v) for v in range(1, 11)]
        assert grid[1] == ["11", "12"] + [""] * 8

    def test_custom_columns(self) -> None:
        presenter = DistributionPresenter(PresenterConfig(columns=3))
        grid = presenter.data_grid([1.5, 2, 3, 4])
        assert grid == [["1.5", "2", "3"], ["4", "", ""]]

    def test_empty(self, presenter: DistributionPresenter) -> None:
        assert presenter.data_grid([]) == []
        assert presenter.render_grid([]) == ""


# =============================================================================
# ОТЧЁТ
# =============================================================================


class TestRender:
    """Тесты полного отчёта"""

    def test_sections_in_order(self, presenter, result_one_to_ten) -> None:
        report = presenter.render(result_one_to_ten, original=[10, 9, 8, 7, 6, 5, 4, 3, 2, 1])

        positions = [
            report.index(title)
            for title in ("Original Data", "Results", "Frequency Table", "Sorted Data")
        ]
        assert positions == sorted(positions)
        assert "9 - 10" in report
        assert "Class Interval" in report

    def test_original_optional(self, presenter, result_one_to_ten) -> None:
        report = presenter.render(result_one_to_ten)
        assert "Original Data" not in report
        assert report.startswith("Results")
