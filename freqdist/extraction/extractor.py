"""
Extractor — извлечение числовых наблюдений из файлов

Поддерживаемые форматы:
- .csv  — все ячейки читаются как текст и разбираются явным парсером чисел
- .xlsx / .xls — первый лист, числовые ячейки книги

Ячейки обходятся построчно (row-major), порядок наблюдений сохраняется.
Нечисловые ячейки по умолчанию пропускаются; в strict режиме первая такая
ячейка приводит к NonNumericCellError. Пустые ячейки игнорируются всегда.
NaN/Inf никогда не возвращаются как наблюдения.
"""

import csv
import logging
import numbers
import re
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Final, Optional

import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException
from xlrd import XLRDError
from xlrd.compdoc import CompDocError

from freqdist.core.math.numerical_safeguards import is_valid_float

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

CSV_EXTENSIONS: Final[frozenset[str]] = frozenset({".csv"})
SPREADSHEET_EXTENSIONS: Final[frozenset[str]] = frozenset({".xlsx", ".xls"})
SUPPORTED_EXTENSIONS: Final[frozenset[str]] = CSV_EXTENSIONS | SPREADSHEET_EXTENSIONS

# Десятичное число: целое, с точкой, с экспонентой; без знака '+' и без nan/inf
NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$"
)

# Ошибки движков pandas (openpyxl для .xlsx, xlrd для .xls) при чтении книги
SPREADSHEET_READ_ERRORS: Final[tuple[type[Exception], ...]] = (
    OSError,
    ValueError,
    KeyError,
    ImportError,
    zipfile.BadZipFile,
    InvalidFileException,
    XLRDError,
    CompDocError,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExtractionError(Exception):
    """Ошибка чтения файла наблюдений."""


class UnsupportedFormatError(ExtractionError):
    """Расширение файла не поддерживается."""


class NoNumericDataError(ExtractionError):
    """В файле нет ни одной числовой ячейки."""


class NonNumericCellError(ExtractionError):
    """Нечисловая ячейка в strict режиме."""

    def __init__(self, row: int, column: int, text: str):
        self.row = row
        self.column = column
        self.text = text
        super().__init__(f"non-numeric cell at row {row}, column {column}: {text!r}")


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class ExtractorConfig:
    """Конфигурация Extractor."""

    # Ошибка на первой нечисловой ячейке вместо пропуска
    strict: bool = False

    # Лист книги (индекс или имя); по умолчанию первый
    sheet_name: int | str = 0

    # Кодировка CSV
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ExtractionResult:
    """Наблюдения, извлечённые из файла."""

    values: tuple[float, ...]  # в исходном порядке
    skipped_cells: int
    source: Path


# =============================================================================
# CELL PARSING
# =============================================================================


def parse_number(text: str) -> Optional[float]:
    """
    Разбор текста ячейки CSV в число.

    Returns:
        float если текст является конечным десятичным числом, иначе None

    Examples:
        >>> parse_number(" 42 ")
        42.0
        >>> parse_number("1.5e2")
        150.0
        >>> parse_number("nan") is None
        True
        >>> parse_number("abc") is None
        True
    """
    if not NUMBER_PATTERN.match(text):
        return None

    value = float(text)
    if not is_valid_float(value):
        return None
    return value


def coerce_spreadsheet_cell(cell: Any) -> Optional[float]:
    """
    Числовое значение ячейки книги.

    bool не считается числом (pandas отдаёт логические ячейки как bool).

    Ячейки с датой не считаются числом: openpyxl и xlrd отдают их как
    datetime, и серийный номер даты Excel в наблюдения не попадает.
    Такие ячейки пропускаются (или вызывают ошибку в strict режиме).

    Returns:
        float для конечной числовой ячейки, иначе None
    """
    if isinstance(cell, bool) or not isinstance(cell, numbers.Real):
        return None

    if not is_valid_float(cell):
        return None
    return float(cell)


def _is_blank(cell: Any) -> bool:
    if cell is None:
        return True
    if isinstance(cell, str):
        return cell.strip() == ""
    return isinstance(cell, float) and cell != cell


# =============================================================================
# EXTRACTOR
# =============================================================================


class Extractor:
    """
    Извлечение наблюдений из CSV и Excel файлов.

    Чтение таблицы выполняется pandas без заголовка; разбор ячеек явный:
    каждая непустая ячейка либо становится наблюдением, либо учитывается
    как пропущенная (или вызывает ошибку в strict режиме).
    """

    def __init__(self, config: ExtractorConfig | None = None):
        self.config = config or ExtractorConfig()

    def extract(self, path: Path | str) -> ExtractionResult:
        """
        Извлечение наблюдений из файла.

        Args:
            path: Путь к .csv / .xlsx / .xls файлу

        Returns:
            ExtractionResult с наблюдениями в исходном порядке

        Raises:
            UnsupportedFormatError: Неподдерживаемое расширение
            NoNumericDataError: Нет числовых ячеек
            NonNumericCellError: Нечисловая ячейка (strict)
            ExtractionError: Ошибка чтения файла
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix not in SUPPORTED_EXTENSIONS:
            raise UnsupportedFormatError(
                f"unsupported file format {suffix or '(none)'!r}: "
                f"expected one of {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
            )

        if suffix in CSV_EXTENSIONS:
            frame = self._read_csv(path)
            parse = parse_number
        else:
            frame = self._read_spreadsheet(path)
            parse = coerce_spreadsheet_cell

        values, skipped = self._collect(frame, parse)

        if not values:
            raise NoNumericDataError(f"no numeric data found in {path.name}")

        logger.info(
            "Loaded %d observations from %s (%d non-numeric cells skipped)",
            len(values),
            path,
            skipped,
        )
        return ExtractionResult(values=tuple(values), skipped_cells=skipped, source=path)

    def _read_csv(self, path: Path) -> pd.DataFrame:
        """
        Чтение CSV как таблицы строк.

        Строки могут иметь разное число полей: ширина таблицы берётся
        по самой длинной строке, короткие строки дополняются пустыми
        ячейками. Номера строк и столбцов ячеек сохраняются.
        """
        try:
            width = self._csv_width(path)
            if width == 0:
                return pd.DataFrame()

            return pd.read_csv(
                path,
                header=None,
                names=range(width),
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                encoding=self.config.encoding,
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame()
        except (OSError, UnicodeDecodeError, csv.Error, pd.errors.ParserError) as e:
            logger.error("Failed to read CSV %s: %s", path, e)
            raise ExtractionError(f"failed to read {path.name}: {e}") from e

    def _csv_width(self, path: Path) -> int:
        # Максимальное число полей в строке (с учётом кавычек)
        with open(path, "r", encoding=self.config.encoding, newline="") as f:
            return max((len(row) for row in csv.reader(f)), default=0)

    def _read_spreadsheet(self, path: Path) -> pd.DataFrame:
        try:
            return pd.read_excel(path, sheet_name=self.config.sheet_name, header=None)
        except SPREADSHEET_READ_ERRORS as e:
            logger.error("Failed to read spreadsheet %s: %s", path, e)
            raise ExtractionError(f"failed to read {path.name}: {e}") from e

    def _collect(
        self,
        frame: pd.DataFrame,
        parse: Callable[[Any], Optional[float]],
    ) -> tuple[list[float], int]:
        values: list[float] = []
        skipped = 0

        for row_index, row in enumerate(frame.itertuples(index=False, name=None), start=1):
            for column_index, cell in enumerate(row, start=1):
                if _is_blank(cell):
                    continue

                value = parse(cell)
                if value is not None:
                    values.append(value)
                    continue

                if self.config.strict:
                    raise NonNumericCellError(row_index, column_index, str(cell))

                logger.debug("Skipping non-numeric cell (%d, %d): %r", row_index, column_index, cell)
                skipped += 1

        return values, skipped


def extract_observations(
    path: Path | str,
    config: ExtractorConfig | None = None,
) -> ExtractionResult:
    """
    Извлечение наблюдений из файла (convenience).

    Args:
        path: Путь к файлу
        config: Конфигурация Extractor (optional)

    Returns:
        ExtractionResult
    """
    return Extractor(config).extract(path)
