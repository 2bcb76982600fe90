"""Extraction — чтение числовых наблюдений из CSV и Excel файлов."""

from .extractor import (
    ExtractionError,
    ExtractionResult,
    Extractor,
    ExtractorConfig,
    NoNumericDataError,
    NonNumericCellError,
    UnsupportedFormatError,
    coerce_spreadsheet_cell,
    extract_observations,
    parse_number,
)

__all__ = [
    "ExtractionError",
    "ExtractionResult",
    "Extractor",
    "ExtractorConfig",
    "NoNumericDataError",
    "NonNumericCellError",
    "UnsupportedFormatError",
    "coerce_spreadsheet_cell",
    "extract_observations",
    "parse_number",
]
