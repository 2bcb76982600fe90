"""Presentation — текстовый рендеринг результата расчёта."""

from .presenter import FREQUENCY_COLUMNS, DistributionPresenter, PresenterConfig

__all__ = [
    "FREQUENCY_COLUMNS",
    "DistributionPresenter",
    "PresenterConfig",
]
