"""Calculator Session — явное состояние вызывающей стороны.

Замена неявного UI-состояния (data / results / error / loading) на явный
immutable снапшот:
- Каждый вызов process_* строит новый SessionState и заменяет предыдущий
- Ошибки extraction и предусловий расчёта сохраняются как сообщение,
  не пробрасываются
- Результат и ошибка взаимоисключающие
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from freqdist.core.domain.distribution import DistributionResult
from freqdist.core.math.frequency_distribution import (
    DistributionInputError,
    compute_frequency_distribution,
)
from freqdist.extraction.extractor import ExtractionError, Extractor, ExtractorConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Снапшот состояния сессии после последнего вызова."""

    data: tuple[float, ...]  # исходный порядок
    result: Optional[DistributionResult]
    error: Optional[str]

    # Диагностика
    source: Optional[Path] = None
    skipped_cells: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None


EMPTY_STATE = SessionState(data=(), result=None, error=None)


class CalculatorSession:
    """Сессия калькулятора: Extractor → Distribution Calculator.

    Хранит только последний SessionState; вызывающая сторона перезапускает
    расчёт явно, кэширования и инкрементального обновления нет.
    """

    def __init__(self, extractor_config: ExtractorConfig | None = None):
        self.extractor = Extractor(extractor_config)
        self._state = EMPTY_STATE

    @property
    def state(self) -> SessionState:
        return self._state

    def process_file(self, path: Path | str) -> SessionState:
        """Извлечение наблюдений из файла и расчёт распределения.

        Args:
            path: Путь к .csv / .xlsx / .xls файлу

        Returns:
            Новый SessionState (также доступен через .state)
        """
        path = Path(path)
        try:
            extraction = self.extractor.extract(path)
        except ExtractionError as e:
            logger.error("Extraction failed for %s: %s", path, e)
            return self._replace(SessionState(data=(), result=None, error=str(e), source=path))

        return self._compute(
            extraction.values,
            source=path,
            skipped_cells=extraction.skipped_cells,
        )

    def process_values(self, values: Sequence[float]) -> SessionState:
        """Расчёт распределения для уже извлечённых наблюдений."""
        return self._compute(tuple(values))

    def reset(self) -> SessionState:
        return self._replace(EMPTY_STATE)

    def _compute(
        self,
        values: tuple[float, ...],
        source: Optional[Path] = None,
        skipped_cells: int = 0,
    ) -> SessionState:
        try:
            result = compute_frequency_distribution(values)
        except DistributionInputError as e:
            logger.error("Distribution computation rejected input: %s", e)
            return self._replace(
                SessionState(
                    data=values,
                    result=None,
                    error=str(e),
                    source=source,
                    skipped_cells=skipped_cells,
                )
            )

        logger.debug(
            "Computed distribution: n=%d K=%d PK=%d",
            result.n,
            result.number_of_classes,
            result.class_width,
        )
        return self._replace(
            SessionState(
                data=values,
                result=result,
                error=None,
                source=source,
                skipped_cells=skipped_cells,
            )
        )

    def _replace(self, state: SessionState) -> SessionState:
        self._state = state
        return state
