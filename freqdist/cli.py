"""
CLI — командная строка калькулятора распределения частот

Команда compute читает файл, строит распределение и печатает текстовый
отчёт или JSON, проверенный контрактом distribution_result.
Ошибки extraction и предусловий выводятся в stderr с кодом возврата 1.
"""

import json
import logging
from pathlib import Path

import typer

from freqdist.core.contracts import validate_distribution_result
from freqdist.extraction import ExtractorConfig
from freqdist.presentation import DistributionPresenter, PresenterConfig
from freqdist.session import CalculatorSession

app = typer.Typer(help="Grouped frequency distributions using Sturges' rule.")

logger = logging.getLogger(__name__)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Compute frequency distribution tables from CSV and Excel files.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def compute(
    file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="CSV (.csv) or Excel (.xlsx, .xls) file with numeric data.",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on the first non-numeric cell instead of skipping it."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    columns: int = typer.Option(10, "--columns", min=1, help="Cells per row in data grids."),
    decimal_separator: str = typer.Option(
        ".", "--decimal-separator", help="Decimal separator for rendered numbers."
    ),
) -> None:
    """
    Read FILE, compute the frequency distribution and print it.
    """
    try:
        presenter_config = PresenterConfig(columns=columns, decimal_separator=decimal_separator)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    session = CalculatorSession(ExtractorConfig(strict=strict))
    state = session.process_file(file)

    if not state.ok:
        typer.echo(f"Error: {state.error}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        payload = state.result.model_dump(mode="json")
        validate_distribution_result(payload)
        typer.echo(json.dumps(payload, indent=2))
        return

    logger.debug("Rendering report for %s", file)
    presenter = DistributionPresenter(presenter_config)
    typer.echo(presenter.render(state.result, original=state.data))


if __name__ == "__main__":
    app()
