"""
Тесты для CLI (typer)

Проверяет:
1. Текстовый отчёт
2. JSON вывод, прошедший контракт
3. Код возврата и сообщение об ошибке
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from freqdist.cli import app

runner = CliRunner()


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.csv"
    path.write_text("1,2,3,4,5\n6,7,8,9,10\n", encoding="utf-8")
    return path


class TestComputeCommand:
    """Тесты команды compute"""

    def test_text_report(self, csv_file: Path) -> None:
        result = runner.invoke(app, ["compute", str(csv_file)])

        assert result.exit_code == 0
        assert "Frequency Table" in result.output
        assert "Number of classes (K): 5" in result.output
        assert "9 - 10" in result.output

    def test_json_output(self, csv_file: Path) -> None:
        result = runner.invoke(app, ["compute", str(csv_file), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["number_of_classes"] == 5
        assert payload["class_width"] == 2
        assert [c["frequency"] for c in payload["classes"]] == [2, 2, 2, 2, 2]

    def test_decimal_separator(self, csv_file: Path) -> None:
        result = runner.invoke(app, ["compute", str(csv_file), "--decimal-separator", ","])

        assert result.exit_code == 0
        assert "4,300" in result.output

    def test_no_numeric_data_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "words.csv"
        path.write_text("a,b\n", encoding="utf-8")

        result = runner.invoke(app, ["compute", str(path)])

        assert result.exit_code == 1
        assert "no numeric data found" in result.output

    def test_strict_fails_on_text(self, tmp_path: Path) -> None:
        path = tmp_path / "mixed.csv"
        path.write_text("1,x\n", encoding="utf-8")

        result = runner.invoke(app, ["compute", str(path), "--strict"])

        assert result.exit_code == 1
        assert "non-numeric cell" in result.output

    def test_ragged_csv(self, tmp_path: Path) -> None:
        path = tmp_path / "ragged.csv"
        path.write_text("1\n2,3\n4,5,6\n", encoding="utf-8")

        result = runner.invoke(app, ["compute", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["sorted_data"] == [1, 2, 3, 4, 5, 6]

    def test_corrupt_xls_fails_cleanly(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.xls"
        path.write_bytes(bytes.fromhex("D0CF11E0A1B11AE1") + bytes(600))

        result = runner.invoke(app, ["compute", str(path)])

        assert result.exit_code == 1
        assert "Error: failed to read broken.xls" in result.output

    def test_missing_file_rejected(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["compute", str(tmp_path / "missing.csv")])
        assert result.exit_code != 0
