"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from json_test_report.cli import cli
from openpyxl import load_workbook


def _write_results(input_dir: Path) -> Path:
    input_dir.mkdir(parents=True, exist_ok=True)
    payload = [
        {"suiteName": "Search suite4", "testName": "finds item", "status": "PASSED"},
        {
            "suiteName": "Search suite4",
            "testName": "empty query",
            "status": "FAILED",
            "error": "\u001b[31mTimeout\u001b[39m\n    at search.test.ts:12",
        },
    ]
    (input_dir / "results.json").write_text(json.dumps(payload), encoding="utf-8")
    return input_dir


def test_convert_command_writes_workbook_and_summary(tmp_path: Path) -> None:
    runner = CliRunner()
    input_dir = _write_results(tmp_path / "results")
    output_path = tmp_path / "report.xlsx"
    summary_dir = tmp_path / "summary"
    summary_dir.mkdir()

    result = runner.invoke(
        cli,
        [
            "convert",
            "--input-dir",
            str(input_dir),
            "--output",
            str(output_path),
            "--bind-screenshots",
            "yes",
            "--summary-dir",
            str(summary_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert str(output_path.resolve()) in result.output
    workbook = load_workbook(output_path)
    assert workbook.sheetnames == ["Test Results", "Summary"]
    sheet = workbook["Test Results"]
    assert sheet["E1"].value == "Screenshot"
    assert sheet["A2"].value == "Search "
    assert sheet["D3"].value.startswith("[31mTimeout[39m\n")
    assert (summary_dir / "test-summary.txt").read_text(encoding="utf-8") == (
        "Total Tests: 2, Passed Tests: 1, Failed Tests: 1"
    )


def test_convert_command_reads_configuration_file(tmp_path: Path) -> None:
    runner = CliRunner()
    _write_results(tmp_path / "results")
    config_path = tmp_path / "report-config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {
                "report": {
                    "input_dir": "results",
                    "output_path": "out/report.xlsx",
                    "bind_screenshots": "No",
                    "sanitize_errors": True,
                }
            }
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["convert", "--config", str(config_path)])

    assert result.exit_code == 0, result.output
    sheet = load_workbook(tmp_path / "out" / "report.xlsx")["Test Results"]
    assert sheet.max_column == 4
    assert sheet["D3"].value == "Timeout"


def test_cli_options_override_configuration(tmp_path: Path) -> None:
    runner = CliRunner()
    _write_results(tmp_path / "results")
    config_path = tmp_path / "report-config.yaml"
    config_path.write_text(
        yaml.safe_dump({"report": {"input_dir": "results", "output_path": "from-config.xlsx"}}),
        encoding="utf-8",
    )
    override = tmp_path / "override.xlsx"

    result = runner.invoke(
        cli,
        ["convert", "--config", str(config_path), "--output", str(override)],
    )

    assert result.exit_code == 0, result.output
    assert override.exists()
    assert not (tmp_path / "from-config.xlsx").exists()


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "report-config.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert "report:" in output_path.read_text(encoding="utf-8")
