"""Summary aggregation, Summary sheet and plain-text summary."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl.utils import get_column_letter

from json_test_report.report_styling.style_registry import StyleRegistry
from json_test_report.result_ingestion.result_records import ResultRecord

from .report_models import (
    FAILED_STATUS,
    PASSED_STATUS,
    SUMMARY_COLUMNS,
    SUMMARY_TEXT_FILENAME,
    SummaryStat,
)


def calculate_summary_stats(records: Sequence[ResultRecord]) -> tuple[SummaryStat, ...]:
    """Count all, passed and failed records, in that fixed order."""
    passed = sum(1 for record in records if record.status == PASSED_STATUS)
    failed = sum(1 for record in records if record.status == FAILED_STATUS)
    return (
        SummaryStat(metric="Total Tests", value=len(records)),
        SummaryStat(metric="Passed Tests", value=passed),
        SummaryStat(metric="Failed Tests", value=failed),
    )


def write_summary_sheet(sheet, stats: Sequence[SummaryStat], *, styles: StyleRegistry) -> None:
    """Render the Metric/Value table with a frozen header row."""
    for column_index, (header, width) in enumerate(SUMMARY_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=header)
        styles.summary_header.apply(cell)
        sheet.column_dimensions[get_column_letter(column_index)].width = width

    for row_number, stat in enumerate(stats, start=2):
        for column_index, value in enumerate((stat.metric, stat.value), start=1):
            styles.data_cell.apply(sheet.cell(row=row_number, column=column_index, value=value))

    sheet.freeze_panes = "A2"


def format_summary_line(stats: Sequence[SummaryStat]) -> str:
    """Join the stats as ``Metric: value`` pairs on one line."""
    return ", ".join(f"{stat.metric}: {stat.value}" for stat in stats)


def write_summary_text_file(stats: Sequence[SummaryStat], directory: Path | str) -> Path:
    """Write the one-line summary to ``<directory>/test-summary.txt`` and return its path."""
    destination = Path(directory) / SUMMARY_TEXT_FILENAME
    destination.write_text(format_summary_line(stats), encoding="utf-8")
    return destination
