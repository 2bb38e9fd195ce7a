"""Results sheet builder with suite grouping."""

from __future__ import annotations

from collections.abc import Sequence

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter

from json_test_report.report_styling.style_registry import StyleRegistry
from json_test_report.result_ingestion.result_records import ResultRecord

from .report_models import (
    FAILED_STATUS,
    PASSED_STATUS,
    RESULT_COLUMNS,
    SCREENSHOT_COLUMN,
    SHORT_ROW_HEIGHT,
    SuiteBlock,
)
from .screenshot_embedding import embed_screenshot

FIRST_DATA_ROW = 2
SUITE_COLUMN = 1


def result_columns(bind_screenshots: bool) -> tuple[tuple[str, int], ...]:
    """Return ``(header, width)`` pairs for the Test Results sheet."""
    if bind_screenshots:
        return RESULT_COLUMNS + (SCREENSHOT_COLUMN,)
    return RESULT_COLUMNS


def group_suite_blocks(
    records: Sequence[ResultRecord], first_row: int = FIRST_DATA_ROW
) -> tuple[SuiteBlock, ...]:
    """Split records into runs of adjacent rows that share a suite name.

    Order is taken as given: a suite name that reappears later opens a new block.
    """
    blocks: list[SuiteBlock] = []
    previous_suite: str | None = None
    block_start = first_row
    for index, record in enumerate(records):
        row_number = first_row + index
        if previous_suite is not None and previous_suite != record.suite_name:
            blocks.append(SuiteBlock(previous_suite, block_start, row_number - 1))
            block_start = row_number
        previous_suite = record.suite_name
    if previous_suite is not None:
        blocks.append(SuiteBlock(previous_suite, block_start, first_row + len(records) - 1))
    return tuple(blocks)


def write_test_results_sheet(
    sheet,
    records: Sequence[ResultRecord],
    *,
    bind_screenshots: bool,
    styles: StyleRegistry,
) -> tuple[SuiteBlock, ...]:
    """Render one row per record, merge suite blocks, and return the merged blocks."""
    columns = result_columns(bind_screenshots)
    _write_header_row(sheet, columns, styles)

    for index, record in enumerate(records):
        row_number = FIRST_DATA_ROW + index
        _write_record_row(sheet, row_number, record, len(columns), styles)
        if bind_screenshots and record.screenshot_path:
            embed_screenshot(sheet, row_number, len(columns), record.screenshot_path)
        else:
            sheet.row_dimensions[row_number].height = SHORT_ROW_HEIGHT

    blocks = group_suite_blocks(records)
    for block in blocks:
        _merge_suite_block(sheet, block, styles)
    return blocks


def _write_header_row(sheet, columns: Sequence[tuple[str, int]], styles: StyleRegistry) -> None:
    for column_index, (header, width) in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=header)
        styles.header.apply(cell)
        sheet.column_dimensions[get_column_letter(column_index)].width = width
    sheet.freeze_panes = "A2"


def _write_record_row(
    sheet,
    row_number: int,
    record: ResultRecord,
    column_count: int,
    styles: StyleRegistry,
) -> None:
    values = (
        record.suite_name,
        record.test_name,
        record.status,
        record.error,
        record.screenshot_path,
    )
    row_fill = _status_fill(record.status, styles)
    for column_index in range(1, column_count + 1):
        text = _cell_text(values[column_index - 1])
        cell = sheet.cell(row=row_number, column=column_index, value=text)
        if text is not None:
            # Leading "=" would otherwise be stored as a formula.
            cell.data_type = "s"
        cell.border = styles.cell_border
        cell.alignment = styles.cell_alignment
        if row_fill is not None:
            cell.fill = row_fill


def _cell_text(value: str | None) -> str | None:
    # Control characters (e.g. ANSI colour escapes) are not allowed in xlsx cells.
    if value is None:
        return None
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def _status_fill(status: str, styles: StyleRegistry):
    if status == PASSED_STATUS:
        return styles.passed_fill
    if status == FAILED_STATUS:
        return styles.failed_fill
    return None


def _merge_suite_block(sheet, block: SuiteBlock, styles: StyleRegistry) -> None:
    sheet.merge_cells(
        start_row=block.start_row,
        start_column=SUITE_COLUMN,
        end_row=block.end_row,
        end_column=SUITE_COLUMN,
    )
    styles.suite_label.apply(sheet.cell(row=block.start_row, column=SUITE_COLUMN))
