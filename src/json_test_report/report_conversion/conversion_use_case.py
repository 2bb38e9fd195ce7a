"""Report conversion use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from json_test_report.report_styling import build_style_registry
from json_test_report.report_writing import (
    SUMMARY_SHEET_NAME,
    TEST_RESULTS_SHEET_NAME,
    SummaryStat,
    calculate_summary_stats,
    save_workbook,
    write_summary_sheet,
    write_summary_text_file,
    write_test_results_sheet,
)
from json_test_report.result_ingestion import read_result_folder

from .conversion_contracts import ConversionOutcome, ConversionRequest

logger = logging.getLogger(__name__)


def execute_report_conversion(request: ConversionRequest) -> ConversionOutcome:
    """Convert one folder of JSON results into a workbook; failures are reported, not raised."""
    try:
        return _convert(request)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        logger.exception("Error converting JSON to Excel")
        return ConversionOutcome(
            output_path=Path(request.output_path),
            written=False,
            error=str(exc) or exc.__class__.__name__,
        )


def _convert(request: ConversionRequest) -> ConversionOutcome:
    styles = build_style_registry()
    ingestion = read_result_folder(request.input_dir, sanitize_errors=request.sanitize_errors)
    logger.info("Ingested %d test results from %s", len(ingestion.records), request.input_dir)

    workbook = Workbook()
    results_sheet = workbook.active
    if results_sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(results_sheet, Worksheet)
    results_sheet.title = TEST_RESULTS_SHEET_NAME
    write_test_results_sheet(
        results_sheet,
        ingestion.records,
        bind_screenshots=request.bind_screenshots,
        styles=styles,
    )

    stats = calculate_summary_stats(ingestion.records)
    write_summary_sheet(workbook.create_sheet(SUMMARY_SHEET_NAME), stats, styles=styles)
    write_result = save_workbook(workbook, request.output_path)

    return ConversionOutcome(
        output_path=write_result.output_path,
        written=write_result.written,
        record_count=len(ingestion.records),
        skipped_files=ingestion.skipped_files,
        summary_stats=stats,
        summary_text_path=_write_text_summary(stats, request.summary_dir),
        error=write_result.error,
    )


def _write_text_summary(stats: tuple[SummaryStat, ...], summary_dir: Path | None) -> Path | None:
    if summary_dir is None:
        return None
    try:
        return write_summary_text_file(stats, summary_dir)
    except OSError as exc:
        logger.error("Error writing text summary to %s: %s", summary_dir, exc)
        return None
