"""Report writing domain exports."""

from .report_models import (
    SUMMARY_SHEET_NAME,
    TEST_RESULTS_SHEET_NAME,
    ScreenshotOutcome,
    SuiteBlock,
    SummaryStat,
    WorkbookWriteResult,
)
from .results_sheet_builder import group_suite_blocks, write_test_results_sheet
from .screenshot_embedding import embed_screenshot
from .summary_sheet_builder import (
    calculate_summary_stats,
    format_summary_line,
    write_summary_sheet,
    write_summary_text_file,
)
from .workbook_sink import save_workbook

__all__ = [
    "SUMMARY_SHEET_NAME",
    "TEST_RESULTS_SHEET_NAME",
    "ScreenshotOutcome",
    "SuiteBlock",
    "SummaryStat",
    "WorkbookWriteResult",
    "calculate_summary_stats",
    "embed_screenshot",
    "format_summary_line",
    "group_suite_blocks",
    "save_workbook",
    "write_summary_sheet",
    "write_summary_text_file",
    "write_test_results_sheet",
]
