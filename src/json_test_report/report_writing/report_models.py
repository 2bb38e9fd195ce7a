"""Report writing entities and layout constants."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

TEST_RESULTS_SHEET_NAME = "Test Results"
SUMMARY_SHEET_NAME = "Summary"
SUMMARY_TEXT_FILENAME = "test-summary.txt"

PASSED_STATUS = "PASSED"
FAILED_STATUS = "FAILED"

RESULT_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Suite Name", 25),
    ("Test Name", 40),
    ("Status", 10),
    ("Error", 60),
)
SCREENSHOT_COLUMN: tuple[str, int] = ("Screenshot", 40)
SUMMARY_COLUMNS: tuple[tuple[str, int], ...] = (("Metric", 25), ("Value", 15))

SHORT_ROW_HEIGHT = 20
TALL_ROW_HEIGHT = 160
SCREENSHOT_WIDTH = 300
SCREENSHOT_HEIGHT = 160


class ScreenshotOutcome(str, Enum):
    """Result of trying to embed a screenshot into a row."""

    NOT_REQUESTED = "NOT_REQUESTED"
    EMBEDDED = "EMBEDDED"
    NOT_FOUND = "NOT_FOUND"
    LOAD_FAILED = "LOAD_FAILED"


@dataclass(frozen=True)
class SuiteBlock:
    """Adjacent rows sharing one suite name, merged in the first column."""

    suite_name: str
    start_row: int
    end_row: int


@dataclass(frozen=True)
class SummaryStat:
    """One row of the Summary sheet."""

    metric: str
    value: int


@dataclass(frozen=True)
class WorkbookWriteResult:
    """Outcome of serializing a workbook to disk."""

    output_path: Path
    written: bool
    error: str | None = None
