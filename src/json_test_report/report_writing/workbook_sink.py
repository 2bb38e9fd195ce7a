"""Workbook serialization."""

from __future__ import annotations

import logging
from pathlib import Path

from openpyxl import Workbook

from .report_models import WorkbookWriteResult

logger = logging.getLogger(__name__)


def save_workbook(workbook: Workbook, output_path: Path | str) -> WorkbookWriteResult:
    """Save the workbook and report failures as a result instead of raising."""
    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output)
    except OSError as exc:
        logger.error("Error writing Excel report to %s: %s", output, exc)
        return WorkbookWriteResult(output_path=output, written=False, error=str(exc))
    logger.info("Excel report successfully written to %s", output)
    return WorkbookWriteResult(output_path=output, written=True)
