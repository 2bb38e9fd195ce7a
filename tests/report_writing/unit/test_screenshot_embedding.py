"""Screenshot embedding tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from json_test_report.report_writing.report_models import ScreenshotOutcome
from json_test_report.report_writing.screenshot_embedding import embed_screenshot
from openpyxl import Workbook
from PIL import Image


def _sheet_with_path(path: Path):
    sheet = Workbook().active
    sheet.cell(row=2, column=5, value=str(path))
    return sheet


def test_embeds_valid_image_and_clears_cell_text(tmp_path: Path) -> None:
    image_path = tmp_path / "login.png"
    Image.new("RGB", (64, 32), color="blue").save(image_path)
    sheet = _sheet_with_path(image_path)

    outcome = embed_screenshot(sheet, 2, 5, str(image_path))

    assert outcome is ScreenshotOutcome.EMBEDDED
    assert sheet["E2"].value is None
    assert sheet.row_dimensions[2].height == 160
    images = sheet._images  # pylint: disable=protected-access
    assert len(images) == 1
    assert images[0].width == 300
    assert images[0].height == 160
    assert images[0].anchor == "E2"


def test_embeds_jpeg_image(tmp_path: Path) -> None:
    image_path = tmp_path / "login.jpg"
    Image.new("RGB", (64, 32), color="green").save(image_path, format="JPEG")
    sheet = _sheet_with_path(image_path)

    assert embed_screenshot(sheet, 2, 5, str(image_path)) is ScreenshotOutcome.EMBEDDED


def test_missing_file_logs_warning_and_uses_short_row(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    missing = tmp_path / "nope.png"
    sheet = _sheet_with_path(missing)

    with caplog.at_level(logging.WARNING):
        outcome = embed_screenshot(sheet, 2, 5, str(missing))

    assert outcome is ScreenshotOutcome.NOT_FOUND
    assert sheet.row_dimensions[2].height == 20
    assert sheet["E2"].value == str(missing)
    assert f"Screenshot file not found: {missing}" in caplog.text


def test_undecodable_file_logs_error_and_uses_short_row(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    broken = tmp_path / "broken.png"
    broken.write_bytes(b"definitely not an image")
    sheet = _sheet_with_path(broken)

    with caplog.at_level(logging.ERROR):
        outcome = embed_screenshot(sheet, 2, 5, str(broken))

    assert outcome is ScreenshotOutcome.LOAD_FAILED
    assert sheet.row_dimensions[2].height == 20
    assert sheet._images == []  # pylint: disable=protected-access
    assert any(record.levelno == logging.ERROR for record in caplog.records)


def test_directory_path_is_treated_as_missing(tmp_path: Path) -> None:
    sheet = _sheet_with_path(tmp_path)

    assert embed_screenshot(sheet, 2, 5, str(tmp_path)) is ScreenshotOutcome.NOT_FOUND


def test_cmyk_tiff_is_converted_so_the_workbook_saves(tmp_path: Path) -> None:
    image_path = tmp_path / "print.tiff"
    Image.new("CMYK", (32, 32), color=(0, 255, 255, 0)).save(image_path, format="TIFF")
    workbook = Workbook()
    sheet = workbook.active
    sheet.cell(row=2, column=5, value=str(image_path))

    outcome = embed_screenshot(sheet, 2, 5, str(image_path))
    output_path = tmp_path / "report.xlsx"
    workbook.save(output_path)

    assert outcome is ScreenshotOutcome.EMBEDDED
    assert sheet._images[0].format == "png"  # pylint: disable=protected-access
    assert output_path.is_file()


def test_truncated_png_is_reported_as_load_failure(tmp_path: Path) -> None:
    image_path = tmp_path / "cut.png"
    Image.new("RGB", (64, 64), color="red").save(image_path)
    image_path.write_bytes(image_path.read_bytes()[:60])
    sheet = _sheet_with_path(image_path)

    assert embed_screenshot(sheet, 2, 5, str(image_path)) is ScreenshotOutcome.LOAD_FAILED
    assert sheet.row_dimensions[2].height == 20
