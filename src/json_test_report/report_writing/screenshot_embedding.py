"""Screenshot image embedding for result rows."""

from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from openpyxl.drawing.image import Image
from openpyxl.utils import get_column_letter
from PIL import Image as PILImage

from .report_models import (
    SCREENSHOT_HEIGHT,
    SCREENSHOT_WIDTH,
    SHORT_ROW_HEIGHT,
    TALL_ROW_HEIGHT,
    ScreenshotOutcome,
)

logger = logging.getLogger(__name__)

# Pillow modes the PNG encoder writes as-is; everything else is converted first.
PNG_MODES = frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"})


def embed_screenshot(
    sheet, row_number: int, column: int, screenshot_path: str
) -> ScreenshotOutcome:
    """Anchor the screenshot at ``screenshot_path`` to one cell and size the row for it.

    A missing or unreadable image never raises: the row falls back to the short height.
    """
    row_dimension = sheet.row_dimensions[row_number]
    path = Path(screenshot_path)
    if not path.is_file():
        logger.warning("Screenshot file not found: %s", screenshot_path)
        row_dimension.height = SHORT_ROW_HEIGHT
        return ScreenshotOutcome.NOT_FOUND

    try:
        image = _load_image(path)
    except (OSError, ValueError, SyntaxError, PILImage.DecompressionBombError) as exc:
        logger.error("Error adding screenshot image %s to results sheet: %s", path, exc)
        row_dimension.height = SHORT_ROW_HEIGHT
        return ScreenshotOutcome.LOAD_FAILED

    image.width = SCREENSHOT_WIDTH
    image.height = SCREENSHOT_HEIGHT
    cell_reference = f"{get_column_letter(column)}{row_number}"
    sheet.cell(row=row_number, column=column).value = None
    sheet.add_image(image, cell_reference)
    row_dimension.height = TALL_ROW_HEIGHT
    return ScreenshotOutcome.EMBEDDED


def _load_image(path: Path) -> Image:
    with PILImage.open(path) as source:
        source.load()
        if source.mode in PNG_MODES:
            png_ready = source
        else:
            png_ready = source.convert("RGBA" if "A" in source.getbands() else "RGB")
        buffer = BytesIO()
        png_ready.save(buffer, format="PNG")
    buffer.seek(0)
    return Image(buffer)
