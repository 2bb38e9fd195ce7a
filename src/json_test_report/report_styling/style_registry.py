"""Static style table for the results workbook."""

from __future__ import annotations

from dataclasses import dataclass

from openpyxl.cell.cell import Cell
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

BORDER_COLOR = "000000"
HEADER_FILL_COLOR = "4F81BD"
SUMMARY_HEADER_FILL_COLOR = "002060"
PASSED_FILL_COLOR = "C6EFCE"
FAILED_FILL_COLOR = "FFC7CE"


@dataclass(frozen=True)
class CellStyle:
    """Bundle of cell style parts; ``None`` parts leave the cell untouched."""

    font: Font | None = None
    alignment: Alignment | None = None
    fill: PatternFill | None = None
    border: Border | None = None

    def apply(self, cell: Cell) -> None:
        """Set each defined style part on ``cell``."""
        if self.font is not None:
            cell.font = self.font
        if self.alignment is not None:
            cell.alignment = self.alignment
        if self.fill is not None:
            cell.fill = self.fill
        if self.border is not None:
            cell.border = self.border


@dataclass(frozen=True)
class StyleRegistry:  # pylint: disable=too-many-instance-attributes
    """Named styles shared by the sheet builders of one run."""

    header: CellStyle
    summary_header: CellStyle
    suite_label: CellStyle
    data_cell: CellStyle
    cell_border: Border
    cell_alignment: Alignment
    passed_fill: PatternFill
    failed_fill: PatternFill


def border_style(weight: str) -> Border:
    """Build a border with the same weight and colour on all four sides."""
    side = Side(style=weight, color=BORDER_COLOR)
    return Border(left=side, right=side, top=side, bottom=side)


def solid_fill(color: str) -> PatternFill:
    """Build a solid background fill in ``color`` (RRGGBB)."""
    return PatternFill(fill_type="solid", fgColor=color)


def build_style_registry() -> StyleRegistry:
    """Create the style registry used for one conversion run."""
    centered = Alignment(horizontal="center", vertical="center", wrap_text=True)
    header_font = Font(name="Calibri", bold=True, color="FFFFFF")
    return StyleRegistry(
        header=CellStyle(
            font=header_font,
            alignment=centered,
            fill=solid_fill(HEADER_FILL_COLOR),
            border=border_style("medium"),
        ),
        summary_header=CellStyle(
            font=header_font,
            alignment=centered,
            fill=solid_fill(SUMMARY_HEADER_FILL_COLOR),
            border=border_style("medium"),
        ),
        suite_label=CellStyle(font=Font(bold=True), alignment=centered),
        data_cell=CellStyle(
            font=Font(name="Calibri", bold=False),
            alignment=centered,
            border=border_style("thin"),
        ),
        cell_border=border_style("thin"),
        cell_alignment=centered,
        passed_fill=solid_fill(PASSED_FILL_COLOR),
        failed_fill=solid_fill(FAILED_FILL_COLOR),
    )
