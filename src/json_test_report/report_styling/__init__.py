"""Report styling exports."""

from .style_registry import CellStyle, StyleRegistry, border_style, build_style_registry

__all__ = [
    "CellStyle",
    "StyleRegistry",
    "border_style",
    "build_style_registry",
]
