"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReportSettings:
    """Normalized settings for one report conversion."""

    input_dir: Path
    output_path: Path
    bind_screenshots: bool = False
    summary_dir: Path | None = None
    sanitize_errors: bool = False


def parse_screenshot_flag(value: object) -> bool:
    """Interpret the screenshot binding flag: ``"Yes"`` in any case enables it."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().upper() == "YES"
    return False
