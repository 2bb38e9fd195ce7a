"""Report conversion entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from json_test_report.configuration.runtime_settings import ReportSettings
from json_test_report.report_writing.report_models import SummaryStat


@dataclass(frozen=True)
class ConversionRequest:
    """Input contract for converting one result folder."""

    input_dir: Path
    output_path: Path
    bind_screenshots: bool = False
    summary_dir: Path | None = None
    sanitize_errors: bool = False

    @classmethod
    def from_settings(cls, settings: ReportSettings) -> ConversionRequest:
        return cls(
            input_dir=settings.input_dir,
            output_path=settings.output_path,
            bind_screenshots=settings.bind_screenshots,
            summary_dir=settings.summary_dir,
            sanitize_errors=settings.sanitize_errors,
        )


@dataclass(frozen=True)
class ConversionOutcome:  # pylint: disable=too-many-instance-attributes
    """Output contract for one conversion run."""

    output_path: Path
    written: bool
    record_count: int = 0
    skipped_files: tuple[str, ...] = ()
    summary_stats: tuple[SummaryStat, ...] = ()
    summary_text_path: Path | None = None
    error: str | None = None
