"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ReportSettings, parse_screenshot_flag


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ReportSettings:
    """Load and validate a YAML/JSON report configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return _parse_report_section(parsed.get("report"), path.parent)


def _parse_report_section(value: Any, base_path: Path) -> ReportSettings:
    section = _require_mapping(value, "report")
    input_dir = _require_non_empty_string(section.get("input_dir"), "report.input_dir")
    output_path = _require_non_empty_string(section.get("output_path"), "report.output_path")
    summary_dir = _optional_string(section.get("summary_dir"), "report.summary_dir")
    return ReportSettings(
        input_dir=_resolve_path(base_path, input_dir),
        output_path=_resolve_path(base_path, output_path),
        bind_screenshots=parse_screenshot_flag(section.get("bind_screenshots", "No")),
        summary_dir=_resolve_path(base_path, summary_dir) if summary_dir else None,
        sanitize_errors=_optional_bool(section.get("sanitize_errors"), "report.sanitize_errors"),
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
