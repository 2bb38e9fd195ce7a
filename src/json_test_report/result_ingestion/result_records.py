"""Result ingestion entities and record normalization."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_SUITE_NAME = "Default Suite"
DEFAULT_STATUS = "UNKNOWN"

SUITE_SUFFIX_REGEX = re.compile(r"suite\d+\Z", re.IGNORECASE)
ANSI_ESCAPE_REGEX = re.compile(r"[\u001b\u009b]\[\d{1,2}(;\d{1,2})?(m|K)")


@dataclass(frozen=True)
class ResultRecord:
    """Normalized representation of one test outcome."""

    suite_name: str
    test_name: str | None
    status: str
    error: str
    screenshot_path: str


def normalize_result_record(
    raw: Mapping[str, Any], *, sanitize_errors: bool = False
) -> ResultRecord:
    """Turn one raw JSON test entry into a ResultRecord with defaults applied."""
    suite_name = strip_suite_suffix(_text_or_default(raw.get("suiteName"), DEFAULT_SUITE_NAME))
    error = _text_or_default(raw.get("error"), "")
    if sanitize_errors:
        error = sanitize_error_message(error)
    return ResultRecord(
        suite_name=suite_name,
        test_name=_optional_text(raw.get("testName")),
        status=_text_or_default(raw.get("status"), DEFAULT_STATUS),
        error=error,
        screenshot_path=_text_or_default(raw.get("screenshot"), ""),
    )


def strip_suite_suffix(suite_name: str) -> str:
    """Remove a trailing ``suite<digits>`` token; surrounding whitespace is left as-is."""
    return SUITE_SUFFIX_REGEX.sub("", suite_name, count=1)


def sanitize_error_message(message: str) -> str:
    """Drop ANSI colour codes and keep only the first line of an error message."""
    if not message:
        return ""
    return ANSI_ESCAPE_REGEX.sub("", message).split("\n")[0].strip()


def _text_or_default(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    return value if isinstance(value, str) else str(value)


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
