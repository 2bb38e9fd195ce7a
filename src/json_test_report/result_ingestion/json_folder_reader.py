"""Result folder ingestion service."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .result_records import ResultRecord, normalize_result_record

logger = logging.getLogger(__name__)

JSON_SUFFIX = ".json"
NESTED_RESULTS_FIELD = "testResults"


@dataclass(frozen=True)
class RecordListPayload:
    """JSON root is an array of raw records."""

    entries: tuple[Any, ...]


@dataclass(frozen=True)
class NestedResultsPayload:
    """JSON root is an object carrying the raw records under ``testResults``."""

    entries: tuple[Any, ...]


@dataclass(frozen=True)
class UnrecognizedPayload:
    """JSON root has no recognizable record list."""


ResultPayload = RecordListPayload | NestedResultsPayload | UnrecognizedPayload


@dataclass(frozen=True)
class IngestionResult:
    """Records read from a result folder, in ingestion order."""

    records: tuple[ResultRecord, ...]
    skipped_files: tuple[str, ...]


def classify_payload(parsed: Any) -> ResultPayload:
    """Resolve the shape of a parsed JSON document before normalization."""
    if isinstance(parsed, list):
        return RecordListPayload(entries=tuple(parsed))
    if isinstance(parsed, Mapping):
        nested = parsed.get(NESTED_RESULTS_FIELD)
        if isinstance(nested, list):
            return NestedResultsPayload(entries=tuple(nested))
    return UnrecognizedPayload()


def read_result_folder(folder: Path | str, *, sanitize_errors: bool = False) -> IngestionResult:
    """Read every ``*.json`` file of a folder and return the normalized records.

    Files are processed in directory-listing order and records keep their source order.
    A file that cannot be read, parsed or recognized is logged and skipped.

    Raises:
      OSError: If the folder itself cannot be listed.
    """
    directory = Path(folder)
    records: list[ResultRecord] = []
    skipped_files: list[str] = []
    for file_name in os.listdir(directory):
        if not file_name.endswith(JSON_SUFFIX):
            continue
        file_records = _read_result_file(directory / file_name, sanitize_errors=sanitize_errors)
        if file_records is None:
            skipped_files.append(file_name)
            continue
        records.extend(file_records)
    return IngestionResult(records=tuple(records), skipped_files=tuple(skipped_files))


def _read_result_file(path: Path, *, sanitize_errors: bool) -> list[ResultRecord] | None:
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError, RecursionError) as exc:
        logger.warning("Skipping unreadable result file %s: %s", path.name, exc)
        return None

    payload = classify_payload(parsed)
    if isinstance(payload, UnrecognizedPayload):
        logger.warning("Unexpected JSON structure in file: %s", path.name)
        return None
    return _normalize_entries(payload.entries, path.name, sanitize_errors=sanitize_errors)


def _normalize_entries(
    entries: Sequence[Any], file_name: str, *, sanitize_errors: bool
) -> list[ResultRecord]:
    records: list[ResultRecord] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            logger.warning(
                "Skipping non-object test entry #%d in file: %s", index, file_name
            )
            continue
        records.append(normalize_result_record(entry, sanitize_errors=sanitize_errors))
    return records
