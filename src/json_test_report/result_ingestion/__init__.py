"""Result ingestion exports."""

from .json_folder_reader import (
    IngestionResult,
    NestedResultsPayload,
    RecordListPayload,
    UnrecognizedPayload,
    classify_payload,
    read_result_folder,
)
from .result_records import (
    ResultRecord,
    normalize_result_record,
    sanitize_error_message,
    strip_suite_suffix,
)

__all__ = [
    "IngestionResult",
    "NestedResultsPayload",
    "RecordListPayload",
    "ResultRecord",
    "UnrecognizedPayload",
    "classify_payload",
    "normalize_result_record",
    "read_result_folder",
    "sanitize_error_message",
    "strip_suite_suffix",
]
