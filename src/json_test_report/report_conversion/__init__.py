"""Report conversion domain exports."""

from .conversion_contracts import ConversionOutcome, ConversionRequest
from .conversion_use_case import execute_report_conversion

__all__ = [
    "ConversionOutcome",
    "ConversionRequest",
    "execute_report_conversion",
]
