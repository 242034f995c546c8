"""Data models for taxgraph."""

from taxgraph.models.enums import FilingStatus
from taxgraph.models.reports import FormLines, ReturnSummary
from taxgraph.models.tax_forms import W2, ReturnInput

__all__ = [
    "FilingStatus",
    "FormLines",
    "ReturnInput",
    "ReturnSummary",
    "W2",
]
