"""
Data structures shared across the journal2md pipeline.

- IndexEntry: one journal day as listed in the index document
- ConversionResult: outcome of converting one entry
"""
from .index_entry import IndexEntry, parse_anchor_text
from .conversion_result import ConversionResult, FailureKind

__all__ = [
    "IndexEntry",
    "parse_anchor_text",
    "ConversionResult",
    "FailureKind",
]
