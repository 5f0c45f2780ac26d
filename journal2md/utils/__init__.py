"""
Utilities package for journal2md.

- fs: Export artifact and member filenames

Import commonly-used utilities directly from this package:
    from journal2md.utils import entry_filename, sanitize_filename_component
"""

from .fs import (
    archive_filename,
    deduplicate_filename,
    document_filename,
    entry_filename,
    sanitize_filename_component,
)

__all__ = [
    "archive_filename",
    "deduplicate_filename",
    "document_filename",
    "entry_filename",
    "sanitize_filename_component",
]
