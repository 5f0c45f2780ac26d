"""
Builders package for journal2md.

Artifact builders collect converted entries and write the export:
- ZipArchiveBuilder: one Markdown file per entry in a .zip
- MarkdownDocumentBuilder: every entry in one Markdown document

Both follow the ArtifactBuilder interface (add / finalize / discard).
"""

from journal2md.builders.base import ArtifactBuilder
from journal2md.builders.archive import ZipArchiveBuilder
from journal2md.builders.document import ENTRY_SEPARATOR, MarkdownDocumentBuilder

__all__ = [
    "ArtifactBuilder",
    "ENTRY_SEPARATOR",
    "MarkdownDocumentBuilder",
    "ZipArchiveBuilder",
]
