"""
journal2md
==========

Convert a browser-exported journal archive into Markdown.

The export is a static folder (or a .zip of it) with one ``index.html``
linking to a document per journal day. This package recovers the entry list
from the index, selects entries by date range, extracts the meaningful body
of each entry document and packages the result either as a .zip of daily
Markdown files or as a single concatenated Markdown document.

Main Components:
    - pipeline: Index parsing, file resolution, extraction, filtering, export
    - builders: Archive and single-document artifact builders
    - core: Logging, exceptions, paths, statistics, temporary files
    - dataclasses: Entry metadata and conversion results
    - utils: Filename helpers

Primary Interfaces:
    - journal2md.pipeline.cli: Command-line interface
    - journal2md.pipeline.session.ExportSession: Loaded export state
    - journal2md.pipeline.packager.export_entries: Batch conversion

Example Usage:
    >>> from journal2md.pipeline.resolver import open_source
    >>> from journal2md.pipeline.session import ExportSession
    >>> from journal2md.pipeline.packager import ExportMode, export_entries
    >>> session = ExportSession.load(open_source(Path("~/Journal.zip")))
    >>> result = export_entries(session, session.default_range(), ExportMode.ARCHIVE, Path("out"))
    >>> result.stats.summary()
"""

__version__ = "1.0.0"
__author__ = "journal2md contributors"
