#!/usr/bin/env python3
"""
converter.py
------------
HTML to Markdown conversion.

The pipeline only needs ``convert(html_fragment) -> str``. MarkdownRenderer
provides it on top of markdownify; tests and callers may inject any object
with the same method.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Protocol

# --- Third party imports ---
from markdownify import markdownify as md_convert


class HtmlToMarkdown(Protocol):
    def convert(self, html_fragment: str) -> str: ...


class MarkdownRenderer:
    """
    markdownify-backed converter with the export's Markdown conventions.

    Headings use ``#`` prefixes, lists use ``-`` bullets, and the output is
    stripped of the blank lines markdownify puts around block elements.
    """

    def __init__(self, heading_style: str = "atx", bullets: str = "-") -> None:
        self.heading_style = heading_style
        self.bullets = bullets

    def convert(self, html_fragment: str) -> str:
        return md_convert(
            html_fragment,
            heading_style=self.heading_style,
            bullets=self.bullets,
        ).strip()
