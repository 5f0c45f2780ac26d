#!/usr/bin/env python3
"""
extractor.py
------------
Extract the body of an entry document as Markdown.

Entry documents mix the journal text with layout: a page header, the
title, photo grids, prompts. The exporter marks text paragraphs with a
body class (``p2``) and puts everything else in differently classed
wrappers, but not every export follows that convention. Extraction is
therefore a chain of strategies, tried in order until one yields text:

    1. MarkedParagraphStrategy - direct ``<p>`` children of ``<body>`` that
       carry the body class, or carry no class and have text
    2. NoiseStrippingStrategy - the whole body minus known layout blocks

The entry's title and date come from the index, not from the document.

    # My Day

    *Date: 04/02/2026*

    ---

    <body markdown>

Programmatic API:
    from journal2md.pipeline.extractor import render_entry

    markdown = render_entry(entry, html, converter)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import copy
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

# --- Third party imports ---
from bs4 import BeautifulSoup
from bs4.element import Tag

# --- Local imports ---
from journal2md.dataclasses.index_entry import IndexEntry
from journal2md.pipeline.configs import DEFAULT_CONFIG, HTML_PARSER, ExtractionConfig
from journal2md.pipeline.converter import HtmlToMarkdown, MarkdownRenderer


logger = logging.getLogger(__name__)


# ----- Strategies -----
class ExtractionStrategy(ABC):
    """One way of turning an entry document body into Markdown."""

    name = "strategy"

    @abstractmethod
    def extract(
        self, body: Tag, converter: HtmlToMarkdown, config: ExtractionConfig
    ) -> str:
        """
        Return the body Markdown, or an empty/blank string when this
        strategy does not apply to the document.

        Implementations must not modify ``body``.
        """


class MarkedParagraphStrategy(ExtractionStrategy):
    """
    Convert the body-text paragraphs directly under ``<body>``.

    A paragraph is kept when it has the body class, or when it has no
    class at all and some text. Any other class marks a header, asset or
    metadata wrapper and is dropped.
    """

    name = "marked_paragraphs"

    def extract(
        self, body: Tag, converter: HtmlToMarkdown, config: ExtractionConfig
    ) -> str:
        chunks: List[str] = []
        for paragraph in body.find_all("p", recursive=False):
            classes = paragraph.get("class") or []
            if config.body_class in classes or (
                not classes and paragraph.get_text().strip()
            ):
                chunks.append(converter.convert(paragraph.decode_contents()) + "\n\n")
        return "".join(chunks)


class NoiseStrippingStrategy(ExtractionStrategy):
    """Convert a copy of the whole body with the configured noise removed."""

    name = "noise_stripping"

    def extract(
        self, body: Tag, converter: HtmlToMarkdown, config: ExtractionConfig
    ) -> str:
        cleaned = copy.copy(body)
        if config.noise_selectors:
            for node in cleaned.select(", ".join(config.noise_selectors)):
                node.decompose()
        return converter.convert(cleaned.decode_contents())


DEFAULT_STRATEGIES: Sequence[ExtractionStrategy] = (
    MarkedParagraphStrategy(),
    NoiseStrippingStrategy(),
)


# ----- Extraction -----
def extract_body(
    markup: str,
    converter: Optional[HtmlToMarkdown] = None,
    config: ExtractionConfig = DEFAULT_CONFIG,
    strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
) -> str:
    """
    Run the strategy chain over an entry document.

    Args:
        markup: Raw entry document
        converter: HTML to Markdown converter (markdownify by default)
        config: Extraction settings
        strategies: Strategies in priority order

    Returns:
        Markdown of the first strategy whose output is not blank, or the
        last strategy's output when all come back blank
    """
    converter = converter or MarkdownRenderer(heading_style=config.heading_style)
    soup = BeautifulSoup(markup, HTML_PARSER)
    body = soup.body or soup

    result = ""
    for strategy in strategies:
        result = strategy.extract(body, converter, config)
        if result.strip():
            logger.debug(f"Body extracted with {strategy.name}")
            return result
    return result


def render_header(entry: IndexEntry, config: ExtractionConfig = DEFAULT_CONFIG) -> str:
    """Markdown header built from index metadata."""
    return (
        f"# {entry.title}\n\n"
        f"*Date: {entry.date.strftime(config.date_format)}*\n\n"
        "---\n\n"
    )


def render_entry(
    entry: IndexEntry,
    markup: str,
    converter: Optional[HtmlToMarkdown] = None,
    config: ExtractionConfig = DEFAULT_CONFIG,
    strategies: Sequence[ExtractionStrategy] = DEFAULT_STRATEGIES,
) -> str:
    """
    Build the complete Markdown document for one entry.

    Args:
        entry: Index metadata supplying title and date
        markup: Raw entry document
        converter: HTML to Markdown converter
        config: Extraction settings
        strategies: Body extraction strategies in priority order

    Returns:
        Header followed by the extracted body
    """
    return render_header(entry, config) + extract_body(
        markup, converter, config, strategies
    )
