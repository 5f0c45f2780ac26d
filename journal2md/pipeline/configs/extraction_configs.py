#!/usr/bin/env python3
"""
extraction_configs.py
---------------------
Settings for locating the index and extracting entry bodies.

All markup conventions of the journal export live here so a differently
styled export only needs a YAML override, not a code change:

    # journal2md.yaml
    extraction:
      body_class: p2
      noise_selectors:
        - .pageHeader
        - .title
      date_format: "%d/%m/%Y"

Usage:
    from journal2md.pipeline.configs import load_config

    config = load_config(Path("journal2md.yaml"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from journal2md.core.exceptions import ConfigError


BODY_TEXT_CLASS = "p2"
"""Class the exporter puts on paragraphs holding the entry text."""

NOISE_SELECTORS: Tuple[str, ...] = (
    ".pageHeader",
    ".title",
    ".assetGrid",
    ".reflectionPrompt",
    ".photoBanner",
    "style",
    "script",
)
"""Layout blocks removed before the whole body is converted."""

HTML_PARSER = "lxml"
"""BeautifulSoup tree builder for index and entry documents."""

DATE_DISPLAY_FORMAT = "%d/%m/%Y"
HEADING_STYLE = "atx"
INDEX_FILENAME = "index.html"
INDEX_MAX_DEPTH = 2


@dataclass(frozen=True)
class ExtractionConfig:
    """
    Attributes:
        body_class: Marker class of body-text paragraphs
        noise_selectors: CSS selectors stripped by the fallback extractor
        date_format: strftime pattern for the ``*Date: ...*`` header line
        heading_style: Markdown heading style ('atx', 'atx_closed', 'underlined')
        index_filename: Basename of the index document
        index_max_depth: Deepest path (in segments) the index may sit at
    """

    body_class: str = BODY_TEXT_CLASS
    noise_selectors: Tuple[str, ...] = NOISE_SELECTORS
    date_format: str = DATE_DISPLAY_FORMAT
    heading_style: str = HEADING_STYLE
    index_filename: str = INDEX_FILENAME
    index_max_depth: int = INDEX_MAX_DEPTH

    def __post_init__(self) -> None:
        if not self.body_class:
            raise ConfigError("body_class must not be empty")
        if self.heading_style not in {"atx", "atx_closed", "underlined"}:
            raise ConfigError(f"Unsupported heading_style: {self.heading_style!r}")
        if self.index_max_depth < 1:
            raise ConfigError(
                f"index_max_depth must be at least 1, got {self.index_max_depth}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ExtractionConfig:
        """
        Build a config from a mapping, defaults filling the gaps.

        Raises:
            ConfigError: On unknown keys or wrongly typed values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown extraction setting(s): {', '.join(unknown)}")

        overrides = dict(data)
        if "noise_selectors" in overrides:
            selectors = overrides["noise_selectors"]
            if not isinstance(selectors, list) or not all(
                isinstance(s, str) for s in selectors
            ):
                raise ConfigError("noise_selectors must be a list of CSS selectors")
            overrides["noise_selectors"] = tuple(selectors)
        if "index_max_depth" in overrides and not isinstance(
            overrides["index_max_depth"], int
        ):
            raise ConfigError("index_max_depth must be an integer")
        for key in ("body_class", "date_format", "heading_style", "index_filename"):
            if key in overrides and not isinstance(overrides[key], str):
                raise ConfigError(f"{key} must be a string")

        return replace(cls(), **overrides)


DEFAULT_CONFIG = ExtractionConfig()


def load_config(path: Optional[Path] = None) -> ExtractionConfig:
    """
    Load extraction settings from a YAML file.

    A missing path or file yields the defaults. The file must hold a
    mapping; its optional ``extraction`` key overrides individual settings.

    Args:
        path: YAML file location

    Returns:
        ExtractionConfig instance

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid settings
    """
    if path is None or not path.is_file():
        return DEFAULT_CONFIG

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    section = data.get("extraction") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'extraction' must be a mapping: {path}")

    return ExtractionConfig.from_dict(section)
