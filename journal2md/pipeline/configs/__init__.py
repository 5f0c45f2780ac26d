#!/usr/bin/env python3
"""
Pipeline configuration modules.

- extraction_configs: Index location and body extraction settings
"""

from journal2md.pipeline.configs.extraction_configs import (
    DEFAULT_CONFIG,
    HTML_PARSER,
    NOISE_SELECTORS,
    ExtractionConfig,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "HTML_PARSER",
    "NOISE_SELECTORS",
    "ExtractionConfig",
    "load_config",
]
