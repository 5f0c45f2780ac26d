"""
test_extraction_configs.py
--------------------------
Unit tests for ExtractionConfig and load_config.
"""
import pytest

from journal2md.core.exceptions import ConfigError
from journal2md.pipeline.configs import (
    DEFAULT_CONFIG,
    HTML_PARSER,
    NOISE_SELECTORS,
    ExtractionConfig,
    load_config,
)


class TestExtractionConfig:
    """Tests for ExtractionConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.body_class == "p2"
        assert DEFAULT_CONFIG.date_format == "%d/%m/%Y"
        assert DEFAULT_CONFIG.heading_style == "atx"
        assert DEFAULT_CONFIG.index_filename == "index.html"
        assert DEFAULT_CONFIG.index_max_depth == 2
        assert HTML_PARSER == "lxml"
        assert NOISE_SELECTORS == (
            ".pageHeader", ".title", ".assetGrid", ".reflectionPrompt",
            ".photoBanner", "style", "script",
        )

    def test_empty_body_class_rejected(self):
        with pytest.raises(ConfigError):
            ExtractionConfig(body_class="")

    def test_unknown_heading_style_rejected(self):
        with pytest.raises(ConfigError, match="heading_style"):
            ExtractionConfig(heading_style="setext")

    def test_depth_must_be_positive(self):
        with pytest.raises(ConfigError):
            ExtractionConfig(index_max_depth=0)

    def test_from_dict_overrides(self):
        config = ExtractionConfig.from_dict(
            {"body_class": "text", "noise_selectors": [".ad"], "index_max_depth": 3}
        )
        assert config.body_class == "text"
        assert config.noise_selectors == (".ad",)
        assert config.index_max_depth == 3
        assert config.date_format == DEFAULT_CONFIG.date_format

    def test_from_dict_unknown_key(self):
        with pytest.raises(ConfigError, match="colour"):
            ExtractionConfig.from_dict({"colour": "blue"})

    @pytest.mark.parametrize(
        "data",
        [
            {"noise_selectors": ".ad"},
            {"noise_selectors": [1, 2]},
            {"index_max_depth": "2"},
            {"date_format": 5},
        ],
    )
    def test_from_dict_wrong_types(self, data):
        with pytest.raises(ConfigError):
            ExtractionConfig.from_dict(data)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") is DEFAULT_CONFIG

    def test_none_gives_defaults(self):
        assert load_config(None) is DEFAULT_CONFIG

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "journal2md.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) is DEFAULT_CONFIG

    def test_extraction_section(self, tmp_path):
        path = tmp_path / "journal2md.yaml"
        path.write_text(
            "extraction:\n"
            "  date_format: '%Y-%m-%d'\n"
            "  noise_selectors:\n"
            "    - .banner\n"
            "    - script\n",
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.date_format == "%Y-%m-%d"
        assert config.noise_selectors == (".banner", "script")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "journal2md.yaml"
        path.write_text("extraction: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot read config"):
            load_config(path)

    def test_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "journal2md.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_section_must_be_mapping(self, tmp_path):
        path = tmp_path / "journal2md.yaml"
        path.write_text("extraction: p2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="'extraction'"):
            load_config(path)
