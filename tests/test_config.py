"""Tests for YAML configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from txdag.config import AnalysisConfig, load_config
from txdag.errors import ConfigError

REPO_CONFIG = Path(__file__).parent.parent / "configs" / "txdag.yaml"


class TestLoadConfig:
    def test_defaults_without_path(self):
        cfg = load_config(None)
        assert cfg == AnalysisConfig()
        assert cfg.max_nodes == 100_000
        assert cfg.root == 0
        assert cfg.decimals == 2
        assert cfg.output_format == "text"
        assert cfg.log_level == "WARNING"

    def test_repo_config_matches_defaults(self):
        assert load_config(REPO_CONFIG) == AnalysisConfig()

    def test_partial_file_keeps_defaults(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("analysis:\n  maxNodes: 10\noutput:\n  format: json\n", encoding="utf-8")
        cfg = load_config(p)
        assert cfg.max_nodes == 10
        assert cfg.output_format == "json"
        assert cfg.decimals == 2

    def test_empty_file(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("", encoding="utf-8")
        assert load_config(p) == AnalysisConfig()

    def test_schema_violation(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("analysis:\n  maxNodes: -1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="analysis.maxNodes"):
            load_config(p)

    def test_unknown_key(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("output:\n  colour: red\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(p)

    def test_bad_format_value(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("output:\n  format: xml\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="output.format"):
            load_config(p)

    def test_yaml_syntax_error(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("analysis: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_config(p)

    def test_non_mapping(self, tmp_path: Path):
        p = tmp_path / "cfg.yaml"
        p.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(p)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(OSError):
            load_config(tmp_path / "missing.yaml")


class TestOverrides:
    def test_none_overrides_are_ignored(self):
        cfg = AnalysisConfig(max_nodes=7).with_overrides(max_nodes=None, decimals=4)
        assert cfg.max_nodes == 7
        assert cfg.decimals == 4
