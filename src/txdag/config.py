from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .builder import DEFAULT_MAX_NODES, ORIGIN_ID
from .errors import ConfigError
from .io import read_text

MAX_DECIMALS = 15

CONFIG_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "analysis": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "maxNodes": {"type": "integer", "minimum": 0},
                "root": {"type": "integer", "minimum": 0},
            },
        },
        "output": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "decimals": {"type": "integer", "minimum": 0, "maximum": MAX_DECIMALS},
                "format": {"enum": ["text", "json"]},
            },
        },
        "logging": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
            },
        },
    },
}


@dataclass(frozen=True)
class AnalysisConfig:
    max_nodes: int = DEFAULT_MAX_NODES
    root: int = ORIGIN_ID
    decimals: int = 2
    output_format: str = "text"
    log_level: str = "WARNING"

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> AnalysisConfig:
        """Validate a raw config mapping and lay it over the defaults."""
        try:
            jsonschema.validate(raw, CONFIG_SCHEMA)
        except jsonschema.ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigError(f"Invalid configuration at {path}: {e.message}") from e

        analysis = raw.get("analysis", {})
        output = raw.get("output", {})
        log = raw.get("logging", {})
        defaults = AnalysisConfig()
        return AnalysisConfig(
            max_nodes=analysis.get("maxNodes", defaults.max_nodes),
            root=analysis.get("root", defaults.root),
            decimals=output.get("decimals", defaults.decimals),
            output_format=output.get("format", defaults.output_format),
            log_level=log.get("level", defaults.log_level),
        )

    def with_overrides(self, **overrides: Any) -> AnalysisConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(path: Path | str | None) -> AnalysisConfig:
    """Load an :class:`AnalysisConfig` from a YAML file, or defaults when ``path`` is None."""
    if path is None:
        return AnalysisConfig()
    try:
        raw = yaml.safe_load(read_text(path))
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse configuration file {path}: {e}") from e
    if raw is None:
        return AnalysisConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file {path} must contain a mapping")
    return AnalysisConfig.from_dict(raw)
