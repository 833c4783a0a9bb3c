"""
Configuration loader — reads demo-ci.yml overrides into a PipelineConfig.

The built-in defaults describe the Godot demo-projects repository.  A
YAML file may replace any top-level key (templates, exclusions,
variants, discovery rules); keys it doesn't mention keep their default.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from demo_ci.core.config.defaults import default_config
from demo_ci.core.models.pipeline import PipelineConfig

logger = logging.getLogger(__name__)

# Override file looked up in the scanned repository root
PIPELINE_CONFIG_FILE = "demo-ci.yml"


class ConfigError(Exception):
    """Raised when the pipeline configuration is invalid or unreadable."""


def find_config_file(root: Path) -> Path | None:
    """Return ``root/demo-ci.yml`` if it exists, else None."""
    candidate = root / PIPELINE_CONFIG_FILE
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None) -> PipelineConfig:
    """Load the pipeline configuration.

    Args:
        path: Optional YAML override file. If None, the built-in
            defaults are returned unchanged.

    Returns:
        Validated PipelineConfig.

    Raises:
        ConfigError: If the file is missing, unreadable or invalid.
    """
    defaults = default_config()
    if path is None:
        return defaults

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading pipeline config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file means "no overrides"
    if data is None:
        return defaults

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    unknown = sorted(set(data) - set(PipelineConfig.model_fields))
    if unknown:
        raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    merged = defaults.model_dump()
    merged.update(data)

    try:
        config = PipelineConfig.model_validate(merged)
    except Exception as e:
        raise ConfigError(f"Invalid pipeline configuration: {e}") from e

    logger.info(
        "Loaded pipeline config from %s (%d variants, %d excluded)",
        path, len(config.variants), len(config.excluded),
    )
    return config
