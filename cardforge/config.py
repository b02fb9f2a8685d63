"""
Extraction settings.

Values come from the dataclass defaults, an optional YAML file and finally
the environment:

    CARDFORGE_RULES_PATH   rule store file (YAML)
    CARDFORGE_RULES_TTL    seconds a loaded rule set stays cached
    CARDFORGE_MAX_WORKERS  thread pool size for multi-document extraction
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

ENV_RULES_PATH = "CARDFORGE_RULES_PATH"
ENV_RULES_TTL = "CARDFORGE_RULES_TTL"
ENV_MAX_WORKERS = "CARDFORGE_MAX_WORKERS"


@dataclass
class ExtractionConfig:
    """Settings for the extraction engine."""

    # Gate
    min_content_length: int = 10

    # Segmentation
    max_section_length: int = 500

    # Card shape
    max_title_length: int = 200
    snippet_length: int = 500
    max_tags: int = 10

    # Rules
    rules_path: Optional[str] = None
    rules_cache_ttl: float = 60.0

    # Batch
    max_workers: int = 4

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ExtractionConfig":
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            values[key] = value
        return cls(**values)


def _apply_env(config: ExtractionConfig) -> ExtractionConfig:
    rules_path = os.getenv(ENV_RULES_PATH)
    if rules_path:
        config.rules_path = rules_path

    ttl = os.getenv(ENV_RULES_TTL)
    if ttl:
        config.rules_cache_ttl = float(ttl)

    workers = os.getenv(ENV_MAX_WORKERS)
    if workers:
        config.max_workers = int(workers)

    return config


def load_config(path: Optional[Union[str, Path]] = None) -> ExtractionConfig:
    """
    Load extraction settings.

    Args:
        path: Optional YAML file with ExtractionConfig fields

    Returns:
        ExtractionConfig with environment overrides applied

    Raises:
        FileNotFoundError: If path is given but does not exist
        ValueError: If the file is not a YAML mapping
    """
    data: Dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        data = loaded
        logger.debug("Loaded config from %s", config_path)

    return _apply_env(ExtractionConfig.from_mapping(data))


__all__ = ["ExtractionConfig", "load_config"]
