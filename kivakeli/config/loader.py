"""YAML config loader."""

import logging
from pathlib import Path

import yaml

from kivakeli.config.schema import KivaKeliConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path) -> KivaKeliConfig:
    """Load and validate config from a YAML file.

    A missing file is not an error: built-in defaults are returned.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("Config %s not found, using defaults", path)
        return KivaKeliConfig()

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return KivaKeliConfig(**raw)
