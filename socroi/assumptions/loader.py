"""Load and validate assumptions configs from JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from socroi.assumptions.schema import AssumptionsConfig

logger = logging.getLogger(__name__)

# Default directory for assumptions config files
_CONFIG_DIR = Path(__file__).parent / "configs"

DEFAULT_CONFIG_FILE = _CONFIG_DIR / "autonomous_soc_v1.json"


def load_assumptions(file_path: Path | None = None) -> AssumptionsConfig:
    """Load and validate an assumptions config from a JSON file.

    If no path is provided, loads the bundled Autonomous SOC V1 config.
    """
    if file_path is None:
        file_path = DEFAULT_CONFIG_FILE

    if not file_path.exists():
        raise FileNotFoundError(f"Assumptions config not found: {file_path}")

    with open(file_path, "r") as f:
        raw = json.load(f)

    config = AssumptionsConfig.model_validate(raw)
    logger.debug("Loaded assumptions %s v%s from %s", config.id, config.version, file_path)
    return config


_default: AssumptionsConfig | None = None


def get_default_assumptions() -> AssumptionsConfig:
    """Return the bundled assumptions, loading them on first use."""
    global _default
    if _default is None:
        _default = load_assumptions()
    return _default
