"""
Global Configuration and Defaults.

Module-level constants hold the defaults used across farmapp. A project may
override a subset of them in ``.farmapp/config.yaml``; ``load_settings``
reads that file and falls back to the defaults for anything missing.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .core.types import FlowType

logger = logging.getLogger(__name__)

CONFIG_DIR = ".farmapp"
CONFIG_FILE = Path(CONFIG_DIR) / "config.yaml"
DEFAULT_DB_PATH = Path(CONFIG_DIR) / "farmapp.db"

# --- Indicator graph ---
DEFAULT_FLOW = FlowType.FATURAMENTO
DEFAULT_GRAPH_DEPTH = 2

# --- History ---
DEFAULT_HISTORY_DAYS = 7
MAX_HISTORY_DAYS = 365

# --- Sellers ---
# UVC below this puts a seller in "needs attention"
NEEDS_ATTENTION_UVC_THRESHOLD = 2.10
# UVC at or below this is critical
CRITICAL_UVC_THRESHOLD = 1.93

# --- Force layout ---
NODE_SIZES: Dict[str, int] = {
    "central": 70,
    "primary": 60,
    "secondary": 50,
    "context": 40,
}
LAYOUT_WIDTH = 400.0
LAYOUT_HEIGHT = 600.0
LAYOUT_ITERATIONS = 100


class AnalyticsSettings(BaseModel):
    enabled: bool = False
    provider: str = "amplitude"
    key: str = ""


class Settings(BaseModel):
    """Project settings read from ``.farmapp/config.yaml``."""
    project_name: str = "farmapp"
    default_flow: FlowType = DEFAULT_FLOW
    history_days: int = Field(default=DEFAULT_HISTORY_DAYS, ge=1, le=MAX_HISTORY_DAYS)
    graph_depth: int = Field(default=DEFAULT_GRAPH_DEPTH, ge=1)
    seed: Optional[int] = None
    db_path: Optional[str] = None
    analytics: AnalyticsSettings = Field(default_factory=AnalyticsSettings)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML.

    A missing, unreadable or invalid file yields the defaults; problems are
    logged, not raised.
    """
    config_path = Path(path) if path else CONFIG_FILE
    if not config_path.exists():
        return Settings()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
        return Settings(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        logger.warning("Ignoring invalid config %s: %s", config_path, e)
        return Settings()


def default_config_dict(project_name: str) -> Dict:
    """Template written by ``farmapp init``."""
    settings = Settings(project_name=project_name)
    return settings.model_dump(mode="json", exclude_none=True)
