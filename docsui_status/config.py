# config.py
"""Configuration management for the status resolver and debug router."""

import logging
import os
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger("docsui_status.config")


# ---------------------------------------------------------------------------
# Config Loading
# ---------------------------------------------------------------------------

HERE = os.path.dirname(os.path.abspath(__file__))
DEFAULT_CONFIG_PATH = os.path.join(HERE, "status_config.yaml")
DEFAULT_STRINGS_PATH = os.path.join(HERE, "strings.yaml")


def _load_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


CFG: Dict[str, Any] = {}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    global CFG
    path = path or os.getenv("DOCSUI_STATUS_CONFIG") or DEFAULT_CONFIG_PATH
    try:
        CFG = _load_yaml(path)
    except Exception as e:
        CFG = {}
        logger.warning("failed to load config '%s': %s", path, e)
    return CFG


def cfg_get(path: str, default: Any) -> Any:
    """Get config value by dot-separated path (e.g., 'debug.build')."""
    cur: Any = CFG
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# Load config on import
load_config()

# Export commonly used config values
DEBUG_BUILD: bool = bool(cfg_get("debug.build", False))

# Feature flags
PRIVATE_SPACE_IN_DOCSUI_ENABLED: bool = bool(cfg_get("features.private_space_in_docsui", True))
REMOTE_ACTIONS_ENABLED: bool = bool(cfg_get("features.remote_actions", True))

# Device-policy overrides
ENTERPRISE_STRINGS_SUPPORTED: bool = bool(cfg_get("enterprise.strings_supported", True))
ENTERPRISE_OVERRIDES_PATH: str = str(cfg_get("enterprise.overrides_path", "") or "")

# Resources
STRINGS_PATH: str = str(cfg_get("resources.strings_path", "") or DEFAULT_STRINGS_PATH)

LOG_LEVEL: str = str(cfg_get("logging.level", "INFO")).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
