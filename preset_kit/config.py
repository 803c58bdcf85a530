"""
Environment-driven settings. Call `load_dotenv()` at the entry point before
`load_settings()` so values from a local .env file are visible.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    log_level: str = "INFO"
    preset_file: Optional[str] = None
    enabled_rules: Optional[List[str]] = None
    degradation: Optional[float] = None


def _parse_list(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


def _parse_float(name: str, value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not a number")
        return None


def load_settings() -> Settings:
    return Settings(
        log_level=os.environ.get("PRESET_KIT_LOG_LEVEL", "INFO"),
        preset_file=os.environ.get("PRESET_KIT_PRESET_FILE") or None,
        enabled_rules=_parse_list(os.environ.get("PRESET_KIT_ENABLED_RULES")),
        degradation=_parse_float(
            "PRESET_KIT_DEGRADATION", os.environ.get("PRESET_KIT_DEGRADATION")
        ),
    )
