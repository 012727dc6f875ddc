"""Global configuration and constants for scheme generation."""

from __future__ import annotations

import logging
import os
from typing import Final

_logger = logging.getLogger(__name__)


def _env_float(name: str, default: float, lo: float, hi: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        _logger.warning("Ignoring malformed %s=%r; using %s", name, raw, default)
        return default
    return max(lo, min(hi, value))


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Contrast level: -1.0 (reduced) .. 0.0 (standard) .. 1.0 (maximum)
DEFAULT_CONTRAST_LEVEL: Final = _env_float("TONEKIT_CONTRAST_LEVEL", 0.0, -1.0, 1.0)
DEFAULT_VARIANT: Final = os.environ.get("TONEKIT_VARIANT", "tonal_spot")
DEFAULT_DARK_MODE: Final = _env_flag("TONEKIT_DARK")

# Per-role memo size; the cache is wiped wholesale once it is full
HCT_CACHE_SIZE: Final = 4

ERROR_HUE: Final = 25.0
ERROR_CHROMA: Final = 84.0
