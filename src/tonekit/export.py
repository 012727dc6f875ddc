"""Resolve a scheme into plain role -> color data and serialize it.

Public API:
- default_colors() -> MaterialDynamicColors (shared catalog)
- resolve_scheme(scheme, colors=None) -> dict[str, int]
- scheme_to_hex_map(scheme, colors=None) -> dict[str, str]
- check_contrast(scheme, colors=None, pairs=STANDARD_PAIRS) -> list[str]
- generate_qss(scheme, colors=None) -> str
- snapshot(scheme, colors=None) -> dict
- export_snapshot_to_file(scheme, path, colors=None) -> str
"""

from __future__ import annotations

import json
import logging
import os
import threading
import time
from typing import Dict, List, Optional, Tuple

from .contrast import validate_contrast
from .dynamic.dynamic_scheme import DynamicScheme
from .dynamic.material_colors import MaterialDynamicColors
from .utils.color_utils import hex_from_argb, is_opaque

__all__ = [
    "STANDARD_PAIRS",
    "default_colors",
    "resolve_scheme",
    "scheme_to_hex_map",
    "check_contrast",
    "generate_qss",
    "snapshot",
    "export_snapshot_to_file",
]

_logger = logging.getLogger(__name__)

# (foreground, background, label) pairs expected to reach 4.5:1 at contrast 0.
STANDARD_PAIRS: Tuple[Tuple[str, str, str], ...] = (
    ("on_surface", "surface", "on_surface/surface"),
    ("on_background", "background", "on_background/background"),
    ("on_primary", "primary", "on_primary/primary"),
    ("on_primary_container", "primary_container", "on_primary_container/primary_container"),
    ("on_secondary", "secondary", "on_secondary/secondary"),
    ("on_secondary_container", "secondary_container", "on_secondary_container/secondary_container"),
    ("on_tertiary", "tertiary", "on_tertiary/tertiary"),
    ("on_tertiary_container", "tertiary_container", "on_tertiary_container/tertiary_container"),
    ("on_error", "error", "on_error/error"),
    ("on_error_container", "error_container", "on_error_container/error_container"),
    ("inverse_on_surface", "inverse_surface", "inverse_on_surface/inverse_surface"),
)

_default_lock = threading.Lock()
_default_catalog: Optional[MaterialDynamicColors] = None


def default_colors() -> MaterialDynamicColors:
    """Process-wide catalog; sharing it lets every caller reuse role caches."""
    global _default_catalog
    with _default_lock:
        if _default_catalog is None:
            _default_catalog = MaterialDynamicColors()
        return _default_catalog


def resolve_scheme(
    scheme: DynamicScheme, colors: Optional[MaterialDynamicColors] = None
) -> Dict[str, int]:
    catalog = colors or default_colors()
    return {role.name: role.get_argb(scheme) for role in catalog.all_colors()}


def scheme_to_hex_map(
    scheme: DynamicScheme, colors: Optional[MaterialDynamicColors] = None
) -> Dict[str, str]:
    """Role -> ``#RRGGBB`` (``#AARRGGBB`` for translucent roles)."""
    return {
        name: hex_from_argb(argb, include_alpha=not is_opaque(argb))
        for name, argb in resolve_scheme(scheme, colors).items()
    }


def check_contrast(
    scheme: DynamicScheme,
    colors: Optional[MaterialDynamicColors] = None,
    pairs=STANDARD_PAIRS,
    threshold: float = 4.5,
) -> List[str]:
    return validate_contrast(scheme_to_hex_map(scheme, colors), pairs, threshold)


def generate_qss(scheme: DynamicScheme, colors: Optional[MaterialDynamicColors] = None) -> str:
    """QSS prelude listing every role as a commented ``--tk-*`` variable.

    Qt style sheets have no custom properties; the block documents the palette
    in one place so widget rules can be regenerated or searched.
    """
    mode = "dark" if scheme.is_dark else "light"
    lines: List[str] = [
        "/* AUTO-GENERATED FROM tonekit scheme. Do not edit manually. */",
        f"/* source={hex_from_argb(scheme.source_color_argb)} variant={scheme.variant.value} "
        f"mode={mode} contrast={scheme.contrast_level} */",
    ]
    for name, value in scheme_to_hex_map(scheme, colors).items():
        lines.append(f"/* tk-{name.replace('_', '-')}: {value}; */")
    return "\n".join(lines) + "\n"


def snapshot(
    scheme: DynamicScheme, colors: Optional[MaterialDynamicColors] = None
) -> Dict[str, object]:
    """Deterministic, JSON-ready description of a resolved scheme.

    Returns
    -------
    dict[str, object]
        A mapping with keys:
          - variant, is_dark, contrast_level, source: scheme inputs
          - color_count: number of roles exported
          - colors: ordered list of {'key','value'} pairs (catalog order)
          - contrast_failures: ``check_contrast`` messages (normally empty)
          - metadata: auxiliary info (exported_at epoch seconds)
    """
    hex_map = scheme_to_hex_map(scheme, colors)
    return {
        "variant": scheme.variant.value,
        "is_dark": scheme.is_dark,
        "contrast_level": scheme.contrast_level,
        "source": hex_from_argb(scheme.source_color_argb),
        "color_count": len(hex_map),
        "colors": [{"key": k, "value": v} for k, v in hex_map.items()],
        "contrast_failures": validate_contrast(hex_map, STANDARD_PAIRS),
        "metadata": {"exported_at": time.time()},
    }


def export_snapshot_to_file(
    scheme: DynamicScheme, path: str, colors: Optional[MaterialDynamicColors] = None
) -> str:
    """Write ``snapshot(scheme)`` as JSON to ``path`` (overwriting) and return the path."""
    snap = snapshot(scheme, colors)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snap, f, indent=2, sort_keys=False)
    _logger.info("Exported %s snapshot (%d colors) to %s", snap["variant"], snap["color_count"], path)
    return path
