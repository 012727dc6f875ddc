"""Qt adapter: resolved roles -> ``QColor`` / ``QPalette``.

PyQt6 is imported lazily so the rest of the package (and headless tests)
works without a Qt installation; calling these helpers without PyQt6 raises
ImportError.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .dynamic.dynamic_scheme import DynamicScheme
from .dynamic.material_colors import MaterialDynamicColors
from .export import resolve_scheme
from .utils.color_utils import alpha_from_argb, blue_from_argb, green_from_argb, red_from_argb

__all__ = ["PALETTE_ROLE_MAP", "to_qcolor", "build_qpalette"]

# QPalette.ColorRole name -> color role
PALETTE_ROLE_MAP: Tuple[Tuple[str, str], ...] = (
    ("Window", "surface"),
    ("WindowText", "on_surface"),
    ("Base", "surface_container_lowest"),
    ("AlternateBase", "surface_container"),
    ("Text", "on_surface"),
    ("Button", "primary_container"),
    ("ButtonText", "on_primary_container"),
    ("Highlight", "primary"),
    ("HighlightedText", "on_primary"),
    ("ToolTipBase", "inverse_surface"),
    ("ToolTipText", "inverse_on_surface"),
    ("PlaceholderText", "on_surface_variant"),
    ("Link", "primary"),
    ("BrightText", "error"),
)


def to_qcolor(argb: int):  # type: ignore[no-untyped-def]
    """Return a ``QColor`` for a packed ARGB int (alpha preserved)."""
    try:  # Lazy import to keep headless use safe
        from PyQt6.QtGui import QColor
    except Exception as e:  # pragma: no cover - environment dependent
        raise ImportError("PyQt6 not available for to_qcolor") from e
    return QColor(
        red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb), alpha_from_argb(argb)
    )


def build_qpalette(
    scheme: DynamicScheme, colors: Optional[MaterialDynamicColors] = None
):  # type: ignore[no-untyped-def]
    """Build a ``QPalette`` for ``scheme`` using ``PALETTE_ROLE_MAP``.

    Colors are set for every color group (active, inactive, disabled).
    """
    try:
        from PyQt6.QtGui import QPalette
    except Exception as e:  # pragma: no cover - environment dependent
        raise ImportError("PyQt6 not available for build_qpalette") from e

    resolved: Dict[str, int] = resolve_scheme(scheme, colors)
    palette = QPalette()
    for qt_role, role_name in PALETTE_ROLE_MAP:
        palette.setColor(getattr(QPalette.ColorRole, qt_role), to_qcolor(resolved[role_name]))
    return palette
