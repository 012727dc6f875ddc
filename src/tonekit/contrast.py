"""Contrast utilities for tones and resolved colors.

Implements WCAG 2.1 contrast ratio calculations in two flavors:

- Tone based (``ratio_of_tones``, ``lighter``, ``darker``): what the tone
  resolver uses. Tone is L*, so it maps directly onto relative luminance.
- Hex based (``contrast_ratio``, ``relative_luminance``): for checking
  already-resolved colors, e.g. an exported role map.

Public API:
- ratio_of_tones(t1, t2) -> float
- lighter(tone, ratio) / darker(tone, ratio) -> float  (-1.0 when unreachable)
- lighter_unsafe(tone, ratio) / darker_unsafe(tone, ratio) -> float (clamped)
- contrast_ratio(fg: str, bg: str) -> float
- validate_contrast(colors, pairs, threshold=4.5) -> list[str]

The ``pairs`` parameter uses tuples of (foreground_role, background_role, label)
where each role is a key of the ``colors`` mapping (e.g. "on_primary", "primary").
"""

from __future__ import annotations

from typing import Iterable, List, Mapping, Tuple

from .utils.color_utils import (
    argb_from_hex,
    blue_from_argb,
    green_from_argb,
    lstar_from_y,
    red_from_argb,
    y_from_lstar,
)

__all__ = [
    "RATIO_MIN",
    "RATIO_MAX",
    "RATIO_30",
    "RATIO_45",
    "RATIO_70",
    "UNREACHABLE",
    "ratio_of_ys",
    "ratio_of_tones",
    "lighter",
    "lighter_unsafe",
    "darker",
    "darker_unsafe",
    "contrast_ratio",
    "relative_luminance",
    "validate_contrast",
]

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

UNREACHABLE = -1.0

# Accepted slack when the requested ratio is only just missed due to rounding.
_CONTRAST_RATIO_EPSILON = 0.04

# Tone -> color lookup can drift by ~0.2 L*; pad results so the final color
# still meets the ratio.
_LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter_y = max(y1, y2)
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def ratio_of_tones(t1: float, t2: float) -> float:
    """Contrast ratio of two tones, 1.0 .. 21.0."""
    return ratio_of_ys(y_from_lstar(t1), y_from_lstar(t2))


def lighter(tone: float, ratio: float) -> float:
    """Darkest tone >= ``tone`` reaching ``ratio``, or -1.0 if impossible."""
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if light_y < 0.0 or light_y > 100.0:
        return UNREACHABLE
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return UNREACHABLE
    value = lstar_from_y(light_y) + _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return UNREACHABLE
    return value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like ``lighter`` but returns 100 (white) when the ratio is unreachable."""
    safe = lighter(tone, ratio)
    return 100.0 if safe < 0.0 else safe


def darker(tone: float, ratio: float) -> float:
    """Lightest tone <= ``tone`` reaching ``ratio``, or -1.0 if impossible."""
    if tone < 0.0 or tone > 100.0:
        return UNREACHABLE
    light_y = y_from_lstar(tone)
    dark_y = ((light_y + 5.0) / ratio) - 5.0
    if dark_y < 0.0 or dark_y > 100.0:
        return UNREACHABLE
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return UNREACHABLE
    value = lstar_from_y(dark_y) - _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return UNREACHABLE
    return value


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like ``darker`` but returns 0 (black) when the ratio is unreachable."""
    return max(0.0, darker(tone, ratio))


# --- Hex based checks ---------------------------------------------------------
def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    argb = argb_from_hex(color)
    r_l = _linear_channel(red_from_argb(argb))
    g_l = _linear_channel(green_from_argb(argb))
    b_l = _linear_channel(blue_from_argb(argb))
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * r_l + 0.7152 * g_l + 0.0722 * b_l


def contrast_ratio(fg: str, bg: str) -> float:
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def validate_contrast(
    colors: Mapping[str, str], pairs: Iterable[Tuple[str, str, str]], threshold: float = 4.5
) -> List[str]:
    """Validate a collection of foreground/background role pairs.

    Parameters
    ----------
    colors : Mapping[str, str]
        Resolved role name -> hex color (see ``tonekit.export.scheme_to_hex_map``).
    pairs : Iterable[Tuple[str,str,str]]
        Each tuple is (foreground_role, background_role, label)
    threshold : float
        Minimum acceptable contrast ratio.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    failures: List[str] = []
    for fg_role, bg_role, label in pairs:
        fg = colors.get(fg_role)
        bg = colors.get(bg_role)
        if fg is None or bg is None:
            missing = fg_role if fg is None else bg_role
            failures.append(f"[resolve-error] {label}: unknown role '{missing}'")
            continue
        # Alpha is ignored; only the opaque hex part counts.
        ratio = contrast_ratio("#" + fg[-6:], "#" + bg[-6:])
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    return failures
