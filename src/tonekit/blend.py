"""Blend colors in HCT and CAM16-UCS.

Used to pull custom brand or status colors toward the seed so they sit
comfortably in a generated scheme without losing their identity.

Public API:
    harmonize(design_color, source_color) -> int
    hct_hue(from_argb, to_argb, amount) -> int
    cam16_ucs(from_argb, to_argb, amount) -> int

Notes:
    - All inputs and outputs are ARGB ints.
    - ``harmonize`` rotates hue by at most 15 degrees and keeps chroma/tone.
"""

from __future__ import annotations

from .hct import Cam16, Hct
from .utils.color_utils import lstar_from_argb
from .utils.math_utils import difference_degrees, rotation_direction, sanitize_degrees_double

__all__ = ["harmonize", "hct_hue", "cam16_ucs"]

_MAX_ROTATION = 15.0


def harmonize(design_color: int, source_color: int) -> int:
    """Shift ``design_color``'s hue toward ``source_color``.

    Parameters
    ----------
    design_color:
        The color to adjust, e.g. a fixed brand or error color.
    source_color:
        The color to lean toward, usually the scheme seed.

    Returns
    -------
    int
        ARGB with hue rotated by half the hue distance, capped at 15
        degrees. Chroma and tone are kept where the gamut allows.
    """
    from_hct = Hct.from_int(design_color)
    to_hct = Hct.from_int(source_color)
    difference = difference_degrees(from_hct.hue, to_hct.hue)
    rotation = min(difference * 0.5, _MAX_ROTATION)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_int()


def hct_hue(from_argb: int, to_argb: int, amount: float) -> int:
    """Blend hue only, keeping ``from_argb``'s chroma and tone."""
    ucs = cam16_ucs(from_argb, to_argb, amount)
    ucs_cam = Cam16.from_int(ucs)
    from_cam = Cam16.from_int(from_argb)
    blended = Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(from_argb))
    return blended.to_int()


def cam16_ucs(from_argb: int, to_argb: int, amount: float) -> int:
    """Linear blend in CAM16-UCS; ``amount`` 0.0 is ``from``, 1.0 is ``to``."""
    from_cam = Cam16.from_int(from_argb)
    to_cam = Cam16.from_int(to_argb)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_int()
