"""Find the sRGB color closest to a requested hue, chroma and tone.

Not every HCT triple exists in sRGB: chroma in particular runs out quickly
near black and white. The solver keeps hue and tone (L*) and gives up chroma
until a displayable color is found:

1. Bisect on chroma between 0 and the requested value.
2. For each candidate chroma, bisect on CAM16 lightness J until the clipped
   sRGB color lands within ``_DL_MAX`` of the requested L*, rejecting results
   whose hue drifted by more than ``_DE_MAX`` (CAM16-UCS).

Greys (chroma < 1) and the extreme tones short-circuit to an achromatic color.
"""

from __future__ import annotations

from typing import Optional

from ..utils import color_utils
from ..utils.math_utils import clamp_double, sanitize_degrees_double
from .cam16 import Cam16
from .viewing_conditions import ViewingConditions

__all__ = ["solve_to_int"]

_CHROMA_SEARCH_ENDPOINT = 0.4
_DE_MAX = 1.0
_DL_MAX = 0.2
_LIGHTNESS_SEARCH_ENDPOINT = 0.01


def solve_to_int(hue: float, chroma: float, lstar: float) -> int:
    """Return the ARGB int for the given HCT coordinates."""
    return _solve(hue, chroma, lstar, ViewingConditions.DEFAULT)


def _solve(hue: float, chroma: float, lstar: float, vc: ViewingConditions) -> int:
    hue = sanitize_degrees_double(hue)
    lstar = clamp_double(0.0, 100.0, lstar)
    if chroma < 1.0 or round(lstar) <= 0.0 or round(lstar) >= 100.0:
        return color_utils.argb_from_lstar(lstar)

    high = chroma
    mid = chroma
    low = 0.0
    is_first_loop = True
    answer: Optional[Cam16] = None
    while abs(low - high) >= _CHROMA_SEARCH_ENDPOINT:
        possible_answer = _find_cam_by_j(hue, mid, lstar)
        if is_first_loop:
            if possible_answer is not None:
                return possible_answer.viewed(vc)
            # Requested chroma is out of gamut; bisect from here on.
            is_first_loop = False
            mid = low + (high - low) / 2.0
            continue
        if possible_answer is None:
            high = mid
        else:
            answer = possible_answer
            low = mid
        mid = low + (high - low) / 2.0

    if answer is None:
        return color_utils.argb_from_lstar(lstar)
    return answer.viewed(vc)


def _find_cam_by_j(hue: float, chroma: float, lstar: float) -> Optional[Cam16]:
    low = 0.0
    high = 100.0
    best_dl = 1000.0
    best_de = 1000.0
    best_cam: Optional[Cam16] = None
    while abs(low - high) > _LIGHTNESS_SEARCH_ENDPOINT:
        mid = low + (high - low) / 2.0
        cam_before_clip = Cam16.from_jch(mid, chroma, hue)
        clipped = cam_before_clip.to_int()
        clipped_lstar = color_utils.lstar_from_argb(clipped)
        d_l = abs(lstar - clipped_lstar)
        if d_l < _DL_MAX:
            cam_clipped = Cam16.from_int(clipped)
            d_e = cam_clipped.distance(Cam16.from_jch(cam_clipped.j, cam_clipped.chroma, hue))
            if d_e <= _DE_MAX and d_e <= best_de:
                best_dl = d_l
                best_de = d_e
                best_cam = cam_clipped
        if best_dl == 0 and best_de == 0:
            break
        if clipped_lstar < lstar:
            low = mid
        else:
            high = mid
    return best_cam
