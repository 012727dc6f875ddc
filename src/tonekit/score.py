"""Rank a color histogram into seed candidates.

Given many colors and how often each appears (typically the clusters of a
quantized image), drop the ones unsuitable for a UI theme and order the rest
so the first entry makes the best seed. Hue diversity is preferred: picks
start 90 degrees apart and relax toward 15 degrees until enough are found.

Public API:
    score(colors_to_population, desired=4, fallback_color_argb=0xFF4285F4,
          filter=True) -> list[int]

Notes:
    - Extraction and quantization of pixels is left to the caller.
    - The result always holds at least one color (the fallback if needed).
"""

from __future__ import annotations

import logging
import math
from typing import List, Mapping, Tuple

from .hct import Hct
from .utils.math_utils import difference_degrees, sanitize_degrees_int

__all__ = ["score", "DEFAULT_FALLBACK_ARGB"]

_logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ARGB = 0xFF4285F4

_TARGET_CHROMA = 48.0
_WEIGHT_PROPORTION = 0.7
_WEIGHT_CHROMA_ABOVE = 0.3
_WEIGHT_CHROMA_BELOW = 0.1
_CUTOFF_CHROMA = 5.0
_CUTOFF_EXCITED_PROPORTION = 0.01
_MAX_HUE_SPREAD = 90
_MIN_HUE_SPREAD = 15


def _excited_proportions(hcts: List[Tuple[Hct, int]]) -> List[float]:
    hue_population = [0] * 360
    population_sum = 0.0
    for hct, count in hcts:
        hue_population[int(math.floor(hct.hue)) % 360] += count
        population_sum += count

    # Each hue counts toward the 30 degree slice around it.
    excited = [0.0] * 360
    for hue in range(360):
        proportion = hue_population[hue] / population_sum
        if proportion == 0.0:
            continue
        for i in range(hue - 14, hue + 16):
            excited[sanitize_degrees_int(i)] += proportion
    return excited


def score(
    colors_to_population: Mapping[int, int],
    desired: int = 4,
    fallback_color_argb: int = DEFAULT_FALLBACK_ARGB,
    filter: bool = True,
) -> List[int]:
    """Return up to ``desired`` ARGB colors ordered by theme suitability.

    Parameters
    ----------
    colors_to_population:
        ARGB color -> occurrence count.
    desired:
        Maximum number of colors returned. Must be at least 1.
    fallback_color_argb:
        Returned alone when nothing survives filtering.
    filter:
        When True, drop near-gray colors (chroma < 5) and hues covering
        1% or less of the population.

    Raises
    ------
    ValueError
        If ``desired`` is below 1 or a population count is negative.
    """
    if desired < 1:
        raise ValueError("desired must be at least 1")
    hcts: List[Tuple[Hct, int]] = []
    for argb, count in colors_to_population.items():
        if count < 0:
            raise ValueError(f"negative population for color {argb:#010x}")
        hcts.append((Hct.from_int(argb), count))
    if not hcts or sum(count for _, count in hcts) == 0:
        _logger.debug("Empty histogram; using fallback %#010x", fallback_color_argb)
        return [fallback_color_argb]

    excited = _excited_proportions(hcts)

    scored: List[Tuple[float, Hct]] = []
    for hct, _count in hcts:
        proportion = excited[sanitize_degrees_int(round(hct.hue))]
        if filter and (hct.chroma < _CUTOFF_CHROMA or proportion <= _CUTOFF_EXCITED_PROPORTION):
            continue
        proportion_score = proportion * 100.0 * _WEIGHT_PROPORTION
        chroma_weight = _WEIGHT_CHROMA_BELOW if hct.chroma < _TARGET_CHROMA else _WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - _TARGET_CHROMA) * chroma_weight
        scored.append((proportion_score + chroma_score, hct))
    scored.sort(key=lambda entry: entry[0], reverse=True)

    chosen: List[Hct] = []
    for spread in range(_MAX_HUE_SPREAD, _MIN_HUE_SPREAD - 1, -1):
        chosen = []
        for _score, hct in scored:
            if all(difference_degrees(hct.hue, c.hue) >= spread for c in chosen):
                chosen.append(hct)
            if len(chosen) >= desired:
                break
        if len(chosen) >= desired:
            break

    if not chosen:
        _logger.debug("No color passed the filter; using fallback %#010x", fallback_color_argb)
        return [fallback_color_argb]
    return [hct.to_int() for hct in chosen]
