"""Contrast level -> value interpolation.

A contrast level runs from -1.0 (reduced) through 0.0 (standard) and 0.5
(medium) to 1.0 (high). Curves carry one value per anchor and interpolate
linearly between them; the anchors themselves are returned exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..contrast import RATIO_MAX, RATIO_MIN
from ..utils.math_utils import lerp

__all__ = ["ContrastCurve", "tone_for_contrast"]


def _interpolate(level: float, low: float, normal: float, medium: float, high: float) -> float:
    if level <= -1.0:
        return low
    if level < 0.0:
        return lerp(low, normal, (level - -1.0) / 1.0)
    if level < 0.5:
        return lerp(normal, medium, (level - 0.0) / 0.5)
    if level < 1.0:
        return lerp(medium, high, (level - 0.5) / 0.5)
    return high


@dataclass(frozen=True)
class ContrastCurve:
    """Minimum contrast ratios at contrast levels -1, 0, 0.5 and 1.

    Raises
    ------
    ValueError
        If any ratio falls outside the WCAG range [1, 21].
    """

    low: float
    normal: float
    medium: float
    high: float

    def __post_init__(self) -> None:
        for label, value in (
            ("low", self.low),
            ("normal", self.normal),
            ("medium", self.medium),
            ("high", self.high),
        ):
            if not RATIO_MIN <= value <= RATIO_MAX:
                raise ValueError(
                    f"ContrastCurve.{label}={value} outside [{RATIO_MIN}, {RATIO_MAX}]"
                )

    def get(self, contrast_level: float) -> float:
        return _interpolate(contrast_level, self.low, self.normal, self.medium, self.high)


def tone_for_contrast(
    contrast_level: float, low: float, normal: float, medium: float, high: float
) -> float:
    """Same interpolation as ``ContrastCurve.get`` for tones (0..100) instead of ratios.

    Surface containers step further from the background as contrast rises.
    """
    return _interpolate(contrast_level, low, normal, medium, high)
