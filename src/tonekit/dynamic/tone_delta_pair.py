"""Tone distance constraints between two roles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .dynamic_color import DynamicColor

__all__ = ["TonePolarity", "ToneDeltaPair"]


class TonePolarity(Enum):
    """How role A relates to role B.

    ``DARKER``/``LIGHTER`` hold in both modes. ``NEARER``/``FARTHER`` are about
    closeness to the surface: a nearer role is lighter in light mode and
    darker in dark mode.
    """

    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True)
class ToneDeltaPair:
    """``role_a`` must sit at least ``delta`` tones from ``role_b``.

    ``ToneDeltaPair(a, b, 15, TonePolarity.DARKER, False)`` reads "a is at
    least 15 tones darker than b". ``stay_together`` keeps both roles on the
    same side of the awkward zone (T50-59).
    """

    role_a: "DynamicColor"
    role_b: "DynamicColor"
    delta: float
    polarity: TonePolarity
    stay_together: bool

    def __post_init__(self) -> None:
        if self.delta < 0:
            raise ValueError(f"ToneDeltaPair.delta must be >= 0 (got {self.delta})")

    def a_is_nearer(self, is_dark: bool) -> bool:
        polarity = self.polarity
        return (
            polarity is TonePolarity.NEARER
            or (polarity is TonePolarity.LIGHTER and not is_dark)
            or (polarity is TonePolarity.DARKER and is_dark)
        )
