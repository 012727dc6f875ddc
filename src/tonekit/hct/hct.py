"""HCT: hue, chroma, tone.

Hue and chroma come from CAM16, tone is L* from L*a*b*. Tone is what contrast
is measured in: two colors with a tone difference of 40 always reach a 3.0
contrast ratio, 50 always reaches 4.5.

Instances are immutable; ``with_*`` helpers return new values.
"""

from __future__ import annotations

from ..utils import color_utils
from .cam16 import Cam16
from .hct_solver import solve_to_int
from .viewing_conditions import ViewingConditions

__all__ = ["Hct"]


class Hct:
    __slots__ = ("_argb", "_hue", "_chroma", "_tone")

    def __init__(self, argb: int) -> None:
        argb &= 0xFFFFFFFF
        cam = Cam16.from_int(argb)
        self._argb = argb
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = color_utils.lstar_from_argb(argb)

    @classmethod
    def from_hct(cls, hue: float, chroma: float, tone: float) -> "Hct":
        """Closest displayable color to the requested coordinates."""
        return cls(solve_to_int(hue, chroma, tone))

    @classmethod
    def from_int(cls, argb: int) -> "Hct":
        return cls(argb)

    @property
    def hue(self) -> float:
        return self._hue

    @property
    def chroma(self) -> float:
        return self._chroma

    @property
    def tone(self) -> float:
        return self._tone

    def to_int(self) -> int:
        return self._argb

    def with_hue(self, hue: float) -> "Hct":
        return Hct.from_hct(hue, self._chroma, self._tone)

    def with_chroma(self, chroma: float) -> "Hct":
        return Hct.from_hct(self._hue, chroma, self._tone)

    def with_tone(self, tone: float) -> "Hct":
        return Hct.from_hct(self._hue, self._chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> "Hct":
        """Translate this color into another frame, e.g. a dark room."""
        cam16 = Cam16.from_int(self._argb)
        viewed_in_vc = cam16.xyz_in_viewing_conditions(vc)
        recast_in_vc = Cam16.from_xyz_in_viewing_conditions(
            viewed_in_vc[0], viewed_in_vc[1], viewed_in_vc[2], ViewingConditions.DEFAULT
        )
        return Hct.from_hct(
            recast_in_vc.hue,
            recast_in_vc.chroma,
            color_utils.lstar_from_y(viewed_in_vc[1]),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return (
            f"Hct(hue={self._hue:.2f}, chroma={self._chroma:.2f}, tone={self._tone:.2f}, "
            f"argb={color_utils.hex_from_argb(self._argb, include_alpha=True)})"
        )
