"""Tonal palettes: colors constant in hue and chroma that vary in tone.

Public API:
- TonalPalette.from_int(argb) / from_hct(hct) / from_hue_and_chroma(hue, chroma)
- TonalPalette.tone(t) -> int (ARGB, cached)
- TonalPalette.get_hct(t) -> Hct
- CorePalette.of(argb) / CorePalette.content_of(argb)
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict

from .hct import Hct
from .settings import ERROR_CHROMA, ERROR_HUE

__all__ = ["TonalPalette", "CorePalette"]


class TonalPalette:
    """Tone -> color lookup at a fixed hue and chroma.

    ``key_color`` is the first tone, searching outward from T50, whose chroma
    rounds to the requested chroma. T50 has the most chroma available on
    average, so the search usually ends after a step or two.
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: Dict[float, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_int(cls, argb: int) -> "TonalPalette":
        return cls.from_hct(Hct.from_int(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        return cls(hue, chroma, _create_key_color(hue, chroma))

    def tone(self, tone: float) -> int:
        """ARGB color at ``tone`` with this palette's hue and chroma."""
        with self._lock:
            cached = self._cache.get(tone)
        if cached is not None:
            return cached
        color = Hct.from_hct(self.hue, self.chroma, tone).to_int()
        with self._lock:
            self._cache[tone] = color
        return color

    def get_hct(self, tone: float) -> Hct:
        return Hct.from_hct(self.hue, self.chroma, tone)

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f})"


def _create_key_color(hue: float, chroma: float) -> Hct:
    start_tone = 50.0
    smallest_delta_hct = Hct.from_hct(hue, chroma, start_tone)
    smallest_delta = abs(smallest_delta_hct.chroma - chroma)
    delta = 1.0
    while delta < 50.0:
        # Compare rounded values: a requested 16.51 must not settle on 16.49.
        if round(chroma) == round(smallest_delta_hct.chroma):
            return smallest_delta_hct
        hct_add = Hct.from_hct(hue, chroma, start_tone + delta)
        hct_add_delta = abs(hct_add.chroma - chroma)
        if hct_add_delta < smallest_delta:
            smallest_delta = hct_add_delta
            smallest_delta_hct = hct_add
        hct_subtract = Hct.from_hct(hue, chroma, start_tone - delta)
        hct_subtract_delta = abs(hct_subtract.chroma - chroma)
        if hct_subtract_delta < smallest_delta:
            smallest_delta = hct_subtract_delta
            smallest_delta_hct = hct_subtract
        delta += 1.0
    return smallest_delta_hct


@dataclass(frozen=True)
class CorePalette:
    """Five key palettes plus the error palette derived from one seed color.

    ``a1``..``a3`` are accents, ``n1``/``n2`` neutrals. All but ``a3`` share the
    seed hue.
    """

    a1: TonalPalette
    a2: TonalPalette
    a3: TonalPalette
    n1: TonalPalette
    n2: TonalPalette
    error: TonalPalette

    @classmethod
    def of(cls, argb: int) -> "CorePalette":
        return cls._build(argb, is_content=False)

    @classmethod
    def content_of(cls, argb: int) -> "CorePalette":
        """Palettes that keep the seed's chroma, for content-derived themes."""
        return cls._build(argb, is_content=True)

    @classmethod
    def _build(cls, argb: int, is_content: bool) -> "CorePalette":
        hct = Hct.from_int(argb)
        hue = hct.hue
        chroma = hct.chroma
        if is_content:
            return cls(
                a1=TonalPalette.from_hue_and_chroma(hue, chroma),
                a2=TonalPalette.from_hue_and_chroma(hue, chroma / 3.0),
                a3=TonalPalette.from_hue_and_chroma(hue + 60.0, chroma / 2.0),
                n1=TonalPalette.from_hue_and_chroma(hue, min(chroma / 12.0, 4.0)),
                n2=TonalPalette.from_hue_and_chroma(hue, min(chroma / 6.0, 8.0)),
                error=TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA),
            )
        return cls(
            a1=TonalPalette.from_hue_and_chroma(hue, max(48.0, chroma)),
            a2=TonalPalette.from_hue_and_chroma(hue, 16.0),
            a3=TonalPalette.from_hue_and_chroma(hue + 60.0, 24.0),
            n1=TonalPalette.from_hue_and_chroma(hue, 4.0),
            n2=TonalPalette.from_hue_and_chroma(hue, 8.0),
            error=TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA),
        )
