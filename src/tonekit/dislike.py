"""Check and fix universally disliked colors.

Color preference studies show a broad distaste for dark yellow-greens (they
read as biological waste and rotting food). Palmer and Schloss, 2010.
"""

from __future__ import annotations

from .hct import Hct

__all__ = ["is_disliked", "fix_if_disliked"]


def is_disliked(hct: Hct) -> bool:
    """True for a dark, non-neutral yellow-green."""
    hue_passes = 90.0 <= round(hct.hue) <= 111.0
    chroma_passes = round(hct.chroma) > 16.0
    tone_passes = round(hct.tone) < 65.0
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lighten a disliked color to T70, keeping hue and chroma."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct
