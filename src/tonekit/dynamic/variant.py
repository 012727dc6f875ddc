"""Scheme variants (theme styles)."""

from __future__ import annotations

from enum import Enum

__all__ = ["Variant"]


class Variant(Enum):
    MONOCHROME = "monochrome"
    NEUTRAL = "neutral"
    TONAL_SPOT = "tonal_spot"
    VIBRANT = "vibrant"
    EXPRESSIVE = "expressive"
    FIDELITY = "fidelity"
    CONTENT = "content"

    @classmethod
    def parse(cls, value: "str | Variant") -> "Variant":
        """Accept a member, its value, or its name in any case ("TONAL_SPOT", "tonal-spot")."""
        if isinstance(value, Variant):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unknown variant: {value!r}")
