"""Fixed-tone light/dark schemes read straight from a ``CorePalette``.

Unlike ``DynamicScheme`` roles these never adjust for contrast level; each
role is a set tone of one core palette.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Tuple

from .palettes import CorePalette

__all__ = ["Scheme"]

# role -> (core palette, light tone, dark tone)
_ROLE_TONES: Dict[str, Tuple[str, int, int]] = {
    "primary": ("a1", 40, 80),
    "on_primary": ("a1", 100, 20),
    "primary_container": ("a1", 90, 30),
    "on_primary_container": ("a1", 10, 90),
    "secondary": ("a2", 40, 80),
    "on_secondary": ("a2", 100, 20),
    "secondary_container": ("a2", 90, 30),
    "on_secondary_container": ("a2", 10, 90),
    "tertiary": ("a3", 40, 80),
    "on_tertiary": ("a3", 100, 20),
    "tertiary_container": ("a3", 90, 30),
    "on_tertiary_container": ("a3", 10, 90),
    "error": ("error", 40, 80),
    "on_error": ("error", 100, 20),
    "error_container": ("error", 90, 30),
    "on_error_container": ("error", 10, 80),
    "background": ("n1", 99, 10),
    "on_background": ("n1", 10, 90),
    "surface": ("n1", 99, 10),
    "on_surface": ("n1", 10, 90),
    "surface_variant": ("n2", 90, 30),
    "on_surface_variant": ("n2", 30, 80),
    "outline": ("n2", 50, 60),
    "outline_variant": ("n2", 80, 30),
    "shadow": ("n1", 0, 0),
    "scrim": ("n1", 0, 0),
    "inverse_surface": ("n1", 20, 90),
    "inverse_on_surface": ("n1", 95, 20),
    "inverse_primary": ("a1", 80, 40),
}


@dataclass(frozen=True)
class Scheme:
    """29 ARGB roles for one seed color and mode."""

    primary: int
    on_primary: int
    primary_container: int
    on_primary_container: int
    secondary: int
    on_secondary: int
    secondary_container: int
    on_secondary_container: int
    tertiary: int
    on_tertiary: int
    tertiary_container: int
    on_tertiary_container: int
    error: int
    on_error: int
    error_container: int
    on_error_container: int
    background: int
    on_background: int
    surface: int
    on_surface: int
    surface_variant: int
    on_surface_variant: int
    outline: int
    outline_variant: int
    shadow: int
    scrim: int
    inverse_surface: int
    inverse_on_surface: int
    inverse_primary: int

    @classmethod
    def light(cls, argb: int) -> "Scheme":
        return cls.from_core_palette(CorePalette.of(argb), is_dark=False)

    @classmethod
    def dark(cls, argb: int) -> "Scheme":
        return cls.from_core_palette(CorePalette.of(argb), is_dark=True)

    @classmethod
    def light_content(cls, argb: int) -> "Scheme":
        return cls.from_core_palette(CorePalette.content_of(argb), is_dark=False)

    @classmethod
    def dark_content(cls, argb: int) -> "Scheme":
        return cls.from_core_palette(CorePalette.content_of(argb), is_dark=True)

    @classmethod
    def from_core_palette(cls, core: CorePalette, is_dark: bool) -> "Scheme":
        values = {}
        for role, (palette_name, light_tone, dark_tone) in _ROLE_TONES.items():
            palette = getattr(core, palette_name)
            values[role] = palette.tone(dark_tone if is_dark else light_tone)
        return cls(**values)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)
