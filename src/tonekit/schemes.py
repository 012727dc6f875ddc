"""Scheme variants: how the five palettes are derived from the source color.

Public API:
- SchemeTonalSpot, SchemeMonochrome, SchemeNeutral, SchemeVibrant,
  SchemeExpressive, SchemeFidelity, SchemeContent
- scheme_for_variant(variant, source, is_dark, contrast_level) -> DynamicScheme
"""

from __future__ import annotations

import logging
from typing import Dict, Type, Union

from .dislike import fix_if_disliked
from .dynamic.dynamic_scheme import DynamicScheme
from .dynamic.variant import Variant
from .hct import Hct
from .palettes import TonalPalette
from .temperature import TemperatureCache
from .utils.math_utils import sanitize_degrees_double

__all__ = [
    "SchemeTonalSpot",
    "SchemeMonochrome",
    "SchemeNeutral",
    "SchemeVibrant",
    "SchemeExpressive",
    "SchemeFidelity",
    "SchemeContent",
    "scheme_for_variant",
]

_logger = logging.getLogger(__name__)


class SchemeTonalSpot(DynamicScheme):
    """Calm theme: a mid-chroma primary with muted companions. The default."""

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        super().__init__(
            source_color_hct,
            Variant.TONAL_SPOT,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, 36.0),
            TonalPalette.from_hue_and_chroma(hue, 16.0),
            TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 60.0), 24.0),
            TonalPalette.from_hue_and_chroma(hue, 6.0),
            TonalPalette.from_hue_and_chroma(hue, 8.0),
        )


class SchemeMonochrome(DynamicScheme):
    """Greyscale: every palette has zero chroma."""

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        super().__init__(
            source_color_hct,
            Variant.MONOCHROME,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, 0.0),
            TonalPalette.from_hue_and_chroma(hue, 0.0),
            TonalPalette.from_hue_and_chroma(hue, 0.0),
            TonalPalette.from_hue_and_chroma(hue, 0.0),
            TonalPalette.from_hue_and_chroma(hue, 0.0),
        )


class SchemeNeutral(DynamicScheme):
    """Nearly greyscale with a hint of the source hue."""

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        super().__init__(
            source_color_hct,
            Variant.NEUTRAL,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, 12.0),
            TonalPalette.from_hue_and_chroma(hue, 8.0),
            TonalPalette.from_hue_and_chroma(hue, 16.0),
            TonalPalette.from_hue_and_chroma(hue, 2.0),
            TonalPalette.from_hue_and_chroma(hue, 2.0),
        )


class SchemeVibrant(DynamicScheme):
    """Maximum-chroma primary; secondary/tertiary hues nudged by hue band."""

    HUES = (0.0, 41.0, 61.0, 101.0, 131.0, 181.0, 251.0, 301.0, 360.0)
    SECONDARY_ROTATIONS = (18.0, 15.0, 10.0, 12.0, 15.0, 18.0, 15.0, 12.0, 12.0)
    TERTIARY_ROTATIONS = (35.0, 30.0, 20.0, 25.0, 30.0, 35.0, 30.0, 25.0, 25.0)

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        super().__init__(
            source_color_hct,
            Variant.VIBRANT,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, 200.0),
            TonalPalette.from_hue_and_chroma(
                self.get_rotated_hue(source_color_hct, self.HUES, self.SECONDARY_ROTATIONS), 24.0
            ),
            TonalPalette.from_hue_and_chroma(
                self.get_rotated_hue(source_color_hct, self.HUES, self.TERTIARY_ROTATIONS), 32.0
            ),
            TonalPalette.from_hue_and_chroma(hue, 10.0),
            TonalPalette.from_hue_and_chroma(hue, 12.0),
        )


class SchemeExpressive(DynamicScheme):
    """Playful: the primary hue is deliberately moved away from the source."""

    HUES = (0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0)
    SECONDARY_ROTATIONS = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0)
    TERTIARY_ROTATIONS = (120.0, 120.0, 20.0, 45.0, 20.0, 15.0, 20.0, 120.0, 120.0)

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        super().__init__(
            source_color_hct,
            Variant.EXPRESSIVE,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 240.0), 40.0),
            TonalPalette.from_hue_and_chroma(
                self.get_rotated_hue(source_color_hct, self.HUES, self.SECONDARY_ROTATIONS), 24.0
            ),
            TonalPalette.from_hue_and_chroma(
                self.get_rotated_hue(source_color_hct, self.HUES, self.TERTIARY_ROTATIONS), 32.0
            ),
            TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 15.0), 8.0),
            TonalPalette.from_hue_and_chroma(sanitize_degrees_double(hue + 15.0), 12.0),
        )


class SchemeFidelity(DynamicScheme):
    """Keeps the source color's chroma; tertiary is its temperature complement."""

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        chroma = source_color_hct.chroma
        super().__init__(
            source_color_hct,
            Variant.FIDELITY,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, chroma),
            TonalPalette.from_hue_and_chroma(hue, max(chroma - 32.0, chroma * 0.5)),
            TonalPalette.from_hct(fix_if_disliked(TemperatureCache(source_color_hct).complement)),
            TonalPalette.from_hue_and_chroma(hue, chroma / 8.0),
            TonalPalette.from_hue_and_chroma(hue, chroma / 8.0 + 4.0),
        )


class SchemeContent(DynamicScheme):
    """Like fidelity, with an analogous tertiary instead of the complement."""

    def __init__(self, source_color_hct: Hct, is_dark: bool, contrast_level: float) -> None:
        hue = source_color_hct.hue
        chroma = source_color_hct.chroma
        analogous = TemperatureCache(source_color_hct).analogous_colors(count=3, divisions=6)
        super().__init__(
            source_color_hct,
            Variant.CONTENT,
            is_dark,
            contrast_level,
            TonalPalette.from_hue_and_chroma(hue, chroma),
            TonalPalette.from_hue_and_chroma(hue, max(chroma - 32.0, chroma * 0.5)),
            TonalPalette.from_hct(fix_if_disliked(analogous[2])),
            TonalPalette.from_hue_and_chroma(hue, chroma / 8.0),
            TonalPalette.from_hue_and_chroma(hue, chroma / 8.0 + 4.0),
        )


_SCHEMES: Dict[Variant, Type[DynamicScheme]] = {
    Variant.TONAL_SPOT: SchemeTonalSpot,
    Variant.MONOCHROME: SchemeMonochrome,
    Variant.NEUTRAL: SchemeNeutral,
    Variant.VIBRANT: SchemeVibrant,
    Variant.EXPRESSIVE: SchemeExpressive,
    Variant.FIDELITY: SchemeFidelity,
    Variant.CONTENT: SchemeContent,
}


def scheme_for_variant(
    variant: Union[Variant, str],
    source: Union[Hct, int],
    is_dark: bool = False,
    contrast_level: float = 0.0,
) -> DynamicScheme:
    """Build the scheme for ``variant`` from a source color (Hct or ARGB int).

    Raises
    ------
    ValueError
        If ``variant`` is not a known variant name.
    """
    variant = Variant.parse(variant)
    source_hct = source if isinstance(source, Hct) else Hct.from_int(source)
    scheme_cls = _SCHEMES[variant]
    _logger.debug(
        "Building %s (dark=%s, contrast=%s) from %r",
        scheme_cls.__name__,
        is_dark,
        contrast_level,
        source_hct,
    )
    return scheme_cls(source_hct, is_dark, contrast_level)
