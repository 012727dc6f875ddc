"""Immutable theming context shared by every role."""

from __future__ import annotations

import logging
from typing import Sequence

from ..hct import Hct
from ..palettes import TonalPalette
from ..settings import ERROR_CHROMA, ERROR_HUE
from ..utils.math_utils import sanitize_degrees_double
from .variant import Variant

__all__ = ["DynamicScheme"]

_logger = logging.getLogger(__name__)


class DynamicScheme:
    """Seed color, variant, mode, contrast level and the six palettes.

    Roles cache their results per scheme instance, so a scheme must not be
    mutated after construction; attributes are exposed read-only.
    """

    def __init__(
        self,
        source_color_hct: Hct,
        variant: Variant,
        is_dark: bool,
        contrast_level: float,
        primary_palette: TonalPalette,
        secondary_palette: TonalPalette,
        tertiary_palette: TonalPalette,
        neutral_palette: TonalPalette,
        neutral_variant_palette: TonalPalette,
    ) -> None:
        self._source_color_hct = source_color_hct
        self._variant = variant
        self._is_dark = bool(is_dark)
        self._contrast_level = float(contrast_level)
        self._primary_palette = primary_palette
        self._secondary_palette = secondary_palette
        self._tertiary_palette = tertiary_palette
        self._neutral_palette = neutral_palette
        self._neutral_variant_palette = neutral_variant_palette
        self._error_palette = TonalPalette.from_hue_and_chroma(ERROR_HUE, ERROR_CHROMA)

    @property
    def source_color_hct(self) -> Hct:
        return self._source_color_hct

    @property
    def source_color_argb(self) -> int:
        return self._source_color_hct.to_int()

    @property
    def variant(self) -> Variant:
        return self._variant

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    @property
    def contrast_level(self) -> float:
        return self._contrast_level

    @property
    def primary_palette(self) -> TonalPalette:
        return self._primary_palette

    @property
    def secondary_palette(self) -> TonalPalette:
        return self._secondary_palette

    @property
    def tertiary_palette(self) -> TonalPalette:
        return self._tertiary_palette

    @property
    def neutral_palette(self) -> TonalPalette:
        return self._neutral_palette

    @property
    def neutral_variant_palette(self) -> TonalPalette:
        return self._neutral_variant_palette

    @property
    def error_palette(self) -> TonalPalette:
        return self._error_palette

    @staticmethod
    def get_rotated_hue(
        source_color_hct: Hct, hues: Sequence[float], rotations: Sequence[float]
    ) -> float:
        """Rotate the source hue by the offset of the bracket it falls in.

        Parameters
        ----------
        source_color_hct : Hct
            Color whose hue is rotated.
        hues : Sequence[float]
            Ascending hue breakpoints; ``hues[i] <= hue < hues[i + 1]`` selects
            ``rotations[i]``.
        rotations : Sequence[float]
            Offsets parallel to ``hues``. A single offset applies to any hue.

        Returns
        -------
        float
            The rotated hue in [0, 360), or the unrotated hue when no bracket
            matches.
        """
        source_hue = source_color_hct.hue
        if len(rotations) == 1:
            return sanitize_degrees_double(source_hue + rotations[0])
        for i in range(len(hues) - 1):
            if hues[i] <= source_hue < hues[i + 1]:
                return sanitize_degrees_double(source_hue + rotations[i])
        _logger.warning(
            "No hue bracket matched %.2f in %s; leaving hue unrotated", source_hue, list(hues)
        )
        return source_hue

    def __repr__(self) -> str:
        mode = "dark" if self._is_dark else "light"
        return (
            f"{type(self).__name__}(variant={self._variant.value}, {mode}, "
            f"contrast={self._contrast_level}, source={self._source_color_hct!r})"
        )
