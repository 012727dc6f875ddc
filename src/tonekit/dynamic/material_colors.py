"""The catalog of named color roles.

``MaterialDynamicColors`` wires every role's palette, base tone, backgrounds,
contrast curve and delta pair. Each role is created once per catalog so its
per-scheme cache is shared by every caller.

Public API:
- MaterialDynamicColors(is_extended_fidelity=False, validate=True)
- MaterialDynamicColors.highest_surface(scheme) -> DynamicColor
- MaterialDynamicColors.all_colors() -> list[DynamicColor]
- MaterialDynamicColors.role(name) -> DynamicColor
- MaterialDynamicColors.graph() -> RoleGraph
- find_desired_chroma_by_tone(hue, chroma, tone, by_decreasing_tone) -> float
"""

from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from ..dislike import fix_if_disliked
from ..hct import Hct
from .contrast_curve import ContrastCurve, tone_for_contrast
from .dynamic_color import DynamicColor
from .dynamic_scheme import DynamicScheme
from .role_graph import RoleGraph
from .tone_delta_pair import ToneDeltaPair, TonePolarity
from .variant import Variant

__all__ = ["MaterialDynamicColors", "find_desired_chroma_by_tone", "ROLE_NAMES"]

_logger = logging.getLogger(__name__)

# Stable export order.
ROLE_NAMES: Tuple[str, ...] = (
    "primary_palette_key_color",
    "secondary_palette_key_color",
    "tertiary_palette_key_color",
    "neutral_palette_key_color",
    "neutral_variant_palette_key_color",
    "background",
    "on_background",
    "surface",
    "surface_dim",
    "surface_bright",
    "surface_container_lowest",
    "surface_container_low",
    "surface_container",
    "surface_container_high",
    "surface_container_highest",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "inverse_surface",
    "inverse_on_surface",
    "outline",
    "outline_variant",
    "shadow",
    "scrim",
    "surface_tint",
    "primary",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "inverse_primary",
    "secondary",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "tertiary",
    "on_tertiary",
    "tertiary_container",
    "on_tertiary_container",
    "error",
    "on_error",
    "error_container",
    "on_error_container",
    "primary_fixed",
    "primary_fixed_dim",
    "on_primary_fixed",
    "on_primary_fixed_variant",
    "secondary_fixed",
    "secondary_fixed_dim",
    "on_secondary_fixed",
    "on_secondary_fixed_variant",
    "tertiary_fixed",
    "tertiary_fixed_dim",
    "on_tertiary_fixed",
    "on_tertiary_fixed_variant",
    "control_activated",
    "control_normal",
    "control_highlight",
    "text_primary_inverse",
    "text_secondary_and_tertiary_inverse",
    "text_primary_inverse_disable_only",
    "text_secondary_and_tertiary_inverse_disabled",
    "text_hint_inverse",
)

# Shared curves
_ON_COLOR = ContrastCurve(4.5, 7.0, 11.0, 21.0)
_ACCENT = ContrastCurve(3.0, 4.5, 7.0, 7.0)
_CONTAINER = ContrastCurve(1.0, 1.0, 3.0, 4.5)
_ON_VARIANT = ContrastCurve(3.0, 4.5, 7.0, 11.0)


def _is_monochrome(s: DynamicScheme) -> bool:
    return s.variant is Variant.MONOCHROME


def find_desired_chroma_by_tone(
    hue: float, chroma: float, tone: float, by_decreasing_tone: bool
) -> float:
    """Walk tone by 1 until the palette can reach ``chroma`` (or chroma peaks).

    Used for fidelity containers whose standard tone cannot hold the seed's
    chroma.
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential_solution = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential_solution.chroma:
                break
            if abs(potential_solution.chroma - chroma) < 0.4:
                break
            potential_delta = abs(potential_solution.chroma - chroma)
            current_delta = abs(closest_to_chroma.chroma - chroma)
            if potential_delta < current_delta:
                closest_to_chroma = potential_solution
            chroma_peak = max(chroma_peak, potential_solution.chroma)
    return answer


class MaterialDynamicColors:
    """All roles, built once.

    Parameters
    ----------
    is_extended_fidelity : bool
        Treat every variant except monochrome and neutral like fidelity
        (containers follow the source color's tone).
    validate : bool
        Check the background graph for cycles on construction.

    Raises
    ------
    RoleGraphCycleError
        When ``validate`` is set and two roles are each other's background.
    """

    def __init__(self, is_extended_fidelity: bool = False, validate: bool = True) -> None:
        self.is_extended_fidelity = is_extended_fidelity
        self._roles: Dict[str, DynamicColor] = {}
        self._build()
        if validate:
            self.graph().validate_acyclic()

    # --- Lookup -----------------------------------------------------------
    def highest_surface(self, s: DynamicScheme) -> DynamicColor:
        return self.surface_bright if s.is_dark else self.surface_dim

    def all_colors(self) -> List[DynamicColor]:
        return [self._roles[name] for name in ROLE_NAMES]

    def role(self, name: str) -> DynamicColor:
        try:
            return self._roles[name]
        except KeyError:
            raise KeyError(f"Unknown color role: {name!r}") from None

    def graph(self) -> RoleGraph:
        return RoleGraph.from_roles(self.all_colors())

    def __getattr__(self, name: str) -> DynamicColor:
        roles = self.__dict__.get("_roles")
        if roles is not None and name in roles:
            return roles[name]
        raise AttributeError(name)

    def is_fidelity(self, s: DynamicScheme) -> bool:
        if self.is_extended_fidelity and s.variant not in (Variant.MONOCHROME, Variant.NEUTRAL):
            return True
        return s.variant in (Variant.FIDELITY, Variant.CONTENT)

    # --- Construction -----------------------------------------------------
    def _add(self, role: DynamicColor) -> None:
        self._roles[role.name] = role

    def _build(self) -> None:
        self._build_key_colors()
        self._build_surfaces()
        self._build_primary()
        self._build_secondary()
        self._build_tertiary()
        self._build_error()
        self._build_fixed()
        self._build_legacy()
        _logger.debug("Built %d color roles", len(self._roles))

    def _build_key_colors(self) -> None:
        for prefix, attr in (
            ("primary", "primary_palette"),
            ("secondary", "secondary_palette"),
            ("tertiary", "tertiary_palette"),
            ("neutral", "neutral_palette"),
            ("neutral_variant", "neutral_variant_palette"),
        ):
            self._add(
                DynamicColor.from_palette(
                    f"{prefix}_palette_key_color",
                    lambda s, a=attr: getattr(s, a),
                    lambda s, a=attr: getattr(s, a).key_color.tone,
                )
            )

    def _build_surfaces(self) -> None:
        neutral = lambda s: s.neutral_palette  # noqa: E731
        neutral_variant = lambda s: s.neutral_variant_palette  # noqa: E731
        highest = self.highest_surface

        self._add(DynamicColor("background", neutral, lambda s: 6.0 if s.is_dark else 98.0, True))
        self._add(
            DynamicColor(
                "on_background",
                neutral,
                lambda s: 90.0 if s.is_dark else 10.0,
                background=lambda s: self.background,
                contrast_curve=ContrastCurve(3.0, 3.0, 4.5, 7.0),
            )
        )
        self._add(DynamicColor("surface", neutral, lambda s: 6.0 if s.is_dark else 98.0, True))

        # Surface tones that step away from the page as contrast rises:
        # (name, dark curve or tone, light curve or tone)
        stepped = (
            ("surface_dim", 6.0, (87.0, 87.0, 80.0, 75.0)),
            ("surface_bright", (24.0, 24.0, 29.0, 34.0), 98.0),
            ("surface_container_lowest", (4.0, 4.0, 2.0, 0.0), 100.0),
            ("surface_container_low", (10.0, 10.0, 11.0, 12.0), (96.0, 96.0, 96.0, 95.0)),
            ("surface_container", (12.0, 12.0, 16.0, 20.0), (94.0, 94.0, 92.0, 90.0)),
            ("surface_container_high", (17.0, 17.0, 21.0, 25.0), (92.0, 92.0, 88.0, 85.0)),
            ("surface_container_highest", (22.0, 22.0, 26.0, 30.0), (90.0, 90.0, 84.0, 80.0)),
        )
        for name, dark, light in stepped:
            self._add(
                DynamicColor(
                    name,
                    neutral,
                    lambda s, d=dark, li=light: _stepped_tone(s, d if s.is_dark else li),
                    True,
                )
            )

        self._add(
            DynamicColor(
                "on_surface",
                neutral,
                lambda s: 90.0 if s.is_dark else 10.0,
                background=highest,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "surface_variant", neutral_variant, lambda s: 30.0 if s.is_dark else 90.0, True
            )
        )
        self._add(
            DynamicColor(
                "on_surface_variant",
                neutral_variant,
                lambda s: 80.0 if s.is_dark else 30.0,
                background=highest,
                contrast_curve=_ON_VARIANT,
            )
        )
        self._add(DynamicColor("inverse_surface", neutral, lambda s: 90.0 if s.is_dark else 20.0))
        self._add(
            DynamicColor(
                "inverse_on_surface",
                neutral,
                lambda s: 20.0 if s.is_dark else 95.0,
                background=lambda s: self.inverse_surface,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "outline",
                neutral_variant,
                lambda s: 60.0 if s.is_dark else 50.0,
                background=highest,
                contrast_curve=ContrastCurve(1.5, 3.0, 4.5, 7.0),
            )
        )
        self._add(
            DynamicColor(
                "outline_variant",
                neutral_variant,
                lambda s: 30.0 if s.is_dark else 80.0,
                background=highest,
                contrast_curve=ContrastCurve(1.0, 1.0, 3.0, 4.5),
            )
        )
        self._add(DynamicColor("shadow", neutral, lambda s: 0.0))
        self._add(DynamicColor("scrim", neutral, lambda s: 0.0))
        self._add(
            DynamicColor(
                "surface_tint", lambda s: s.primary_palette, lambda s: 80.0 if s.is_dark else 40.0, True
            )
        )

    def _build_primary(self) -> None:
        palette = lambda s: s.primary_palette  # noqa: E731
        pair = lambda s: ToneDeltaPair(  # noqa: E731
            self.primary_container, self.primary, 10.0, TonePolarity.NEARER, False
        )

        def primary_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 100.0 if s.is_dark else 0.0
            return 80.0 if s.is_dark else 40.0

        def on_primary_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        def container_tone(s: DynamicScheme) -> float:
            if self.is_fidelity(s):
                return s.source_color_hct.tone
            if _is_monochrome(s):
                return 85.0 if s.is_dark else 25.0
            return 30.0 if s.is_dark else 90.0

        def on_container_tone(s: DynamicScheme) -> float:
            if self.is_fidelity(s):
                return DynamicColor.foreground_tone(self.primary_container.tone(s), 4.5)
            if _is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            return 90.0 if s.is_dark else 10.0

        self._add(
            DynamicColor(
                "primary",
                palette,
                primary_tone,
                True,
                background=self.highest_surface,
                contrast_curve=_ACCENT,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_primary",
                palette,
                on_primary_tone,
                background=lambda s: self.primary,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "primary_container",
                palette,
                container_tone,
                True,
                background=self.highest_surface,
                contrast_curve=_CONTAINER,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_primary_container",
                palette,
                on_container_tone,
                background=lambda s: self.primary_container,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "inverse_primary",
                palette,
                lambda s: 40.0 if s.is_dark else 80.0,
                background=lambda s: self.inverse_surface,
                contrast_curve=_ACCENT,
            )
        )

    def _build_secondary(self) -> None:
        palette = lambda s: s.secondary_palette  # noqa: E731
        pair = lambda s: ToneDeltaPair(  # noqa: E731
            self.secondary_container, self.secondary, 10.0, TonePolarity.NEARER, False
        )

        def on_secondary_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 100.0
            return 20.0 if s.is_dark else 100.0

        def container_tone(s: DynamicScheme) -> float:
            initial_tone = 30.0 if s.is_dark else 90.0
            if _is_monochrome(s):
                return 30.0 if s.is_dark else 85.0
            if not self.is_fidelity(s):
                return initial_tone
            return find_desired_chroma_by_tone(
                s.secondary_palette.hue, s.secondary_palette.chroma, initial_tone, not s.is_dark
            )

        def on_container_tone(s: DynamicScheme) -> float:
            if not self.is_fidelity(s):
                return 90.0 if s.is_dark else 10.0
            return DynamicColor.foreground_tone(self.secondary_container.tone(s), 4.5)

        self._add(
            DynamicColor(
                "secondary",
                palette,
                lambda s: 80.0 if s.is_dark else 40.0,
                True,
                background=self.highest_surface,
                contrast_curve=_ACCENT,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_secondary",
                palette,
                on_secondary_tone,
                background=lambda s: self.secondary,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "secondary_container",
                palette,
                container_tone,
                True,
                background=self.highest_surface,
                contrast_curve=_CONTAINER,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_secondary_container",
                palette,
                on_container_tone,
                background=lambda s: self.secondary_container,
                contrast_curve=_ON_COLOR,
            )
        )

    def _build_tertiary(self) -> None:
        palette = lambda s: s.tertiary_palette  # noqa: E731
        pair = lambda s: ToneDeltaPair(  # noqa: E731
            self.tertiary_container, self.tertiary, 10.0, TonePolarity.NEARER, False
        )

        def tertiary_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 90.0 if s.is_dark else 25.0
            return 80.0 if s.is_dark else 40.0

        def on_tertiary_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 10.0 if s.is_dark else 90.0
            return 20.0 if s.is_dark else 100.0

        def container_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 60.0 if s.is_dark else 49.0
            if not self.is_fidelity(s):
                return 30.0 if s.is_dark else 90.0
            proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
            return fix_if_disliked(proposed).tone

        def on_container_tone(s: DynamicScheme) -> float:
            if _is_monochrome(s):
                return 0.0 if s.is_dark else 100.0
            if not self.is_fidelity(s):
                return 90.0 if s.is_dark else 10.0
            return DynamicColor.foreground_tone(self.tertiary_container.tone(s), 4.5)

        self._add(
            DynamicColor(
                "tertiary",
                palette,
                tertiary_tone,
                True,
                background=self.highest_surface,
                contrast_curve=_ACCENT,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_tertiary",
                palette,
                on_tertiary_tone,
                background=lambda s: self.tertiary,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "tertiary_container",
                palette,
                container_tone,
                True,
                background=self.highest_surface,
                contrast_curve=_CONTAINER,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_tertiary_container",
                palette,
                on_container_tone,
                background=lambda s: self.tertiary_container,
                contrast_curve=_ON_COLOR,
            )
        )

    def _build_error(self) -> None:
        palette = lambda s: s.error_palette  # noqa: E731
        pair = lambda s: ToneDeltaPair(  # noqa: E731
            self.error_container, self.error, 10.0, TonePolarity.NEARER, False
        )
        self._add(
            DynamicColor(
                "error",
                palette,
                lambda s: 80.0 if s.is_dark else 40.0,
                True,
                background=self.highest_surface,
                contrast_curve=_ACCENT,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_error",
                palette,
                lambda s: 20.0 if s.is_dark else 100.0,
                background=lambda s: self.error,
                contrast_curve=_ON_COLOR,
            )
        )
        self._add(
            DynamicColor(
                "error_container",
                palette,
                lambda s: 30.0 if s.is_dark else 90.0,
                True,
                background=self.highest_surface,
                contrast_curve=_CONTAINER,
                tone_delta_pair=pair,
            )
        )
        self._add(
            DynamicColor(
                "on_error_container",
                palette,
                lambda s: 90.0 if s.is_dark else 10.0,
                background=lambda s: self.error_container,
                contrast_curve=_ON_COLOR,
            )
        )

    def _build_fixed(self) -> None:
        # (group, palette attr, fixed, fixed_dim, on_fixed, on_fixed_variant) as
        # (monochrome tone, standard tone) pairs.
        groups = (
            ("primary", "primary_palette", (40.0, 90.0), (30.0, 80.0), (100.0, 10.0), (90.0, 30.0)),
            ("secondary", "secondary_palette", (80.0, 90.0), (70.0, 80.0), (10.0, 10.0), (25.0, 30.0)),
            ("tertiary", "tertiary_palette", (40.0, 90.0), (30.0, 80.0), (100.0, 10.0), (90.0, 30.0)),
        )
        for group, attr, fixed, fixed_dim, on_fixed, on_fixed_variant in groups:
            palette = lambda s, a=attr: getattr(s, a)  # noqa: E731
            fixed_name = f"{group}_fixed"
            dim_name = f"{group}_fixed_dim"
            pair = lambda s, f=fixed_name, d=dim_name: ToneDeltaPair(  # noqa: E731
                self.role(f), self.role(d), 10.0, TonePolarity.LIGHTER, True
            )
            self._add(
                DynamicColor(
                    fixed_name,
                    palette,
                    lambda s, t=fixed: _mono_or(s, t),
                    True,
                    background=self.highest_surface,
                    contrast_curve=_CONTAINER,
                    tone_delta_pair=pair,
                )
            )
            self._add(
                DynamicColor(
                    dim_name,
                    palette,
                    lambda s, t=fixed_dim: _mono_or(s, t),
                    True,
                    background=self.highest_surface,
                    contrast_curve=_CONTAINER,
                    tone_delta_pair=pair,
                )
            )
            self._add(
                DynamicColor(
                    f"on_{group}_fixed",
                    palette,
                    lambda s, t=on_fixed: _mono_or(s, t),
                    background=lambda s, d=dim_name: self.role(d),
                    second_background=lambda s, f=fixed_name: self.role(f),
                    contrast_curve=_ON_COLOR,
                )
            )
            self._add(
                DynamicColor(
                    f"on_{group}_fixed_variant",
                    palette,
                    lambda s, t=on_fixed_variant: _mono_or(s, t),
                    background=lambda s, d=dim_name: self.role(d),
                    second_background=lambda s, f=fixed_name: self.role(f),
                    contrast_curve=_ON_VARIANT,
                )
            )

    def _build_legacy(self) -> None:
        # Android control/text roles; fixed tones, no contrast handling.
        neutral = lambda s: s.neutral_palette  # noqa: E731
        neutral_variant = lambda s: s.neutral_variant_palette  # noqa: E731
        self._add(
            DynamicColor.from_palette(
                "control_activated", lambda s: s.primary_palette, lambda s: 30.0 if s.is_dark else 90.0
            )
        )
        self._add(
            DynamicColor.from_palette(
                "control_normal", neutral_variant, lambda s: 80.0 if s.is_dark else 30.0
            )
        )
        self._add(
            DynamicColor(
                "control_highlight",
                neutral,
                lambda s: 100.0 if s.is_dark else 0.0,
                opacity=lambda s: 0.20 if s.is_dark else 0.12,
            )
        )
        self._add(
            DynamicColor.from_palette(
                "text_primary_inverse", neutral, lambda s: 10.0 if s.is_dark else 90.0
            )
        )
        self._add(
            DynamicColor.from_palette(
                "text_secondary_and_tertiary_inverse",
                neutral_variant,
                lambda s: 30.0 if s.is_dark else 80.0,
            )
        )
        for name in (
            "text_primary_inverse_disable_only",
            "text_secondary_and_tertiary_inverse_disabled",
            "text_hint_inverse",
        ):
            self._add(
                DynamicColor.from_palette(name, neutral, lambda s: 10.0 if s.is_dark else 90.0)
            )


def _mono_or(s: DynamicScheme, tones: Tuple[float, float]) -> float:
    return tones[0] if _is_monochrome(s) else tones[1]


def _stepped_tone(s: DynamicScheme, tone) -> float:
    if isinstance(tone, tuple):
        return tone_for_contrast(s.contrast_level, *tone)
    return tone
