"""Dynamic colors: roles whose tone is solved per scheme.

A ``DynamicColor`` names a role ("primary", "on_surface", ...) and describes
where its color comes from: a palette, a base tone and, optionally, the
backgrounds it must contrast with and a partner role it must keep a tonal
distance from. ``get_argb(scheme)`` resolves the final color.

How the tone is found depends on the role's resolution strategy, derived once
at construction from the fields supplied:

- ``SelfOnly``         no background: the base tone is used as is.
- ``SingleBackground`` meet the contrast curve against one background.
- ``DualBackground``   meet the curve against two backgrounds at once.
- ``DeltaPaired``      solve together with a partner role (``ToneDeltaPair``).

Public API:
- DynamicColor(name, palette, tone, is_background=False, background=None,
  second_background=None, contrast_curve=None, tone_delta_pair=None, opacity=None)
- DynamicColor.from_palette(name, palette, tone, is_background=False)
- DynamicColor.from_argb(name, argb)
- DynamicColor.get_argb / get_hct / get_tone (scheme)
- DynamicColor.foreground_tone(bg_tone, ratio)
- DynamicColor.tone_prefers_light_foreground / tone_allows_light_foreground / enable_light_foreground
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple, Union

from .. import contrast
from ..errors import RoleDefinitionError
from ..hct import Hct
from ..palettes import TonalPalette
from ..settings import HCT_CACHE_SIZE
from ..utils.math_utils import clamp_double, clamp_int
from .contrast_curve import ContrastCurve
from .dynamic_scheme import DynamicScheme
from .tone_delta_pair import ToneDeltaPair

__all__ = [
    "DynamicColor",
    "SelfOnly",
    "SingleBackground",
    "DualBackground",
    "DeltaPaired",
    "ResolutionStrategy",
    "classify_strategy",
]

_logger = logging.getLogger(__name__)

PaletteFn = Callable[[DynamicScheme], TonalPalette]
ToneFn = Callable[[DynamicScheme], float]
RoleFn = Callable[[DynamicScheme], "DynamicColor"]
PairFn = Callable[[DynamicScheme], ToneDeltaPair]
OpacityFn = Callable[[DynamicScheme], float]


# --- Resolution strategies ----------------------------------------------------
@dataclass(frozen=True)
class SelfOnly:
    pass


@dataclass(frozen=True)
class SingleBackground:
    background: RoleFn
    contrast_curve: ContrastCurve


@dataclass(frozen=True)
class DualBackground:
    background: RoleFn
    second_background: RoleFn
    contrast_curve: ContrastCurve


@dataclass(frozen=True)
class DeltaPaired:
    background: RoleFn
    contrast_curve: ContrastCurve
    tone_delta_pair: PairFn


ResolutionStrategy = Union[SelfOnly, SingleBackground, DualBackground, DeltaPaired]


def classify_strategy(
    name: str,
    background: Optional[RoleFn] = None,
    second_background: Optional[RoleFn] = None,
    contrast_curve: Optional[ContrastCurve] = None,
    tone_delta_pair: Optional[PairFn] = None,
) -> ResolutionStrategy:
    """Pick the strategy for a role, rejecting inconsistent combinations.

    Raises
    ------
    RoleDefinitionError
        When a dependent field is set without the field it relies on, or
        when a delta pair is combined with a second background.
    """
    if background is None:
        for label, value in (
            ("tone_delta_pair", tone_delta_pair),
            ("second_background", second_background),
            ("contrast_curve", contrast_curve),
        ):
            if value is not None:
                raise RoleDefinitionError(f"Role '{name}': {label} requires a background")
        return SelfOnly()
    if contrast_curve is None:
        raise RoleDefinitionError(f"Role '{name}': background requires a contrast_curve")
    if tone_delta_pair is not None:
        if second_background is not None:
            raise RoleDefinitionError(
                f"Role '{name}': tone_delta_pair and second_background are mutually exclusive"
            )
        return DeltaPaired(background, contrast_curve, tone_delta_pair)
    if second_background is not None:
        return DualBackground(background, second_background, contrast_curve)
    return SingleBackground(background, contrast_curve)


# --- Memo cache ---------------------------------------------------------------
class _SchemeCache:
    """Scheme -> Hct memo keyed by identity.

    Not an LRU: once ``max_entries`` are stored the next insert wipes the lot.
    Entries hold the scheme itself so its id cannot be recycled while cached.
    """

    def __init__(self, max_entries: int = HCT_CACHE_SIZE) -> None:
        self._max_entries = max_entries
        self._entries: Dict[int, Tuple[DynamicScheme, Hct]] = {}
        self._lock = threading.Lock()

    def get(self, scheme: DynamicScheme) -> Optional[Hct]:
        with self._lock:
            entry = self._entries.get(id(scheme))
        if entry is not None and entry[0] is scheme:
            return entry[1]
        return None

    def put(self, scheme: DynamicScheme, hct: Hct) -> None:
        key = id(scheme)
        with self._lock:
            if key not in self._entries and len(self._entries) >= self._max_entries:
                _logger.debug("Clearing %d cached scheme entries", len(self._entries))
                self._entries.clear()
            self._entries[key] = (scheme, hct)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# --- Role ---------------------------------------------------------------------
class DynamicColor:
    """A color role resolved against a ``DynamicScheme``.

    Parameters
    ----------
    name : str
        Role name, unique within a catalog. Delta pairs identify the
        resolving role by name.
    palette : Callable[[DynamicScheme], TonalPalette]
        Palette the final color is taken from.
    tone : Callable[[DynamicScheme], float]
        Base tone before any contrast adjustment.
    is_background : bool
        Other roles are drawn on top of this one; keeps it out of T50-59.
    background, second_background : Callable[[DynamicScheme], DynamicColor], optional
        Roles this one must contrast with.
    contrast_curve : ContrastCurve, optional
        Required contrast against the background(s) per contrast level.
    tone_delta_pair : Callable[[DynamicScheme], ToneDeltaPair], optional
        Tonal distance constraint shared with a partner role.
    opacity : Callable[[DynamicScheme], float], optional
        Alpha in 0..1, spliced into the resolved color.

    Raises
    ------
    RoleDefinitionError
        For inconsistent field combinations (see ``classify_strategy``).
    """

    def __init__(
        self,
        name: str,
        palette: PaletteFn,
        tone: ToneFn,
        is_background: bool = False,
        background: Optional[RoleFn] = None,
        second_background: Optional[RoleFn] = None,
        contrast_curve: Optional[ContrastCurve] = None,
        tone_delta_pair: Optional[PairFn] = None,
        opacity: Optional[OpacityFn] = None,
    ) -> None:
        self.name = name
        self.palette = palette
        self.tone = tone
        self.is_background = is_background
        self.background = background
        self.second_background = second_background
        self.contrast_curve = contrast_curve
        self.tone_delta_pair = tone_delta_pair
        self.opacity = opacity
        self.strategy: ResolutionStrategy = classify_strategy(
            name, background, second_background, contrast_curve, tone_delta_pair
        )
        self._hct_cache = _SchemeCache()

    @classmethod
    def from_palette(
        cls, name: str, palette: PaletteFn, tone: ToneFn, is_background: bool = False
    ) -> "DynamicColor":
        return cls(name, palette, tone, is_background=is_background)

    @classmethod
    def from_argb(cls, name: str, argb: int) -> "DynamicColor":
        """A fixed color that ignores the scheme."""
        hct = Hct.from_int(argb)
        palette = TonalPalette.from_int(argb)
        return cls.from_palette(name, lambda s: palette, lambda s: hct.tone)

    # --- Resolution -------------------------------------------------------
    def get_argb(self, scheme: DynamicScheme) -> int:
        argb = self.get_hct(scheme).to_int()
        if self.opacity is None:
            return argb
        percentage = self.opacity(scheme)
        alpha = clamp_int(0, 255, int(round(percentage * 255)))
        return (argb & 0x00FFFFFF) | (alpha << 24)

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        cached = self._hct_cache.get(scheme)
        if cached is not None:
            return cached
        # Look up the solved tone in the palette rather than re-toning the
        # base color, so low-chroma base tones regain chroma as contrast rises.
        tone = self.get_tone(scheme)
        answer = self.palette(scheme).get_hct(tone)
        self._hct_cache.put(scheme, answer)
        return answer

    def get_tone(self, scheme: DynamicScheme) -> float:
        strategy = self.strategy
        if isinstance(strategy, DeltaPaired):
            return self._tone_for_pair(scheme, strategy)
        answer = self.tone(scheme)
        if isinstance(strategy, SelfOnly):
            return answer
        bg_tone = strategy.background(scheme).get_tone(scheme)
        answer = self._tone_against(scheme, answer, bg_tone, strategy.contrast_curve)
        if isinstance(strategy, DualBackground):
            return self._tone_between(scheme, answer, bg_tone, strategy)
        return answer

    def _tone_against(
        self, scheme: DynamicScheme, answer: float, bg_tone: float, curve: ContrastCurve
    ) -> float:
        desired_ratio = curve.get(scheme.contrast_level)
        if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = self.foreground_tone(bg_tone, desired_ratio)
        if scheme.contrast_level < 0:
            # Reduced contrast: settle for the bare minimum.
            answer = self.foreground_tone(bg_tone, desired_ratio)
        if self.is_background and 50.0 <= answer < 60.0:
            if contrast.ratio_of_tones(49.0, bg_tone) >= desired_ratio:
                answer = 49.0
            else:
                answer = 60.0
        return answer

    def _tone_between(
        self, scheme: DynamicScheme, answer: float, bg_tone: float, strategy: DualBackground
    ) -> float:
        desired_ratio = strategy.contrast_curve.get(scheme.contrast_level)
        bg_tone2 = strategy.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone, bg_tone2)
        lower = min(bg_tone, bg_tone2)

        if (
            contrast.ratio_of_tones(upper, answer) >= desired_ratio
            and contrast.ratio_of_tones(lower, answer) >= desired_ratio
        ):
            return answer

        light_option = contrast.lighter(upper, desired_ratio)
        dark_option = contrast.darker(lower, desired_ratio)
        availables = [t for t in (light_option, dark_option) if t != contrast.UNREACHABLE]

        if self.tone_prefers_light_foreground(bg_tone) or self.tone_prefers_light_foreground(
            bg_tone2
        ):
            return 100.0 if light_option == contrast.UNREACHABLE else light_option
        if len(availables) == 1:
            return availables[0]
        return 0.0 if dark_option == contrast.UNREACHABLE else dark_option

    def _tone_for_pair(self, scheme: DynamicScheme, strategy: DeltaPaired) -> float:
        pair = strategy.tone_delta_pair(scheme)
        delta = pair.delta
        bg_tone = strategy.background(scheme).get_tone(scheme)

        a_is_nearer = pair.a_is_nearer(scheme.is_dark)
        nearer = pair.role_a if a_is_nearer else pair.role_b
        farther = pair.role_b if a_is_nearer else pair.role_a
        am_nearer = self.name == nearer.name
        expansion_dir = 1 if scheme.is_dark else -1

        n_contrast = _curve_of(nearer).get(scheme.contrast_level)
        f_contrast = _curve_of(farther).get(scheme.contrast_level)

        # Tones that already meet their own curve are left alone.
        n_initial = nearer.tone(scheme)
        if contrast.ratio_of_tones(bg_tone, n_initial) >= n_contrast:
            n_tone = n_initial
        else:
            n_tone = self.foreground_tone(bg_tone, n_contrast)
        f_initial = farther.tone(scheme)
        if contrast.ratio_of_tones(bg_tone, f_initial) >= f_contrast:
            f_tone = f_initial
        else:
            f_tone = self.foreground_tone(bg_tone, f_contrast)

        if scheme.contrast_level < 0:
            n_tone = self.foreground_tone(bg_tone, n_contrast)
            f_tone = self.foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            # Push farther out first, then pull nearer in.
            f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

        # Keep out of the awkward zone (T50-59).
        if 50.0 <= n_tone < 60.0:
            n_tone, f_tone = _move_pair_out_of_zone(n_tone, f_tone, delta, expansion_dir)
        elif 50.0 <= f_tone < 60.0:
            if pair.stay_together:
                n_tone, f_tone = _move_pair_out_of_zone(n_tone, f_tone, delta, expansion_dir)
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

    # --- Tone helpers -----------------------------------------------------
    @staticmethod
    def foreground_tone(bg_tone: float, ratio: float) -> float:
        """Tone on ``bg_tone`` that reaches ``ratio``, or comes closest to it."""
        lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
        darker_tone = contrast.darker_unsafe(bg_tone, ratio)
        lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
        darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

        if DynamicColor.tone_prefers_light_foreground(bg_tone):
            # When neither side reaches a high requested ratio and they are
            # about equal, stay light instead of flipping to dark.
            negligible_difference = (
                abs(lighter_ratio - darker_ratio) < 0.1
                and lighter_ratio < ratio
                and darker_ratio < ratio
            )
            if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
                return lighter_tone
            return darker_tone
        if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
            return darker_tone
        return lighter_tone

    @staticmethod
    def tone_prefers_light_foreground(tone: float) -> bool:
        return round(tone) < 60

    @staticmethod
    def tone_allows_light_foreground(tone: float) -> bool:
        return round(tone) <= 49

    @staticmethod
    def enable_light_foreground(tone: float) -> float:
        """Nudge T50-59 down to T49 so a light foreground works on it."""
        if DynamicColor.tone_prefers_light_foreground(
            tone
        ) and not DynamicColor.tone_allows_light_foreground(tone):
            return 49.0
        return tone

    def __repr__(self) -> str:
        return f"DynamicColor({self.name!r}, strategy={type(self.strategy).__name__})"


def _curve_of(role: DynamicColor) -> ContrastCurve:
    if role.contrast_curve is None:
        raise RoleDefinitionError(f"Role '{role.name}' is delta-paired but has no contrast_curve")
    return role.contrast_curve


def _move_pair_out_of_zone(
    n_tone: float, f_tone: float, delta: float, expansion_dir: int
) -> Tuple[float, float]:
    if expansion_dir > 0:
        n_tone = 60.0
        f_tone = max(f_tone, n_tone + delta * expansion_dir)
    else:
        n_tone = 49.0
        f_tone = min(f_tone, n_tone + delta * expansion_dir)
    return n_tone, f_tone
