"""Tone resolution: strategies, contrast rules, awkward zone, cache."""

import pytest

from tonekit import contrast
from tonekit.dynamic import (
    ContrastCurve,
    DeltaPaired,
    DualBackground,
    DynamicColor,
    SelfOnly,
    SingleBackground,
    ToneDeltaPair,
    TonePolarity,
)
from tonekit.dynamic.dynamic_color import _SchemeCache
from tonekit.dynamic.material_colors import find_desired_chroma_by_tone
from tonekit.errors import RoleDefinitionError, RoleGraphCycleError
from tonekit.hct import Hct
from tonekit.schemes import SchemeFidelity

ACCENT = ContrastCurve(3.0, 4.5, 7.0, 7.0)


def _fixed(name, tone, is_background=True):
    return DynamicColor(name, lambda s: s.neutral_palette, lambda s: tone, is_background)


def _on(name, tone, bg, curve, second=None, is_background=False):
    return DynamicColor(
        name,
        lambda s: s.neutral_palette,
        lambda s: tone,
        is_background,
        background=lambda s: bg,
        second_background=(lambda s: second) if second is not None else None,
        contrast_curve=curve,
    )


# --- Scenarios ---------------------------------------------------------------
def test_primary_keeps_base_tone_when_contrast_suffices(catalog, light_scheme):
    assert catalog.surface_dim.get_tone(light_scheme) == 87.0
    assert contrast.ratio_of_tones(87.0, 40.0) > 4.5
    assert catalog.primary.get_tone(light_scheme) == 40.0


def test_reduced_contrast_forces_minimum_foreground_tone(catalog, make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False, contrast_level=-1.0)
    role = DynamicColor(
        "accent_on_dim",
        lambda s: s.primary_palette,
        lambda s: 40.0,
        background=lambda s: catalog.surface_dim,
        contrast_curve=ACCENT,
    )
    expected = DynamicColor.foreground_tone(87.0, ACCENT.get(-1.0))
    assert role.get_tone(scheme) == pytest.approx(expected)
    assert expected != 40.0


def test_reduced_contrast_primary_avoids_awkward_zone(catalog, make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False, contrast_level=-1.0)
    standard = make_grey_scheme(is_dark=False, contrast_level=0.0)
    # The bare-minimum tone lands in T50-59 and is pushed to T49.
    minimum = DynamicColor.foreground_tone(87.0, ACCENT.get(-1.0))
    assert 50.0 <= minimum < 60.0
    assert catalog.primary.get_tone(scheme) == 49.0
    assert catalog.primary.get_tone(standard) == 40.0


@pytest.mark.parametrize("is_dark", [False, True])
@pytest.mark.parametrize("level", [-1.0, -0.5, 0.0, 0.5, 1.0])
def test_backgroundless_role_ignores_contrast(catalog, make_grey_scheme, is_dark, level):
    scheme = make_grey_scheme(is_dark=is_dark, contrast_level=level)
    assert catalog.shadow.get_tone(scheme) == 0.0
    assert catalog.scrim.get_tone(scheme) == 0.0


def test_dual_background_keeps_answer_that_satisfies_both(make_grey_scheme):
    scheme = make_grey_scheme()
    upper = _fixed("upper", 98.0)
    lower = _fixed("lower", 90.0)
    role = _on("dual", 20.0, upper, ContrastCurve(3.0, 4.5, 7.0, 7.0), second=lower)
    assert isinstance(role.strategy, DualBackground)
    assert role.get_tone(scheme) == 20.0


def test_dual_background_prefers_light_when_either_background_is_dark(make_grey_scheme):
    scheme = make_grey_scheme()
    upper = _fixed("upper", 90.0)
    lower = _fixed("lower", 10.0)
    role = _on("dual", 50.0, upper, ContrastCurve(3.0, 4.5, 7.0, 7.0), second=lower)
    # No tone reaches 4.5 against both; T10 prefers light and lighter(90) is unreachable.
    assert contrast.lighter(90.0, 4.5) == contrast.UNREACHABLE
    assert role.get_tone(scheme) == 100.0


def test_dual_background_single_option_is_used(make_grey_scheme):
    scheme = make_grey_scheme()
    upper = _fixed("upper", 90.0)
    lower = _fixed("lower", 80.0)
    role = _on("dual", 70.0, upper, ContrastCurve(3.0, 4.5, 7.0, 7.0), second=lower)
    assert role.get_tone(scheme) == pytest.approx(contrast.darker(80.0, 4.5))


# --- Singular role rules -----------------------------------------------------
def test_background_role_snaps_down_to_49(make_grey_scheme):
    scheme = make_grey_scheme()
    white = _fixed("white", 100.0)
    role = _on("bg", 55.0, white, ContrastCurve(1.0, 1.0, 1.0, 1.0), is_background=True)
    assert role.get_tone(scheme) == 49.0


def test_background_role_snaps_up_to_60_when_49_fails(make_grey_scheme):
    scheme = make_grey_scheme()
    black = _fixed("black", 0.0)
    role = _on("bg", 55.0, black, ContrastCurve(5.0, 5.0, 5.0, 5.0), is_background=True)
    assert contrast.ratio_of_tones(49.0, 0.0) < 5.0
    assert role.get_tone(scheme) == 60.0


def test_insufficient_base_tone_is_replaced(make_grey_scheme):
    scheme = make_grey_scheme()
    bg = _fixed("bg", 90.0)
    role = _on("fg", 70.0, bg, ContrastCurve(4.5, 4.5, 4.5, 4.5))
    tone = role.get_tone(scheme)
    assert tone < 70.0
    assert contrast.ratio_of_tones(tone, 90.0) >= 4.5 - 0.05


# --- Properties over the catalog ---------------------------------------------
def test_tones_in_range_and_backgrounds_avoid_awkward_zone(
    catalog, tonal_spot_schemes, monochrome_schemes
):
    for scheme in tonal_spot_schemes + monochrome_schemes:
        for role in catalog.all_colors():
            tone = role.get_tone(scheme)
            assert 0.0 <= tone <= 100.0, (role.name, scheme)
            if role.is_background:
                assert not 50.0 <= tone < 60.0, (role.name, tone, scheme)


def test_container_pairs_keep_their_distance(catalog, tonal_spot_schemes):
    for scheme in tonal_spot_schemes:
        for base, container in (
            ("primary", "primary_container"),
            ("secondary", "secondary_container"),
            ("tertiary", "tertiary_container"),
            ("error", "error_container"),
        ):
            f = catalog.role(base).get_tone(scheme)
            n = catalog.role(container).get_tone(scheme)
            assert abs(n - f) >= 10.0 - 1e-9 or f in (49.0, 60.0) or n in (49.0, 60.0)


def test_get_argb_is_idempotent_and_unsigned(catalog, light_scheme, dark_scheme):
    for scheme in (light_scheme, dark_scheme):
        for role in catalog.all_colors():
            first = role.get_argb(scheme)
            assert first == role.get_argb(scheme)
            assert 0 <= first < 2**32


def test_opacity_is_spliced_into_alpha(catalog, make_grey_scheme):
    light = make_grey_scheme(is_dark=False)
    dark = make_grey_scheme(is_dark=True)
    assert catalog.control_highlight.get_argb(light) >> 24 == round(0.12 * 255)
    assert catalog.control_highlight.get_argb(dark) >> 24 == round(0.20 * 255)
    assert catalog.on_surface.get_argb(light) >> 24 == 0xFF


def test_from_argb_ignores_scheme(make_grey_scheme):
    role = DynamicColor.from_argb("fixed", 0xFF000000)
    assert role.get_tone(make_grey_scheme()) == pytest.approx(0.0, abs=0.01)
    assert role.get_argb(make_grey_scheme(is_dark=True)) == 0xFF000000


# --- Foreground helpers -------------------------------------------------------
def test_foreground_tone_direction():
    on_dark = DynamicColor.foreground_tone(20.0, 4.5)
    on_light = DynamicColor.foreground_tone(90.0, 4.5)
    assert on_dark > 20.0
    assert on_light < 90.0
    assert contrast.ratio_of_tones(on_dark, 20.0) >= 4.5 - 0.05


def test_light_foreground_predicates():
    assert DynamicColor.tone_prefers_light_foreground(59.4)
    assert not DynamicColor.tone_prefers_light_foreground(59.6)
    assert DynamicColor.tone_allows_light_foreground(49.4)
    assert not DynamicColor.tone_allows_light_foreground(49.6)
    assert DynamicColor.enable_light_foreground(55.0) == 49.0
    assert DynamicColor.enable_light_foreground(40.0) == 40.0
    assert DynamicColor.enable_light_foreground(70.0) == 70.0


# --- Cache ------------------------------------------------------------------
def test_cache_clears_on_fifth_insert(make_grey_scheme):
    cache = _SchemeCache(4)
    schemes = [make_grey_scheme() for _ in range(5)]
    for s in schemes[:4]:
        cache.put(s, object())
    assert len(cache) == 4
    cache.put(schemes[4], object())
    assert len(cache) == 1
    assert cache.get(schemes[0]) is None
    assert cache.get(schemes[4]) is not None


def test_role_cache_is_per_scheme_instance(catalog, make_grey_scheme):
    role = DynamicColor("cached", lambda s: s.neutral_palette, lambda s: 30.0)
    schemes = [make_grey_scheme() for _ in range(5)]
    first = role.get_hct(schemes[0])
    assert role.get_hct(schemes[0]) is first
    for s in schemes[1:]:
        role.get_hct(s)
    assert len(role._hct_cache) == 1


# --- Construction validation -------------------------------------------------
def _bg(s):
    return None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"tone_delta_pair": lambda s: None},
        {"second_background": _bg},
        {"contrast_curve": ACCENT},
        {"background": _bg},
        {
            "background": _bg,
            "second_background": _bg,
            "contrast_curve": ACCENT,
            "tone_delta_pair": lambda s: None,
        },
    ],
)
def test_inconsistent_definitions_rejected(kwargs):
    with pytest.raises(RoleDefinitionError):
        DynamicColor("broken", lambda s: s.neutral_palette, lambda s: 50.0, **kwargs)


def test_cycle_error_is_a_definition_error():
    assert issubclass(RoleGraphCycleError, RoleDefinitionError)
    assert issubclass(RoleDefinitionError, RuntimeError)


def test_catalog_strategies(catalog):
    assert isinstance(catalog.shadow.strategy, SelfOnly)
    assert isinstance(catalog.on_surface.strategy, SingleBackground)
    assert isinstance(catalog.on_primary_fixed.strategy, DualBackground)
    assert isinstance(catalog.primary.strategy, DeltaPaired)


def test_pair_resolves_nearer_and_farther_by_name(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False)
    surface = _fixed("surface", 98.0)
    holder = {}
    pair = lambda s: ToneDeltaPair(  # noqa: E731
        holder["near"], holder["far"], 20.0, TonePolarity.NEARER, False
    )
    for name, tone in (("near", 90.0), ("far", 85.0)):
        holder[name] = DynamicColor(
            name,
            lambda s: s.neutral_palette,
            lambda s, t=tone: t,
            True,
            background=lambda s: surface,
            contrast_curve=ContrastCurve(1.0, 1.0, 1.0, 1.0),
            tone_delta_pair=pair,
        )
    # Light mode expands farther downward: 90 - 20 = 70.
    assert holder["near"].get_tone(scheme) == 90.0
    assert holder["far"].get_tone(scheme) == 70.0


def _pair_roles(surface_tone, near_tone, far_tone, delta=10.0, stay_together=False):
    surface = _fixed("surface", surface_tone)
    holder = {}
    pair = lambda s: ToneDeltaPair(  # noqa: E731
        holder["near"], holder["far"], delta, TonePolarity.NEARER, stay_together
    )
    for name, tone in (("near", near_tone), ("far", far_tone)):
        holder[name] = DynamicColor(
            name,
            lambda s: s.neutral_palette,
            lambda s, t=tone: t,
            True,
            background=lambda s: surface,
            contrast_curve=ContrastCurve(1.0, 1.0, 1.0, 1.0),
            tone_delta_pair=pair,
        )
    return holder["near"], holder["far"]


def test_pair_pulls_nearer_in_when_farther_hits_the_limit(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False)
    near, far = _pair_roles(98.0, 5.0, 5.0)
    # Farther clamps at 0, so nearer is pulled up to keep the delta.
    assert near.get_tone(scheme) == 10.0
    assert far.get_tone(scheme) == 0.0
    assert isinstance(far.get_tone(scheme), float)


def test_pair_stay_together_moves_both_out_of_zone(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False)
    near, far = _pair_roles(98.0, 65.0, 55.0, stay_together=True)
    assert near.get_tone(scheme) == 49.0
    assert far.get_tone(scheme) == 39.0


def test_pair_farther_alone_snaps_when_not_staying_together(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False)
    near, far = _pair_roles(98.0, 65.0, 55.0)
    assert near.get_tone(scheme) == 65.0
    assert far.get_tone(scheme) == 49.0


def test_pair_nearer_in_zone_light_mode_drops_to_49(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=False)
    near, far = _pair_roles(98.0, 55.0, 40.0)
    n_tone = near.get_tone(scheme)
    assert n_tone == 49.0
    assert isinstance(n_tone, float)
    assert far.get_tone(scheme) == 39.0


def test_pair_nearer_in_zone_dark_mode_rises_to_60(make_grey_scheme):
    scheme = make_grey_scheme(is_dark=True)
    near, far = _pair_roles(6.0, 52.0, 70.0)
    n_tone = near.get_tone(scheme)
    assert n_tone == 60.0
    assert isinstance(n_tone, float)
    assert far.get_tone(scheme) == 70.0


@pytest.mark.parametrize("under,ratio,expected", [(100.0, 1.0, 49.0), (0.0, 5.0, 60.0)])
def test_background_snap_returns_float(make_grey_scheme, under, ratio, expected):
    scheme = make_grey_scheme()
    curve = ContrastCurve(ratio, ratio, ratio, ratio)
    role = _on("bg", 55.0, _fixed("under", under), curve, is_background=True)
    tone = role.get_tone(scheme)
    assert tone == expected
    assert isinstance(tone, float)


def test_foreground_tone_light_side_falls_back_to_darker():
    # On T50 white only reaches ~4.48:1 while black reaches 4.5:1.
    assert DynamicColor.tone_prefers_light_foreground(50.0)
    tone = DynamicColor.foreground_tone(50.0, 4.5)
    assert tone < 50.0
    assert contrast.ratio_of_tones(tone, 50.0) >= 4.5 - 0.05


def test_foreground_tone_negligible_difference_stays_light():
    # Around T49.6 white and black give almost the same ratio; neither reaches 21.
    lighter = contrast.ratio_of_tones(100.0, 49.6)
    darker = contrast.ratio_of_tones(0.0, 49.6)
    assert lighter < darker < lighter + 0.1
    assert DynamicColor.foreground_tone(49.6, 21.0) == 100.0


def test_foreground_tone_unreachable_on_light_background_goes_dark():
    assert DynamicColor.foreground_tone(60.0, 21.0) == 0.0
    assert DynamicColor.foreground_tone(80.0, 4.5) < 80.0


# --- Fidelity containers -------------------------------------------------------
def test_find_desired_chroma_keeps_tone_when_chroma_is_reachable():
    assert find_desired_chroma_by_tone(250.0, 0.0, 50.0, True) == 50.0
    assert abs(find_desired_chroma_by_tone(250.0, 10.0, 50.0, True) - 50.0) <= 1.0


@pytest.mark.parametrize(
    "hue,chroma,tone,decreasing",
    [(27.0, 80.0, 90.0, True), (100.0, 70.0, 30.0, False)],
)
def test_find_desired_chroma_walks_tone_toward_more_chroma(hue, chroma, tone, decreasing):
    answer = find_desired_chroma_by_tone(hue, chroma, tone, decreasing)
    if decreasing:
        assert answer < tone
    else:
        assert answer > tone
    assert Hct.from_hct(hue, chroma, answer).chroma > Hct.from_hct(hue, chroma, tone).chroma


@pytest.mark.parametrize("is_dark", [False, True])
def test_fidelity_secondary_container_follows_chroma(catalog, is_dark):
    scheme = SchemeFidelity(Hct.from_int(0xFFFF0000), is_dark, 0.0)
    initial = 30.0 if is_dark else 90.0
    expected = find_desired_chroma_by_tone(
        scheme.secondary_palette.hue, scheme.secondary_palette.chroma, initial, not is_dark
    )
    assert catalog.secondary_container.tone(scheme) == expected
    if not is_dark:
        assert expected < initial
    assert 0.0 <= catalog.secondary_container.get_tone(scheme) <= 100.0
