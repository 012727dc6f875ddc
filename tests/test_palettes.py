import pytest

from tonekit.hct import Hct
from tonekit.palettes import CorePalette, TonalPalette


def test_tone_extremes_are_black_and_white():
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert palette.tone(0) == 0xFF000000
    assert palette.tone(100) == 0xFFFFFFFF


def test_tones_keep_hue_and_requested_tone():
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    for t in (20, 40, 60, 80):
        hct = Hct.from_int(palette.tone(t))
        assert hct.tone == pytest.approx(t, abs=0.5)
        assert hct.hue == pytest.approx(270.0, abs=2.0)


def test_tone_lookup_is_cached():
    palette = TonalPalette.from_hue_and_chroma(120.0, 20.0)
    first = palette.tone(42)
    assert palette._cache[42] == first
    assert palette.tone(42) == first


def test_key_color_matches_requested_chroma():
    palette = TonalPalette.from_hue_and_chroma(270.0, 16.0)
    assert round(palette.key_color.chroma) == 16
    # Search starts at T50 and moves outward one step at a time.
    assert abs(palette.key_color.tone - 50.0) < 50.0


def test_key_color_for_unreachable_chroma_is_closest():
    palette = TonalPalette.from_hue_and_chroma(149.0, 200.0)
    assert palette.key_color.chroma < 200.0
    assert palette.key_color.chroma > 50.0


def test_from_int_keeps_source_as_key_color():
    palette = TonalPalette.from_int(0xFF6750A4)
    assert palette.key_color.to_int() == 0xFF6750A4
    assert "TonalPalette(" in repr(palette)


def test_core_palette_chromas():
    seed = Hct.from_int(0xFF6750A4)
    core = CorePalette.of(0xFF6750A4)
    assert core.a1.chroma == pytest.approx(max(48.0, seed.chroma))
    assert core.a2.chroma == 16.0
    assert core.a3.chroma == 24.0
    assert core.a3.hue == pytest.approx(seed.hue + 60.0)
    assert (core.n1.chroma, core.n2.chroma) == (4.0, 8.0)
    assert (core.error.hue, core.error.chroma) == (25.0, 84.0)


def test_content_core_palette_follows_seed_chroma():
    seed = Hct.from_int(0xFF6750A4)
    core = CorePalette.content_of(0xFF6750A4)
    assert core.a1.chroma == pytest.approx(seed.chroma)
    assert core.a2.chroma == pytest.approx(seed.chroma / 3.0)
    assert core.n1.chroma == pytest.approx(min(seed.chroma / 12.0, 4.0))
