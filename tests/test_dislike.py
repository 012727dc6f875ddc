import pytest

from tonekit.dislike import fix_if_disliked, is_disliked
from tonekit.hct import Hct


@pytest.mark.parametrize("argb", [0xFF95884B, 0xFF716B40, 0xFFB08E00, 0xFF4C4308, 0xFF464521])
def test_dark_yellow_greens_are_disliked(argb):
    assert is_disliked(Hct.from_int(argb))


@pytest.mark.parametrize("argb", [0xFF6750A4, 0xFFF6E3C8, 0xFF0000FF, 0xFFFFFFFF])
def test_other_colors_are_fine(argb):
    hct = Hct.from_int(argb)
    assert not is_disliked(hct)
    assert fix_if_disliked(hct) is hct


def test_fix_lightens_to_tone_70():
    fixed = fix_if_disliked(Hct.from_int(0xFF95884B))
    assert fixed.tone == pytest.approx(70.0, abs=1.0)
    assert not is_disliked(fixed)


def test_tone_boundary():
    hct = Hct.from_hct(100.0, 40.0, 64.0)
    assert is_disliked(hct)
    assert not is_disliked(hct.with_tone(66.0))
