import pytest

from tonekit.hct import Cam16, Hct, ViewingConditions
from tonekit.utils import color_utils


@pytest.mark.parametrize(
    "argb,hue,chroma,tone",
    [
        (0xFFFF0000, 27.408, 113.357, 53.233),
        (0xFF00FF00, 142.139, 108.410, 87.737),
        (0xFF0000FF, 282.788, 87.230, 32.303),
    ],
)
def test_primaries(argb, hue, chroma, tone):
    hct = Hct.from_int(argb)
    assert hct.hue == pytest.approx(hue, abs=0.5)
    assert hct.chroma == pytest.approx(chroma, abs=0.5)
    assert hct.tone == pytest.approx(tone, abs=0.5)


def test_black_and_white():
    black = Hct.from_int(0xFF000000)
    white = Hct.from_int(0xFFFFFFFF)
    assert black.tone == pytest.approx(0.0, abs=1e-6)
    assert black.chroma == pytest.approx(0.0, abs=1e-6)
    assert white.tone == pytest.approx(100.0, abs=0.01)
    assert white.chroma < 3.0
    assert Hct.from_hct(120.0, 50.0, 0.0).to_int() == 0xFF000000
    assert Hct.from_hct(120.0, 50.0, 100.0).to_int() == 0xFFFFFFFF


@pytest.mark.parametrize("tone", [10.0, 30.0, 50.0, 70.0, 90.0])
def test_zero_chroma_gives_grey(tone):
    argb = Hct.from_hct(200.0, 0.0, tone).to_int()
    r = color_utils.red_from_argb(argb)
    assert r == color_utils.green_from_argb(argb) == color_utils.blue_from_argb(argb)
    assert color_utils.lstar_from_argb(argb) == pytest.approx(tone, abs=0.5)


@pytest.mark.parametrize("hue", [15.0, 95.0, 180.0, 250.0, 330.0])
@pytest.mark.parametrize("tone", [30.0, 50.0, 80.0])
def test_solver_keeps_hue_and_tone_for_reachable_chroma(hue, tone):
    hct = Hct.from_hct(hue, 16.0, tone)
    assert hct.tone == pytest.approx(tone, abs=0.5)
    assert hct.hue == pytest.approx(hue, abs=2.0)
    assert hct.chroma == pytest.approx(16.0, abs=2.5)


def test_unreachable_chroma_is_reduced_not_exceeded():
    hct = Hct.from_hct(280.0, 200.0, 50.0)
    assert hct.chroma < 200.0
    assert hct.tone == pytest.approx(50.0, abs=0.5)


def test_with_tone_and_equality():
    red = Hct.from_int(0xFFFF0000)
    darker = red.with_tone(30.0)
    assert darker.tone == pytest.approx(30.0, abs=0.5)
    assert darker.hue == pytest.approx(red.hue, abs=2.0)
    assert Hct.from_int(0xFFFF0000) == red
    assert hash(Hct.from_int(0xFFFF0000)) == hash(red)
    assert red != darker


def test_cam16_round_trip():
    for argb in (0xFF6750A4, 0xFF123456, 0xFFABCDEF):
        cam = Cam16.from_int(argb)
        assert cam.to_int() == argb


def test_viewing_conditions_shift_dark_room():
    hct = Hct.from_int(0xFF6750A4)
    dark_room = ViewingConditions.default_with_background_lstar(0.0)
    shifted = hct.in_viewing_conditions(dark_room)
    assert shifted.to_int() != hct.to_int()


@pytest.mark.parametrize("hue,chroma,tone", [(250.0, 40.0, 50.0), (30.0, 60.0, 40.0), (140.0, 30.0, 70.0)])
def test_lightness_search_keeps_least_hue_drift(monkeypatch, hue, chroma, tone):
    from tonekit.hct import hct_solver

    seen = []
    real_distance = Cam16.distance

    def recording_distance(self, other):
        d_e = real_distance(self, other)
        seen.append((d_e, self))
        return d_e

    monkeypatch.setattr(Cam16, "distance", recording_distance)
    found = hct_solver._find_cam_by_j(hue, chroma, tone)

    accepted = [entry for entry in seen if entry[0] <= hct_solver._DE_MAX]
    assert found is not None and accepted
    best = min(d_e for d_e, _ in accepted)
    assert found in [cam for d_e, cam in accepted if d_e == best]
