import pytest

from tonekit.dynamic.contrast_curve import ContrastCurve, tone_for_contrast


@pytest.mark.parametrize(
    "values",
    [(3.0, 4.5, 7.0, 7.0), (4.5, 7.0, 11.0, 21.0), (1.0, 1.0, 3.0, 4.5), (1.5, 3.0, 4.5, 7.0)],
)
def test_endpoints_are_exact(values):
    curve = ContrastCurve(*values)
    assert curve.get(-1.0) == values[0]
    assert curve.get(0.0) == values[1]
    assert curve.get(0.5) == values[2]
    assert curve.get(1.0) == values[3]


def test_interpolates_between_anchors():
    curve = ContrastCurve(1.0, 3.0, 5.0, 7.0)
    assert curve.get(-0.5) == pytest.approx(2.0)
    assert curve.get(0.25) == pytest.approx(4.0)
    assert curve.get(0.75) == pytest.approx(6.0)


def test_levels_outside_range_clamp_to_ends():
    curve = ContrastCurve(1.0, 3.0, 5.0, 7.0)
    assert curve.get(-5.0) == 1.0
    assert curve.get(3.0) == 7.0


@pytest.mark.parametrize("bad", [(0.5, 3.0, 4.5, 7.0), (3.0, 4.5, 7.0, 22.0)])
def test_rejects_ratios_outside_wcag_range(bad):
    with pytest.raises(ValueError):
        ContrastCurve(*bad)


def test_tone_for_contrast_allows_tone_values():
    assert tone_for_contrast(0.5, 87.0, 87.0, 80.0, 75.0) == 80.0
    assert tone_for_contrast(1.0, 4.0, 4.0, 2.0, 0.0) == 0.0
    assert tone_for_contrast(0.25, 12.0, 12.0, 16.0, 20.0) == pytest.approx(14.0)
