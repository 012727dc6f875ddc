import pytest

from tonekit.dynamic import DynamicColor, ToneDeltaPair, TonePolarity


def _role(name):
    return DynamicColor.from_palette(name, lambda s: s.neutral_palette, lambda s: 50.0)


def test_negative_delta_rejected():
    with pytest.raises(ValueError):
        ToneDeltaPair(_role("a"), _role("b"), -1.0, TonePolarity.NEARER, False)


def test_zero_delta_allowed():
    pair = ToneDeltaPair(_role("a"), _role("b"), 0.0, TonePolarity.FARTHER, True)
    assert pair.delta == 0.0
    assert pair.stay_together is True


@pytest.mark.parametrize(
    "polarity,is_dark,expected",
    [
        (TonePolarity.NEARER, False, True),
        (TonePolarity.NEARER, True, True),
        (TonePolarity.FARTHER, False, False),
        (TonePolarity.FARTHER, True, False),
        (TonePolarity.LIGHTER, False, True),
        (TonePolarity.LIGHTER, True, False),
        (TonePolarity.DARKER, False, False),
        (TonePolarity.DARKER, True, True),
    ],
)
def test_a_is_nearer(polarity, is_dark, expected):
    pair = ToneDeltaPair(_role("a"), _role("b"), 10.0, polarity, False)
    assert pair.a_is_nearer(is_dark) is expected
