import pytest

from tonekit.hct import Hct
from tonekit.temperature import TemperatureCache


@pytest.mark.parametrize(
    "argb,expected",
    [
        (0xFF0000FF, -1.393),
        (0xFFFF0000, 2.351),
        (0xFF00FF00, -0.267),
        (0xFFFFFFFF, -0.5),
        (0xFF000000, -0.5),
    ],
)
def test_raw_temperature(argb, expected):
    assert TemperatureCache.raw_temperature(Hct.from_int(argb)) == pytest.approx(expected, abs=0.01)


def test_relative_temperature_is_normalised():
    cache = TemperatureCache(Hct.from_int(0xFF0000FF))
    assert cache.relative_temperature(cache.input) < 0.2
    assert 0.0 <= cache.relative_temperature(cache.complement) <= 1.0


def test_complement_of_cool_color_is_warm():
    cache = TemperatureCache(Hct.from_int(0xFF0000FF))
    assert cache.relative_temperature(cache.complement) > 0.8
    assert cache.complement is cache.complement


def test_white_has_no_spread():
    cache = TemperatureCache(Hct.from_int(0xFFFFFFFF))
    assert cache.relative_temperature(cache.input) == 0.5
    assert cache.complement.to_int() == 0xFFFFFFFF


def test_analogous_colors_surround_input():
    seed = Hct.from_int(0xFF6750A4)
    colors = TemperatureCache(seed).analogous_colors()
    assert len(colors) == 5
    assert colors[2] is seed
    three = TemperatureCache(seed).analogous_colors(count=3, divisions=6)
    assert len(three) == 3
    assert three[1] is seed


@pytest.mark.parametrize("count,divisions", [(0, 12), (5, 0), (-1, 3)])
def test_analogous_colors_rejects_non_positive(count, divisions):
    with pytest.raises(ValueError):
        TemperatureCache(Hct.from_int(0xFF6750A4)).analogous_colors(count, divisions)
