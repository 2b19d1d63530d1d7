import pytest

from hct_theme.hct import Hct
from hct_theme.temperature import TemperatureCache, is_between, raw_temperature


@pytest.mark.parametrize(
    "argb, expected",
    [
        (0xFF0000FF, -1.393),
        (0xFFFF0000, 2.351),
        (0xFF00FF00, -0.267),
        (0xFFFFFFFF, -0.5),
        (0xFF000000, -0.5),
    ],
)
def test_raw_temperature(argb, expected):
    assert raw_temperature(Hct.from_argb(argb)) == pytest.approx(expected, abs=0.01)


@pytest.mark.parametrize(
    "argb, expected",
    [(0xFF0000FF, 0.0), (0xFFFF0000, 1.0), (0xFF00FF00, 0.467), (0xFFFFFFFF, 0.5)],
)
def test_relative_temperature_of_input(argb, expected):
    cache = TemperatureCache(Hct.from_argb(argb))
    assert cache.relative_temperature(cache.input) == pytest.approx(expected, abs=0.01)


def test_is_between_wraps():
    assert is_between(10.0, 350.0, 20.0)
    assert not is_between(180.0, 350.0, 20.0)
    assert is_between(90.0, 0.0, 180.0)


def test_coldest_and_warmest_bracket_everything():
    cache = TemperatureCache(Hct.from_argb(0xFF63A002))
    temps = cache.temps_by_hct
    assert temps[cache.coldest] == min(temps.values())
    assert temps[cache.warmest] == max(temps.values())
    assert len(cache.hcts_by_hue) == 361


def test_complement_sits_on_the_other_side():
    cache = TemperatureCache(Hct.from_argb(0xFF0000FF))
    complement = cache.complement
    assert cache.relative_temperature(complement) > 0.8
    assert cache.complement is complement


def test_complement_of_white_is_white():
    white = Hct.from_argb(0xFFFFFFFF)
    assert TemperatureCache(white).complement.argb == 0xFFFFFFFF


@pytest.mark.parametrize("count", [3, 5, 6])
def test_analogous_colors_center_on_input(count):
    source = Hct.from_argb(0xFF0000FF)
    colors = TemperatureCache(source).analogous_colors(count, 12)
    assert len(colors) == count
    assert colors[(count - 1) // 2] == source


def test_analogous_colors_keep_chroma_request_and_tone():
    source = Hct.from_argb(0xFF63A002)
    for hct in TemperatureCache(source).analogous_colors():
        assert hct.tone == pytest.approx(source.tone, abs=1.0)
