import pytest

from hct_theme import contrast


def test_ratio_extremes():
    assert contrast.ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)
    assert contrast.ratio_of_tones(100.0, 0.0) == pytest.approx(21.0)
    assert contrast.ratio_of_tones(42.0, 42.0) == pytest.approx(1.0)


def test_ratio_clamps_tones():
    assert contrast.ratio_of_tones(-10.0, 110.0) == pytest.approx(21.0)


@pytest.mark.parametrize("tone, ratio", [(0.0, 4.5), (20.0, 3.0), (40.0, 4.5), (10.0, 7.0)])
def test_lighter_reaches_ratio(tone, ratio):
    result = contrast.lighter(tone, ratio)
    assert result > tone
    assert contrast.ratio_of_tones(tone, result) >= ratio - 0.04


@pytest.mark.parametrize("tone, ratio", [(100.0, 4.5), (80.0, 3.0), (60.0, 4.5), (90.0, 7.0)])
def test_darker_reaches_ratio(tone, ratio):
    result = contrast.darker(tone, ratio)
    assert 0.0 <= result < tone
    assert contrast.ratio_of_tones(tone, result) >= ratio - 0.04


def test_impossible_ratios_return_sentinel():
    assert contrast.lighter(90.0, 7.0) == -1.0
    assert contrast.darker(10.0, 7.0) == -1.0
    assert contrast.lighter(-5.0, 3.0) == -1.0
    assert contrast.darker(105.0, 3.0) == -1.0


def test_unsafe_variants_fall_back_to_extremes():
    assert contrast.lighter_unsafe(90.0, 7.0) == 100.0
    assert contrast.darker_unsafe(10.0, 7.0) == 0.0
