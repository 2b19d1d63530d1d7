import pytest

from hct_theme import contrast
from hct_theme.dynamic_color import (
    ContrastCurve,
    DynamicColor,
    enable_light_foreground,
    foreground_tone,
    tone_allows_light_foreground,
    tone_prefers_light_foreground,
)


def palette(scheme):
    return scheme.primary_palette


def test_contrast_curve_interpolates():
    curve = ContrastCurve(1.0, 3.0, 4.5, 7.0)
    assert curve.get(-2.0) == 1.0
    assert curve.get(-1.0) == 1.0
    assert curve.get(-0.5) == pytest.approx(2.0)
    assert curve.get(0.0) == 3.0
    assert curve.get(0.25) == pytest.approx(3.75)
    assert curve.get(0.5) == 4.5
    assert curve.get(0.75) == pytest.approx(5.75)
    assert curve.get(1.0) == 7.0
    assert curve.get(3.0) == 7.0


def test_light_foreground_thresholds():
    assert tone_prefers_light_foreground(59.4)
    assert not tone_prefers_light_foreground(59.5)
    assert tone_allows_light_foreground(49.4)
    assert not tone_allows_light_foreground(49.5)
    assert enable_light_foreground(55.0) == 49.0
    assert enable_light_foreground(70.0) == 70.0
    assert enable_light_foreground(30.0) == 30.0


@pytest.mark.parametrize("bg", [0.0, 10.0, 30.0, 50.0, 70.0, 90.0, 100.0])
def test_foreground_tone_meets_ratio_when_possible(bg):
    tone = foreground_tone(bg, 4.5)
    assert contrast.ratio_of_tones(bg, tone) >= 4.5 - 0.05


def test_foreground_tone_prefers_light_on_dark_backgrounds():
    assert foreground_tone(20.0, 4.5) > 20.0
    assert foreground_tone(80.0, 4.5) < 80.0


def test_definition_errors():
    bg = DynamicColor("bg", palette, lambda s: 50.0)
    with pytest.raises(ValueError, match="second_background"):
        DynamicColor("x", palette, lambda s: 50.0, second_background=lambda s: bg)
    with pytest.raises(ValueError, match="contrast_curve"):
        DynamicColor("x", palette, lambda s: 50.0, contrast_curve=ContrastCurve(1, 1, 1, 1))
    with pytest.raises(ValueError, match="background"):
        DynamicColor("x", palette, lambda s: 50.0, background=lambda s: bg)


def test_default_tone_without_background_is_fifty():
    color = DynamicColor("plain", palette)
    assert color.tone(None) == 50.0


def test_roles_are_hashable_by_identity():
    a = DynamicColor.from_palette("a", palette, lambda s: 40.0)
    b = DynamicColor.from_palette("a", palette, lambda s: 40.0)
    assert a != b
    assert len({a, b}) == 2
