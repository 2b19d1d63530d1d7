import dataclasses

import pytest

from hct_theme.cam16 import Cam16
from hct_theme.viewing_conditions import ViewingConditions


def test_blue_correlates():
    cam = Cam16.from_argb(0xFF0000FF)
    assert cam.j == pytest.approx(25.4656, abs=0.1)
    assert cam.chroma == pytest.approx(87.2307, abs=0.1)
    assert cam.hue == pytest.approx(282.7882, abs=0.1)
    assert cam.q == pytest.approx(78.4814, abs=0.1)
    assert cam.m == pytest.approx(68.8671, abs=0.1)
    assert cam.s == pytest.approx(93.6748, abs=0.1)
    assert cam.jstar == pytest.approx(36.7420, abs=0.1)
    assert cam.astar == pytest.approx(9.1643, abs=0.1)
    assert cam.bstar == pytest.approx(-40.3753, abs=0.1)


def test_black_has_zero_correlates():
    cam = Cam16.from_argb(0xFF000000)
    for f in dataclasses.fields(cam):
        assert getattr(cam, f.name) == pytest.approx(0.0, abs=1e-9), f.name


def test_red_hue_and_chroma():
    cam = Cam16.from_argb(0xFFFF0000)
    assert cam.hue == pytest.approx(27.41, abs=0.1)
    assert cam.chroma == pytest.approx(113.36, abs=0.1)


def test_gray_has_no_chroma():
    cam = Cam16.from_argb(0xFF777777)
    assert cam.chroma == pytest.approx(0.0, abs=3.0)


@pytest.mark.parametrize("argb", [0xFF0000FF, 0xFFFF0000, 0xFF00FF00, 0xFF63A002, 0xFF808080])
def test_to_argb_inverts_from_argb(argb):
    assert Cam16.from_argb(argb).to_argb() == argb


def test_jch_and_ucs_constructors_agree():
    cam = Cam16.from_argb(0xFF63A002)
    from_jch = Cam16.from_jch(cam.j, cam.chroma, cam.hue)
    from_ucs = Cam16.from_ucs(cam.jstar, cam.astar, cam.bstar)
    assert from_jch.to_argb() == 0xFF63A002
    assert from_ucs.to_argb() == 0xFF63A002
    assert from_ucs.j == pytest.approx(cam.j, abs=1e-6)


def test_distance():
    red = Cam16.from_argb(0xFFFF0000)
    blue = Cam16.from_argb(0xFF0000FF)
    assert red.distance(red) == 0.0
    assert red.distance(blue) == pytest.approx(blue.distance(red))
    assert red.distance(blue) > 10.0


def test_viewed_under_other_conditions_differs():
    cam = Cam16.from_argb(0xFF63A002)
    dark_surround = ViewingConditions.default_with_background_lstar(10.0)
    assert cam.viewed_argb(ViewingConditions.DEFAULT) == 0xFF63A002
    assert cam.viewed_argb(dark_surround) != 0xFF63A002
