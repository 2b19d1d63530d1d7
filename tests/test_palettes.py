import pytest

from hct_theme.color_utils import lstar_from_argb
from hct_theme.hct import Hct
from hct_theme.palettes import TONES, KeyColor, TonalPalette


class RecordingKeyColor(KeyColor):
    def __init__(self, hue, requested_chroma):
        super().__init__(hue, requested_chroma)
        self.visited = []

    def max_chroma(self, tone):
        self.visited.append(tone)
        return super().max_chroma(tone)


def test_key_color_with_exact_chroma():
    key = TonalPalette.from_hue_and_chroma(50.0, 60.0).key_color
    assert abs(key.hue - 50.0) < 10.0
    assert abs(key.chroma - 60.0) < 0.5
    assert 0.0 < key.tone < 100.0


def test_key_color_with_unusually_high_chroma():
    # hue 149 peaks near chroma 89.6 around tone 88
    key = TonalPalette.from_hue_and_chroma(149.0, 200.0).key_color
    assert abs(key.hue - 149.0) < 10.0
    assert key.chroma > 89.0
    assert 0.0 < key.tone < 100.0


def test_key_color_with_low_chroma_stays_near_fifty():
    key = TonalPalette.from_hue_and_chroma(50.0, 3.0).key_color
    assert abs(key.hue - 50.0) < 10.0
    assert abs(key.chroma - 3.0) < 0.5
    assert abs(key.tone - 50.0) < 0.5


def test_key_color_search_sequence_is_reproducible():
    first = RecordingKeyColor(149.0, 200.0)
    second = RecordingKeyColor(149.0, 200.0)
    assert first.create() == second.create()
    assert first.visited == second.visited
    # binary search over 0..100 needs few distinct tones
    assert len(set(first.visited)) <= 16
    assert first.visited[:2] == [50, 51]


def test_key_color_search_sequence_for_low_chroma():
    key = RecordingKeyColor(50.0, 3.0)
    result = key.create()
    # each step reads mid, mid + 1, then mid again for the chroma check
    assert key.visited == [
        50, 51, 50,
        75, 76, 75,
        62, 63, 62,
        56, 57, 56,
        53, 54, 53,
        51, 52, 51,
        50, 51, 50,
    ]
    assert result.tone == pytest.approx(50.0, abs=0.5)
    assert sorted(key._chroma_cache) == [50, 51, 52, 53, 54, 56, 57, 62, 63, 75, 76]


def test_max_chroma_is_memoized():
    key = KeyColor(200.0, 40.0)
    assert key.max_chroma(50) == key.max_chroma(50)
    assert 50 in key._chroma_cache


def test_tones_are_deterministic():
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert palette.tone(40) == palette.tone(40)
    again = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert [palette.tone(t) for t in TONES] == [again.tone(t) for t in TONES]
    assert palette == again
    assert hash(palette) == hash(again)


def test_tone_extremes_are_black_and_white():
    palette = TonalPalette.from_argb(0xFF0000FF)
    assert palette.tone(0) == 0xFF000000
    assert palette.tone(100) == 0xFFFFFFFF


def test_tones_land_on_requested_lstar():
    palette = TonalPalette.from_argb(0xFF63A002)
    for tone, argb in palette.tones().items():
        assert lstar_from_argb(argb) == pytest.approx(tone, abs=1.0)


def test_thirteen_stops():
    assert len(TonalPalette.from_hue_and_chroma(0.0, 0.0).tones()) == 13


def test_from_hct_uses_the_color_as_key():
    hct = Hct.from_argb(0xFF63A002)
    palette = TonalPalette.from_hct(hct)
    assert palette.key_color is hct
    assert (palette.hue, palette.chroma) == (hct.hue, hct.chroma)


def test_get_hct_matches_tone():
    palette = TonalPalette.from_hue_and_chroma(120.0, 30.0)
    assert palette.get_hct(70).argb == palette.tone(70)
