# palettes.py – key color search and tonal palettes

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .color_utils import Argb, StandardRgb
from .hct import Chroma, Hct, Hue, Tone

log = logging.getLogger(__name__)

# the 13 tone stops of a Material tonal palette
TONES: tuple[int, ...] = (0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 95, 99, 100)

_MAX_CHROMA_VALUE = 200.0
_PIVOT_TONE = 50
_EPSILON = 0.01


class KeyColor:
    """
    Finds the tone, nearest 50, at which `hue` still reaches the requested chroma.

    Max chroma per tone is memoized on the instance.
    """

    def __init__(self, hue: Hue, requested_chroma: Chroma) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: dict[int, Chroma] = {}

    def max_chroma(self, tone: int) -> Chroma:
        cached = self._chroma_cache.get(tone)
        if cached is not None:
            return cached
        chroma = Hct.create(self.hue, _MAX_CHROMA_VALUE, tone).chroma
        self._chroma_cache[tone] = chroma
        return chroma

    def create(self) -> Hct:
        # binary search over integer tones, biased toward the pivot tone
        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self.max_chroma(mid_tone) < self.max_chroma(mid_tone + 1)
            sufficient_chroma = (
                self.max_chroma(mid_tone) >= self.requested_chroma - _EPSILON
            )

            if sufficient_chroma:
                if abs(lower_tone - _PIVOT_TONE) < abs(upper_tone - _PIVOT_TONE):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.create(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            else:
                if is_ascending:
                    lower_tone = mid_tone + 1
                else:
                    upper_tone = mid_tone

        log.debug(
            "key color for hue=%.2f chroma=%.2f settled at tone %d",
            self.hue,
            self.requested_chroma,
            lower_tone,
        )
        return Hct.create(self.hue, self.requested_chroma, lower_tone)


@dataclass(eq=False)
class TonalPalette:
    """
    One hue/chroma pair realized at any tone.

    `tone(t)` memoizes the ARGB per tone, so repeated lookups are identical.
    """

    hue: Hue
    chroma: Chroma
    key_color: Hct
    _cache: dict[Tone, Argb] = field(default_factory=dict, repr=False)

    # ---- construction ----

    @classmethod
    def from_argb(cls, argb: Argb | StandardRgb) -> TonalPalette:
        """Palette seeded from a color; hue and chroma come from its key color."""
        seed = Hct.from_argb(argb)
        key = KeyColor(seed.hue, seed.chroma).create()
        return cls(key.hue, key.chroma, key)

    @classmethod
    def from_hct(cls, hct: Hct) -> TonalPalette:
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: Hue, chroma: Chroma) -> TonalPalette:
        return cls(hue, chroma, KeyColor(hue, chroma).create())

    # ---- lookup ----

    def tone(self, tone: Tone) -> Argb:
        argb = self._cache.get(tone)
        if argb is None:
            argb = Hct.create(self.hue, self.chroma, tone).argb
            self._cache[tone] = argb
        return argb

    def get_hct(self, tone: Tone) -> Hct:
        return Hct.from_argb(self.tone(tone))

    def tones(self, stops: tuple[int, ...] = TONES) -> dict[int, Argb]:
        return {t: self.tone(t) for t in stops}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TonalPalette):
            return NotImplemented
        return self.hue == other.hue and self.chroma == other.chroma

    def __hash__(self) -> int:
        return hash((self.hue, self.chroma))


__all__ = ["KeyColor", "TONES", "TonalPalette"]
