# dynamic_color.py – semantic color roles resolved against a scheme

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from . import contrast
from .color_utils import Argb
from .hct import Hct
from .math_utils import lerp, round_half_up
from .palettes import TonalPalette

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme

PaletteFn = Callable[["DynamicScheme"], TonalPalette]
ToneFn = Callable[["DynamicScheme"], float]
ColorFn = Callable[["DynamicScheme"], "DynamicColor"]
PairFn = Callable[["DynamicScheme"], "ToneDeltaPair"]

# roles keep at most this many schemes' HCTs around
_HCT_CACHE_LIMIT = 4


class TonePolarity(Enum):
    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True)
class ContrastCurve:
    """Minimum contrast ratio per contrast level (-1, 0, 0.5, 1), interpolated between."""

    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, contrast_level + 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, contrast_level / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high


@dataclass(frozen=True)
class ToneDeltaPair:
    """
    Keeps two roles at least `delta` tones apart.

    polarity says which of the two sits nearer the background; with
    `stay_together` both leave the 50..59 band together.
    """

    role_a: DynamicColor
    role_b: DynamicColor
    delta: float
    polarity: TonePolarity
    stay_together: bool


# --- foreground helpers ------------------------------------------------------


def tone_prefers_light_foreground(tone: float) -> bool:
    return round_half_up(tone) < 60


def tone_allows_light_foreground(tone: float) -> bool:
    return round_half_up(tone) <= 49


def enable_light_foreground(tone: float) -> float:
    """Push tones in 50..59 down to 49 so light text works on them."""
    if tone_prefers_light_foreground(tone) and not tone_allows_light_foreground(tone):
        return 49.0
    return tone


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """Tone reaching `ratio` against `bg_tone`, lighter or darker as fits best."""
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # if both fall short by about the same amount, light still wins
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone
    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


# --- roles -------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class DynamicColor:
    """
    A named role: which palette, which tone, and what it must contrast with.

    `tone` defaults to the background's tone (or 50 with no background).
    """

    name: str
    palette: PaletteFn
    tone: Optional[ToneFn] = None
    is_background: bool = False
    background: Optional[ColorFn] = None
    second_background: Optional[ColorFn] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[PairFn] = None
    _hct_cache: dict = field(default_factory=dict, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.background is None and self.second_background is not None:
            raise ValueError(f"{self.name} has second_background defined but not background")
        if self.background is None and self.contrast_curve is not None:
            raise ValueError(f"{self.name} has contrast_curve defined but not background")
        if self.background is not None and self.contrast_curve is None:
            raise ValueError(f"{self.name} has background defined but not contrast_curve")
        if self.tone is None:
            object.__setattr__(self, "tone", _initial_tone_from_background(self.background))

    @classmethod
    def from_palette(cls, name: str, palette: PaletteFn, tone: ToneFn) -> DynamicColor:
        return cls(name=name, palette=palette, tone=tone)

    def get_tone(self, scheme: DynamicScheme) -> float:
        return scheme.spec.get_tone(scheme, self)

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        cached = self._hct_cache.get(scheme)
        if cached is not None:
            return cached
        computed = scheme.spec.get_hct(scheme, self)
        if len(self._hct_cache) > _HCT_CACHE_LIMIT:
            self._hct_cache.clear()
        self._hct_cache[scheme] = computed
        return computed

    def get_argb(self, scheme: DynamicScheme) -> Argb:
        return self.get_hct(scheme).argb


def _initial_tone_from_background(background: Optional[ColorFn]) -> ToneFn:
    if background is None:
        return lambda s: 50.0
    return lambda s: background(s).get_tone(s) if background(s) is not None else 50.0


__all__ = [
    "ContrastCurve",
    "DynamicColor",
    "ToneDeltaPair",
    "TonePolarity",
    "enable_light_foreground",
    "foreground_tone",
    "tone_allows_light_foreground",
    "tone_prefers_light_foreground",
]
