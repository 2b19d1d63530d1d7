# contrast.py – WCAG contrast ratios expressed in tone (L*) space

from __future__ import annotations

from .color_utils import lstar_from_y, y_from_lstar
from .math_utils import clamp

# actual ratios may fall short of the requested one by this much
_CONTRAST_RATIO_EPSILON = 0.04
# solved tones are nudged outward so rounding to sRGB keeps the ratio
_LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter = max(y1, y2)
    darker = y1 if lighter == y2 else y2
    return (lighter + 5.0) / (darker + 5.0)


def ratio_of_tones(t1: float, t2: float) -> float:
    return ratio_of_ys(y_from_lstar(clamp(0.0, 100.0, t1)), y_from_lstar(clamp(0.0, 100.0, t2)))


def lighter(tone: float, ratio: float) -> float:
    """Tone ≥ `tone` with at least `ratio` contrast, or -1 if none exists."""
    if tone < 0.0 or tone > 100.0:
        return -1.0
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    if light_y < 0.0 or light_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return -1.0
    value = lstar_from_y(light_y) + _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0.0 or value > 100.0:
        return -1.0
    return value


def darker(tone: float, ratio: float) -> float:
    """Tone ≤ `tone` with at least `ratio` contrast, or -1 if none exists."""
    if tone < 0.0 or tone > 100.0:
        return -1.0
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    if dark_y < 0.0 or dark_y > 100.0:
        return -1.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return -1.0
    value = lstar_from_y(dark_y) - _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0.0 or value > 100.0:
        return -1.0
    return value


def lighter_unsafe(tone: float, ratio: float) -> float:
    """Like `lighter`, but falls back to white."""
    lighter_safe = lighter(tone, ratio)
    return 100.0 if lighter_safe < 0.0 else lighter_safe


def darker_unsafe(tone: float, ratio: float) -> float:
    """Like `darker`, but falls back to black."""
    darker_safe = darker(tone, ratio)
    return 0.0 if darker_safe < 0.0 else darker_safe


__all__ = [
    "darker",
    "darker_unsafe",
    "lighter",
    "lighter_unsafe",
    "ratio_of_tones",
    "ratio_of_ys",
]
