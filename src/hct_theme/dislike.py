# dislike.py – steer colors away from the drab dark yellow-green band

from __future__ import annotations

from .hct import Hct
from .math_utils import round_half_up


def is_disliked(hct: Hct) -> bool:
    hue_passes = 90 <= round_half_up(hct.hue) <= 111
    chroma_passes = round_half_up(hct.chroma) > 16
    tone_passes = round_half_up(hct.tone) < 65
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Same hue and chroma, lifted to tone 70, if `hct` is disliked."""
    if is_disliked(hct):
        return Hct.create(hct.hue, hct.chroma, 70.0)
    return hct


__all__ = ["fix_if_disliked", "is_disliked"]
