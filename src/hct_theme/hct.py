# hct.py – HCT: CAM16 hue and chroma paired with CIE L* tone

from __future__ import annotations

from dataclasses import dataclass

from .cam16 import Cam16
from .color_utils import Argb, StandardRgb, lstar_from_argb, lstar_from_y
from .hct_solver import solve_to_argb
from .viewing_conditions import ViewingConditions

Hue = float
Chroma = float
Tone = float


@dataclass(frozen=True)
class Hct:
    """
    A color in HCT, backed by the sRGB value it resolves to.

    `chroma` is what the sRGB color actually achieves, which can be less than
    the chroma passed to `create` when the request is outside the gamut.
    """

    hue: Hue
    chroma: Chroma
    tone: Tone
    argb: Argb

    @classmethod
    def create(cls, hue: Hue, chroma: Chroma, tone: Tone) -> Hct:
        return cls.from_argb(solve_to_argb(hue, chroma, tone))

    @classmethod
    def from_argb(cls, argb: Argb | StandardRgb) -> Hct:
        argb = int(argb)
        cam = Cam16.from_argb(argb)
        return cls(hue=cam.hue, chroma=cam.chroma, tone=lstar_from_argb(argb), argb=argb)

    def to_argb(self) -> Argb:
        return self.argb

    def to_standard_rgb(self) -> StandardRgb:
        return StandardRgb(self.argb)

    def with_hue(self, hue: Hue) -> Hct:
        return Hct.create(hue, self.chroma, self.tone)

    def with_chroma(self, chroma: Chroma) -> Hct:
        return Hct.create(self.hue, chroma, self.tone)

    def with_tone(self, tone: Tone) -> Hct:
        return Hct.create(self.hue, self.chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> Hct:
        """
        The color that, seen under `vc`, looks like this one does under the
        default conditions.
        """
        cam = Cam16.from_argb(self.argb)
        viewed = cam.viewed(vc)
        recast = Cam16.from_xyz_in_viewing_conditions(viewed, ViewingConditions.DEFAULT)
        return Hct.create(recast.hue, recast.chroma, lstar_from_y(viewed.y))

    def __str__(self) -> str:
        return f"HCT({self.hue:.2f}, {self.chroma:.2f}, {self.tone:.2f})"


__all__ = ["Chroma", "Hct", "Hue", "Tone"]
