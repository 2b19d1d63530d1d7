# cam16.py – CAM16 color appearance model and its CAM16-UCS coordinates

from __future__ import annotations

import math
from dataclasses import dataclass

from .color_utils import Argb, CieXyz, argb_from_xyz, xyz_from_argb
from .math_utils import matrix_multiply, signum
from .viewing_conditions import CAM16RGB_TO_XYZ, XYZ_TO_CAM16RGB, ViewingConditions

# UCS constants (Li et al. 2017)
_UCS_C1 = 0.007
_UCS_C2 = 0.0228
_UCS_J_SCALE = 1.7


def _adapted_response(component: float, fl: float) -> float:
    af = (fl * abs(component) / 100.0) ** 0.42
    return signum(component) * 400.0 * af / (af + 27.13)


def _unadapted_component(adapted: float, fl: float) -> float:
    base = max(0.0, 27.13 * abs(adapted) / (400.0 - abs(adapted)))
    return signum(adapted) * (100.0 / fl) * base ** (1.0 / 0.42)


@dataclass(frozen=True)
class Cam16:
    """
    Appearance correlates of one color under one set of viewing conditions.

    hue      h, degrees in [0, 360)
    chroma   C
    j        lightness
    q        brightness
    m        colorfulness
    s        saturation
    jstar, astar, bstar – CAM16-UCS coordinates, for color distance
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    # ---- construction ----

    @classmethod
    def from_argb(cls, argb: Argb) -> Cam16:
        return cls.from_argb_in_viewing_conditions(argb, ViewingConditions.DEFAULT)

    @classmethod
    def from_argb_in_viewing_conditions(
        cls, argb: Argb, vc: ViewingConditions
    ) -> Cam16:
        return cls.from_xyz_in_viewing_conditions(xyz_from_argb(argb), vc)

    @classmethod
    def from_xyz_in_viewing_conditions(
        cls, xyz: CieXyz | tuple[float, float, float], vc: ViewingConditions
    ) -> Cam16:
        r_t, g_t, b_t = matrix_multiply(xyz, XYZ_TO_CAM16RGB)

        r_a = _adapted_response(vc.rgb_d[0] * r_t, vc.fl)
        g_a = _adapted_response(vc.rgb_d[1] * g_t, vc.fl)
        b_a = _adapted_response(vc.rgb_d[2] * b_t, vc.fl)

        # opponent channels
        a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0

        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        hue = math.degrees(math.atan2(b, a))
        if hue < 0.0:
            hue += 360.0
        elif hue >= 360.0:
            hue -= 360.0
        hue_radians = math.radians(hue)

        ac = p2 * vc.nbb
        j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(math.radians(hue_prime) + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.hypot(a, b) / (u + 0.305)
        alpha = (1.64 - 0.29**vc.n) ** 0.73 * t**0.9

        c = alpha * math.sqrt(j / 100.0)
        m = c * vc.fl_root
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        jstar = (1.0 + 100.0 * _UCS_C1) * j / (1.0 + _UCS_C1 * j)
        mstar = math.log1p(_UCS_C2 * m) / _UCS_C2
        return cls(
            hue=hue,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_jch(
        cls, j: float, c: float, h: float, vc: ViewingConditions | None = None
    ) -> Cam16:
        vc = vc or ViewingConditions.DEFAULT
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0) if j != 0.0 else 0.0
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        hue_radians = math.radians(h)
        jstar = (1.0 + 100.0 * _UCS_C1) * j / (1.0 + _UCS_C1 * j)
        mstar = math.log1p(_UCS_C2 * m) / _UCS_C2
        return cls(
            hue=h,
            chroma=c,
            j=j,
            q=q,
            m=m,
            s=s,
            jstar=jstar,
            astar=mstar * math.cos(hue_radians),
            bstar=mstar * math.sin(hue_radians),
        )

    @classmethod
    def from_ucs(
        cls,
        jstar: float,
        astar: float,
        bstar: float,
        vc: ViewingConditions | None = None,
    ) -> Cam16:
        vc = vc or ViewingConditions.DEFAULT
        m = math.expm1(math.hypot(astar, bstar) * _UCS_C2) / _UCS_C2
        c = m / vc.fl_root
        h = math.degrees(math.atan2(bstar, astar))
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * _UCS_C1)
        return cls.from_jch(j, c, h, vc)

    # ---- inverse ----

    def viewed(self, vc: ViewingConditions | None = None) -> CieXyz:
        """XYZ of this appearance under `vc` (default viewing conditions if omitted)."""
        vc = vc or ViewingConditions.DEFAULT
        if self.chroma == 0.0 or self.j == 0.0:
            alpha = 0.0
        else:
            alpha = self.chroma / math.sqrt(self.j / 100.0)

        t = (alpha / (1.64 - 0.29**vc.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = math.radians(self.hue)

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_f = _unadapted_component(r_a, vc.fl) / vc.rgb_d[0]
        g_f = _unadapted_component(g_a, vc.fl) / vc.rgb_d[1]
        b_f = _unadapted_component(b_a, vc.fl) / vc.rgb_d[2]
        return CieXyz(*matrix_multiply((r_f, g_f, b_f), CAM16RGB_TO_XYZ))

    def to_argb(self) -> Argb:
        return argb_from_xyz(*self.viewed(ViewingConditions.DEFAULT))

    def viewed_argb(self, vc: ViewingConditions) -> Argb:
        return argb_from_xyz(*self.viewed(vc))

    # ---- metrics ----

    def distance(self, other: Cam16) -> float:
        """CAM16-UCS color difference ΔE'."""
        dj = self.jstar - other.jstar
        da = self.astar - other.astar
        db = self.bstar - other.bstar
        de_prime = math.sqrt(dj * dj + da * da + db * db)
        return 1.41 * de_prime**0.63


__all__ = ["Cam16"]
