# viewing_conditions.py – CAM16 adaptation state for a given surround

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from .color_utils import WHITE_POINT_D65, CieXyz, y_from_lstar
from .math_utils import lerp, matrix, matrix_multiply

XYZ_TO_CAM16RGB = matrix(
    [
        [0.401288, 0.650173, -0.051461],
        [-0.250268, 1.204414, 0.045854],
        [-0.002079, 0.048952, 0.953127],
    ]
)
CAM16RGB_TO_XYZ = matrix(
    [
        [1.8620678, -1.0112547, 0.14918678],
        [0.38752654, 0.62144744, -0.00897398],
        [-0.01584150, -0.03412294, 1.0499644],
    ]
)


@dataclass(frozen=True)
class ViewingConditions:
    """
    Precomputed CAM16 constants.

    Build instances with `ViewingConditions.create`; `DEFAULT` is the
    sRGB-on-mid-gray condition every HCT computation uses.
    """

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    DEFAULT: ClassVar[ViewingConditions]

    @classmethod
    def create(
        cls,
        white_point: CieXyz | tuple[float, float, float] = WHITE_POINT_D65,
        adapting_luminance: float = -1.0,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> ViewingConditions:
        """
        adapting_luminance: cd/m² of the adapting field; negative means
            "derive from a mid-gray background" (≈11.72 for L* 50).
        surround: 0 (dark) … 2 (average).
        """
        if adapting_luminance < 0.0:
            adapting_luminance = (200.0 / math.pi) * y_from_lstar(50.0) / 100.0
        background_lstar = max(0.1, background_lstar)

        r_w, g_w, b_w = matrix_multiply(white_point, XYZ_TO_CAM16RGB)

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = 1.0 if d > 1.0 else 0.0 if d < 0.0 else d
        nc = f

        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k**4
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (1.0 / 3.0)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n**0.2
        ncb = nbb

        af = [
            (fl * d_i * w_i / 100.0) ** 0.42
            for d_i, w_i in zip(rgb_d, (r_w, g_w, b_w))
        ]
        r_a, g_a, b_a = (400.0 * x / (x + 27.13) for x in af)
        aw = (2.0 * r_a + g_a + 0.05 * b_a) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=fl**0.25,
            z=z,
        )

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> ViewingConditions:
        return cls.create(background_lstar=lstar)


ViewingConditions.DEFAULT = ViewingConditions.create()


__all__ = ["CAM16RGB_TO_XYZ", "ViewingConditions", "XYZ_TO_CAM16RGB"]
