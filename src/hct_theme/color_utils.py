# color_utils.py – sRGB / linear RGB / CIE XYZ / L*a*b* primitives (D65)
#   - packed 32-bit ARGB is the currency type for every public color
#   - linear RGB channels live on a 0..100 scale, XYZ white has Y = 100
#   - byte encoding rounds half up, then clamps to [0, 255]

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import NamedTuple

from .math_utils import clamp_int, invert, matrix, matrix_multiply, round_half_up

Argb = int
Hex = str


class CieXyz(NamedTuple):
    x: float
    y: float
    z: float


class LinearRgb(NamedTuple):
    r: float
    g: float
    b: float


class Lab(NamedTuple):
    l: float
    a: float
    b: float


# --- constants ---------------------------------------------------------------
WHITE_POINT_D65 = CieXyz(95.047, 100.0, 108.883)

SRGB_TO_XYZ = matrix(
    [
        [0.41233895, 0.35762064, 0.18051042],
        [0.2126, 0.7152, 0.0722],
        [0.01932141, 0.11916382, 0.95034478],
    ]
)
XYZ_TO_SRGB = invert(SRGB_TO_XYZ)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


# --- gamma -------------------------------------------------------------------


def linearized(component: float) -> float:
    """sRGB byte → linear channel on a 0..100 scale."""
    normalized = component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def true_delinearized(rgb_component: float) -> float:
    """Linear channel (0..100) → unrounded sRGB value on a 0..255 scale."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized = normalized * 12.92
    else:
        delinearized = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    return delinearized * 255.0


def delinearized(rgb_component: float) -> int:
    return clamp_int(0, 255, round_half_up(true_delinearized(rgb_component)))


# --- packed ARGB -------------------------------------------------------------


def argb_from_rgb(red: int, green: int, blue: int) -> Argb:
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def alpha_from_argb(argb: Argb) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: Argb) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: Argb) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: Argb) -> int:
    return argb & 255


def is_opaque(argb: Argb) -> bool:
    return alpha_from_argb(argb) >= 255


def argb_from_linrgb(linrgb: LinearRgb | tuple[float, float, float]) -> Argb:
    r, g, b = linrgb
    return argb_from_rgb(delinearized(r), delinearized(g), delinearized(b))


def linrgb_from_argb(argb: Argb) -> LinearRgb:
    return LinearRgb(
        linearized(red_from_argb(argb)),
        linearized(green_from_argb(argb)),
        linearized(blue_from_argb(argb)),
    )


def xyz_from_argb(argb: Argb) -> CieXyz:
    return CieXyz(*matrix_multiply(linrgb_from_argb(argb), SRGB_TO_XYZ))


def argb_from_xyz(x: float, y: float, z: float) -> Argb:
    return argb_from_linrgb(matrix_multiply((x, y, z), XYZ_TO_SRGB))


# --- L*a*b* ------------------------------------------------------------------


def lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_EPSILON:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


def y_from_lstar(lstar: float) -> float:
    return 100.0 * lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    return lab_f(y / 100.0) * 116.0 - 16.0


def lstar_from_argb(argb: Argb) -> float:
    y = xyz_from_argb(argb).y
    return 116.0 * lab_f(y / 100.0) - 16.0


def argb_from_lstar(lstar: float) -> Argb:
    """Gray with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lab_from_argb(argb: Argb) -> Lab:
    x, y, z = xyz_from_argb(argb)
    fx = lab_f(x / WHITE_POINT_D65.x)
    fy = lab_f(y / WHITE_POINT_D65.y)
    fz = lab_f(z / WHITE_POINT_D65.z)
    return Lab(116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lab(l: float, a: float, b: float) -> Argb:
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    return argb_from_xyz(
        lab_invf(fx) * WHITE_POINT_D65.x,
        lab_invf(fy) * WHITE_POINT_D65.y,
        lab_invf(fz) * WHITE_POINT_D65.z,
    )


# --- hex ---------------------------------------------------------------------


def _hex_digits(text: str) -> str:
    if text is None or not str(text).strip():
        raise ValueError("empty color")
    raw = str(text).strip()
    digits = raw[1:] if raw.startswith("#") else raw
    if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"invalid hex color: {raw!r} (expected RRGGBB or RRGGBBAA)")
    return digits


def argb_from_rgba_hex(text: str) -> Argb:
    """'#RRGGBBAA' (or '#RRGGBB', opaque) → packed ARGB."""
    digits = _hex_digits(text)
    rgb = int(digits[:6], 16)
    alpha = int(digits[6:], 16) if len(digits) == 8 else 255
    return (alpha << 24) | rgb


def argb_from_rgb_hex(text: str) -> Argb:
    """'#RRGGBB' → opaque packed ARGB; alpha digits are rejected."""
    digits = _hex_digits(text)
    if len(digits) != 6:
        raise ValueError(f"invalid hex color: {text!r} (expected RRGGBB)")
    return 0xFF000000 | int(digits, 16)


def hex_from_argb(argb: Argb) -> Hex:
    return f"#{red_from_argb(argb):02X}{green_from_argb(argb):02X}{blue_from_argb(argb):02X}"


def rgba_hex_from_argb(argb: Argb) -> Hex:
    return hex_from_argb(argb) + f"{alpha_from_argb(argb):02X}"


@dataclass(frozen=True)
class StandardRgb:
    """A display color packed as 0xAARRGGBB."""

    value: Argb

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB value out of range: {self.value:#x}")

    @classmethod
    def from_components(
        cls, red: int, green: int, blue: int, alpha: int = 255
    ) -> StandardRgb:
        for name, channel in (("red", red), ("green", green), ("blue", blue), ("alpha", alpha)):
            if not 0 <= channel <= 255:
                raise ValueError(f"{name} channel must be in 0..255, got {channel}")
        return cls((alpha << 24) | (red << 16) | (green << 8) | blue)

    @classmethod
    def from_rgba_hex(cls, text: str) -> StandardRgb:
        return cls(argb_from_rgba_hex(text))

    @classmethod
    def from_rgb_hex(cls, text: str) -> StandardRgb:
        return cls(0xFF000000 | (argb_from_rgba_hex(text) & 0x00FFFFFF))

    @property
    def alpha(self) -> int:
        return alpha_from_argb(self.value)

    @property
    def red(self) -> int:
        return red_from_argb(self.value)

    @property
    def green(self) -> int:
        return green_from_argb(self.value)

    @property
    def blue(self) -> int:
        return blue_from_argb(self.value)

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 255

    def with_alpha(self, alpha: int) -> StandardRgb:
        return StandardRgb.from_components(self.red, self.green, self.blue, alpha)

    def to_linear_rgb(self) -> LinearRgb:
        return linrgb_from_argb(self.value)

    def to_xyz(self) -> CieXyz:
        return xyz_from_argb(self.value)

    def to_lab(self) -> Lab:
        return lab_from_argb(self.value)

    def to_rgb_hex(self) -> Hex:
        return hex_from_argb(self.value)

    def to_rgba_hex(self) -> Hex:
        return rgba_hex_from_argb(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_rgb_hex()


__all__ = [
    "Argb",
    "CieXyz",
    "Hex",
    "Lab",
    "LinearRgb",
    "SRGB_TO_XYZ",
    "StandardRgb",
    "WHITE_POINT_D65",
    "XYZ_TO_SRGB",
    "alpha_from_argb",
    "argb_from_lab",
    "argb_from_linrgb",
    "argb_from_lstar",
    "argb_from_rgb",
    "argb_from_rgb_hex",
    "argb_from_rgba_hex",
    "argb_from_xyz",
    "blue_from_argb",
    "delinearized",
    "green_from_argb",
    "hex_from_argb",
    "is_opaque",
    "lab_f",
    "lab_from_argb",
    "lab_invf",
    "linearized",
    "linrgb_from_argb",
    "lstar_from_argb",
    "lstar_from_y",
    "red_from_argb",
    "rgba_hex_from_argb",
    "true_delinearized",
    "xyz_from_argb",
    "y_from_lstar",
]
