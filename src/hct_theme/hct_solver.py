# hct_solver.py – (hue, chroma, tone) → closest in-gamut sRGB
#   1) Newton iteration on CAM16 J for the requested chroma (exact when in gamut)
#   2) otherwise: walk the constant-Y slice of the linear RGB cube and bisect
#      the boundary segment whose hue brackets the target, snapping to the
#      "critical planes" where an sRGB byte changes value

from __future__ import annotations

import math

import numpy as np

from .color_utils import (
    SRGB_TO_XYZ,
    Argb,
    argb_from_linrgb,
    argb_from_lstar,
    linearized,
    true_delinearized,
    y_from_lstar,
)
from .math_utils import (
    Matrix3,
    invert,
    matrix,
    matrix_multiply,
    multiply,
    sanitize_degrees,
    sanitize_radians,
    signum,
)
from .viewing_conditions import XYZ_TO_CAM16RGB, ViewingConditions

Vec3 = tuple[float, float, float]

_VC = ViewingConditions.DEFAULT

# linear RGB (0..100) → discounted, Fl-scaled CAM16 RGB under the default conditions
SCALED_DISCOUNT_FROM_LINRGB: Matrix3 = multiply(
    matrix(np.diag([d * _VC.fl / 100.0 for d in _VC.rgb_d])),
    multiply(XYZ_TO_CAM16RGB, SRGB_TO_XYZ),
)
LINRGB_FROM_SCALED_DISCOUNT: Matrix3 = invert(SCALED_DISCOUNT_FROM_LINRGB)

Y_FROM_LINRGB: Vec3 = (0.2126, 0.7152, 0.0722)

# linear values where the delinearized byte crosses i + 0.5, i = 0..254
CRITICAL_PLANES: tuple[float, ...] = tuple(linearized(i + 0.5) for i in range(255))

_NO_VERTEX: Vec3 = (-1.0, -1.0, -1.0)
# far beyond the sRGB gamut maximum (about 150); larger requests solve the same
_MAX_SOLVABLE_CHROMA = 1000.0


# --- helpers -----------------------------------------------------------------


def _chromatic_adaptation(component: float) -> float:
    af = abs(component) ** 0.42
    return signum(component) * 400.0 * af / (af + 27.13)


def _inverse_chromatic_adaptation(adapted: float) -> float:
    adapted_abs = abs(adapted)
    base = max(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return signum(adapted) * base ** (1.0 / 0.42)


def hue_of(linrgb: Vec3) -> float:
    """CAM16 hue angle (radians, unsanitized) of a linear RGB color."""
    sd = matrix_multiply(linrgb, SCALED_DISCOUNT_FROM_LINRGB)
    r_a, g_a, b_a = (_chromatic_adaptation(x) for x in sd)
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    return sanitize_radians(b - a) < sanitize_radians(c - a)


def _intercept(source: float, mid: float, target: float) -> float:
    return (mid - source) / (target - source)


def _lerp_point(source: Vec3, t: float, target: Vec3) -> Vec3:
    return (
        source[0] + (target[0] - source[0]) * t,
        source[1] + (target[1] - source[1]) * t,
        source[2] + (target[2] - source[2]) * t,
    )


def _set_coordinate(source: Vec3, coordinate: float, target: Vec3, axis: int) -> Vec3:
    t = _intercept(source[axis], coordinate, target[axis])
    return _lerp_point(source, t, target)


def _is_bounded(x: float) -> bool:
    return 0.0 <= x <= 100.0


def nth_vertex(y: float, n: int) -> Vec3:
    """
    The nth possible vertex of the polygon cut from the RGB cube by the
    plane of constant luminance `y`, or (-1, -1, -1) if it lies outside.
    n in 0..11.
    """
    k_r, k_g, k_b = Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        return (r, g, b) if _is_bounded(r) else _NO_VERTEX
    if n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        return (r, g, b) if _is_bounded(g) else _NO_VERTEX
    r, g = coord_a, coord_b
    b = (y - r * k_r - g * k_g) / k_b
    return (r, g, b) if _is_bounded(b) else _NO_VERTEX


def bisect_to_segment(y: float, target_hue: float) -> tuple[Vec3, Vec3]:
    """Two boundary vertices whose hues bracket `target_hue` (radians)."""
    left = right = _NO_VERTEX
    left_hue = right_hue = 0.0
    initialized = False
    uncut = True
    for n in range(12):
        mid = nth_vertex(y, n)
        if mid[0] < 0:
            continue
        mid_hue = hue_of(mid)
        if not initialized:
            left = right = mid
            left_hue = right_hue = mid_hue
            initialized = True
            continue
        if uncut or are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue
    return left, right


def _midpoint(a: Vec3, b: Vec3) -> Vec3:
    return ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0, (a[2] + b[2]) / 2.0)


def _critical_plane_below(x: float) -> int:
    return math.floor(x - 0.5)


def _critical_plane_above(x: float) -> int:
    return math.ceil(x - 0.5)


def bisect_to_limit(y: float, target_hue: float) -> Vec3:
    """Linear RGB on the cube surface with luminance `y` and hue `target_hue`."""
    left, right = bisect_to_segment(y, target_hue)
    left_hue = hue_of(left)
    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = _critical_plane_below(true_delinearized(left[axis]))
            r_plane = _critical_plane_above(true_delinearized(right[axis]))
        else:
            l_plane = _critical_plane_above(true_delinearized(left[axis]))
            r_plane = _critical_plane_below(true_delinearized(right[axis]))
        for _ in range(8):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = (l_plane + r_plane) // 2
            mid = _set_coordinate(left, CRITICAL_PLANES[m_plane], right, axis)
            mid_hue = hue_of(mid)
            if are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane
    return _midpoint(left, right)


def find_result_by_j(hue_radians: float, chroma: float, y: float) -> Argb:
    """Exact solve via Newton on J; 0 when the result would leave the gamut."""
    j = math.sqrt(y) * 11.0
    vc = _VC
    t_inner_coeff = 1.0 / (1.64 - 0.29**vc.n) ** 0.73
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)
    for iteration_round in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = (alpha * t_inner_coeff) ** (1.0 / 0.9)
        ac = vc.aw * j_normalized ** (1.0 / vc.c / vc.z)
        p2 = ac / vc.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_cs = _inverse_chromatic_adaptation(r_a)
        g_cs = _inverse_chromatic_adaptation(g_a)
        b_cs = _inverse_chromatic_adaptation(b_a)
        linrgb = matrix_multiply((r_cs, g_cs, b_cs), LINRGB_FROM_SCALED_DISCOUNT)

        if linrgb[0] < 0 or linrgb[1] < 0 or linrgb[2] < 0:
            return 0
        k_r, k_g, k_b = Y_FROM_LINRGB
        fnj = k_r * linrgb[0] + k_g * linrgb[1] + k_b * linrgb[2]
        if fnj <= 0:
            return 0
        if iteration_round == 4 or abs(fnj - y) < 0.002:
            if linrgb[0] > 100.01 or linrgb[1] > 100.01 or linrgb[2] > 100.01:
                return 0
            return argb_from_linrgb(linrgb)
        # Newton step, with 2 * fn(j) / j standing in for fn'(j)
        j -= (fnj - y) * j / (2.0 * fnj)
    return 0


def solve_to_argb(hue_degrees: float, chroma: float, lstar: float) -> Argb:
    """
    sRGB color with the given CAM16 hue, CAM16 chroma and L*.

    When the chroma is out of gamut the result keeps hue and L* and takes
    the highest chroma available.
    """
    if chroma < 0.0001 or lstar < 0.0001 or lstar > 99.9999:
        return argb_from_lstar(lstar)
    chroma = min(chroma, _MAX_SOLVABLE_CHROMA)
    hue_degrees = sanitize_degrees(hue_degrees)
    hue_radians = math.radians(hue_degrees)
    y = y_from_lstar(lstar)
    exact_answer = find_result_by_j(hue_radians, chroma, y)
    if exact_answer != 0:
        return exact_answer
    return argb_from_linrgb(bisect_to_limit(y, hue_radians))


__all__ = [
    "CRITICAL_PLANES",
    "LINRGB_FROM_SCALED_DISCOUNT",
    "SCALED_DISCOUNT_FROM_LINRGB",
    "Y_FROM_LINRGB",
    "are_in_cyclic_order",
    "bisect_to_limit",
    "bisect_to_segment",
    "find_result_by_j",
    "hue_of",
    "nth_vertex",
    "solve_to_argb",
]
