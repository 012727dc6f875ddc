"""Color space conversions for packed ARGB integers.

ARGB values are plain non-negative ints laid out as ``a<<24 | r<<16 | g<<8 | b``.
Linear RGB components and XYZ coordinates use a 0-100 scale.

Public API (subset):
    argb_from_rgb(r, g, b) -> int
    argb_from_hex("#RRGGBB" | "#AARRGGBB") -> int
    hex_from_argb(argb, include_alpha=False) -> str
    lstar_from_argb(argb) -> float
    y_from_lstar(lstar) / lstar_from_y(y)
"""

from __future__ import annotations

import math
from typing import Tuple

from .math_utils import clamp_int, matrix_multiply

__all__ = [
    "WHITE_POINT_D65",
    "argb_from_rgb",
    "argb_from_hex",
    "hex_from_argb",
    "alpha_from_argb",
    "red_from_argb",
    "green_from_argb",
    "blue_from_argb",
    "is_opaque",
    "argb_from_xyz",
    "xyz_from_argb",
    "lab_from_argb",
    "argb_from_lstar",
    "lstar_from_argb",
    "y_from_lstar",
    "lstar_from_y",
    "linearized",
    "delinearized",
]

_HEX_ERR = "Color must be a #RRGGBB or #AARRGGBB hex string: {value}"

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65: Tuple[float, float, float] = (95.047, 100.0, 108.883)


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def argb_from_hex(color: str) -> int:
    """Parse ``#RRGGBB`` (opaque) or ``#AARRGGBB`` into a packed ARGB int.

    Raises ValueError for anything else.
    """
    if not isinstance(color, str):
        raise ValueError(_HEX_ERR.format(value=color))
    c = color.strip()
    if not c.startswith("#") or len(c) not in (7, 9):
        raise ValueError(_HEX_ERR.format(value=color))
    digits = c[1:]
    if any(ch not in "0123456789abcdefABCDEF" for ch in digits):
        raise ValueError(_HEX_ERR.format(value=color))
    value = int(digits, 16)
    if len(c) == 7:
        value |= 0xFF000000
    return value


def hex_from_argb(argb: int, *, include_alpha: bool = False) -> str:
    r, g, b = red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb)
    if include_alpha:
        return f"#{alpha_from_argb(argb):02X}{r:02X}{g:02X}{b:02X}"
    return f"#{r:02X}{g:02X}{b:02X}"


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


def argb_from_xyz(x: float, y: float, z: float) -> int:
    linear_r, linear_g, linear_b = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_rgb(
        delinearized(linear_r), delinearized(linear_g), delinearized(linear_b)
    )


def xyz_from_argb(argb: int) -> Tuple[float, float, float]:
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def lab_from_argb(argb: int) -> Tuple[float, float, float]:
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def argb_from_lstar(lstar: float) -> int:
    """Grey with the given L*."""
    component = delinearized(y_from_lstar(lstar))
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    return _lab_f(y / 100.0) * 116.0 - 16.0


def linearized(rgb_component: int) -> float:
    """0-255 sRGB channel -> 0-100 linear channel."""
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_component: float) -> int:
    """0-100 linear channel -> 0-255 sRGB channel (clamped)."""
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinear = normalized * 12.92
    else:
        delinear = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return clamp_int(0, 255, int(round(delinear * 255.0)))


def _lab_f(t: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    if t > e:
        return math.pow(t, 1.0 / 3.0)
    return (kappa * t + 16) / 116


def _lab_invf(ft: float) -> float:
    e = 216.0 / 24389.0
    kappa = 24389.0 / 27.0
    ft3 = ft * ft * ft
    if ft3 > e:
        return ft3
    return (116 * ft - 16) / kappa
