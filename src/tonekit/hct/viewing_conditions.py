"""CAM16 viewing conditions.

The frame in which a color is observed: white point, adapting luminance,
background lightness and surround. Intermediate values of the CAM16 model that
depend only on the frame are precomputed here once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Sequence, Tuple

from ..utils.color_utils import WHITE_POINT_D65, y_from_lstar
from ..utils.math_utils import clamp_double, lerp

__all__ = ["ViewingConditions", "XYZ_TO_CAM16RGB", "CAM16RGB_TO_XYZ"]

XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

CAM16RGB_TO_XYZ = (
    (1.8620678, -1.0112547, 0.14918678),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.01584150, -0.03412294, 1.0499644),
)


@dataclass(frozen=True)
class ViewingConditions:
    DEFAULT: ClassVar["ViewingConditions"]

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: Tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: Sequence[float],
        adapting_luminance: float,
        background_lstar: float,
        surround: float,
        discounting_illuminant: bool,
    ) -> "ViewingConditions":
        """Create viewing conditions.

        Parameters
        ----------
        white_point : Sequence[float]
            XYZ of the illuminant (D65 for sRGB).
        adapting_luminance : float
            Light strength in lux.
        background_lstar : float
            Average L* of the surroundings; 50 is a mid-grey.
        surround : float
            0 (dark room) .. 2 (bright daylight).
        discounting_illuminant : bool
            Whether the eye has fully adapted to the illuminant.
        """
        # Pure black backgrounds lead to infinities.
        background_lstar = max(0.1, background_lstar)
        m = XYZ_TO_CAM16RGB
        x, y, zz = white_point
        r_w = x * m[0][0] + y * m[0][1] + zz * m[0][2]
        g_w = x * m[1][0] + y * m[1][1] + zz * m[1][2]
        b_w = x * m[2][0] + y * m[2][1] + zz * m[2][2]
        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)
        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = clamp_double(0.0, 1.0, d)
        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )
        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * (5.0 * adapting_luminance) ** (1.0 / 3.0)
        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb
        factors = (
            math.pow(fl * rgb_d[0] * r_w / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * g_w / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * b_w / 100.0, 0.42),
        )
        rgb_a = tuple(400.0 * f_ / (f_ + 27.13) for f_ in factors)
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb
        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> "ViewingConditions":
        return cls.make(
            WHITE_POINT_D65,
            200.0 / math.pi * y_from_lstar(50.0) / 100.0,
            lstar,
            2.0,
            False,
        )


# sRGB-like frame: D65, ~11.72 lux, mid-grey background, average surround.
ViewingConditions.DEFAULT = ViewingConditions.default_with_background_lstar(50.0)
