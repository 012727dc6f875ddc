"""Low-level color and math helpers used across tonekit."""

from .color_utils import (  # noqa: F401
    argb_from_hex,
    argb_from_rgb,
    hex_from_argb,
    lstar_from_argb,
)
from .math_utils import clamp_double, lerp, sanitize_degrees_double  # noqa: F401

__all__ = [
    "argb_from_hex",
    "argb_from_rgb",
    "hex_from_argb",
    "lstar_from_argb",
    "clamp_double",
    "lerp",
    "sanitize_degrees_double",
]
