"""Contrast-aware color roles resolved per scheme."""

from .contrast_curve import ContrastCurve, tone_for_contrast  # noqa: F401
from .dynamic_color import (  # noqa: F401
    DeltaPaired,
    DualBackground,
    DynamicColor,
    ResolutionStrategy,
    SelfOnly,
    SingleBackground,
    classify_strategy,
)
from .dynamic_scheme import DynamicScheme  # noqa: F401
from .material_colors import ROLE_NAMES, MaterialDynamicColors  # noqa: F401
from .role_graph import RoleGraph  # noqa: F401
from .tone_delta_pair import ToneDeltaPair, TonePolarity  # noqa: F401
from .variant import Variant  # noqa: F401

__all__ = [
    "ContrastCurve",
    "tone_for_contrast",
    "DynamicColor",
    "DynamicScheme",
    "ResolutionStrategy",
    "SelfOnly",
    "SingleBackground",
    "DualBackground",
    "DeltaPaired",
    "classify_strategy",
    "MaterialDynamicColors",
    "ROLE_NAMES",
    "RoleGraph",
    "ToneDeltaPair",
    "TonePolarity",
    "Variant",
]
