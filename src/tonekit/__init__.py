"""tonekit: accessible UI color roles from a single seed color.

Typical use::

    from tonekit import scheme_for_variant, scheme_to_hex_map
    scheme = scheme_for_variant("tonal_spot", 0xFF6750A4, is_dark=False)
    colors = scheme_to_hex_map(scheme)
"""

from .blend import cam16_ucs, harmonize, hct_hue  # noqa: F401
from .contrast import contrast_ratio, ratio_of_tones, validate_contrast  # noqa: F401
from .dynamic import (  # noqa: F401
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    MaterialDynamicColors,
    RoleGraph,
    ToneDeltaPair,
    TonePolarity,
    Variant,
)
from .errors import RoleDefinitionError, RoleGraphCycleError  # noqa: F401
from .export import (  # noqa: F401
    default_colors,
    export_snapshot_to_file,
    generate_qss,
    resolve_scheme,
    scheme_to_hex_map,
    snapshot,
)
from .hct import Cam16, Hct, ViewingConditions  # noqa: F401
from .palettes import CorePalette, TonalPalette  # noqa: F401
from .schemes import (  # noqa: F401
    SchemeContent,
    SchemeExpressive,
    SchemeFidelity,
    SchemeMonochrome,
    SchemeNeutral,
    SchemeTonalSpot,
    SchemeVibrant,
    scheme_for_variant,
)
from .score import score  # noqa: F401
from .static_scheme import Scheme  # noqa: F401
from .temperature import TemperatureCache  # noqa: F401

__all__ = [
    "Cam16",
    "ContrastCurve",
    "CorePalette",
    "DynamicColor",
    "DynamicScheme",
    "Hct",
    "MaterialDynamicColors",
    "RoleDefinitionError",
    "RoleGraph",
    "RoleGraphCycleError",
    "Scheme",
    "SchemeContent",
    "SchemeExpressive",
    "SchemeFidelity",
    "SchemeMonochrome",
    "SchemeNeutral",
    "SchemeTonalSpot",
    "SchemeVibrant",
    "TemperatureCache",
    "TonalPalette",
    "ToneDeltaPair",
    "TonePolarity",
    "Variant",
    "ViewingConditions",
    "cam16_ucs",
    "contrast_ratio",
    "default_colors",
    "export_snapshot_to_file",
    "generate_qss",
    "harmonize",
    "hct_hue",
    "ratio_of_tones",
    "resolve_scheme",
    "scheme_for_variant",
    "scheme_to_hex_map",
    "score",
    "snapshot",
    "validate_contrast",
]

__version__ = "0.1.0"
