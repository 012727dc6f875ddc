"""HCT color model (CAM16 hue/chroma + L* tone)."""

from .cam16 import Cam16  # noqa: F401
from .hct import Hct  # noqa: F401
from .viewing_conditions import ViewingConditions  # noqa: F401

__all__ = ["Cam16", "Hct", "ViewingConditions"]
