# Shared fixtures: catalog + schemes for the engine tests, and a fallback
# 'qtbot' fixture for the Qt adapter test if pytest-qt is not installed.
# If pytest-qt is installed, its fixture wins.

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tonekit.dynamic import DynamicScheme, MaterialDynamicColors, Variant  # noqa: E402
from tonekit.hct import Hct  # noqa: E402
from tonekit.palettes import TonalPalette  # noqa: E402
from tonekit.schemes import SchemeMonochrome, SchemeTonalSpot  # noqa: E402

SEED = 0xFF6750A4

try:  # If pytest-qt present, do nothing (its fixture will be used)
    import pytestqt  # type: ignore  # noqa: F401
except Exception:  # pragma: no cover
    try:
        from PyQt6.QtWidgets import QApplication
    except Exception:  # pragma: no cover
        QApplication = None  # type: ignore

    @pytest.fixture
    def qtbot():  # type: ignore
        if QApplication is None:
            pytest.skip("PyQt6 not available")
        app = QApplication.instance() or QApplication(sys.argv)  # type: ignore
        widgets = []

        class Bot:
            def addWidget(self, w):  # mimic pytest-qt API subset
                widgets.append(w)

        bot = Bot()
        bot.app = app
        return bot


@pytest.fixture(scope="session")
def catalog():
    return MaterialDynamicColors()


@pytest.fixture(scope="session")
def seed_hct():
    return Hct.from_int(SEED)


@pytest.fixture(scope="session")
def light_scheme(seed_hct):
    return SchemeTonalSpot(seed_hct, False, 0.0)


@pytest.fixture(scope="session")
def dark_scheme(seed_hct):
    return SchemeTonalSpot(seed_hct, True, 0.0)


@pytest.fixture(scope="session")
def tonal_spot_schemes(seed_hct):
    return [
        SchemeTonalSpot(seed_hct, is_dark, level)
        for is_dark in (False, True)
        for level in (-1.0, 0.0, 0.5, 1.0)
    ]


@pytest.fixture(scope="session")
def monochrome_schemes(seed_hct):
    return [SchemeMonochrome(seed_hct, is_dark, 0.0) for is_dark in (False, True)]


@pytest.fixture
def make_grey_scheme():
    """Factory for cheap zero-chroma schemes (fresh instance per call)."""

    def _make(is_dark=False, contrast_level=0.0, variant=Variant.TONAL_SPOT):
        grey = TonalPalette.from_hue_and_chroma(0.0, 0.0)
        source = Hct.from_int(0xFF808080)
        return DynamicScheme(source, variant, is_dark, contrast_level, grey, grey, grey, grey, grey)

    return _make
