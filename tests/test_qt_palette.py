import pytest

pytest.importorskip("PyQt6")

from tonekit.export import scheme_to_hex_map  # noqa: E402
from tonekit.qt_palette import PALETTE_ROLE_MAP, build_qpalette, to_qcolor  # noqa: E402


def test_to_qcolor_keeps_alpha(qtbot):
    color = to_qcolor(0x1F6750A4)
    assert (color.red(), color.green(), color.blue(), color.alpha()) == (0x67, 0x50, 0xA4, 0x1F)


def test_build_qpalette_maps_roles(qtbot, light_scheme, catalog):
    from PyQt6.QtGui import QPalette

    palette = build_qpalette(light_scheme, catalog)
    hex_map = scheme_to_hex_map(light_scheme, catalog)
    window = palette.color(QPalette.ColorRole.Window)
    assert window.name().upper() == hex_map["surface"]
    highlight = palette.color(QPalette.ColorRole.Highlight)
    assert highlight.name().upper() == hex_map["primary"]
    assert all(hasattr(QPalette.ColorRole, qt_role) for qt_role, _ in PALETTE_ROLE_MAP)
