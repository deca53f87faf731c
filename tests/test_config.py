import pytest

from snapruler import SnapSettings, get_default_settings, grid_spacing_for_dpi, set_default_settings


def test_default_settings_values():
    settings = get_default_settings()
    assert settings.grid_spacing_px == 20.0
    assert settings.zoom == 1.0
    assert settings.stroke_color == "#000000"
    assert settings.stroke_width_px == 3.0
    assert settings.snap_enabled is True
    assert settings.px_per_mm == 4.0


def test_get_default_settings_returns_copy():
    settings = get_default_settings()
    settings.grid_spacing_px = 99.0
    assert get_default_settings().grid_spacing_px == 20.0


def test_set_default_settings_round_trip():
    original = get_default_settings()
    try:
        custom = SnapSettings(grid_spacing_px=8.0, snap_enabled=False)
        set_default_settings(custom)
        custom.grid_spacing_px = 50.0
        restored = get_default_settings()
        assert restored.grid_spacing_px == 8.0
        assert restored.snap_enabled is False
    finally:
        set_default_settings(original)


def test_effective_values_are_floored():
    settings = SnapSettings(grid_spacing_px=0.5, zoom=0.0)
    assert settings.effective_grid_spacing == 2.0
    assert settings.effective_zoom == pytest.approx(0.1)


def test_grid_spacing_for_dpi():
    assert grid_spacing_for_dpi(254.0) == pytest.approx(50.0)
    assert grid_spacing_for_dpi(254.0, mm=1.0) == pytest.approx(10.0)
    assert grid_spacing_for_dpi(10.0) == pytest.approx(4.0)
    with pytest.raises(ValueError):
        grid_spacing_for_dpi(0.0)
