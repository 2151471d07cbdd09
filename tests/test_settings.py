"""Unit tests for settings persistence."""

import pytest
from PyQt6.QtCore import QSettings

from utils.settings import SettingsManager, EditorDefaults, MAX_FRAME_SIZE


@pytest.fixture
def manager(tmp_path):
    settings = QSettings(str(tmp_path / 'settings.ini'), QSettings.Format.IniFormat)
    return SettingsManager(settings)


class TestSettingsManager:
    """Test defaults round trip and clamping."""

    def test_fresh_settings_use_defaults(self, manager):
        assert manager.get_defaults() == EditorDefaults()

    def test_defaults_persist(self, manager):
        wanted = EditorDefaults(frame_width=16, frame_height=24, frame_rate=8, brush_size=2,
                                log_level="DEBUG", gif_scale=2)
        manager.set_defaults(wanted)
        assert manager.get_defaults() == wanted

    def test_out_of_range_values_are_clamped(self, manager):
        manager.settings.setValue('defaults/frame_width', 100000)
        manager.settings.setValue('defaults/frame_rate', 0)
        manager.settings.setValue('defaults/brush_size', -3)
        defaults = manager.get_defaults()
        assert defaults.frame_width == MAX_FRAME_SIZE
        assert defaults.frame_rate == 1
        assert defaults.brush_size == 1

    def test_unknown_log_level_falls_back(self, manager):
        manager.settings.setValue('defaults/log_level', 'chatty')
        assert manager.get_defaults().log_level == "INFO"

    def test_last_file(self, manager):
        assert manager.get_last_file() == ''
        manager.set_last_file('/tmp/walk.ssp')
        assert manager.get_last_file() == '/tmp/walk.ssp'
