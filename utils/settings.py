"""
Settings Manager
Handles application settings persistence
"""

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QSettings

from core.frame_store import MAX_FRAME_RATE

MAX_FRAME_SIZE = 512
MAX_BRUSH_SIZE = 64
MAX_GIF_SCALE = 16
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EditorDefaults:
    """Starting values for a new project and the editor tools."""

    frame_width: int = 32
    frame_height: int = 32
    frame_rate: int = 12
    brush_size: int = 1
    log_level: str = "INFO"
    gif_scale: int = 4


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, int(value)))


class SettingsManager:
    """Manages application settings"""

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings if settings is not None else QSettings('PixelFlipbook', 'Settings')

    def get_defaults(self) -> EditorDefaults:
        """Read editor defaults, clamping anything out of range"""
        base = EditorDefaults()
        level = str(self.settings.value('defaults/log_level', base.log_level)).upper()
        return EditorDefaults(
            frame_width=_clamp(
                self.settings.value('defaults/frame_width', base.frame_width, type=int), 1, MAX_FRAME_SIZE
            ),
            frame_height=_clamp(
                self.settings.value('defaults/frame_height', base.frame_height, type=int), 1, MAX_FRAME_SIZE
            ),
            frame_rate=_clamp(
                self.settings.value('defaults/frame_rate', base.frame_rate, type=int), 1, MAX_FRAME_RATE
            ),
            brush_size=_clamp(
                self.settings.value('defaults/brush_size', base.brush_size, type=int), 1, MAX_BRUSH_SIZE
            ),
            log_level=level if level in LOG_LEVELS else base.log_level,
            gif_scale=_clamp(
                self.settings.value('export/gif_scale', base.gif_scale, type=int), 1, MAX_GIF_SCALE
            ),
        )

    def set_defaults(self, defaults: EditorDefaults):
        """Save editor defaults"""
        self.settings.setValue('defaults/frame_width', int(defaults.frame_width))
        self.settings.setValue('defaults/frame_height', int(defaults.frame_height))
        self.settings.setValue('defaults/frame_rate', int(defaults.frame_rate))
        self.settings.setValue('defaults/brush_size', int(defaults.brush_size))
        self.settings.setValue('defaults/log_level', defaults.log_level)
        self.settings.setValue('export/gif_scale', int(defaults.gif_scale))
        self.settings.sync()

    def get_last_file(self) -> str:
        """Get the last opened project"""
        return self.settings.value('last_file', '', type=str)

    def set_last_file(self, filename: str):
        """Save the last opened project"""
        self.settings.setValue('last_file', filename)

    def get_window_geometry(self):
        """Get saved window geometry"""
        return self.settings.value('window_geometry')

    def set_window_geometry(self, geometry):
        """Save window geometry"""
        self.settings.setValue('window_geometry', geometry)
