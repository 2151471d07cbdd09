"""
UI module for Pixel Flipbook
Contains all Qt widgets and UI components
"""

from .log_widget import LogWidget
from .canvas_widget import CanvasWidget
from .tool_panel import ToolPanel
from .frame_panel import FramePanel
from .playback_timer import PlaybackTimer
from .settings_dialog import SettingsDialog
from .main_window import FlipbookEditorWindow

__all__ = [
    'LogWidget',
    'CanvasWidget',
    'ToolPanel',
    'FramePanel',
    'PlaybackTimer',
    'SettingsDialog',
    'FlipbookEditorWindow',
]
