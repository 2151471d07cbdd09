"""
Main Window
The main application window that ties everything together
"""

import os
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter,
    QFileDialog, QMessageBox, QDialog
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence, QShortcut

from core.data_structures import ProjectData
from core.frame_store import FrameStore
from core.raster_surface import RasterSurface
from utils.project_io import (
    PROJECT_EXTENSION, ProjectFormatError, load_project, save_project, export_gif
)
from utils.settings import SettingsManager
from .canvas_widget import CanvasWidget
from .frame_panel import FramePanel
from .log_widget import LogWidget
from .playback_timer import PlaybackTimer
from .settings_dialog import SettingsDialog
from .tool_panel import ToolPanel

PROJECT_FILTER = f"Sprite Projects (*{PROJECT_EXTENSION});;All Files (*)"


class FlipbookEditorWindow(QMainWindow):
    """Pixel flipbook editor: canvas, tools, frames and playback"""

    def __init__(self, settings: Optional[SettingsManager] = None):
        super().__init__()
        self.settings = settings or SettingsManager()
        self.defaults = self.settings.get_defaults()
        self.current_file: Optional[str] = None

        self.store = FrameStore(self.defaults.frame_width, self.defaults.frame_height, self.defaults.frame_rate, self)
        self.surface = RasterSurface(self.defaults.frame_width, self.defaults.frame_height, self)
        self.surface.set_brush_size(self.defaults.brush_size)

        self.init_ui()
        self.init_menu()
        self._setup_shortcuts()
        self.connect_core_signals()

        self.playback_timer = PlaybackTimer(self.store, parent=self)
        self.preview_timer = PlaybackTimer(
            self.store, tick=self.store.increment_preview_animation, follow_playback=False, parent=self
        )
        self.preview_timer.start()

        geometry = self.settings.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)

        self.surface.show_frame(self.store.current_pixels())
        self.frame_panel.set_frame_label(self.store.edit_cursor + 1, len(self.store))
        self._update_title()
        self.log_widget.log("Application started", "INFO")

    def init_ui(self):
        """Initialize the user interface"""
        self.setGeometry(100, 100, 1000, 720)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.setHandleWidth(2)

        self.tool_panel = ToolPanel(brush_size=self.defaults.brush_size)
        self.tool_panel.setMaximumWidth(240)
        splitter.addWidget(self.tool_panel)

        self.canvas = CanvasWidget(self.surface)
        splitter.addWidget(self.canvas)

        self.frame_panel = FramePanel(frame_rate=self.defaults.frame_rate)
        self.frame_panel.setMaximumWidth(260)
        splitter.addWidget(self.frame_panel)

        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setStretchFactor(2, 0)

        log_splitter = QSplitter(Qt.Orientation.Vertical)
        log_splitter.addWidget(splitter)
        self.log_widget = LogWidget(minimum_level=self.defaults.log_level)
        log_splitter.addWidget(self.log_widget)
        log_splitter.setStretchFactor(0, 4)
        log_splitter.setStretchFactor(1, 1)
        log_splitter.setCollapsible(1, True)

        main_layout.addWidget(log_splitter, stretch=1)

    def init_menu(self):
        file_menu = self.menuBar().addMenu("&File")
        self._add_action(file_menu, "&New Project", self.new_project, QKeySequence.StandardKey.New)
        self._add_action(file_menu, "&Open...", self.open_project, QKeySequence.StandardKey.Open)
        self._add_action(file_menu, "&Save", self.save_project, QKeySequence.StandardKey.Save)
        self._add_action(file_menu, "Save &As...", self.save_project_as, QKeySequence.StandardKey.SaveAs)
        file_menu.addSeparator()
        self._add_action(file_menu, "Export &GIF...", self.export_gif)
        file_menu.addSeparator()
        self._add_action(file_menu, "&Preferences...", self.show_settings)
        self._add_action(file_menu, "&Quit", self.close, QKeySequence.StandardKey.Quit)

    def _add_action(self, menu, text, slot, shortcut=None):
        action = QAction(text, self)
        if shortcut is not None:
            action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(slot)
        menu.addAction(action)
        return action

    def _setup_shortcuts(self):
        """Frame navigation and playback shortcuts."""
        QShortcut(QKeySequence(Qt.Key.Key_Left), self).activated.connect(self.store.prev_frame)
        QShortcut(QKeySequence(Qt.Key.Key_Right), self).activated.connect(self.store.next_frame)
        QShortcut(QKeySequence(Qt.Key.Key_Space), self).activated.connect(
            lambda: self.store.set_playing(not self.store.is_playing)
        )
        QShortcut(QKeySequence(Qt.Key.Key_E), self).activated.connect(self.tool_panel.eraser_radio.click)
        QShortcut(QKeySequence(Qt.Key.Key_B), self).activated.connect(self.tool_panel.brush_radio.click)

    def connect_core_signals(self):
        """Wire the surface, the store and the panels together"""
        surface, store = self.surface, self.store

        surface.frame_updated.connect(store.receive_updated_canvas_frame)
        store.edit_frame_changed.connect(surface.show_frame)
        store.animation_frame_changed.connect(surface.show_frame)
        store.can_draw_changed.connect(surface.set_can_draw)

        surface.current_color_changed.connect(self.tool_panel.set_current_color)
        surface.history_changed.connect(self.tool_panel.set_history)
        self.tool_panel.brush_size_changed.connect(surface.set_brush_size)
        self.tool_panel.color_chosen.connect(surface.pick_color)
        self.tool_panel.brush_selected.connect(surface.disable_eraser)
        self.tool_panel.eraser_selected.connect(surface.enable_eraser)
        self.tool_panel.history_slot_selected.connect(surface.select_from_history)

        self.frame_panel.add_clicked.connect(store.add_frame)
        self.frame_panel.copy_clicked.connect(store.copy_frame)
        self.frame_panel.delete_clicked.connect(store.delete_frame)
        self.frame_panel.prev_clicked.connect(store.prev_frame)
        self.frame_panel.next_clicked.connect(store.next_frame)
        self.frame_panel.play_toggled.connect(store.set_playing)
        self.frame_panel.fps_changed.connect(store.frame_rate_changed)

        store.frame_label_changed.connect(self.frame_panel.set_frame_label)
        store.delete_enabled.connect(self.frame_panel.set_delete_enabled)
        store.preview_frame_changed.connect(self.frame_panel.show_preview)
        store.frame_rate_updated.connect(self.frame_panel.set_frame_rate)
        store.animation_started.connect(lambda: self.frame_panel.set_playing(True))
        store.animation_paused.connect(lambda: self.frame_panel.set_playing(False))

        store.message_logged.connect(self.log_widget.log)
        surface.message_logged.connect(self.log_widget.log)

    # ------------------------------------------------------------------ #
    # Project files
    # ------------------------------------------------------------------ #
    def new_project(self):
        dialog = SettingsDialog(self.defaults, self)
        dialog.setWindowTitle("New Project")
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self.start_new_project(dialog.get_defaults())

    def start_new_project(self, defaults):
        """Reset to a blank project using the given defaults"""
        self._apply_defaults(defaults)
        self.tool_panel.brush_size_spin.setValue(defaults.brush_size)
        self.surface.set_brush_size(defaults.brush_size)
        self.store.restore(ProjectData(
            frame_rate=self.defaults.frame_rate,
            frame_width=self.defaults.frame_width,
            frame_height=self.defaults.frame_height,
        ))
        self.current_file = None
        self._update_title()
        self.log_widget.log(
            f"New project {self.defaults.frame_width}x{self.defaults.frame_height}", "INFO"
        )

    def open_project(self):
        start_dir = os.path.dirname(self.settings.get_last_file())
        filename, _ = QFileDialog.getOpenFileName(self, "Open Project", start_dir, PROJECT_FILTER)
        if filename:
            self.load_project_file(filename)

    def load_project_file(self, filename: str) -> bool:
        try:
            project = load_project(filename)
        except (ProjectFormatError, OSError) as e:
            self.log_widget.log(f"Failed to open {filename}: {e}", "ERROR")
            QMessageBox.warning(self, "Open Failed", f"Could not open project:\n{e}")
            return False
        self.store.restore(project)
        self.current_file = filename
        self.settings.set_last_file(filename)
        self._update_title()
        self.log_widget.log(
            f"Loaded {filename} ({project.number_of_frames} frames, "
            f"{project.frame_width}x{project.frame_height})", "SUCCESS"
        )
        return True

    def save_project(self):
        if not self.current_file:
            self.save_project_as()
            return
        self._write_project(self.current_file)

    def save_project_as(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save Project", self.current_file or f"untitled{PROJECT_EXTENSION}", PROJECT_FILTER
        )
        if not filename:
            return
        if not os.path.splitext(filename)[1]:
            filename += PROJECT_EXTENSION
        if self._write_project(filename):
            self.current_file = filename
            self.settings.set_last_file(filename)
            self._update_title()

    def _write_project(self, filename: str) -> bool:
        try:
            save_project(filename, self.store.project_data())
        except OSError as e:
            self.log_widget.log(f"Failed to save {filename}: {e}", "ERROR")
            QMessageBox.warning(self, "Save Failed", f"Could not save project:\n{e}")
            return False
        self.log_widget.log(f"Saved {filename}", "SUCCESS")
        return True

    def export_gif(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Export GIF", "animation.gif", "GIF Images (*.gif)"
        )
        if not filename:
            return
        try:
            export_gif(filename, self.store.project_data(), scale=self.defaults.gif_scale)
        except (ProjectFormatError, OSError, ValueError) as e:
            self.log_widget.log(f"Error exporting GIF: {e}", "ERROR")
            QMessageBox.warning(self, "Export Failed", f"Could not export GIF:\n{e}")
            return
        self.log_widget.log(f"GIF exported to: {filename}", "SUCCESS")

    # ------------------------------------------------------------------ #
    # Settings
    # ------------------------------------------------------------------ #
    def show_settings(self):
        dialog = SettingsDialog(self.defaults, self)
        if dialog.exec() == QDialog.DialogCode.Accepted:
            self._apply_defaults(dialog.get_defaults())
            self.log_widget.log("Preferences saved", "SUCCESS")

    def _apply_defaults(self, defaults):
        self.defaults = defaults
        self.settings.set_defaults(defaults)
        self.log_widget.set_minimum_level(defaults.log_level)

    def _update_title(self):
        name = os.path.basename(self.current_file) if self.current_file else "Untitled"
        self.setWindowTitle(f"Pixel Flipbook - {name}")

    def closeEvent(self, event):
        """Handle window close"""
        self.store.pause_animation()
        self.preview_timer.stop()
        self.settings.set_window_geometry(self.saveGeometry())
        event.accept()
