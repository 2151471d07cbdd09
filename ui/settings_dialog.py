"""
Settings Dialog
Editor defaults and new project size
"""

from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QComboBox, QSpinBox, QGroupBox,
    QFormLayout, QDialogButtonBox
)

from utils.settings import (
    EditorDefaults, LOG_LEVELS,
    MAX_FRAME_SIZE, MAX_FRAME_RATE, MAX_BRUSH_SIZE, MAX_GIF_SCALE
)


class SettingsDialog(QDialog):
    """Edit the defaults used for new projects, tools, logging and export"""

    def __init__(self, defaults: EditorDefaults, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Preferences")
        self._defaults = defaults
        self.init_ui()

    def init_ui(self):
        layout = QVBoxLayout(self)

        project_group = QGroupBox("New Projects")
        project_form = QFormLayout()
        self.width_spin = QSpinBox()
        self.width_spin.setRange(1, MAX_FRAME_SIZE)
        self.width_spin.setValue(self._defaults.frame_width)
        project_form.addRow("Frame width:", self.width_spin)
        self.height_spin = QSpinBox()
        self.height_spin.setRange(1, MAX_FRAME_SIZE)
        self.height_spin.setValue(self._defaults.frame_height)
        project_form.addRow("Frame height:", self.height_spin)
        self.fps_spin = QSpinBox()
        self.fps_spin.setRange(1, MAX_FRAME_RATE)
        self.fps_spin.setValue(self._defaults.frame_rate)
        project_form.addRow("Frame rate:", self.fps_spin)
        project_group.setLayout(project_form)
        layout.addWidget(project_group)

        tools_group = QGroupBox("Tools && Output")
        tools_form = QFormLayout()
        self.brush_spin = QSpinBox()
        self.brush_spin.setRange(1, MAX_BRUSH_SIZE)
        self.brush_spin.setValue(self._defaults.brush_size)
        tools_form.addRow("Brush size:", self.brush_spin)
        self.gif_scale_spin = QSpinBox()
        self.gif_scale_spin.setRange(1, MAX_GIF_SCALE)
        self.gif_scale_spin.setValue(self._defaults.gif_scale)
        tools_form.addRow("GIF scale:", self.gif_scale_spin)
        self.log_level_combo = QComboBox()
        self.log_level_combo.addItems(LOG_LEVELS)
        self.log_level_combo.setCurrentText(self._defaults.log_level)
        tools_form.addRow("Log level:", self.log_level_combo)
        tools_group.setLayout(tools_form)
        layout.addWidget(tools_group)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def get_defaults(self) -> EditorDefaults:
        return EditorDefaults(
            frame_width=self.width_spin.value(),
            frame_height=self.height_spin.value(),
            frame_rate=self.fps_spin.value(),
            brush_size=self.brush_spin.value(),
            log_level=self.log_level_combo.currentText(),
            gif_scale=self.gif_scale_spin.value(),
        )
