"""
Tool Panel
Brush size, color picking, eraser toggle and the recent color swatches
"""

from typing import List

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QSpinBox, QGroupBox, QRadioButton, QButtonGroup, QColorDialog
)
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor

from core.color_history import HISTORY_SIZE
from core.data_structures import Color
from utils.settings import MAX_BRUSH_SIZE


def swatch_style(color: Color) -> str:
    r, g, b, a = color
    return f"background-color: rgba({r}, {g}, {b}, {a}); border: 1px solid black;"


class ToolPanel(QWidget):
    """Brush and color controls"""

    brush_size_changed = pyqtSignal(int)
    color_chosen = pyqtSignal(object)
    brush_selected = pyqtSignal()
    eraser_selected = pyqtSignal()
    history_slot_selected = pyqtSignal(int)

    def __init__(self, brush_size: int = 1, parent=None):
        super().__init__(parent)
        self._current_color: Color = (0, 0, 0, 255)
        self.init_ui(brush_size)

    def init_ui(self, brush_size: int):
        layout = QVBoxLayout(self)

        brush_group = QGroupBox("Brush")
        brush_layout = QVBoxLayout()

        size_row = QHBoxLayout()
        size_row.addWidget(QLabel("Size:"))
        self.brush_size_spin = QSpinBox()
        self.brush_size_spin.setRange(1, MAX_BRUSH_SIZE)
        self.brush_size_spin.setValue(brush_size)
        self.brush_size_spin.valueChanged.connect(self.brush_size_changed.emit)
        size_row.addWidget(self.brush_size_spin)
        brush_layout.addLayout(size_row)

        self.brush_radio = QRadioButton("Brush")
        self.brush_radio.setChecked(True)
        self.brush_radio.toggled.connect(self._on_brush_toggled)
        self.eraser_radio = QRadioButton("Eraser")
        self.eraser_radio.toggled.connect(self._on_eraser_toggled)
        tool_group = QButtonGroup(self)
        tool_group.addButton(self.brush_radio)
        tool_group.addButton(self.eraser_radio)
        brush_layout.addWidget(self.brush_radio)
        brush_layout.addWidget(self.eraser_radio)

        brush_group.setLayout(brush_layout)
        layout.addWidget(brush_group)

        color_group = QGroupBox("Color")
        color_layout = QVBoxLayout()

        current_row = QHBoxLayout()
        self.current_color_label = QLabel()
        self.current_color_label.setFixedSize(32, 32)
        self.current_color_label.setStyleSheet(swatch_style(self._current_color))
        current_row.addWidget(self.current_color_label)
        pick_btn = QPushButton("Pick Color...")
        pick_btn.clicked.connect(self.open_color_dialog)
        current_row.addWidget(pick_btn)
        color_layout.addLayout(current_row)

        color_layout.addWidget(QLabel("Recent:"))
        history_row = QHBoxLayout()
        self.history_buttons: List[QPushButton] = []
        for slot in range(HISTORY_SIZE):
            btn = QPushButton()
            btn.setFixedSize(28, 28)
            btn.setEnabled(False)
            btn.clicked.connect(lambda _checked=False, s=slot: self.history_slot_selected.emit(s))
            history_row.addWidget(btn)
            self.history_buttons.append(btn)
        history_row.addStretch()
        color_layout.addLayout(history_row)

        color_group.setLayout(color_layout)
        layout.addWidget(color_group)
        layout.addStretch()

    def open_color_dialog(self):
        r, g, b, a = self._current_color
        chosen = QColorDialog.getColor(
            QColor(r, g, b, a), self, "Select Brush Color",
            QColorDialog.ColorDialogOption.ShowAlphaChannel
        )
        if chosen.isValid():
            self.color_chosen.emit((chosen.red(), chosen.green(), chosen.blue(), chosen.alpha()))

    def set_current_color(self, color: Color):
        self._current_color = tuple(color)
        self.current_color_label.setStyleSheet(swatch_style(self._current_color))
        self.brush_radio.setChecked(True)

    def set_history(self, colors: List[Color]):
        for slot, btn in enumerate(self.history_buttons):
            if slot < len(colors):
                btn.setStyleSheet(swatch_style(colors[slot]))
                btn.setEnabled(True)
            else:
                btn.setStyleSheet("")
                btn.setEnabled(False)

    def _on_brush_toggled(self, checked: bool):
        if checked:
            self.brush_selected.emit()

    def _on_eraser_toggled(self, checked: bool):
        if checked:
            self.eraser_selected.emit()
