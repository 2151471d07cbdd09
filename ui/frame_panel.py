"""
Frame Panel
Frame navigation, sequence editing and playback controls with a live preview
"""

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QSpinBox, QGroupBox
)
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPixmap

from utils.image_utils import buffer_to_qimage
from utils.settings import MAX_FRAME_RATE

PREVIEW_SIZE = 128


class FramePanel(QWidget):
    """Buttons and labels for the frame sequence"""

    add_clicked = pyqtSignal()
    copy_clicked = pyqtSignal()
    delete_clicked = pyqtSignal()
    prev_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    play_toggled = pyqtSignal(bool)
    fps_changed = pyqtSignal(int)

    def __init__(self, frame_rate: int = 12, parent=None):
        super().__init__(parent)
        self._playing = False
        self.init_ui(frame_rate)

    def init_ui(self, frame_rate: int):
        layout = QVBoxLayout(self)

        frames_group = QGroupBox("Frames")
        frames_layout = QVBoxLayout()

        nav_row = QHBoxLayout()
        self.prev_btn = QPushButton("<")
        self.prev_btn.setToolTip("Previous frame")
        self.prev_btn.clicked.connect(self.prev_clicked.emit)
        nav_row.addWidget(self.prev_btn)
        self.frame_label = QLabel("Frame 1 / 1")
        self.frame_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        nav_row.addWidget(self.frame_label, 1)
        self.next_btn = QPushButton(">")
        self.next_btn.setToolTip("Next frame")
        self.next_btn.clicked.connect(self.next_clicked.emit)
        nav_row.addWidget(self.next_btn)
        frames_layout.addLayout(nav_row)

        edit_row = QHBoxLayout()
        add_btn = QPushButton("Add")
        add_btn.clicked.connect(self.add_clicked.emit)
        edit_row.addWidget(add_btn)
        copy_btn = QPushButton("Copy")
        copy_btn.clicked.connect(self.copy_clicked.emit)
        edit_row.addWidget(copy_btn)
        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setEnabled(False)
        self.delete_btn.clicked.connect(self.delete_clicked.emit)
        edit_row.addWidget(self.delete_btn)
        frames_layout.addLayout(edit_row)

        frames_group.setLayout(frames_layout)
        layout.addWidget(frames_group)

        playback_group = QGroupBox("Playback")
        playback_layout = QVBoxLayout()

        controls = QHBoxLayout()
        self.play_btn = QPushButton("Play")
        self.play_btn.clicked.connect(lambda: self.play_toggled.emit(not self._playing))
        controls.addWidget(self.play_btn)
        controls.addWidget(QLabel("FPS:"))
        self.fps_spin = QSpinBox()
        self.fps_spin.setRange(1, MAX_FRAME_RATE)
        self.fps_spin.setValue(frame_rate)
        self.fps_spin.valueChanged.connect(self.fps_changed.emit)
        controls.addWidget(self.fps_spin)
        playback_layout.addLayout(controls)

        self.preview_label = QLabel()
        self.preview_label.setFixedSize(PREVIEW_SIZE, PREVIEW_SIZE)
        self.preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.preview_label.setStyleSheet("background-color: #F4F3F3; border: 1px solid black;")
        playback_layout.addWidget(self.preview_label, alignment=Qt.AlignmentFlag.AlignHCenter)

        playback_group.setLayout(playback_layout)
        layout.addWidget(playback_group)
        layout.addStretch()

    def set_frame_label(self, position: int, total: int):
        self.frame_label.setText(f"Frame {position} / {total}")
        self.prev_btn.setEnabled(position > 1)
        self.next_btn.setEnabled(position < total)

    def set_delete_enabled(self, enabled: bool):
        self.delete_btn.setEnabled(enabled)

    def set_playing(self, playing: bool):
        self._playing = playing
        self.play_btn.setText("Pause" if playing else "Play")

    def set_frame_rate(self, frame_rate: int):
        if self.fps_spin.value() != frame_rate:
            self.fps_spin.blockSignals(True)
            self.fps_spin.setValue(frame_rate)
            self.fps_spin.blockSignals(False)

    def show_preview(self, pixels):
        pixmap = QPixmap.fromImage(buffer_to_qimage(pixels)).scaled(
            PREVIEW_SIZE - 2, PREVIEW_SIZE - 2,
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.FastTransformation,
        )
        self.preview_label.setPixmap(pixmap)
