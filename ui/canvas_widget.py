"""
Canvas Widget
Displays the raster surface scaled to the widget and forwards mouse strokes
"""

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QRect, QSize
from PyQt6.QtGui import QPainter, QColor, QPen

from core.raster_surface import RasterSurface
from utils.image_utils import buffer_to_qimage

CHECKER_SIZE = 8
CHECKER_LIGHT = QColor(244, 243, 243)
CHECKER_DARK = QColor(214, 214, 214)


class CanvasWidget(QWidget):
    """Display backend for a RasterSurface"""

    def __init__(self, surface: RasterSurface, parent=None):
        super().__init__(parent)
        self.surface = surface
        self.surface.redraw_requested.connect(self.update)
        self.setMinimumSize(128, 128)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.CrossCursor)

    def sizeHint(self):
        return QSize(512, 512)

    def resizeEvent(self, event):
        self.surface.set_display_size(self.width(), self.height())
        super().resizeEvent(event)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.surface.begin_stroke((pos.x(), pos.y()))
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.MouseButton.LeftButton:
            pos = event.position()
            self.surface.continue_stroke((pos.x(), pos.y()))
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.surface.end_stroke((pos.x(), pos.y()))
            return
        super().mouseReleaseEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        rect = self.rect()
        self._paint_checkerboard(painter, rect)
        painter.drawImage(rect, buffer_to_qimage(self.surface.buffer))
        painter.setPen(QPen(QColor(0, 0, 0), 1))
        painter.drawRect(rect.adjusted(0, 0, -1, -1))

    def _paint_checkerboard(self, painter: QPainter, rect: QRect):
        painter.fillRect(rect, CHECKER_LIGHT)
        for y in range(0, rect.height(), CHECKER_SIZE):
            for x in range((y // CHECKER_SIZE) % 2 * CHECKER_SIZE, rect.width(), CHECKER_SIZE * 2):
                painter.fillRect(x, y, CHECKER_SIZE, CHECKER_SIZE, CHECKER_DARK)
