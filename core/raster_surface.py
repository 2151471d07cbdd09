"""
Raster Surface
Brush state and pointer-to-pixel rasterization for the active frame
"""

from typing import Optional, Tuple

import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from .data_structures import BrushState, Color, Point, new_pixel_buffer, normalize_color
from .color_history import ColorHistory
from .pixel_buffer import display_to_buffer, snap_to_grid, fill_block, clear_block


class RasterSurface(QObject):
    """
    Working copy of the frame being edited plus the brush that paints on it.

    Pointer coordinates arrive in display space; the displayed surface may be
    a scaled view of the buffer. Every painted block is aligned to a grid of
    brush-sized cells in buffer space.
    """

    frame_updated = pyqtSignal(object)
    redraw_requested = pyqtSignal()
    current_color_changed = pyqtSignal(object)
    history_changed = pyqtSignal(list)
    message_logged = pyqtSignal(str, str)

    def __init__(self, width: int, height: int, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.buffer: np.ndarray = new_pixel_buffer(max(1, width), max(1, height))
        self.brush = BrushState()
        self.history = ColorHistory()
        self._display_size: Optional[Tuple[int, int]] = None

    # ------------------------------------------------------------------ #
    # Geometry
    # ------------------------------------------------------------------ #
    @property
    def buffer_size(self) -> Tuple[int, int]:
        return int(self.buffer.shape[1]), int(self.buffer.shape[0])

    @property
    def display_size(self) -> Tuple[int, int]:
        return self._display_size or self.buffer_size

    def set_display_size(self, width: int, height: int):
        """Record the on-screen size of the surface (the scaled view)."""
        self._display_size = (max(1, int(width)), max(1, int(height)))

    def cell_for_point(self, point: Point) -> Tuple[int, int]:
        """
        Map a display-space point to the top-left corner of its brush cell

        Args:
            point: (x, y) pointer position in display coordinates

        Returns:
            (x, y) buffer coordinates, each a multiple of the brush size
        """
        buffer_w, buffer_h = self.buffer_size
        display_w, display_h = self.display_size
        bx = display_to_buffer(point[0], display_w, buffer_w)
        by = display_to_buffer(point[1], display_h, buffer_h)
        size = self.brush.size
        return snap_to_grid(bx, size), snap_to_grid(by, size)

    # ------------------------------------------------------------------ #
    # Strokes
    # ------------------------------------------------------------------ #
    def begin_stroke(self, point: Point) -> bool:
        if not self.brush.can_draw or self.brush.drawing:
            return False
        self.brush.drawing = True
        self.brush.last_pos = (point[0], point[1])
        # lets the store snapshot the frame before it changes
        self.frame_updated.emit(self.buffer)
        return True

    def continue_stroke(self, point: Point) -> bool:
        if not self.brush.drawing or not self.brush.can_draw:
            return False
        self._paint_block(point)
        self.frame_updated.emit(self.buffer)
        return True

    def end_stroke(self, point: Point) -> bool:
        if not self.brush.drawing:
            return False
        painted = self.brush.can_draw
        if painted:
            self._paint_block(point)
        self.brush.drawing = False
        if painted:
            self.frame_updated.emit(self.buffer)
        return painted

    def _paint_block(self, point: Point):
        x, y = self.cell_for_point(point)
        if self.brush.eraser:
            clear_block(self.buffer, x, y, self.brush.size)
        else:
            fill_block(self.buffer, x, y, self.brush.size, self.brush.color)
        self.brush.last_pos = (point[0], point[1])
        self.redraw_requested.emit()

    # ------------------------------------------------------------------ #
    # Brush state
    # ------------------------------------------------------------------ #
    def set_brush_size(self, size: int):
        size = int(size)
        if size < 1:
            self.message_logged.emit(f"Brush size {size} is invalid, using 1", "WARNING")
            size = 1
        self.brush.size = size

    def select_color(self, color: Color):
        self.brush.color = normalize_color(color)
        self.brush.eraser = False

    def enable_eraser(self):
        self.brush.eraser = True

    def disable_eraser(self):
        self.brush.eraser = False

    def set_can_draw(self, enabled: bool):
        self.brush.can_draw = bool(enabled)

    def pick_color(self, color: Color):
        """
        Apply a color chosen in the color dialog and record it in the history

        Emits the new current color and the full history, newest first.
        """
        color = normalize_color(color)
        self.brush.color = color
        self.brush.eraser = False
        self.history.add(color)
        self.current_color_changed.emit(color)
        self.history_changed.emit(self.history.colors())

    def select_from_history(self, slot: int) -> bool:
        color = self.history.get(slot) if 0 <= slot < self.history.capacity else None
        if color is None:
            return False
        self.brush.color = color
        self.brush.eraser = False
        self.current_color_changed.emit(color)
        return True

    # ------------------------------------------------------------------ #
    # Display
    # ------------------------------------------------------------------ #
    def show_frame(self, pixels: np.ndarray):
        """Replace the working buffer with a copy of a frame from the store."""
        self.buffer = np.array(pixels, dtype=np.uint8, copy=True)
        self.redraw_requested.emit()
