"""Unit tests for brush rasterization on the raster surface."""

import numpy as np
import pytest

from core.data_structures import TRANSPARENT, pack_rgba
from core.pixel_buffer import snap_to_grid, display_to_buffer, fill_block
from core.raster_surface import RasterSurface

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
GRAY = (128, 128, 128, 255)


def painted_mask(buffer):
    return buffer[:, :, 3] > 0


def stroke(surface, *points):
    surface.begin_stroke(points[0])
    for point in points[1:-1]:
        surface.continue_stroke(point)
    surface.end_stroke(points[-1])


@pytest.fixture
def surface():
    s = RasterSurface(100, 100)
    s.select_color(RED)
    return s


class TestPixelBufferHelpers:
    """Test the pure grid and fill helpers."""

    def test_snap_to_grid(self):
        assert snap_to_grid(23, 10) == 20
        assert snap_to_grid(20, 10) == 20
        assert snap_to_grid(7, 1) == 7

    def test_display_to_buffer_scales_and_clamps(self):
        assert display_to_buffer(46, 200, 100) == 23
        assert display_to_buffer(-3, 200, 100) == 0
        assert display_to_buffer(500, 200, 100) == 99

    def test_fill_block_clips_to_buffer(self):
        buffer = np.zeros((10, 10, 4), dtype=np.uint8)
        region = fill_block(buffer, 8, 8, 5, RED)
        assert region == (8, 8, 2, 2)
        assert painted_mask(buffer).sum() == 4


class TestRasterization:
    """Test block placement."""

    def test_block_snaps_to_brush_grid(self, surface):
        surface.set_brush_size(10)
        stroke(surface, (23, 47), (23, 47))
        mask = painted_mask(surface.buffer)
        assert mask[40:50, 20:30].all()
        assert mask.sum() == 100
        assert tuple(surface.buffer[45, 25]) == RED

    def test_scaled_display(self, surface):
        surface.set_brush_size(10)
        surface.set_display_size(200, 400)
        assert surface.cell_for_point((46, 188)) == (20, 40)

    @pytest.mark.parametrize("brush", [1, 2, 3, 7, 10, 16])
    def test_cell_is_multiple_of_brush(self, surface, brush):
        surface.set_brush_size(brush)
        surface.set_display_size(317, 251)
        for x in range(0, 317, 13):
            for y in range(0, 251, 11):
                cx, cy = surface.cell_for_point((x, y))
                assert cx % brush == 0
                assert cy % brush == 0

    def test_out_of_bounds_point_is_clamped(self, surface):
        surface.set_brush_size(30)
        stroke(surface, (500, -20), (500, -20))
        mask = painted_mask(surface.buffer)
        assert mask[0:30, 90:100].all()
        assert mask.sum() == 300

    def test_eraser_clears_to_transparent(self, surface):
        surface.set_brush_size(4)
        stroke(surface, (0, 0), (0, 0), (5, 5))
        surface.enable_eraser()
        stroke(surface, (5, 5), (5, 5))
        assert tuple(surface.buffer[5, 5]) == TRANSPARENT
        assert tuple(surface.buffer[0, 0]) == RED

    def test_brush_size_zero_is_clamped(self, surface, record):
        logged = record(surface.message_logged)
        surface.set_brush_size(0)
        assert surface.brush.size == 1
        assert logged.last[1] == "WARNING"


class TestStrokeLifecycle:
    """Test begin/continue/end gating and notifications."""

    def test_begin_does_not_paint_but_notifies(self, surface, record):
        updates = record(surface.frame_updated)
        assert surface.begin_stroke((10, 10))
        assert surface.brush.drawing
        assert updates.count == 1
        assert not painted_mask(surface.buffer).any()

    def test_begin_twice_is_rejected(self, surface):
        assert surface.begin_stroke((1, 1))
        assert not surface.begin_stroke((2, 2))

    def test_continue_without_begin_is_ignored(self, surface):
        assert not surface.continue_stroke((10, 10))
        assert not painted_mask(surface.buffer).any()

    def test_each_move_flushes_buffer(self, surface, record):
        updates = record(surface.frame_updated)
        stroke(surface, (0, 0), (10, 10), (20, 20), (30, 30))
        assert updates.count == 4
        assert not surface.brush.drawing
        assert np.array_equal(updates.last[0], surface.buffer)

    def test_cannot_draw_while_animating(self, surface):
        surface.set_can_draw(False)
        assert not surface.begin_stroke((10, 10))
        assert not surface.brush.drawing

    def test_release_after_playback_started_finalizes_without_painting(self, surface, record):
        surface.begin_stroke((10, 10))
        surface.set_can_draw(False)
        updates = record(surface.frame_updated)
        assert not surface.end_stroke((10, 10))
        assert not surface.brush.drawing
        assert updates.count == 0
        assert not painted_mask(surface.buffer).any()

    def test_show_frame_takes_a_copy(self, surface):
        frame = np.zeros((100, 100, 4), dtype=np.uint8)
        surface.show_frame(frame)
        stroke(surface, (0, 0), (0, 0))
        assert not frame.any()


class TestColorSelection:
    """Test pick_color / select_from_history."""

    def test_pick_sequence_history(self, surface, record):
        history = record(surface.history_changed)
        for color in (RED, GREEN, BLUE, WHITE, GRAY):
            surface.pick_color(color)
        assert history.last[0] == [GRAY, WHITE, BLUE, GREEN]
        assert surface.history.members() == {pack_rgba(c) for c in (GREEN, BLUE, WHITE, GRAY)}

    def test_pick_color_disables_eraser(self, surface, record):
        current = record(surface.current_color_changed)
        surface.enable_eraser()
        surface.pick_color(BLUE)
        assert not surface.brush.eraser
        assert surface.brush.color == BLUE
        assert current.last[0] == BLUE

    def test_select_from_history(self, surface):
        surface.pick_color(GREEN)
        surface.pick_color(BLUE)
        surface.enable_eraser()
        assert surface.select_from_history(1)
        assert surface.brush.color == GREEN
        assert not surface.brush.eraser

    def test_select_empty_slot_is_noop(self, surface):
        surface.pick_color(GREEN)
        surface.enable_eraser()
        assert not surface.select_from_history(3)
        assert not surface.select_from_history(7)
        assert surface.brush.color == GREEN
        assert surface.brush.eraser

    def test_rgb_color_gets_opaque_alpha(self, surface):
        surface.select_color((1, 2, 3))
        assert surface.brush.color == (1, 2, 3, 255)
