"""
Frame Store
Owns the frame sequence, the edit/play cursors and the playback state machine
"""

from typing import List, Optional

import numpy as np
from PyQt6.QtCore import QObject, pyqtSignal

from .data_structures import Frame, PlaybackState, ProjectData

DEFAULT_FRAME_RATE = 12
MIN_FRAME_RATE = 1
MAX_FRAME_RATE = 60


class FrameStore(QObject):
    """
    Ordered, never-empty sequence of frames and the playback controller.

    The store never performs timing itself: an external timer calls
    increment_animation() while the store reports PLAYING, and the
    animation_started / animation_paused signals tell it when to run.
    """

    edit_frame_changed = pyqtSignal(object)
    animation_frame_changed = pyqtSignal(object)
    preview_frame_changed = pyqtSignal(object)
    frame_label_changed = pyqtSignal(int, int)
    animation_started = pyqtSignal()
    animation_paused = pyqtSignal()
    can_draw_changed = pyqtSignal(bool)
    frame_rate_updated = pyqtSignal(int)
    delete_enabled = pyqtSignal(bool)
    message_logged = pyqtSignal(str, str)

    def __init__(
        self,
        width: int,
        height: int,
        frame_rate: int = DEFAULT_FRAME_RATE,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.frame_width = max(1, int(width))
        self.frame_height = max(1, int(height))
        self.frame_rate = max(MIN_FRAME_RATE, min(MAX_FRAME_RATE, int(frame_rate)))
        self.frames: List[Frame] = [Frame.blank(self.frame_width, self.frame_height)]
        self.edit_cursor = 0
        self.play_cursor = 0
        self.preview_cursor = 0
        self.state = PlaybackState.STOPPED
        self.deleting = False
        self._resume_after_delete = False

    # ------------------------------------------------------------------ #
    # Accessors
    # ------------------------------------------------------------------ #
    def __len__(self) -> int:
        return len(self.frames)

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    def frame_pixels(self, index: int) -> np.ndarray:
        return self.frames[index].pixels

    def current_pixels(self) -> np.ndarray:
        return self.frames[self.edit_cursor].pixels

    def project_data(self) -> ProjectData:
        """Snapshot of everything the persistence layer needs."""
        return ProjectData(
            frame_rate=self.frame_rate,
            frame_width=self.frame_width,
            frame_height=self.frame_height,
            frames=[frame.pixels.copy() for frame in self.frames],
        )

    # ------------------------------------------------------------------ #
    # Sequence editing
    # ------------------------------------------------------------------ #
    def add_frame(self):
        """Append a blank frame; cursors stay where they are."""
        self.frames.append(Frame.blank(self.frame_width, self.frame_height))
        self._emit_label()
        self.delete_enabled.emit(True)

    def copy_frame(self):
        """Duplicate the edit frame right after itself and move the edit cursor onto the copy."""
        duplicate = self.frames[self.edit_cursor].copy()
        self.frames.insert(self.edit_cursor + 1, duplicate)
        self.edit_cursor += 1
        self._emit_edit_frame()
        self.delete_enabled.emit(True)

    def delete_frame(self) -> bool:
        """
        Remove the frame at the edit cursor

        Playback is suspended around the removal and restored afterwards, so
        no animation tick can observe the sequence mid-change. The last
        remaining frame is never removed.

        Returns:
            True if a frame was deleted
        """
        if len(self.frames) <= 1:
            self.message_logged.emit("Cannot delete the only frame", "WARNING")
            self.delete_enabled.emit(False)
            return False
        if self.deleting:
            return False

        self._resume_after_delete = self.state == PlaybackState.PLAYING
        self.deleting = True
        self.state = PlaybackState.PENDING_RESUME_AFTER_DELETE
        if self._resume_after_delete:
            self.animation_paused.emit()

        removed = self.edit_cursor
        del self.frames[removed]
        last = len(self.frames) - 1
        self.edit_cursor = min(self.edit_cursor, last)
        self.play_cursor = min(self.play_cursor, last)
        self.preview_cursor = min(self.preview_cursor, last)
        self.message_logged.emit(f"Deleted frame {removed + 1}", "INFO")

        self.start_animation_after_delete()
        self.delete_enabled.emit(len(self.frames) > 1)
        return True

    def start_animation_after_delete(self):
        """Leave the pending-delete state and restore the pre-delete playback status."""
        if self.state != PlaybackState.PENDING_RESUME_AFTER_DELETE:
            return
        self.deleting = False
        if self._resume_after_delete:
            self.state = PlaybackState.PLAYING
            self.animation_started.emit()
            self.animation_frame_changed.emit(self.frames[self.play_cursor].pixels)
            self._emit_label()
        else:
            self.state = PlaybackState.STOPPED
            self._emit_edit_frame()
        self._resume_after_delete = False

    def receive_updated_canvas_frame(self, pixels: np.ndarray):
        """Store the surface's working buffer as the content of the edit frame."""
        expected = (self.frame_height, self.frame_width, 4)
        if pixels.shape != expected:
            self.message_logged.emit(
                f"Ignoring canvas frame of shape {pixels.shape}, expected {expected}", "WARNING"
            )
            return
        self.frames[self.edit_cursor] = Frame(np.array(pixels, dtype=np.uint8, copy=True))

    def restore(self, project: ProjectData):
        """
        Replace the whole sequence with frames loaded from disk

        Args:
            project: Loaded project; an empty frame list yields one blank frame
        """
        if self.is_playing:
            self.pause_animation()
        self.frame_width = max(1, int(project.frame_width))
        self.frame_height = max(1, int(project.frame_height))
        expected = (self.frame_height, self.frame_width, 4)
        frames = [Frame(np.array(p, dtype=np.uint8, copy=True)) for p in project.frames if p.shape == expected]
        if len(frames) != len(project.frames):
            self.message_logged.emit(
                f"Dropped {len(project.frames) - len(frames)} frame(s) with the wrong size", "WARNING"
            )
        if not frames:
            frames = [Frame.blank(self.frame_width, self.frame_height)]
        self.frames = frames
        self.edit_cursor = 0
        self.play_cursor = 0
        self.preview_cursor = 0
        self.frame_rate_changed(project.frame_rate)
        self._emit_edit_frame()
        self.delete_enabled.emit(len(self.frames) > 1)

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #
    def next_frame(self) -> bool:
        if self.edit_cursor >= len(self.frames) - 1:
            return False
        self.edit_cursor += 1
        self._emit_edit_frame()
        return True

    def prev_frame(self) -> bool:
        if self.edit_cursor <= 0:
            return False
        self.edit_cursor -= 1
        self._emit_edit_frame()
        return True

    # ------------------------------------------------------------------ #
    # Playback
    # ------------------------------------------------------------------ #
    def start_animation(self) -> bool:
        if self.state != PlaybackState.STOPPED:
            return False
        self.state = PlaybackState.PLAYING
        self.can_draw_changed.emit(False)
        self.animation_started.emit()
        return True

    def pause_animation(self) -> bool:
        if self.state != PlaybackState.PLAYING:
            return False
        self.state = PlaybackState.STOPPED
        self.animation_paused.emit()
        self.can_draw_changed.emit(True)
        # the surface was showing playback frames; hand it the edit frame again
        self._emit_edit_frame()
        return True

    def set_playing(self, playing: bool) -> bool:
        return self.start_animation() if playing else self.pause_animation()

    def increment_animation(self):
        """Advance the play cursor by one, wrapping at the end of the sequence."""
        if self.deleting:
            return
        self.play_cursor = (self.play_cursor + 1) % len(self.frames)
        self.animation_frame_changed.emit(self.frames[self.play_cursor].pixels)

    def increment_preview_animation(self):
        if self.deleting:
            return
        self.preview_cursor = (self.preview_cursor + 1) % len(self.frames)
        self.preview_frame_changed.emit(self.frames[self.preview_cursor].pixels)

    def frame_rate_changed(self, rate: int):
        rate = int(rate)
        if rate < MIN_FRAME_RATE:
            self.message_logged.emit(f"Frame rate {rate} is invalid, using {MIN_FRAME_RATE}", "WARNING")
            rate = MIN_FRAME_RATE
        elif rate > MAX_FRAME_RATE:
            self.message_logged.emit(f"Frame rate {rate} is too high, using {MAX_FRAME_RATE}", "WARNING")
            rate = MAX_FRAME_RATE
        self.frame_rate = rate
        self.frame_rate_updated.emit(rate)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _emit_label(self):
        self.frame_label_changed.emit(self.edit_cursor + 1, len(self.frames))

    def _emit_edit_frame(self):
        self.edit_frame_changed.emit(self.frames[self.edit_cursor].pixels)
        self._emit_label()
