"""
Playback Timer
Drives frame store animation ticks from a QTimer
"""

from typing import Callable, Optional

from PyQt6.QtCore import QObject, QTimer

from core.frame_store import FrameStore


def interval_for_rate(frame_rate: int) -> int:
    """Milliseconds between ticks for a frame rate (never below 1 ms)."""
    return max(1, round(1000 / max(1, int(frame_rate))))


class PlaybackTimer(QObject):
    """
    Periodically calls a frame store tick while playback is running.

    Follows the store's animation_started / animation_paused signals and
    re-times itself when the frame rate changes.
    """

    def __init__(
        self,
        store: FrameStore,
        tick: Optional[Callable[[], None]] = None,
        follow_playback: bool = True,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self.store = store
        self._timer = QTimer(self)
        self._timer.setInterval(interval_for_rate(store.frame_rate))
        self._timer.timeout.connect(tick or store.increment_animation)
        store.frame_rate_updated.connect(self.set_frame_rate)
        if follow_playback:
            store.animation_started.connect(self.start)
            store.animation_paused.connect(self.stop)

    @property
    def interval(self) -> int:
        return self._timer.interval()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def set_frame_rate(self, frame_rate: int):
        self._timer.setInterval(interval_for_rate(frame_rate))

    def start(self):
        self._timer.start()

    def stop(self):
        self._timer.stop()
