"""Unit tests for the QTimer-driven playback collaborator."""

from core.frame_store import FrameStore
from ui.playback_timer import PlaybackTimer, interval_for_rate


class TestIntervalForRate:
    """Test tick interval computation."""

    def test_common_rates(self):
        assert interval_for_rate(12) == 83
        assert interval_for_rate(25) == 40
        assert interval_for_rate(1) == 1000

    def test_invalid_rate_does_not_divide_by_zero(self):
        assert interval_for_rate(0) == 1000


class TestPlaybackTimer:
    """Test that the timer follows the store's playback signals."""

    def test_follows_start_and_pause(self):
        store = FrameStore(2, 2)
        timer = PlaybackTimer(store)
        assert not timer.is_active()
        store.start_animation()
        assert timer.is_active()
        store.pause_animation()
        assert not timer.is_active()

    def test_retimes_on_frame_rate_change(self):
        store = FrameStore(2, 2, frame_rate=12)
        timer = PlaybackTimer(store)
        assert timer.interval == 83
        store.frame_rate_changed(50)
        assert timer.interval == 20

    def test_preview_timer_ignores_playback(self):
        store = FrameStore(2, 2)
        ticks = []
        timer = PlaybackTimer(store, tick=lambda: ticks.append(1), follow_playback=False)
        store.start_animation()
        assert not timer.is_active()
        timer.start()
        assert timer.is_active()
        timer.stop()
