"""
Data structures for Pixel Flipbook
Defines the core data types used throughout the application
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple, Optional

import numpy as np


Color = Tuple[int, int, int, int]
Point = Tuple[float, float]

TRANSPARENT: Color = (0, 0, 0, 0)
BLACK: Color = (0, 0, 0, 255)


def pack_rgba(color: Color) -> int:
    """
    Pack an RGBA tuple into a single 0xAARRGGBB integer

    Args:
        color: (r, g, b, a) tuple, each channel 0-255

    Returns:
        Packed integer usable as a set/dict key
    """
    r, g, b, a = (int(c) & 0xFF for c in color)
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack_rgba(value: int) -> Color:
    """Inverse of pack_rgba."""
    return (
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
        (value >> 24) & 0xFF,
    )


def normalize_color(color) -> Color:
    """Clamp any 3/4 element sequence to a valid RGBA tuple (alpha defaults to 255)."""
    channels = [max(0, min(255, int(c))) for c in color]
    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"Expected 3 or 4 color channels, got {len(channels)}")
    return tuple(channels)


def new_pixel_buffer(width: int, height: int) -> np.ndarray:
    """Create a fully transparent RGBA buffer of the given size."""
    return np.zeros((height, width, 4), dtype=np.uint8)


@dataclass
class Frame:
    """One frame of the animation: a single RGBA pixel buffer"""
    pixels: np.ndarray

    @classmethod
    def blank(cls, width: int, height: int) -> "Frame":
        return cls(new_pixel_buffer(width, height))

    def copy(self) -> "Frame":
        """Deep copy of the frame's pixels."""
        return Frame(self.pixels.copy())


class PlaybackState(Enum):
    """Playback states of the frame store"""
    STOPPED = auto()
    PLAYING = auto()
    PENDING_RESUME_AFTER_DELETE = auto()


@dataclass
class BrushState:
    """Current brush settings and stroke progress"""
    color: Color = BLACK
    size: int = 1
    eraser: bool = False
    drawing: bool = False
    can_draw: bool = True
    last_pos: Optional[Point] = None


@dataclass
class ProjectData:
    """Aggregate exchanged with the persistence layer"""
    frame_rate: int
    frame_width: int
    frame_height: int
    frames: List[np.ndarray] = field(default_factory=list)

    @property
    def number_of_frames(self) -> int:
        return len(self.frames)
