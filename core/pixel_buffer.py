"""
Pixel buffer utilities
Grid snapping and block fills on RGBA numpy buffers
"""

from typing import Tuple

import numpy as np

from .data_structures import Color, TRANSPARENT


def snap_to_grid(coord: int, block_size: int) -> int:
    """
    Snap a buffer coordinate down to the nearest multiple of the block size

    Args:
        coord: Non-negative buffer coordinate
        block_size: Brush block size in pixels (>= 1)

    Returns:
        Largest multiple of block_size that is <= coord
    """
    return block_size * (coord // block_size)


def display_to_buffer(
    pos: float,
    display_size: int,
    buffer_size: int,
) -> int:
    """
    Convert one display-space coordinate into a clamped buffer coordinate

    Args:
        pos: Pointer coordinate in display space
        display_size: Size of the displayed surface along this axis
        buffer_size: Native buffer size along this axis

    Returns:
        Buffer coordinate in [0, buffer_size - 1]
    """
    scale = display_size / float(buffer_size)
    coord = int(pos / scale)
    return max(0, min(buffer_size - 1, coord))


def fill_block(buffer: np.ndarray, x: int, y: int, size: int, color: Color) -> Tuple[int, int, int, int]:
    """
    Fill a size x size block with a color, clipped to the buffer

    Returns:
        The (x, y, width, height) region actually written
    """
    height, width = buffer.shape[:2]
    x0, y0 = max(0, x), max(0, y)
    x1, y1 = min(width, x + size), min(height, y + size)
    if x1 <= x0 or y1 <= y0:
        return (x0, y0, 0, 0)
    buffer[y0:y1, x0:x1] = color
    return (x0, y0, x1 - x0, y1 - y0)


def clear_block(buffer: np.ndarray, x: int, y: int, size: int) -> Tuple[int, int, int, int]:
    """Erase a block to fully transparent pixels."""
    return fill_block(buffer, x, y, size, TRANSPARENT)
