"""
Core module for Pixel Flipbook
Contains data structures, brush rasterization and the frame store
"""

from .data_structures import (
    Color,
    Frame,
    BrushState,
    PlaybackState,
    ProjectData,
    pack_rgba,
    unpack_rgba,
    new_pixel_buffer,
)
from .color_history import ColorHistory
from .raster_surface import RasterSurface
from .frame_store import FrameStore

__all__ = [
    'Color',
    'Frame',
    'BrushState',
    'PlaybackState',
    'ProjectData',
    'pack_rgba',
    'unpack_rgba',
    'new_pixel_buffer',
    'ColorHistory',
    'RasterSurface',
    'FrameStore',
]
