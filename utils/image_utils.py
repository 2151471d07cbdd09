"""
Image conversion helpers
Bridges RGBA numpy buffers to QImage (display) and PIL (export)
"""

import numpy as np
from PIL import Image
from PyQt6.QtGui import QImage


def buffer_to_qimage(pixels: np.ndarray) -> QImage:
    """
    Wrap an RGBA buffer in a QImage

    The returned image owns a copy of the data, so the buffer may keep
    changing afterwards.
    """
    data = np.ascontiguousarray(pixels, dtype=np.uint8)
    height, width = data.shape[:2]
    image = QImage(data.tobytes(), width, height, width * 4, QImage.Format.Format_RGBA8888)
    return image.copy()


def buffer_to_pil(pixels: np.ndarray) -> Image.Image:
    return Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
