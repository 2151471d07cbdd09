"""
Project I/O
Loading and saving flipbook projects, and GIF export
"""

import json
from typing import Dict, List

import numpy as np
from PIL import Image

from core.data_structures import ProjectData
from core.frame_store import MIN_FRAME_RATE, MAX_FRAME_RATE
from .image_utils import buffer_to_pil

PROJECT_EXTENSION = '.ssp'
GIF_COLORS = 256
TRANSPARENCY_THRESHOLD = 128


class ProjectFormatError(ValueError):
    """Raised when a project file does not have the expected structure."""


def project_to_dict(project: ProjectData) -> Dict:
    """
    Convert a project into its JSON-serializable form

    Args:
        project: Project to serialize

    Returns:
        Dictionary with frame rate, size and per-frame RGBA rows
    """
    return {
        'frameRate': int(project.frame_rate),
        'width': int(project.frame_width),
        'height': int(project.frame_height),
        'numberOfFrames': project.number_of_frames,
        'frames': {
            f'frame{index}': pixels.astype(int).tolist()
            for index, pixels in enumerate(project.frames)
        },
    }


def project_from_dict(data: Dict) -> ProjectData:
    """
    Build a project from parsed JSON

    Raises:
        ProjectFormatError: if a key is missing or a frame has the wrong shape
    """
    if not isinstance(data, dict):
        raise ProjectFormatError("Project file must contain a JSON object")
    try:
        width = int(data['width'])
        height = int(data['height'])
        count = int(data['numberOfFrames'])
        raw_frames = data['frames']
    except (KeyError, TypeError, ValueError) as e:
        raise ProjectFormatError(f"Missing or invalid project field: {e}") from e
    frame_rate = data.get('frameRate', MIN_FRAME_RATE)

    if width < 1 or height < 1:
        raise ProjectFormatError(f"Invalid frame size {width}x{height}")
    if count < 1:
        raise ProjectFormatError("Project has no frames")
    if not isinstance(raw_frames, dict):
        raise ProjectFormatError("'frames' must be an object keyed frame0..frameN")

    frames: List[np.ndarray] = []
    for index in range(count):
        key = f'frame{index}'
        if key not in raw_frames:
            raise ProjectFormatError(f"Missing {key}")
        try:
            pixels = np.array(raw_frames[key], dtype=np.int64)
        except (TypeError, ValueError) as e:
            raise ProjectFormatError(f"{key} is not a pixel grid: {e}") from e
        if pixels.shape != (height, width, 4):
            raise ProjectFormatError(
                f"{key} has shape {pixels.shape}, expected {(height, width, 4)}"
            )
        frames.append(np.clip(pixels, 0, 255).astype(np.uint8))

    try:
        frame_rate = max(MIN_FRAME_RATE, min(MAX_FRAME_RATE, int(frame_rate)))
    except (TypeError, ValueError):
        frame_rate = MIN_FRAME_RATE

    return ProjectData(
        frame_rate=frame_rate,
        frame_width=width,
        frame_height=height,
        frames=frames,
    )


def save_project(path: str, project: ProjectData):
    """Write a project to disk as JSON."""
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(project_to_dict(project), f)


def load_project(path: str) -> ProjectData:
    """
    Load a project from a JSON file

    Raises:
        ProjectFormatError: if the file is not valid project JSON
        OSError: if the file cannot be read
    """
    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except UnicodeDecodeError as e:
            raise ProjectFormatError(f"Not a text project file: {e}") from e
        except json.JSONDecodeError as e:
            raise ProjectFormatError(f"Invalid JSON: {e}") from e
    return project_from_dict(data)


def _to_palette_frame(pixels: np.ndarray) -> Image.Image:
    """Quantize one RGBA frame, reserving the last palette index for transparency."""
    image = buffer_to_pil(pixels)
    alpha = np.array(image.getchannel('A'))
    palette_image = image.convert('RGB').convert(
        'P', palette=Image.Palette.ADAPTIVE, colors=GIF_COLORS - 1
    )
    transparent_index = GIF_COLORS - 1
    palette = palette_image.getpalette() or []
    while len(palette) < transparent_index * 3 + 3:
        palette.extend([0, 0, 0])
    palette[transparent_index * 3:transparent_index * 3 + 3] = [255, 0, 255]

    palette_array = np.array(palette_image)
    palette_array[alpha < TRANSPARENCY_THRESHOLD] = transparent_index
    final_image = Image.fromarray(palette_array.astype(np.uint8))
    final_image.putpalette(palette)
    final_image.info['transparency'] = transparent_index
    return final_image


def export_gif(path: str, project: ProjectData, scale: int = 1):
    """
    Export the animation as a looping GIF

    Args:
        path: Output file
        project: Frames and frame rate to export
        scale: Integer upscale factor (nearest neighbour)
    """
    if not project.frames:
        raise ProjectFormatError("Nothing to export")
    scale = max(1, int(scale))
    frames = []
    for pixels in project.frames:
        if scale > 1:
            pixels = np.repeat(np.repeat(pixels, scale, axis=0), scale, axis=1)
        frames.append(_to_palette_frame(pixels))

    frame_duration = int(1000 / max(MIN_FRAME_RATE, project.frame_rate))
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=frame_duration,
        loop=0,
        transparency=GIF_COLORS - 1,
        disposal=2,
    )
