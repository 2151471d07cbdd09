"""
Utils module for Pixel Flipbook
Contains utility functions for project files, image conversion, and settings
"""

from .project_io import (
    ProjectFormatError,
    load_project,
    save_project,
    export_gif,
)
from .image_utils import buffer_to_qimage, buffer_to_pil
from .settings import SettingsManager, EditorDefaults

__all__ = [
    'ProjectFormatError',
    'load_project',
    'save_project',
    'export_gif',
    'buffer_to_qimage',
    'buffer_to_pil',
    'SettingsManager',
    'EditorDefaults',
]
