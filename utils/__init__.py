"""
Utility Functions

Provides the shared geometry primitives, the Bresenham wrapper and
image I/O utilities used across detectors and visualization.
"""

from .geometry import distance, within_tolerance, lerp, clamp
from .bresenham_utils import bres_line
from .image_io import load_images, image_id_from_path, ensure_output_dir, save_image

__all__ = [
    "distance",
    "within_tolerance",
    "lerp",
    "clamp",
    "bres_line",
    "load_images",
    "image_id_from_path",
    "ensure_output_dir",
    "save_image",
]
