"""
Image I/O utilities for the stipple edge-extraction pipeline.

This module provides:
    • load_images(path_pattern)
    • image_id_from_path(filename)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction so the detectors stay pure.
"""

import os
import glob
from typing import List, Tuple

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def image_id_from_path(filename: str) -> str:
    """
    Output prefix for an input file: its base name without extension.

    Example:
        'input/gloria_pickle.jpg' → 'gloria_pickle'
    """
    stem, _ = os.path.splitext(os.path.basename(filename))
    return stem or "image"


# -------------------------------------------------------------------------
#  IMAGE LOADING
# -------------------------------------------------------------------------

def load_images(path_pattern: str) -> Tuple[List[np.ndarray], List[str]]:
    """
    Loads all images matching the given glob pattern.

    Returns:
        images:  list of np.ndarray (BGR)
        names:   list of identifiers derived from filenames

    Unreadable files are reported and skipped.
    """

    file_list = sorted(glob.glob(path_pattern))
    images = []
    names = []

    for fname in file_list:
        img = cv2.imread(fname)
        if img is None:
            print(f"[WARN] Could not read {fname}. Skipping.")
            continue
        images.append(img)
        names.append(image_id_from_path(fname))

    return images, names


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    if not cv2.imwrite(path, image):
        raise IOError(f"Failed to write image to {path}")
