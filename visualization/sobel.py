"""
Sobel gradient-magnitude image, kept next to the extracted chains as a
conventional edge map for comparison.

This module provides:
    • build_sobel_image(image)
"""

import cv2
import numpy as np


def build_sobel_image(image: np.ndarray) -> np.ndarray:
    """
    3x3 Sobel magnitude of the channel-mean gray image.

    Magnitudes above 255 saturate; the one-pixel border is left black.
    """
    if image.ndim == 3:
        gray = image[:, :, :3].astype(np.float64).mean(axis=2)
    else:
        gray = image.astype(np.float64)

    gx = cv2.Sobel(gray, cv2.CV_64F, 1, 0, ksize=3)
    gy = cv2.Sobel(gray, cv2.CV_64F, 0, 1, ksize=3)
    magnitude = np.clip(np.sqrt(gx ** 2 + gy ** 2), 0, 255).astype(np.uint8)

    magnitude[0, :] = 0
    magnitude[-1, :] = 0
    magnitude[:, 0] = 0
    magnitude[:, -1] = 0
    return magnitude
