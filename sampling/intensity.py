"""
Intensity sampling over a raster image.

This module provides:
    • ImageIntensitySampler.at(x, y)
    • ImageIntensitySampler.sample(xs, ys)   (vectorised)

Brightness is the plain channel mean (r + g + b) / 3, in [0, 255].
Out-of-bounds coordinates are clamped to the image extent.
"""

import numpy as np

from utils.geometry import clamp


class ImageIntensitySampler:
    """
    Wraps a BGR or grayscale image as a brightness lookup.
    """

    def __init__(self, image: np.ndarray):
        if image is None or image.size == 0:
            raise ValueError("Intensity sampler needs a non-empty image")

        if image.ndim == 3:
            # channel order does not matter for a plain mean
            self.brightness = image[:, :, :3].astype(np.float64).mean(axis=2)
        else:
            self.brightness = image.astype(np.float64)

        self.height, self.width = self.brightness.shape[:2]

    def at(self, x, y) -> float:
        """
        Brightness at integer pixel (x, y), clamped into the image.
        """
        cx = clamp(int(x), 0, self.width - 1)
        cy = clamp(int(y), 0, self.height - 1)
        return float(self.brightness[cy, cx])

    def sample(self, xs, ys) -> np.ndarray:
        """
        Vectorised `at` for arrays of (possibly fractional) coordinates.
        Coordinates are floored before clamping.
        """
        cx = np.clip(np.floor(xs).astype(np.int64), 0, self.width - 1)
        cy = np.clip(np.floor(ys).astype(np.int64), 0, self.height - 1)
        return self.brightness[cy, cx]

    def darkness(self) -> np.ndarray:
        """Per-pixel weight 1 - brightness/255 (dark pixels weigh most)."""
        return 1.0 - self.brightness / 255.0
