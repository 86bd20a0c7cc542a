#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Gradient Quantizer
================================================
Maps brightness in [0, 1] onto a character gradient.
"""

from typing import Union

import numpy as np

from ascii_art_renderer.constants import DEFAULT_GRADIENT


class GradientQuantizer:
    """
    Brightness to character mapping.

    The gradient is ordered sparse to dense. Without inversion bright
    cells map to sparse glyphs (dark ink on a light page); `invert=True`
    mirrors the mapping. The index is round-half-to-even of
    brightness * (N - 1), so exact mid-gray on an even-length gradient
    lands on the even neighbour.
    """

    def __init__(self, gradient: str = DEFAULT_GRADIENT, invert: bool = False):
        if not gradient:
            raise ValueError("Gradient must contain at least one character")
        self.gradient = gradient
        self.invert = invert
        self._lookup = np.array(list(gradient))

    def index(self, brightness: Union[float, np.ndarray]) -> Union[int, np.ndarray]:
        """Gradient index for a scalar or an array of brightness values."""
        last = len(self.gradient) - 1
        idx = np.rint(np.asarray(brightness, dtype=np.float64) * last).astype(np.int64)
        if not self.invert:
            idx = last - idx
        idx = np.clip(idx, 0, last)
        if idx.ndim == 0:
            return int(idx)
        return idx

    def char(self, brightness: float) -> str:
        return self.gradient[self.index(brightness)]

    def chars(self, brightness: np.ndarray) -> np.ndarray:
        """Character array with the same shape as `brightness`."""
        return self._lookup[self.index(brightness)]
