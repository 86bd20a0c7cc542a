#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Brightness
========================================
Pixel to brightness conversion.

RGB pixels use the Rec. 709 luma weights directly on the 8-bit samples.
No gamma linearization is applied, so the result is an approximation of
perceived lightness rather than true relative luminance.

Brightness is carried as an integer "weighted luma" until the final
division by LUMA_SCALE. Sums over many pixels then stay exact, and a
constant region averages to exactly the same float as a single pixel.
"""

from typing import Sequence, Union

import numpy as np

from ascii_art_renderer.constants import LUMA_SCALE, LUMA_WEIGHT_TOTAL, LUMA_WEIGHTS
from ascii_art_renderer.pixels import PixelBuffer


def pixel_luma(pixel: Union[int, Sequence[int]]) -> int:
    """Integer weighted luma of a grayscale sample or an (R, G, B) triplet."""
    if isinstance(pixel, (int, np.integer)):
        return int(pixel) * LUMA_WEIGHT_TOTAL
    r, g, b = pixel
    wr, wg, wb = LUMA_WEIGHTS
    return wr * int(r) + wg * int(g) + wb * int(b)


def pixel_brightness(pixel: Union[int, Sequence[int]]) -> float:
    """
    Brightness of one pixel in [0, 1].

    Args:
        pixel: Grayscale sample (0-255) or (R, G, B) triplet

    Returns:
        sample/255 for grayscale, 0.2126*R + 0.7152*G + 0.0722*B on
        normalized channels for RGB
    """
    return pixel_luma(pixel) / LUMA_SCALE


def weighted_luma(buffer: PixelBuffer) -> np.ndarray:
    """Integer weighted luma for every pixel, shape (height, width), dtype int64."""
    arr = buffer.as_array().astype(np.int64)
    if buffer.channels == 1:
        return arr * LUMA_WEIGHT_TOTAL
    weights = np.array(LUMA_WEIGHTS, dtype=np.int64)
    return arr @ weights


def brightness_map(buffer: PixelBuffer) -> np.ndarray:
    """Per-pixel brightness in [0, 1] as float64."""
    return weighted_luma(buffer) / LUMA_SCALE
