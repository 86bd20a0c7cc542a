#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Pixel Buffer
==========================================
Immutable row-major view over decoded 8-bit samples.
"""

from dataclasses import dataclass
from typing import Tuple, Union

import numpy as np
from PIL import Image

from ascii_art_renderer.constants import SUPPORTED_CHANNELS


def _to_8bit(image: Image.Image) -> Image.Image:
    """
    Rescale high bit depth single-channel images to 8-bit 'L'.

    PIL's own conversion clips 16/32-bit samples at 255, so mid-gray would
    read as white. Integer modes keep their top 8 bits of a 16-bit range;
    float images are taken as [0, 1].
    """
    if image.mode == 'F':
        arr = np.rint(np.asarray(image, dtype=np.float64) * 255)
    elif image.mode == 'I' or image.mode.startswith('I;16'):
        arr = np.asarray(image).astype(np.int64) >> 8
    else:
        return image
    return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8))


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded image: one (grayscale) or three (RGB) bytes per pixel, top row first."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self):
        if self.channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"Unsupported channel count: {self.channels}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Pixel buffer must be non-empty, got {self.width}x{self.height}")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"Pixel data holds {len(self.data)} bytes, expected {expected}"
            )
        # Copy mutable inputs so the view can never change under the pipeline
        if not isinstance(self.data, bytes):
            object.__setattr__(self, 'data', bytes(self.data))

    @classmethod
    def from_image(cls, image: Image.Image, channels: int = 1) -> 'PixelBuffer':
        """Build a buffer from an open PIL image, flattening transparency onto white."""
        if channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"Unsupported channel count: {channels}")

        img = _to_8bit(image)
        if img.mode in ('RGBA', 'LA') or (img.mode == 'P' and 'transparency' in img.info):
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[3])
            img = background

        img = img.convert('L' if channels == 1 else 'RGB')
        return cls(width=img.width, height=img.height, channels=channels, data=img.tobytes())

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Union[int, Tuple[int, int, int]]:
        """Return the sample (grayscale) or RGB triplet at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} buffer")
        start = (y * self.width + x) * self.channels
        if self.channels == 1:
            return self.data[start]
        return tuple(self.data[start:start + 3])

    def as_array(self) -> np.ndarray:
        """Read-only array of shape (height, width) or (height, width, 3)."""
        arr = np.frombuffer(self.data, dtype=np.uint8)
        if self.channels == 1:
            return arr.reshape((self.height, self.width))
        return arr.reshape((self.height, self.width, self.channels))
