#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Renderer
======================================
Runs brightness extraction, resampling and quantization over a pixel
buffer and assembles the resulting character grid into text lines.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Tuple, Union
import sys

import numpy as np
from PIL import Image

from ascii_art_renderer.brightness import weighted_luma
from ascii_art_renderer.config import RenderConfig
from ascii_art_renderer.image_source import load_pixels
from ascii_art_renderer.logging_setup import get_logger
from ascii_art_renderer.pixels import PixelBuffer
from ascii_art_renderer.quantizer import GradientQuantizer
from ascii_art_renderer.resampler import box_average, output_size


@dataclass
class AsciiArtResult:
    """Result of ASCII art generation."""
    text: str                                          # Lines, each ending in a newline
    lines: List[str]                                   # Lines of ASCII art
    width: int = 0                                     # Output width
    height: int = 0                                    # Output height
    original_size: Tuple[int, int] = (0, 0)            # Original image size


class AsciiArtGenerator:
    """Main class for generating ASCII art from pixel buffers."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize with optional configuration."""
        self.config = config or RenderConfig()
        self.quantizer = GradientQuantizer(self.config.gradient, invert=self.config.invert)

    def grid_size(self, buffer: PixelBuffer) -> Tuple[int, int]:
        """(columns, rows) of the output grid for `buffer`."""
        return output_size(buffer.width, buffer.height,
                           self.config.output_width, self.config.char_aspect_ratio)

    def cell_brightness(self, buffer: PixelBuffer) -> np.ndarray:
        """Mean brightness per output cell, shape (rows, columns)."""
        columns, rows = self.grid_size(buffer)
        return box_average(weighted_luma(buffer), columns, rows)

    def iter_lines(self, buffer: PixelBuffer) -> Iterator[str]:
        """
        Yield output lines top to bottom, without newlines.

        Cell values are computed up front; only joining is lazy. A consumer
        that writes lines as they arrive keeps whatever it wrote if it
        fails part way through.
        """
        chars = self.quantizer.chars(self.cell_brightness(buffer))
        for row in chars:
            yield ''.join(row)

    def generate(self, buffer: PixelBuffer) -> AsciiArtResult:
        """
        Generate ASCII art from a pixel buffer.

        Args:
            buffer: Decoded grayscale or RGB pixels

        Returns:
            AsciiArtResult with every line of the rendering
        """
        columns, rows = self.grid_size(buffer)
        lines = list(self.iter_lines(buffer))
        get_logger().debug("Rendered %dx%d source as %dx%d characters",
                           buffer.width, buffer.height, columns, rows)

        return AsciiArtResult(
            text=''.join(line + '\n' for line in lines),
            lines=lines,
            width=columns,
            height=rows,
            original_size=buffer.size,
        )

    def write(self, buffer: PixelBuffer, stream: Optional[TextIO] = None) -> int:
        """Stream the rendering to `stream` (stdout by default); returns rows written."""
        out = stream if stream is not None else sys.stdout
        count = 0
        for line in self.iter_lines(buffer):
            out.write(line + '\n')
            count += 1
        return count


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def image_to_ascii(image: Image.Image,
                   width: Union[int, str, None] = None,
                   charset: Optional[str] = None,
                   invert: bool = False,
                   channels: int = 3,
                   **kwargs) -> AsciiArtResult:
    """
    Convenience function to convert a PIL image to ASCII art.

    Args:
        image: PIL Image
        width: Output width (default if None or invalid)
        charset: Character set preset name
        invert: Invert brightness
        channels: 1 to average grayscale samples, 3 to average RGB luma
        **kwargs: Additional RenderConfig.build options

    Returns:
        AsciiArtResult
    """
    config = RenderConfig.build(width=width, invert=invert, charset=charset, **kwargs)
    buffer = PixelBuffer.from_image(image, channels=channels)
    return AsciiArtGenerator(config).generate(buffer)


def file_to_ascii(path: Union[str, Path],
                  width: Union[int, str, None] = None,
                  charset: Optional[str] = None,
                  invert: bool = False,
                  channels: int = 3,
                  **kwargs) -> AsciiArtResult:
    """Same as image_to_ascii, decoding `path` first."""
    config = RenderConfig.build(width=width, invert=invert, charset=charset, **kwargs)
    buffer = load_pixels(path, channels=channels)
    return AsciiArtGenerator(config).generate(buffer)
