"""
Image to ASCII Art Renderer
===========================
Converts raster images into character grids whose local density follows
the image's local brightness.
"""

from ascii_art_renderer.config import RenderConfig
from ascii_art_renderer.constants import CharacterSet
from ascii_art_renderer.errors import (
    AsciiArtError,
    DecodeFailure,
    InvalidConfig,
    ResourceNotFound,
    SpeechUnavailable,
)
from ascii_art_renderer.image_source import load_pixels, resolve_resource
from ascii_art_renderer.pixels import PixelBuffer
from ascii_art_renderer.quantizer import GradientQuantizer
from ascii_art_renderer.renderer import AsciiArtGenerator, AsciiArtResult, file_to_ascii, image_to_ascii

__all__ = [
    "AsciiArtError",
    "AsciiArtGenerator",
    "AsciiArtResult",
    "CharacterSet",
    "DecodeFailure",
    "GradientQuantizer",
    "InvalidConfig",
    "PixelBuffer",
    "RenderConfig",
    "ResourceNotFound",
    "SpeechUnavailable",
    "file_to_ascii",
    "image_to_ascii",
    "load_pixels",
    "resolve_resource",
]

__version__ = "0.1.0"
