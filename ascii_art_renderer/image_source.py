#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Image Source
==========================================
Locating image files and decoding them into pixel buffers.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Union

from PIL import Image, UnidentifiedImageError

from ascii_art_renderer.constants import SUPPORTED_CHANNELS
from ascii_art_renderer.errors import DecodeFailure, ResourceNotFound
from ascii_art_renderer.logging_setup import get_logger
from ascii_art_renderer.pixels import PixelBuffer


def default_search_dirs() -> List[Path]:
    cwd = Path.cwd()
    return [cwd, cwd / "images", cwd / "assets"]


def resolve_resource(name: Union[str, Path], search_dirs: Optional[Iterable[Path]] = None) -> Path:
    """Return the first existing file for `name`, trying it as given then under each search dir."""
    candidate = Path(name)
    attempted = [candidate]
    if candidate.is_file():
        return candidate

    if not candidate.is_absolute():
        dirs = default_search_dirs() if search_dirs is None else search_dirs
        for directory in dirs:
            path = Path(directory) / candidate
            if path in attempted:
                continue
            attempted.append(path)
            if path.is_file():
                return path

    raise ResourceNotFound(str(name), attempted)


def load_pixels(path: Union[str, Path], channels: int = 1) -> PixelBuffer:
    """
    Decode an image file into a pixel buffer.

    Args:
        path: Image file
        channels: 1 for grayscale, 3 for RGB

    Returns:
        PixelBuffer holding the whole image

    Raises:
        ResourceNotFound: `path` is not an existing file
        DecodeFailure: The file is not a decodable, non-empty image
    """
    if channels not in SUPPORTED_CHANNELS:
        raise ValueError(f"Unsupported channel count: {channels}")

    path = Path(path)
    if not path.is_file():
        raise ResourceNotFound(str(path), [path])

    try:
        with Image.open(path) as image:
            image.load()
            if image.width == 0 or image.height == 0:
                raise DecodeFailure(path, "image has zero width or height")
            get_logger().debug("Loaded %s size=%s mode=%s", path, image.size, image.mode)
            return PixelBuffer.from_image(image, channels=channels)
    except UnidentifiedImageError as exc:
        raise DecodeFailure(path, "not a recognized image format") from exc
    except Image.DecompressionBombError as exc:
        raise DecodeFailure(path, str(exc)) from exc
    except (OSError, SyntaxError) as exc:
        raise DecodeFailure(path, str(exc) or exc.__class__.__name__) from exc
