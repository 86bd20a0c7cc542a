#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Errors
====================================
Exception types raised by the renderer and its collaborators.
"""

from pathlib import Path
from typing import Sequence, Union


class AsciiArtError(Exception):
    """Base class for every error this package raises on purpose."""


class ResourceNotFound(AsciiArtError, FileNotFoundError):
    def __init__(self, name: str, attempted: Sequence[Path]):
        self.name = name
        self.attempted = tuple(attempted)
        locations = ", ".join(str(p) for p in self.attempted) or "<none>"
        super().__init__(f"Image not found: {name} (searched: {locations})")


class DecodeFailure(AsciiArtError, ValueError):
    def __init__(self, path: Union[Path, str], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to load image: {path} ({reason})")


class InvalidConfig(AsciiArtError, ValueError):
    """Rejected render setting. Recovering constructors substitute a default."""


class SpeechUnavailable(AsciiArtError, RuntimeError):
    """No text-to-speech executable could be found for this platform."""
