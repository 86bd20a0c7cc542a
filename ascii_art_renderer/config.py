#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Configuration
===========================================
Render settings and the recovering constructors used by the CLI.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union

from ascii_art_renderer.constants import (
    DEFAULT_CHAR_ASPECT_RATIO,
    DEFAULT_GRADIENT,
    DEFAULT_OUTPUT_WIDTH,
    CharacterSet,
)
from ascii_art_renderer.errors import InvalidConfig
from ascii_art_renderer.logging_setup import get_logger


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for one conversion. Never mutated once built."""

    output_width: int = DEFAULT_OUTPUT_WIDTH     # Requested columns
    invert: bool = False                         # Mirror the brightness mapping
    char_aspect_ratio: float = DEFAULT_CHAR_ASPECT_RATIO
    gradient: str = DEFAULT_GRADIENT             # Sparse to dense

    def __post_init__(self):
        if isinstance(self.output_width, bool) or not isinstance(self.output_width, int):
            raise InvalidConfig(f"Output width must be an integer, got {self.output_width!r}")
        if self.output_width <= 0:
            raise InvalidConfig(f"Output width must be positive, got {self.output_width}")
        if not _positive_finite(self.char_aspect_ratio):
            raise InvalidConfig(
                f"Character aspect ratio must be positive, got {self.char_aspect_ratio!r}"
            )
        if not self.gradient:
            raise InvalidConfig("Gradient must contain at least one character")

    @classmethod
    def build(cls,
              width: Union[int, str, None] = None,
              invert: bool = False,
              char_aspect_ratio: Union[float, str, None] = None,
              charset: Optional[str] = None,
              custom_charset: Optional[str] = None) -> 'RenderConfig':
        """
        Build a config, replacing bad values with defaults and a warning.

        Args:
            width: Output width (int or text); invalid values fall back to the default
            invert: Invert brightness mapping
            char_aspect_ratio: Character cell width/height
            charset: Preset name (see CharacterSet.names())
            custom_charset: Literal gradient, overrides `charset`
        """
        return cls(
            output_width=parse_width(width),
            invert=bool(invert),
            char_aspect_ratio=parse_aspect_ratio(char_aspect_ratio),
            gradient=resolve_gradient(charset, custom_charset),
        )


def _positive_finite(value) -> bool:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number) and number > 0


def parse_width(value: Union[int, str, None], default: int = DEFAULT_OUTPUT_WIDTH) -> int:
    """Parse a requested output width; unparsable or non-positive input yields `default`."""
    if value is None:
        return default
    try:
        width = int(str(value).strip())
    except ValueError:
        get_logger().warning("Invalid width %r; using default %d", value, default)
        return default
    if width <= 0:
        get_logger().warning("Width must be positive, got %d; using default %d", width, default)
        return default
    return width


def parse_aspect_ratio(value: Union[float, str, None],
                       default: float = DEFAULT_CHAR_ASPECT_RATIO) -> float:
    if value is None:
        return default
    if not _positive_finite(value):
        get_logger().warning("Invalid character aspect ratio %r; using default %s", value, default)
        return default
    return float(value)


def resolve_gradient(charset: Optional[str] = None, custom_charset: Optional[str] = None) -> str:
    """Pick the gradient from a custom string or a preset name."""
    if custom_charset:
        return custom_charset
    if charset is None:
        return DEFAULT_GRADIENT
    try:
        return CharacterSet.get_preset(charset)
    except KeyError:
        get_logger().warning(
            "Unknown charset %r; using default (choices: %s)",
            charset, ", ".join(CharacterSet.names()),
        )
        return DEFAULT_GRADIENT
