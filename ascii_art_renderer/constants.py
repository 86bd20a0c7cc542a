#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Constants
=======================================
Character gradients, luma weights and rendering defaults.
"""

from dataclasses import dataclass


# =============================================================================
# CHARACTER SETS
# =============================================================================

@dataclass(frozen=True)
class CharacterSet:
    """Predefined character gradients, all ordered sparse to dense."""

    CLASSIC: str = " .'`^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
    STANDARD: str = " .:-=+*#%@"
    DETAILED: str = " .'`^\",:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"
    BLOCKS: str = " ░▒▓█"
    SIMPLE: str = " .oO@"
    BINARY: str = " █"

    @classmethod
    def names(cls) -> tuple:
        return ('classic', 'standard', 'detailed', 'blocks', 'simple', 'binary')

    @classmethod
    def get_preset(cls, name: str) -> str:
        """Get character set by name, raising KeyError for unknown names."""
        presets = {
            'classic': cls.CLASSIC,
            'standard': cls.STANDARD,
            'detailed': cls.DETAILED,
            'blocks': cls.BLOCKS,
            'simple': cls.SIMPLE,
            'binary': cls.BINARY,
        }
        return presets[name.lower()]


# =============================================================================
# BRIGHTNESS
# =============================================================================

# Rec. 709 luma weights scaled to integers (0.2126, 0.7152, 0.0722)
LUMA_WEIGHTS = (2126, 7152, 722)
LUMA_WEIGHT_TOTAL = sum(LUMA_WEIGHTS)

# Weighted luma of a white pixel; dividing by this yields brightness in [0, 1]
LUMA_SCALE = LUMA_WEIGHT_TOTAL * 255


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_OUTPUT_WIDTH = 120
DEFAULT_CHAR_ASPECT_RATIO = 0.5          # Width/height of a monospace cell
DEFAULT_GRADIENT = CharacterSet.CLASSIC

SUPPORTED_CHANNELS = (1, 3)
