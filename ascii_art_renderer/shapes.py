#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Shapes
====================================
Fixed text shapes: squares, circles and scaled stamp patterns.
Every function returns the lines of the drawing without newlines.
"""

from typing import List, Sequence


def draw_square(size: int, char: str = '#', filled: bool = True) -> List[str]:
    """Square of `size` x `size` characters, optionally only the outline."""
    if size <= 0:
        return []
    lines = []
    for row in range(size):
        if filled or row in (0, size - 1):
            lines.append(char * size)
        else:
            lines.append(char + ' ' * (size - 2) + char)
    return lines


def draw_circle(radius: int, char: str = 'o', filled: bool = False) -> List[str]:
    """
    Circle of the given radius, stretched 2x horizontally so it looks round
    in a terminal.

    Args:
        radius: Radius in rows
        char: Drawing character
        filled: Fill the disc instead of drawing the outline

    Returns:
        2 * radius + 1 lines, each 4 * radius + 1 characters wide
    """
    if radius <= 0:
        return []

    x_scale = 2.0
    thickness = 0.85
    height = 2 * radius + 1
    width = int(2 * radius * x_scale) + 1
    r2 = float(radius * radius)

    lines = []
    for y in range(height):
        dy = y - radius
        row = []
        for x in range(width):
            dx = (x - (width - 1) / 2.0) / x_scale
            dist2 = dx * dx + dy * dy
            if filled:
                on = dist2 <= r2 + 0.25
            else:
                on = abs(dist2 - r2) <= thickness
            row.append(char if on else ' ')
        lines.append(''.join(row))
    return lines


def stamp_pattern(pattern: Sequence[str], scale_x: int = 1, scale_y: int = 1,
                  on: str = '#', off: str = ' ') -> List[str]:
    """
    Redraw a pattern with every non-space cell as `on`, scaled by whole factors.

    Rows shorter than the widest row are padded with `off`.
    """
    if not pattern or scale_x < 1 or scale_y < 1:
        return []

    columns = max(len(row) for row in pattern)
    lines = []
    for row in pattern:
        cells = [
            on if col < len(row) and row[col] != ' ' else off
            for col in range(columns)
        ]
        line = ''.join(cell * scale_x for cell in cells)
        lines.extend([line] * scale_y)
    return lines


HEART = (
    "  **   **  ",
    " **** **** ",
    "***********",
    " ********* ",
    "  *******  ",
    "   *****   ",
    "    ***    ",
    "     *     ",
)

SMILEY = (
    "  *****  ",
    " *     * ",
    "*  * *  *",
    "*       *",
    "*  ---  *",
    " *     * ",
    "  *****  ",
)
