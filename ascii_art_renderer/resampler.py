#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Resampler
=======================================
Area-averaging (box filter) resampling of a brightness grid onto the
output character grid.

Each output cell covers a rectangle of whole source pixels. Row and
column bands are computed with integer arithmetic:

    start = floor(i * size / count)
    end   = ceil((i + 1) * size / count)

so consecutive bands always abut or overlap by one pixel and every
source pixel belongs to at least one band. Cell means come from a
summed-area table, so each cell costs four lookups regardless of size.
"""

from typing import List, Tuple

import numpy as np

from ascii_art_renderer.constants import LUMA_SCALE


def clamp_output_width(requested: int, source_width: int) -> int:
    """Output width is limited to [1, source_width]; images are never upscaled."""
    return max(1, min(int(requested), source_width))


def output_size(source_width: int, source_height: int,
                output_width: int, char_aspect_ratio: float) -> Tuple[int, int]:
    """
    Compute the character grid size for a source image.

    Args:
        source_width: Image width in pixels
        source_height: Image height in pixels
        output_width: Requested columns (clamped to the source width)
        char_aspect_ratio: Width/height of one character cell

    Returns:
        (columns, rows)
    """
    columns = clamp_output_width(output_width, source_width)
    rows = max(1, round(source_height * (columns / source_width) * char_aspect_ratio))
    return columns, rows


def band(index: int, count: int, size: int) -> Tuple[int, int]:
    """Half-open source range [start, end) covered by output row/column `index`."""
    start = (index * size) // count
    end = -((-(index + 1) * size) // count)
    start = min(max(start, 0), size - 1)
    end = min(max(end, start + 1), size)
    return start, end


def bands(count: int, size: int) -> List[Tuple[int, int]]:
    return [band(i, count, size) for i in range(count)]


def _summed_area(values: np.ndarray) -> np.ndarray:
    table = np.zeros((values.shape[0] + 1, values.shape[1] + 1), dtype=np.int64)
    table[1:, 1:] = values.cumsum(axis=0).cumsum(axis=1)
    return table


def box_average(luma: np.ndarray, columns: int, rows: int) -> np.ndarray:
    """
    Mean brightness of every output cell.

    Args:
        luma: Integer weighted luma, shape (height, width)
        columns: Output width in characters
        rows: Output height in characters

    Returns:
        Float array of shape (rows, columns) with values in [0, 1]
    """
    height, width = luma.shape
    table = _summed_area(luma)

    row_bands = np.array(bands(rows, height), dtype=np.int64)
    col_bands = np.array(bands(columns, width), dtype=np.int64)
    y0, y1 = row_bands[:, 0][:, None], row_bands[:, 1][:, None]
    x0, x1 = col_bands[:, 0][None, :], col_bands[:, 1][None, :]

    totals = table[y1, x1] - table[y0, x1] - table[y1, x0] + table[y0, x0]
    counts = (y1 - y0) * (x1 - x0)
    return totals / (counts * LUMA_SCALE)
