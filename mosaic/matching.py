"""Edge matching between adjacent tiles."""

import numpy as np

from mosaic.models import DimensionMismatch, PixelGrid


def _edges_equal(edge1: np.ndarray, edge2: np.ndarray, axis: str) -> bool:
    """
    Compare two touching edges pixel for pixel.

    Args:
        edge1: Edge of the first tile
        edge2: Edge of the second tile, read in the same direction
        axis: Name of the compared axis, used in the error message

    Returns:
        True if every pixel agrees, empty pixels included
    """
    if edge1.shape != edge2.shape:
        raise DimensionMismatch(
            message=f"Cannot compare edges of {axis} {len(edge1)} and {len(edge2)}",
            expected=edge1.shape,
            found=edge2.shape,
        )
    return bool(np.array_equal(edge1, edge2))


def horizontal_match(left: PixelGrid, right: PixelGrid) -> bool:
    """True if the right column of ``left`` equals the left column of ``right``."""
    return _edges_equal(left.right_column, right.left_column, "height")


def vertical_match(top: PixelGrid, bottom: PixelGrid) -> bool:
    """True if the bottom row of ``top`` equals the top row of ``bottom``."""
    return _edges_equal(top.bottom_row, bottom.top_row, "width")
