"""Stitching assembled tiles into one picture."""

import logging

import numpy as np

from mosaic.models import DimensionMismatch, IncompleteLayout, PixelGrid, Space

logger = logging.getLogger(__name__)


def compose_picture(space: Space) -> PixelGrid:
    """
    Build the composite picture from the interiors of the placed tiles.

    The outer ring of every tile is dropped; what remains is copied to an
    offset given by the tile's position in the bounding box, so the result
    has no trace of tile boundaries or ids.

    Args:
        space: Fully assembled layout

    Returns:
        Composite picture, origin at the bottom left

    Raises:
        IncompleteLayout: If the bounding box has holes
        DimensionMismatch: If the tiles do not all share one shape
    """
    missing = space.missing_coords()
    if not space.tiles or missing:
        raise IncompleteLayout(
            message=f"Cannot compose a picture with {len(missing)} empty position(s)",
            missing=missing,
        )

    first = space.tiles[(space.xmin, space.ymin)]
    shape = first.pixels.shape
    if min(shape) < 3:
        raise ValueError(f"Tiles of {shape[1]}x{shape[0]} pixels have no interior")

    inner_h, inner_w = shape[0] - 2, shape[1] - 2
    picture = np.zeros((space.rows * inner_h, space.columns * inner_w), dtype=bool)

    for x in range(space.xmin, space.xmax + 1):
        for y in range(space.ymin, space.ymax + 1):
            tile = space.tiles[(x, y)]
            if tile.pixels.shape != shape:
                raise DimensionMismatch(
                    message=f"Tile {tile.tile_id} at {(x, y)} differs in size",
                    expected=shape,
                    found=tile.pixels.shape,
                )
            row = (y - space.ymin) * inner_h
            col = (x - space.xmin) * inner_w
            picture[row : row + inner_h, col : col + inner_w] = tile.pixels[1:-1, 1:-1]

    logger.info(f"Composed {picture.shape[1]}x{picture.shape[0]} picture")
    return PixelGrid(picture)
