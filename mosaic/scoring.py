"""Scores derived from the assembled layout and the motif search."""

from math import prod

from mosaic.models import Coord, PixelGrid, Space


def corner_checksum(space: Space) -> int:
    """Product of the ids of the four corner tiles."""
    return prod(tile.tile_id for tile in space.corner_tiles())


def roughness(picture: PixelGrid, motif_coords: set[Coord]) -> int:
    """Filled pixels of ``picture`` that belong to no motif occurrence."""
    return picture.filled_count - len(motif_coords)
