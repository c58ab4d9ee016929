"""Motif search across the orientations of the assembled picture."""

import logging
from collections.abc import Iterable

import numpy as np

from mosaic.config import FILLED_MARKER, MOTIF_PATTERN
from mosaic.models import Coord, Orientation, PatternNotFound, PixelGrid, iter_orientations

logger = logging.getLogger(__name__)


class Motif:
    """
    Immutable set of relative pixel offsets.

    Offsets are shifted so the smallest x and y are both 0, then kept as a
    sorted tuple.
    """

    def __init__(self, offsets: Iterable[Coord]):
        points = {(int(x), int(y)) for x, y in offsets}
        if not points:
            raise ValueError("A motif needs at least one filled pixel")
        x0 = min(x for x, _ in points)
        y0 = min(y for _, y in points)
        self.offsets: tuple[Coord, ...] = tuple(sorted((x - x0, y - y0) for x, y in points))
        self.width = max(x for x, _ in self.offsets) + 1
        self.height = max(y for _, y in self.offsets) + 1

    @classmethod
    def from_lines(cls, lines: Iterable[str], filled: str = FILLED_MARKER) -> "Motif":
        """Build a motif from ASCII art given top row first."""
        rows = list(lines)
        return cls(
            (x, len(rows) - 1 - row)
            for row, line in enumerate(rows)
            for x, char in enumerate(line)
            if char == filled
        )

    def at(self, x: int, y: int) -> set[Coord]:
        """Absolute coordinates of the motif anchored at (x, y)."""
        return {(x + dx, y + dy) for dx, dy in self.offsets}

    def __len__(self):
        return len(self.offsets)

    def __eq__(self, other):
        if not isinstance(other, Motif):
            return NotImplemented
        return self.offsets == other.offsets

    def __hash__(self):
        return hash(self.offsets)

    def __repr__(self):
        return f"Motif(pixels={len(self.offsets)}, width={self.width}, height={self.height})"


SEA_MONSTER = Motif.from_lines(MOTIF_PATTERN)


class MotifSearch:
    """Result of searching a picture for a motif."""

    def __init__(self, orientation: Orientation, picture: PixelGrid, coords: set[Coord]):
        self.orientation = orientation
        self.picture = picture
        self.coords = coords

    def __repr__(self):
        return (
            f"MotifSearch(orientation={self.orientation.name}, "
            f"coords={len(self.coords)})"
        )


def find_motif_coords(picture: PixelGrid, motif: Motif) -> set[Coord]:
    """
    Collect the pixels of every motif occurrence in ``picture``.

    An anchor matches when every offset added to it lands on a filled pixel;
    offsets falling outside the picture never match. All anchors are tested
    at once, one boolean AND per offset.

    Args:
        picture: Picture in a fixed orientation
        motif: Motif to look for

    Returns:
        Absolute (x, y) coordinates covered by any occurrence
    """
    rows = picture.height - motif.height + 1
    cols = picture.width - motif.width + 1
    if rows <= 0 or cols <= 0:
        return set()

    hits = np.ones((rows, cols), dtype=bool)
    for dx, dy in motif.offsets:
        hits &= picture.pixels[dy : dy + rows, dx : dx + cols]

    coords: set[Coord] = set()
    for y, x in np.argwhere(hits):
        coords |= motif.at(int(x), int(y))
    return coords


def search_motif(picture: PixelGrid, motif: Motif = SEA_MONSTER) -> MotifSearch:
    """
    Look for ``motif`` in each orientation of ``picture`` in canonical order.

    The first orientation with at least one occurrence wins; later
    orientations are not examined.

    Raises:
        PatternNotFound: If no orientation contains the motif
    """
    for orientation, oriented in iter_orientations(picture):
        coords = find_motif_coords(oriented, motif)
        logger.debug(f"Orientation {orientation.name}: {len(coords)} motif pixels")
        if coords:
            logger.info(f"Found motif in orientation {orientation.name}: {len(coords)} pixels")
            return MotifSearch(orientation, oriented, coords)

    raise PatternNotFound(
        message="Motif not found in any orientation of the picture",
        motif_size=len(motif),
        picture_shape=(picture.width, picture.height),
    )
