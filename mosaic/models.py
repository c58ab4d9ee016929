"""Data models for tiles, orientations and the assembly space."""

from collections.abc import Iterator
from enum import Enum

import numpy as np

Coord = tuple[int, int]


class PixelGrid:
    """
    Boolean pixel grid addressed by (x, y).

    The origin is the bottom-left pixel, so ``pixels[y, x]`` holds the pixel
    at (x, y) and ``pixels[0]`` is the bottom row. Grids are values: the
    backing array is read-only and every transform returns a new grid.
    """

    def __init__(self, pixels: np.ndarray):
        grid = np.array(pixels, dtype=bool)
        if grid.ndim != 2:
            raise ValueError(f"Expected a 2-D pixel grid, got {grid.ndim} dimension(s)")
        grid.setflags(write=False)
        self.pixels = grid

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @property
    def xmax(self) -> int:
        return self.width - 1

    @property
    def ymax(self) -> int:
        return self.height - 1

    @property
    def filled_count(self) -> int:
        """Number of filled pixels."""
        return int(np.count_nonzero(self.pixels))

    def get(self, x: int, y: int) -> bool:
        """Return the pixel at (x, y), or False outside the grid."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return bool(self.pixels[y, x])
        return False

    def filled_coords(self) -> set[Coord]:
        """Return the (x, y) coordinates of every filled pixel."""
        return {(int(x), int(y)) for y, x in np.argwhere(self.pixels)}

    # Edges, columns read bottom to top and rows left to right
    @property
    def left_column(self) -> np.ndarray:
        return self.pixels[:, 0]

    @property
    def right_column(self) -> np.ndarray:
        return self.pixels[:, -1]

    @property
    def bottom_row(self) -> np.ndarray:
        return self.pixels[0, :]

    @property
    def top_row(self) -> np.ndarray:
        return self.pixels[-1, :]

    def rotate(self) -> "PixelGrid":
        """Rotate a quarter turn: (x, y) moves to (height - 1 - y, x)."""
        return self._with_pixels(np.fliplr(self.pixels.T))

    def flip(self) -> "PixelGrid":
        """Mirror horizontally: (x, y) moves to (xmax - x, y)."""
        return self._with_pixels(np.fliplr(self.pixels))

    def _with_pixels(self, pixels: np.ndarray) -> "PixelGrid":
        return PixelGrid(pixels)

    def __eq__(self, other):
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self.pixels.shape == other.pixels.shape and bool(
            np.array_equal(self.pixels, other.pixels)
        )

    def __repr__(self):
        return f"PixelGrid(width={self.width}, height={self.height}, filled={self.filled_count})"


class Tile(PixelGrid):
    """A pixel grid carrying the identifier of a puzzle tile."""

    def __init__(self, tile_id: int, pixels: np.ndarray):
        super().__init__(pixels)
        self.tile_id = tile_id

    def _with_pixels(self, pixels: np.ndarray) -> "Tile":
        return Tile(self.tile_id, pixels)

    def __eq__(self, other):
        if not isinstance(other, Tile):
            return NotImplemented
        return self.tile_id == other.tile_id and super().__eq__(other)

    def __repr__(self):
        return f"Tile(tile_id={self.tile_id}, width={self.width}, height={self.height})"


class Orientation(Enum):
    """
    The eight symmetries of a square grid, in canonical search order.

    The order is the one produced by stepping through the group one call at a
    time: three rotations, one flip, then three more rotations.
    """
    identity = 0
    r1 = 1
    r2 = 2
    r3 = 3
    flip = 4
    flip_r1 = 5
    flip_r2 = 6
    flip_r3 = 7

    @property
    def rotations(self) -> int:
        return self.value % 4

    @property
    def is_reflection(self) -> bool:
        return self.value >= 4

    def apply(self, grid: PixelGrid) -> PixelGrid:
        """Build this orientation of ``grid`` from scratch."""
        result = grid
        if self.is_reflection:
            for _ in range(3):
                result = result.rotate()
            result = result.flip()
        for _ in range(self.rotations):
            result = result.rotate()
        return result


def iter_orientations(grid: PixelGrid) -> Iterator[tuple[Orientation, PixelGrid]]:
    """
    Yield every orientation of ``grid`` in canonical order.

    Each step applies a single rotate or flip to the previous grid, so the
    transforms compose cumulatively.
    """
    current = grid
    for orientation in Orientation:
        if orientation is Orientation.flip:
            current = current.flip()
        elif orientation is not Orientation.identity:
            current = current.rotate()
        yield orientation, current


class Space:
    """Sparse map of placed tiles keyed by integer (x, y) coordinates."""

    def __init__(self):
        self.tiles: dict[Coord, Tile] = {}
        self.xmin = 0
        self.xmax = 0
        self.ymin = 0
        self.ymax = 0

    def __len__(self):
        return len(self.tiles)

    def __contains__(self, coord: Coord):
        return coord in self.tiles

    def get(self, coord: Coord) -> Tile | None:
        return self.tiles.get(coord)

    @property
    def columns(self) -> int:
        return self.xmax - self.xmin + 1 if self.tiles else 0

    @property
    def rows(self) -> int:
        return self.ymax - self.ymin + 1 if self.tiles else 0

    def place(self, coord: Coord, tile: Tile) -> None:
        """Insert a tile and grow the bounding box to include it."""
        if coord in self.tiles:
            raise ValueError(f"Coordinate {coord} is already occupied")
        x, y = coord
        if not self.tiles:
            self.xmin = self.xmax = x
            self.ymin = self.ymax = y
        else:
            self.xmin = min(self.xmin, x)
            self.xmax = max(self.xmax, x)
            self.ymin = min(self.ymin, y)
            self.ymax = max(self.ymax, y)
        self.tiles[coord] = tile

    def candidate_coords(self) -> Iterator[Coord]:
        """Scan the bounding box grown by one, x ascending then y ascending."""
        for x in range(self.xmin - 1, self.xmax + 2):
            for y in range(self.ymin - 1, self.ymax + 2):
                yield (x, y)

    def neighbours(self, coord: Coord) -> list[Tile]:
        """Placed tiles to the left, right, top and bottom of ``coord``."""
        x, y = coord
        return [
            self.tiles[neighbour]
            for neighbour in ((x - 1, y), (x + 1, y), (x, y + 1), (x, y - 1))
            if neighbour in self.tiles
        ]

    def missing_coords(self) -> list[Coord]:
        """Coordinates inside the bounding box that hold no tile."""
        if not self.tiles:
            return []
        return [
            (x, y)
            for x in range(self.xmin, self.xmax + 1)
            for y in range(self.ymin, self.ymax + 1)
            if (x, y) not in self.tiles
        ]

    @property
    def is_complete(self) -> bool:
        return bool(self.tiles) and len(self.tiles) == self.columns * self.rows

    def corner_tiles(self) -> list[Tile]:
        """Return the tiles at the four corners of the bounding box."""
        corners = [
            (self.xmax, self.ymax),
            (self.xmax, self.ymin),
            (self.xmin, self.ymax),
            (self.xmin, self.ymin),
        ]
        missing = [coord for coord in corners if coord not in self.tiles]
        if missing:
            raise IncompleteLayout(
                message="Layout has no tile at one or more corners",
                missing=missing,
            )
        return [self.tiles[coord] for coord in corners]

    def layout(self) -> list[list[int | None]]:
        """Tile ids row by row, top row first."""
        return [
            [
                self.tiles[(x, y)].tile_id if (x, y) in self.tiles else None
                for x in range(self.xmin, self.xmax + 1)
            ]
            for y in range(self.ymax, self.ymin - 1, -1)
        ]

    def __repr__(self):
        return (
            f"Space(tiles={len(self.tiles)}, x=[{self.xmin}, {self.xmax}], "
            f"y=[{self.ymin}, {self.ymax}])"
        )


class MosaicError(Exception):
    """Base class for failures of the tile assembly pipeline."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ParseError(MosaicError):
    """Exception raised when the tile text format is malformed."""

    def __init__(self, message: str, block_index: int | None = None, line: str | None = None):
        self.block_index = block_index
        self.line = line
        super().__init__(message)


class DimensionMismatch(MosaicError):
    """Exception raised when tiles that must line up have different sizes."""

    def __init__(self, message: str, expected: tuple[int, ...], found: tuple[int, ...]):
        self.expected = expected
        self.found = found
        super().__init__(message)


class AssemblyStuck(MosaicError):
    """Exception raised when a full pass over the queue places no tile."""

    def __init__(self, message: str, placed: int, remaining_ids: list[int]):
        self.placed = placed
        self.remaining_ids = remaining_ids
        super().__init__(message)


class IncompleteLayout(MosaicError):
    """Exception raised when the assembled layout is not a full rectangle."""

    def __init__(self, message: str, missing: list[Coord]):
        self.missing = missing
        super().__init__(message)


class PatternNotFound(MosaicError):
    """Exception raised when no orientation of the picture contains the motif."""

    def __init__(self, message: str, motif_size: int, picture_shape: tuple[int, int]):
        self.motif_size = motif_size
        self.picture_shape = picture_shape
        super().__init__(message)
