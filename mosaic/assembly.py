"""Assembly of unordered, unoriented tiles into a single layout."""

import logging
from collections import deque

from tqdm import tqdm

from mosaic.matching import horizontal_match, vertical_match
from mosaic.models import (
    AssemblyStuck,
    Coord,
    DimensionMismatch,
    Orientation,
    Space,
    Tile,
    iter_orientations,
)

logger = logging.getLogger(__name__)


class AssemblyParams:
    """Parameters for the assembly engine."""

    def __init__(
        self,
        show_progress: bool = False,
        check_dimensions: bool = True,
    ):
        self.show_progress = show_progress
        self.check_dimensions = check_dimensions


def validate_tiles(tiles: list[Tile]) -> None:
    """
    Check that all tiles share one shape and carry distinct ids.

    Args:
        tiles: Tiles to assemble

    Raises:
        DimensionMismatch: If a tile differs in shape from the first one
        ValueError: If two tiles share an id
    """
    expected = tiles[0].pixels.shape
    for tile in tiles[1:]:
        if tile.pixels.shape != expected:
            raise DimensionMismatch(
                message=(
                    f"Tile {tile.tile_id} is {tile.width}x{tile.height}, "
                    f"expected {expected[1]}x{expected[0]}"
                ),
                expected=expected,
                found=tile.pixels.shape,
            )

    seen: set[int] = set()
    for tile in tiles:
        if tile.tile_id in seen:
            raise ValueError(f"Duplicate tile id: {tile.tile_id}")
        seen.add(tile.tile_id)


def tile_fits(space: Space, tile: Tile, coord: Coord) -> bool:
    """
    Check whether ``tile``, as oriented, can go at ``coord``.

    The coordinate must be free, touch at least one placed tile, and every
    touching edge must match. A tile touching nothing is rejected so the
    layout stays connected.
    """
    if coord in space:
        return False

    x, y = coord
    touches = False

    left = space.get((x - 1, y))
    if left is not None:
        touches = True
        if not horizontal_match(left, tile):
            return False

    right = space.get((x + 1, y))
    if right is not None:
        touches = True
        if not horizontal_match(tile, right):
            return False

    top = space.get((x, y + 1))
    if top is not None:
        touches = True
        if not vertical_match(top, tile):
            return False

    bottom = space.get((x, y - 1))
    if bottom is not None:
        touches = True
        if not vertical_match(tile, bottom):
            return False

    return touches


def find_placement(space: Space, tile: Tile) -> tuple[Coord, Orientation, Tile] | None:
    """
    Scan the frontier of ``space`` for a place to put ``tile``.

    Coordinates are visited in scan order and, at each one, orientations in
    canonical order; the first feasible pair wins.

    Args:
        space: Current placement of tiles
        tile: Candidate tile in its given orientation

    Returns:
        (coordinate, orientation, oriented tile), or None if nothing fits
    """
    orientations = list(iter_orientations(tile))
    for coord in space.candidate_coords():
        if coord in space or not space.neighbours(coord):
            continue
        for orientation, oriented in orientations:
            if tile_fits(space, oriented, coord):
                return coord, orientation, oriented
    return None


def assemble(tiles: list[Tile], params: AssemblyParams | None = None) -> Space:
    """
    Place every tile into a connected layout with matching edges.

    The first tile seeds the layout at (0, 0) untransformed. Remaining tiles
    are taken round-robin from a queue: a tile is placed at the first
    feasible frontier position or sent to the back of the queue. Placed
    tiles never move again.

    Args:
        tiles: Tiles to assemble, in input order
        params: Assembly parameters (uses defaults if None)

    Returns:
        Space holding every tile in its winning orientation

    Raises:
        AssemblyStuck: If a full pass over the queue places no tile
    """
    if params is None:
        params = AssemblyParams()

    if not tiles:
        raise ValueError("At least 1 tile is required")

    if params.check_dimensions:
        validate_tiles(tiles)

    queue = deque(tiles)
    space = Space()
    seed = queue.popleft()
    space.place((0, 0), seed)
    logger.info(f"Assembling {len(tiles)} tiles, seeded with tile {seed.tile_id}")

    # Consecutive attempts without a placement
    stalled = 0

    with tqdm(
        total=len(tiles),
        desc="Placing tiles",
        unit="tile",
        disable=not params.show_progress,
    ) as pbar:
        pbar.update(1)
        while queue:
            tile = queue.popleft()
            placement = find_placement(space, tile)

            if placement is None:
                queue.append(tile)
                stalled += 1
                logger.debug(f"Deferred tile {tile.tile_id} ({stalled}/{len(queue)})")
                if stalled >= len(queue):
                    raise AssemblyStuck(
                        message=(
                            f"No tile could be placed after a full pass; "
                            f"{len(space)} placed, {len(queue)} remaining"
                        ),
                        placed=len(space),
                        remaining_ids=[t.tile_id for t in queue],
                    )
                continue

            coord, orientation, oriented = placement
            space.place(coord, oriented)
            stalled = 0
            pbar.update(1)
            logger.debug(f"Placed tile {tile.tile_id} at {coord} ({orientation.name})")

    logger.info(f"Assembled {space.columns}x{space.rows} layout")
    return space
