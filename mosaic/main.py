"""Main pipeline: assemble tiles, compose the picture, search it and score it."""

import argparse
import logging
import sys
from pathlib import Path

from mosaic.assembly import AssemblyParams, assemble
from mosaic.compositing import compose_picture
from mosaic.config import LOG_FORMAT
from mosaic.models import MosaicError, PixelGrid, Space, Tile
from mosaic.parsing import load_motif, load_tiles
from mosaic.scoring import corner_checksum, roughness
from mosaic.search import SEA_MONSTER, Motif, MotifSearch, search_motif

logger = logging.getLogger(__name__)


class MosaicResult:
    """Everything produced by one run of the pipeline."""

    def __init__(
        self,
        space: Space,
        picture: PixelGrid,
        search: MotifSearch,
        checksum: int,
        roughness: int,
    ):
        self.space = space
        self.picture = picture
        self.search = search
        self.checksum = checksum
        self.roughness = roughness

    def __repr__(self):
        return (
            f"MosaicResult(checksum={self.checksum}, roughness={self.roughness}, "
            f"layout={self.space.columns}x{self.space.rows})"
        )


def solve_tiles(
    tiles: list[Tile],
    motif: Motif = SEA_MONSTER,
    params: AssemblyParams | None = None,
) -> MosaicResult:
    """
    Run the full pipeline on parsed tiles.

    Args:
        tiles: Tiles in input order; the first one seeds the layout
        motif: Motif to search the picture for
        params: Assembly parameters (uses defaults if None)

    Returns:
        MosaicResult with the corner checksum and the roughness
    """
    space = assemble(tiles, params)
    checksum = corner_checksum(space)
    logger.info(f"Corner checksum: {checksum}")

    picture = compose_picture(space)
    search = search_motif(picture, motif)
    score = roughness(picture, search.coords)
    logger.info(f"Roughness: {score}")

    return MosaicResult(
        space=space,
        picture=picture,
        search=search,
        checksum=checksum,
        roughness=score,
    )


def solve_file(
    path: Path | str,
    motif: Motif = SEA_MONSTER,
    params: AssemblyParams | None = None,
) -> MosaicResult:
    """Load a tile file and run the full pipeline on it."""
    return solve_tiles(load_tiles(path), motif, params)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Assemble square tiles into a picture and measure its roughness"
    )
    parser.add_argument("tiles", help="File of 'Tile <id>:' blocks")
    parser.add_argument("--motif", help="File holding the motif to search for")
    parser.add_argument("--plot", help="Save a visualization of the result to this path")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while placing tiles")
    parser.add_argument("--show-layout", action="store_true", help="Print the assembled tile ids")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command line entry point; prints the checksum and the roughness."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    params = AssemblyParams(show_progress=args.progress)
    try:
        motif = load_motif(args.motif) if args.motif else SEA_MONSTER
        result = solve_file(args.tiles, motif, params)
    except (MosaicError, FileNotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    if args.show_layout:
        for row in result.space.layout():
            print(" ".join(f"{tile_id if tile_id is not None else '.':>6}" for tile_id in row))

    print(result.checksum)
    print(result.roughness)

    if args.plot:
        from mosaic.visualizer import visualize

        visualize(result, output_path=args.plot)

    return 0


if __name__ == "__main__":
    sys.exit(main())
