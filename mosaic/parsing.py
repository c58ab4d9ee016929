"""Parsing and rendering of the tile text format."""

import logging
import re
from pathlib import Path

import numpy as np

from mosaic.config import EMPTY_MARKER, FILLED_MARKER, TILE_HEADER_PATTERN
from mosaic.models import ParseError, PixelGrid, Tile
from mosaic.search import Motif

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(TILE_HEADER_PATTERN)
_BLOCK_SEPARATOR_RE = re.compile(r"\n\s*\n")


def parse_tile(block: str, block_index: int | None = None) -> Tile:
    """
    Parse one ``Tile <id>:`` block.

    Rows are read top row first, so the last row of the block becomes y = 0.

    Args:
        block: Header line followed by the pixel rows
        block_index: Position of the block in the input, for error reports

    Returns:
        Parsed tile

    Raises:
        ParseError: If the header or the grid is malformed
    """
    lines = [line.strip() for line in block.strip().splitlines()]
    if not lines:
        raise ParseError("Empty tile block", block_index=block_index)

    match = _HEADER_RE.match(lines[0])
    if match is None:
        raise ParseError(
            f"Malformed tile header: {lines[0]!r}",
            block_index=block_index,
            line=lines[0],
        )
    tile_id = int(match.group("id"))

    rows = lines[1:]
    if not rows:
        raise ParseError(f"Tile {tile_id} has no pixel rows", block_index=block_index)

    width = len(rows[0])
    alphabet = {FILLED_MARKER, EMPTY_MARKER}
    for row in rows:
        if len(row) != width:
            raise ParseError(
                f"Tile {tile_id}: row of length {len(row)}, expected {width}",
                block_index=block_index,
                line=row,
            )
        unexpected = set(row) - alphabet
        if unexpected:
            raise ParseError(
                f"Tile {tile_id}: unexpected character(s) {''.join(sorted(unexpected))!r}",
                block_index=block_index,
                line=row,
            )

    pixels = np.array(
        [[char == FILLED_MARKER for char in row] for row in reversed(rows)],
        dtype=bool,
    )
    return Tile(tile_id, pixels)


def parse_tiles(text: str) -> list[Tile]:
    """Parse every tile block of ``text``; blocks are separated by a blank line."""
    blocks = [block for block in _BLOCK_SEPARATOR_RE.split(text.strip()) if block.strip()]
    if not blocks:
        raise ParseError("No tiles found in input")
    return [parse_tile(block, block_index=i) for i, block in enumerate(blocks)]


def load_tiles(path: Path | str) -> list[Tile]:
    """Read and parse a tile file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tile file not found: {path}")

    tiles = parse_tiles(path.read_text())
    logger.info(f"Loaded {len(tiles)} tiles from {path}")
    return tiles


def load_motif(path: Path | str) -> Motif:
    """Read a motif drawn with ``#`` characters, top row first."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Motif file not found: {path}")

    lines = path.read_text().rstrip("\n").splitlines()
    return Motif.from_lines(lines)


def render_grid(
    grid: PixelGrid,
    filled: str = FILLED_MARKER,
    empty: str = EMPTY_MARKER,
) -> str:
    """Draw a grid as text, top row first."""
    return "\n".join(
        "".join(filled if pixel else empty for pixel in row)
        for row in grid.pixels[::-1]
    )


def render_tile(tile: Tile) -> str:
    """Draw a tile in the input format."""
    return f"Tile {tile.tile_id}:\n{render_grid(tile)}"


def format_tiles(tiles: list[Tile]) -> str:
    """Draw several tiles as one input file."""
    return "\n\n".join(render_tile(tile) for tile in tiles) + "\n"
