"""
Mosaic Package

Reassembles a picture from unordered, unoriented square tiles whose edges
line up pixel for pixel, then searches the picture for a motif.
"""

__version__ = "0.1.0"

from .assembly import AssemblyParams, assemble
from .compositing import compose_picture
from .main import MosaicResult, solve_file, solve_tiles
from .matching import horizontal_match, vertical_match
from .models import (
    AssemblyStuck,
    DimensionMismatch,
    IncompleteLayout,
    MosaicError,
    Orientation,
    ParseError,
    PatternNotFound,
    PixelGrid,
    Space,
    Tile,
    iter_orientations,
)
from .parsing import format_tiles, load_tiles, parse_tiles
from .scoring import corner_checksum, roughness
from .search import SEA_MONSTER, Motif, search_motif

__all__ = [
    "AssemblyParams",
    "AssemblyStuck",
    "DimensionMismatch",
    "IncompleteLayout",
    "Motif",
    "MosaicError",
    "MosaicResult",
    "Orientation",
    "ParseError",
    "PatternNotFound",
    "PixelGrid",
    "SEA_MONSTER",
    "Space",
    "Tile",
    "assemble",
    "compose_picture",
    "corner_checksum",
    "format_tiles",
    "horizontal_match",
    "iter_orientations",
    "load_tiles",
    "parse_tiles",
    "roughness",
    "search_motif",
    "solve_file",
    "solve_tiles",
    "vertical_match",
]
