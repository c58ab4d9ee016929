"""
Visualization of assembly results.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from mosaic.config import PLOT_DPI
from mosaic.models import Coord, PixelGrid, Space

logger = logging.getLogger(__name__)


def plot_layout(space: Space, ax) -> None:
    """Plot the tile ids at their assembled positions."""
    ax.set_title("Tile Layout", fontweight="bold")

    if not space.tiles:
        ax.text(0.5, 0.5, "No tiles placed",
                ha="center", va="center", transform=ax.transAxes)
        return

    occupied = np.zeros((space.rows, space.columns), dtype=int)
    for (x, y), tile in space.tiles.items():
        col, row = x - space.xmin, y - space.ymin
        occupied[row, col] = 1
        ax.text(col, row, str(tile.tile_id), ha="center", va="center",
                fontsize=8, fontweight="bold", color="red")

    ax.imshow(occupied, cmap="Blues", alpha=0.7, origin="lower", vmin=0, vmax=1)
    ax.set_xlabel("X Position")
    ax.set_ylabel("Y Position")


def plot_picture(picture: PixelGrid, motif_coords: set[Coord] | None, ax) -> None:
    """
    Plot the composite picture, highlighting motif pixels.

    Args:
        picture: Picture in the orientation the coordinates refer to
        motif_coords: Pixels of the found motif occurrences (optional)
        ax: Matplotlib axes to draw on
    """
    ax.set_title("Composite Picture", fontweight="bold")

    # 0 empty, 1 filled, 2 motif
    image = picture.pixels.astype(int)
    for x, y in motif_coords or ():
        image[y, x] = 2

    ax.imshow(image, cmap="viridis", origin="lower", vmin=0, vmax=2,
              interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])

    if motif_coords:
        ax.set_xlabel(
            f"{len(motif_coords)} motif pixels, "
            f"{picture.filled_count - len(motif_coords)} rough"
        )


def visualize(result, output_path: Path | str | None = None, show: bool = False) -> None:
    """
    Draw the layout and the searched picture side by side.

    Args:
        result: ``MosaicResult`` returned by ``solve_tiles``
        output_path: Optional path to save the figure
        show: Whether to open an interactive window
    """
    logger.info("Creating assembly visualization")

    fig, axes = plt.subplots(1, 2, figsize=(14, 7))
    fig.suptitle(
        f"Checksum {result.checksum} / Roughness {result.roughness}",
        fontsize=14, fontweight="bold",
    )

    plot_layout(result.space, axes[0])
    plot_picture(result.search.picture, result.search.coords, axes[1])

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=PLOT_DPI, bbox_inches="tight")
        logger.info(f"Visualization saved to: {output_path}")

    if show:
        plt.show()

    plt.close(fig)
