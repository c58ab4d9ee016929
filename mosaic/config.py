"""Configuration constants for the tile assembly pipeline."""

# Tile text format
FILLED_MARKER = "#"
EMPTY_MARKER = "."
TILE_HEADER_PATTERN = r"^Tile (?P<id>\d+):$"

# Motif searched for in the assembled picture, top row first
MOTIF_PATTERN = (
    "                  # ",
    "#    ##    ##    ###",
    " #  #  #  #  #  #   ",
)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Visualization
PLOT_DPI = 150
