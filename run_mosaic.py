#!/usr/bin/env python3
"""
Main entry point for the tile assembly pipeline.

This script runs the complete pipeline:
1. Assembles the tiles of the given file into one layout
2. Searches the stitched picture for the motif and prints both scores
"""

import sys

from mosaic.main import main

if __name__ == "__main__":
    sys.exit(main())
