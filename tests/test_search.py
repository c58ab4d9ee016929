"""
Unit tests for the motif search.
"""

import os
import sys
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mosaic.models import Orientation, PatternNotFound, PixelGrid
from mosaic.scoring import roughness
from mosaic.search import SEA_MONSTER, Motif, find_motif_coords, search_motif
from synthetic import stamp


def make_picture(width: int, height: int, anchors=(), motif: Motif = SEA_MONSTER) -> np.ndarray:
    pixels = np.zeros((height, width), dtype=bool)
    for x, y in anchors:
        stamp(pixels, motif, x, y)
    return pixels


class TestMotif(unittest.TestCase):
    """Test cases for motif construction."""

    def test_sea_monster_offsets(self):
        self.assertEqual(SEA_MONSTER.offsets, (
            (0, 1), (1, 0), (4, 0), (5, 1), (6, 1), (7, 0), (10, 0), (11, 1),
            (12, 1), (13, 0), (16, 0), (17, 1), (18, 1), (18, 2), (19, 1),
        ))
        self.assertEqual((SEA_MONSTER.width, SEA_MONSTER.height), (20, 3))
        self.assertEqual(len(SEA_MONSTER), 15)

    def test_from_lines_bottom_row_is_zero(self):
        motif = Motif.from_lines(["#.", "##"])
        self.assertEqual(motif.offsets, ((0, 0), (0, 1), (1, 0)))

    def test_offsets_are_normalised(self):
        self.assertEqual(Motif([(3, 2), (2, 3)]), Motif([(1, 0), (0, 1)]))
        self.assertEqual(Motif([(3, 2), (2, 3)]).offsets, ((0, 1), (1, 0)))

    def test_empty_motif_rejected(self):
        with self.assertRaises(ValueError):
            Motif.from_lines(["...", "..."])

    def test_at(self):
        self.assertEqual(Motif([(0, 0), (1, 1)]).at(5, 7), {(5, 7), (6, 8)})


class TestFindMotifCoords(unittest.TestCase):
    """Test cases for a search in a single orientation."""

    def test_single_occurrence(self):
        picture = PixelGrid(make_picture(30, 10, [(3, 2)]))
        self.assertEqual(find_motif_coords(picture, SEA_MONSTER), SEA_MONSTER.at(3, 2))

    def test_occurrence_touching_the_border(self):
        picture = PixelGrid(make_picture(20, 3, [(0, 0)]))
        self.assertEqual(find_motif_coords(picture, SEA_MONSTER), SEA_MONSTER.at(0, 0))

    def test_picture_smaller_than_motif(self):
        picture = PixelGrid(np.ones((3, 19), dtype=bool))
        self.assertEqual(find_motif_coords(picture, SEA_MONSTER), set())

    def test_cut_off_occurrence_does_not_match(self):
        """Test that offsets falling outside the picture never match."""
        pixels = np.zeros((3, 25), dtype=bool)
        for dx, dy in SEA_MONSTER.offsets:
            if dx >= 1:
                pixels[dy, dx - 1] = True
        self.assertEqual(find_motif_coords(PixelGrid(pixels), SEA_MONSTER), set())

    def test_missing_pixel(self):
        pixels = make_picture(30, 10, [(3, 2)])
        pixels[2 + 0, 3 + 1] = False
        self.assertEqual(find_motif_coords(PixelGrid(pixels), SEA_MONSTER), set())

    def test_overlapping_occurrences_count_shared_pixels_once(self):
        motif = Motif([(0, 0), (1, 0)])
        picture = PixelGrid(np.ones((1, 3), dtype=bool))
        self.assertEqual(find_motif_coords(picture, motif), {(0, 0), (1, 0), (2, 0)})


class TestSearchMotif(unittest.TestCase):
    """Test cases for the search over all orientations."""

    def setUp(self):
        self.monster = PixelGrid(make_picture(30, 10, [(3, 2)]))

    def test_identity(self):
        search = search_motif(self.monster)

        self.assertIs(search.orientation, Orientation.identity)
        self.assertEqual(search.coords, SEA_MONSTER.at(3, 2))
        self.assertEqual(roughness(search.picture, search.coords), 0)

    def test_stray_pixel_is_rough(self):
        pixels = self.monster.pixels.copy()
        pixels[0, 0] = True
        search = search_motif(PixelGrid(pixels))
        self.assertEqual(roughness(search.picture, search.coords), 1)

    def test_rotated_picture(self):
        picture = self.monster.rotate().rotate()

        search = search_motif(picture)

        self.assertIs(search.orientation, Orientation.r2)
        self.assertEqual(search.picture, self.monster)
        self.assertEqual(len(search.coords), 15)

    def test_mirrored_picture(self):
        picture = self.monster.flip().rotate()

        search = search_motif(picture)

        self.assertIs(search.orientation, Orientation.flip)
        self.assertEqual(search.picture, self.monster)

    def test_first_matching_orientation_wins(self):
        """Test that a mirrored occurrence is ignored once the identity matches."""
        mirrored = Motif((19 - x, y) for x, y in SEA_MONSTER.offsets)
        pixels = make_picture(50, 10, [(3, 2)])
        stamp(pixels, mirrored, 25, 5)
        picture = PixelGrid(pixels)

        search = search_motif(picture)

        self.assertIs(search.orientation, Orientation.identity)
        self.assertEqual(search.coords, SEA_MONSTER.at(3, 2))
        self.assertEqual(roughness(picture, search.coords), 15)
        self.assertTrue(find_motif_coords(picture.flip(), SEA_MONSTER))

    def test_several_occurrences(self):
        picture = PixelGrid(make_picture(50, 10, [(3, 2), (25, 5)]))

        search = search_motif(picture)

        self.assertEqual(len(search.coords), 30)
        self.assertEqual(roughness(picture, search.coords), 0)

    def test_custom_motif(self):
        motif = Motif.from_lines(["#.#", ".#."])
        picture = PixelGrid(make_picture(6, 4, [(2, 1)], motif=motif))

        search = search_motif(picture, motif)

        self.assertEqual(search.coords, {(2, 2), (3, 1), (4, 2)})

    def test_not_found(self):
        picture = PixelGrid(np.zeros((10, 30), dtype=bool))

        with self.assertRaises(PatternNotFound) as ctx:
            search_motif(picture)
        self.assertEqual(ctx.exception.motif_size, 15)
        self.assertEqual(ctx.exception.picture_shape, (30, 10))


if __name__ == '__main__':
    unittest.main()
