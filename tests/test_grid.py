import unittest

from assignmate.core.constants import Direction
from assignmate.core.exceptions import SlotPlacementError
from assignmate.core.models import Bounds, Placement, WordEntry
from assignmate.data.normalization import split_graphemes
from assignmate.engine.grid import GridConfig, PlacementGrid


def make_entry(text: str, entry_id: str = "W0") -> WordEntry:
    return WordEntry(id=entry_id, text=text, graphemes=split_graphemes(text))


class BoundsTests(unittest.TestCase):
    def test_starts_empty(self) -> None:
        bounds = Bounds()
        self.assertTrue(bounds.is_empty())
        self.assertEqual(bounds.height, 0)
        self.assertIsNone(bounds.to_jsonable())

    def test_update_grows_to_enclose_cells(self) -> None:
        bounds = Bounds()
        bounds.update(5, 7)
        bounds.update(3, 9)
        bounds.update(4, 2)
        self.assertEqual((bounds.top, bounds.left, bounds.bottom, bounds.right), (3, 2, 5, 9))
        self.assertEqual((bounds.height, bounds.width), (3, 8))
        self.assertTrue(bounds.contains(4, 4))
        self.assertFalse(bounds.contains(6, 4))


class GridConfigTests(unittest.TestCase):
    def test_rejects_degenerate_size(self) -> None:
        with self.assertRaises(ValueError):
            GridConfig(size=1)

    def test_rejects_oversized_grid(self) -> None:
        with self.assertRaises(ValueError):
            GridConfig(size=10_000)


class GridFitTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = PlacementGrid(GridConfig(size=10))
        self.grid.place(Placement(entry=make_entry("CAT"), row=2, col=4, direction=Direction.DOWN))

    def test_anchor_word_fits_on_empty_grid(self) -> None:
        grid = PlacementGrid(GridConfig(size=10))
        self.assertTrue(grid.fits(split_graphemes("DOG"), 0, 0, Direction.ACROSS))

    def test_rejects_word_leaving_grid(self) -> None:
        # "ACT" crossing CAT's A at (1,4) runs off the right edge of a 5x5 grid.
        grid = PlacementGrid(GridConfig(size=5))
        grid.place(Placement(entry=make_entry("CAT"), row=0, col=4, direction=Direction.DOWN))
        self.assertFalse(grid.fits(split_graphemes("ACT"), 1, 4, Direction.ACROSS, crossing_index=0))

    def test_accepts_perpendicular_crossing(self) -> None:
        # "BAD" crosses CAT's A (3,4) with its own A at index 1.
        self.assertTrue(self.grid.fits(split_graphemes("BAD"), 3, 3, Direction.ACROSS, crossing_index=1))

    def test_rejects_mismatched_crossing_letter(self) -> None:
        self.assertFalse(self.grid.fits(split_graphemes("BOD"), 3, 3, Direction.ACROSS, crossing_index=1))

    def test_rejects_letter_beside_word(self) -> None:
        # "SUN" running down column 5 would sit right beside CAT.
        self.assertFalse(self.grid.fits(split_graphemes("SUN"), 2, 5, Direction.DOWN))

    def test_rejects_collinear_overlap(self) -> None:
        # "CATS" laid over CAT shares more than one cell.
        self.assertFalse(self.grid.fits(split_graphemes("CATS"), 2, 4, Direction.DOWN, crossing_index=0))

    def test_end_guard_blocks_word_touching_another_end(self) -> None:
        # "OX" down column 4 would end directly above CAT and read as "OXCAT".
        self.assertFalse(self.grid.fits(split_graphemes("OX"), 0, 4, Direction.DOWN))

    def test_end_guard_can_be_disabled(self) -> None:
        grid = PlacementGrid(GridConfig(size=10, guard_word_ends=False))
        grid.place(Placement(entry=make_entry("CAT"), row=2, col=4, direction=Direction.DOWN))
        self.assertTrue(grid.fits(split_graphemes("OX"), 0, 4, Direction.DOWN))


class GridPlacementTests(unittest.TestCase):
    def test_place_writes_letters_and_updates_bounds(self) -> None:
        grid = PlacementGrid(GridConfig(size=8))
        grid.place(Placement(entry=make_entry("DOG"), row=1, col=2, direction=Direction.ACROSS))
        self.assertEqual([grid.letter_at(1, c) for c in range(2, 5)], ["D", "O", "G"])
        self.assertEqual(grid.cell(1, 3).part_of_word_ids, {"W0"})
        self.assertEqual(grid.bounds.to_jsonable(), {"top": 1, "left": 2, "bottom": 1, "right": 4})

    def test_conflicting_place_leaves_grid_untouched(self) -> None:
        grid = PlacementGrid(GridConfig(size=8))
        grid.place(Placement(entry=make_entry("DOG"), row=1, col=2, direction=Direction.ACROSS))
        with self.assertRaises(SlotPlacementError):
            grid.place(Placement(entry=make_entry("CAT", "W1"), row=0, col=3, direction=Direction.DOWN))
        self.assertIsNone(grid.letter_at(0, 3))
        self.assertEqual(grid.letter_at(1, 3), "O")
        self.assertEqual(len(grid.placements), 1)

    def test_out_of_bounds_place_raises(self) -> None:
        grid = PlacementGrid(GridConfig(size=4))
        with self.assertRaises(SlotPlacementError):
            grid.place(Placement(entry=make_entry("HORSE"), row=0, col=0, direction=Direction.DOWN))
        self.assertTrue(grid.bounds.is_empty())

    def test_crop_window_is_clamped_to_grid(self) -> None:
        grid = PlacementGrid(GridConfig(size=6))
        grid.place(Placement(entry=make_entry("DOG"), row=0, col=3, direction=Direction.ACROSS))
        self.assertEqual(grid.crop_window(), (0, 2, 1, 5))
        cropped = grid.to_jsonable()
        self.assertEqual(cropped[0], [None, "D", "O", "G"])
        self.assertEqual(cropped[1], [None, None, None, None])

    def test_empty_grid_crops_to_nothing(self) -> None:
        grid = PlacementGrid(GridConfig(size=6))
        self.assertIsNone(grid.crop_window())
        self.assertEqual(grid.to_jsonable(), [])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
