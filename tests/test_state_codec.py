import json
import tempfile
import unittest
from pathlib import Path

import numpy as np

from rubiks_cube.engine import CubeEngine
from rubiks_cube.errors import StateValidationError
from rubiks_cube.faces import solved_state
from rubiks_cube.state_codec import (
    grid_from_snapshot,
    load_state_file,
    snapshot_from_grid,
    snapshot_to_json,
    validate_state,
)


class TestStateCodec(unittest.TestCase):
    def test_snapshot_roundtrip_after_moves(self):
        engine = CubeEngine()
        engine.apply("F R U' L2")
        snap = engine.snapshot()
        self.assertTrue(np.array_equal(grid_from_snapshot(snap), engine.get_state()))

        restored = CubeEngine(initial_state=json.loads(engine.to_json()))
        self.assertEqual(restored.snapshot(), snap)

    def test_snapshot_layout(self):
        snap = snapshot_from_grid(solved_state())
        self.assertEqual(list(snap), ["up", "down", "front", "back", "left", "right"])
        self.assertEqual(snap["left"][1][1], "orange")
        self.assertEqual(json.loads(snapshot_to_json(solved_state(), indent=None)), snap)

    def test_any_color_grid_is_accepted(self):
        snap = snapshot_from_grid(solved_state())
        snap["up"][0][0] = "red"
        grid = validate_state(snap)
        self.assertEqual(int(grid[0][0][0]), 2)

    def test_missing_and_unknown_faces_are_rejected(self):
        snap = snapshot_from_grid(solved_state())
        del snap["back"]
        with self.assertRaisesRegex(StateValidationError, "missing faces: back"):
            validate_state(snap)

        snap = snapshot_from_grid(solved_state())
        snap["middle"] = snap["up"]
        with self.assertRaisesRegex(StateValidationError, "unknown fields: middle"):
            validate_state(snap)

    def test_bad_grids_are_rejected(self):
        snap = snapshot_from_grid(solved_state())
        snap["front"] = [["green"] * 3] * 2
        with self.assertRaises(StateValidationError):
            validate_state(snap)

        snap = snapshot_from_grid(solved_state())
        snap["front"][2][2] = "purple"
        with self.assertRaisesRegex(StateValidationError, "invalid color 'purple'"):
            validate_state(snap)

        with self.assertRaises(StateValidationError):
            validate_state(np.zeros((6, 9), dtype=np.int8))
        with self.assertRaises(StateValidationError):
            validate_state(np.full((6, 3, 3), 6, dtype=np.int8))
        with self.assertRaises(StateValidationError):
            validate_state("solved")

    def test_set_state_replaces_grid(self):
        source = CubeEngine()
        source.apply("U R2 F'")
        engine = CubeEngine()
        returned = engine.set_state(source.snapshot())
        self.assertTrue(np.array_equal(returned, source.get_state()))
        self.assertEqual(engine.snapshot(), source.snapshot())

        with self.assertRaises(StateValidationError):
            engine.set_state({"up": []})
        self.assertEqual(engine.snapshot(), source.snapshot())

    def test_load_state_file(self):
        engine = CubeEngine()
        engine.move("B")
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "state.json"
            path.write_text(engine.to_json(), encoding="utf-8")
            self.assertTrue(np.array_equal(load_state_file(str(path)), engine.get_state()))

            path.write_text("{not json", encoding="utf-8")
            with self.assertRaises(StateValidationError):
                load_state_file(str(path))


if __name__ == "__main__":
    unittest.main()
