import unittest

from rubiks_cube.errors import InvalidFaceError, InvalidNotationError
from rubiks_cube.notation import (
    QUARTER_MOVES,
    inverse_move,
    invert_sequence,
    parse_move,
    parse_sequence,
    validate_face,
    validate_notation,
)


class TestParseMove(unittest.TestCase):
    def test_face_letters(self):
        expected = {"F": "front", "B": "back", "U": "up", "D": "down", "L": "left", "R": "right"}
        for letter, face in expected.items():
            self.assertEqual(parse_move(letter), (face, True, 1))

    def test_modifiers(self):
        self.assertEqual(parse_move("U'"), ("up", False, 1))
        self.assertEqual(parse_move("D2"), ("down", True, 2))
        self.assertEqual(parse_move("R3"), ("right", True, 1))

    def test_errors(self):
        with self.assertRaisesRegex(InvalidNotationError, "empty move notation"):
            parse_move("")
        with self.assertRaisesRegex(InvalidNotationError, "invalid move notation: Q"):
            parse_move("Q")
        with self.assertRaises(InvalidNotationError):
            parse_move(None)


class TestValidators(unittest.TestCase):
    def test_valid_faces(self):
        for face in ("front", "back", "up", "down", "left", "right"):
            validate_face(face)

    def test_invalid_faces(self):
        with self.assertRaisesRegex(InvalidFaceError, "face cannot be empty"):
            validate_face("")
        with self.assertRaisesRegex(InvalidFaceError, "Valid faces are: front, back, up, down, left, right"):
            validate_face("middle")
        with self.assertRaises(InvalidFaceError):
            validate_face("FRONT")

    def test_valid_notations(self):
        for letter in "FBUDLR":
            for suffix in ("", "'", "2"):
                validate_notation(letter + suffix)

    def test_invalid_notations(self):
        with self.assertRaisesRegex(InvalidNotationError, "notation cannot be empty"):
            validate_notation("")
        for bad in ("F3", "FF", "X", "f", "F'2", " F", "F\n", "F''"):
            with self.assertRaisesRegex(InvalidNotationError, "invalid notation"):
                validate_notation(bad)

    def test_parse_sequence(self):
        self.assertEqual(parse_sequence("  F R'\tU2 \n B "), ["F", "R'", "U2", "B"])
        self.assertEqual(parse_sequence(""), [])
        with self.assertRaises(InvalidNotationError):
            parse_sequence("F R X")

    def test_inverse(self):
        self.assertEqual(inverse_move("F"), "F'")
        self.assertEqual(inverse_move("F'"), "F")
        self.assertEqual(inverse_move("F2"), "F2")
        self.assertEqual(invert_sequence(["F", "R'", "U2"]), ["U2", "R", "F'"])

    def test_quarter_moves(self):
        self.assertEqual(len(QUARTER_MOVES), 12)
        self.assertEqual(len(set(QUARTER_MOVES)), 12)


if __name__ == "__main__":
    unittest.main()
