"""Standard move notation (F, R', U2, ...) and input validators."""

from __future__ import annotations

import re

from .errors import InvalidFaceError, InvalidNotationError
from .faces import FACE_INDEX

NOTATION_FACES = {
    "F": "front",
    "B": "back",
    "U": "up",
    "D": "down",
    "L": "left",
    "R": "right",
}
FACE_LETTERS = {face: letter for letter, face in NOTATION_FACES.items()}

VALID_FACES = ("front", "back", "up", "down", "left", "right")
NOTATION_PATTERN = re.compile(r"[FBUDLR]('|2)?")

# Quarter turns only; half turns are two clockwise quarter turns.
QUARTER_MOVES = tuple(f"{letter}{suffix}" for letter in NOTATION_FACES for suffix in ("", "'"))


def parse_move(notation: str) -> tuple[str, bool, int]:
    """Map a move string to ``(face, clockwise, turns)``.

    Only the first two characters are inspected. A second character of
    ``'`` selects a counter-clockwise turn, ``2`` selects two clockwise
    turns, anything else is ignored.
    """
    if not isinstance(notation, str):
        raise InvalidNotationError(f"move notation must be a string, got {type(notation).__name__}")
    if not notation:
        raise InvalidNotationError("empty move notation")

    face = NOTATION_FACES.get(notation[0])
    if face is None:
        raise InvalidNotationError(f"invalid move notation: {notation}")

    modifier = notation[1] if len(notation) > 1 else ""
    if modifier == "'":
        return face, False, 1
    if modifier == "2":
        return face, True, 2
    return face, True, 1


def validate_face(face: str) -> None:
    if face == "" or face is None:
        raise InvalidFaceError("face cannot be empty")
    if not isinstance(face, str) or face not in FACE_INDEX:
        raise InvalidFaceError(
            f"invalid face: {face}. Valid faces are: {', '.join(VALID_FACES)}"
        )


def validate_notation(notation: str) -> None:
    if notation == "" or notation is None:
        raise InvalidNotationError("notation cannot be empty")
    if not isinstance(notation, str) or not NOTATION_PATTERN.fullmatch(notation):
        examples = ", ".join(
            f"{letter}{suffix}" for suffix in ("", "'", "2") for letter in NOTATION_FACES
        )
        raise InvalidNotationError(f"invalid notation: {notation}. Valid examples: {examples}")


def parse_sequence(text: str) -> list[str]:
    """Split a whitespace-separated sequence and validate every move in it."""
    if not isinstance(text, str):
        raise InvalidNotationError("move sequence must be a string")
    moves = text.split()
    for move in moves:
        validate_notation(move)
    return moves


def inverse_move(notation: str) -> str:
    validate_notation(notation)
    if notation.endswith("2"):
        return notation
    if notation.endswith("'"):
        return notation[0]
    return notation + "'"


def invert_sequence(moves: list[str]) -> list[str]:
    return [inverse_move(move) for move in reversed(moves)]
