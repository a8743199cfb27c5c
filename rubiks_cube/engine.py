"""Core 3x3 Rubik's cube engine."""

from __future__ import annotations

from typing import Any

import numpy as np

from .errors import StateValidationError
from .faces import CENTER, FACE_ORDER, COLOR_NAMES, face_index, is_solved_grid, solved_state, turn
from .notation import QUARTER_MOVES, inverse_move, parse_move, parse_sequence
from .state_codec import snapshot_from_grid, snapshot_to_json, validate_state


class CubeEngine:
    """Sticker-level 3x3 cube with face turns and standard move notation.

    Not thread-safe: callers sharing one instance must serialize access.
    """

    def __init__(self, initial_state: dict[str, Any] | list | np.ndarray | None = None):
        self._rng = np.random.default_rng()
        self._state = solved_state() if initial_state is None else validate_state(initial_state)

    def get_state(self) -> np.ndarray:
        """Return a copy of the (6, 3, 3) color-id grid."""
        return self._state.copy()

    def face(self, name: str) -> np.ndarray:
        return self._state[face_index(name)].copy()

    def set_state(self, state: dict[str, Any] | list | np.ndarray) -> np.ndarray:
        self._state = validate_state(state)
        return self._state.copy()

    def reset(self) -> None:
        self._state = solved_state()

    def rotate_face(self, face: str, clockwise: bool = True) -> None:
        """Quarter-turn ``face`` and cycle the four adjacent edge strips.

        Raises InvalidFaceError before touching the grid when ``face`` is unknown.
        """
        turn(self._state, face, bool(clockwise))

    def move(self, notation: str) -> None:
        face, clockwise, turns = parse_move(notation)
        for _ in range(turns):
            self.rotate_face(face, clockwise)

    def apply(self, sequence: str | list[str]) -> list[str]:
        """Apply a move sequence such as ``"F R U' F2"``.

        All moves are validated up front, so a bad token leaves the cube as it was.
        """
        moves = parse_sequence(sequence if isinstance(sequence, str) else " ".join(sequence))
        for notation in moves:
            self.move(notation)
        return moves

    def scramble(self, steps: int, seed: int | None = None) -> list[str]:
        if not isinstance(steps, int) or isinstance(steps, bool) or steps < 0:
            raise StateValidationError("Scramble steps must be a non-negative integer")

        rng = np.random.default_rng(seed) if seed is not None else self._rng
        moves: list[str] = []
        prev: str | None = None
        for _ in range(steps):
            candidates = [m for m in QUARTER_MOVES if prev is None or m != inverse_move(prev)]
            notation = candidates[int(rng.integers(len(candidates)))]
            moves.append(notation)
            prev = notation

        for notation in moves:
            self.move(notation)
        return moves

    def is_solved(self) -> bool:
        return is_solved_grid(self._state)

    def color_scheme(self) -> dict[str, str]:
        return {face: COLOR_NAMES[int(self._state[i][CENTER])] for i, face in enumerate(FACE_ORDER)}

    def snapshot(self) -> dict[str, list[list[str]]]:
        return snapshot_from_grid(self._state)

    def to_json(self, indent: int | None = 2) -> str:
        return snapshot_to_json(self._state, indent=indent)

    def clone(self) -> "CubeEngine":
        return CubeEngine(initial_state=self._state)

    def __str__(self) -> str:
        return self.to_json()
