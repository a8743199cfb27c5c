"""Face layout, color scheme and face-turn permutations for the 3x3 cube."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from .errors import InvalidFaceError

N_FACES = 6
FACE_SIZE = 3
STICKERS_PER_FACE = FACE_SIZE * FACE_SIZE
STATE_SIZE = N_FACES * STICKERS_PER_FACE
CENTER = (1, 1)

# Storage and serialization order.
FACE_ORDER = ("up", "down", "front", "back", "left", "right")
FACE_INDEX = {face: i for i, face in enumerate(FACE_ORDER)}


class Color(IntEnum):
    WHITE = 0
    YELLOW = 1
    RED = 2
    ORANGE = 3
    BLUE = 4
    GREEN = 5

    @property
    def label(self) -> str:
        return self.name.lower()


COLOR_NAMES = tuple(color.label for color in Color)
COLOR_BY_NAME = {color.label: color for color in Color}

COLOR_SCHEME = {
    "up": Color.WHITE,
    "down": Color.YELLOW,
    "front": Color.GREEN,
    "back": Color.BLUE,
    "left": Color.ORANGE,
    "right": Color.RED,
}

# Every face is viewed from outside the cube. Local "up" of front, back, left
# and right is the Up face; Up has Back at its top edge, Down has Front at its
# top edge.
#
# Each ring lists the four neighbour strips clockwise as seen from the turning
# face. Every strip is traversed in the same rotational sense, so a clockwise
# quarter turn moves strip k onto strip k+1 cell for cell.
# Strip: (neighbour face, "row" | "col", index, reversed).
EDGE_RINGS = {
    "front": (
        ("up", "row", 2, False),
        ("right", "col", 0, False),
        ("down", "row", 0, True),
        ("left", "col", 2, True),
    ),
    "back": (
        ("up", "row", 0, True),
        ("left", "col", 0, False),
        ("down", "row", 2, False),
        ("right", "col", 2, True),
    ),
    "up": (
        ("back", "row", 0, True),
        ("right", "row", 0, True),
        ("front", "row", 0, True),
        ("left", "row", 0, True),
    ),
    "down": (
        ("front", "row", 2, False),
        ("right", "row", 2, False),
        ("back", "row", 2, False),
        ("left", "row", 2, False),
    ),
    "left": (
        ("up", "col", 0, False),
        ("front", "col", 0, False),
        ("down", "col", 0, False),
        ("back", "col", 2, True),
    ),
    "right": (
        ("up", "col", 2, True),
        ("back", "col", 0, False),
        ("down", "col", 2, True),
        ("front", "col", 2, True),
    ),
}


def solved_state() -> np.ndarray:
    """Return the solved (6, 3, 3) color-id grid in FACE_ORDER."""
    colors = np.array([COLOR_SCHEME[face] for face in FACE_ORDER], dtype=np.int8)
    return np.repeat(colors, STICKERS_PER_FACE).reshape(N_FACES, FACE_SIZE, FACE_SIZE)


def face_index(face: str) -> int:
    try:
        return FACE_INDEX[face]
    except (KeyError, TypeError):
        raise InvalidFaceError(f"invalid face: {face}") from None


def _strip_cells(face: str, kind: str, index: int, reverse: bool) -> list[tuple[int, int, int]]:
    f = FACE_INDEX[face]
    steps = range(FACE_SIZE - 1, -1, -1) if reverse else range(FACE_SIZE)
    if kind == "row":
        return [(f, index, k) for k in steps]
    if kind == "col":
        return [(f, k, index) for k in steps]
    raise ValueError(f"Unsupported strip kind: {kind}")


def _build_ring_indices() -> dict[str, tuple[np.ndarray, np.ndarray, np.ndarray]]:
    rings: dict[str, tuple[np.ndarray, np.ndarray, np.ndarray]] = {}
    for face, strips in EDGE_RINGS.items():
        cells = np.array([_strip_cells(*strip) for strip in strips], dtype=np.intp)
        if cells.shape != (4, FACE_SIZE, 3):
            raise RuntimeError(f"Edge ring for {face} must hold 4 strips of {FACE_SIZE} cells")
        rings[face] = (cells[..., 0], cells[..., 1], cells[..., 2])
    return rings


# face -> (face ids, rows, cols), each shaped (4, 3): strip x cell.
RING_INDICES = _build_ring_indices()


def rotate_face_grid(face_grid: np.ndarray, clockwise: bool) -> np.ndarray:
    """Quarter-turn a single 3x3 face.

    Clockwise: ``new[i][j] = old[2 - j][i]``.
    Counter-clockwise: ``new[i][j] = old[j][2 - i]``.
    """
    return np.rot90(face_grid, k=-1 if clockwise else 1).copy()


def turn(grid: np.ndarray, face: str, clockwise: bool = True) -> None:
    """Apply one quarter turn of ``face`` to ``grid`` in place.

    ``grid`` is any (6, 3, 3) array laid out in FACE_ORDER; values are moved,
    never inspected, so labelled grids work as well as color ids.
    """
    idx = face_index(face)
    faces, rows, cols = RING_INDICES[face]

    # Fancy indexing copies all four strips before any of them is written.
    ring = grid[faces, rows, cols]
    grid[idx] = rotate_face_grid(grid[idx], clockwise)
    grid[faces, rows, cols] = np.roll(ring, 1 if clockwise else -1, axis=0)


def is_solved_grid(grid: np.ndarray) -> bool:
    arr = np.asarray(grid).reshape(N_FACES, STICKERS_PER_FACE)
    return bool(np.all(arr == arr[:, :1]))
