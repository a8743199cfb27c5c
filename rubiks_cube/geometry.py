"""3D sticker model of the cube.

Face turns here are derived from integer rotation matrices instead of the
hand-written edge rings in :mod:`rubiks_cube.faces`, which makes this module
the reference the ring tables are checked against.
"""

from __future__ import annotations

import numpy as np

from .faces import FACE_INDEX, FACE_ORDER, FACE_SIZE, STATE_SIZE, STICKERS_PER_FACE

# Face specification from outside view.
FACE_SPECS = {
    "up": {"normal": (0, 1, 0), "right": (1, 0, 0), "up": (0, 0, -1)},
    "down": {"normal": (0, -1, 0), "right": (1, 0, 0), "up": (0, 0, 1)},
    "front": {"normal": (0, 0, 1), "right": (1, 0, 0), "up": (0, 1, 0)},
    "back": {"normal": (0, 0, -1), "right": (-1, 0, 0), "up": (0, 1, 0)},
    "left": {"normal": (-1, 0, 0), "right": (0, 0, 1), "up": (0, 1, 0)},
    "right": {"normal": (1, 0, 0), "right": (0, 0, -1), "up": (0, 1, 0)},
}

# Clockwise turn from face viewpoint expressed as world-axis rotation angle.
CLOCKWISE_ANGLE_DEG = {
    "up": -90,
    "down": +90,
    "front": -90,
    "back": +90,
    "left": +90,
    "right": -90,
}

FACE_AXIS_LAYER = {
    "up": ("y", +1),
    "down": ("y", -1),
    "front": ("z", +1),
    "back": ("z", -1),
    "left": ("x", -1),
    "right": ("x", +1),
}

AXIS_INDEX = {"x": 0, "y": 1, "z": 2}


def _rotation_matrix(axis: str, angle_deg: int) -> np.ndarray:
    """Return integer rotation matrix for +-90 around x/y/z axes."""
    if axis == "x" and angle_deg == +90:
        return np.array([[1, 0, 0], [0, 0, -1], [0, 1, 0]], dtype=np.int8)
    if axis == "x" and angle_deg == -90:
        return np.array([[1, 0, 0], [0, 0, 1], [0, -1, 0]], dtype=np.int8)
    if axis == "y" and angle_deg == +90:
        return np.array([[0, 0, 1], [0, 1, 0], [-1, 0, 0]], dtype=np.int8)
    if axis == "y" and angle_deg == -90:
        return np.array([[0, 0, -1], [0, 1, 0], [1, 0, 0]], dtype=np.int8)
    if axis == "z" and angle_deg == +90:
        return np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=np.int8)
    if axis == "z" and angle_deg == -90:
        return np.array([[0, 1, 0], [-1, 0, 0], [0, 0, 1]], dtype=np.int8)
    raise ValueError(f"Unsupported rotation: axis={axis}, angle={angle_deg}")


def _face_vectors(face: str) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    spec = FACE_SPECS[face]
    return (
        np.array(spec["normal"], dtype=np.int8),
        np.array(spec["right"], dtype=np.int8),
        np.array(spec["up"], dtype=np.int8),
    )


_NORMAL_TO_FACE = {tuple(FACE_SPECS[face]["normal"]): face for face in FACE_ORDER}


def sticker_index(face: str, row: int, col: int) -> int:
    return FACE_INDEX[face] * STICKERS_PER_FACE + row * FACE_SIZE + col


def _build_sticker_model() -> list[dict]:
    stickers: list[dict] = []
    for face in FACE_ORDER:
        n, r, up = _face_vectors(face)
        for row in range(FACE_SIZE):
            for col in range(FACE_SIZE):
                cubie = n + (col - 1) * r + (1 - row) * up
                stickers.append(
                    {
                        "idx": sticker_index(face, row, col),
                        "face": face,
                        "row": row,
                        "col": col,
                        "cubie": cubie,
                        "normal": n,
                    }
                )
    stickers.sort(key=lambda s: s["idx"])
    return stickers


_STICKERS = _build_sticker_model()


def _locate(cubie: np.ndarray, normal: np.ndarray) -> int:
    face = _NORMAL_TO_FACE[tuple(int(v) for v in normal)]
    n, r, up = _face_vectors(face)
    offset = cubie - n
    col = int(np.dot(offset, r)) + 1
    row = 1 - int(np.dot(offset, up))
    if not (0 <= row < FACE_SIZE and 0 <= col < FACE_SIZE):
        raise ValueError(f"Invalid cubie for face {face}: {cubie}")
    return sticker_index(face, row, col)


def face_turn_permutation(face: str, clockwise: bool = True) -> np.ndarray:
    """Return ``perm`` such that ``new_flat = old_flat[perm]`` for one quarter turn."""
    axis, layer_sign = FACE_AXIS_LAYER[face]
    angle = CLOCKWISE_ANGLE_DEG[face] if clockwise else -CLOCKWISE_ANGLE_DEG[face]
    rot = _rotation_matrix(axis, angle)
    axis_idx = AXIS_INDEX[axis]

    perm = np.empty(STATE_SIZE, dtype=np.int32)
    for sticker in _STICKERS:
        cubie = sticker["cubie"]
        normal = sticker["normal"]
        if int(cubie[axis_idx]) == layer_sign:
            cubie = rot @ cubie
            normal = rot @ normal
        perm[_locate(cubie, normal)] = sticker["idx"]
    return perm


def adjacent_stickers(face: str, row: int, col: int) -> list[int]:
    """Flat indices of the other stickers on the same cubie."""
    target = _STICKERS[sticker_index(face, row, col)]["cubie"]
    return [
        int(s["idx"])
        for s in _STICKERS
        if np.array_equal(s["cubie"], target) and s["face"] != face
    ]
