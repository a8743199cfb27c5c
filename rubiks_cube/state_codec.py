"""State validation and codec helpers."""

from __future__ import annotations

import json
from typing import Any

import numpy as np

from .errors import StateValidationError
from .faces import COLOR_BY_NAME, COLOR_NAMES, FACE_ORDER, FACE_SIZE, N_FACES

GRID_SHAPE = (N_FACES, FACE_SIZE, FACE_SIZE)


def _validate_color_ids(arr: np.ndarray) -> np.ndarray:
    arr = np.asarray(arr)
    if arr.shape != GRID_SHAPE:
        raise StateValidationError(f"State must have shape {GRID_SHAPE}, got {arr.shape}")
    if not np.issubdtype(arr.dtype, np.integer):
        raise StateValidationError("State must contain integer color IDs")
    if np.any(arr < 0) or np.any(arr >= len(COLOR_NAMES)):
        raise StateValidationError("State contains invalid color IDs; allowed values are 0..5")
    return arr.astype(np.int8, copy=True)


def _face_from_names(face: str, rows: Any) -> list[list[int]]:
    if not isinstance(rows, (list, tuple)) or len(rows) != FACE_SIZE:
        raise StateValidationError(f"Face '{face}' must be a {FACE_SIZE}x{FACE_SIZE} grid")

    ids: list[list[int]] = []
    for row in rows:
        if not isinstance(row, (list, tuple)) or len(row) != FACE_SIZE:
            raise StateValidationError(f"Face '{face}' must be a {FACE_SIZE}x{FACE_SIZE} grid")
        id_row = []
        for name in row:
            color = COLOR_BY_NAME.get(name) if isinstance(name, str) else None
            if color is None:
                raise StateValidationError(
                    f"Face '{face}' contains invalid color {name!r}; allowed: {', '.join(COLOR_NAMES)}"
                )
            id_row.append(int(color))
        ids.append(id_row)
    return ids


def grid_from_snapshot(snapshot: dict[str, Any]) -> np.ndarray:
    """Validate a serialized snapshot and return the (6, 3, 3) color-id grid."""
    if not isinstance(snapshot, dict):
        raise StateValidationError("Snapshot must be an object with six face fields")

    missing = [face for face in FACE_ORDER if face not in snapshot]
    if missing:
        raise StateValidationError(f"Snapshot is missing faces: {', '.join(missing)}")
    extra = sorted(set(snapshot) - set(FACE_ORDER))
    if extra:
        raise StateValidationError(f"Snapshot has unknown fields: {', '.join(map(str, extra))}")

    faces = [_face_from_names(face, snapshot[face]) for face in FACE_ORDER]
    return np.array(faces, dtype=np.int8)


def validate_state(state: dict[str, Any] | list | np.ndarray) -> np.ndarray:
    """Accept a snapshot dict or a color-id grid and return a canonical copy."""
    if isinstance(state, dict):
        return grid_from_snapshot(state)
    try:
        arr = np.asarray(state)
    except ValueError as exc:
        raise StateValidationError(f"State is not a rectangular grid: {exc}") from exc
    return _validate_color_ids(arr)


def snapshot_from_grid(grid: np.ndarray) -> dict[str, list[list[str]]]:
    """Serialize a grid into the six named 3x3 fields, in FACE_ORDER."""
    arr = _validate_color_ids(grid)
    return {
        face: [[COLOR_NAMES[int(c)] for c in row] for row in arr[i]]
        for i, face in enumerate(FACE_ORDER)
    }


def snapshot_to_json(grid: np.ndarray, indent: int | None = 2) -> str:
    return json.dumps(snapshot_from_grid(grid), indent=indent)


def load_state_file(path: str) -> np.ndarray:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise StateValidationError(f"Invalid JSON in state file {path}: {exc}") from exc
    return validate_state(data)
