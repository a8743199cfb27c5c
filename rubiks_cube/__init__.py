"""Rubik 3x3 cube engine package."""

from .engine import CubeEngine
from .errors import CubeError, InvalidFaceError, InvalidNotationError, StateValidationError

__all__ = [
    "CubeEngine",
    "CubeError",
    "InvalidFaceError",
    "InvalidNotationError",
    "StateValidationError",
]
