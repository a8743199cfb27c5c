"""Exceptions raised by the cube engine and its collaborators."""

from __future__ import annotations


class CubeError(ValueError):
    """Base class for rejected cube operations."""


class InvalidFaceError(CubeError):
    """Raised when a face identifier is not one of the six faces."""


class InvalidNotationError(CubeError):
    """Raised when a move string is empty or cannot be parsed."""


class StateValidationError(CubeError):
    """Raised when an input state is invalid."""
