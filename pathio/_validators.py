"""Shared validation helpers."""

from __future__ import annotations

from .errors import MalformedPathError

_NUL = "\0"


def reject_nul(path: str) -> None:
    """Raise :class:`MalformedPathError` when *path* contains a NUL character."""
    position = path.find(_NUL)
    if position >= 0:
        raise MalformedPathError(path, position)


def validate_non_negative_count(value: int, *, name: str) -> None:
    """Ensure *value* is a usable character or byte count."""
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer"
        raise TypeError(msg)

    if value < 0:
        msg = f"{name} must be >= 0"
        raise ValueError(msg)
