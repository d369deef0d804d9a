"""Exception types raised by pathio."""

from __future__ import annotations


class PathioError(Exception):
    """Base class for all pathio errors."""


class MalformedPathError(PathioError, ValueError):
    """
    Raised when a path contains a character no file name may hold.

    Parameters
    ----------
    path : str
        The rejected path.
    position : int
        Index of the first offending character.

    Attributes
    ----------
    path : str
        The rejected path.
    position : int
        Index of the first offending character.
    """

    def __init__(self, path: str, position: int) -> None:
        msg = (
            f"Null byte present in file/path name at index {position}. "
            "There are no known legitimate use cases for such data, "
            "but several injection attacks may use it"
        )
        super().__init__(msg)
        self.path = path
        self.position = position


class NormalizationError(PathioError, ValueError):
    """Raised when a comparison needs a normalized path that does not exist."""


__all__ = ["MalformedPathError", "NormalizationError", "PathioError"]
