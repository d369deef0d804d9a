"""Classification of the root-anchoring prefix of a path string.

The prefix is the part of a path that ties it to a root: a drive letter, a
UNC server, a home directory marker or a single leading separator. Both
separators are accepted everywhere, so the classifier understands hybrid
UNIX/Windows strings regardless of the host it runs on.

====================  ============================  ======
Example               Kind                          Length
====================  ============================  ======
``a/b/c.txt``         ``NONE``                      0
``/a/b/c.txt``        ``UNIX_ABS``                  1
``C:a/b/c.txt``       ``WINDOWS_DRIVE_RELATIVE``    2
``C:/a/b/c.txt``      ``WINDOWS_DRIVE_ABS``         3
``//server/a/b``      ``WINDOWS_UNC``               9
``~/a/b/c.txt``       ``HOME``                      2
``~user/a/b``         ``HOME_NAMED``                6
``~``                 ``HOME``                      2
``1:a``, ``///a``     ``INVALID``                   -1
====================  ============================  ======
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as t

from .platform import UNIX_SEPARATOR, WINDOWS_SEPARATOR
from .separators import is_separator


class PrefixKind(enum.Enum):
    """The kind of root a path is anchored to."""

    NONE = "none"
    UNIX_ABS = "unix-absolute"
    WINDOWS_DRIVE_RELATIVE = "drive-relative"
    WINDOWS_DRIVE_ABS = "drive-absolute"
    WINDOWS_UNC = "unc"
    HOME = "home"
    HOME_NAMED = "home-named"
    INVALID = "invalid"


@dc.dataclass(frozen=True, slots=True)
class PrefixInfo:
    """Kind and length of a path prefix."""

    kind: PrefixKind
    length: int

    @property
    def valid(self) -> bool:
        """Return ``True`` unless the prefix could not be parsed."""
        return self.kind is not PrefixKind.INVALID

    @property
    def anchored(self) -> bool:
        """Return ``True`` for any valid, non-empty prefix."""
        return self.valid and self.kind is not PrefixKind.NONE


_INVALID: t.Final[PrefixInfo] = PrefixInfo(PrefixKind.INVALID, -1)
_NO_PREFIX: t.Final[PrefixInfo] = PrefixInfo(PrefixKind.NONE, 0)


def _first_separator(path: str, start: int) -> int:
    """Return the index of the first separator at or after *start*, or -1."""
    found = [
        index
        for index in (
            path.find(UNIX_SEPARATOR, start),
            path.find(WINDOWS_SEPARATOR, start),
        )
        if index >= 0
    ]
    return min(found, default=-1)


def _classify_home(path: str) -> PrefixInfo:
    end = _first_separator(path, 1)
    if end < 0:
        # No separator at all: report the implied one after the user name.
        length = len(path) + 1
    else:
        length = end + 1
    kind = PrefixKind.HOME if length == 2 else PrefixKind.HOME_NAMED
    return PrefixInfo(kind, length)


def _classify_drive(path: str) -> PrefixInfo:
    letter = path[0]
    if not (letter.isascii() and letter.isalpha()):
        return _INVALID
    if len(path) == 2 or not is_separator(path[2]):
        return PrefixInfo(PrefixKind.WINDOWS_DRIVE_RELATIVE, 2)
    return PrefixInfo(PrefixKind.WINDOWS_DRIVE_ABS, 3)


def _classify_unc(path: str) -> PrefixInfo:
    end = _first_separator(path, 2)
    # A separator at index 2 means an empty server name (``///``).
    if end < 0 or end == 2:
        return _INVALID
    return PrefixInfo(PrefixKind.WINDOWS_UNC, end + 1)


def classify_prefix(path: str | None) -> PrefixInfo:
    """
    Classify the prefix of *path*.

    Parameters
    ----------
    path : str | None
        The path to inspect. ``None`` is reported as invalid.

    Returns
    -------
    PrefixInfo
        The prefix kind and its length in characters. Home prefixes written
        without a separator (``~`` or ``~user``) report a length one greater
        than the input to account for the implied separator.
    """
    if path is None:
        return _INVALID
    if not path:
        return _NO_PREFIX

    first = path[0]
    if first == ":":
        return _INVALID
    if len(path) == 1:
        if first == "~":
            return PrefixInfo(PrefixKind.HOME, 2)
        if is_separator(first):
            return PrefixInfo(PrefixKind.UNIX_ABS, 1)
        return _NO_PREFIX

    if first == "~":
        return _classify_home(path)
    if path[1] == ":":
        return _classify_drive(path)
    if is_separator(first) and is_separator(path[1]):
        return _classify_unc(path)
    if is_separator(first):
        return PrefixInfo(PrefixKind.UNIX_ABS, 1)
    return _NO_PREFIX


def get_prefix_length(path: str | None) -> int:
    """Return the prefix length of *path*, or -1 when it is ``None`` or invalid."""
    return classify_prefix(path).length


__all__ = ["PrefixInfo", "PrefixKind", "classify_prefix", "get_prefix_length"]
