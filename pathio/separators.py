"""Conversion between UNIX and Windows name separators."""

from __future__ import annotations

import enum
import typing as t

from .platform import SYSTEM_HOST, UNIX_SEPARATOR, WINDOWS_SEPARATOR

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import HostProfile


class SeparatorStyle(enum.Enum):
    """Separator a path should be written with."""

    UNIX = "unix"
    WINDOWS = "windows"
    SYSTEM = "system"

    def resolve(self, host: HostProfile = SYSTEM_HOST) -> str:
        """Return the separator character for this style on *host*."""
        if self is SeparatorStyle.UNIX:
            return UNIX_SEPARATOR
        if self is SeparatorStyle.WINDOWS:
            return WINDOWS_SEPARATOR
        return host.separator


def is_separator(ch: str) -> bool:
    """Return ``True`` if *ch* is either separator character."""
    return ch in (UNIX_SEPARATOR, WINDOWS_SEPARATOR)


def to_separator(
    path: str | None, style: SeparatorStyle, *, host: HostProfile = SYSTEM_HOST
) -> str | None:
    """Rewrite every separator in *path* using *style*."""
    if path is None:
        return None
    target = style.resolve(host)
    other = WINDOWS_SEPARATOR if target == UNIX_SEPARATOR else UNIX_SEPARATOR
    if other not in path:
        return path
    return path.replace(other, target)


def separators_to_unix(path: str | None) -> str | None:
    """Convert all separators in *path* to ``/``."""
    return to_separator(path, SeparatorStyle.UNIX)


def separators_to_windows(path: str | None) -> str | None:
    """Convert all separators in *path* to ``\\``."""
    return to_separator(path, SeparatorStyle.WINDOWS)


def separators_to_system(
    path: str | None, *, host: HostProfile = SYSTEM_HOST
) -> str | None:
    """Convert all separators in *path* to the native separator of *host*."""
    return to_separator(path, SeparatorStyle.SYSTEM, host=host)


__all__ = [
    "SeparatorStyle",
    "is_separator",
    "separators_to_system",
    "separators_to_unix",
    "separators_to_windows",
    "to_separator",
]
