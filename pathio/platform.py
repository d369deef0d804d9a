"""Host profiles describing how a platform spells and compares paths.

The path functions never consult ``sys.platform`` themselves. Callers pass a
:class:`HostProfile` (or accept :data:`SYSTEM_HOST`, detected once at import)
so that Windows behaviour can be exercised on any interpreter.
"""

from __future__ import annotations

import dataclasses as dc
import os
import sys
import typing as t

# Tests set this override to emulate alternative platforms (for example
# Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "PATHIO_PLATFORM_OVERRIDE"

UNIX_SEPARATOR: t.Final[str] = "/"
WINDOWS_SEPARATOR: t.Final[str] = "\\"

# ``sys.platform`` prefixes that use Windows path conventions.
_WINDOWS_PLATFORMS: t.Final[tuple[str, ...]] = ("win", "cygwin-nt", "msys")


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring test overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def is_windows(platform: str | None = None) -> bool:
    """Return ``True`` when *platform* (default: current) follows Windows rules."""
    platform_name = _current_platform(platform)
    return platform_name.startswith(_WINDOWS_PLATFORMS)


@dc.dataclass(frozen=True, slots=True)
class HostProfile:
    """
    Path conventions of a host operating system.

    Attributes
    ----------
    name : str
        Platform name the profile was built for (e.g. ``"linux"``).
    separator : str
        The native name separator, ``"/"`` or ``"\\"``.
    case_sensitive : bool
        Whether file names differing only by case name different files.

    Raises
    ------
    ValueError
        If ``separator`` is not one of the two supported separators.
    """

    name: str
    separator: str
    case_sensitive: bool

    def __post_init__(self) -> None:
        """Validate the separator to catch misconfiguration early."""
        if self.separator not in (UNIX_SEPARATOR, WINDOWS_SEPARATOR):
            msg = f"separator must be '/' or '\\\\', got {self.separator!r}"
            raise ValueError(msg)

    @property
    def is_windows(self) -> bool:
        """Return ``True`` when the profile uses Windows separators."""
        return self.separator == WINDOWS_SEPARATOR

    @property
    def other_separator(self) -> str:
        """Return the separator this host does not use natively."""
        return UNIX_SEPARATOR if self.is_windows else WINDOWS_SEPARATOR

    @classmethod
    def posix(cls, name: str = "linux") -> HostProfile:
        """Return a case-sensitive profile using ``/``."""
        return cls(name=name, separator=UNIX_SEPARATOR, case_sensitive=True)

    @classmethod
    def windows(cls, name: str = "win32") -> HostProfile:
        """Return a case-insensitive profile using ``\\``."""
        return cls(name=name, separator=WINDOWS_SEPARATOR, case_sensitive=False)

    @classmethod
    def detect(cls, platform: str | None = None) -> HostProfile:
        """Build the profile for *platform*, defaulting to the running host."""
        platform_name = _current_platform(platform)
        if is_windows(platform_name):
            return cls.windows(platform_name)
        return cls.posix(platform_name)


SYSTEM_HOST: t.Final[HostProfile] = HostProfile.detect()


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "SYSTEM_HOST",
    "UNIX_SEPARATOR",
    "WINDOWS_SEPARATOR",
    "HostProfile",
    "is_windows",
]
