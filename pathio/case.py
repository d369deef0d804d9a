"""Case sensitivity switch used by the path comparators."""

from __future__ import annotations

import enum
import typing as t

from .platform import SYSTEM_HOST

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from .platform import HostProfile


class IOCase(enum.Enum):
    """
    How file names should be compared.

    ``SYSTEM`` defers to the :class:`~pathio.platform.HostProfile` passed to
    each check, so the same value means "insensitive" on Windows and
    "sensitive" elsewhere.
    """

    SENSITIVE = "Sensitive"
    INSENSITIVE = "Insensitive"
    SYSTEM = "System"

    @classmethod
    def for_name(cls, name: str) -> IOCase:
        """Return the member whose display name is *name*."""
        for member in cls:
            if member.value == name:
                return member
        msg = f"Invalid IOCase name: {name}"
        raise ValueError(msg)

    def is_case_sensitive(self, host: HostProfile = SYSTEM_HOST) -> bool:
        """Return ``True`` when comparisons under *host* respect case."""
        if self is IOCase.SYSTEM:
            return host.case_sensitive
        return self is IOCase.SENSITIVE

    def _fold(self, value: str, host: HostProfile) -> str:
        return value if self.is_case_sensitive(host) else value.casefold()

    def check_equals(
        self, str1: str, str2: str, *, host: HostProfile = SYSTEM_HOST
    ) -> bool:
        """Compare two strings for equality under this case rule."""
        return self._fold(str1, host) == self._fold(str2, host)

    def check_starts_with(
        self, value: str, start: str, *, host: HostProfile = SYSTEM_HOST
    ) -> bool:
        """Return ``True`` if *value* starts with *start*."""
        return self._fold(value, host).startswith(self._fold(start, host))

    def check_ends_with(
        self, value: str, end: str, *, host: HostProfile = SYSTEM_HOST
    ) -> bool:
        """Return ``True`` if *value* ends with *end*."""
        return self._fold(value, host).endswith(self._fold(end, host))

    def check_index_of(
        self,
        value: str,
        start: int,
        search: str,
        *,
        host: HostProfile = SYSTEM_HOST,
    ) -> int:
        """Return the first index of *search* in *value* from *start*, or -1."""
        return self._fold(value, host).find(self._fold(search, host), start)

    def check_compare_to(
        self, str1: str, str2: str, *, host: HostProfile = SYSTEM_HOST
    ) -> int:
        """Return -1, 0 or 1 ordering *str1* against *str2*."""
        left = self._fold(str1, host)
        right = self._fold(str2, host)
        return (left > right) - (left < right)

    def __str__(self) -> str:
        """Return the display name."""
        return self.value


__all__ = ["IOCase"]
