"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import pathio.platform
from pathio.platform import HostProfile


@pytest.fixture(autouse=True)
def clear_platform_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host detection independent of the developer's environment."""
    monkeypatch.delenv(pathio.platform.PLATFORM_OVERRIDE_ENV, raising=False)


@pytest.fixture
def posix_host() -> HostProfile:
    """Return a case-sensitive host using ``/``."""
    return HostProfile.posix()


@pytest.fixture
def windows_host() -> HostProfile:
    """Return a case-insensitive host using ``\\``."""
    return HostProfile.windows()


@pytest.fixture(params=["posix", "windows"])
def host(request: pytest.FixtureRequest) -> t.Iterator[HostProfile]:
    """Yield each supported host profile in turn."""
    if request.param == "windows":
        yield HostProfile.windows()
    else:
        yield HostProfile.posix()
