"""Pytest fixtures for venomock tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from venomock import Mock, MockSettings, Ref
from venomock.pytest_plugin import mock_verifier  # noqa: F401


@dataclass
class Arg:
    """Plain value object passed through mocked operations."""

    v: str


class EqualMe:
    """Value comparing case-insensitively through its own equal method."""

    def __init__(self, s: str) -> None:
        self.s = s

    def equal(self, other: EqualMe) -> bool:
        return self.s.lower() == other.s.lower()


class FakeClient(Mock):
    """Hand-written test double with one forwarding method per operation."""

    def request(self, url: str) -> tuple[int, str, BaseException | None]:
        r = self.called(url)
        return r.as_int(0), r.as_str(1), r.as_error(2)

    def greet(self, name: Any) -> str:
        return self.called(name).as_str(0)

    def compute(self, n: Any) -> tuple[int, BaseException | None]:
        r = self.called(n)
        return r.as_int(0), r.as_error(1)

    def load(self, key: str, out: Ref[Any]) -> bool:
        return self.called(key, out).as_bool(0)

    def has_two_args(self, a: Any, b: Any) -> None:
        self.called(a, b)


@pytest.fixture
def settings() -> MockSettings:
    """Default settings, independent of the environment."""
    return MockSettings(
        max_width=120,
        max_length=None,
        max_string=None,
        max_depth=None,
        log_calls=True,
        show_candidates=True,
    )


@pytest.fixture
def mock(settings: MockSettings) -> Mock:
    """Bare mock registry."""
    return Mock(settings=settings)


@pytest.fixture
def client(settings: MockSettings) -> FakeClient:
    """Test double built on Mock."""
    return FakeClient(settings=settings)
