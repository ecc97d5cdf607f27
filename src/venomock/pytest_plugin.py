"""pytest integration: verify mocks when a test finishes.

    def test_checkout(mock_verifier):
        payments = mock_verifier.track(FakePayments())
        payments.when("charge", ANY).with_return(True).exactly(1)
        checkout(payments)
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TypeVar

import pytest

from venomock.mock import Mock
from venomock.verification import MockVerifier

M = TypeVar("M", bound=Mock)


class TrackingVerifier(MockVerifier):
    """MockVerifier whose ``track`` hands the mock back for inline use."""

    def track(self, mock: M) -> M:  # type: ignore[override]
        super().track(mock)
        return mock


@pytest.fixture
def mock_verifier() -> Iterator[TrackingVerifier]:
    """Verifier whose tracked mocks are verified at teardown."""
    verifier = TrackingVerifier()
    yield verifier
    verifier.assert_verified()
