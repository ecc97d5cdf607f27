"""Verification of call-count constraints.

Example:
    >>> ok, failure = mock.verify()
    >>> if not ok:
    ...     print(failure)

    >>> verifier = MockVerifier()
    >>> verifier.track(client_mock).track(store_mock)
    >>> # ... run test ...
    >>> verifier.assert_verified()
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from venomock.errors import VerificationFailure

if TYPE_CHECKING:
    from venomock.expectations import Expectation
    from venomock.mock import Mock

logger = logging.getLogger(__name__)


def verify_expectations(
    expectations: Iterable[Expectation],
) -> tuple[bool, VerificationFailure | None]:
    """Check every expectation's count constraint in declaration order.

    Returns:
        (True, None) if all constraints hold, otherwise (False, failure)
        for the first violated one.
    """
    for expectation in expectations:
        failure = expectation.check()
        if failure is not None:
            logger.info("Verification failed: %s", failure.message)
            return False, failure
    return True, None


class MockVerifier:
    """Verifies several mocks together.

    Mocks are verified in the order they were tracked; the first failure
    is reported.
    """

    def __init__(self) -> None:
        self._mocks: list[Mock] = []

    def track(self, mock: Mock) -> MockVerifier:
        """Add a mock to verify.

        Returns:
            Self for chaining
        """
        self._mocks.append(mock)
        return self

    @property
    def mocks(self) -> list[Mock]:
        return self._mocks.copy()

    def verify(self) -> tuple[bool, VerificationFailure | None]:
        for mock in self._mocks:
            ok, failure = mock.verify()
            if not ok:
                return ok, failure
        return True, None

    def assert_verified(self) -> None:
        """Raise the first verification failure, if any.

        Raises:
            VerificationFailure: If a tracked mock's constraint is violated
        """
        ok, failure = self.verify()
        if not ok and failure is not None:
            raise failure
