"""Call-count constraints checked at verification time."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from venomock.errors import VerificationFailure


class CountKind(Enum):
    """How the observed call count is compared."""

    NONE = "none"
    EXACTLY = "exactly"
    AT_LEAST = "at_least"
    AT_MOST = "at_most"
    BETWEEN = "between"


@dataclass(frozen=True)
class CountConstraint:
    """A call-count rule.

    ``low`` is only meaningful for BETWEEN; the other bounded kinds keep
    their bound in ``high``. ``low <= high`` is not checked.
    """

    kind: CountKind = CountKind.NONE
    low: int = 0
    high: int = 0

    @classmethod
    def none(cls) -> CountConstraint:
        return cls()

    @classmethod
    def exactly(cls, n: int) -> CountConstraint:
        return cls(CountKind.EXACTLY, high=n)

    @classmethod
    def at_least(cls, n: int) -> CountConstraint:
        return cls(CountKind.AT_LEAST, high=n)

    @classmethod
    def at_most(cls, n: int) -> CountConstraint:
        return cls(CountKind.AT_MOST, high=n)

    @classmethod
    def between(cls, low: int, high: int) -> CountConstraint:
        return cls(CountKind.BETWEEN, low=low, high=high)

    def is_satisfied(self, observed: int) -> bool:
        if self.kind is CountKind.EXACTLY:
            return observed == self.high
        if self.kind is CountKind.AT_LEAST:
            return observed >= self.high
        if self.kind is CountKind.AT_MOST:
            return observed <= self.high
        if self.kind is CountKind.BETWEEN:
            return self.low <= observed <= self.high
        return True

    def describe(self) -> str:
        """Expected-count part of a failure message."""
        if self.kind is CountKind.EXACTLY:
            return f"expected: {self.high}"
        if self.kind is CountKind.AT_LEAST:
            return f"expected at least: {self.high}"
        if self.kind is CountKind.AT_MOST:
            return f"expected at most: {self.high}"
        if self.kind is CountKind.BETWEEN:
            return f"expected between: [{self.low}, {self.high}]"
        return "no expectation"

    def evaluate(self, name: str, observed: int) -> VerificationFailure | None:
        """Check ``observed`` against this constraint.

        Returns:
            None if satisfied, otherwise the failure to report.
        """
        if self.is_satisfied(observed):
            return None
        return VerificationFailure(
            f"Function {name} executed {observed} times, {self.describe()}",
            operation=name,
            observed=observed,
            constraint=self,
        )
