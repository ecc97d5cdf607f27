"""Declared expectations and their fluent configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from venomock.constraints import CountConstraint
from venomock.matchers import matches_all
from venomock.refs import Mutation

if TYPE_CHECKING:
    from venomock.errors import VerificationFailure


@dataclass(eq=False)
class Expectation:
    """A declared stub: operation name, argument patterns and effects.

    Returned by ``Mock.when`` and configured by chaining:

        >>> mock.when("greet", ANY).with_return("hi").exactly(2)

    Attributes:
        name: Operation name the expectation applies to
        arguments: Positional argument patterns
        return_values: Values handed back through the ResultView
        mutations: Values written into arguments on each match
        panic_value: Raised instead of returning, when set
        observed_count: Number of calls matched so far
        constraint: Call-count rule checked by verify()
    """

    name: str
    arguments: tuple[Any, ...] = ()
    return_values: list[Any] = field(default_factory=list)
    mutations: list[Mutation] = field(default_factory=list)
    panic_value: Any = None
    observed_count: int = 0
    constraint: CountConstraint = field(default_factory=CountConstraint.none)

    def matches(self, name: str, arguments: tuple[Any, ...]) -> bool:
        return self.name == name and matches_all(self.arguments, arguments)

    def with_return(self, *values: Any) -> Expectation:
        """Append return values, read back by position."""
        self.return_values.extend(values)
        return self

    returns = with_return

    def with_mutation(self, position: int, value: Any, *, boxed: bool = False) -> Expectation:
        """Write ``value`` into the argument at ``position`` on every match."""
        self.mutations.append(Mutation(position, value, boxed))
        return self

    def with_panic(self, value: Any) -> Expectation:
        """Raise ``value`` on every match; None removes a configured panic."""
        self.panic_value = value
        return self

    raises = with_panic

    def exactly(self, n: int) -> Expectation:
        self.constraint = CountConstraint.exactly(n)
        return self

    times = exactly

    def at_least(self, n: int) -> Expectation:
        self.constraint = CountConstraint.at_least(n)
        return self

    def at_most(self, n: int) -> Expectation:
        self.constraint = CountConstraint.at_most(n)
        return self

    def between(self, low: int, high: int) -> Expectation:
        self.constraint = CountConstraint.between(low, high)
        return self

    def check(self) -> VerificationFailure | None:
        """Evaluate the count constraint against the calls seen so far."""
        return self.constraint.evaluate(self.name, self.observed_count)
