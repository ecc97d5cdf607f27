"""Writable references used as out-parameters of mocked operations.

Python has no pointers, so code under test that expects a callee to fill an
argument passes a ``Ref`` (or a mutable list/dict) and reads it afterwards:

    >>> out = Ref()
    >>> mock.when("load", "key", ANY).with_mutation(1, "hello")
    >>> mock.record("load", "key", out)
    >>> out.value
    'hello'
"""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from venomock.errors import ArgumentMutationError, ErrorContext
from venomock.matchers import type_name

T = TypeVar("T")


@dataclass(eq=True)
class Ref(Generic[T]):
    """A single writable slot."""

    value: T | None = None

    def get(self) -> T | None:
        return self.value

    def set(self, value: T | None) -> None:
        self.value = value


@dataclass(frozen=True)
class Mutation:
    """A value to write into the argument at ``position`` on a matched call.

    With ``boxed`` the target receives ``Ref(value)`` instead of ``value``,
    for out-parameters that hold a reference themselves.
    """

    position: int
    value: Any
    boxed: bool = False

    def apply(self, operation: str, arguments: tuple[Any, ...]) -> None:
        if not 0 <= self.position < len(arguments):
            raise ArgumentMutationError(
                f"{operation} has no argument at position {self.position}",
                position=self.position,
                context=ErrorContext(operation=operation),
            )

        target = arguments[self.position]

        if isinstance(target, Ref):
            target.set(Ref(self.value) if self.boxed else self.value)
            return

        if not self.boxed:
            if isinstance(target, MutableSequence) and isinstance(self.value, (list, tuple)):
                target[:] = self.value
                return
            if isinstance(target, MutableMapping) and isinstance(self.value, dict):
                target.clear()
                target.update(self.value)
                return

        raise ArgumentMutationError(
            f"Argument {self.position} of {operation} is {type_name(target)}, "
            f"which cannot receive {type_name(self.value)}",
            position=self.position,
            context=ErrorContext(operation=operation),
        )
