"""Read-only access to the values configured with ``with_return``."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, TypeVar

from venomock.errors import TypeMismatchError
from venomock.matchers import qualified_name, type_name

T = TypeVar("T")


class ResultView:
    """Positional view over a matched expectation's return values.

    Typed accessors return the type's zero value when the index was never
    configured, and raise ``TypeMismatchError`` when it holds a value of
    another type.

    Example:
        >>> def request(self, url):
        ...     r = self.called(url)
        ...     return r.as_int(0), r.as_str(1), r.as_error(2)
    """

    __slots__ = ("_values",)

    def __init__(self, values: tuple[Any, ...] = ()) -> None:
        self._values = tuple(values)

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"ResultView({list(self._values)!r})"

    def contains(self, i: int) -> bool:
        """Return True if a value was configured at index ``i``."""
        return 0 <= i < len(self._values)

    def at(self, i: int) -> Any | None:
        """Value at index ``i``, or None if it was not configured."""
        if self.contains(i):
            return self._values[i]
        return None

    get = at

    def _narrow(self, i: int, expected: type | tuple[type, ...], name: str, zero: Any) -> Any:
        if not self.contains(i):
            return zero
        value = self._values[i]
        if not isinstance(value, expected):
            raise TypeMismatchError(
                f"Result {i} is {type_name(value)}, not {name}",
                index=i,
                expected=name,
                actual=type_name(value),
            )
        return value

    def as_int(self, i: int) -> int:
        """Value at ``i`` as an int; 0 if not configured."""
        if isinstance(self.at(i), bool):
            raise TypeMismatchError(f"Result {i} is bool, not int", index=i, expected="int", actual="bool")
        return self._narrow(i, int, "int", 0)

    def as_str(self, i: int) -> str:
        """Value at ``i`` as a str; "" if not configured."""
        return self._narrow(i, str, "str", "")

    def as_bool(self, i: int) -> bool:
        """Value at ``i`` as a bool; False if not configured."""
        return self._narrow(i, bool, "bool", False)

    def as_float(self, i: int) -> float:
        """Value at ``i`` as a float; 0.0 if not configured."""
        return self._narrow(i, float, "float", 0.0)

    def as_bytes(self, i: int) -> bytes:
        """Value at ``i`` as bytes; b"" if not configured."""
        return self._narrow(i, bytes, "bytes", b"")

    def as_error(self, i: int) -> BaseException | None:
        """Value at ``i`` as an exception; None if not configured or None."""
        if self.at(i) is None:
            return None
        return self._narrow(i, BaseException, "BaseException", None)

    def as_type(self, i: int, cls: type[T]) -> T | None:
        """Value at ``i`` as an instance of ``cls``; None if not configured."""
        return self._narrow(i, cls, qualified_name(cls), None)
