"""Argument patterns and the matching rules behind them.

A declared argument is either a plain value, matched by equality, or one of
the matchers below:

    >>> from venomock import ANY, AnyOfType, AnyIf
    >>> mock.when("fetch", ANY, AnyOfType("int"))
    >>> mock.when("store", AnyIf("a non-empty key", lambda k: bool(k)))

``None`` as a pattern matches only ``None``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SupportsEqual(Protocol):
    """A value that knows how to compare itself with another of its kind."""

    def equal(self, other: Any) -> bool: ...


class ArgumentMatcher(ABC):
    """Base class for non-literal argument patterns."""

    @abstractmethod
    def matches(self, actual: Any) -> bool:
        """Return True if ``actual`` satisfies this pattern."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Short description used in diagnostics."""
        ...

    def __repr__(self) -> str:
        return self.describe()


class _AnyArgument(ArgumentMatcher):
    def matches(self, actual: Any) -> bool:
        return True

    def describe(self) -> str:
        return "ANY"


ANY = _AnyArgument()


class AnyOfType(ArgumentMatcher):
    """Matches any argument whose runtime type name is exactly ``type_name``.

    Builtin types are named by their bare name (``"str"``, ``"int"``), every
    other type by ``module.QualName``. Subclasses do not match.
    """

    def __init__(self, type_name: str | type) -> None:
        if isinstance(type_name, type):
            type_name = qualified_name(type_name)
        self.type_name = type_name

    def matches(self, actual: Any) -> bool:
        return type_name(actual) == self.type_name

    def describe(self) -> str:
        return self.type_name

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnyOfType) and other.type_name == self.type_name

    def __hash__(self) -> int:
        return hash((AnyOfType, self.type_name))


class AnyIf(ArgumentMatcher):
    """Matches any argument accepted by ``predicate``."""

    def __init__(self, description: str, predicate: Callable[[Any], bool]) -> None:
        self.description = description
        self.predicate = predicate

    def matches(self, actual: Any) -> bool:
        return bool(self.predicate(actual))

    def describe(self) -> str:
        return self.description


def qualified_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def type_name(value: Any) -> str:
    """Runtime type name of ``value`` as compared by ``AnyOfType``."""
    return qualified_name(type(value))


def matches(pattern: Any, actual: Any) -> bool:
    """Decide whether one declared pattern matches one actual argument."""
    if isinstance(pattern, ArgumentMatcher):
        return pattern.matches(actual)
    if pattern is None:
        return actual is None
    if (
        not isinstance(pattern, type)
        and isinstance(pattern, SupportsEqual)
        and isinstance(actual, type(pattern))
    ):
        try:
            return bool(pattern.equal(actual))
        except Exception:
            return False
    return deep_equal(pattern, actual) or pattern is actual


def matches_all(patterns: tuple[Any, ...], arguments: tuple[Any, ...]) -> bool:
    if len(patterns) != len(arguments):
        return False
    return all(matches(p, a) for p, a in zip(patterns, arguments))


def deep_equal(expected: Any, actual: Any) -> bool:
    """Structural equality that walks containers and plain objects.

    Values of different exact types are never equal, so ``1`` does not equal
    ``1.0`` or ``True``.
    """
    return _deep_equal(expected, actual, set())


def _deep_equal(expected: Any, actual: Any, visited: set[tuple[int, int]]) -> bool:
    if expected is actual:
        return True
    if type(expected) is not type(actual):
        return False

    key = (id(expected), id(actual))
    if key in visited:
        return True

    if isinstance(expected, Mapping):
        if expected.keys() != actual.keys():
            return False
        visited.add(key)
        return all(_deep_equal(v, actual[k], visited) for k, v in expected.items())

    if isinstance(expected, (list, tuple)):
        if len(expected) != len(actual):
            return False
        visited.add(key)
        return all(_deep_equal(e, a, visited) for e, a in zip(expected, actual))

    cls = type(expected)
    if cls.__eq__ is not object.__eq__:
        try:
            return bool(expected == actual)
        except (TypeError, ValueError):
            return False

    if isinstance(expected, BaseException):
        visited.add(key)
        if not _deep_equal(expected.args, actual.args, visited):
            return False
        return _deep_equal(_fields(expected), _fields(actual), visited)

    # Plain instances of user classes compare by attributes
    if cls.__module__ != "builtins" and (hasattr(expected, "__dict__") or _slot_names(cls)):
        visited.add(key)
        return _deep_equal(_fields(expected), _fields(actual), visited)

    return False


_UNSET = object()


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _fields(value: Any) -> dict[str, Any]:
    """Instance attributes from ``__dict__`` and every ``__slots__`` in the MRO."""
    fields = dict(getattr(value, "__dict__", {}))
    for name in _slot_names(type(value)):
        fields[name] = getattr(value, name, _UNSET)
    return fields
