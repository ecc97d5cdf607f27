"""Human-readable rendering of calls for diagnostics."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.pretty import pretty_repr

from venomock.config import MockSettings, get_settings
from venomock.matchers import ArgumentMatcher


class CallRenderer:
    """Renders values and calls as ``name(arg, arg, ...)`` strings."""

    def __init__(self, settings: MockSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def render_value(self, value: Any) -> str:
        if isinstance(value, ArgumentMatcher):
            return value.describe()
        return pretty_repr(
            value,
            max_width=self.settings.max_width,
            max_length=self.settings.max_length,
            max_string=self.settings.max_string,
            max_depth=self.settings.max_depth,
        )

    def render_arguments(self, arguments: Iterable[Any]) -> str:
        return ", ".join(self.render_value(a) for a in arguments)

    def render_call(self, name: str, arguments: Iterable[Any]) -> str:
        return f"{name}({self.render_arguments(arguments)})"
