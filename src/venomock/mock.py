"""The mock registry: declared expectations and recorded calls.

``Mock`` is meant to back a hand-written test double, either as a base class
or as an attribute, with one forwarding method per mocked operation:

    >>> class FakeClient(Mock):
    ...     def request(self, url):
    ...         r = self.called(url)
    ...         return r.as_int(0), r.as_str(1), r.as_error(2)
    >>>
    >>> client = FakeClient()
    >>> client.when("request", "https://example.com").with_return(200, "ok").exactly(1)
    >>> client.request("https://example.com")
    (200, 'ok', None)
    >>> client.verify()
    (True, None)

A Mock is not thread-safe: declare and call it from a single test.
"""

from __future__ import annotations

import logging
from typing import Any

from venomock.caller import caller_name
from venomock.config import MockSettings, get_settings
from venomock.errors import (
    ConfiguredPanic,
    ErrorContext,
    UnmatchedCallError,
    UnsupportedFeatureError,
    VerificationFailure,
)
from venomock.expectations import Expectation
from venomock.render import CallRenderer
from venomock.results import ResultView
from venomock.verification import verify_expectations

logger = logging.getLogger(__name__)


class Mock:
    """Holds the expectations of one test double, in declaration order."""

    def __init__(self, settings: MockSettings | None = None) -> None:
        self._settings = settings or get_settings()
        self._renderer = CallRenderer(self._settings)
        self._expectations: list[Expectation] = []

    @property
    def expectations(self) -> list[Expectation]:
        """Declared expectations, in declaration order."""
        return self._expectations.copy()

    def when(self, name: str, *arguments: Any) -> Expectation:
        """Declare a call to ``name`` with positional argument patterns.

        Args:
            name: Operation name, i.e. the forwarding method's name
            *arguments: Values, ANY, AnyOfType(...), AnyIf(...) or None

        Returns:
            The new expectation, to be configured further
        """
        expectation = Expectation(name=name, arguments=tuple(arguments))
        self._expectations.append(expectation)
        logger.debug("Declared %s", self._renderer.render_call(name, arguments))
        return expectation

    declare = when

    def called(self, *arguments: Any) -> ResultView:
        """Record a call to the forwarding method this is invoked from.

        Raises:
            CallerIdentityError: If there is no named calling function
            UnmatchedCallError: If no expectation matches
        """
        return self.record(caller_name(1), *arguments)

    def record(self, name: str, *arguments: Any) -> ResultView:
        """Record a call to ``name`` and apply the first matching expectation.

        Raises:
            UnmatchedCallError: If no expectation matches
            ConfiguredPanic: If the expectation panics with a non-exception value
            ArgumentMutationError: If a mutation cannot be written
        """
        expectation = self._find(name, arguments)
        if expectation is None:
            raise self._unmatched(name, arguments)

        expectation.observed_count += 1
        if self._settings.log_calls:
            logger.debug(
                "Matched %s (call %d)",
                self._renderer.render_call(name, arguments),
                expectation.observed_count,
            )

        panic = expectation.panic_value
        if panic is not None:
            if isinstance(panic, BaseException):
                raise panic.with_traceback(None)
            if isinstance(panic, type) and issubclass(panic, BaseException):
                raise panic
            raise ConfiguredPanic(panic, context=ErrorContext(operation=name))

        for mutation in expectation.mutations:
            mutation.apply(name, arguments)

        return ResultView(tuple(expectation.return_values))

    def _find(self, name: str, arguments: tuple[Any, ...]) -> Expectation | None:
        for expectation in self._expectations:
            if expectation.matches(name, arguments):
                return expectation
        return None

    def _unmatched(self, name: str, arguments: tuple[Any, ...]) -> UnmatchedCallError:
        rendered = self._renderer.render_arguments(arguments)
        message = f"Mock call missing for {name}({rendered})"

        candidates = [e for e in self._expectations if e.name == name]
        if candidates and self._settings.show_candidates:
            declared = "\n".join(f"  {self._renderer.render_call(e.name, e.arguments)}" for e in candidates)
            message = f"{message}\nDeclared expectations for {name}:\n{declared}"

        logger.warning("Mock call missing for %s(%s)", name, rendered)
        return UnmatchedCallError(
            message,
            context=ErrorContext(operation=name, arguments=rendered),
        )

    def in_order(self) -> Mock:
        """Ordered expectations are not supported."""
        raise UnsupportedFeatureError("Ordered expectations are not supported")

    def verify(self) -> tuple[bool, VerificationFailure | None]:
        """Check the call-count constraints of every expectation.

        Returns:
            (True, None) on success, (False, failure) for the first violation
        """
        return verify_expectations(self._expectations)

    def assert_verified(self) -> None:
        """Raise the first verification failure, if any."""
        ok, failure = self.verify()
        if not ok and failure is not None:
            raise failure

    def reset(self) -> None:
        """Drop all declared expectations."""
        self._expectations.clear()

    def __enter__(self) -> Mock:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is None:
            self.assert_verified()
