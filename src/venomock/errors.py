"""Exception hierarchy for venomock.

Every venomock error carries:
- error_code: an ErrorCode enum for programmatic handling
- context: ErrorContext with the operation and rendered call details
- suggestions: actionable steps to resolve the issue

Errors raised while a mock is being exercised (unmatched calls, configured
faults, bad argument mutations, type mismatches on results) are not meant to
be recovered from: they signal a broken test and should abort it.
``VerificationFailure`` is the exception to that rule; ``Mock.verify`` returns
it instead of raising it so the caller decides how to report it.

Example:
    try:
        client.fetch("https://example.com")
    except UnmatchedCallError as e:
        print(f"Error: {e}")
        for suggestion in e.suggestions:
            print(f"  - {suggestion}")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from venomock.constraints import CountConstraint


class ErrorCode(Enum):
    """Standardized error codes for venomock.

    Error codes are organized by category:
    - E1xx: Call matching errors
    - E2xx: Verification errors
    - E3xx: Result access errors
    - E4xx: Configuration errors
    - E9xx: Internal errors
    """

    # Call matching errors (E1xx)
    UNMATCHED_CALL = "E101"
    CONFIGURED_PANIC = "E102"
    ARGUMENT_MUTATION = "E103"

    # Verification errors (E2xx)
    VERIFICATION_FAILED = "E201"

    # Result access errors (E3xx)
    TYPE_MISMATCH = "E301"

    # Configuration errors (E4xx)
    INVALID_CONFIG = "E401"

    # Internal errors (E9xx)
    CALLER_UNKNOWN = "E901"
    UNSUPPORTED = "E902"
    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "matching"
        elif code_num < 300:
            return "verification"
        elif code_num < 400:
            return "result"
        elif code_num < 500:
            return "config"
        else:
            return "internal"


@dataclass
class ErrorContext:
    """Structured context attached to every venomock error.

    Attributes:
        operation: Name of the mocked operation involved
        arguments: Rendered argument list of the offending call
        extra: Additional context-specific information
    """

    operation: str | None = None
    arguments: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "operation": self.operation,
            "arguments": self.arguments,
            "extra": self.extra,
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        if self.operation:
            return f"operation={self.operation}"
        return "unknown location"


class VenomockError(Exception):
    """Base exception for all venomock errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with call details
        suggestions: List of actionable steps to resolve the issue
        recoverable: Whether the running test can meaningfully continue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []
    recoverable: bool = False

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        recoverable: bool | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        if recoverable is not None:
            self.recoverable = recoverable
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
            "",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.context.arguments is not None:
            lines.append(f"Arguments: {self.context.arguments}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class UnmatchedCallError(VenomockError):
    """A call reached a mock without any matching expectation.

    The message carries the rendered call so the missing declaration can be
    written straight from it.
    """

    error_code = ErrorCode.UNMATCHED_CALL
    default_message = "Mock call missing"
    default_suggestions = [
        "Declare the call with mock.when(<operation>, <patterns>...)",
        "Use ANY or AnyOfType(...) for arguments whose exact value does not matter",
        "Check that the number of declared patterns equals the number of arguments",
    ]


class ConfiguredPanic(VenomockError):
    """Raised for an expectation configured with a non-exception panic value.

    The configured value is available as ``value``.
    """

    error_code = ErrorCode.CONFIGURED_PANIC
    default_message = "Configured panic"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        self.value = value
        kwargs.setdefault("message", f"Configured panic: {value!r}")
        super().__init__(**kwargs)


class ArgumentMutationError(VenomockError):
    """A configured mutation could not be written into the call's argument."""

    error_code = ErrorCode.ARGUMENT_MUTATION
    default_message = "Cannot write into argument"
    default_suggestions = [
        "Pass a venomock.Ref (or a mutable list/dict) at the mutated position",
        "Check the position given to with_mutation (positions start at 0)",
    ]

    def __init__(self, message: str | None = None, position: int | None = None, **kwargs: Any) -> None:
        self.position = position
        super().__init__(message=message, **kwargs)


class VerificationFailure(VenomockError, AssertionError):
    """A call-count constraint was violated.

    Returned by ``Mock.verify`` and raised by ``Mock.assert_verified``.
    """

    error_code = ErrorCode.VERIFICATION_FAILED
    default_message = "Verification failed"
    recoverable = True

    def __init__(
        self,
        message: str | None = None,
        operation: str | None = None,
        observed: int = 0,
        constraint: CountConstraint | None = None,
        **kwargs: Any,
    ) -> None:
        self.operation = operation
        self.observed = observed
        self.constraint = constraint
        kwargs.setdefault("context", ErrorContext(operation=operation))
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        return self.message


class TypeMismatchError(VenomockError, TypeError):
    """A typed result accessor found a value of an incompatible type."""

    error_code = ErrorCode.TYPE_MISMATCH
    default_message = "Result has an unexpected type"
    default_suggestions = [
        "Check the values passed to with_return(...) against the accessors used",
    ]

    def __init__(
        self,
        message: str | None = None,
        index: int | None = None,
        expected: str | None = None,
        actual: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(message=message, **kwargs)


class ConfigValidationError(VenomockError):
    """Settings contain an invalid value."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check the VENOMOCK_* environment variables",
        "Check the settings YAML file syntax with a YAML linter",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base


class CallerIdentityError(VenomockError):
    """The calling operation's name could not be determined."""

    error_code = ErrorCode.CALLER_UNKNOWN
    default_message = "Couldn't get the caller information"
    default_suggestions = [
        "Call Mock.called(...) from a named method, or use Mock.record(name, ...)",
    ]


class UnsupportedFeatureError(VenomockError):
    """The requested feature is not implemented."""

    error_code = ErrorCode.UNSUPPORTED
    default_message = "Unsupported feature"
