"""venomock - declarative test doubles with call-count verification.

A test declares the calls it expects on a hand-written test double, the code
under test calls the double, and the test verifies how often each declared
call happened.

Example:
    >>> from venomock import ANY, Mock
    >>>
    >>> class FakeGreeter(Mock):
    ...     def greet(self, name):
    ...         return self.called(name).as_str(0)
    >>>
    >>> greeter = FakeGreeter()
    >>> greeter.when("greet", ANY).with_return("hi").exactly(2)
    >>> greeter.greet("alice")
    'hi'
    >>> greeter.verify()
    (False, VerificationFailure('Function greet executed 1 times, expected: 2'))

Core API:
    Mock: Registry of expectations for one test double
    Expectation: A declared call, configured by chaining
    ResultView: Typed access to the values configured with with_return
    ANY, AnyOfType, AnyIf: Argument patterns
    Ref: Writable reference for out-parameters
"""

from venomock.config import MockSettings, get_settings, load_settings
from venomock.constraints import CountConstraint, CountKind
from venomock.errors import (
    ArgumentMutationError,
    CallerIdentityError,
    ConfigValidationError,
    ConfiguredPanic,
    ErrorCode,
    ErrorContext,
    TypeMismatchError,
    UnmatchedCallError,
    UnsupportedFeatureError,
    VenomockError,
    VerificationFailure,
)
from venomock.expectations import Expectation
from venomock.matchers import ANY, AnyIf, AnyOfType, ArgumentMatcher, SupportsEqual, deep_equal, matches, type_name
from venomock.mock import Mock
from venomock.refs import Mutation, Ref
from venomock.render import CallRenderer
from venomock.results import ResultView
from venomock.verification import MockVerifier, verify_expectations

__version__ = "0.1.0"

__all__ = [
    # Registry
    "Mock",
    "Expectation",
    "ResultView",
    # Patterns
    "ANY",
    "AnyIf",
    "AnyOfType",
    "ArgumentMatcher",
    "SupportsEqual",
    "deep_equal",
    "matches",
    "type_name",
    # Out-parameters
    "Mutation",
    "Ref",
    # Verification
    "CountConstraint",
    "CountKind",
    "MockVerifier",
    "verify_expectations",
    # Rendering and settings
    "CallRenderer",
    "MockSettings",
    "get_settings",
    "load_settings",
    # Errors
    "VenomockError",
    "ErrorCode",
    "ErrorContext",
    "UnmatchedCallError",
    "ConfiguredPanic",
    "ArgumentMutationError",
    "VerificationFailure",
    "TypeMismatchError",
    "ConfigValidationError",
    "CallerIdentityError",
    "UnsupportedFeatureError",
]
