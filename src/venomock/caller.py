"""Lookup of the operation name a forwarding method was called under."""

from __future__ import annotations

import inspect

from venomock.errors import CallerIdentityError


def caller_name(depth: int = 1) -> str:
    """Name of the function ``depth`` frames above the one calling this.

    ``caller_name(0)`` is the name of the function that called
    ``caller_name``; ``caller_name(1)`` is its caller, and so on.

    Raises:
        CallerIdentityError: If the stack is not that deep or the frame
            belongs to module code, a lambda or a comprehension.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth + 1):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            raise CallerIdentityError()
        name = frame.f_code.co_name
    finally:
        del frame

    if name.startswith("<"):
        raise CallerIdentityError(f"Couldn't get the caller information: called from {name}")
    return name
