# formatkit/exceptions.py
"""Exception hierarchy for formatkit."""

from __future__ import annotations

from typing import Iterable


class FormatKitError(Exception):
    """Base for all formatkit exceptions."""


# ----------------------------------------------------------------------------
# Configuration errors
# ----------------------------------------------------------------------------
class ResponseConfigurationError(FormatKitError): ...


class MissingPublishCallbackError(ResponseConfigurationError, ValueError):
    """Raised when new formats are published without a callback and none is on record."""

    def __init__(self, formats: Iterable[str]) -> None:
        self.formats = tuple(formats)
        joined = ", ".join(self.formats) or "<none>"
        super().__init__(f"A callback is required to publish format(s): {joined}")


# ----------------------------------------------------------------------------
# Negotiation errors
# ----------------------------------------------------------------------------
class NegotiationError(FormatKitError): ...


class NotAcceptableError(NegotiationError):
    """No registered format satisfies any of the requested formats."""

    def __init__(self, requested: Iterable[str], available: Iterable[str]) -> None:
        self.requested = tuple(requested)
        self.available = tuple(available)
        super().__init__(
            f"None of the requested formats ({', '.join(self.requested) or '<none>'}) "
            f"is available ({', '.join(self.available) or '<none>'})"
        )


__all__ = [
    "FormatKitError",
    "ResponseConfigurationError",
    "MissingPublishCallbackError",
    "NegotiationError",
    "NotAcceptableError",
]
