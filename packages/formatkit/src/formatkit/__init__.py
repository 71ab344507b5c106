"""
formatkit — declarative per-action content-negotiation responses.

Controllers register, per action, which formats they answer and with what:

- custom formats (``Response.register_format``), each with its own callback;
- published formats (``Response.publish``), sharing one callback;
- a default callback (``Response.default``) for the fallback ``any`` format.

At request time ``response_for(action)`` replays those registrations into a
responder, custom formats first, then published formats, then ``any``.

This core package is framework-agnostic. `formatkit_django` wires it into
Django class-based views.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    FormatKitError,
    MissingPublishCallbackError,
    NotAcceptableError,
    ResponseConfigurationError,
)
from .responder import FormatResponder, Responder
from .responses import Collector, ResourceResponses, Response, attach_to, dispatch

try:
    __version__ = version("formatkit")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Collector",
    "FormatKitError",
    "FormatResponder",
    "MissingPublishCallbackError",
    "NotAcceptableError",
    "ResourceResponses",
    "Responder",
    "Response",
    "ResponseConfigurationError",
    "attach_to",
    "dispatch",
]
