"""Per-action format responses for controller classes."""

from .collector import Collector
from .dispatch import dispatch
from .extension import ResourceResponses, attach_to, derive_collector
from .response import Callback, Response

__all__ = [
    "Callback",
    "Collector",
    "Response",
    "ResourceResponses",
    "attach_to",
    "derive_collector",
    "dispatch",
]
