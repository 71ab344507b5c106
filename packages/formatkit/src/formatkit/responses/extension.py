# formatkit/responses/extension.py
"""
Controller-side surface: class-level ``responses`` plus per-request ``response_for``.

Each controller class owns its own :class:`Collector`. A subclass starts from
a deep copy of the nearest ancestor's collector, so configuring one class
never leaks into its parent or siblings::

    class PagesController(ResourceResponses):
        @classmethod
        def configure_responses(cls, r):
            r.get("index").publish("xml", "json", callback=lambda c: c.render_object())
            r.get("index").default(lambda c: c.render_format("html"))

        def index(self):
            return self.response_for("index")

Hosts supply ``respond_to`` (or the ``get_requested_formats`` /
``render_format`` hooks used by the default implementation).
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Hashable, Optional

from asgiref.sync import sync_to_async

from formatkit.responder import FormatResponder, Handler, Responder
from formatkit.tracing import SpanPath, service_span_sync
from .collector import Collector
from .dispatch import dispatch
from .response import Callback

logger = logging.getLogger(__name__)

_COLLECTOR_ATTR = "_formatkit_responses"
_CONFIGURE_HOOK = "configure_responses"
_SPAN_ROOT = SpanPath.from_str("formatkit.response_for")


# ---------------------------------------------------------------------------
# Class-level collector management
# ---------------------------------------------------------------------------

def _own_collector(cls: type) -> Optional[Collector]:
    return cls.__dict__.get(_COLLECTOR_ATTR)


def _inherited_collector(cls: type) -> Optional[Collector]:
    for base in cls.__mro__[1:]:
        collector = _own_collector(base)
        if collector is not None:
            return collector
    return None


def derive_collector(cls: type) -> Collector:
    """Return ``cls``'s own collector, creating it on first use.

    A new collector is a deep copy of the nearest ancestor's, or empty when
    no ancestor has one.
    """
    collector = _own_collector(cls)
    if collector is not None:
        return collector

    parent = _inherited_collector(cls)
    collector = parent.copy() if parent is not None else Collector()
    setattr(cls, _COLLECTOR_ATTR, collector)
    logger.debug(
        "Derived response collector for %s (%s)",
        cls.__qualname__,
        "copied from ancestor" if parent is not None else "new",
    )
    return collector


def _on_subclass(cls: type) -> None:
    # Snapshot the parent's configuration now so later parent changes stay local.
    if _inherited_collector(cls) is not None:
        derive_collector(cls)
    hook = cls.__dict__.get(_CONFIGURE_HOOK)
    if hook is not None:
        cls.responses(getattr(cls, _CONFIGURE_HOOK))


# ---------------------------------------------------------------------------
# Mixin
# ---------------------------------------------------------------------------

class ResourceResponses:
    """Mixin giving a controller class per-action format responses."""

    action_name: str | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _on_subclass(cls)

    @classmethod
    def responses(cls, configure: Optional[Callable[[Collector], Any]] = None) -> Collector:
        """Return this class's collector, passing it to ``configure`` first if given."""
        collector = derive_collector(cls)
        if configure is not None:
            configure(collector)
        return collector

    def wrap(self, callback: Callback) -> Handler:
        """Bind ``callback`` to this controller: the result calls ``callback(self, ...)``."""

        @functools.wraps(callback)
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            return callback(self, *args, **kwargs)

        return wrapped

    def response_for(self, action: Hashable) -> Any:
        """Answer the current request with the responses configured for ``action``."""
        response = type(self).responses().get(action)
        self.action_name = str(action)

        attributes = {
            "formatkit.controller": type(self).__qualname__,
            "formatkit.action": self.action_name,
            "formatkit.formats": list(response.formats),
        }
        span_name = _SPAN_ROOT.child(type(self).__name__, self.action_name)
        with service_span_sync(span_name, attributes=attributes):
            return self.respond_to(lambda responder: dispatch(response, responder, self.wrap))

    async def aresponse_for(self, action: Hashable) -> Any:
        """Async wrapper around :meth:`response_for`."""
        return await sync_to_async(self.response_for)(action)

    # --- host hooks ---

    def respond_to(self, configure: Callable[[Responder], None]) -> Any:
        """Build a responder, let ``configure`` register formats on it, then respond."""
        responder = self.get_responder()
        configure(responder)
        return responder.respond()

    def get_responder(self) -> FormatResponder:
        return FormatResponder(self.get_requested_formats(), self.render_format)

    def get_requested_formats(self) -> list[str]:
        raise NotImplementedError(f"{type(self).__name__} must implement get_requested_formats()")

    def render_format(self, fmt: str) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement render_format()")


_MIXIN_MEMBERS = (
    "action_name",
    "responses",
    "wrap",
    "response_for",
    "aresponse_for",
    "respond_to",
    "get_responder",
    "get_requested_formats",
    "render_format",
)


def attach_to(cls: type) -> type:
    """Class decorator giving ``cls`` the :class:`ResourceResponses` surface.

    Members the class already defines are kept. Subclasses of ``cls`` derive
    their collectors the same way mixin subclasses do.
    """
    if issubclass(cls, ResourceResponses):
        return cls

    for name in _MIXIN_MEMBERS:
        if name not in cls.__dict__:
            setattr(cls, name, ResourceResponses.__dict__[name])

    original = cls.__dict__.get("__init_subclass__")

    def __init_subclass__(subcls: type, **kwargs: Any) -> None:
        if original is not None:
            original.__func__(subcls, **kwargs)
        else:
            super(cls, subcls).__init_subclass__(**kwargs)
        _on_subclass(subcls)

    cls.__init_subclass__ = classmethod(__init_subclass__)
    derive_collector(cls)
    hook = cls.__dict__.get(_CONFIGURE_HOOK)
    if hook is not None:
        cls.responses(getattr(cls, _CONFIGURE_HOOK))
    return cls


__all__ = ["ResourceResponses", "attach_to", "derive_collector"]
