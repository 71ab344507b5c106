# formatkit/responder.py
"""
Responders receive ``(format, handler)`` registrations and pick the one that
answers a request.

`Responder` is the protocol the dispatcher drives: one explicit ``format``
entry point keyed by name plus the fixed ``any`` fallback. `FormatResponder`
is a reference implementation usable by any host framework that can supply
the requested formats (highest priority first) and a default renderer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Protocol, Sequence, runtime_checkable

from formatkit.conf import get_settings
from formatkit.exceptions import NotAcceptableError

logger = logging.getLogger(__name__)

Handler = Callable[[], Any]


@runtime_checkable
class Responder(Protocol):
    def format(self, name: str, handler: Optional[Handler] = None) -> None: ...

    def any(self, handler: Optional[Handler] = None) -> None: ...


@dataclass(frozen=True)
class Registration:
    format: str
    handler: Optional[Handler]


class FormatResponder:
    """Collects registrations in order and resolves them against requested formats.

    Resolution walks ``requested`` in priority order:

    - a requested ``any`` selects the first registration;
    - a requested format with a registration selects the first one for it;
    - otherwise an ``any`` registration answers for the requested format.

    The first registration for a format always wins, so registration order
    decides precedence between overlapping handlers.
    """

    def __init__(
        self,
        requested: Iterable[str],
        default_renderer: Callable[[str], Any],
        *,
        any_format: str | None = None,
    ) -> None:
        self.any_format = any_format or str(get_settings()["ANY_FORMAT"])
        self.requested: tuple[str, ...] = tuple(str(f) for f in requested)
        self.default_renderer = default_renderer
        self._registrations: list[Registration] = []

    # --- Responder protocol ---

    def format(self, name: str, handler: Optional[Handler] = None) -> None:
        self._registrations.append(Registration(str(name), handler))

    def any(self, handler: Optional[Handler] = None) -> None:
        self._registrations.append(Registration(self.any_format, handler))

    # --- resolution ---

    @property
    def registrations(self) -> Sequence[Registration]:
        return tuple(self._registrations)

    def _first(self, name: str) -> Optional[Registration]:
        return next((r for r in self._registrations if r.format == name), None)

    def negotiate(self) -> tuple[str, Optional[Handler]]:
        """Return ``(format, handler)`` for the winning registration.

        :raises NotAcceptableError: if no registration satisfies any requested format.
        """
        fallback = self._first(self.any_format)
        for requested in self.requested:
            if requested == self.any_format:
                if self._registrations:
                    first = self._registrations[0]
                    return first.format, first.handler
                continue
            match = self._first(requested)
            if match is not None:
                return match.format, match.handler
            if fallback is not None:
                return requested, fallback.handler

        raise NotAcceptableError(self.requested, [r.format for r in self._registrations])

    def respond(self) -> Any:
        fmt, handler = self.negotiate()
        logger.debug("Negotiated format %r from %s", fmt, self.requested)
        if handler is None:
            return self.default_renderer(fmt)
        return handler()


__all__ = ["Responder", "FormatResponder", "Registration", "Handler"]
