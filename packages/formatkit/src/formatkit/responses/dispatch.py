# formatkit/responses/dispatch.py
"""Replay a :class:`Response` into a responder in precedence order."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from formatkit.responder import Handler, Responder
from .response import Callback, Response

logger = logging.getLogger(__name__)

Wrap = Callable[[Callback], Handler]


def dispatch(response: Response, responder: Responder, wrap: Wrap) -> None:
    """Drive ``responder`` with every registration of ``response``.

    Custom formats come first, then published formats, then exactly one
    ``any`` call. A responder that picks the first matching registration
    therefore prefers custom over published over default. Formats without a
    callback are passed with no handler at all.
    """

    def _register(fmt: str, callback: Optional[Callback]) -> None:
        if callback is None:
            responder.format(fmt)
        else:
            responder.format(fmt, wrap(callback))

    for fmt, callback in response.each_format():
        _register(fmt, callback)

    for fmt, callback in response.each_published():
        _register(fmt, callback)

    default = response.default()
    if default is None:
        responder.any()
    else:
        responder.any(wrap(default))

    logger.debug("Dispatched %r", response)


__all__ = ["dispatch"]
