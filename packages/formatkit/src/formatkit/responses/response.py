# formatkit/responses/response.py
"""
The ordered format table for a single controller action.

A `Response` records three kinds of registrations:

- custom formats (``register_format``), each with its own callback or ``None``
  meaning "known format, use the default rendering";
- published formats (``publish``), a group of formats sharing one callback;
- the default callback (``default``), used for the fallback ``any`` format.

Callbacks receive the controller instance as their first argument, e.g.::

    r = Response()
    r.publish("xml", "json", callback=lambda view: view.render_object())

    @r.default
    def _(view):
        return view.render_format("html")
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, Optional

from formatkit.exceptions import MissingPublishCallbackError

logger = logging.getLogger(__name__)

Callback = Callable[..., Any]


def _coerce_format(name: Hashable) -> str:
    return str(name)


class Response:
    """Format → callback bindings for one action."""

    __slots__ = ("default_callback", "blocks", "block_order", "publish_formats", "publish_block")

    def __init__(self) -> None:
        self.default_callback: Optional[Callback] = None
        self.blocks: dict[str, Optional[Callback]] = {}
        self.block_order: list[str] = []
        self.publish_formats: list[str] = []
        self.publish_block: Optional[Callback] = None

    # --- registration ---

    def default(self, callback: Optional[Callback] = None) -> Optional[Callback]:
        """Set the callback for the fallback format, or return the current one."""
        if callback is not None:
            self.default_callback = callback
        return self.default_callback

    def publish(self, *formats: Hashable, callback: Optional[Callback] = None) -> Callback:
        """Publish ``formats`` under a single shared callback.

        Formats already published keep their position. Publishing without a
        callback is only allowed once a shared callback is on record.

        :raises MissingPublishCallbackError: if ``callback`` is omitted and no
            shared callback exists yet.
        """
        names = [_coerce_format(f) for f in formats]
        if callback is None and self.publish_block is None:
            raise MissingPublishCallbackError(names)

        for name in names:
            if name not in self.publish_formats:
                self.publish_formats.append(name)
        if callback is not None:
            self.publish_block = callback

        logger.debug("Published formats %s", ",".join(self.publish_formats))
        return self.publish_block

    def register_format(self, name: Hashable, callback: Optional[Callback] = None) -> Optional[Callback]:
        """Register a custom format, optionally with its own callback.

        Without a callback an unknown format is recorded as ``None`` so the
        responder still receives it and falls back to its default rendering;
        a format that already has a callback keeps it.
        """
        key = _coerce_format(name)
        if callback is not None:
            self.blocks[key] = callback
        elif key not in self.blocks:
            self.blocks[key] = None
        if key not in self.block_order:
            self.block_order.append(key)
        return self.blocks[key]

    # --- iteration ---

    def each_format(self) -> list[tuple[str, Optional[Callback]]]:
        return [(name, self.blocks.get(name)) for name in self.block_order]

    def each_published(self) -> list[tuple[str, Optional[Callback]]]:
        return [(name, self.publish_block) for name in self.publish_formats]

    @property
    def formats(self) -> tuple[str, ...]:
        """Every registered format, custom first, without duplicates."""
        seen: dict[str, None] = dict.fromkeys(self.block_order)
        seen.update(dict.fromkeys(self.publish_formats))
        return tuple(seen)

    @property
    def is_empty(self) -> bool:
        return not (self.block_order or self.publish_formats or self.default_callback)

    # --- duplication ---

    def copy(self) -> "Response":
        """Return a duplicate that shares no container with this response."""
        clone = type(self).__new__(type(self))
        clone.default_callback = self.default_callback
        clone.blocks = dict(self.blocks)
        clone.block_order = list(self.block_order)
        clone.publish_formats = list(self.publish_formats)
        clone.publish_block = self.publish_block
        return clone

    def __copy__(self) -> "Response":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Response":
        return self.copy()

    def __repr__(self) -> str:
        return (
            f"<Response formats={self.block_order!r} published={self.publish_formats!r} "
            f"default={'yes' if self.default_callback else 'no'}>"
        )


__all__ = ["Response", "Callback"]
