# formatkit/responses/collector.py
"""Per-controller-class namespace of :class:`Response` objects keyed by action name."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterator

from .response import Response

logger = logging.getLogger(__name__)


def _coerce_action(name: Hashable) -> str:
    return str(name)


class Collector:
    """Action name → :class:`Response`, created on first access.

    Reading an unknown action is not an error: a fresh empty ``Response`` is
    stored and returned. Copies are deep, so two collectors never share a
    ``Response``.
    """

    def __init__(self) -> None:
        self._store: dict[str, Response] = {}

    def get(self, action: Hashable) -> Response:
        key = _coerce_action(action)
        try:
            return self._store[key]
        except KeyError:
            response = self._store[key] = Response()
            logger.debug("Materialized response for action %r", key)
            return response

    __getitem__ = get

    def __contains__(self, action: object) -> bool:
        return _coerce_action(action) in self._store

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._store))

    def __len__(self) -> int:
        return len(self._store)

    def actions(self) -> tuple[str, ...]:
        return tuple(self._store)

    def items(self) -> tuple[tuple[str, Response], ...]:
        return tuple(self._store.items())

    # --- duplication ---

    def copy(self) -> "Collector":
        clone = type(self)()
        for action, response in self._store.items():
            clone._store[action] = response.copy()
        return clone

    def __copy__(self) -> "Collector":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Collector":
        return self.copy()

    def __repr__(self) -> str:
        return f"<Collector actions={list(self._store)!r}>"


__all__ = ["Collector"]
