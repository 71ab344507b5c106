# formatkit_django/negotiation.py
"""Map a Django request onto the ordered list of format names it asks for."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from django.http import HttpRequest

from .settings import FormatTable, get_formats, get_str

logger = logging.getLogger(__name__)


def _quality(media_type: Any) -> float:
    raw = media_type.params.get("q", 1)
    if isinstance(raw, bytes):
        raw = raw.decode("ascii", "ignore")
    try:
        return float(raw)
    except (TypeError, ValueError):
        return 1.0


def _accepted_formats(request: HttpRequest, table: FormatTable, any_format: str) -> list[str]:
    formats: list[str] = []
    # Older Django keeps header order, so weigh by q here; the sort is stable for ties.
    media_types = sorted(request.accepted_types, key=_quality, reverse=True)
    for media_type in media_types:
        if _quality(media_type) <= 0:
            continue
        mime = f"{media_type.main_type}/{media_type.sub_type}"
        if mime == "*/*":
            name = any_format
        else:
            name = table.format_for(mime)
        if name is None:
            logger.debug("Skipping unknown media type %s", mime)
            continue
        if name not in formats:
            formats.append(name)
    return formats


def requested_formats(
    request: HttpRequest,
    kwargs: Mapping[str, Any] | None = None,
    *,
    table: FormatTable | None = None,
) -> list[str]:
    """Return requested format names, highest priority first.

    An explicit format (URL kwarg, then query-string parameter) wins outright;
    otherwise the ``Accept`` header is mapped through the format table. When
    nothing maps, the request is treated as accepting ``any``.
    """
    param = get_str("FORMAT_PARAM")
    any_format = get_str("ANY_FORMAT")

    explicit = (kwargs or {}).get(param) or request.GET.get(param)
    if explicit:
        return [str(explicit)]

    formats = _accepted_formats(request, table or get_formats(), any_format)
    return formats or [any_format]


__all__ = ["requested_formats"]
