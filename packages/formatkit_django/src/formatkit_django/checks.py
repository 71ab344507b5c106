# formatkit_django/checks.py
"""
Django system checks for formatkit configuration.

- ``FORMATKIT-E001``: ``FORMATKIT_FORMATS`` is not a mapping.
- ``FORMATKIT-E002``: a format entry fails validation (bad name or MIME types).
- ``FORMATKIT-W001``: ``FORMATKIT_DEFAULT_FORMAT`` names no known format.

These run at startup and with ``python manage.py check``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from django.conf import settings
from django.core import checks
from pydantic import ValidationError

from .settings import FormatDefinition, get_format_mapping, get_str

LOGGER = logging.getLogger(__name__)
TAG = "formatkit"
CHECK_ID_PREFIX = "FORMATKIT"


@checks.register(TAG)
def check_formatkit_formats(app_configs: Optional[Iterable] = None, **kwargs: Any) -> List[checks.CheckMessage]:
    """Validate ``FORMATKIT_FORMATS`` and ``FORMATKIT_DEFAULT_FORMAT``."""
    messages: List[checks.CheckMessage] = []

    project = getattr(settings, "FORMATKIT_FORMATS", None)
    if project is not None and not isinstance(project, Mapping):
        messages.append(
            checks.Error(
                "FORMATKIT_FORMATS must be a mapping of format name to MIME types.",
                hint="e.g. FORMATKIT_FORMATS = {'iphone': ['text/html']}",
                obj="settings.FORMATKIT_FORMATS",
                id=f"{CHECK_ID_PREFIX}-E001",
            )
        )
        return messages

    names: set[str] = set()
    for name, mime_types in get_format_mapping().items():
        try:
            FormatDefinition(name=name, mime_types=mime_types)
        except ValidationError as exc:
            messages.append(
                checks.Error(
                    f"Invalid format definition {name!r}: {exc.errors()[0]['msg']}",
                    obj="settings.FORMATKIT_FORMATS",
                    id=f"{CHECK_ID_PREFIX}-E002",
                )
            )
            continue
        names.add(str(name).strip())

    default_format = get_str("DEFAULT_FORMAT")
    if default_format not in names:
        messages.append(
            checks.Warning(
                f"FORMATKIT_DEFAULT_FORMAT {default_format!r} is not a known format.",
                hint=f"Known formats: {', '.join(sorted(names))}",
                obj="settings.FORMATKIT_DEFAULT_FORMAT",
                id=f"{CHECK_ID_PREFIX}-W001",
            )
        )

    if messages:
        LOGGER.debug("formatkit checks reported %d issue(s)", len(messages))
    return messages


__all__ = ["check_formatkit_formats"]
