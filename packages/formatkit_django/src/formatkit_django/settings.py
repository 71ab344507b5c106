# formatkit_django/settings.py
"""
Package-level configuration helpers for `formatkit_django`.

This is **not** your project's Django `settings.py`. It provides accessors
that read ``FORMATKIT_*`` values from `django.conf.settings`, falling back to
the core `formatkit.conf` defaults.

Keys:
- FORMATKIT_ANY_FORMAT: str
    Name of the fallback format. Defaults to ``"any"``.
- FORMATKIT_FORMAT_PARAM: str
    URL kwarg / query-string parameter naming the requested format.
- FORMATKIT_DEFAULT_FORMAT: str
    Format used for content types when the negotiated format is ``any``.
- FORMATKIT_FORMATS: Mapping[str, Sequence[str]]
    Extra or overriding format → MIME types entries, merged over the core table.
- FORMATKIT_TEMPLATE_NAME_PATTERN: str
    ``str.format`` pattern with ``{action}`` and ``{format}`` used for default rendering.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Iterable

from django.conf import settings as dj_settings
from pydantic import BaseModel, ConfigDict, field_validator

from formatkit.conf import get_settings

PREFIX = "FORMATKIT_"

_FORMAT_NAME_RE = re.compile(r"^[A-Za-z0-9_.+-]+$")


# ----------------------------
# Accessors
# ----------------------------

def get_setting(key: str, default: Any | None = None) -> Any:
    """Return ``FORMATKIT_<key>`` from the Django project or fall back.

    The lookup order is: project settings -> provided default -> core defaults.
    """
    name = key if key.startswith(PREFIX) else f"{PREFIX}{key}"
    if hasattr(dj_settings, name):
        return getattr(dj_settings, name)
    if default is not None:
        return default
    return get_settings().get(name[len(PREFIX):])


def get_str(key: str) -> str:
    val = get_setting(key)
    return str(val).strip() if val is not None else ""


# ----------------------------
# Format table
# ----------------------------

class FormatDefinition(BaseModel):
    """One named format and the MIME types that select it."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    mime_types: tuple[str, ...]

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        value = value.strip()
        if not _FORMAT_NAME_RE.match(value):
            raise ValueError(f"invalid format name {value!r}")
        return value

    @field_validator("mime_types", mode="before")
    @classmethod
    def _coerce_mime_types(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = [value]
        types = tuple(str(v).strip().lower() for v in value)
        if not types:
            raise ValueError("at least one MIME type is required")
        for mime in types:
            main, _, sub = mime.partition("/")
            if not main or not sub:
                raise ValueError(f"invalid MIME type {mime!r}")
        return types

    @property
    def content_type(self) -> str:
        return self.mime_types[0]


class FormatTable:
    """Bidirectional lookup between format names and MIME types."""

    def __init__(self, definitions: Iterable[FormatDefinition]) -> None:
        self._by_name: dict[str, FormatDefinition] = {}
        self._by_mime: dict[str, str] = {}
        for definition in definitions:
            self._by_name[definition.name] = definition
        # First format declaring a MIME type owns it.
        for definition in self._by_name.values():
            for mime in definition.mime_types:
                self._by_mime.setdefault(mime, definition.name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def get(self, name: str) -> FormatDefinition | None:
        return self._by_name.get(name)

    def mime_for(self, name: str) -> str | None:
        definition = self._by_name.get(name)
        return definition.content_type if definition else None

    def format_for(self, mime: str) -> str | None:
        return self._by_mime.get(mime.strip().lower())


def build_format_table(formats: Mapping[str, Any]) -> FormatTable:
    """Validate a format → MIME types mapping into a :class:`FormatTable`.

    :raises pydantic.ValidationError: on malformed entries.
    """
    return FormatTable(
        FormatDefinition(name=name, mime_types=mime_types) for name, mime_types in formats.items()
    )


def get_format_mapping() -> dict[str, Any]:
    """Core FORMATS with project ``FORMATKIT_FORMATS`` merged over them."""
    merged: dict[str, Any] = dict(get_settings()["FORMATS"])
    project = getattr(dj_settings, f"{PREFIX}FORMATS", None)
    if isinstance(project, Mapping):
        merged.update(project)
    return merged


def get_formats() -> FormatTable:
    return build_format_table(get_format_mapping())


__all__ = [
    "get_setting",
    "get_str",
    "FormatDefinition",
    "FormatTable",
    "build_format_table",
    "get_format_mapping",
    "get_formats",
]
