# formatkit_django/apps.py
"""
formatkit_django.apps
=====================

Django integration for formatkit.

Responsibilities
----------------
- Register the formatkit system checks.
- Seed the core formatkit settings from ``FORMATKIT_*`` project settings so
  framework-agnostic code (e.g. ``FormatResponder``) sees the same values.
"""

import logging

from django.apps import AppConfig
from django.conf import settings as dj_settings

from formatkit.conf import get_settings

logger = logging.getLogger(__name__)


class FormatKitDjangoConfig(AppConfig):
    """Django AppConfig for formatkit."""

    name = "formatkit_django"
    label = "formatkit_django"
    verbose_name = "formatkit"

    def ready(self) -> None:
        from . import checks  # noqa: F401  registers system checks

        overrides = {
            key: getattr(dj_settings, key)
            for key in dir(dj_settings)
            if key.startswith("FORMATKIT_") and key != "FORMATKIT_FORMATS"
        }
        get_settings().update_from_mapping(overrides, namespace="FORMATKIT")
        logger.debug("formatkit settings seeded: %s", ",".join(sorted(overrides)) or "<defaults>")
