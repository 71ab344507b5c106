# formatkit_django/views.py
"""
Class-based view support.

Example::

    class ArticleView(ResourceResponseMixin, View):
        template_dir = "articles"

        @classmethod
        def configure_responses(cls, r):
            r.get("index").publish("json", callback=lambda view: JsonResponse(view.payload()))

        def get(self, request, *args, **kwargs):
            return self.response_for("index")

``GET /articles/?format=json`` answers with the published callback; a browser
request falls through to ``any`` and renders ``articles/index.html``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from django.http import HttpResponse
from django.template.response import TemplateResponse

from formatkit.exceptions import NotAcceptableError
from formatkit.responder import FormatResponder, Responder
from formatkit.responses import ResourceResponses

from .negotiation import requested_formats
from .settings import get_formats, get_str

logger = logging.getLogger(__name__)


class ResourceResponseMixin(ResourceResponses):
    """Wire :class:`ResourceResponses` into a Django ``View``.

    Expects ``self.request`` and ``self.kwargs`` as set by ``View.setup()``.
    """

    template_dir: str | None = None
    not_acceptable_status = 406

    def get_requested_formats(self) -> list[str]:
        return requested_formats(self.request, getattr(self, "kwargs", None))

    def get_format_template_names(self, fmt: str) -> list[str]:
        pattern = get_str("TEMPLATE_NAME_PATTERN")
        name = pattern.format(action=self.action_name, format=fmt)
        if self.template_dir:
            name = f"{self.template_dir.rstrip('/')}/{name}"
        return [name]

    def get_format_context(self, fmt: str) -> dict[str, Any]:
        context = {"view": self, "format": fmt, "action": self.action_name}
        get_context_data = getattr(self, "get_context_data", None)
        if callable(get_context_data):
            context.update(get_context_data())
        return context

    def render_format(self, fmt: str) -> TemplateResponse:
        """Default rendering for a format registered without a callback."""
        if fmt == get_str("ANY_FORMAT"):
            fmt = get_str("DEFAULT_FORMAT")
        return TemplateResponse(
            self.request,
            self.get_format_template_names(fmt),
            self.get_format_context(fmt),
            content_type=get_formats().mime_for(fmt),
        )

    def get_responder(self) -> FormatResponder:
        return FormatResponder(
            self.get_requested_formats(),
            self.render_format,
            any_format=get_str("ANY_FORMAT"),
        )

    def respond_to(self, configure: Callable[[Responder], None]) -> Any:
        try:
            return super().respond_to(configure)
        except NotAcceptableError as exc:
            logger.info(
                "Not acceptable: %s.%s requested %s",
                type(self).__name__,
                self.action_name,
                ",".join(exc.requested),
            )
            return HttpResponse(
                f"Not Acceptable: {', '.join(exc.available)}",
                status=self.not_acceptable_status,
                content_type="text/plain",
            )


__all__ = ["ResourceResponseMixin"]
