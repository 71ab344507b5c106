from contextlib import contextmanager

from formatkit.responses import extension
from formatkit.tracing import SpanPath


def test_span_path_child_skips_empty_segments():
    root = SpanPath.from_str("formatkit.response_for")

    assert str(root.child("PagesController", "", "index")) == "formatkit.response_for.PagesController.index"
    assert SpanPath.from_str("  ").parts == ()


def test_response_for_span_is_named_after_controller_and_action(monkeypatch):
    spans = []

    @contextmanager
    def recording_span(name, *, attributes=None):
        spans.append((str(name), dict(attributes or {})))
        yield None

    monkeypatch.setattr(extension, "service_span_sync", recording_span)

    class PagesController(extension.ResourceResponses):
        def respond_to(self, configure):
            return "ok"

    PagesController.responses().get("index").publish("json", callback=lambda c: "json")

    assert PagesController().response_for("index") == "ok"
    assert spans == [
        (
            "formatkit.response_for.PagesController.index",
            {
                "formatkit.controller": PagesController.__qualname__,
                "formatkit.action": "index",
                "formatkit.formats": ["json"],
            },
        )
    ]
