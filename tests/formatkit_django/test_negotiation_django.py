from formatkit_django.negotiation import requested_formats
from formatkit_django.settings import build_format_table


def test_url_kwarg_wins_over_query_and_accept(rf):
    request = rf.get("/articles/", {"format": "json"}, HTTP_ACCEPT="text/html")

    assert requested_formats(request, {"format": "xml"}) == ["xml"]


def test_query_param_wins_over_accept(rf):
    request = rf.get("/articles/", {"format": "json"}, HTTP_ACCEPT="text/html")

    assert requested_formats(request) == ["json"]


def test_accept_header_mapped_in_order(rf):
    request = rf.get(
        "/articles/",
        HTTP_ACCEPT="text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    )

    assert requested_formats(request) == ["html", "xml", "any"]


def test_missing_accept_header_means_any(rf):
    assert requested_formats(rf.get("/articles/")) == ["any"]


def test_unknown_media_types_fall_back_to_any(rf):
    request = rf.get("/articles/", HTTP_ACCEPT="application/pdf, image/*")

    assert requested_formats(request) == ["any"]


def test_project_formats_are_recognised(rf):
    request = rf.get("/articles/", HTTP_ACCEPT="text/x-iphone")

    assert requested_formats(request) == ["iphone"]


def test_format_param_setting(rf, settings):
    settings.FORMATKIT_FORMAT_PARAM = "fmt"
    request = rf.get("/articles/", {"fmt": "csv", "format": "json"})

    assert requested_formats(request) == ["csv"]


def test_explicit_table(rf):
    table = build_format_table({"vcard": ["text/vcard"]})
    request = rf.get("/contacts/", HTTP_ACCEPT="text/vcard, application/json")

    assert requested_formats(request, table=table) == ["vcard"]


def test_accept_quality_outranks_header_order(rf):
    request = rf.get("/articles/", HTTP_ACCEPT="application/json;q=0.5, text/html")

    assert requested_formats(request) == ["html", "json"]


def test_equal_quality_keeps_header_order(rf):
    request = rf.get("/articles/", HTTP_ACCEPT="application/xml;q=0.8, application/json;q=0.8, text/html;q=0.2")

    assert requested_formats(request) == ["xml", "json", "html"]


def test_zero_quality_is_not_acceptable(rf):
    request = rf.get("/articles/", HTTP_ACCEPT="application/json;q=0, text/html")

    assert requested_formats(request) == ["html"]
