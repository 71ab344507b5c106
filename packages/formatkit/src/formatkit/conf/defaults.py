"""Default configuration values for formatkit."""

DEFAULTS: dict[str, object] = {
    # Name of the fallback format driven after every custom/published format
    "ANY_FORMAT": "any",
    # Query-string parameter / URL kwarg that pins the requested format
    "FORMAT_PARAM": "format",
    # Format assumed when the request names nothing usable
    "DEFAULT_FORMAT": "html",
    # format name -> MIME types, first entry is the canonical content type
    "FORMATS": {
        "html": ["text/html", "application/xhtml+xml"],
        "text": ["text/plain"],
        "json": ["application/json", "text/x-json"],
        "xml": ["application/xml", "text/xml"],
        "js": ["text/javascript", "application/javascript"],
        "csv": ["text/csv"],
        "rss": ["application/rss+xml"],
        "atom": ["application/atom+xml"],
    },
    # Default rendering looks up templates named after the action and format
    "TEMPLATE_NAME_PATTERN": "{action}.{format}",
}
