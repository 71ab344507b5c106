"""
formatkit_django — Django integration for formatkit.

- `formatkit_django.views.ResourceResponseMixin` for class-based views
- `formatkit_django.negotiation.requested_formats` for request → format names
- `formatkit_django.settings` for ``FORMATKIT_*`` settings accessors
- `formatkit_django.checks` for Django system checks

Add ``"formatkit_django"`` to ``INSTALLED_APPS`` to enable the checks.
"""
