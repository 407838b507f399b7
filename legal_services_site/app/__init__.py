"""
Application package initializer.

The landing page is organised the same way as an API service: content
records live in ``schemas``, the static content and the rendering
logic live in ``services``, and the HTTP routes live in ``api``.  The
page itself is rendered from ``templates/landing.html``.
"""

from .main import app  # noqa: F401
