"""
Top‑level package for the Venezuelan Legal Services site.

This file makes ``legal_services_site`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``legal_services_site.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
