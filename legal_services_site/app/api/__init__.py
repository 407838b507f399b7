"""
HTTP routes.

``pages`` serves the rendered landing page; ``v1`` exposes the same
content as read-only JSON for other clients.
"""
