"""
Service layer.

Each service encapsulates one concern of the landing page: the static
copy, the contact deep-links, the JSON-LD document and the final
rendering.  The HTTP routes and the command line builder only talk to
these services.
"""
