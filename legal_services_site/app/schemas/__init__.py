"""
Pydantic schema definitions for the landing page.

``content`` holds the records rendered as visible sections of the page;
``structured_data`` holds the schema.org records embedded as JSON-LD.
All records are frozen: they are created once and never mutated.
"""
