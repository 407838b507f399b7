"""
Version 1 of the content API.

Breaking changes to the JSON payloads should go into a new version
subpackage (e.g. ``v2``) so existing consumers keep working.
"""
