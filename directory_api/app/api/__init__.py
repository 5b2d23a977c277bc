"""
API package containing the HTTP routes.

The top‑level ``router`` in ``router.py`` includes every domain router
defined in ``endpoints``.
"""
