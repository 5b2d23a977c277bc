"""
Main entrypoint for the Directory API.

Builds the application with default settings at import time so that
it can be served directly by an ASGI server, e.g.::

    uvicorn directory_api.app.main:app

``run.py`` uses ``factory.create_app`` instead so that the serve
directory from its command line is the only one mounted.
"""

from .factory import create_app

app = create_app()
