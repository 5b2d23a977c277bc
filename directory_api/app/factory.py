"""
Application factory for the Directory API.

``create_app`` sets up logging, attaches the record store, registers
the not‑found handler, includes the routers and mounts the static
file directories.  Importing this module builds nothing; ``main``
creates the default app and ``run.py`` creates its own from the
command line settings.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import RecordNotFound
from .core.logging_config import setup_logging
from .services.record_store import RecordStore

logger = logging.getLogger(__name__)

# URL prefix -> subdirectory of the serve directory.
STATIC_MOUNTS = ("portfolio", "static")


async def record_not_found_handler(request: Request, exc: RecordNotFound) -> PlainTextResponse:
    logger.info("%s %s -> 404: %s", request.method, request.url.path, exc.render())
    return PlainTextResponse(exc.render(), status_code=status.HTTP_404_NOT_FOUND)


def create_app(
    store: Optional[RecordStore] = None,
    settings: Optional[Settings] = None,
    serve_dir: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Records to serve.  Defaults to a store over the built‑in users.
    settings : Optional[Settings]
        Settings to use instead of the ones read at import time.
    serve_dir : Optional[str]
        Root of the ``portfolio`` and ``static`` directories.  Overrides
        ``settings.serve_dir``; ``run.py`` passes its ``--dir`` flag here.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else RecordStore()
    app.add_exception_handler(RecordNotFound, record_not_found_handler)
    app.include_router(router)

    root = serve_dir if serve_dir is not None else settings.serve_dir
    for name in STATIC_MOUNTS:
        directory = os.path.join(root, name)
        if not os.path.isdir(directory):
            # Unmounted prefixes fall through to the router and answer 404.
            logger.warning("Static directory %s does not exist, /%s/ is not served", directory, name)
            continue
        app.mount(f"/{name}", StaticFiles(directory=directory, html=True), name=name)
    logger.debug("Serving %d users, static files from %s", len(app.state.store), os.path.abspath(root))
    return app

