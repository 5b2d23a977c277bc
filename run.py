"""Entry point for the Directory API server.

This script serves the FastAPI application with uvicorn.  The
listening port comes from the ``PORT`` environment variable (or a
``.env`` file in the working directory) and is required.  The
directory holding the ``portfolio`` and ``static`` folders can be set
with ``--dir`` and defaults to ``SERVE_DIR`` or the current directory.

Usage:
    PORT=8000 python run.py --dir ./public
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from uvicorn import Config, Server

from directory_api.app.core.config import Settings
from directory_api.app.core.logging_config import setup_logging
from directory_api.app.factory import create_app

logger = logging.getLogger("directory_api.run")


def parse_args(argv: Optional[List[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(description="Serve the directory API.")
    parser.add_argument(
        "--dir",
        default=settings.serve_dir,
        help="the directory to serve files from. Defaults to SERVE_DIR or the current dir",
    )
    return parser.parse_args(argv)


def resolve_port(settings: Settings) -> int:
    """Return the configured port or raise ``SystemExit`` if it is unusable."""
    if not settings.port:
        raise SystemExit("$PORT must be set")
    try:
        port = int(settings.port)
    except ValueError:
        raise SystemExit(f"$PORT must be a number, got {settings.port!r}")
    if not 0 < port < 65536:
        raise SystemExit(f"$PORT out of range: {port}")
    return port


async def serve(settings: Settings, port: int, serve_dir: str) -> None:
    """Run the API until uvicorn receives SIGINT or SIGTERM."""
    app = create_app(settings=settings, serve_dir=serve_dir)
    config = Config(
        app=app,
        host=settings.host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
        timeout_keep_alive=settings.server_timeout,
        timeout_graceful_shutdown=settings.server_timeout,
    )
    server = Server(config)
    logger.info("Starting server on PORT:%s", port)
    try:
        await server.serve()
    finally:
        logger.info("Server is down")


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings()
    setup_logging(settings.log_level, settings.log_file or None)
    args = parse_args(argv, settings)
    try:
        port = resolve_port(settings)
    except SystemExit as exc:
        logger.error(exc.code)
        return 1
    try:
        asyncio.run(serve(settings, port, args.dir))
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
