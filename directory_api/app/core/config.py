"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that local deployments can keep their port and serve
directory next to the code; variables already present in the
environment take precedence over the file.

``PORT`` has no default.  The record store itself takes no
configuration; everything here belongs to the HTTP boundary.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


load_dotenv(override=False)


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Directory API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional path of a file that receives a copy of every log line.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))
    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))

    # Listening port as given in the environment.  Empty when ``PORT`` is
    # missing; ``run.py`` refuses to start in that case.
    port: str = field(default_factory=lambda: _env("PORT", "").strip())

    # Root directory for files served under /portfolio/ and /static/.
    # The ``--dir`` command line flag overrides it.
    serve_dir: str = field(default_factory=lambda: _env("SERVE_DIR", "."))

    # Keep‑alive and graceful shutdown timeout in seconds.
    server_timeout: int = field(default_factory=lambda: int(_env("SERVER_TIMEOUT", "15")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests and ``run.py`` build
# their own ``Settings`` when they need different values.
settings = Settings()
