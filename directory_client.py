"""Directory API client.

A small wrapper around the directory service's HTTP endpoints built on
the ``requests`` library.  Every method returns a tuple
``(data, error)``: on success ``error`` is ``None``; on failure ``data``
is empty and ``error`` is a dictionary with keys ``status_code`` and
``message``.  The service answers lookups that match nothing with a
plain‑text 404 whose body becomes ``message``.

* :meth:`list_users` – every user in the directory.
* :meth:`get_user` – the first user whose first or last name matches.
* :meth:`users_by_city` – users for a city code or full city name.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 15


class DirectoryAPI:
    """Client for the directory lookup service."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _get(self, path: str) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform a GET request against the service.

        Returns:
            A tuple ``(data, error)`` with the parsed JSON body or an
            error dictionary.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.request(method="GET", url=url, timeout=self.timeout)
            response.raise_for_status()
            return response.json(), None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every user in the directory."""
        data, error = self._get("/user")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_user(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the first user whose first or last name is ``name``."""
        return self._get(f"/user/{quote(name, safe='')}")

    def users_by_city(self, city: str) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the users of a city code (``jkt``) or city name (``jakarta``)."""
        data, error = self._get(f"/city/{quote(city, safe='')}")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
