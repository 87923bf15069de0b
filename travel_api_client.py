"""Travel API client.

A thin wrapper around the REST endpoints of the Travel API using the
``requests`` library.  It exposes one method per endpoint:

* :meth:`list_trips` – return all trips with their countries.
* :meth:`get_client_trips` – return the trips a client is registered for.
* :meth:`create_client` – create a new client.
* :meth:`register_client` – register a client for a trip.
* :meth:`unregister_client` – cancel a client's registration.

Every method returns a ``(data, error)`` tuple instead of raising, so
callers such as chat bots can show the server's message to the user
directly.  On success ``error`` is ``None``.  On failure ``error`` holds
``status_code`` and ``message``, while ``data`` is ``None`` for the
single‑object calls and an empty list for :meth:`list_trips` and
:meth:`get_client_trips`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)


class TravelAPI:
    """Client for interacting with the Travel API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/trips``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                except ValueError:
                    message = exc.response.text
                else:
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Trips
    # ------------------------------------------------------------------
    def list_trips(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all trips."""
        data, error = self._request("GET", "/trips")
        return data or [], error

    # ------------------------------------------------------------------
    # Clients
    # ------------------------------------------------------------------
    def get_client_trips(self, client_id: int) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the trips a client is registered for.

        An unknown client yields an error with ``status_code`` 404.
        """
        data, error = self._request("GET", f"/clients/{client_id}/trips")
        return data or [], error

    def create_client(
        self,
        first_name: str,
        last_name: str,
        email: str,
        telephone: Optional[str] = None,
        pesel: Optional[str] = None,
    ) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        """Create a client and return its id."""
        payload = {
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "telephone": telephone,
            "pesel": pesel,
        }
        data, error = self._request("POST", "/clients", json_body=payload)
        if error:
            return None, error
        return data["id"], None

    def register_client(self, client_id: int, trip_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Register a client for a trip."""
        return self._request("PUT", f"/clients/{client_id}/trips/{trip_id}")

    def unregister_client(self, client_id: int, trip_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Cancel a client's registration for a trip."""
        return self._request("DELETE", f"/clients/{client_id}/trips/{trip_id}")
