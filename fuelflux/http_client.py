"""Minimal HTTP client that exchanges JSON documents with the pump server."""

from __future__ import annotations

import json
from typing import Any

import requests


class HttpError(RuntimeError):
    """Raised when a request cannot be carried out at the transport level."""


class HttpClient:
    """Sends JSON requests to endpoints below a base URL and decodes JSON replies."""

    def __init__(self, base_url: str) -> None:
        self._base = base_url
        self._session = requests.Session()

    def post(self, endpoint: str, body: Any, token: str = "") -> Any:
        """POST body as JSON and return the decoded JSON reply.

        Raises HttpError on transport failure and ValueError if the reply is not JSON.
        """
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        payload = json.dumps(body, separators=(",", ":")).encode("utf-8")
        try:
            response = self._session.post(self._base + endpoint, data=payload, headers=headers)
        except requests.RequestException as exc:
            raise HttpError(f"HTTP POST failed: {exc}") from exc
        return json.loads(response.content)

    def get(self, endpoint: str, token: str = "") -> Any:
        """GET an endpoint and return the decoded JSON reply; an empty reply gives {}.

        Raises HttpError on transport failure and ValueError if the reply is not JSON.
        """
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = self._session.get(self._base + endpoint, headers=headers)
        except requests.RequestException as exc:
            raise HttpError(f"HTTP GET failed: {exc}") from exc
        return json.loads(response.content) if response.content else {}

    def close(self) -> None:
        """Release the underlying connections."""
        self._session.close()