"""
Leaseweb API client.

A deliberately small wrapper over `httpx.Client`: authentication headers,
error mapping, the read-only policy and debug logging live here; building
URLs and choosing payloads is left to the caller.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from .exceptions import NetworkError, WriteNotAllowedError, error_for_response
from .policies import Policies

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.leaseweb.com"
AUTH_HEADER = "X-LSW-Auth"

Params = Mapping[str, str | int | None]


def _user_agent() -> str:
    from . import __version__

    return f"lw-cli/{__version__}"


def _clean_params(params: Params | None) -> dict[str, str] | None:
    # Empty filters are left out of the query string instead of sent as `x=`.
    if not params:
        return None
    cleaned = {k: str(v) for k, v in params.items() if v is not None and v != ""}
    return cleaned or None


class LeasewebClient:
    """
    Synchronous Leaseweb API client.

    Example:
        ```python
        with LeasewebClient(api_key="key") as client:
            ip = client.get("/ipMgmt/v2/ips/1.2.3.4")
            client.put("/ipMgmt/v2/ips/1.2.3.4", json={"reverseLookup": "host.example"})
        ```

    Attributes:
        base_url: API root, without a trailing slash
        policies: Cross-cutting request policies (e.g. read-only mode)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        policies: Policies | None = None,
        log_requests: bool = False,
        transport: httpx.BaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: Leaseweb API key, sent as the `X-LSW-Auth` header
            base_url: API root (default: https://api.leaseweb.com)
            timeout: Request timeout in seconds
            policies: Request policies; defaults to allowing everything
            log_requests: Log every request and response at DEBUG level
            transport: Custom httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.policies = policies or Policies()
        self._api_key = api_key
        self._log_requests = log_requests
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={AUTH_HEADER: api_key, "User-Agent": _user_agent()},
        )

    def __enter__(self) -> LeasewebClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http.close()

    # =========================================================================
    # Requests
    # =========================================================================

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: Params | None = None,
        json_body: Any | None = None,
    ) -> httpx.Response:
        url = self.base_url + path
        if not self.policies.allows(method):
            raise WriteNotAllowedError(method=method, url=url)

        content: bytes | None = None
        headers: dict[str, str] = {}
        if json_body is not None:
            content = json.dumps(json_body).encode("utf-8")
            headers["Content-Type"] = "application/json"

        request = self._http.build_request(
            method, path, params=_clean_params(params), content=content, headers=headers
        )
        if self._log_requests:
            logger.debug(
                "Request: %s %s headers=%s body=%s",
                request.method,
                request.url,
                {k: v for k, v in request.headers.items() if k.lower() != AUTH_HEADER.lower()},
                content.decode("utf-8") if content else "",
            )

        try:
            response = self._http.send(request)
        except httpx.TransportError as exc:
            raise NetworkError(
                f"executing request: {exc}", method=method, url=str(request.url)
            ) from exc

        if self._log_requests:
            logger.debug(
                "Response: %s %s (%.0f ms)\n%s",
                response.status_code,
                response.reason_phrase,
                response.elapsed.total_seconds() * 1000,
                response.text,
            )

        if response.status_code >= 400:
            raise error_for_response(
                method=method,
                url=str(request.url),
                status_code=response.status_code,
                reason=response.reason_phrase,
                body=response.text,
            )
        return response

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Params | None = None,
        json: Any | None = None,
    ) -> Any | None:
        """
        Issue one request and return the decoded JSON body.

        Returns None for 204 responses and empty bodies.

        Raises:
            WriteNotAllowedError: A write was attempted in read-only mode
            APIError: The API answered with status >= 400 (subclass per status)
            NetworkError: No response was received
        """
        response = self._send(method, path, params=params, json_body=json)
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def get(self, path: str, *, params: Params | None = None) -> Any | None:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any | None = None) -> Any | None:
        return self.request("POST", path, json=json)

    def put(self, path: str, *, json: Any | None = None) -> Any | None:
        return self.request("PUT", path, json=json)

    def patch(self, path: str, *, json: Any | None = None) -> Any | None:
        return self.request("PATCH", path, json=json)

    def delete(self, path: str, *, json: Any | None = None) -> Any | None:
        return self.request("DELETE", path, json=json)

    def download(self, path: str) -> tuple[bytes, str]:
        """Fetch a binary resource (PDF, CSV); returns the body and its content type."""
        response = self._send("GET", path)
        return response.content, response.headers.get("Content-Type", "")
