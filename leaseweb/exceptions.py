"""
Exceptions raised by the Leaseweb client.

HTTP failures are mapped onto a small hierarchy keyed by status code so the CLI
can pick an exit code without inspecting responses again.
"""

from __future__ import annotations


class LeasewebError(Exception):
    """Base class for every error raised by this package."""


class APIError(LeasewebError):
    """The API answered with a status code >= 400."""

    def __init__(
        self,
        *,
        method: str,
        url: str,
        status_code: int,
        reason: str,
        body: str,
    ) -> None:
        super().__init__(f"{method} {url}: {status_code} {reason}")
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body

    @property
    def status_line(self) -> str:
        return f'{self.method} "{self.url}": {self.status_code} {self.reason}'


class AuthenticationError(APIError):
    """401: the API key is missing, malformed or revoked."""


class AuthorizationError(APIError):
    """403: the API key is valid but not allowed to do this."""


class NotFoundError(APIError):
    """404."""


class RateLimitError(APIError):
    """429."""


class ServerError(APIError):
    """5xx."""


class NetworkError(LeasewebError):
    """The request never produced a response (DNS, connect, timeout, ...)."""

    def __init__(self, message: str, *, method: str, url: str) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class WriteNotAllowedError(LeasewebError):
    """A write was attempted while the client runs with a read-only policy."""

    def __init__(self, *, method: str, url: str) -> None:
        super().__init__(f"Write operation blocked by read-only mode: {method} {url}")
        self.method = method
        self.url = url


def error_for_response(
    *, method: str, url: str, status_code: int, reason: str, body: str
) -> APIError:
    cls: type[APIError]
    if status_code == 401:
        cls = AuthenticationError
    elif status_code == 403:
        cls = AuthorizationError
    elif status_code == 404:
        cls = NotFoundError
    elif status_code == 429:
        cls = RateLimitError
    elif status_code >= 500:
        cls = ServerError
    else:
        cls = APIError
    return cls(method=method, url=url, status_code=status_code, reason=reason, body=body)
