"""
Leaseweb API client and the `lw` command-line interface.

The client is a thin httpx wrapper: every call returns the parsed JSON body of
the response (plain dicts/lists that keep the API's key order).

Example:
    ```python
    from leaseweb import LeasewebClient

    with LeasewebClient(api_key="your-api-key") as client:
        servers = client.get("/bareMetals/v2/servers", params={"limit": 5})
        for server in servers["servers"]:
            print(server["id"], server["reference"])
    ```
"""

from __future__ import annotations

__version__ = "0.3.0"

from .client import DEFAULT_BASE_URL, LeasewebClient
from .exceptions import (
    APIError,
    AuthenticationError,
    AuthorizationError,
    LeasewebError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    WriteNotAllowedError,
)
from .policies import Policies, WritePolicy

__all__ = [
    "DEFAULT_BASE_URL",
    "APIError",
    "AuthenticationError",
    "AuthorizationError",
    "LeasewebClient",
    "LeasewebError",
    "NetworkError",
    "NotFoundError",
    "Policies",
    "RateLimitError",
    "ServerError",
    "WriteNotAllowedError",
    "WritePolicy",
    "__version__",
]
