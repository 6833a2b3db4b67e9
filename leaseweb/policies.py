"""
Client policies (cross-cutting behavioral controls).

Policies are enforced centrally by `LeasewebClient.request`, before anything
goes on the wire.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WritePolicy(Enum):
    """Whether the client is allowed to perform write operations."""

    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True, slots=True)
class Policies:
    """Policy bundle applied to all requests made by a client."""

    write: WritePolicy = WritePolicy.ALLOW

    def allows(self, method: str) -> bool:
        if self.write is WritePolicy.ALLOW:
            return True
        return method.upper() in {"GET", "HEAD", "OPTIONS"}
