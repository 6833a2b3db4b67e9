"""Field labels and scalar display strings for human-readable output."""

from __future__ import annotations

import json
import math
from typing import Any

NULL_DISPLAY = "—"

# Whole-key matches, compared against the lowercased key.
_KEY_ABBREVIATIONS: dict[str, str] = {
    "id": "ID",
    "ip": "IP",
    "cpu": "CPU",
    "ram": "RAM",
    "mac": "MAC",
    "sla": "SLA",
    "os": "OS",
    "hdd": "HDD",
    "ssd": "SSD",
    "url": "URL",
    "dns": "DNS",
    "ssl": "SSL",
    "uuid": "UUID",
    "ipmi": "IPMI",
}

# Per-word replacements applied after camelCase splitting.
_WORD_ABBREVIATIONS: dict[str, str] = {
    **_KEY_ABBREVIATIONS,
    "ipv4": "IPv4",
    "ipv6": "IPv6",
    "ddos": "DDoS",
    "pci": "PCI",
}

_KNOWN_WORDS = frozenset(_WORD_ABBREVIATIONS.values())


def _split_camel(key: str) -> str:
    # A word starts at a capital that follows a lowercase letter, or at the last
    # capital of a run when a lowercase letter follows it ("HTTPServer").
    out: list[str] = []
    for i, ch in enumerate(key):
        if i > 0 and ch.isupper():
            following = key[i + 1 : i + 2]
            if key[i - 1].islower() or following.islower():
                out.append(" ")
        out.append(ch)
    return "".join(out)


def humanize(key: str) -> str:
    """
    Turn a machine field name into a display label.

    `networkInterfaces` -> `Network Interfaces`, `cpuType` -> `CPU Type`,
    `ipAddress` -> `IP Address`. Never raises; an empty key stays empty.
    """
    if not key:
        return ""
    whole = _KEY_ABBREVIATIONS.get(key.lower())
    if whole is not None:
        return whole

    spaced = _split_camel(key)
    spaced = spaced[:1].upper() + spaced[1:]
    words = [_WORD_ABBREVIATIONS.get(word.lower(), word) for word in spaced.split(" ")]
    return " ".join(words)


def column_header(key: str) -> str:
    """Upper-cased label for a table column; known abbreviations keep their casing."""
    words = humanize(key).split(" ")
    return " ".join(word if word in _KNOWN_WORDS else word.upper() for word in words)


def raw_text(value: Any) -> str:
    """Compact JSON text of a value, as it would appear on the wire."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError):
        return str(value)


def format_value(value: Any) -> str:
    """Display string for one scalar JSON value; containers fall back to raw JSON."""
    if value is None:
        return NULL_DISPLAY
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return raw_text(value)
        if value == math.trunc(value):
            return str(math.trunc(value))
        return f"{value:.2f}"
    return raw_text(value)
