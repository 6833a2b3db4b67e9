from __future__ import annotations

import io
import json
from typing import Any

import pytest

from leaseweb.cli.formats import apply_transform, show
from leaseweb.cli.terminal import RenderContext

DOC = {
    "servers": [{"id": "1", "location": {"site": "AMS-01"}}, {"id": "2"}],
    "a.b": 5,
    "_metadata": {"totalCount": 2, "limit": 20, "offset": 0},
}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("servers.0.id", "1"),
        ("servers.0.location.site", "AMS-01"),
        ("servers.#", 2),
        ("servers.#.id", ["1", "2"]),
        ("servers.#.location.site", ["AMS-01"]),
        ("a\\.b", 5),
        ("_metadata.totalCount", 2),
    ],
)
def test_apply_transform(path: str, expected: Any) -> None:
    assert apply_transform(DOC, path) == expected


@pytest.mark.parametrize("path", ["missing", "servers.5", "servers.x", "a.b", ""])
def test_unresolved_transform_returns_document(path: str) -> None:
    assert apply_transform(DOC, path) is DOC


def _show(document: Any, fmt: str, *, transform: str | None = None, color: bool = False) -> str:
    buf = io.StringIO()
    show(
        document,
        fmt=fmt,
        writer=buf,
        transform=transform,
        context=RenderContext(width=120, color=color),
    )
    return buf.getvalue()


def test_jsonline_and_raw_are_compact() -> None:
    assert _show({"id": "1", "tags": ["a"]}, "jsonline") == '{"id":"1","tags":["a"]}\n'
    assert _show({"id": "1"}, "raw") == '{"id":"1"}\n'


def test_pretty_and_plain_json_are_indented() -> None:
    expected = '{\n  "id": "1"\n}\n'
    assert _show({"id": "1"}, "pretty") == expected
    assert _show({"id": "1"}, "json") == expected


def test_colored_json_keeps_the_document(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("TERM", "xterm-256color")
    out = _show({"id": "1"}, "json", color=True)
    assert "\x1b[" in out
    assert '"id"' in out


def test_yaml_keeps_key_order() -> None:
    assert _show({"name": "x", "id": "1"}, "yaml") == "name: x\nid: '1'\n"


def test_format_names_are_case_insensitive() -> None:
    assert json.loads(_show({"id": "1"}, "JSONLINE")) == {"id": "1"}


def test_auto_uses_detail_view() -> None:
    assert _show({"id": "1"}, "auto") == "ID  1\n"


def test_transform_applies_before_formatting() -> None:
    assert _show(DOC, "auto", transform="servers.0.id") == '"1"\n'
    assert _show(DOC, "jsonline", transform="servers.#.id") == '["1","2"]\n'


def test_unknown_format_raises() -> None:
    with pytest.raises(ValueError, match="invalid format: xml"):
        _show({"id": "1"}, "xml")
