"""Canonical text rendering for normalized trees."""

from __future__ import annotations

import re
from typing import Any

import orjson

from canonhash.util import number_text

_LONE_SURROGATE = re.compile("([\ud800-\udfff])")


def serialize(canonical: Any) -> str:
    """Render a canonical form as compact JSON text.

    Dict members are written in their existing order, which the normalizer
    has already sorted. Anything outside the canonical union renders as
    ``null``.
    """
    parts: list[str] = []
    _write(canonical, parts)
    return "".join(parts)


def _write(v: Any, out: list[str]) -> None:
    if v is None:
        out.append("null")
    elif v is True:
        out.append("true")
    elif v is False:
        out.append("false")
    elif isinstance(v, str):
        out.append(quote(v))
    elif isinstance(v, (int, float)):
        out.append(number_text(v))
    elif isinstance(v, list):
        out.append("[")
        for i, item in enumerate(v):
            if i:
                out.append(",")
            _write(item, out)
        out.append("]")
    elif isinstance(v, dict):
        out.append("{")
        for i, (key, item) in enumerate(v.items()):
            if i:
                out.append(",")
            out.append(quote(key))
            out.append(":")
            _write(item, out)
        out.append("}")
    else:
        out.append("null")


def quote(s: str) -> str:
    """Return ``s`` as a JSON string literal, escaped like ``JSON.stringify``."""
    try:
        return orjson.dumps(s).decode("utf-8")
    except orjson.JSONEncodeError:
        pass
    # Surrogate code points: join valid pairs, escape the lone ones.
    s = s.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    pieces = ['"']
    for chunk in _LONE_SURROGATE.split(s):
        if not chunk:
            continue
        if len(chunk) == 1 and "\ud800" <= chunk <= "\udfff":
            pieces.append(f"\\u{ord(chunk):04x}")
        else:
            pieces.append(orjson.dumps(chunk).decode("utf-8")[1:-1])
    pieces.append('"')
    return "".join(pieces)
