"""Normalization of decoded JSON-like trees into canonical form.

The canonical form is built from ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict`` only:

- dict keys are strings, inserted in ascending code point order
- non-finite floats become ``None``
- absent values (``UNDEFINED`` and anything outside the JSON union) become ``None``
- a container reached again by identity becomes ``None``

Normalization never raises for any value; deep inputs can still exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from canonhash.util import MAX_SAFE_INTEGER, as_double, number_text

Scope = Literal["shared", "path"]
SCOPES = ("shared", "path")


class _Undefined:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


# Marks a missing slot; normalizes exactly like None.
UNDEFINED = _Undefined()


def coerce_key(key: Any) -> str:
    if isinstance(key, str):
        return key if type(key) is str else str.__str__(key)
    if key is None:
        return "null"
    if isinstance(key, (bool, int, float)):
        return number_text(key)
    return str(key)


def normalize(value: Any, visiting: set[int] | None = None, *, scope: Scope = "shared") -> Any:
    """Return the canonical form of ``value``.

    ``visiting`` holds the ids of containers already entered. It belongs to a
    single call: ids of objects freed after the call can be reused, so a set
    kept across calls may collapse unrelated containers. With
    ``scope="shared"`` ids stay recorded for the whole call, so a sub-tree
    shared by two branches (a diamond) is ``None`` on its second encounter.
    With ``scope="path"`` ids are released once their sub-tree is done and
    only true cycles collapse.
    """
    if scope not in SCOPES:
        raise ValueError(f"unknown cycle scope {scope!r}, expected one of {SCOPES}")
    if visiting is None:
        visiting = set()
    return _normalize(value, visiting, scope == "path")


def _key_rank(key: Any) -> tuple[bool, str, str]:
    # string keys first, then a fixed order over the coerced ones
    return (not isinstance(key, str), type(key).__name__, repr(key))


def _normalize(v: Any, visiting: set[int], release: bool) -> Any:
    if v is None or isinstance(v, bool):
        return v
    if isinstance(v, str):
        return v if type(v) is str else str.__str__(v)
    if isinstance(v, int):
        # numbers are doubles; past 2**53 an int is rounded like one
        if abs(v) <= MAX_SAFE_INTEGER:
            return int(v)
        return as_double(v)
    if isinstance(v, float):
        return float(v) if math.isfinite(v) else None
    if isinstance(v, (list, tuple)):
        if id(v) in visiting:
            return None
        visiting.add(id(v))
        out = [_normalize(item, visiting, release) for item in v]
        if release:
            visiting.discard(id(v))
        return out
    if isinstance(v, dict):
        if id(v) in visiting:
            return None
        visiting.add(id(v))
        owners: dict[str, Any] = {}
        for k in v:
            key = coerce_key(k)
            if key not in owners or _key_rank(k) < _key_rank(owners[key]):
                owners[key] = k
        # values are visited in sorted key order so shared-scope collapsing
        # does not depend on insertion order
        out = {key: _normalize(v[owners[key]], visiting, release) for key in sorted(owners)}
        if release:
            visiting.discard(id(v))
        return out
    return None
