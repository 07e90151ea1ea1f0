from __future__ import annotations

from typing import Any

from canonhash.normalize import Scope, normalize
from canonhash.serialize import serialize
from canonhash.util import sha256_hex


def canonical_text(obj: Any, *, scope: Scope = "shared") -> str:
    # Deterministic JSON for hashing:
    # - keys sorted by code point
    # - no whitespace
    # - NaN/Infinity, missing values and revisited containers as null
    # - numbers as JSON.stringify prints them
    return serialize(normalize(obj, scope=scope))


def canonical_json_bytes(obj: Any, *, scope: Scope = "shared") -> bytes:
    return canonical_text(obj, scope=scope).encode("utf-8")


def digest(text: str) -> str:
    return sha256_hex(text.encode("utf-8"))


def canonicalize_and_hash(obj: Any, *, scope: Scope = "shared") -> str:
    return digest(canonical_text(obj, scope=scope))
