"""
Canonical serialization for display and fingerprinting of states.

States are caller-owned and may be dicts, dataclasses or enums; everything
is normalized to plain JSON before hashing so equal states print and hash
identically.
"""

import dataclasses
import hashlib
import json
from enum import Enum
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested state to canonical form.

    Rules:
    - dict keys sorted (as strings)
    - tuples converted to lists
    - dataclass instances converted to dicts
    - Enum members replaced by their values
    - recursive normalization
    """
    if isinstance(obj, Enum):
        return canonicalize(obj.value)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return canonicalize(dataclasses.asdict(obj))
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes, sorted keys, no whitespace
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Deterministic JSON string (for display)."""
    return canonical_json_bytes(obj).decode("utf-8")


def state_hash(state: Any) -> str:
    """SHA-256 hex digest of the canonical JSON form of a state."""
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
