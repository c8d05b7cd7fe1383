"""
Core status machine primitives.

This module provides:
- compose / StatusMachine: Composite reducer routing on the state's status
- Reducer: Event-type handler registry for writing per-status reducers
- Event: Immutable event record
- read_status / evolve: State access and copy-on-write helpers
- Canonical: Deterministic serialization of states
"""

from .composer import StatusMachine, compose
from .reducer import Reducer
from .events import Event, event_type
from .state import DEFAULT_STATUS_FIELD, evolve, read_status
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, state_hash
from .errors import (
    MachineError,
    EmptyMachineError,
    UnknownStatusError,
    InvalidTransitionError,
    DefinitionError,
)

__all__ = [
    "StatusMachine",
    "compose",
    "Reducer",
    "Event",
    "event_type",
    "DEFAULT_STATUS_FIELD",
    "evolve",
    "read_status",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "state_hash",
    "MachineError",
    "EmptyMachineError",
    "UnknownStatusError",
    "InvalidTransitionError",
    "DefinitionError",
]
