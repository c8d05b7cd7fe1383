"""
State access helpers.

State values belong to the caller. The composer only ever reads one field
from them; these helpers define how that field is read and give per-status
reducers a copy-on-write way to build the next state.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Optional


DEFAULT_STATUS_FIELD = "status"


def read_status(state: Any, field: str = DEFAULT_STATUS_FIELD) -> Optional[Any]:
    """
    Read the status label from a state value.

    Mappings are read by key, other objects by attribute.

    Returns:
        The label, or None if state is None or carries no such field
    """
    if state is None:
        return None
    if isinstance(state, Mapping):
        return state.get(field)
    return getattr(state, field, None)


def evolve(state: Any, **changes: Any) -> Any:
    """
    Build a new state with `changes` applied. The input is never mutated.

    - None evolves from an empty dict
    - mappings become a new dict (shallow merge)
    - dataclass instances go through dataclasses.replace()

    Raises:
        TypeError: For any other state type
    """
    if state is None:
        return dict(changes)
    if isinstance(state, Mapping):
        new_state = dict(state)
        new_state.update(changes)
        return new_state
    if dataclasses.is_dataclass(state) and not isinstance(state, type):
        return dataclasses.replace(state, **changes)
    raise TypeError(f"Cannot evolve state of type {type(state).__name__}")
