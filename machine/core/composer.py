"""
Machine composer: one reducer from many per-status reducers.

The composite reducer reads the status label off the incoming state, picks
the reducer registered for that label and returns whatever it returns. It
performs no transition logic of its own. Transitions happen when a
per-status reducer returns a state with a different label.

Unrecognized labels fall back to the initial label's reducer unless the
machine is strict.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Generic, Hashable, Mapping, Optional, Tuple, TypeVar

from .errors import EmptyMachineError, UnknownStatusError
from .state import DEFAULT_STATUS_FIELD, read_status

S = TypeVar("S")
E = TypeVar("E")

# Reducer signature: (current_state, event) -> next_state
ReducerFn = Callable[[Optional[S], E], S]


class StatusMachine(Generic[S, E]):
    """
    Composite reducer routing on the state's status label.

    Instances are callable with (state, event) and hold no state between
    calls. The reducer table is read-only once built.

    Usage:
        machine = StatusMachine({"INIT": on_init, "IN_PROGRESS": on_progress})
        next_state = machine(state, event)
    """

    def __init__(
        self,
        reducers: Mapping[Hashable, ReducerFn],
        status_field: str = DEFAULT_STATUS_FIELD,
        initial: Optional[Hashable] = None,
        strict: bool = False,
    ) -> None:
        if not reducers:
            raise EmptyMachineError("Cannot compose a machine from an empty reducer mapping")

        table: Dict[Hashable, ReducerFn] = dict(reducers)
        labels = tuple(table)

        if initial is None:
            initial = labels[0]
        elif initial not in table:
            raise UnknownStatusError(initial, labels)

        # Enum labels also answer to their raw value (state loaded from JSON).
        lookup: Dict[Any, ReducerFn] = dict(table)
        for label, reducer in table.items():
            if isinstance(label, Enum):
                lookup.setdefault(label.value, reducer)

        self._reducers = MappingProxyType(table)
        self._lookup = MappingProxyType(lookup)
        self._labels = labels
        self._initial = initial
        self._status_field = status_field
        self._strict = strict

    @property
    def initial_label(self) -> Hashable:
        return self._initial

    @property
    def labels(self) -> Tuple[Hashable, ...]:
        return self._labels

    @property
    def reducers(self) -> Mapping[Hashable, ReducerFn]:
        return self._reducers

    @property
    def status_field(self) -> str:
        return self._status_field

    @property
    def strict(self) -> bool:
        return self._strict

    def resolve_label(self, state: Optional[S]) -> Any:
        """
        Status label the state is currently in.

        Returns the initial label when state is None or has no status.
        The result may be a label the machine does not know.
        """
        label = read_status(state, self._status_field)
        if label is None:
            return self._initial
        return label

    def select(self, state: Optional[S]) -> ReducerFn:
        """
        Reducer that would handle `state`, without calling it.

        Raises:
            UnknownStatusError: In strict mode, for an unregistered label
        """
        label = self.resolve_label(state)
        try:
            reducer = self._lookup.get(label)
        except TypeError:
            # Unhashable label: treated like any other unknown label.
            reducer = None

        if reducer is None:
            if self._strict:
                raise UnknownStatusError(label, self._labels)
            reducer = self._reducers[self._initial]
        return reducer

    def __call__(self, state: Optional[S], event: E) -> S:
        return self.select(state)(state, event)

    def __repr__(self) -> str:
        return (
            f"StatusMachine(labels={list(self._labels)!r}, initial={self._initial!r}, "
            f"status_field={self._status_field!r}, strict={self._strict})"
        )


def compose(
    reducers: Mapping[Hashable, ReducerFn],
    *,
    status_field: str = DEFAULT_STATUS_FIELD,
    initial: Optional[Hashable] = None,
    strict: bool = False,
) -> StatusMachine:
    """
    Compose per-status reducers into a single reducer.

    Args:
        reducers: Non-empty mapping of status label -> reducer. The first key
            (insertion order) is the initial label.
        status_field: Name of the state field holding the status label
        initial: Override for the initial label (must be a key of reducers)
        strict: Raise UnknownStatusError for unregistered labels instead of
            falling back to the initial label's reducer

    Returns:
        StatusMachine, callable as (state, event) -> next_state

    Raises:
        EmptyMachineError: If reducers is empty
        UnknownStatusError: If initial is not a key of reducers

    Example:
        machine = compose({"INIT": on_init, "IN_PROGRESS": on_progress})
        machine(None, {"type": "FETCH_USERS"})  # -> on_init(None, event)
    """
    return StatusMachine(reducers, status_field=status_field, initial=initial, strict=strict)
