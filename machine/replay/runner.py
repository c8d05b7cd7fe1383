"""
Replay runner: reconstruct state from an event sequence.

Replay is pure: applies the reducer to each event in order and records the
status label reached after each one.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from ..core.state import DEFAULT_STATUS_FIELD, read_status


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying events
        applied: Number of events applied
        statuses: Status label after each applied event (resolved by the
            machine, so a state without a status shows the initial label)
    """
    state: Any
    applied: int
    statuses: Tuple[Any, ...] = ()


def replay(
    reducer: Callable[[Any, Any], Any],
    events: Iterable[Any],
    initial_state: Any = None,
    until: Optional[int] = None,
) -> ReplayResult:
    """
    Replay events through a reducer.

    Args:
        reducer: Any (state, event) -> state function, e.g. a StatusMachine
        events: Events in dispatch order
        initial_state: Starting state (None = machine's initial status)
        until: Stop after this many events (None = all)

    Returns:
        ReplayResult with final state, count and status trail

    Raises:
        ValueError: If until is negative
        Any error raised by the reducer, unchanged
    """
    if until is not None and until < 0:
        raise ValueError(f"until must be >= 0, got {until}")

    label_of = getattr(reducer, "resolve_label", None)
    if label_of is None:
        status_field = getattr(reducer, "status_field", DEFAULT_STATUS_FIELD)

        def label_of(state):
            return read_status(state, status_field)

    st = initial_state
    count = 0
    statuses = []

    for ev in events:
        if until is not None and count >= until:
            break
        st = reducer(st, ev)
        statuses.append(label_of(st))
        count += 1

    return ReplayResult(state=st, applied=count, statuses=tuple(statuses))
