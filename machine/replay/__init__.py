"""
Replay system for status machines.

Replay folds a reducer over an event sequence to reconstruct state.
Same events and same starting state -> same final state.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
