"""
Reducer: event-type handler registry.

A convenient way to write one per-status reducer: register a pure handler
per event type and let unhandled events leave the state as it is.
Handlers must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
"""

from typing import Any, Callable, Dict

from .errors import InvalidTransitionError
from .events import event_type

# Handler signature: (current_state, event) -> new_state
Handler = Callable[[Any, Any], Any]


class Reducer:
    """
    Registry of event handlers for a single status.

    Usage:
        idle = Reducer()
        idle.register("FETCH_USERS", start_fetch)
        new_state = idle.apply(state, event)

    Instances are callable, so they can be passed straight to compose().
    """

    def __init__(self, strict: bool = False) -> None:
        self._handlers: Dict[str, Handler] = {}
        self._strict = strict

    def register(self, ev_type: str, handler: Handler) -> None:
        """
        Register event handler.

        Args:
            ev_type: Event type string
            handler: Pure function (current_state, event) -> new_state
        """
        self._handlers[ev_type] = handler

    def on(self, ev_type: str) -> Callable[[Handler], Handler]:
        """Decorator form of register()."""
        def decorator(handler: Handler) -> Handler:
            self.register(ev_type, handler)
            return handler
        return decorator

    def handles(self, ev_type: str) -> bool:
        return ev_type in self._handlers

    def apply(self, state: Any, event: Any) -> Any:
        """
        Apply event to state using the registered handler.

        Returns:
            Handler result, or state unchanged when the event type is not
            registered

        Raises:
            InvalidTransitionError: If no handler is registered and the
                reducer is strict
        """
        handler = self._handlers.get(event_type(event))
        if handler is None:
            if self._strict:
                raise InvalidTransitionError(f"No handler for event type: {event_type(event)}")
            return state
        return handler(state, event)

    __call__ = apply
