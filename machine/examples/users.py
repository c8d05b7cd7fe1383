"""
User-list fetching machine.

INIT --FETCH_USERS--> IN_PROGRESS --FETCH_USERS_RESPONSE--> INIT
                                  --FETCH_USERS_ERROR-----> INIT

All handlers are pure and build new states with evolve().
"""

from collections.abc import Mapping
from typing import Any, Dict

from ..core import Reducer, compose, evolve, event_type


INIT = "INIT"
IN_PROGRESS = "IN_PROGRESS"

FETCH_USERS = "FETCH_USERS"
FETCH_USERS_RESPONSE = "FETCH_USERS_RESPONSE"
FETCH_USERS_ERROR = "FETCH_USERS_ERROR"


def _payload(ev) -> Dict[str, Any]:
    if isinstance(ev, Mapping):
        return ev.get("payload") or {}
    return getattr(ev, "payload", None) or {}


def initial_state() -> Dict[str, Any]:
    return {"status": INIT, "users": [], "error": None}


idle = Reducer()
fetching = Reducer()


@idle.on(FETCH_USERS)
def start_fetch(cur, ev) -> Dict[str, Any]:
    cur = cur if cur is not None else initial_state()
    return evolve(cur, status=IN_PROGRESS, error=None)


@fetching.on(FETCH_USERS_RESPONSE)
def receive_users(cur, ev) -> Dict[str, Any]:
    users = list(_payload(ev).get("users") or [])
    return evolve(cur, status=INIT, users=users, error=None)


@fetching.on(FETCH_USERS_ERROR)
def receive_error(cur, ev) -> Dict[str, Any]:
    error = _payload(ev).get("error") or f"{event_type(ev)} without detail"
    return evolve(cur, status=INIT, error=error)


machine = compose({INIT: idle, IN_PROGRESS: fetching})
