import json
import sys
import textwrap

import pytest


DEFS_MODULE = "machine_defs_fixture"


@pytest.fixture
def defs_module(tmp_path, monkeypatch):
    """Importable module holding assorted machine definitions."""
    source = textwrap.dedent(
        """
        from machine.core import compose

        def on_a(state, event):
            return {"status": "B"}

        def on_b(state, event):
            return {"status": "A"}

        as_mapping = {"A": on_a, "B": on_b}
        as_machine = compose(as_mapping, initial="B")
        empty = {}
        not_a_machine = 42

        class Holder:
            machine = as_machine

        tagged = compose({"INIT": lambda state, event: {"status": "INIT", "tags": {1, 2}}})
        statusless = compose({"INIT": lambda state, event: None})
        """
    )
    (tmp_path / f"{DEFS_MODULE}.py").write_text(source)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, DEFS_MODULE, raising=False)
    return DEFS_MODULE


@pytest.fixture
def events_file(tmp_path):
    """JSON Lines file with one full fetch cycle of the users machine."""
    path = tmp_path / "events.jsonl"
    lines = [
        {"type": "FETCH_USERS"},
        {},
        {"type": "FETCH_USERS_RESPONSE", "payload": {"users": ["a"]}},
    ]
    # second entry becomes a blank line
    path.write_text("\n".join(json.dumps(rec) if rec else "" for rec in lines) + "\n")
    return path


BROKEN_MODULE = "machine_defs_broken"


@pytest.fixture
def broken_module(tmp_path, monkeypatch):
    """Module that fails with a SyntaxError when imported."""
    (tmp_path / f"{BROKEN_MODULE}.py").write_text("def oops(:\n    pass\n")
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, BROKEN_MODULE, raising=False)
    return BROKEN_MODULE
