"""
Loading machine definitions and event files for the CLI.

A definition target is "package.module:attribute". The attribute is either
a StatusMachine or a mapping of status label -> reducer, which is composed
with default options.

Event files are JSON Lines: one {"type", "payload", "meta"} object per line.
"""

import importlib
import json
from collections.abc import Mapping
from pathlib import Path
from typing import List, Union

from .core.composer import StatusMachine, compose
from .core.errors import DefinitionError, MachineError
from .core.events import Event
from .logging_config import get_logger

logger = get_logger(__name__)


def load_machine(target: str) -> StatusMachine:
    """
    Import a machine definition.

    Args:
        target: "package.module:attribute"

    Returns:
        StatusMachine

    Raises:
        DefinitionError: Malformed target, missing or failing module, missing
            attribute, or an object that is neither a machine nor a reducer mapping
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise DefinitionError(f"Target must look like 'package.module:attribute', got {target!r}")

    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        raise DefinitionError(f"Cannot import module {module_name!r}: {e}") from e

    obj = module
    for part in attr.split("."):
        if not hasattr(obj, part):
            raise DefinitionError(f"Module {module_name!r} has no attribute {attr!r}")
        obj = getattr(obj, part)

    if isinstance(obj, StatusMachine):
        machine = obj
    elif isinstance(obj, Mapping):
        try:
            machine = compose(obj)
        except MachineError as e:
            raise DefinitionError(f"Cannot compose {target!r}: {e}") from e
    else:
        raise DefinitionError(
            f"{target!r} is a {type(obj).__name__}, expected a StatusMachine or a reducer mapping"
        )

    logger.debug("Loaded machine %s with labels %s", target, list(machine.labels))
    return machine


def read_events(path: Union[str, Path]) -> List[Event]:
    """
    Read events from a JSON Lines file.

    Blank lines are skipped.

    Raises:
        FileNotFoundError: If path does not exist
        DefinitionError: If the file cannot be read as UTF-8 text or a line
            is not a valid event object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise DefinitionError(f"Cannot read events from {path}: {e}") from e

    events: List[Event] = []
    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise DefinitionError(f"{path}:{lineno}: invalid JSON: {e.msg}") from e
        if not isinstance(data, dict):
            raise DefinitionError(f"{path}:{lineno}: expected an object, got {type(data).__name__}")
        try:
            events.append(Event.from_dict(data))
        except ValueError as e:
            raise DefinitionError(f"{path}:{lineno}: {e}") from e

    logger.debug("Read %d events from %s", len(events), path)
    return events
