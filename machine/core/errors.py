"""
Exception types for the status machine composer.
"""


class MachineError(Exception):
    """Base class for all machine errors."""
    pass


class EmptyMachineError(MachineError, ValueError):
    """Raised when a machine is composed from an empty reducer mapping."""
    pass


class UnknownStatusError(MachineError):
    """Raised when a status label is not registered and fallback is disabled."""

    def __init__(self, label, known) -> None:
        self.label = label
        self.known = tuple(known)
        super().__init__(f"Unknown status label: {label!r} (known: {list(self.known)})")


class InvalidTransitionError(MachineError):
    """Raised when no handler is registered for an event type in strict mode."""
    pass


class DefinitionError(MachineError):
    """Raised when a machine definition or event file cannot be loaded."""
    pass
