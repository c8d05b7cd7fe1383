"""Example machines, usable as CLI targets (e.g. machine.examples.users:machine)."""
