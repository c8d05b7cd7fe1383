"""
Status Machine Composer

Builds a single reducer from per-status reducers, dispatching on the status
label carried inside the state value.
"""

__version__ = "0.1.0"
