"""
Test suite for the status machine composer.

Focus areas:
- Routing on status label with fallback to the initial label
- Purity and error transparency of the composite reducer
- Replay determinism
- Definition loading and CLI
"""
