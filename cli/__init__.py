"""
Machine CLI - status machine composer

Commands:
- machine describe - Show labels of a machine definition
- machine run - Replay an event file through a machine
- machine version - Show version information
"""

__version__ = "0.1.0"
