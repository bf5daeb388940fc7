"""
Base exception for the universe provider.
"""


class UniverseError(Exception):
    """Base class for all errors raised by universe."""
    pass
