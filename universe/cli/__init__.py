"""
Command-line interface for universe.
"""

from universe.cli.main import cli

__all__ = ["cli"]
