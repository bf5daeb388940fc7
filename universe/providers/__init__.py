"""
Provider entry point.

A single Provider class serves every provider name: the name, and with it
the resource types it exposes, come from the process and its environment.

Example:
    from universe.providers import Provider

    provider = Provider()
    provider.configure({"executor": "python3", "script": "job.py"})
"""

from universe.providers.provider import (
    Provider,
    ProviderNotConfiguredError,
    UnknownResourceTypeError,
)

__all__ = [
    "Provider",
    "ProviderNotConfiguredError",
    "UnknownResourceTypeError",
]
