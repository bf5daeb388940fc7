"""
Resource handling for every registered resource type.
"""

from universe.resources.custom import (
    STATE_KEY,
    CustomResource,
    ExecutorResourceProvider,
    ResourceTemplate,
)

__all__ = [
    "STATE_KEY",
    "CustomResource",
    "ExecutorResourceProvider",
    "ResourceTemplate",
]
