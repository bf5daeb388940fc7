"""
Execution of the external CRUD program.
"""

from universe.execution.executor import (
    OPERATIONS,
    ExecutorError,
    ScriptExecutor,
    resource_type_env_var,
)

__all__ = [
    "OPERATIONS",
    "ExecutorError",
    "ScriptExecutor",
    "resource_type_env_var",
]
