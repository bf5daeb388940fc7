"""
universe: a generic infrastructure-as-code provider.

universe lets an external program implement the create/read/update/delete
lifecycle of arbitrary resource types, while it supplies the naming and
configuration plumbing a Pulumi program needs.

Core concepts:
- Provider name: resolved from TERRAFORM_UNIVERSE_PROVIDERNAME or the
  binary name (terraform-provider-<name>), default "universe"
- Resource types: the provider name plus the names listed in
  TERRAFORM_<NAME>_RESOURCETYPES, all handled by the same generic handler
- Configuration: id_key, executor, script and environment, normalized into
  an immutable snapshot shared by every resource operation

Example:
    from universe import Provider

    provider = Provider()
    provider.configure({"executor": "python3", "script": "scripts/job.py"})

    notes = provider.resource("file", "notes", {"path": "/tmp/notes.txt"})
"""

__version__ = "0.1.0"

from universe.errors import UniverseError
from universe.identity import (
    DEFAULT_PROVIDER_NAME,
    PROVIDER_NAME_ENV_VAR,
    resolve_provider_name,
)
from universe.registry import (
    build_resource_map,
    resource_type_names,
    resource_types_env_var,
)
from universe.config import (
    ConfigurationError,
    ConfigurationSnapshot,
    MappingReader,
    ProviderSchema,
    load_provider_config,
    normalize_provider_config,
)
from universe.execution import ExecutorError, ScriptExecutor
from universe.resources import CustomResource, ExecutorResourceProvider
from universe.providers import (
    Provider,
    ProviderNotConfiguredError,
    UnknownResourceTypeError,
)

__all__ = [
    "UniverseError",
    # Identity
    "DEFAULT_PROVIDER_NAME",
    "PROVIDER_NAME_ENV_VAR",
    "resolve_provider_name",
    # Registry
    "build_resource_map",
    "resource_type_names",
    "resource_types_env_var",
    # Configuration
    "ConfigurationError",
    "ConfigurationSnapshot",
    "MappingReader",
    "ProviderSchema",
    "load_provider_config",
    "normalize_provider_config",
    # Execution
    "ExecutorError",
    "ScriptExecutor",
    "CustomResource",
    "ExecutorResourceProvider",
    # Provider
    "Provider",
    "ProviderNotConfiguredError",
    "UnknownResourceTypeError",
]
