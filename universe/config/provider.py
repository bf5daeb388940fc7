"""
Provider configuration schema and normalization.

The provider block accepted from the host engine is described by
``ProviderSchema``. ``normalize_provider_config`` turns a schema-backed
reader over that block into the immutable ``ConfigurationSnapshot``
shared by every resource operation.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from universe.config.values import (
    Absent,
    FrozenMap,
    MapValue,
    SchemaBackedReader,
)
from universe.errors import UniverseError

ENVIRONMENT_KEY = "environment"

CONFIGURATION_KEYS = ("id_key", "executor", "script", ENVIRONMENT_KEY, "javascript")
"""Keys copied into a snapshot. ``javascript`` is read but never declared."""

DEFAULT_ID_KEY = "id"


class ConfigurationError(UniverseError):
    """Raised when a provider configuration cannot be used."""
    pass


class ProviderSchema(BaseModel):
    """
    Provider configuration block.

    Example:
        provider = ProviderSchema(
            executor="python3",
            script="scripts/job.py",
            id_key="id",
            environment={"API_URL": "https://example.com"},
        )
    """

    id_key: str | None = Field(
        default=None,
        description="The name of the key which holds the unique identifier of the resource. e.g. 'id'",
    )
    executor: str | None = Field(
        default=None, description="The name of the program to run. e.g. python"
    )
    script: str | None = Field(
        default=None,
        description="The path to the script passed as the first argument to 'executor'.",
    )
    environment: dict[str, str] | None = Field(
        default=None,
        description="The configuration passed as environment variables to the provider script.",
    )

    class Config:
        extra = "forbid"


class ConfigurationSnapshot(FrozenMap):
    """
    Validated provider configuration.

    Sparse: only keys that were supplied are present, so ``"id_key" in
    snapshot`` is False when the operator left it out. The properties
    below are conveniences for resource operations.
    """

    @property
    def id_key(self) -> str:
        return self.get("id_key") or DEFAULT_ID_KEY

    @property
    def executor(self) -> str | None:
        return self.get("executor")

    @property
    def script(self) -> str | None:
        return self.get("script")

    @property
    def environment(self) -> Mapping[str, str]:
        return self.get(ENVIRONMENT_KEY, FrozenMap())


def normalize_provider_config(reader: SchemaBackedReader) -> ConfigurationSnapshot:
    """
    Build a configuration snapshot from a schema-backed reader.

    Args:
        reader: Reader over the provider block

    Returns:
        Snapshot holding exactly the supplied recognized keys

    Raises:
        ConfigurationError: If ``environment`` was supplied and is not a
            flat map of strings
    """
    data: dict[str, Any] = {}
    for key in CONFIGURATION_KEYS:
        value = reader.get_ok(key)
        if isinstance(value, Absent):
            continue
        data[key] = value.to_python()

    environment = reader.get_ok(ENVIRONMENT_KEY)
    if not isinstance(environment, (Absent, MapValue)):
        raise ConfigurationError(
            f"{ENVIRONMENT_KEY} - expected a map of strings but got "
            f"{environment.to_python()!r}"
        )

    return ConfigurationSnapshot(data)


def undeclared_keys(config: Mapping[str, Any]) -> list[str]:
    """Return the keys of a provider block that the schema does not declare."""
    return sorted(key for key in config if key not in ProviderSchema.model_fields)
