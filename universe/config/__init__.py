"""
Provider configuration: schema, normalization and file loading.
"""

from universe.config.values import (
    ABSENT,
    Absent,
    ConfigValue,
    FrozenMap,
    MappingReader,
    MapValue,
    OtherValue,
    SchemaBackedReader,
    StringValue,
    to_config_value,
)
from universe.config.provider import (
    CONFIGURATION_KEYS,
    ConfigurationError,
    ConfigurationSnapshot,
    ProviderSchema,
    normalize_provider_config,
    undeclared_keys,
)
from universe.config.loader import load_provider_config

__all__ = [
    # Values
    "ABSENT",
    "Absent",
    "ConfigValue",
    "FrozenMap",
    "MappingReader",
    "MapValue",
    "OtherValue",
    "SchemaBackedReader",
    "StringValue",
    "to_config_value",
    # Schema and normalization
    "CONFIGURATION_KEYS",
    "ConfigurationError",
    "ConfigurationSnapshot",
    "ProviderSchema",
    "normalize_provider_config",
    "undeclared_keys",
    # Loading
    "load_provider_config",
]
