"""
Configuration values as seen by the normalizer.

The host engine hands provider configuration over as loosely typed data.
A schema-backed reader adapts it into tagged ``ConfigValue`` variants so
the normalizer can tell an unset key apart from an empty one, and a map
apart from anything else, without inspecting raw Python types itself.
"""

import datetime
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol


class FrozenMap(Mapping):
    """
    Read-only mapping.

    Holds a private copy of its data. Unlike ``types.MappingProxyType``
    it can be pickled, which Pulumi requires of anything a dynamic
    provider references.
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, mutable copy (nested FrozenMaps included)."""
        return {
            key: value.to_dict() if isinstance(value, FrozenMap) else value
            for key, value in self._data.items()
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data!r})"


@dataclass(frozen=True)
class Absent:
    """The key was not supplied."""

    def to_python(self) -> None:
        return None


ABSENT = Absent()


@dataclass(frozen=True)
class StringValue:
    """A supplied string."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class MapValue:
    """A supplied flat map of strings to strings."""

    items: FrozenMap

    def to_python(self) -> FrozenMap:
        return self.items


@dataclass(frozen=True)
class OtherValue:
    """A supplied value of any other shape, kept as given."""

    raw: Any

    def to_python(self) -> Any:
        return self.raw


ConfigValue = Absent | StringValue | MapValue | OtherValue

SCALAR_TYPES = (str, int, float, bool, datetime.date, type(None))


class SchemaBackedReader(Protocol):
    """Anything that can answer whether a configuration key was supplied."""

    def get_ok(self, key: str) -> ConfigValue:
        ...


def to_config_value(raw: Any) -> ConfigValue:
    """
    Tag a raw configuration value.

    Mappings become ``MapValue`` only when every key is a string and every
    value a scalar (a null entry becomes the empty string and dates their
    ISO form); the values are then stringified, as the host engine
    does for map-of-string attributes. ``None`` means unset.
    """
    if raw is None:
        return ABSENT
    if isinstance(raw, str):
        return StringValue(raw)
    if isinstance(raw, Mapping):
        if all(
            isinstance(k, str) and isinstance(v, SCALAR_TYPES) for k, v in raw.items()
        ):
            return MapValue(FrozenMap({k: _stringify(v) for k, v in raw.items()}))
    return OtherValue(raw)


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime.date):
        return value.isoformat()
    # YAML and HCL both spell booleans in lower case
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class MappingReader:
    """
    SchemaBackedReader over a plain mapping.

    Example:
        reader = MappingReader({"executor": "python", "script": "job.py"})
        reader.get_ok("executor")   # StringValue('python')
        reader.get_ok("id_key")     # ABSENT
    """

    def __init__(self, data: Mapping[str, Any] | None = None):
        self.data = dict(data or {})

    def get_ok(self, key: str) -> ConfigValue:
        return to_config_value(self.data.get(key))

    def __repr__(self) -> str:
        return f"MappingReader({self.data!r})"
