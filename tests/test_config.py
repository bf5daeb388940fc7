"""
Tests for provider configuration normalization and loading.
"""

import datetime
import pickle

import pytest
from universe.config import (
    ABSENT,
    ConfigurationError,
    ConfigurationSnapshot,
    FrozenMap,
    MappingReader,
    MapValue,
    OtherValue,
    ProviderSchema,
    StringValue,
    load_provider_config,
    normalize_provider_config,
    to_config_value,
    undeclared_keys,
)


class TestConfigValues:
    """Tests for tagging raw values."""

    def test_none_is_absent(self):
        """Test None counts as unset."""
        assert to_config_value(None) is ABSENT

    def test_string(self):
        """Test strings are tagged, empty ones included."""
        assert to_config_value("python") == StringValue("python")
        assert to_config_value("") == StringValue("")

    def test_flat_map(self):
        """Test flat maps are tagged and their values stringified."""
        value = to_config_value({"A": "1", "B": 2, "C": True})

        assert isinstance(value, MapValue)
        assert dict(value.items) == {"A": "1", "B": "2", "C": "true"}

    def test_nested_map_is_other(self):
        """Test maps with non-scalar values are not flat maps."""
        value = to_config_value({"A": {"nested": "x"}})

        assert isinstance(value, OtherValue)

    def test_map_with_dates_and_nulls(self):
        """Test dates become ISO strings and null entries empty strings."""
        value = to_config_value(
            {
                "SINCE": datetime.date(2024, 1, 1),
                "AT": datetime.datetime(2024, 1, 1, 12, 30),
                "EMPTY": None,
            }
        )

        assert isinstance(value, MapValue)
        assert dict(value.items) == {
            "SINCE": "2024-01-01",
            "AT": "2024-01-01T12:30:00",
            "EMPTY": "",
        }

    def test_list_is_other(self):
        """Test lists are kept as other values."""
        assert to_config_value(["a", "b"]) == OtherValue(["a", "b"])

    def test_reader_missing_key(self):
        """Test a missing key reads as absent."""
        reader = MappingReader({"executor": "python"})

        assert reader.get_ok("script") is ABSENT
        assert reader.get_ok("executor") == StringValue("python")


class TestNormalize:
    """Tests for normalize_provider_config."""

    def test_sparse_snapshot(self):
        """Test only supplied keys appear in the snapshot."""
        reader = MappingReader({"executor": "python3", "script": "job.py"})

        snapshot = normalize_provider_config(reader)

        assert set(snapshot) == {"executor", "script"}
        assert "id_key" not in snapshot
        assert "environment" not in snapshot

    def test_full_snapshot(self):
        """Test every recognized key is copied."""
        reader = MappingReader(
            {
                "id_key": "name",
                "executor": "python3",
                "script": "job.py",
                "environment": {"API_URL": "https://example.com"},
                "javascript": "inert",
            }
        )

        snapshot = normalize_provider_config(reader)

        assert snapshot["id_key"] == "name"
        assert snapshot["javascript"] == "inert"
        assert dict(snapshot["environment"]) == {"API_URL": "https://example.com"}

    def test_unrecognized_keys_dropped(self):
        """Test keys outside the recognized set are not copied."""
        reader = MappingReader({"executor": "sh", "region": "us-east-1"})

        snapshot = normalize_provider_config(reader)

        assert set(snapshot) == {"executor"}

    def test_environment_as_string_fails(self):
        """Test a non-map environment is rejected and named in the error."""
        reader = MappingReader({"executor": "sh", "environment": "API_URL=x"})

        with pytest.raises(ConfigurationError, match="API_URL=x"):
            normalize_provider_config(reader)

    def test_environment_nested_fails(self):
        """Test a nested environment map is rejected."""
        reader = MappingReader({"environment": {"A": ["x"]}})

        with pytest.raises(ConfigurationError, match="environment"):
            normalize_provider_config(reader)

    def test_other_keys_not_type_checked(self):
        """Test only environment is validated."""
        reader = MappingReader({"executor": 42, "script": ["a"]})

        snapshot = normalize_provider_config(reader)

        assert snapshot["executor"] == 42
        assert snapshot["script"] == ["a"]

    def test_snapshot_is_immutable(self):
        """Test the snapshot and its environment cannot be modified."""
        snapshot = normalize_provider_config(
            MappingReader({"environment": {"A": "1"}})
        )

        with pytest.raises(TypeError):
            snapshot["executor"] = "sh"
        with pytest.raises(TypeError):
            snapshot["environment"]["A"] = "2"

    def test_snapshot_does_not_alias_input(self):
        """Test changing the source mapping leaves the snapshot alone."""
        source = {"executor": "sh", "environment": {"A": "1"}}
        snapshot = normalize_provider_config(MappingReader(source))

        source["executor"] = "bash"
        source["environment"]["A"] = "2"

        assert snapshot["executor"] == "sh"
        assert snapshot["environment"]["A"] == "1"

    def test_snapshot_pickles(self):
        """Test the snapshot survives pickling."""
        snapshot = normalize_provider_config(
            MappingReader({"executor": "sh", "environment": {"A": "1"}})
        )

        restored = pickle.loads(pickle.dumps(snapshot))

        assert restored == snapshot
        assert isinstance(restored, ConfigurationSnapshot)


class TestConfigurationSnapshot:
    """Tests for ConfigurationSnapshot accessors."""

    def test_defaults(self):
        """Test accessors on an empty snapshot."""
        snapshot = ConfigurationSnapshot()

        assert snapshot.id_key == "id"
        assert snapshot.executor is None
        assert snapshot.script is None
        assert dict(snapshot.environment) == {}

    def test_to_dict(self):
        """Test conversion to plain dicts."""
        snapshot = ConfigurationSnapshot(
            {"executor": "sh", "environment": FrozenMap({"A": "1"})}
        )

        assert snapshot.to_dict() == {"executor": "sh", "environment": {"A": "1"}}


class TestProviderSchema:
    """Tests for the declared provider schema."""

    def test_declared_fields(self):
        """Test the schema declares the four provider settings."""
        assert set(ProviderSchema.model_fields) == {
            "id_key",
            "executor",
            "script",
            "environment",
        }

    def test_descriptions(self):
        """Test every field is documented."""
        schema = ProviderSchema.model_json_schema()

        for field in schema["properties"].values():
            assert field["description"]

    def test_undeclared_keys(self):
        """Test keys outside the schema are reported."""
        assert undeclared_keys({"executor": "sh", "javascript": "x", "zone": 1}) == [
            "javascript",
            "zone",
        ]


class TestLoadProviderConfig:
    """Tests for load_provider_config."""

    def test_provider_section(self, tmp_path):
        """Test a block nested under 'provider' is returned."""
        path = tmp_path / "provider.yaml"
        path.write_text(
            "provider:\n"
            "  executor: python3\n"
            "  environment:\n"
            "    STATE_DIR: /tmp/state\n"
        )

        config = load_provider_config(path)

        assert config == {"executor": "python3", "environment": {"STATE_DIR": "/tmp/state"}}

    def test_bare_block(self, tmp_path):
        """Test a top-level block is returned as is."""
        path = tmp_path / "provider.yaml"
        path.write_text("executor: sh\nscript: run.sh\n")

        assert load_provider_config(path) == {"executor": "sh", "script": "run.sh"}

    def test_json_file(self, tmp_path):
        """Test JSON documents load."""
        path = tmp_path / "provider.json"
        path.write_text('{"executor": "node", "id_key": "uid"}')

        assert load_provider_config(path) == {"executor": "node", "id_key": "uid"}

    def test_empty_file(self, tmp_path):
        """Test an empty file is an empty block."""
        path = tmp_path / "provider.yaml"
        path.write_text("")

        assert load_provider_config(path) == {}

    def test_missing_file(self, tmp_path):
        """Test a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_provider_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises ConfigurationError."""
        path = tmp_path / "provider.yaml"
        path.write_text("executor: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_provider_config(path)

    def test_non_mapping(self, tmp_path):
        """Test a list document is rejected."""
        path = tmp_path / "provider.yaml"
        path.write_text("- executor\n- script\n")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_provider_config(path)
