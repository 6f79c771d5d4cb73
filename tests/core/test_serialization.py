"""
Unit Tests for Serialization Utilities

Tests for collection dict/JSON conversion.
"""

import json

import pytest

from cube_tally.core.models.collection import RecordCollection
from cube_tally.core.schemas.validator import COLLECTION_SCHEMA_VERSION, SchemaError
from cube_tally.core.utils.serialization import (
    deserialize_collection,
    load_collection,
    save_collection,
    serialize_collection,
)


@pytest.fixture
def games(sample_text) -> RecordCollection:
    return RecordCollection.parse(sample_text)


class TestSerializeCollection:
    """Tests for serialize_collection / deserialize_collection."""

    def test_serialize_when_called_then_includes_schema_version(self, games):
        data = serialize_collection(games)
        assert data["schema_version"] == COLLECTION_SCHEMA_VERSION
        assert len(data["records"]) == 5

    def test_serialize_when_called_then_no_derived_values_stored(self, games):
        """Aggregates are recalculated on load, never stored."""
        data = serialize_collection(games)
        assert set(data) == {"schema_version", "records"}
        assert set(data["records"][0]) == {"id", "observations"}

    def test_deserialize_when_serialized_then_equal(self, games):
        restored = deserialize_collection(serialize_collection(games), strict=True)
        assert restored == games
        assert restored.sum_minimal_powers() == 2286

    def test_deserialize_when_invalid_then_raises_error(self, games):
        data = serialize_collection(games)
        data["records"][0]["observations"] = []
        with pytest.raises(SchemaError):
            deserialize_collection(data)

    def test_deserialize_when_validation_disabled_then_model_still_checks(self, games):
        """The Record model rejects empty draws even without schema checks."""
        data = serialize_collection(games)
        data["records"][0]["observations"] = []
        with pytest.raises(ValueError, match="no observations"):
            deserialize_collection(data, validate=False)


class TestCollectionFiles:
    """Tests for save_collection / load_collection."""

    def test_save_when_called_then_writes_json(self, games, tmp_path):
        path = tmp_path / "out" / "games.json"
        save_collection(games, path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["records"][2]["id"] == 3

    def test_load_when_saved_then_equal(self, games, tmp_path):
        path = tmp_path / "games.json"
        save_collection(games, path)
        assert load_collection(path) == games

    def test_load_when_missing_file_then_raises_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_collection(tmp_path / "nope.json")

    def test_load_when_bad_json_then_raises_schema_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SchemaError, match="Invalid JSON"):
            load_collection(path)
