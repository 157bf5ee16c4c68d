"""
Tests for requests collection bootstrap.
"""
from unittest.mock import MagicMock

from pymongo.errors import CollectionInvalid

from app.bootstrap import REQUESTS_COLLECTION, ensure_requests_collection, requests_validator
from app.models.request import STATUS_VALUES


class TestRequestsValidator:
    """Test the $jsonSchema document."""

    def test_required_fields(self):
        schema = requests_validator()["$jsonSchema"]
        assert schema["bsonType"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == {"requestorName", "itemRequested", "createdDate", "status"}

    def test_field_limits(self):
        props = requests_validator()["$jsonSchema"]["properties"]
        assert (props["requestorName"]["minLength"], props["requestorName"]["maxLength"]) == (3, 30)
        assert (props["itemRequested"]["minLength"], props["itemRequested"]["maxLength"]) == (2, 100)
        assert props["createdDate"]["bsonType"] == "date"
        assert props["lastEditedDate"]["bsonType"] == "date"
        assert "_id" in props

    def test_status_enum(self):
        props = requests_validator()["$jsonSchema"]["properties"]
        assert props["status"]["enum"] == ["pending", "completed", "approved", "rejected"]
        assert props["status"]["enum"] == STATUS_VALUES


class TestEnsureRequestsCollection:
    """Test lazy collection creation."""

    def test_creates_missing_collection(self):
        db = MagicMock()
        db.list_collection_names.return_value = ["other"]

        collection = ensure_requests_collection(db)

        db.create_collection.assert_called_once_with(
            REQUESTS_COLLECTION, validator=requests_validator()
        )
        assert collection is db.create_collection.return_value

    def test_existing_collection_is_left_alone(self):
        db = MagicMock()
        db.list_collection_names.return_value = [REQUESTS_COLLECTION]

        collection = ensure_requests_collection(db)

        db.create_collection.assert_not_called()
        assert collection is db[REQUESTS_COLLECTION]

    def test_concurrent_creation_is_tolerated(self):
        db = MagicMock()
        db.list_collection_names.return_value = []
        db.create_collection.side_effect = CollectionInvalid("collection requests already exists")

        collection = ensure_requests_collection(db)

        assert collection is db[REQUESTS_COLLECTION]
