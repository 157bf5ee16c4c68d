"""
Collection bootstrap.

The requests collection is created on first use with a $jsonSchema
validator so the database rejects malformed documents even if they
bypass the API.
"""
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import CollectionInvalid

from .logging_config import db_logger
from .models.request import (
    STATUS_VALUES,
    REQUESTOR_NAME_MIN,
    REQUESTOR_NAME_MAX,
    ITEM_REQUESTED_MIN,
    ITEM_REQUESTED_MAX,
)

REQUESTS_COLLECTION = "requests"


def requests_validator() -> dict:
    """Validator document applied to the requests collection."""
    return {
        "$jsonSchema": {
            "bsonType": "object",
            "required": ["requestorName", "itemRequested", "createdDate", "status"],
            "additionalProperties": False,
            "properties": {
                "_id": {},
                "requestorName": {
                    "bsonType": "string",
                    "minLength": REQUESTOR_NAME_MIN,
                    "maxLength": REQUESTOR_NAME_MAX,
                },
                "itemRequested": {
                    "bsonType": "string",
                    "minLength": ITEM_REQUESTED_MIN,
                    "maxLength": ITEM_REQUESTED_MAX,
                },
                "createdDate": {"bsonType": "date"},
                "lastEditedDate": {"bsonType": "date"},
                "status": {
                    "bsonType": "string",
                    "enum": STATUS_VALUES,
                },
            },
        }
    }


def ensure_requests_collection(db: Database) -> Collection:
    """Create the requests collection with its validator unless it already exists."""
    if REQUESTS_COLLECTION in db.list_collection_names():
        return db[REQUESTS_COLLECTION]

    try:
        collection = db.create_collection(REQUESTS_COLLECTION, validator=requests_validator())
        db_logger.info("Created collection", collection=REQUESTS_COLLECTION)
        return collection
    except CollectionInvalid:
        # Another worker created it between the check and the create
        return db[REQUESTS_COLLECTION]

