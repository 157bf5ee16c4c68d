"""
Request document model for the admin portal.

Requests are stored as plain MongoDB documents; this module owns the
field names, limits and status values shared by the collection
validator, the API schemas and the routes.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict


class RequestStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    APPROVED = "approved"
    REJECTED = "rejected"


STATUS_VALUES = [s.value for s in RequestStatus]

REQUESTOR_NAME_MIN = 3
REQUESTOR_NAME_MAX = 30
ITEM_REQUESTED_MIN = 2
ITEM_REQUESTED_MAX = 100


def utcnow() -> datetime:
    # BSON dates only keep milliseconds
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def new_request_document(requestor_name: str, item_requested: str) -> Dict[str, Any]:
    """Build a fresh pending request; created and edited dates match."""
    now = utcnow()
    return {
        "requestorName": requestor_name,
        "itemRequested": item_requested,
        "createdDate": now,
        "lastEditedDate": now,
        "status": RequestStatus.PENDING.value,
    }


def status_update(status: RequestStatus) -> Dict[str, Any]:
    """Update operator that changes only the status and edit timestamp."""
    return {
        "$set": {
            "status": status.value,
            "lastEditedDate": utcnow(),
        }
    }
