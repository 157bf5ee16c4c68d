from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from datetime import datetime, timezone
from typing import Any, Dict, List

from ..models.request import (
    RequestStatus,
    REQUESTOR_NAME_MIN,
    REQUESTOR_NAME_MAX,
    ITEM_REQUESTED_MIN,
    ITEM_REQUESTED_MAX,
)


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class RequestCreate(CamelModel):
    requestor_name: str = Field(min_length=REQUESTOR_NAME_MIN, max_length=REQUESTOR_NAME_MAX)
    item_requested: str = Field(min_length=ITEM_REQUESTED_MIN, max_length=ITEM_REQUESTED_MAX)


class RequestStatusUpdate(CamelModel):
    id: str
    status: RequestStatus


class RequestResponse(CamelModel):
    id: str
    requestor_name: str
    item_requested: str
    created_date: datetime
    last_edited_date: datetime
    status: RequestStatus

    @field_validator("created_date", "last_edited_date")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # Drivers without tz_aware hand back naive UTC datetimes
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "RequestResponse":
        return cls(
            id=str(doc["_id"]),
            requestor_name=doc["requestorName"],
            item_requested=doc["itemRequested"],
            created_date=doc["createdDate"],
            last_edited_date=doc.get("lastEditedDate", doc["createdDate"]),
            status=doc["status"],
        )


class Pagination(CamelModel):
    page: int
    page_size: int
    total_pages: int
    total_count: int


class RequestList(CamelModel):
    items: List[RequestResponse]
    pagination: Pagination
