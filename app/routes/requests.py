"""
Request routes for the admin portal: create, list and status updates.
"""
from fastapi import APIRouter, Depends, Request
from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from typing import Optional

from ..bootstrap import ensure_requests_collection
from ..config import get_settings
from ..database import get_db
from ..limiter import limiter
from ..logging_config import api_logger
from ..models.request import RequestStatus, new_request_document, status_update
from ..responses import not_found, page_offset, pagination, require_object_id, validation_error
from ..schemas.request import (
    Pagination,
    RequestCreate,
    RequestList,
    RequestResponse,
    RequestStatusUpdate,
)

router = APIRouter(prefix="/api/request", tags=["requests"])

settings = get_settings()


@router.put("", response_model=RequestResponse, status_code=201)
@limiter.limit(settings.write_rate_limit)
def create_request(
    request: Request,
    payload: RequestCreate,
    db: Database = Depends(get_db),
):
    """Create a new request; it always starts out pending."""
    collection = ensure_requests_collection(db)

    doc = new_request_document(payload.requestor_name, payload.item_requested)
    result = collection.insert_one(doc)
    doc["_id"] = result.inserted_id

    api_logger.info("Request created", request_id=str(result.inserted_id))
    return RequestResponse.from_document(doc)


def parse_page(raw: Optional[str]) -> int:
    """Page number from the query string; blank means the first page."""
    if raw is None or not raw.strip():
        return 1
    try:
        page = int(raw)
    except ValueError:
        page = 0
    if page < 1:
        validation_error("Invalid page", {"field": "page", "page": raw})
    return page


def parse_status(raw: Optional[str]) -> Optional[RequestStatus]:
    """Status filter from the query string; blank means no filter."""
    if raw is None or not raw.strip():
        return None
    try:
        return RequestStatus(raw)
    except ValueError:
        validation_error("Invalid status", {"field": "status", "status": raw})


@router.get("", response_model=RequestList)
def list_requests(
    page: Optional[str] = None,
    status: Optional[str] = None,
    db: Database = Depends(get_db),
):
    """List requests newest first, one page at a time, optionally filtered by status."""
    page_number = parse_page(page)
    status_filter = parse_status(status)
    collection = ensure_requests_collection(db)

    query = {}
    if status_filter:
        query["status"] = status_filter.value

    page_size = settings.pagination_page_size
    total_count = collection.count_documents(query)
    offset = page_offset(page_number, page_size)

    docs = []
    # Past the last page; a huge offset would not even fit in a BSON int64
    if offset < total_count:
        docs = (
            collection.find(query)
            .sort("createdDate", DESCENDING)
            .skip(offset)
            .limit(page_size)
        )

    return RequestList(
        items=[RequestResponse.from_document(d) for d in docs],
        pagination=Pagination(**pagination(total_count, page_number, page_size)),
    )


@router.patch("", response_model=RequestResponse)
@limiter.limit(settings.write_rate_limit)
def update_request_status(
    request: Request,
    update: RequestStatusUpdate,
    db: Database = Depends(get_db),
):
    """Change a request's status; only the status and edit date are touched."""
    object_id = require_object_id(update.id, "Request")
    collection = ensure_requests_collection(db)

    doc = collection.find_one_and_update(
        {"_id": object_id},
        status_update(update.status),
        return_document=ReturnDocument.AFTER,
    )
    if not doc:
        not_found("Request", update.id)

    api_logger.info("Request status updated", request_id=update.id, status=update.status.value)
    return RequestResponse.from_document(doc)
