"""
Admin Portal API Response Utilities
Standardized error format, exception handlers and pagination helpers
"""
from bson import ObjectId
from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, Optional
from datetime import datetime
import math
import traceback

from .logging_config import api_logger


# ============================================================
# PAGINATION
# ============================================================

def total_pages(total: int, per_page: int) -> int:
    """Number of pages for ``total`` items; an empty listing still has one page."""
    return max(1, math.ceil(total / per_page))


def page_offset(page: int, per_page: int) -> int:
    """Number of items to skip to reach ``page`` (1-based)."""
    return (page - 1) * per_page


def pagination(total: int, page: int, per_page: int) -> Dict[str, int]:
    """Pagination block for list responses"""
    return {
        "page": page,
        "page_size": per_page,
        "total_pages": total_pages(total, per_page),
        "total_count": total,
    }


# ============================================================
# ERROR RESPONSES
# ============================================================

class ApiException(HTTPException):
    """Custom API exception with error codes"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str = None,
        details: Dict = None,
    ):
        self.error_code = error_code or f"ERR_{status_code}"
        self.details = details
        super().__init__(status_code=status_code, detail=message)


# Common exceptions
def not_found(resource: str = "Resource", id: str = None):
    message = f"{resource} not found" if not id else f"{resource} '{id}' not found"
    raise ApiException(404, message, "NOT_FOUND")

def validation_error(message: str, details: Dict = None):
    raise ApiException(422, message, "VALIDATION_ERROR", details)


def error_body(message: str, error_code: str, details: Optional[Dict[str, Any]] = None) -> Dict:
    return {
        "ok": False,
        "error": message,
        "error_code": error_code,
        "details": details,
        "timestamp": datetime.utcnow().isoformat() + "Z",
    }


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for API errors"""

    if isinstance(exc, ApiException):
        api_logger.warning(
            f"API Error: {exc.detail}",
            status_code=exc.status_code,
            error_code=exc.error_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail, exc.error_code, exc.details),
        )

    if isinstance(exc, StarletteHTTPException):
        api_logger.warning(
            f"HTTP Error: {exc.detail}",
            status_code=exc.status_code,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.detail, f"HTTP_{exc.status_code}"),
        )

    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
        traceback=traceback.format_exc(),
    )
    return JSONResponse(
        status_code=500,
        content=error_body("An unexpected error occurred", "INTERNAL_ERROR"),
    )


async def database_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Driver failures; the driver message is logged, never returned"""
    api_logger.error(
        "Database error",
        error=exc,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=503,
        content=error_body("Database unavailable", "DATABASE_UNAVAILABLE"),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report body/query validation failures in the standard error format"""
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    api_logger.warning(
        "Invalid input",
        path=request.url.path,
        errors=errors,
    )
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(error_body("Invalid input", "VALIDATION_ERROR", {"errors": errors})),
    )


# ============================================================
# VALIDATION HELPERS
# ============================================================

def require_object_id(id: Any, resource: str = "Resource") -> ObjectId:
    """Require a valid MongoDB ObjectId string"""
    if not isinstance(id, str) or not id.strip() or not ObjectId.is_valid(id):
        validation_error(f"Invalid {resource} ID", {"field": "id", "id": id})
    return ObjectId(id)
