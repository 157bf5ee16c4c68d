"""
Admin Portal Health Check Routes
"""
from fastapi import APIRouter, Depends
from datetime import datetime
from pymongo.database import Database

from ..config import get_settings
from ..database import get_db, ping

router = APIRouter(prefix="/api/health", tags=["health"])

VERSION = "1.0.0"

START_TIME = datetime.utcnow()


def get_uptime() -> str:
    """Get uptime as human-readable string"""
    delta = datetime.utcnow() - START_TIME
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if delta.days > 0:
        return f"{delta.days}d {hours}h {minutes}m"
    elif hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    else:
        return f"{minutes}m {seconds}s"


@router.get("")
def health_check(db: Database = Depends(get_db)):
    """Health check endpoint for load balancers and monitoring."""
    db_ok = ping(db)
    return {
        "status": "healthy" if db_ok else "degraded",
        "environment": get_settings().environment,
        "version": VERSION,
        "uptime": get_uptime(),
        "database": {"status": "healthy" if db_ok else "unhealthy"},
    }
