from .requests import router as requests_router
from .health import router as health_router

__all__ = [
    "requests_router",
    "health_router",
]
