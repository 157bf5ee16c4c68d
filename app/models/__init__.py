from .request import RequestStatus

__all__ = [
    "RequestStatus",
]
