from .request import RequestCreate, RequestStatusUpdate, RequestResponse, RequestList

__all__ = [
    "RequestCreate", "RequestStatusUpdate", "RequestResponse", "RequestList",
]
