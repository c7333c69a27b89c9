from exceptions.errors import (
    ApplicationException,
    InternalError,
    NotFoundError,
    ValidationError,
    reraise_as_internal,
)

__all__ = [
    "ApplicationException",
    "InternalError",
    "NotFoundError",
    "ValidationError",
    "reraise_as_internal",
]
