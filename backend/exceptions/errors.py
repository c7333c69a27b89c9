from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import status
from fastapi.responses import JSONResponse

from core.logger import get_logger

logger = get_logger("errors")


class ApplicationException(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={"message": self.message})


class ValidationError(ApplicationException):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApplicationException):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ApplicationException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


@contextmanager
def reraise_as_internal(message: str) -> Iterator[None]:
    """Turns unexpected faults inside the block into an InternalError carrying only `message`."""
    try:
        yield
    except ApplicationException:
        raise
    except Exception as exc:
        logger.error(f"{message}: {exc!r}")
        raise InternalError(message) from exc
