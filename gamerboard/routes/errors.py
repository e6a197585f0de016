from typing import Dict, Type

from fastapi import HTTPException, status

from gamerboard.errors import (
    DuplicateKeyError,
    GamerboardError,
    InvalidEventError,
    NotFoundError,
    StorageError,
    ValidationError,
)

STATUS_BY_ERROR: Dict[Type[GamerboardError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidEventError: status.HTTP_400_BAD_REQUEST,
    DuplicateKeyError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_exception(exc: GamerboardError) -> HTTPException:
    status_code = STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(
        status_code=status_code,
        detail={"error": exc.kind, "message": exc.message},
    )
