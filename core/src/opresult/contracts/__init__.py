from .builder import ResultBuilder
from .errors import (
    ErrorLike,
    InternalServerError,
    NotFoundError,
    OperationError,
    UnexpectedError,
    ValidationFailedError,
)
from .payload import ResultPayload
from .result import MAX_STATUS_CODE, Result

__all__ = [
    "Result",
    "ResultBuilder",
    "ResultPayload",
    "MAX_STATUS_CODE",
    "ErrorLike",
    "OperationError",
    "UnexpectedError",
    "ValidationFailedError",
    "NotFoundError",
    "InternalServerError",
]
