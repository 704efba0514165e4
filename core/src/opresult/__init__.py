from .algebra import combine, combine_all
from .contracts import (
    MAX_STATUS_CODE,
    ErrorLike,
    InternalServerError,
    NotFoundError,
    OperationError,
    Result,
    ResultBuilder,
    ResultPayload,
    UnexpectedError,
    ValidationFailedError,
)
from .serialization import (
    ResultDecodeError,
    ResultEncodeError,
    dump_result,
    dumps_result,
    load_result,
    loads_result,
    read_result,
    write_result,
)

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
    "combine",
    "combine_all",
    "ResultDecodeError",
    "ResultEncodeError",
    "dump_result",
    "dumps_result",
    "load_result",
    "loads_result",
    "read_result",
    "write_result",
]
