from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from opresult.contracts.result import Result


@runtime_checkable
class ErrorLike(Protocol):
    """
    Error collaborator contract accepted by `Result.from_error`.
    """

    @property
    def code(self) -> int: ...

    @property
    def message(self) -> str: ...

    @property
    def details(self) -> Mapping[str, Any] | None: ...


class OperationError(Exception):
    """Base exception for failed operations; satisfies `ErrorLike`."""

    default_code: ClassVar[int] = 1
    default_message: ClassVar[str] = "Unexpected error"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: int | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)
        self.code = code if code is not None else self.default_code
        self.details = dict(details) if details is not None else None

    def to_result(self) -> Result:
        return Result.from_error(self)


class UnexpectedError(OperationError):
    """Generic failure (code 1)."""


class ValidationFailedError(OperationError):
    default_code = 400
    default_message = "Validation error"


class NotFoundError(OperationError):
    default_code = 404
    default_message = "Not found"


class InternalServerError(OperationError):
    default_code = 500
    default_message = "Internal server error"
