from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from opresult.contracts.result import MAX_STATUS_CODE, Result

_OPTIONAL_CHANNELS = ("stdout", "stderr")


class ResultPayload(BaseModel):
    """
    Wire form of a `Result`.

    Key order is part of the contract: uuid, retcode, stdout, stderr, retval.
    Absent output channels are dropped from the serialized mapping.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    uuid: UUID
    retcode: int = Field(ge=0, le=MAX_STATUS_CODE, strict=True)
    stdout: str | None = None
    stderr: str | None = None
    retval: dict[str, JsonValue]

    @model_serializer(mode="wrap")
    def _omit_absent_channels(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        for key in _OPTIONAL_CHANNELS:
            if data.get(key) is None:
                data.pop(key, None)
        return data

    @classmethod
    def from_result(cls, result: Result) -> ResultPayload:
        return cls.model_validate(
            {
                "uuid": result.id,
                "retcode": result.status_code,
                "stdout": result.stdout,
                "stderr": result.stderr,
                "retval": dict(result.extra),
            }
        )

    def to_result(self) -> Result:
        return Result(
            id=self.uuid,
            status_code=self.retcode,
            stdout=self.stdout,
            stderr=self.stderr,
            extra=dict(self.retval),
        )
