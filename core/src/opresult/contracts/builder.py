from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from opresult.contracts.result import Result


class ResultBuilder:
    """
    Fluent construction of a `Result`.

    Defaults: fresh random id, status code 0, no stdout, no stderr, empty extra.
    """

    def __init__(self) -> None:
        self._id = uuid.uuid4()
        self._status_code = 0
        self._stdout: str | None = None
        self._stderr: str | None = None
        self._extra: dict[str, Any] = {}

    def id(self, value: uuid.UUID | str) -> ResultBuilder:
        self._id = value if isinstance(value, uuid.UUID) else uuid.UUID(value)
        return self

    def status_code(self, value: int) -> ResultBuilder:
        self._status_code = value
        return self

    def stdout(self, value: str) -> ResultBuilder:
        self._stdout = value
        return self

    def stderr(self, value: str) -> ResultBuilder:
        self._stderr = value
        return self

    def extra(self, value: Mapping[str, Any]) -> ResultBuilder:
        self._extra = dict(value)
        return self

    def extra_item(self, key: str, value: Any) -> ResultBuilder:
        self._extra[key] = value
        return self

    def print(self, text: str) -> ResultBuilder:
        """Append a line to the stdout channel."""
        self._stdout = f"{self._stdout or ''}{text}\n"
        return self

    def print_err(self, text: str) -> ResultBuilder:
        """Append a line to the stderr channel."""
        self._stderr = f"{self._stderr or ''}{text}\n"
        return self

    def build(self) -> Result:
        return Result(
            id=self._id,
            status_code=self._status_code,
            stdout=self._stdout,
            stderr=self._stderr,
            extra=dict(self._extra),
        )
