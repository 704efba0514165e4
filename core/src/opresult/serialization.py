from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from opresult.configuration import format_validation_error
from opresult.contracts import Result, ResultPayload

_logger = logging.getLogger("opresult.serialization")


class ResultDecodeError(ValueError):
    pass


class ResultEncodeError(ValueError):
    pass


def dump_result(result: Result) -> dict[str, Any]:
    return _to_payload(result).model_dump(mode="json")


def dumps_result(result: Result, *, indent: int | None = None) -> str:
    return _to_payload(result).model_dump_json(indent=indent)


def load_result(payload: Any) -> Result:
    if not isinstance(payload, Mapping):
        raise ResultDecodeError(
            f"result: expected a mapping, got {type(payload).__name__}"
        )
    try:
        return ResultPayload.model_validate(dict(payload)).to_result()
    except ValidationError as exc:
        raise ResultDecodeError(format_validation_error("result", exc)) from exc


def loads_result(text: str | bytes) -> Result:
    try:
        return ResultPayload.model_validate_json(text).to_result()
    except ValidationError as exc:
        raise ResultDecodeError(format_validation_error("result", exc)) from exc


def write_result(path: str | Path, result: Result) -> Path:
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dumps_result(result, indent=2) + "\n", encoding="utf-8")
    _logger.debug("Wrote result %s to %s", result.id, output)
    return output


def read_result(path: str | Path) -> Result:
    source = Path(path)
    try:
        return loads_result(source.read_bytes())
    except ResultDecodeError as exc:
        raise ResultDecodeError(f"{source}: {exc}") from exc


def _to_payload(result: Result) -> ResultPayload:
    try:
        return ResultPayload.from_result(result)
    except ValidationError as exc:
        raise ResultEncodeError(format_validation_error("result", exc)) from exc
