from __future__ import annotations

import unicodedata
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from opresult.contracts.errors import ErrorLike

MAX_STATUS_CODE = 65535

_NON_PRINTABLE_CATEGORIES = frozenset({"Cc", "Cf", "Cn", "Co", "Cs", "Zl", "Zp"})

_DEBUG_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


@dataclass(frozen=True, slots=True)
class Result:
    """
    Public operation outcome contract.

    Inert value: combining two results builds a new one, operands are never mutated.
    `extra` is copied on construction into a read-only mapping in sorted key order.
    """

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    status_code: int = 0
    stdout: str | None = None
    stderr: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.id, uuid.UUID):
            raise TypeError(f"id must be a UUID, got {type(self.id).__name__}")
        if isinstance(self.status_code, bool) or not isinstance(self.status_code, int):
            raise TypeError(f"status_code must be an int, got {type(self.status_code).__name__}")
        if not 0 <= self.status_code <= MAX_STATUS_CODE:
            raise ValueError(
                f"status_code must be within [0, {MAX_STATUS_CODE}], got {self.status_code}"
            )
        for key in self.extra:
            if not isinstance(key, str):
                raise TypeError(f"extra keys must be strings, got {type(key).__name__}")
        object.__setattr__(self, "extra", MappingProxyType(dict(sorted(self.extra.items()))))

    @property
    def is_error(self) -> bool:
        """HTTP-style codes (>= 300) and the Unix generic failure code (1) are errors."""
        return self.status_code >= 300 or self.status_code == 1

    def combine(self, other: Result) -> Result:
        """
        Merge two results into a new one.

        Identity and conflicting `extra` keys come from `other`; the worst status
        code wins; output channels are joined with a newline, `self` first.
        """
        extra = dict(self.extra)
        extra.update(other.extra)
        return Result(
            id=other.id,
            status_code=max(self.status_code, other.status_code),
            stdout=_join_channels(self.stdout, other.stdout),
            stderr=_join_channels(self.stderr, other.stderr),
            extra=extra,
        )

    def __add__(self, other: object) -> Result:
        if not isinstance(other, Result):
            return NotImplemented
        return self.combine(other)

    def __str__(self) -> str:
        if self.is_error:
            return f"Result: Err({self.status_code}, stderr: {_debug_quote(self.stderr)})"
        return f"Result: Ok({self.status_code}, stdout: {_debug_quote(self.stdout)})"

    @classmethod
    def from_error(cls, error: ErrorLike) -> Result:
        """Failure-shaped result carrying the error's code, message and details."""
        return cls(
            status_code=error.code,
            stderr=error.message,
            extra=dict(error.details or {}),
        )


def _join_channels(left: str | None, right: str | None) -> str | None:
    if left is None:
        return right
    if right is None:
        return left
    return f"{left}\n{right}"


def _debug_quote(value: str | None) -> str:
    if value is None:
        return "None"
    return 'Some("' + "".join(_escape_char(char) for char in value) + '")'


def _escape_char(char: str) -> str:
    escaped = _DEBUG_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if unicodedata.category(char) in _NON_PRINTABLE_CATEGORIES:
        return f"\\u{{{ord(char):x}}}"
    return char
