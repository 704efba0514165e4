from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class FakeError:
    """
    Plain (non-exception) error value satisfying `ErrorLike`.
    """

    code: int
    message: str
    details: Mapping[str, Any] | None = None
