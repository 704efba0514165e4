from __future__ import annotations

import logging
from collections.abc import Iterable

from opresult.contracts import Result

_logger = logging.getLogger("opresult.combine")


def combine(left: Result, right: Result) -> Result:
    """Pure merge of two results; see `Result.combine` for the rules."""
    return left.combine(right)


def combine_all(results: Iterable[Result]) -> Result:
    """
    Fold sub-operation results left to right into a single outcome.

    An empty sequence yields a fresh default (successful) result.
    """
    combined: Result | None = None
    for index, result in enumerate(results):
        if combined is None:
            combined = result
            continue
        combined = combined.combine(result)
        _logger.debug(
            "Folded result %s at position %d (retcode=%d)",
            result.id,
            index,
            combined.status_code,
        )
    if combined is None:
        _logger.debug("No results to combine, returning an empty success result")
        return Result()
    return combined
