from __future__ import annotations

import logging

from opresult.contracts import Result

_logger = logging.getLogger("opresult.report")


def report_result(result: Result, *, logger: logging.Logger | None = None) -> None:
    """Log the rendered result: INFO for success, WARNING for errors."""
    target = logger or _logger
    level = logging.WARNING if result.is_error else logging.INFO
    target.log(
        level,
        "%s",
        result,
        extra={"result_uuid": str(result.id), "result_retcode": result.status_code},
    )
