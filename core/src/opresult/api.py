from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from opresult.algebra import combine_all
from opresult.configuration import ConfigError, load_plan, resolve_relative
from opresult.contracts import Result
from opresult.serialization import ResultDecodeError, load_result, read_result, write_result

_logger = logging.getLogger("opresult.plan")


def combine_files(paths: Iterable[str | Path]) -> Result:
    """Read result files in order and fold them into one outcome."""
    return combine_all(read_result(path) for path in paths)


def run_plan(plan_path: str | Path) -> Result:
    """Load a combine plan, fold its results and write the output when configured."""
    plan_file = Path(plan_path)
    plan = load_plan(plan_file)
    base_dir = plan_file.parent

    results: list[Result] = []
    for index, entry in enumerate(plan.results):
        try:
            if entry.path is not None:
                results.append(read_result(resolve_relative(base_dir, entry.path)))
            else:
                results.append(load_result(entry.inline))
        except ResultDecodeError as exc:
            raise ConfigError(f"plan.results[{index}]: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"plan.results[{index}]: cannot read {entry.path}: {exc}") from exc

    combined = combine_all(results)
    _logger.info(
        "Combined %d results from %s into %s (retcode=%d)",
        len(results),
        plan_file,
        combined.id,
        combined.status_code,
    )

    if plan.output is not None:
        output = write_result(resolve_relative(base_dir, plan.output), combined)
        _logger.info("Wrote combined result to %s", output)

    return combined
