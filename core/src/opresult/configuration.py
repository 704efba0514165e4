from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigError(ValueError):
    pass


class PlanEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    path: str | None = Field(default=None, min_length=1)
    inline: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> PlanEntry:
        if (self.path is None) == (self.inline is None):
            raise ValueError("exactly one of 'path' or 'inline' must be set")
        return self


class CombinePlan(BaseModel):
    model_config = ConfigDict(extra="forbid")

    output: str | None = None
    results: list[PlanEntry]

    @field_validator("results")
    @classmethod
    def _validate_results(cls, value: list[PlanEntry]) -> list[PlanEntry]:
        if not value:
            raise ValueError("results must not be empty")
        return value


def load_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def load_plan(path: str | Path) -> CombinePlan:
    payload = resolve_plan_env_vars(load_yaml(path))
    return load_plan_dict(payload)


def resolve_plan_env_vars(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Substitute `${NAME}` everywhere except inside `inline` result data."""
    resolved: dict[str, Any] = {}
    for key, value in payload.items():
        if key == "results" and isinstance(value, list):
            resolved[key] = [
                _resolve_plan_entry(entry, path=f"$.results[{index}]")
                for index, entry in enumerate(value)
            ]
        else:
            resolved[str(key)] = _resolve_env_vars(value, path=f"$.{key}")
    return resolved


def _resolve_plan_entry(entry: Any, *, path: str) -> Any:
    if not isinstance(entry, Mapping):
        return _resolve_env_vars(entry, path=path)
    return {
        str(key): value if key == "inline" else _resolve_env_vars(value, path=f"{path}.{key}")
        for key, value in entry.items()
    }


def load_plan_dict(payload: Mapping[str, Any]) -> CombinePlan:
    try:
        return CombinePlan.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(format_validation_error("plan", exc)) from exc


def resolve_env_vars(payload: Any) -> Any:
    return _resolve_env_vars(payload, path="$")


def _resolve_env_vars(payload: Any, *, path: str) -> Any:
    if isinstance(payload, Mapping):
        return {
            str(key): _resolve_env_vars(value, path=f"{path}.{key}")
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [
            _resolve_env_vars(value, path=f"{path}[{index}]") for index, value in enumerate(payload)
        ]
    if isinstance(payload, str):
        return _substitute_env(payload, path=path)
    return payload


def _substitute_env(value: str, *, path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        env_value = os.environ.get(key)
        if env_value is None:
            raise ConfigError(f"Missing environment variable '{key}' at {path}")
        return env_value

    return _ENV_VAR_PATTERN.sub(replace, value)


def resolve_relative(base_dir: Path, value: str) -> Path:
    candidate = Path(value).expanduser()
    return candidate if candidate.is_absolute() else base_dir / candidate


def format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}" if loc else f"{prefix}: {error['msg']}")
    return "; ".join(details)
