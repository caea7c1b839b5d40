"""Typed configuration schema and loader for the randstr package."""

from __future__ import annotations

import os
import random
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator, model_validator

from ..generator import RandomStringGeneratorBuilder
from ..predicates import CharacterPredicates
from ..utils.constants import MAX_CODE_POINT, MIN_CODE_POINT
from ..utils.errors import InvalidArgumentError
from ..utils.logging import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class CodePointRange(BaseModel):
    """Inclusive code point bounds."""

    minimum: conint(ge=MIN_CODE_POINT, le=MAX_CODE_POINT) = MIN_CODE_POINT
    maximum: conint(ge=MIN_CODE_POINT, le=MAX_CODE_POINT) = MAX_CODE_POINT

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _ordered(self) -> CodePointRange:
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum code point {self.minimum} is larger than maximum {self.maximum}"
            )
        return self


class RandomSettings(BaseModel):
    """Randomness source settings."""

    seed_env: str
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    length: conint(ge=0)
    code_points: CodePointRange
    filters: list[str]
    random: RandomSettings

    model_config = ConfigDict(extra="forbid")

    @field_validator("filters")
    @classmethod
    def _known_filters(cls, value: list[str]) -> list[str]:
        return [CharacterPredicates.from_name(name).value for name in value]


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``random.seed_env``.
    """

    with (
        importlib_resources.files("randstr.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        try:
            with Path(path).open("r", encoding="utf-8") as f:
                overrides = yaml.safe_load(f) or {}
        except UnicodeDecodeError as exc:
            raise InvalidArgumentError(f"Config file {path} is not valid UTF-8: {exc}") from exc
        if not isinstance(overrides, dict):
            raise InvalidArgumentError(
                f"Config file {path} must hold a mapping at top level, "
                f"got {type(overrides).__name__}"
            )
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.random.seed_env
    if seed_env in environ:
        raw = environ[seed_env]
        try:
            cfg.random.seed = int(raw)
        except ValueError:
            raise InvalidArgumentError(
                f"Environment variable {seed_env} must hold an integer seed, got {raw!r}"
            ) from None
        logger.debug("Seed taken from environment variable %s", seed_env)

    return cfg


def builder_from_config(cfg: ConfigModel) -> RandomStringGeneratorBuilder:
    """Return a builder preloaded with the range, filters and seed of ``cfg``."""

    builder = RandomStringGeneratorBuilder().within_range(
        cfg.code_points.minimum, cfg.code_points.maximum
    )
    builder.filtered_by(*(CharacterPredicates.from_name(name) for name in cfg.filters))
    if cfg.random.seed is not None:
        builder.using_random(random.Random(cfg.random.seed))
    return builder


__all__ = [
    "ConfigModel",
    "CodePointRange",
    "RandomSettings",
    "builder_from_config",
    "deep_merge_dicts",
    "load_config",
]
