"""
Engine configuration.

Defaults live in `src/bigint/engine.yaml` next to this module. Two knobs can be
overridden from the environment; values outside their bounds are clamped and
unparsable values fall back to the file value.

Karatsuba threshold:
- at or below the threshold (in limbs, either operand) multiplication uses
  the O(n*m) grid; each Karatsuba level trades one half-size product for
  padding, slicing and four extra linear passes, which only pays off once the
  operands are a few dozen limbs long in CPython;
- 48 limbs (384 decimal digits) is the default; hosts can tune it with
  BIGINT_KARATSUBA_THRESHOLD;
- the lower bound 2 keeps recursion depth O(log n): every level at least
  roughly halves the operand length.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

_logger = logging.getLogger(__name__)

ENV_KARATSUBA_THRESHOLD = "BIGINT_KARATSUBA_THRESHOLD"
ENV_MAX_TEXT_LENGTH = "BIGINT_MAX_TEXT_LENGTH"

KARATSUBA_THRESHOLD_BOUNDS: tuple[int, int] = (2, 4096)
MAX_TEXT_LENGTH_BOUNDS: tuple[int, int] = (1, 1_000_000_000)


@dataclass(frozen=True)
class EngineConfig:
    karatsuba_threshold: int = 48
    max_text_length: int = 1_000_000


def default_config_path() -> Path:
    # src/bigint/config.py -> src/bigint/engine.yaml
    return Path(__file__).resolve().parent / "engine.yaml"


def _clamp(value: int, lo: int, hi: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def _env_int(name: str, default: int, *, lo: int, hi: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return int(default)
    try:
        v = int(raw.strip())
    except ValueError:
        _logger.warning("ignoring %s=%r: not an integer, keeping %d", name, raw, default)
        return int(default)
    clamped = _clamp(v, lo, hi)
    if clamped != v:
        _logger.warning("%s=%d out of range [%d, %d], clamped to %d", name, v, lo, hi, clamped)
    return clamped


def _from_mapping(obj: Mapping[str, Any], *, source: str) -> EngineConfig:
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(obj) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown keys: {', '.join(unknown)}")

    kwargs: dict[str, int] = {}
    for name, value in obj.items():
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{source}: {name} must be an int, got {type(value).__name__}")
        kwargs[name] = value

    cfg = EngineConfig(**kwargs)
    lo, hi = KARATSUBA_THRESHOLD_BOUNDS
    if not lo <= cfg.karatsuba_threshold <= hi:
        raise ConfigError(f"{source}: karatsuba_threshold must be in [{lo}, {hi}]")
    lo, hi = MAX_TEXT_LENGTH_BOUNDS
    if not lo <= cfg.max_text_length <= hi:
        raise ConfigError(f"{source}: max_text_length must be in [{lo}, {hi}]")
    return cfg


def load_config(path: Path | None = None) -> EngineConfig:
    """Read the YAML defaults, then apply environment overrides."""
    path = path or default_config_path()
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if obj is None:
        obj = {}
    if not isinstance(obj, Mapping):
        raise ConfigError(f"{path}: config YAML must be a mapping")

    base = _from_mapping(obj, source=str(path))
    cfg = EngineConfig(
        karatsuba_threshold=_env_int(
            ENV_KARATSUBA_THRESHOLD, base.karatsuba_threshold, lo=KARATSUBA_THRESHOLD_BOUNDS[0], hi=KARATSUBA_THRESHOLD_BOUNDS[1],
        ),
        max_text_length=_env_int(
            ENV_MAX_TEXT_LENGTH, base.max_text_length, lo=MAX_TEXT_LENGTH_BOUNDS[0], hi=MAX_TEXT_LENGTH_BOUNDS[1],
        ),
    )
    _logger.debug("engine config loaded from %s: %s", path, cfg)
    return cfg


@lru_cache(maxsize=1)
def get_config() -> EngineConfig:
    """Process-wide config, loaded once."""
    return load_config()


def reset_config_cache() -> None:
    get_config.cache_clear()
