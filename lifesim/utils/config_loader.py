"""Helpers for loading and validating simulation configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

import yaml  # type: ignore[import-untyped]

from lifesim.core.exceptions import ConfigurationError
from lifesim.core.speed import DEFAULT_SPEED, SimulationSpeed
from lifesim.utils.rng import parse_seed

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"


@dataclass(frozen=True)
class GridConfig:
    width: int
    height: int


@dataclass(frozen=True)
class GenerationConfig:
    seed: Optional[int]
    living_probability: float


@dataclass(frozen=True)
class TimingConfig:
    speed: SimulationSpeed = DEFAULT_SPEED


@dataclass(frozen=True)
class TrackingConfig:
    bounding_box: bool = False


@dataclass(frozen=True)
class SimulationConfig:
    grid: GridConfig
    generation: GenerationConfig
    timing: TimingConfig
    tracking: TrackingConfig


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, SimulationConfig] = {}
_CACHE_LOCK = threading.RLock()


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        return str(DEFAULT_CONFIG_PATH)
    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigurationError("Config root must be a mapping")
    return raw


def _build_grid_cfg(grid_raw: dict[str, Any]) -> GridConfig:
    cfg = GridConfig(width=int(grid_raw["width"]), height=int(grid_raw["height"]))
    if cfg.width <= 0 or cfg.height <= 0:
        raise ConfigurationError(
            "grid",
            "width and height must be positive",
            details={"width": cfg.width, "height": cfg.height},
        )
    return cfg


def _build_generation_cfg(generation_raw: dict[str, Any]) -> GenerationConfig:
    """Convert the generation section, treating a missing seed as unseeded."""
    seed_raw = generation_raw.get("seed")
    seed = parse_seed(seed_raw)
    if seed_raw is not None and seed is None:
        raise ConfigurationError(
            "generation.seed",
            f"seed must be a signed 32-bit integer, got {seed_raw!r}",
        )

    probability = float(generation_raw.get("living_probability", 0.5))
    if not 0.0 <= probability <= 1.0:
        raise ConfigurationError(
            "generation.living_probability",
            f"must be in [0, 1], got {probability}",
        )
    return GenerationConfig(seed=seed, living_probability=probability)


def _build_timing_cfg(timing_raw: dict[str, Any]) -> TimingConfig:
    speed_raw = timing_raw.get("speed")
    if speed_raw is None:
        return TimingConfig()
    try:
        if isinstance(speed_raw, int):
            return TimingConfig(speed=SimulationSpeed(speed_raw))
        return TimingConfig(speed=SimulationSpeed.from_name(str(speed_raw)))
    except ValueError as exc:
        raise ConfigurationError("timing.speed", str(exc)) from exc


def _build_tracking_cfg(tracking_raw: dict[str, Any]) -> TrackingConfig:
    return TrackingConfig(bounding_box=bool(tracking_raw.get("bounding_box", False)))


def _parse_simulation_cfg_from_dict(raw: dict[str, Any]) -> SimulationConfig:
    try:
        cfg = SimulationConfig(
            grid=_build_grid_cfg(raw["grid"]),
            generation=_build_generation_cfg(raw.get("generation") or {}),
            timing=_build_timing_cfg(raw.get("timing") or {}),
            tracking=_build_tracking_cfg(raw.get("tracking") or {}),
        )
    except KeyError as exc:
        raise ConfigurationError(f"Missing required config key: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc

    return cfg


def load_config(path: Optional[str] = None) -> SimulationConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            lifesim/config.yaml.

    Returns:
        SimulationConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_simulation_cfg_from_dict(raw=raw)


def get_config(path: Optional[str] = None) -> SimulationConfig:
    """Return the loaded config for path, loading and caching if necessary.

    Configs are cached per resolved path; repeated calls return the cached
    instance without re-reading the YAML file.

    THREAD SAFETY: This function is thread-safe. Multiple threads can
    safely call this concurrently.
    """
    key = _get_config_path(path=path)
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config(path=path)
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    All subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
