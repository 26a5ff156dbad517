"""Simple configuration loader for grid_astar."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

SEED_ENV_VAR = "GRID_ASTAR_SEED"
LOG_LEVEL_ENV_VAR = "GRID_ASTAR_LOG_LEVEL"


@dataclass
class GridConfig:
    """Configuration values for the grid section."""

    size: tuple[int, int] = (10, 10)
    start: tuple[int, int] = (0, 0)
    goal: tuple[int, int] = (9, 9)


@dataclass
class TerrainConfig:
    """Terrain costs and random mud generation."""

    grass_cost: float = 1
    mud_cost: float = 10
    mud_probability: float = 0.3
    seed: Optional[int] = None


@dataclass
class RunConfig:
    """Step pacing and transcript options for the driver."""

    auto_play_delay: float = 1.0
    show_menu: bool = True


@dataclass
class LoggingConfig:
    """Levels applied by the entry point."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class CacheConfig:
    """Size limits for files the driver writes."""

    log_retention_mb: float = 50

    @property
    def log_retention_bytes(self) -> int:
        return int(self.log_retention_mb * 1024 * 1024)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    terrain: TerrainConfig
    run: RunConfig
    logging: LoggingConfig
    paths: Optional[Dict[str, str]] = None
    cache: CacheConfig = field(default_factory=CacheConfig)


def _pair(value: Any, default: tuple[int, int]) -> tuple[int, int]:
    if value is None:
        return default
    x, y = value
    return (int(x), int(y))


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    grid = GridConfig(
        size=_pair(grid_data.get("size"), (10, 10)),
        start=_pair(grid_data.get("start"), (0, 0)),
        goal=_pair(grid_data.get("goal"), (9, 9)),
    )

    terrain_data = data.get("terrain", {}) or {}
    seed = terrain_data.get("seed")
    env_seed = os.getenv(SEED_ENV_VAR)
    if env_seed:
        seed = env_seed
    terrain = TerrainConfig(
        grass_cost=terrain_data.get("grass_cost", 1),
        mud_cost=terrain_data.get("mud_cost", 10),
        mud_probability=float(terrain_data.get("mud_probability", 0.3)),
        seed=int(seed) if seed is not None else None,
    )

    run_data = data.get("run", {}) or {}
    run = RunConfig(
        auto_play_delay=float(run_data.get("auto_play_delay", 1.0)),
        show_menu=bool(run_data.get("show_menu", True)),
    )

    logging_data = data.get("logging", {}) or {}
    level = os.getenv(LOG_LEVEL_ENV_VAR) or logging_data.get("global_level", "INFO")
    log_cfg = LoggingConfig(
        global_level=str(level).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    paths = data.get("paths")
    cache_data = data.get("cache", {}) or {}
    cache = CacheConfig(
        log_retention_mb=float(cache_data.get("log_retention_mb", 50)),
    )

    return Config(
        grid=grid, terrain=terrain, run=run, logging=log_cfg, paths=paths, cache=cache
    )


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "GridConfig",
    "TerrainConfig",
    "RunConfig",
    "LoggingConfig",
    "CacheConfig",
    "load_config",
]
