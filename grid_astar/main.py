"""Terrain bootstrap and step-by-step A* driver."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from random import Random
from typing import List, Optional, Sequence, TextIO

from dotenv import load_dotenv

from .config import CONFIG, CONFIG_PATH, Config, LoggingConfig, load_config
from .core.coordinate import Coordinate
from .core.pacing import StepPacer
from .search.engine import SearchEngine, SearchResult
from .terrain.terrain_map import TerrainMap
from .utils.cli.command_parser import AUTO_PLAY, RunOptions, parse_run_args
from .utils.cli.terminal_view import TerminalView
from .utils.observer import SearchRecorder

logger = logging.getLogger(__name__)


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global level and per-module overrides from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


configure_logging(CONFIG.logging)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> tuple[TerrainMap, Config]:
    """Load ``.env`` and configuration, then generate the terrain."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    cfg = load_config(Path(config_path))
    configure_logging(cfg.logging)

    width, height = cfg.grid.size
    seed = cfg.terrain.seed
    terrain = TerrainMap.generate(
        width,
        height,
        start=Coordinate(*cfg.grid.start),
        goal=Coordinate(*cfg.grid.goal),
        mud_probability=cfg.terrain.mud_probability,
        rng=Random(seed),
        grass_cost=cfg.terrain.grass_cost,
        mud_cost=cfg.terrain.mud_cost,
    )
    logger.info(
        "[Bootstrap] %dx%d map, %d mud tiles, seed=%s",
        width,
        height,
        len(terrain.mud_tiles),
        seed,
    )
    return terrain, cfg


def run_experiment(
    terrain: TerrainMap,
    out: TextIO,
    options: RunOptions,
    pacer: Optional[StepPacer] = None,
    recorder: Optional[SearchRecorder] = None,
) -> SearchResult:
    """Search ``terrain``, writing a transcript to ``out`` after every step."""

    engine = SearchEngine(terrain)
    view = TerminalView(terrain, out, show_menu=options.show_menu)

    for obs in engine.steps():
        view.render_step(obs)
        if recorder is not None:
            recorder(obs)
        if not obs.is_goal and pacer is not None:
            pacer.wait()

    result = engine.result
    assert result is not None
    view.render_result(result)
    if recorder is not None:
        recorder.finish(result)
    return result


def main(argv: Optional[Sequence[str]] = None, config_path: str | Path = CONFIG_PATH) -> int:
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    terrain, cfg = bootstrap(config_path)
    options = parse_run_args(
        args, default_delay=cfg.run.auto_play_delay, show_menu=cfg.run.show_menu
    )

    recorder = None
    event_log = (cfg.paths or {}).get("event_log")
    if event_log:
        recorder = SearchRecorder(
            Path(event_log), retention_bytes=cfg.cache.log_retention_bytes
        )
        logger.info(
            "Recording search events to %s (rotating at %s MB)",
            event_log,
            cfg.cache.log_retention_mb,
        )

    try:
        if not options.interactive:
            assert options.log_path is not None
            try:
                fh = open(options.log_path, "w", encoding="utf-8")
            except OSError as exc:
                logger.error("Cannot open %s: %s", options.log_path, exc)
                print("Error opening file.")
                return 1
            print(f"Logging expansion to {options.log_path}...")
            with fh:
                run_experiment(terrain, fh, options, recorder=recorder)
            print("Done.")
            return 0

        if options.mode == AUTO_PLAY:
            print(f"Auto-play mode ({options.delay}s delay)...")
        pacer = StepPacer(delay=options.delay)
        run_experiment(terrain, sys.stdout, options, pacer=pacer, recorder=recorder)
        return 0
    except (KeyboardInterrupt, EOFError):
        logger.info("Run interrupted. Shutting down...")
        return 130


if __name__ == "__main__":
    sys.exit(main())
