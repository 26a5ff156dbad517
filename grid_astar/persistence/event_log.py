"""Append-only JSONL log of search events.

A file destination can be capped with ``max_bytes``: once the file has
reached that size the next append first compresses it to
``<stem>_<UTC timestamp>[_<n>]<suffix>.gz`` next to it and starts a fresh
file. ``None`` disables rotation.
"""

from __future__ import annotations

import json
import gzip
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

# Event type constants written by the observer
STEP = "STEP"
SUCCESS = "SUCCESS"
EXHAUSTED = "EXHAUSTED"


def _rotation_target(path: Path) -> Path:
    """Return an unused name for the compressed copy of ``path``."""

    ts = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    base = f"{path.stem}_{ts}"
    n = 0
    while True:
        name = base if n == 0 else f"{base}_{n}"
        gz_path = path.with_name(f"{name}{path.suffix}.gz")
        if not gz_path.exists() and not gz_path.with_suffix("").exists():
            return gz_path
        n += 1


def _rotate_log(path: Path) -> Path:
    """Compress ``path`` and clear it for new events; return the archive."""

    gz_path = _rotation_target(path)
    rotated = gz_path.with_suffix("")
    path.rename(rotated)
    with open(rotated, "rb") as src, gzip.open(gz_path, "wb") as dst:
        shutil.copyfileobj(src, dst)
    rotated.unlink()
    return gz_path


def append_event(
    dest: str | Path | List[Dict[str, Any]],
    step: int,
    event_type: str,
    data: Any,
    max_bytes: Optional[int] = None,
) -> None:
    """Append an event to ``dest`` which may be a path or in-memory list."""

    event = {"step": step, "event_type": event_type, "data": data}
    if isinstance(dest, list):
        dest.append(event)
        return

    p = Path(dest)
    if not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)

    if max_bytes is not None and p.exists() and p.stat().st_size >= max_bytes:
        _rotate_log(p)

    with p.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(event, ensure_ascii=False) + "\n")


def iter_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    """Yield events from ``path`` in the order they were logged."""

    p = Path(path)
    if not p.exists():
        return

    with p.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError:
                continue
            yield event


def iter_archived_events(path: str | Path) -> Iterator[Dict[str, Any]]:
    """Yield events from every rotated archive of ``path``, oldest first."""

    p = Path(path)
    if not p.parent.exists():
        return
    archives = []
    for archive in p.parent.glob(f"{p.stem}_*{p.suffix}.gz"):
        # <date>_<time> or <date>_<time>_<n>
        tag = archive.name[len(p.stem) + 1 : -len(p.suffix + ".gz")].split("_")
        if len(tag) not in (2, 3) or not all(part.isdigit() for part in tag):
            continue
        order = (tag[0], tag[1], int(tag[2]) if len(tag) == 3 else 0)
        archives.append((order, archive))
    for _, archive in sorted(archives):
        with gzip.open(archive, "rt", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    continue


__all__ = [
    "append_event",
    "iter_events",
    "iter_archived_events",
    "STEP",
    "SUCCESS",
    "EXHAUSTED",
]
