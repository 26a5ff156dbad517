"""Interpretation of the single command-line argument accepted by the driver."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

INTERACTIVE = "interactive"
AUTO_PLAY = "auto"
LOG_FILE = "file"

# "-" followed by a number, e.g. "-2" or "-0.25"
_DELAY_RE = re.compile(r"^-(\d+(?:\.\d*)?)$")


@dataclass
class RunOptions:
    """How the driver should pace and where it should write a run."""

    mode: str = INTERACTIVE
    delay: Optional[float] = None
    log_path: Optional[str] = None
    show_menu: bool = True

    @property
    def interactive(self) -> bool:
        return self.mode in (INTERACTIVE, AUTO_PLAY)


def parse_run_args(
    args: Sequence[str], default_delay: float = 1.0, show_menu: bool = True
) -> RunOptions:
    """Return :class:`RunOptions` for ``args`` (program name excluded).

    - no argument: step by step, waiting for ENTER, frontier menu shown
    - ``-``: auto-play with ``default_delay`` seconds between steps
    - ``-N``: auto-play with ``N`` seconds between steps
    - anything else: write the whole transcript to that file, no pauses
    """

    if not args:
        return RunOptions(mode=INTERACTIVE, show_menu=show_menu)

    arg = args[0].strip()
    if arg == "-":
        return RunOptions(mode=AUTO_PLAY, delay=default_delay, show_menu=False)

    match = _DELAY_RE.match(arg)
    if match:
        return RunOptions(mode=AUTO_PLAY, delay=float(match.group(1)), show_menu=False)

    return RunOptions(mode=LOG_FILE, log_path=arg, show_menu=show_menu)


__all__ = [
    "RunOptions",
    "parse_run_args",
    "INTERACTIVE",
    "AUTO_PLAY",
    "LOG_FILE",
]
