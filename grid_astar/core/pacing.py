"""Step pacing helpers for interactive runs."""

from __future__ import annotations

import time
from typing import Callable, Optional

PROMPT = "\n[Press ENTER for next step...]"


class StepPacer:
    """Hold the caller between search steps.

    ``delay`` of ``None`` waits for the user to press ENTER, a number sleeps
    for that many seconds. A pacer with ``enabled=False`` returns at once.
    """

    def __init__(
        self,
        delay: Optional[float] = None,
        enabled: bool = True,
        prompt: Callable[[str], str] = input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay is not None and delay < 0:
            raise ValueError("delay must not be negative")
        self.delay = delay
        self.enabled = enabled
        self.step_counter: int = 0
        self._prompt = prompt
        self._sleep = sleep
        self._last_step: float = time.perf_counter()

    # ------------------------------------------------------------------
    # Timing
    # ------------------------------------------------------------------
    def wait(self) -> None:
        """Block until the next step should run."""

        self.step_counter += 1
        if not self.enabled:
            return
        if self.delay is None:
            self._prompt(PROMPT)
            return

        target = self._last_step + self.delay
        now = time.perf_counter()
        remaining = target - now
        if remaining > 0:
            self._sleep(remaining)
            self._last_step = target
        else:
            # Rendering took longer than the delay; start from current time
            self._last_step = now


__all__ = ["StepPacer", "PROMPT"]
