"""Terminal progress spinner for slow size computations.

A daemon thread redraws one status line at a fixed tick. ``stop`` joins the
thread and clears the line before returning, so the caller's next write never
interleaves with a spinner frame.
"""

from __future__ import annotations

import threading
from typing import TextIO

SPINNER_FRAMES: tuple[str, ...] = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
SPINNER_INTERVAL_SECONDS = 0.1


class Spinner:
    """Draw ``\\r<frame>\\t<label>`` on ``stream`` until stopped."""

    def __init__(self, label: str, stream: TextIO, interval: float = SPINNER_INTERVAL_SECONDS) -> None:
        self.label = label
        self.stream = stream
        self.interval = interval
        self.frames_drawn = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            frame = SPINNER_FRAMES[self.frames_drawn % len(SPINNER_FRAMES)]
            self.stream.write(f"\r{frame}\t{self.label}")
            self.stream.flush()
            self.frames_drawn += 1

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, name="gitll-spinner", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        thread.join()
        self._thread = None
        self.stream.write("\r")
        self.stream.flush()

    def __enter__(self) -> Spinner:
        self.start()
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.stop()
