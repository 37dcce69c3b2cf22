from __future__ import annotations
import sys
from typing import Optional, TextIO
from .utils import clamp

DEFAULT_WIDTH = 50


class ScanProgressReporter:
    """Single-line progress bar redrawn in place with a carriage return.

    Callable as ``reporter(current, total)`` so it can be passed anywhere a
    progress callback is expected.
    """

    def __init__(self, stream: Optional[TextIO] = None,
                 label: str = "Scanning folders",
                 width: int = DEFAULT_WIDTH):
        self.stream = stream if stream is not None else sys.stdout
        self.label = label
        self.width = width
        self.drawn = False

    def render(self, current: int, total: int) -> str:
        if total <= 0:
            raise ValueError("total must be positive")
        current = clamp(current, 0, total)
        filled = self.width * current // total
        pct = 100 * current // total
        return "[" + "#" * filled + " " * (self.width - filled) + f"] {pct}%"

    def report(self, current: int, total: int) -> None:
        line = self.render(current, total)
        self.stream.write(f"\r{self.label}: {line}")
        self.stream.flush()
        self.drawn = True

    __call__ = report

    def finish(self) -> None:
        # leave the cursor below the bar
        if self.drawn:
            self.stream.write("\n")
            self.stream.flush()
            self.drawn = False
