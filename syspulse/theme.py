from __future__ import annotations
import logging
from enum import IntEnum
from typing import TextIO

logger = logging.getLogger(__name__)


class Theme(IntEnum):
    # values are the classic console attribute codes stored in theme.cfg
    DEFAULT = 7
    RED = 12
    GREEN = 10
    BLUE = 9


ANSI = {
    Theme.DEFAULT: "\033[0m",
    Theme.RED: "\033[91m",
    Theme.GREEN: "\033[92m",
    Theme.BLUE: "\033[94m",
}

# menu number -> theme, in the order the theme menu lists them
MENU_CHOICES = {
    1: Theme.RED,
    2: Theme.BLUE,
    3: Theme.GREEN,
    4: Theme.DEFAULT,
}


class ThemePreference:
    """Colour preference persisted as a single integer in a text file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Theme:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read().split()
        except FileNotFoundError:
            return Theme.DEFAULT
        except OSError as e:
            logger.warning("cannot read theme file %s: %s", self.path, e)
            return Theme.DEFAULT
        if not raw:
            return Theme.DEFAULT
        try:
            return Theme(int(raw[0]))
        except ValueError:
            logger.warning("ignoring bad theme value %r in %s", raw[0], self.path)
            return Theme.DEFAULT

    def save(self, theme: Theme) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(theme)))
        except OSError as e:
            logger.error("cannot save theme to %s: %s", self.path, e)


def apply_theme(theme: Theme, out: TextIO) -> None:
    out.write(ANSI.get(theme, ANSI[Theme.DEFAULT]))
    out.flush()
