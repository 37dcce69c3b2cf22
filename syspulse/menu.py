from __future__ import annotations
import logging
from typing import Optional, TextIO
from .config import Settings
from .folder_usage import show_folder_usage
from .metrics import SystemMetricsProvider, system_report, warmup_animation
from .theme import Theme, ThemePreference, MENU_CHOICES, apply_theme

logger = logging.getLogger(__name__)

MENU = (
    "=====================================\n"
    "     SYSTEM PERFORMANCE MONITOR       \n"
    "=====================================\n"
    "1. Scan System\n"
    "2. Show Folder Usage\n"
    "3. Change Theme\n"
    "0. Exit\n"
    "-------------------------------------\n"
    "Enter your choice: "
)

THEME_MENU = (
    "\nSelect Theme Color:\n"
    "1. Red\n"
    "2. Blue\n"
    "3. Green\n"
    "4. Default\n"
    "Enter your choice: "
)


def _parse_choice(line: str) -> Optional[int]:
    try:
        return int(line.strip())
    except ValueError:
        return None


class MenuController:
    def __init__(self, settings: Settings,
                 metrics: SystemMetricsProvider,
                 preference: ThemePreference,
                 stdin: TextIO, stdout: TextIO):
        self.settings = settings
        self.metrics = metrics
        self.preference = preference
        self.stdin = stdin
        self.out = stdout
        self.theme = Theme.DEFAULT
        self.running = False

    def _read(self) -> Optional[str]:
        line = self.stdin.readline()
        return line if line else None   # '' means EOF

    def _pause(self):
        self.out.write("\nPress Enter to return to menu...")
        self.out.flush()
        self._read()

    def run(self) -> None:
        self.theme = self.preference.load()
        apply_theme(self.theme, self.out)
        self.running = True
        while self.running:
            self.out.write(MENU)
            self.out.flush()
            line = self._read()
            if line is None:
                self.out.write("\n")
                self.exit()
                break
            self.dispatch(_parse_choice(line))

    def dispatch(self, choice: Optional[int]) -> None:
        if choice == 1:
            self.scan_system()
            self._pause()
        elif choice == 2:
            self.folder_usage()
            self._pause()
        elif choice == 3:
            self.change_theme()
        elif choice == 0:
            self.exit()
        else:
            self.out.write("\nInvalid choice. Please try again.\n")

    def scan_system(self) -> None:
        apply_theme(self.theme, self.out)
        warmup_animation(self.out, delay=self.settings.animation_delay)
        snap = self.metrics.snapshot(self.settings.root)
        logger.info("system scan: cpu=%.1f%% mem=%.1f%%", snap.cpu_percent, snap.memory.percent)
        for line in system_report(snap, self.settings.thresholds):
            self.out.write(line + "\n")
        self.out.flush()

    def folder_usage(self) -> None:
        apply_theme(self.theme, self.out)
        show_folder_usage(self.settings.root, self.out,
                          top_n=self.settings.top_n,
                          bar_width=self.settings.bar_width,
                          follow_symlinks=self.settings.follow_symlinks)

    def change_theme(self) -> None:
        self.out.write(THEME_MENU)
        self.out.flush()
        line = self._read()
        theme = MENU_CHOICES.get(_parse_choice(line or ""))
        if theme is None:
            self.out.write("Invalid choice, keeping current theme.\n")
            return
        self.theme = theme
        apply_theme(theme, self.out)
        self.out.write("Theme changed successfully!\n")
        self.preference.save(theme)
        logger.info("theme set to %s", theme.name)

    def exit(self) -> None:
        self.running = False
        self.out.write("\nExiting program. Goodbye!\n")
        self.out.flush()
