from __future__ import annotations

import sys
import logging
from typing import List, Optional

from .config import Settings, parse_settings
from .folder_usage import print_folder_usage
from .scanner import FolderAccessError
from .menu import MenuController
from .metrics import SystemMetricsProvider, system_report, warmup_animation
from .theme import ThemePreference, Theme, apply_theme

APP_NAME = "SysPulse"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None) -> logging.Logger:
    root = logging.getLogger("syspulse")
    if root.handlers:
        return root
    root.setLevel(logging.DEBUG)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(getattr(logging, level.upper(), logging.WARNING))
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root.addHandler(sh)

    if log_file:
        try:
            fh = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as e:
            root.warning("cannot open log file %s: %s", log_file, e)
        else:
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(fh)
    return root


def run_once(settings: Settings, metrics: SystemMetricsProvider, out=None) -> int:
    out = out or sys.stdout
    if settings.once == "system":
        warmup_animation(out, delay=settings.animation_delay)
        for line in system_report(metrics.snapshot(settings.root), settings.thresholds):
            out.write(line + "\n")
        return 0
    try:
        print_folder_usage(settings.root, out,
                           top_n=settings.top_n,
                           bar_width=settings.bar_width,
                           follow_symlinks=settings.follow_symlinks)
    except FolderAccessError as e:
        logger.error("%s", e)
        out.write(f"Cannot access folder: {settings.root}\n")
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = parse_settings(argv)
    setup_logging(settings.log_level, settings.log_file)
    logger.info("%s starting, root=%s", APP_NAME, settings.root)

    metrics = SystemMetricsProvider(cpu_interval=settings.cpu_interval)
    if settings.once:
        return run_once(settings, metrics)

    menu = MenuController(settings, metrics, ThemePreference(settings.theme_file),
                          sys.stdin, sys.stdout)
    try:
        menu.run()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    finally:
        apply_theme(Theme.DEFAULT, sys.stdout)
    return 0


def run():
    sys.exit(main())
