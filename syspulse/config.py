from __future__ import annotations
import os
import sys
import argparse
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_TOP_N = 5
DEFAULT_BAR_WIDTH = 50
DEFAULT_THEME_FILE = "theme.cfg"
DEFAULT_CPU_INTERVAL = 0.1       # seconds, blocking sample
DEFAULT_ANIMATION_DELAY = 0.05   # seconds per cell of the warm-up bar

CPU_CRITICAL = 85.0
MEMORY_CRITICAL = 90.0
DISK_CRITICAL = 90.0

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def default_root() -> str:
    if sys.platform.startswith("win"):
        drive = os.environ.get("SystemDrive") or "C:"
        return drive.rstrip("\\/") + "\\"
    return os.sep


@dataclass
class Thresholds:
    cpu: float = CPU_CRITICAL
    memory: float = MEMORY_CRITICAL
    disk: float = DISK_CRITICAL


@dataclass
class Settings:
    root: str = field(default_factory=default_root)
    theme_file: str = DEFAULT_THEME_FILE
    top_n: int = DEFAULT_TOP_N
    bar_width: int = DEFAULT_BAR_WIDTH
    follow_symlinks: bool = False
    cpu_interval: float = DEFAULT_CPU_INTERVAL
    animation_delay: float = DEFAULT_ANIMATION_DELAY
    thresholds: Thresholds = field(default_factory=Thresholds)
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    once: Optional[str] = None


def _positive_int(text: str) -> int:
    try:
        v = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if v <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {v}")
    return v


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="syspulse",
        description="Console system monitor: CPU, memory, disk, uptime and top folder usage.",
    )
    p.add_argument("--root", default=None,
                   help="folder whose subfolders are ranked (default: system drive)")
    p.add_argument("--theme-file", default=DEFAULT_THEME_FILE,
                   help="where the colour preference is stored (default: %(default)s)")
    p.add_argument("--top", type=_positive_int, default=DEFAULT_TOP_N,
                   help="number of folders to show (default: %(default)s)")
    p.add_argument("--follow-symlinks", action="store_true",
                   help="descend into symlinked directories")
    p.add_argument("--no-animation", action="store_true",
                   help="skip the warm-up bar before the system scan")
    p.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                   help="stderr log level (default: %(default)s)")
    p.add_argument("--log-file", default=None, help="also write log records to this file")
    p.add_argument("--once", choices=["system", "folders"], default=None,
                   help="run one report and exit instead of showing the menu")
    return p


def parse_settings(argv: Optional[List[str]] = None) -> Settings:
    args = build_parser().parse_args(argv)
    s = Settings(
        theme_file=args.theme_file,
        top_n=args.top,
        follow_symlinks=args.follow_symlinks,
        log_level=args.log_level,
        log_file=args.log_file,
        once=args.once,
    )
    if args.root:
        s.root = args.root
    if args.no_animation:
        s.animation_delay = 0.0
    return s
