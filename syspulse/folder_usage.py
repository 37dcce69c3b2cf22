from __future__ import annotations
import os
import logging
from typing import List, TextIO
from .models import ScanEntry
from .progress import ScanProgressReporter
from .scanner import FolderAccessError, rank_folders, render_ranking
from .utils import format_bytes

logger = logging.getLogger(__name__)


def print_folder_usage(root: str, out: TextIO,
                       top_n: int = 5,
                       bar_width: int = 50,
                       follow_symlinks: bool = False) -> List[ScanEntry]:
    """Rank the subfolders of ``root`` and print the top ones.

    Raises FolderAccessError before any progress is drawn if ``root`` is
    missing, not a directory or cannot be listed.
    """
    if not (os.path.exists(root) and os.path.isdir(root)):
        raise FolderAccessError(root, "missing or not a directory")

    reporter = ScanProgressReporter(out)
    try:
        entries = rank_folders(root, progress=reporter, follow_symlinks=follow_symlinks)
    finally:
        reporter.finish()

    logger.info("folder usage: %d folders, %s total", len(entries),
                format_bytes(sum(e.total_bytes for e in entries)))

    out.write("\n")
    for line in render_ranking(entries, limit=top_n, width=bar_width):
        out.write(line + "\n")
    out.flush()
    return entries


def show_folder_usage(root: str, out: TextIO, **kwargs) -> List[ScanEntry]:
    """print_folder_usage that reports access errors to the user.

    Returns an empty list when the root cannot be listed.
    """
    try:
        return print_folder_usage(root, out, **kwargs)
    except FolderAccessError as e:
        logger.warning("folder usage: %s", e)
        out.write(f"Cannot access folder: {root}\n")
        out.flush()
        return []
