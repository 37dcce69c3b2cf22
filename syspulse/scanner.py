from __future__ import annotations
import os
import logging
import stat as statmod
from typing import Callable, List, Optional, Set, Tuple
from .models import ScanEntry, SizeOk, Unreadable, ProbeResult

logger = logging.getLogger(__name__)

# (completed, total); called once per sized top-level folder.
ProgressCb = Callable[[int, int], None]


class FolderAccessError(OSError):
    """The scan root itself could not be listed."""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Cannot access folder: {path}" + (f" ({reason})" if reason else ""))
        self.path = path
        self.reason = reason


def probe(path: str) -> ProbeResult:
    """Size of a regular file, or Unreadable. Never raises."""
    try:
        st = os.stat(path)
    except OSError as e:
        return Unreadable(path, e.strerror or str(e))
    if not statmod.S_ISREG(st.st_mode):
        return Unreadable(path, "not a regular file")
    return SizeOk(int(st.st_size))


def _dir_key(path: str) -> Optional[Tuple[int, int]]:
    try:
        st = os.stat(path)
    except OSError:
        return None
    return (st.st_dev, st.st_ino)


def size_of(directory: str, follow_symlinks: bool = False) -> int:
    """Sum of regular file sizes reachable below ``directory``.

    Best effort: files that cannot be probed and directories that cannot be
    listed contribute 0. Walks an explicit stack so deep trees do not hit the
    recursion limit; directories already visited (same device and inode) are
    not entered twice, which stops symlink loops.
    """
    total = 0
    pending: List[str] = [directory]
    visited: Set[Tuple[int, int]] = set()

    while pending:
        current = pending.pop()

        key = _dir_key(current)
        if key is not None:
            if key in visited:
                logger.debug("already visited, skipping %s", current)
                continue
            visited.add(key)

        try:
            with os.scandir(current) as it:
                entries = list(it)
        except OSError as e:
            logger.debug("cannot list %s: %s", current, e)
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
            except OSError:
                continue

            if is_dir:
                pending.append(entry.path)
                continue

            result = probe(entry.path)
            if isinstance(result, SizeOk):
                total += result.size
            else:
                logger.debug("unreadable %s: %s", result.path, result.reason)

    return total


def list_top_folders(root: str) -> List[str]:
    """Immediate subdirectories of ``root`` in listing order."""
    folders: List[str] = []
    try:
        with os.scandir(root) as it:
            for entry in it:
                try:
                    if entry.is_dir():
                        folders.append(entry.path)
                except OSError:
                    continue
    except OSError as e:
        raise FolderAccessError(root, e.strerror or str(e)) from e
    return folders


def rank_folders(root: str,
                 progress: Optional[ProgressCb] = None,
                 follow_symlinks: bool = False) -> List[ScanEntry]:
    folders = list_top_folders(root)
    total = len(folders)
    logger.info("ranking %d folders under %s", total, root)

    entries: List[ScanEntry] = []
    for done, path in enumerate(folders, 1):
        sz = size_of(path, follow_symlinks=follow_symlinks)
        name = os.path.basename(path.rstrip("\\/")) or path
        entries.append(ScanEntry(name=name, total_bytes=sz))
        if progress:
            progress(done, total)

    entries.sort(key=lambda e: e.total_bytes, reverse=True)
    return entries


def bar_length(size: int, largest: int, width: int) -> int:
    if largest <= 0:
        return 0
    return width * size // largest


def render_ranking(entries: List[ScanEntry], limit: int = 5, width: int = 50) -> List[str]:
    lines = ["Top Folder Usage (Approx.):"]
    shown = entries[:limit]
    if not shown:
        return lines
    largest = shown[0].total_bytes
    for e in shown:
        bar = "#" * bar_length(e.total_bytes, largest, width)
        lines.append(f"{e.name} [{bar}] {e.total_bytes // (1024 * 1024)} MB")
    return lines
