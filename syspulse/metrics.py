from __future__ import annotations
import time
import logging
from typing import Callable, List, Optional, TextIO
import psutil
from .models import MemoryUsage, DiskUsage, SystemSnapshot
from .config import Thresholds, DEFAULT_CPU_INTERVAL
from .utils import MIB, GIB, format_uptime

logger = logging.getLogger(__name__)


class SystemMetricsProvider:
    """One-shot host counters from psutil. No caching, no retries."""

    def __init__(self, cpu_interval: float = DEFAULT_CPU_INTERVAL):
        self.cpu_interval = cpu_interval

    def cpu_usage_percent(self) -> float:
        # blocks for cpu_interval to get a delta between two samples
        return float(psutil.cpu_percent(interval=self.cpu_interval))

    def memory_usage(self) -> MemoryUsage:
        vm = psutil.virtual_memory()
        total = int(vm.total)
        return MemoryUsage(used=total - int(vm.available), total=total)

    def disk_usage(self, path: str) -> DiskUsage:
        u = psutil.disk_usage(path)
        total = int(u.total)
        return DiskUsage(path=path, used=total - int(u.free), total=total)

    def uptime(self) -> float:
        return max(0.0, time.time() - psutil.boot_time())

    def snapshot(self, disk_path: str) -> SystemSnapshot:
        cpu = self.cpu_usage_percent()
        mem = self.memory_usage()
        try:
            disk: Optional[DiskUsage] = self.disk_usage(disk_path)
        except OSError as e:
            logger.warning("disk usage failed for %s: %s", disk_path, e)
            disk = None
        return SystemSnapshot(cpu_percent=cpu, memory=mem, disk=disk,
                              disk_path=disk_path, uptime_sec=self.uptime())


def is_critical(snap: SystemSnapshot, thresholds: Optional[Thresholds] = None) -> bool:
    t = thresholds or Thresholds()
    if snap.cpu_percent > t.cpu:
        return True
    if snap.memory.percent > t.memory:
        return True
    if snap.disk is not None and snap.disk.percent > t.disk:
        return True
    return False


def system_report(snap: SystemSnapshot, thresholds: Optional[Thresholds] = None) -> List[str]:
    lines = [
        f"CPU Usage: {snap.cpu_percent:g}%",
        f"Memory Usage: {snap.memory.used // MIB} MB / {snap.memory.total // MIB} MB",
    ]
    if snap.disk is None:
        lines.append(f"Failed to get disk usage for drive {snap.disk_path}")
    else:
        lines.append(f"Disk Usage ({snap.disk.path}): "
                     f"{snap.disk.used // GIB} GB / {snap.disk.total // GIB} GB")
    lines.append(f"System Uptime: {format_uptime(snap.uptime_sec)}")
    lines.append("")
    lines.append("===== SYSTEM HEALTH SUMMARY =====")
    if is_critical(snap, thresholds):
        lines.append("[CRITICAL] Your system is under heavy load!")
    else:
        lines.append("[GOOD] Your system is running smoothly.")
    return lines


def warmup_animation(out: TextIO, delay: float = 0.05,
                     sleep: Callable[[float], None] = time.sleep,
                     cells: int = 51) -> None:
    out.write("\nScanning System...\n\n[")
    for _ in range(cells):
        out.write("#")
        out.flush()
        if delay > 0:
            sleep(delay)
    out.write("] 100%\n\n")
    out.flush()
