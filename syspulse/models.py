from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

@dataclass(frozen=True)
class ScanEntry:
    name: str
    total_bytes: int = 0

@dataclass(frozen=True)
class SizeOk:
    size: int

@dataclass(frozen=True)
class Unreadable:
    path: str
    reason: str = ""

ProbeResult = Union[SizeOk, Unreadable]

@dataclass(frozen=True)
class MemoryUsage:
    used: int
    total: int

    @property
    def percent(self) -> float:
        return self.used * 100.0 / self.total if self.total else 0.0

@dataclass(frozen=True)
class DiskUsage:
    path: str
    used: int
    total: int

    @property
    def percent(self) -> float:
        return self.used * 100.0 / self.total if self.total else 0.0

@dataclass
class SystemSnapshot:
    cpu_percent: float
    memory: MemoryUsage
    disk: Optional[DiskUsage]   # None when the drive query failed
    disk_path: str
    uptime_sec: float
