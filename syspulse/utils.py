from __future__ import annotations

MIB = 1024 * 1024
GIB = 1024 * MIB

def format_bytes(num: int) -> str:
    if num < 0:
        return str(num)
    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    x = float(num)
    for u in units:
        if x < 1024.0 or u == units[-1]:
            return f"{x:.2f} {u}" if u != "B" else f"{int(x)} {u}"
        x /= 1024.0
    return f"{x:.2f} PB"

def format_uptime(seconds: float) -> str:
    s = int(max(0, seconds))
    minutes, s = divmod(s, 60)
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)
    return f"{days}d {hours}h {minutes}m {s}s"

def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v
