"""Memory usage components based on /proc/meminfo."""

from __future__ import annotations

from barwm.status.util import fmt_human, warn

MEMINFO_PATH = "/proc/meminfo"


def read_meminfo(path: str) -> dict[str, int]:
    """Parse a meminfo file into a mapping of field name to kilobytes."""
    fields: dict[str, int] = {}
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            name, sep, rest = line.partition(":")
            if not sep:
                continue
            parts = rest.split()
            if parts and parts[0].isdigit():
                fields[name.strip()] = int(parts[0])
    return fields


def _fields(*names: str) -> list[int] | None:
    try:
        info = read_meminfo(MEMINFO_PATH)
    except OSError as exc:
        warn(f"fopen '{MEMINFO_PATH}': {exc.strerror}")
        return None
    try:
        return [info[name] for name in names]
    except KeyError:
        return None


def ram_free(unused: str | None = None) -> str | None:
    """Memory available for new work."""
    values = _fields("MemAvailable")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_perc(unused: str | None = None) -> str | None:
    """Memory in use, excluding buffers and cache, in percent."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    if total == 0:
        return None
    return str(100 * ((total - free) - (buffers + cached)) // total)


def ram_total(unused: str | None = None) -> str | None:
    """Total memory."""
    values = _fields("MemTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def ram_used(unused: str | None = None) -> str | None:
    """Memory in use, excluding buffers and cache."""
    values = _fields("MemTotal", "MemFree", "Buffers", "Cached")
    if values is None:
        return None
    total, free, buffers, cached = values
    return fmt_human((total - free - buffers - cached) * 1024, 1024)