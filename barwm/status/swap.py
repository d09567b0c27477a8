"""Swap usage components based on /proc/meminfo."""

from __future__ import annotations

import re

from barwm.status.util import fmt_human, warn

MEMINFO_PATH = "/proc/meminfo"

_FIELDS = ("SwapTotal", "SwapFree", "SwapCached")
_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def swap_info(path: str) -> dict[str, int]:
    """Read the swap fields of a meminfo file, in kilobytes.

    Fields absent from the file are absent from the result.
    """
    found: dict[str, int] = {}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            if len(found) == len(_FIELDS):
                break
            for name in _FIELDS:
                if name not in found and line.startswith(name):
                    match = _LEADING_INT.match(line[len(name) + 1 :])
                    if match:
                        found[name] = int(match.group(1))
                    break
    return found


def _values(*names: str) -> list[int] | None:
    try:
        info = swap_info(MEMINFO_PATH)
    except OSError as exc:
        warn(f"fopen '{MEMINFO_PATH}': {exc.strerror}")
        return None
    try:
        return [info[name] for name in names]
    except KeyError:
        return None


def swap_free(unused: str | None = None) -> str | None:
    """Free swap space."""
    values = _values("SwapFree")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_perc(unused: str | None = None) -> str | None:
    """Swap in use, in percent."""
    values = _values("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    if total == 0:
        return None
    return str(int(100 * (total - free - cached) / total))


def swap_total(unused: str | None = None) -> str | None:
    """Total swap space."""
    values = _values("SwapTotal")
    if values is None:
        return None
    return fmt_human(values[0] * 1024, 1024)


def swap_used(unused: str | None = None) -> str | None:
    """Swap space in use."""
    values = _values("SwapTotal", "SwapFree", "SwapCached")
    if values is None:
        return None
    total, free, cached = values
    return fmt_human((total - free - cached) * 1024, 1024)