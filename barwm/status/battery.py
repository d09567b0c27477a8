"""Battery components reading the power-supply class in sysfs."""

from __future__ import annotations

import os
import re

from barwm.status.util import read_int, warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_PATTERN = re.compile(r"[a-zA-Z ]{1,12}")

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}


def _path(bat: str, name: str) -> str:
    return os.path.join(POWER_SUPPLY, bat, name)


def _pick(bat: str, first: str, second: str) -> str | None:
    """Path of the first readable of two attribute files, or ``None``."""
    for name in (first, second):
        path = _path(bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def _read_state(bat: str) -> str | None:
    path = _path(bat, "status")
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    match = _STATE_PATTERN.match(text)
    return match.group(0) if match else None


def battery_perc(bat: str) -> str | None:
    """Remaining battery capacity in percent."""
    capacity = read_int(_path(bat, "capacity"))
    if capacity is None:
        return None
    return str(capacity)


def battery_state(bat: str) -> str | None:
    """Charging state as a symbol: ``+``, ``-``, ``o`` or ``?``."""
    state = _read_state(bat)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str) -> str | None:
    """Time left while discharging as hours and minutes; empty otherwise."""
    state = _read_state(bat)
    if state is None:
        return None

    charge_path = _pick(bat, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(bat, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"