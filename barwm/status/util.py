"""Shared helpers for status components: warnings, number formatting, file reads."""

from __future__ import annotations

import re
import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}

# A line read from a file or a command keeps at most this many characters.
LINE_LIMIT = 1022

_LEADING_INT = re.compile(r"\s*\+?(\d+)")


def warn(message: str) -> None:
    """Write a warning line to standard error."""
    print(message, file=sys.stderr, flush=True)


def fmt_human(num: float, base: int) -> str | None:
    """Scale ``num`` by ``base`` and format it with one decimal and a unit prefix.

    Only bases 1000 and 1024 are supported; any other base gives ``None``.
    """
    prefixes = _PREFIXES.get(base)
    if prefixes is None:
        warn("fmt_human: Invalid base")
        return None
    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def format_arg(fmt: str, value: str) -> str:
    """Substitute a component value into its printf-style format string."""
    return fmt % (value,)


def read_first_line(path: str) -> str | None:
    """Return the first line of ``path`` without its newline, or ``None``.

    ``None`` is returned when the file cannot be read or the line is empty.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            line = handle.readline(LINE_LIMIT)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    if line.endswith("\n"):
        line = line[:-1]
    return line or None


def read_int(path: str) -> int | None:
    """Read the leading unsigned integer of a file, or ``None`` if there is none."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))