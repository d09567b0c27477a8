"""Keyboard indicator and keymap helpers."""

from __future__ import annotations

import re

_INVALID_SYMBOLS = ("evdev", "inet", "pc", "base")
_SEPARATORS = re.compile(r"[+:]")

# Only this many characters of an indicator format are looked at.
_FORMAT_LIMIT = 4


def keyboard_indicators(fmt: str, led_mask: int) -> str:
    """Render caps and num lock state according to ``fmt``.

    ``fmt`` holds ``c`` (caps lock) and/or ``n`` (num lock) in either case,
    each optionally followed by ``?``.  A letter followed by ``?`` appears,
    case preserved, only while its indicator is on.  Any other letter always
    appears: lowercase when off, uppercase when on.  Bit 0 of ``led_mask`` is
    caps lock and bit 1 is num lock.
    """
    fmt = fmt[:_FORMAT_LIMIT]
    out: list[str] = []
    for index, char in enumerate(fmt):
        key = char.lower()
        if key not in ("c", "n"):
            continue
        togglecase = index + 1 >= len(fmt) or fmt[index + 1] != "?"
        isset = bool(led_mask & (1 << (key == "n")))
        if togglecase:
            out.append(key.upper() if isset else key)
        elif isset:
            out.append(char)
    return "".join(out)


def valid_layout_or_variant(sym: str) -> bool:
    """Whether an xkb symbols token names a real layout or variant."""
    return not sym.startswith(_INVALID_SYMBOLS)


def get_layout(symbols: str, group: int) -> str | None:
    """Layout of keyboard group ``group`` from an xkb symbols name.

    Rule-set tokens such as ``pc`` or ``evdev`` and single-digit group
    suffixes are skipped.  When there are fewer layouts than ``group + 1``
    the last one found is returned; ``None`` when there is none at all.
    """
    layout = None
    found = 0
    for token in _SEPARATORS.split(symbols):
        if found > group:
            break
        if not token:
            continue
        if not valid_layout_or_variant(token):
            continue
        if len(token) == 1 and token.isdigit():
            continue
        layout = token
        found += 1
    return layout