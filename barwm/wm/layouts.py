"""Layout arrangements and bar geometry helpers of the window manager."""

from __future__ import annotations

import struct
from typing import Callable, Iterable, Sequence

from barwm.wm.config import Click
from barwm.wm.model import LTSYMBOL_SIZE, Client, Monitor

Resize = Callable[[Client, int, int, int, int, bool], object]
TextWidth = Callable[[str], int]


def _f32(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def tile(monitor: Monitor, resize: Resize) -> None:
    """Arrange tiled clients in a master column and a stack column.

    ``resize`` is called as ``resize(client, x, y, w, h, interact)`` and is
    expected to update the client's geometry.
    """
    clients = monitor.tiled()
    n = len(clients)
    if n == 0:
        return

    if n > monitor.nmaster:
        mw = int(monitor.ww * monitor.mfact) if monitor.nmaster else 0
    else:
        mw = monitor.ww

    my = ty = 0
    for i, client in enumerate(clients):
        if i < monitor.nmaster:
            h = (monitor.wh - my) // (min(n, monitor.nmaster) - i)
            resize(
                client,
                monitor.wx,
                monitor.wy + my,
                mw - 2 * client.bw,
                h - 2 * client.bw,
                False,
            )
            if my + client.height < monitor.wh:
                my += client.height
        else:
            h = (monitor.wh - ty) // (n - i)
            resize(
                client,
                monitor.wx + mw,
                monitor.wy + ty,
                monitor.ww - mw - 2 * client.bw,
                h - 2 * client.bw,
                False,
            )
            if ty + client.height < monitor.wh:
                ty += client.height


def monocle(monitor: Monitor, resize: Resize) -> None:
    """Give every tiled client the whole window area.

    The layout symbol shows the number of visible clients when there are any.
    """
    count = sum(1 for _ in monitor.visible())
    if count > 0:
        monitor.ltsymbol = f"[{count}]"[: LTSYMBOL_SIZE - 1]
    for client in monitor.tiled():
        resize(
            client,
            monitor.wx,
            monitor.wy,
            monitor.ww - 2 * client.bw,
            monitor.wh - 2 * client.bw,
            False,
        )


def bar_click(
    x: int,
    tags: Sequence[str],
    ltsymbol: str,
    status: str,
    bar_width: int,
    tray_width: int,
    text_width: TextWidth,
) -> tuple[Click, int]:
    """Classify a click at horizontal position ``x`` on the bar.

    ``text_width`` gives the drawn width of a text, padding included.  The
    result is the click area and, for the tag bar, the mask of the tag hit
    (0 otherwise).
    """
    if not tags:
        raise ValueError("at least one tag is required")
    i = 0
    right = text_width(tags[0])
    while x >= right:
        i += 1
        if i >= len(tags):
            break
        right += text_width(tags[i])
    if i < len(tags):
        return Click.TAG_BAR, 1 << i
    if x < right + text_width(ltsymbol):
        return Click.LT_SYMBOL, 0
    if x > bar_width - text_width(status) - tray_width:
        return Click.STATUS_TEXT, 0
    return Click.WIN_TITLE, 0


def systray_width(icon_widths: Iterable[int], spacing: int, enabled: bool) -> int:
    """Width of the system tray holding icons of the given widths.

    An empty or disabled tray is one pixel wide.
    """
    width = 0
    if enabled:
        for icon in icon_widths:
            width += icon + spacing
    return width + spacing if width else 1


def systray_icon_size(w: int, h: int, bar_height: int) -> tuple[int, int]:
    """Size of a tray icon that asks for ``w`` by ``h``, scaled to the bar height."""
    if w == h:
        return bar_height, bar_height
    if h == bar_height:
        return w, bar_height
    if h == 0:
        raise ValueError("icon height must not be zero")
    scaled = _f32(_f32(float(bar_height)) * _f32(_f32(float(w)) / _f32(float(h))))
    return int(scaled), bar_height