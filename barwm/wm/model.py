"""Core data model of the window manager: size hints, clients and monitors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, NamedTuple, Optional

from barwm.wm.config import MFACT, NMASTER, SHOW_BAR, TOP_BAR, Layout, default_layouts

# WM_NORMAL_HINTS flag bits.
US_POSITION = 1 << 0
US_SIZE = 1 << 1
P_POSITION = 1 << 2
P_SIZE = 1 << 3
P_MIN_SIZE = 1 << 4
P_MAX_SIZE = 1 << 5
P_RESIZE_INC = 1 << 6
P_ASPECT = 1 << 7
P_BASE_SIZE = 1 << 8
P_WIN_GRAVITY = 1 << 9

# Size of the buffer a layout symbol is copied into, terminator included.
LTSYMBOL_SIZE = 16


class Geometry(NamedTuple):
    """Position and size of a window, border excluded."""

    x: int
    y: int
    w: int
    h: int


def _ratio(a: float, b: float) -> float:
    """Floating division that yields infinities or NaN instead of raising."""
    if b:
        return a / b
    if a > 0:
        return math.inf
    if a < 0:
        return -math.inf
    return math.nan


def _c_mod(a: int, b: int) -> int:
    """Remainder that takes the sign of the dividend."""
    return a - b * int(a / b)


@dataclass
class SizeHints:
    """Size constraints a client asks for through WM_NORMAL_HINTS."""

    basew: int = 0
    baseh: int = 0
    incw: int = 0
    inch: int = 0
    maxw: int = 0
    maxh: int = 0
    minw: int = 0
    minh: int = 0
    mina: float = 0.0
    maxa: float = 0.0

    @classmethod
    def from_flags(
        cls,
        flags: int,
        base: tuple[int, int] = (0, 0),
        minimum: tuple[int, int] = (0, 0),
        maximum: tuple[int, int] = (0, 0),
        increment: tuple[int, int] = (0, 0),
        min_aspect: tuple[int, int] = (0, 0),
        max_aspect: tuple[int, int] = (0, 0),
    ) -> "SizeHints":
        """Build hints from the raw property fields and its flag mask.

        The base size falls back to the minimum size and the other way round.
        An aspect with a zero denominator disables that aspect limit.
        """
        hints = cls()
        if flags & P_BASE_SIZE:
            hints.basew, hints.baseh = base
        elif flags & P_MIN_SIZE:
            hints.basew, hints.baseh = minimum
        if flags & P_RESIZE_INC:
            hints.incw, hints.inch = increment
        if flags & P_MAX_SIZE:
            hints.maxw, hints.maxh = maximum
        if flags & P_MIN_SIZE:
            hints.minw, hints.minh = minimum
        elif flags & P_BASE_SIZE:
            hints.minw, hints.minh = base
        if flags & P_ASPECT:
            min_x, min_y = min_aspect
            max_x, max_y = max_aspect
            hints.mina = min_y / min_x if min_x else 0.0
            hints.maxa = max_x / max_y if max_y else 0.0
        return hints

    def is_fixed(self) -> bool:
        """Whether the window cannot be resized at all."""
        return bool(
            self.maxw
            and self.maxh
            and self.maxw == self.minw
            and self.maxh == self.minh
        )


@dataclass(eq=False)
class Client:
    """A managed top-level window."""

    win: int = 0
    name: str = ""
    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    oldx: int = 0
    oldy: int = 0
    oldw: int = 0
    oldh: int = 0
    bw: int = 0
    oldbw: int = 0
    tags: int = 0
    isfloating: bool = False
    isurgent: bool = False
    neverfocus: bool = False
    oldstate: bool = False
    isfullscreen: bool = False
    hints: SizeHints = field(default_factory=SizeHints)
    mon: Optional["Monitor"] = field(default=None, repr=False)

    @property
    def width(self) -> int:
        """Outer width, borders included."""
        return self.w + 2 * self.bw

    @property
    def height(self) -> int:
        """Outer height, borders included."""
        return self.h + 2 * self.bw

    @property
    def isfixed(self) -> bool:
        """Whether the size hints pin the window to one size."""
        return self.hints.is_fixed()

    @property
    def geometry(self) -> Geometry:
        """Current position and size."""
        return Geometry(self.x, self.y, self.w, self.h)


def _default_lt() -> list[Layout]:
    layouts = default_layouts()
    return [layouts[0], layouts[1 % len(layouts)]]


@dataclass(eq=False)
class Monitor:
    """A screen with its bar, its clients and its view state."""

    num: int = 0
    mfact: float = MFACT
    nmaster: int = NMASTER
    by: int = 0
    mx: int = 0
    my: int = 0
    mw: int = 0
    mh: int = 0
    wx: int = 0
    wy: int = 0
    ww: int = 0
    wh: int = 0
    seltags: int = 0
    sellt: int = 0
    tagset: list[int] = field(default_factory=lambda: [1, 1])
    showbar: bool = SHOW_BAR
    topbar: bool = TOP_BAR
    clients: list[Client] = field(default_factory=list)
    stack: list[Client] = field(default_factory=list)
    sel: Optional[Client] = None
    barwin: int = 0
    lt: list[Layout] = field(default_factory=_default_lt)
    ltsymbol: str = ""

    def __post_init__(self) -> None:
        if not self.ltsymbol:
            self.ltsymbol = self.lt[0].symbol[: LTSYMBOL_SIZE - 1]

    def is_visible(self, client: Client) -> bool:
        """Whether ``client`` carries a tag that this monitor shows."""
        return bool(client.tags & self.tagset[self.seltags])

    def tiled(self) -> list[Client]:
        """Visible, non-floating clients in client-list order."""
        return [c for c in self.clients if not c.isfloating and self.is_visible(c)]

    def visible(self) -> Iterator[Client]:
        """Visible clients in client-list order."""
        return (c for c in self.clients if self.is_visible(c))

    @property
    def layout(self) -> Layout:
        """The selected layout."""
        return self.lt[self.sellt]

    def update_bar_pos(self, bar_height: int) -> None:
        """Recompute the window area and bar position from the screen area."""
        self.wy = self.my
        self.wh = self.mh
        if self.showbar:
            self.wh -= bar_height
            self.by = self.wy if self.topbar else self.wy + self.wh
            self.wy = self.wy + bar_height if self.topbar else self.wy
        else:
            self.by = -bar_height


def intersect_area(x: int, y: int, w: int, h: int, monitor: Monitor) -> int:
    """Area shared by a rectangle and the window area of ``monitor``."""
    dx = max(0, min(x + w, monitor.wx + monitor.ww) - max(x, monitor.wx))
    dy = max(0, min(y + h, monitor.wy + monitor.wh) - max(y, monitor.wy))
    return dx * dy


def apply_size_hints(
    client: Client,
    x: int,
    y: int,
    w: int,
    h: int,
    interact: bool,
    screen: tuple[int, int],
    bar_height: int,
    respect_hints: bool,
) -> Geometry:
    """Adjust a requested geometry to the screen, the monitor and the size hints.

    ``screen`` is the (width, height) of the whole display.  Interactive moves
    are kept on the display; others are kept on the client's monitor.  The
    caller compares the result with ``client.geometry`` to see if it changed.
    """
    monitor = client.mon
    if monitor is None:
        raise ValueError("client is not on a monitor")
    sw, sh = screen

    w = max(1, w)
    h = max(1, h)
    if interact:
        if x > sw:
            x = sw - client.width
        if y > sh:
            y = sh - client.height
        if x + w + 2 * client.bw < 0:
            x = 0
        if y + h + 2 * client.bw < 0:
            y = 0
    else:
        if x >= monitor.wx + monitor.ww:
            x = monitor.wx + monitor.ww - client.width
        if y >= monitor.wy + monitor.wh:
            y = monitor.wy + monitor.wh - client.height
        if x + w + 2 * client.bw <= monitor.wx:
            x = monitor.wx
        if y + h + 2 * client.bw <= monitor.wy:
            y = monitor.wy
    h = max(h, bar_height)
    w = max(w, bar_height)

    if respect_hints or client.isfloating or monitor.layout.arrange is None:
        hints = client.hints
        # A base size equal to the minimum counts as the minimum only (ICCCM 4.1.2.3).
        baseismin = hints.basew == hints.minw and hints.baseh == hints.minh
        if not baseismin:
            w -= hints.basew
            h -= hints.baseh
        if hints.mina > 0 and hints.maxa > 0:
            if hints.maxa < _ratio(w, h):
                w = int(h * hints.maxa + 0.5)
            elif hints.mina < _ratio(h, w):
                h = int(w * hints.mina + 0.5)
        if baseismin:
            w -= hints.basew
            h -= hints.baseh
        if hints.incw:
            w -= _c_mod(w, hints.incw)
        if hints.inch:
            h -= _c_mod(h, hints.inch)
        w = max(w + hints.basew, hints.minw)
        h = max(h + hints.baseh, hints.minh)
        if hints.maxw:
            w = min(w, hints.maxw)
        if hints.maxh:
            h = min(h, hints.maxh)
    return Geometry(x, y, w, h)