"""Window management state machine: clients, monitors, focus, tags and layouts."""

from __future__ import annotations

from typing import Callable, Optional

from barwm.wm.config import (
    BAR_HEIGHT,
    BORDER_PX,
    LOCK_FULLSCREEN,
    RESIZE_HINTS,
    TAG_MASK,
    TAGS,
    Layout,
    default_layouts,
    default_rules,
)
from barwm.wm.layouts import monocle, tile
from barwm.wm.model import (
    LTSYMBOL_SIZE,
    Client,
    Monitor,
    apply_size_hints,
    intersect_area,
)

BROKEN = "broken"
NAME_SIZE = 256

_ARRANGERS: dict[str, Callable[[Monitor, Callable[..., object]], None]] = {
    "tile": tile,
    "monocle": monocle,
}


class WindowManager:
    """Holds the monitors and clients and carries out the user's actions."""

    def __init__(
        self, screen_width: int, screen_height: int, bar_height: int = BAR_HEIGHT
    ) -> None:
        self.sw = screen_width
        self.sh = screen_height
        self.bar_height = bar_height
        self.tags = TAGS
        self.layouts = default_layouts()
        self.rules = default_rules()
        self.running = True
        monitor = Monitor(
            lt=[self.layouts[0], self.layouts[1 % len(self.layouts)]],
            mw=screen_width,
            ww=screen_width,
            mh=screen_height,
            wh=screen_height,
        )
        monitor.update_bar_pos(bar_height)
        self.monitors: list[Monitor] = [monitor]
        self.selmon: Monitor = monitor

    # Client lists.

    @staticmethod
    def _visible(client: Client) -> bool:
        return client.mon is not None and client.mon.is_visible(client)

    @staticmethod
    def _attach(client: Client) -> None:
        client.mon.clients.insert(0, client)

    @staticmethod
    def _attachstack(client: Client) -> None:
        client.mon.stack.insert(0, client)

    @staticmethod
    def _detach(client: Client) -> None:
        if client in client.mon.clients:
            client.mon.clients.remove(client)

    def _detachstack(self, client: Client) -> None:
        monitor = client.mon
        if client in monitor.stack:
            monitor.stack.remove(client)
        if client is monitor.sel:
            monitor.sel = next(
                (c for c in monitor.stack if self._visible(c)), None
            )

    # Managing windows.

    def manage(
        self,
        win: int,
        x: int,
        y: int,
        w: int,
        h: int,
        border_width: int = 0,
        name: str = "",
        wm_class: Optional[str] = None,
        instance: Optional[str] = None,
        transient_for: Optional[int] = None,
    ) -> Client:
        """Start managing a window and return its client."""
        client = Client(
            win=win, x=x, y=y, w=w, h=h, oldx=x, oldy=y, oldw=w, oldh=h,
            oldbw=border_width,
        )
        client.name = name[: NAME_SIZE - 1] or BROKEN
        parent = self.find_client(transient_for) if transient_for is not None else None
        if parent is not None:
            client.mon = parent.mon
            client.tags = parent.tags
        else:
            client.mon = self.selmon
            self.apply_rules(client, wm_class, instance)

        monitor = client.mon
        if client.x + client.width > monitor.wx + monitor.ww:
            client.x = monitor.wx + monitor.ww - client.width
        if client.y + client.height > monitor.wy + monitor.wh:
            client.y = monitor.wy + monitor.wh - client.height
        client.x = max(client.x, monitor.wx)
        client.y = max(client.y, monitor.wy)
        client.bw = BORDER_PX

        if not client.isfloating:
            client.isfloating = client.oldstate = (
                transient_for is not None or client.isfixed
            )
        self._attach(client)
        self._attachstack(client)
        monitor.sel = client
        self.arrange(monitor)
        self.focus(None)
        return client

    def unmanage(self, client: Client) -> None:
        """Stop managing a client."""
        monitor = client.mon
        self._detach(client)
        self._detachstack(client)
        self.focus(None)
        self.arrange(monitor)

    def find_client(self, win: int) -> Optional[Client]:
        """The client of window ``win``, if it is managed."""
        for monitor in self.monitors:
            for client in monitor.clients:
                if client.win == win:
                    return client
        return None

    def apply_rules(
        self, client: Client, wm_class: Optional[str], instance: Optional[str]
    ) -> None:
        """Set floating state, tags and monitor of a new client from the rules."""
        wm_class = wm_class or BROKEN
        instance = instance or BROKEN
        client.isfloating = False
        client.tags = 0
        for rule in self.rules:
            if (
                (rule.title is None or rule.title in client.name)
                and (rule.wm_class is None or rule.wm_class in wm_class)
                and (rule.instance is None or rule.instance in instance)
            ):
                client.isfloating = rule.isfloating
                client.tags |= rule.tags
                target = next(
                    (m for m in self.monitors if m.num == rule.monitor), None
                )
                if target is not None:
                    client.mon = target
        masked = client.tags & TAG_MASK
        client.tags = masked if masked else client.mon.tagset[client.mon.seltags]

    # Geometry.

    def _showhide(self, monitor: Monitor) -> None:
        for client in monitor.stack:
            if (
                self._visible(client)
                and (monitor.layout.arrange is None or client.isfloating)
                and not client.isfullscreen
            ):
                self.resize(client, client.x, client.y, client.w, client.h, False)

    def _arrangemon(self, monitor: Monitor) -> None:
        layout = monitor.layout
        monitor.ltsymbol = layout.symbol[: LTSYMBOL_SIZE - 1]
        if layout.arrange is not None:
            _ARRANGERS[layout.arrange](monitor, self.resize)

    def arrange(self, monitor: Optional[Monitor]) -> None:
        """Lay out one monitor, or every monitor when ``monitor`` is ``None``."""
        targets = [monitor] if monitor is not None else list(self.monitors)
        for target in targets:
            self._showhide(target)
        for target in targets:
            self._arrangemon(target)

    @staticmethod
    def _resizeclient(client: Client, x: int, y: int, w: int, h: int) -> None:
        client.oldx, client.x = client.x, x
        client.oldy, client.y = client.y, y
        client.oldw, client.w = client.w, w
        client.oldh, client.h = client.h, h

    def resize(
        self, client: Client, x: int, y: int, w: int, h: int, interact: bool
    ) -> bool:
        """Resize a client within its size hints; return whether it changed."""
        geometry = apply_size_hints(
            client, x, y, w, h, interact, (self.sw, self.sh),
            self.bar_height, RESIZE_HINTS,
        )
        if geometry == client.geometry:
            return False
        self._resizeclient(client, *geometry)
        return True

    # Focus.

    def focus(self, client: Optional[Client]) -> None:
        """Focus ``client``, or the topmost visible client when it cannot be."""
        if client is None or not self._visible(client):
            client = next(
                (c for c in self.selmon.stack if self._visible(c)), None
            )
        if client is not None:
            if client.mon is not self.selmon:
                self.selmon = client.mon
            if client.isurgent:
                client.isurgent = False
            self._detachstack(client)
            self._attachstack(client)
        self.selmon.sel = client

    def focusstack(self, direction: int) -> None:
        """Focus the next (positive) or previous visible client."""
        sel = self.selmon.sel
        if sel is None or (sel.isfullscreen and LOCK_FULLSCREEN):
            return
        clients = self.selmon.clients
        index = clients.index(sel)
        if direction > 0:
            after = [c for c in clients[index + 1 :] if self._visible(c)]
            candidates = after or [c for c in clients if self._visible(c)]
            target = candidates[0] if candidates else None
        else:
            before = [c for c in clients[:index] if self._visible(c)]
            rest = [c for c in clients[index:] if self._visible(c)]
            candidates = before or rest
            target = candidates[-1] if candidates else None
        if target is not None:
            self.focus(target)

    def dirtomon(self, direction: int) -> Monitor:
        """The monitor after (positive) or before the selected one, wrapping."""
        index = self.monitors.index(self.selmon)
        step = 1 if direction > 0 else -1
        return self.monitors[(index + step) % len(self.monitors)]

    def focusmon(self, direction: int) -> None:
        """Select the next or previous monitor."""
        if len(self.monitors) < 2:
            return
        target = self.dirtomon(direction)
        if target is self.selmon:
            return
        self.selmon = target
        self.focus(None)

    def recttomon(self, x: int, y: int, w: int, h: int) -> Monitor:
        """The monitor sharing the largest area with a rectangle."""
        best, area = self.selmon, 0
        for monitor in self.monitors:
            shared = intersect_area(x, y, w, h, monitor)
            if shared > area:
                best, area = monitor, shared
        return best

    def sendmon(self, client: Client, monitor: Monitor) -> None:
        """Move a client to another monitor, taking that monitor's tags."""
        if client.mon is monitor:
            return
        self._detach(client)
        self._detachstack(client)
        client.mon = monitor
        client.tags = monitor.tagset[monitor.seltags]
        self._attach(client)
        self._attachstack(client)
        self.focus(None)
        self.arrange(None)

    def tagmon(self, direction: int) -> None:
        """Send the selected client to the next or previous monitor."""
        if self.selmon.sel is None or len(self.monitors) < 2:
            return
        self.sendmon(self.selmon.sel, self.dirtomon(direction))

    # Tags.

    def view(self, tagmask: Optional[int] = None) -> None:
        """Show the given tags; with no tags, return to the previous view."""
        mask = (tagmask or 0) & TAG_MASK
        monitor = self.selmon
        if mask == monitor.tagset[monitor.seltags]:
            return
        monitor.seltags ^= 1
        if mask:
            monitor.tagset[monitor.seltags] = mask
        self.focus(None)
        self.arrange(monitor)

    def toggleview(self, tagmask: int) -> None:
        """Add or remove tags from the view; the view never becomes empty."""
        monitor = self.selmon
        newtagset = monitor.tagset[monitor.seltags] ^ (tagmask & TAG_MASK)
        if newtagset:
            monitor.tagset[monitor.seltags] = newtagset
            self.focus(None)
            self.arrange(monitor)

    def tag(self, tagmask: int) -> None:
        """Give the selected client exactly the given tags."""
        sel = self.selmon.sel
        if sel is not None and tagmask & TAG_MASK:
            sel.tags = tagmask & TAG_MASK
            self.focus(None)
            self.arrange(self.selmon)

    def toggletag(self, tagmask: int) -> None:
        """Add or remove tags of the selected client; never remove all."""
        sel = self.selmon.sel
        if sel is None:
            return
        newtags = sel.tags ^ (tagmask & TAG_MASK)
        if newtags:
            sel.tags = newtags
            self.focus(None)
            self.arrange(self.selmon)

    # Layout.

    def setmfact(self, delta: Optional[float]) -> None:
        """Change the master area factor; values above 1.0 set it absolutely."""
        monitor = self.selmon
        if delta is None or monitor.layout.arrange is None:
            return
        factor = delta + monitor.mfact if delta < 1.0 else delta - 1.0
        if factor < 0.05 or factor > 0.95:
            return
        monitor.mfact = factor
        self.arrange(monitor)

    def incnmaster(self, delta: int) -> None:
        """Change the number of clients in the master area."""
        self.selmon.nmaster = max(self.selmon.nmaster + delta, 0)
        self.arrange(self.selmon)

    def setlayout(self, layout: Optional[Layout] = None) -> None:
        """Select a layout; with none, switch to the previous one."""
        monitor = self.selmon
        if layout is None or layout != monitor.lt[monitor.sellt]:
            monitor.sellt ^= 1
        if layout is not None:
            monitor.lt[monitor.sellt] = layout
        monitor.ltsymbol = monitor.layout.symbol[: LTSYMBOL_SIZE - 1]
        if monitor.sel is not None:
            self.arrange(monitor)

    def togglefloating(self) -> None:
        """Toggle floating of the selected client."""
        sel = self.selmon.sel
        if sel is None or sel.isfullscreen:
            return
        sel.isfloating = not sel.isfloating or sel.isfixed
        if sel.isfloating:
            self.resize(sel, sel.x, sel.y, sel.w, sel.h, False)
        self.arrange(self.selmon)

    def togglebar(self) -> None:
        """Show or hide the bar of the selected monitor."""
        monitor = self.selmon
        monitor.showbar = not monitor.showbar
        monitor.update_bar_pos(self.bar_height)
        self.arrange(monitor)

    def setfullscreen(self, client: Client, fullscreen: bool) -> None:
        """Make a client cover its whole monitor, or restore it."""
        if fullscreen and not client.isfullscreen:
            client.isfullscreen = True
            client.oldstate = client.isfloating
            client.oldbw = client.bw
            client.bw = 0
            client.isfloating = True
            monitor = client.mon
            self._resizeclient(client, monitor.mx, monitor.my, monitor.mw, monitor.mh)
        elif not fullscreen and client.isfullscreen:
            client.isfullscreen = False
            client.isfloating = client.oldstate
            client.bw = client.oldbw
            client.x, client.y = client.oldx, client.oldy
            client.w, client.h = client.oldw, client.oldh
            self._resizeclient(client, client.x, client.y, client.w, client.h)
            self.arrange(client.mon)

    def zoom(self) -> None:
        """Swap the selected client with the master, or the master with the next."""
        monitor = self.selmon
        client = monitor.sel
        if monitor.layout.arrange is None or client is None or client.isfloating:
            return
        tiled = monitor.tiled()
        if tiled and client is tiled[0]:
            if len(tiled) < 2:
                return
            client = tiled[1]
        self._detach(client)
        self._attach(client)
        self.focus(client)
        self.arrange(client.mon)

    def quit(self) -> None:
        """Ask the event loop to stop."""
        self.running = False