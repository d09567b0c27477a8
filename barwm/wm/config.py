"""Window manager configuration: appearance, tags, rules, layouts and bindings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

# Modifier masks as the X server reports them.
SHIFT_MASK = 1 << 0
LOCK_MASK = 1 << 1
CONTROL_MASK = 1 << 2
MOD1_MASK = 1 << 3
MOD2_MASK = 1 << 4
MOD3_MASK = 1 << 5
MOD4_MASK = 1 << 6
MOD5_MASK = 1 << 7
MODKEY = MOD1_MASK

BUTTON1 = 1
BUTTON2 = 2
BUTTON3 = 3

# Appearance.
BORDER_PX = 0
SNAP = 32
SHOW_BAR = True
TOP_BAR = True
BAR_HEIGHT = 46
FONTS = ("monospace:size=12",)
DMENU_FONT = "monospace:size=10"

COL_GRAY1 = "#2b2623"
COL_GRAY2 = "#444444"
COL_GRAY3 = "#d8c9b3"
COL_GRAY4 = "#ffb347"
COL_CYAN = "#005577"
COL_ORANGE = "#C75B00"
COL_GREEN = "#3b2f2f"

SYSTRAY_PINNING = 0
SYSTRAY_ON_LEFT = False
SYSTRAY_SPACING = 2
SYSTRAY_PINNING_FAIL_FIRST = True
SHOW_SYSTRAY = True

# Colour schemes as (foreground, background, border).
SCHEME_NORM = (COL_GRAY3, COL_GRAY1, COL_GRAY2)
SCHEME_SEL = (COL_GRAY4, COL_GREEN, COL_GREEN)

TAGS = ("1", "2", "3", "4", "5", "6", "7", "8", "9")
TAG_MASK = (1 << len(TAGS)) - 1

# Layout defaults.
MFACT = 0.55
NMASTER = 1
RESIZE_HINTS = True
LOCK_FULLSCREEN = True


class Click(enum.IntEnum):
    """Where a mouse button was pressed."""

    TAG_BAR = 0
    LT_SYMBOL = 1
    STATUS_TEXT = 2
    WIN_TITLE = 3
    CLIENT_WIN = 4
    ROOT_WIN = 5


@dataclass(frozen=True)
class Layout:
    """A layout symbol and the name of its arrange function; ``None`` floats."""

    symbol: str
    arrange: Optional[str]


@dataclass(frozen=True)
class Rule:
    """Window matching rule; ``None`` fields match anything."""

    wm_class: Optional[str]
    instance: Optional[str]
    title: Optional[str]
    tags: int
    isfloating: bool
    monitor: int


@dataclass(frozen=True)
class Key:
    """Key binding: modifier mask, keysym name, action name and its argument."""

    mod: int
    keysym: str
    action: str
    arg: Any = None


@dataclass(frozen=True)
class Button:
    """Mouse binding: click area, modifier mask, button, action and argument."""

    click: Click
    mask: int
    button: int
    action: str
    arg: Any = None


def dmenu_command(monitor_num: int) -> tuple[str, ...]:
    """The launcher command, showing it on monitor ``monitor_num``."""
    return (
        "dmenu_run", "-m", str(monitor_num),
        "-fn", DMENU_FONT,
        "-nb", COL_GRAY1,
        "-nf", COL_GRAY3,
        "-sb", COL_CYAN,
        "-sf", COL_GRAY1,
    )


DMENUCMD = dmenu_command(0)
TERMCMD = ("xfce4-terminal",)


def _shcmd(cmd: str) -> tuple[str, ...]:
    return ("/bin/sh", "-c", cmd)


def default_layouts() -> tuple[Layout, ...]:
    """Available layouts; the first is the default."""
    return (
        Layout("[]=", "tile"),
        Layout("><>", None),
        Layout("[M]", "monocle"),
    )


def default_rules() -> tuple[Rule, ...]:
    """Rules applied to new windows."""
    return (
        Rule("Gimp", None, None, 0, True, -1),
        Rule("Firefox", None, None, 1 << 8, False, -1),
    )


def _tag_keys(keysym: str, tag: int) -> list[Key]:
    mask = 1 << tag
    return [
        Key(MODKEY, keysym, "view", mask),
        Key(MODKEY | CONTROL_MASK, keysym, "toggleview", mask),
        Key(MODKEY | SHIFT_MASK, keysym, "tag", mask),
        Key(MODKEY | CONTROL_MASK | SHIFT_MASK, keysym, "toggletag", mask),
    ]


def default_keys() -> tuple[Key, ...]:
    """Keyboard bindings."""
    layouts = default_layouts()
    keys = [
        Key(MODKEY, "p", "spawn", DMENUCMD),
        Key(MODKEY | SHIFT_MASK, "Return", "spawn", TERMCMD),
        Key(MODKEY, "b", "togglebar"),
        Key(MODKEY, "j", "focusstack", +1),
        Key(MODKEY, "k", "focusstack", -1),
        Key(MODKEY, "i", "incnmaster", +1),
        Key(MODKEY, "d", "incnmaster", -1),
        Key(MODKEY, "h", "setmfact", -0.05),
        Key(MODKEY, "l", "setmfact", +0.05),
        Key(MODKEY, "Return", "zoom"),
        Key(MODKEY, "Tab", "view"),
        Key(MODKEY | SHIFT_MASK, "c", "killclient"),
        Key(MODKEY, "t", "setlayout", layouts[0]),
        Key(MODKEY, "f", "setlayout", layouts[1]),
        Key(MODKEY, "m", "setlayout", layouts[2]),
        Key(MODKEY, "space", "setlayout"),
        Key(MODKEY | SHIFT_MASK, "space", "togglefloating"),
        Key(MODKEY, "0", "view", ~0),
        Key(MODKEY | SHIFT_MASK, "0", "tag", ~0),
        Key(MODKEY, "comma", "focusmon", -1),
        Key(MODKEY, "period", "focusmon", +1),
        Key(MODKEY | SHIFT_MASK, "comma", "tagmon", -1),
        Key(MODKEY | SHIFT_MASK, "period", "tagmon", +1),
    ]
    for tag, name in enumerate(TAGS):
        keys.extend(_tag_keys(name, tag))
    keys.extend(
        [
            Key(MODKEY | SHIFT_MASK, "q", "quit"),
            Key(MODKEY, "t", "spawn", TERMCMD),
            Key(0, "XF86AudioLowerVolume", "spawn", _shcmd("pamixer -d 5")),
            Key(0, "XF86AudioRaiseVolume", "spawn", _shcmd("pamixer -i 5")),
            Key(0, "XF86AudioMute", "spawn", _shcmd("pamixer -t")),
            Key(0, "XF86MonBrightnessDown", "spawn", _shcmd("brightnessctl set 5%-")),
            Key(0, "XF86MonBrightnessUp", "spawn", _shcmd("brightnessctl set +5%")),
        ]
    )
    return tuple(keys)


def default_buttons() -> tuple[Button, ...]:
    """Mouse bindings."""
    layouts = default_layouts()
    return (
        Button(Click.LT_SYMBOL, 0, BUTTON1, "setlayout"),
        Button(Click.LT_SYMBOL, 0, BUTTON3, "setlayout", layouts[2]),
        Button(Click.WIN_TITLE, 0, BUTTON2, "zoom"),
        Button(Click.STATUS_TEXT, 0, BUTTON2, "spawn", TERMCMD),
        Button(Click.CLIENT_WIN, MODKEY, BUTTON1, "movemouse"),
        Button(Click.CLIENT_WIN, MODKEY, BUTTON2, "togglefloating"),
        Button(Click.CLIENT_WIN, MODKEY, BUTTON3, "resizemouse"),
        Button(Click.TAG_BAR, 0, BUTTON1, "view"),
        Button(Click.TAG_BAR, 0, BUTTON3, "toggleview"),
        Button(Click.TAG_BAR, MODKEY, BUTTON1, "tag"),
        Button(Click.TAG_BAR, MODKEY, BUTTON3, "toggletag"),
    )