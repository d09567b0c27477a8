# barwm

barwm has two parts:

- `barwm.status` holds components for a system status line. Each one reads a
  value such as CPU use, memory use, swap use, battery state or a network
  interface's address or speed. Most of them read from `/proc` and `/sys` on
  Linux.
- `barwm.wm` models a dynamic tiling window manager. It covers monitors,
  clients, tags, rules, size hints, and the tile and monocle layouts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Status components

A component takes one argument and returns a string. It returns `None` when
no value can be read, and in most cases writes a warning to standard error.

- `barwm.status.cpu`: `cpu_freq`, `cpu_perc`. `cpu_perc` gives the usage
  since the previous call, so the first call returns `None`.
  `CpuUsage(stat_path)` is a callable that does the same for any stat file.
- `barwm.status.ram`: `ram_free`, `ram_perc`, `ram_total`, `ram_used`.
  `read_meminfo(path)` parses a meminfo file into a dict of kilobyte values.
- `barwm.status.swap`: `swap_free`, `swap_perc`, `swap_total`, `swap_used`.
  `swap_info(path)` reads the swap fields of a meminfo file.
- `barwm.status.battery`: `battery_perc`, `battery_state` (which returns `+`,
  `-`, `o` or `?`) and `battery_remaining`. Each takes a battery name such
  as `"BAT0"`.
- `barwm.status.network`: `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`,
  `wifi_perc`, `wifi_essid`. It also has the helpers `rssi_to_perc` and
  `parse_wireless`, and `NetSpeed(direction, interval)`, which measures the
  rate between two successive calls.
- `barwm.status.keyboard`: pure helpers. They take their input as arguments
  and do not read it from a display:
  `keyboard_indicators(fmt, led_mask)`, `valid_layout_or_variant(sym)` and
  `get_layout(symbols, group)`.
- `barwm.status.util`: `fmt_human`, `format_arg`, `read_first_line`,
  `read_int` and `warn`.

```python
from barwm.status.util import fmt_human
from barwm.status.keyboard import keyboard_indicators, get_layout
from barwm.status.network import rssi_to_perc

print(fmt_human(1536, 1024))                    # "1.5 Ki"
print(keyboard_indicators("cn", 0b01))          # "Cn": caps lock on, num lock off
print(get_layout("pc+us+de:2+inet(evdev)", 1))  # "de"
print(rssi_to_perc(-70))                        # 60
```

## The window manager model

`barwm.wm.manager.WindowManager` holds the manager's state: its monitors, the
clients on each monitor, the selected client and the selected tags. It
provides these operations: `manage`, `unmanage`, `find_client`,
`apply_rules`, `arrange`, `resize`, `focus`, `focusstack`, `focusmon`,
`dirtomon`, `recttomon`, `sendmon`, `tagmon`, `view`, `toggleview`, `tag`,
`toggletag`, `setmfact`, `incnmaster`, `setlayout`, `togglefloating`,
`togglebar`, `setfullscreen`, `zoom` and `quit`.

```python
from barwm.wm.manager import WindowManager

wm = WindowManager(1920, 1080, 46)
client = wm.manage(
    win=1, x=0, y=0, w=800, h=600, border_width=0,
    name="editor", wm_class="Editor", instance="editor", transient_for=None,
)
print(client.geometry)   # tiled to fill the window area below the bar
wm.view(1 << 1)          # switch to the second tag
```

The other `barwm.wm` modules are:

- `barwm.wm.layouts`: the layouts `tile` and `monocle`, and the bar helpers
  `bar_click`, `systray_width` and `systray_icon_size`.
- `barwm.wm.model`: `SizeHints`, `Client`, `Monitor`, `intersect_area` and
  `apply_size_hints`.
- `barwm.wm.config`: the appearance constants, the tags, and `Click`,
  `Layout`, `Rule`, `Key` and `Button`. It also has `default_layouts`,
  `default_rules`, `default_keys`, `default_buttons` and `dmenu_command`.

## What this package does not do

- It installs no command. Nothing here runs the components in a loop or puts
  their output together into a status line. You call the component functions
  yourself.
- There are no components for the date and time, disk space, file counts,
  hostname, kernel release, load average, uptime, user ids, temperature, or
  the output of a shell command.
- The window manager is a state model only. It does not connect to a display
  server. It does not draw a bar or a system tray, grab keys or buttons, or
  start programs. The key and mouse bindings in `barwm.wm.config` are plain
  data, and nothing here dispatches them.