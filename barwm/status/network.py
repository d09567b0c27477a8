"""Network components: addresses, transfer speeds and wireless status."""

from __future__ import annotations

import array
import fcntl
import re
import socket
import struct

import psutil

from barwm.status.util import fmt_human, read_int, warn

INTERVAL_MS = 1000

NET_BYTES = "/sys/class/net/{interface}/statistics/{direction}_bytes"
NET_OPERSTATE = "/sys/class/net/{interface}/operstate"
PROC_WIRELESS = "/proc/net/wireless"

_SIOCGIWESSID = 0x8B1B
_IW_ESSID_MAX_SIZE = 32
_IFNAMSIZ = 16
_IWREQ_SIZE = 32

_QUALITY = re.compile(r"\s*[-+]?\d+\s*([-+]?\d+)")


def _ip(interface: str, family: int) -> str | None:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as exc:
        warn(f"getifaddrs: {exc.strerror}")
        return None
    for address in addresses.get(interface, ()):
        if address.family == family:
            return address.address
    return None


def ipv4(interface: str) -> str | None:
    """IPv4 address of a network interface."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> str | None:
    """IPv6 address of a network interface."""
    return _ip(interface, socket.AF_INET6)


class NetSpeed:
    """Transfer rate of an interface between two successive calls."""

    def __init__(self, direction: str, interval: int = INTERVAL_MS) -> None:
        if direction not in ("rx", "tx"):
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}")
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self._bytes = 0

    def __call__(self, interface: str) -> str | None:
        previous = self._bytes
        path = NET_BYTES.format(interface=interface, direction=self.direction)
        current = read_int(path)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        return fmt_human((current - previous) * 1000 // self.interval, 1024)


_rx = NetSpeed("rx", INTERVAL_MS)
_tx = NetSpeed("tx", INTERVAL_MS)


def netspeed_rx(interface: str) -> str | None:
    """Receive speed of an interface per second."""
    return _rx(interface)


def netspeed_tx(interface: str) -> str | None:
    """Transmit speed of an interface per second."""
    return _tx(interface)


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> int | None:
    """Link quality of ``interface`` from the contents of /proc/net/wireless.

    Only the first interface line (the third line of the file) is examined.
    """
    lines = text.splitlines()
    if len(lines) < 3:
        return None
    line = lines[2]
    position = line.find(interface)
    if position < 0:
        return None
    match = _QUALITY.match(line[position + len(interface) + 2 :])
    if match is None:
        return None
    return int(match.group(1))


def wifi_perc(interface: str) -> str | None:
    """Wireless link quality in percent, for an interface that is up."""
    path = NET_OPERSTATE.format(interface=interface)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            status = handle.read(4)
    except OSError as exc:
        warn(f"fopen '{path}': {exc.strerror}")
        return None
    if status != "up\n":
        return None
    try:
        with open(PROC_WIRELESS, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        warn(f"fopen '{PROC_WIRELESS}': {exc.strerror}")
        return None
    quality = parse_wireless(text, interface)
    if quality is None:
        return None
    # 70 is the maximum link quality reported by the kernel.
    return str(int(quality / 70 * 100))


def wifi_essid(interface: str) -> str | None:
    """ESSID the wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= _IFNAMSIZ:
        warn("vsnprintf: Output truncated")
        return None
    essid = array.array("B", bytes(_IW_ESSID_MAX_SIZE + 1))
    address = essid.buffer_info()[0]
    request = struct.pack(
        "16sPHH", name, address, _IW_ESSID_MAX_SIZE + 1, 0
    ).ljust(_IWREQ_SIZE, b"\0")
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as exc:
        warn(f"socket 'AF_INET': {exc.strerror}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), _SIOCGIWESSID, request)
        except OSError as exc:
            warn(f"ioctl 'SIOCGIWESSID': {exc.strerror}")
            return None
    value = essid.tobytes().split(b"\0", 1)[0]
    if not value:
        return None
    return value.decode("utf-8", errors="replace")