"""CPU frequency and usage components."""

from __future__ import annotations

from barwm.status.util import fmt_human, read_int, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_FIELDS = 7  # user nice system idle iowait irq softirq


class CpuUsage:
    """CPU usage in percent between two successive readings of a stat file."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: list[float] | None = None

    def _sample(self) -> list[float] | None:
        try:
            with open(self.stat_path, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as exc:
            warn(f"fopen '{self.stat_path}': {exc.strerror}")
            return None
        try:
            return [float(token) for token in tokens[1 : 1 + _FIELDS]]
        except ValueError:
            return None

    def __call__(self, unused: str | None = None) -> str | None:
        previous = self._previous
        current = self._sample()
        if current is None or len(current) != _FIELDS:
            return None
        self._previous = current
        if previous is None or previous[0] == 0:
            return None
        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = [0, 1, 2, 5, 6]
        used = sum(previous[i] for i in busy) - sum(current[i] for i in busy)
        return str(int(100 * used / total))


_cpu_usage = CpuUsage()


def cpu_freq(unused: str | None = None) -> str | None:
    """Current frequency of the first CPU."""
    freq = read_int(CPU_FREQ)
    if freq is None:
        return None
    return fmt_human(freq * 1000, 1000)


def cpu_perc(unused: str | None = None) -> str | None:
    """CPU usage since the previous call, in percent."""
    return _cpu_usage(unused)