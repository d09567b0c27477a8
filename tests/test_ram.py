import pytest

from barwm.status import ram
from barwm.status.ram import ram_free, ram_perc, ram_total, ram_used, read_meminfo
from barwm.status.util import fmt_human

MEMINFO = (
    "MemTotal:        1000 kB\n"
    "MemFree:          200 kB\n"
    "MemAvailable:     500 kB\n"
    "Buffers:          100 kB\n"
    "Cached:           100 kB\n"
    "HugePages_Total:    0\n"
)


@pytest.fixture
def meminfo(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO)
    monkeypatch.setattr(ram, "MEMINFO_PATH", str(path))
    return path


def test_read_meminfo(meminfo):
    info = read_meminfo(str(meminfo))
    assert info["MemTotal"] == 1000
    assert info["MemAvailable"] == 500
    assert info["Cached"] == 100
    assert info["HugePages_Total"] == 0


def test_read_meminfo_missing(tmp_path):
    with pytest.raises(OSError):
        read_meminfo(str(tmp_path / "missing"))


def test_ram_perc(meminfo):
    assert ram_perc(None) == "60"


def test_ram_total(meminfo):
    assert ram_total(None) == "1000.0 Ki"


def test_ram_used(meminfo):
    assert ram_used(None) == "600.0 Ki"


def test_ram_free_reports_available(meminfo):
    assert ram_free(None) == fmt_human(500 * 1024, 1024)


def test_ram_perc_zero_total(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text(MEMINFO.replace("1000 kB", "0 kB"))
    monkeypatch.setattr(ram, "MEMINFO_PATH", str(path))
    assert ram_perc(None) is None


def test_missing_file(tmp_path, monkeypatch):
    monkeypatch.setattr(ram, "MEMINFO_PATH", str(tmp_path / "missing"))
    assert ram_total(None) is None
    assert ram_perc(None) is None


def test_missing_field(tmp_path, monkeypatch):
    path = tmp_path / "meminfo"
    path.write_text("MemTotal: 1000 kB\n")
    monkeypatch.setattr(ram, "MEMINFO_PATH", str(path))
    assert ram_used(None) is None
    assert ram_free(None) is None