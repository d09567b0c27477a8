import pytest

from barwm.status import battery


@pytest.fixture
def supply(tmp_path, monkeypatch):
    monkeypatch.setattr(battery, "POWER_SUPPLY", str(tmp_path))
    bat = tmp_path / "BAT0"
    bat.mkdir()
    return bat


def test_perc_reads_capacity(supply):
    (supply / "capacity").write_text("87\n")
    assert battery.battery_perc("BAT0") == "87"


def test_perc_missing_battery(supply):
    assert battery.battery_perc("BAT9") is None


@pytest.mark.parametrize(
    "status, symbol",
    [
        ("Charging\n", "+"),
        ("Discharging\n", "-"),
        ("Full\n", "o"),
        ("Not charging\n", "o"),
        ("Unknown\n", "?"),
    ],
)
def test_state_symbols(supply, status, symbol):
    (supply / "status").write_text(status)
    assert battery.battery_state("BAT0") == symbol


def test_state_unreadable(supply):
    assert battery.battery_state("BAT0") is None


def test_remaining_empty_when_charging(supply):
    (supply / "status").write_text("Charging\n")
    (supply / "charge_now").write_text("3000000\n")
    assert battery.battery_remaining("BAT0") == ""


def test_remaining_discharging_with_charge(supply):
    (supply / "status").write_text("Discharging\n")
    (supply / "charge_now").write_text("3000000\n")
    (supply / "current_now").write_text("1500000\n")
    assert battery.battery_remaining("BAT0") == "2h 0m"


def test_remaining_falls_back_to_energy_and_power(supply):
    (supply / "status").write_text("Discharging\n")
    (supply / "energy_now").write_text("1500000\n")
    (supply / "power_now").write_text("1000000\n")
    assert battery.battery_remaining("BAT0") == "1h 30m"


def test_remaining_zero_current(supply):
    (supply / "status").write_text("Discharging\n")
    (supply / "charge_now").write_text("3000000\n")
    (supply / "current_now").write_text("0\n")
    assert battery.battery_remaining("BAT0") is None


def test_remaining_without_charge_file(supply):
    (supply / "status").write_text("Discharging\n")
    assert battery.battery_remaining("BAT0") is None