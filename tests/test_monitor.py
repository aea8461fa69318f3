import math
from datetime import datetime

import pytest

from airsig.monitor import (
    CSV_HEADER,
    AirMonitor,
    Baseline,
    ParticulateReading,
    SensorOutput,
    bsec_status_messages,
    format_boot_timestamp,
)


class FakeClock:
    def __init__(self):
        self.ms = 0

    def __call__(self):
        return self.ms


def make_monitor(**kwargs):
    clock = FakeClock()
    messages = []
    monitor = AirMonitor(clock=clock, emit=messages.append, **kwargs)
    return monitor, clock, messages


def feed(monitor, clock, iaq, voc=0.4, co2=450.0, step=10_000):
    clock.ms += step
    monitor.handle_outputs({
        SensorOutput.IAQ: iaq,
        SensorOutput.BREATH_VOC_EQUIVALENT: voc,
        SensorOutput.CO2_EQUIVALENT: co2,
        SensorOutput.RAW_TEMPERATURE: 25.0,
        SensorOutput.RAW_HUMIDITY: 50.0,
        SensorOutput.RAW_PRESSURE: 1000.0,
    })
    return monitor.process_reading()


def build_baseline(monitor, clock):
    return [feed(monitor, clock, 40.0) for _ in range(10)]


def test_format_boot_timestamp_values():
    assert format_boot_timestamp(0) == "Boot+00:00:00"
    assert format_boot_timestamp(3_723_000) == "Boot+01:02:03"


def test_format_boot_timestamp_rejects_negative():
    with pytest.raises(ValueError):
        format_boot_timestamp(-1)


def test_bsec_status_ok_is_silent():
    assert bsec_status_messages(0, 0) == []


def test_bsec_status_known_error():
    messages = bsec_status_messages(-2, 0)
    assert messages[1] == "Device not found - check I2C connection"


def test_bsec_status_unknown_error_and_sensor_error():
    messages = bsec_status_messages(-99, -1)
    assert "Unknown BSEC error - check sensor connection and library version" in messages
    assert messages[-1] == "❌ BME68X error - check wiring and power supply"


def test_bsec_status_warning():
    messages = bsec_status_messages(5, 0)
    assert len(messages) == 1
    assert "5" in messages[0]


def test_baseline_becomes_ready_on_last_sample():
    baseline = Baseline()
    results = [baseline.add(40.0 + i, 0.4, 450.0) for i in range(10)]
    assert results[:-1] == [False] * 9
    assert results[-1] is True
    assert baseline.ready
    assert baseline.add(40.0, 0.4, 450.0) is False


def test_baseline_averages_match_mean():
    baseline = Baseline(size=4)
    samples = [(10.0, 0.1, 400.0), (20.0, 0.2, 500.0), (30.0, 0.3, 600.0), (40.0, 0.4, 700.0)]
    for sample in samples:
        baseline.add(*sample)
    iaq, voc, co2 = baseline.averages()
    assert iaq == pytest.approx(sum(s[0] for s in samples) / 4)
    assert voc == pytest.approx(sum(s[1] for s in samples) / 4)
    assert co2 == pytest.approx(sum(s[2] for s in samples) / 4)


@pytest.mark.parametrize("sample", [(0.0, 0.4, 450.0), (math.nan, 0.4, 450.0), (40.0, math.nan, 450.0)])
def test_baseline_ignores_invalid_samples(sample):
    baseline = Baseline()
    assert baseline.add(*sample) is False
    assert baseline.index == 0


def test_baseline_size_must_be_positive():
    with pytest.raises(ValueError):
        Baseline(size=0)


def test_no_data_gives_no_row():
    monitor, _, _ = make_monitor()
    monitor.handle_outputs({})
    assert monitor.process_reading() is None


def test_defaults_fill_missing_values():
    monitor, _, messages = make_monitor()
    monitor.handle_outputs({SensorOutput.IAQ: 30.0})
    assert monitor.has_valid_data
    assert monitor.latest_voc == 0.5
    assert monitor.latest_co2 == 500
    assert monitor.latest_temp == 25
    assert messages[0].startswith("Initial reading 1:")


def test_string_keys_accepted_and_unknown_rejected():
    monitor, _, _ = make_monitor()
    monitor.handle_outputs({"iaq": 30.0, "voc": 0.2})
    assert monitor.latest_voc == 0.2
    with pytest.raises(ValueError):
        monitor.handle_outputs({"bogus": 1.0})


def test_baseline_rows():
    monitor, clock, messages = make_monitor()
    rows = build_baseline(monitor, clock)
    assert rows[0].split(",")[-5:] == ["NO", "NO", "Clean_Air", "", "0"]
    assert rows[-1].split(",")[-5:] == ["YES", "NO", "Clean_Air", "", "0"]
    assert any(m.startswith("✅ Baseline established!") for m in messages)
    assert all(",,,," in row for row in rows)


def test_spike_lifecycle_and_history():
    monitor, clock, messages = make_monitor()
    build_baseline(monitor, clock)

    row = feed(monitor, clock, 100.0)
    assert monitor.in_spike
    assert row.split(",")[11] == "YES"
    assert any("POLLUTION SPIKE DETECTED" in m for m in messages)

    row = feed(monitor, clock, 40.0, step=2000)
    assert not monitor.in_spike
    assert monitor.total_spikes == 1
    assert row.split(",")[-1] == "1"
    assert row.split(",")[11] == "NO"

    history = monitor.spike_history()
    assert len(history) == 2
    assert history[0].startswith("1. ")
    assert "Duration: 2.0s" in history[0]
    assert history[1].startswith("   Peak - IAQ:")


def test_short_spike_not_counted():
    monitor, clock, _ = make_monitor()
    build_baseline(monitor, clock)
    feed(monitor, clock, 100.0)
    feed(monitor, clock, 40.0, step=500)
    assert not monitor.in_spike
    assert monitor.total_spikes == 0
    assert monitor.spike_history() == []


def test_spike_peak_tracks_maximum():
    monitor, clock, _ = make_monitor()
    build_baseline(monitor, clock)
    feed(monitor, clock, 100.0)
    feed(monitor, clock, 150.0)
    feed(monitor, clock, 120.0)
    assert monitor.current_spike.max_iaq == 150.0


def test_particulate_spike_and_columns():
    monitor, clock, _ = make_monitor()
    assert monitor.detect_spike(40.0, 0.4, 450.0) is False
    build_baseline(monitor, clock)
    assert monitor.detect_spike(40.0, 0.4, 450.0) is False
    monitor.set_particulates(ParticulateReading(5.0, 30.0, 40.0))
    assert monitor.detect_spike(40.0, 0.4, 450.0) is True
    row = feed(monitor, clock, 40.0)
    assert row.split(",")[7:10] == ["5.0", "30.0", "40.0"]


def test_wall_clock_timestamp():
    monitor, clock, _ = make_monitor(wall_clock=lambda: datetime(2024, 1, 2, 3, 4, 5))
    row = feed(monitor, clock, 40.0)
    assert row.startswith("2024-01-02 03:04:05,")


def test_csv_header():
    monitor, _, _ = make_monitor()
    assert monitor.csv_header() == CSV_HEADER
    assert monitor.csv_header().startswith("timestamp,temp_c,humidity_%")