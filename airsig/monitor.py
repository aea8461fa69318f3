"""Continuous air-quality monitoring: baseline tracking, spike detection and CSV output."""

from __future__ import annotations

import math
import time
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Mapping

from airsig.detector import PollutionDetector

READING_INTERVAL_MS = 10_000
BASELINE_SAMPLES = 10
MIN_SPIKE_DURATION_MS = 1000
SPIKE_HISTORY_SIZE = 10
INITIAL_READINGS_SHOWN = 3
BSEC_OK = 0

DEFAULT_VOC = 0.5
DEFAULT_CO2 = 500.0
DEFAULT_TEMP = 25.0
DEFAULT_HUMIDITY = 50.0
DEFAULT_PRESSURE = 1000.0

CSV_HEADER = (
    "timestamp,temp_c,humidity_%,pressure_hpa,iaq,co2_ppm,voc_ppm,pm1_0,pm2_5,pm10_0,"
    "baseline_ready,spike_detected,signature,spike_duration_sec,total_spikes"
)

_BSEC_ERRORS = {
    -1: "Configuration failed - incompatible sensor configuration",
    -2: "Device not found - check I2C connection",
    -3: "Invalid input parameters",
    -32: "Config version mismatch",
}


class SensorOutput(str, Enum):
    """Virtual sensor outputs delivered by the gas sensor's processing library."""

    IAQ = "iaq"
    CO2_EQUIVALENT = "co2"
    BREATH_VOC_EQUIVALENT = "voc"
    RAW_TEMPERATURE = "temperature"
    RAW_HUMIDITY = "humidity"
    RAW_PRESSURE = "pressure"
    HEAT_COMPENSATED_TEMPERATURE = "compensated_temperature"
    HEAT_COMPENSATED_HUMIDITY = "compensated_humidity"


@dataclass(frozen=True)
class ParticulateReading:
    """Particulate matter concentrations in µg/m³."""

    pm1_0: float
    pm2_5: float
    pm10_0: float


@dataclass
class SpikeEvent:
    """A pollution spike with its peak values; times are in milliseconds."""

    start_time: int
    signature: str
    max_iaq: float
    max_voc: float
    max_co2: float
    max_pm25: float = math.nan
    end_time: int = 0

    @property
    def duration_ms(self) -> int:
        return self.end_time - self.start_time


def format_boot_timestamp(elapsed_ms: int) -> str:
    """Format time since boot as 'Boot+HH:MM:SS'."""
    if elapsed_ms < 0:
        raise ValueError("elapsed time cannot be negative")
    seconds = elapsed_ms // 1000
    minutes = seconds // 60
    hours = minutes // 60
    return f"Boot+{hours:02d}:{minutes % 60:02d}:{seconds % 60:02d}"


def bsec_status_messages(status: int, sensor_status: int) -> list[str]:
    """Describe a gas-sensor library status and a sensor status as human-readable lines."""
    messages: list[str] = []
    if status < BSEC_OK:
        messages.append(f"❌ BSEC error code: {status}")
        messages.append(_BSEC_ERRORS.get(
            status, "Unknown BSEC error - check sensor connection and library version"))
    elif status > BSEC_OK:
        messages.append(f"⚠️ BSEC warning code: {status}")
    if sensor_status != 0:
        messages.append(f"BME68X sensor status: {sensor_status}")
        if sensor_status < 0:
            messages.append("❌ BME68X error - check wiring and power supply")
    return messages


def _is_nan(value: float) -> bool:
    return math.isnan(value)


def _nan_max(current: float, new: float) -> float:
    if _is_nan(current):
        return new
    return max(current, new)


class Baseline:
    """Ring buffer of clean-air samples used as the spike reference."""

    def __init__(self, size: int = BASELINE_SAMPLES) -> None:
        if size < 1:
            raise ValueError("baseline size must be at least 1")
        self._samples: list[tuple[float, float, float]] = [(0.0, 0.0, 0.0)] * size
        self.index = 0
        self.ready = False

    def add(self, iaq: float, voc: float, co2: float) -> bool:
        """Store a sample; return True when this sample completes the baseline."""
        if _is_nan(iaq) or _is_nan(voc) or _is_nan(co2) or iaq <= 0:
            return False
        self._samples[self.index] = (iaq, voc, co2)
        self.index = (self.index + 1) % len(self._samples)
        if not self.ready and self.index == 0:
            self.ready = True
            return True
        return False

    def averages(self) -> tuple[float, float, float]:
        """Return the mean IAQ, VOC and CO2 over all slots."""
        count = len(self._samples)
        iaq, voc, co2 = (sum(column) / count for column in zip(*self._samples))
        return iaq, voc, co2


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class AirMonitor:
    """Tracks sensor readings, detects spikes and produces CSV rows."""

    def __init__(
        self,
        detector: PollutionDetector | None = None,
        clock: Callable[[], int] | None = None,
        wall_clock: Callable[[], datetime] | None = None,
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.detector = detector if detector is not None else PollutionDetector()
        self._clock = clock if clock is not None else _monotonic_ms
        self._wall_clock = wall_clock
        self._emit = emit if emit is not None else print
        self._boot_time = self._clock()

        self.baseline = Baseline()
        self.in_spike = False
        self.total_spikes = 0
        self.current_spike: SpikeEvent | None = None
        self._history: deque[SpikeEvent] = deque(maxlen=SPIKE_HISTORY_SIZE)

        self.latest_temp = math.nan
        self.latest_humidity = math.nan
        self.latest_pressure = math.nan
        self.latest_iaq = math.nan
        self.latest_co2 = math.nan
        self.latest_voc = math.nan
        self.particulates: ParticulateReading | None = None
        self.has_valid_data = False

    def _timestamp(self) -> str:
        if self._wall_clock is not None:
            return self._wall_clock().strftime("%Y-%m-%d %H:%M:%S")
        return format_boot_timestamp(self._clock() - self._boot_time)

    def _pm25(self) -> float:
        return self.particulates.pm2_5 if self.particulates is not None else math.nan

    def handle_outputs(self, outputs: Mapping[SensorOutput | str, float]) -> None:
        """Take a batch of sensor outputs and update the latest readings."""
        if not outputs:
            return
        for key, signal in outputs.items():
            sensor = SensorOutput(key)
            if sensor is SensorOutput.RAW_TEMPERATURE:
                self.latest_temp = signal
            elif sensor is SensorOutput.RAW_PRESSURE:
                self.latest_pressure = signal
            elif sensor is SensorOutput.RAW_HUMIDITY:
                self.latest_humidity = signal
            elif sensor is SensorOutput.IAQ:
                self.latest_iaq = signal
            elif sensor is SensorOutput.CO2_EQUIVALENT:
                self.latest_co2 = signal
            elif sensor is SensorOutput.BREATH_VOC_EQUIVALENT:
                self.latest_voc = signal

        if _is_nan(self.latest_iaq) or self.latest_iaq <= 0:
            return
        if _is_nan(self.latest_voc):
            self.latest_voc = DEFAULT_VOC
        if _is_nan(self.latest_co2):
            self.latest_co2 = DEFAULT_CO2
        if _is_nan(self.latest_temp):
            self.latest_temp = DEFAULT_TEMP
        if _is_nan(self.latest_humidity):
            self.latest_humidity = DEFAULT_HUMIDITY
        if _is_nan(self.latest_pressure):
            self.latest_pressure = DEFAULT_PRESSURE
        self.has_valid_data = True

        if not self.baseline.ready and self.baseline.index < INITIAL_READINGS_SHOWN:
            self._emit(
                f"Initial reading {self.baseline.index + 1}: {self._timestamp()} - "
                f"IAQ: {self.latest_iaq:.1f}, VOC: {self.latest_voc:.3f} ppm, "
                f"CO2: {self.latest_co2:.0f} ppm"
            )

    def set_particulates(self, reading: ParticulateReading) -> None:
        """Record the latest particulate sensor reading."""
        self.particulates = reading

    def detect_spike(self, iaq: float, voc: float, co2: float) -> bool:
        """Return True when any reading rises above the baseline by its threshold."""
        if not self.baseline.ready:
            return False
        avg_iaq, avg_voc, avg_co2 = self.baseline.averages()
        d = self.detector
        pm25 = self._pm25()
        pm25_spike = not _is_nan(pm25) and pm25 > d.pm25_threshold
        return (
            d.is_spike(iaq, avg_iaq, d.iaq_threshold)
            or d.is_spike(voc, avg_voc, d.voc_threshold)
            or d.is_spike(co2, avg_co2, d.co2_threshold)
            or pm25_spike
        )

    def _update_baseline(self, iaq: float, voc: float, co2: float) -> None:
        if self.in_spike or not self.baseline.add(iaq, voc, co2):
            return
        avg_iaq, avg_voc, avg_co2 = self.baseline.averages()
        self._emit("✅ Baseline established! Now monitoring for pollution spikes...")
        self._emit(
            f"📊 Baseline - IAQ: {avg_iaq:.1f}, VOC: {avg_voc:.3f} ppm, CO2: {avg_co2:.0f} ppm"
        )

    @staticmethod
    def _peak_line(prefix: str, spike: SpikeEvent, unit_gap: str) -> str:
        line = (
            f"{prefix}IAQ: {spike.max_iaq:.1f}, VOC: {spike.max_voc:.3f}{unit_gap}ppm, "
            f"CO2: {spike.max_co2:.0f}{unit_gap}ppm"
        )
        if not _is_nan(spike.max_pm25):
            line += f", PM2.5: {spike.max_pm25:.1f}{unit_gap}µg/m³"
        return line

    def process_reading(self) -> str | None:
        """Evaluate the latest reading; return its CSV row, or None without valid data."""
        if not self.has_valid_data:
            return None

        iaq, voc, co2 = self.latest_iaq, self.latest_voc, self.latest_co2
        self._update_baseline(iaq, voc, co2)
        spike_now = self.detect_spike(iaq, voc, co2)
        signature = self.detector.detect(
            iaq, voc, co2, self.latest_temp, self.latest_humidity, self.in_spike
        ).signature
        now = self._clock()
        pm25 = self._pm25()

        if spike_now and not self.in_spike:
            self.in_spike = True
            self.current_spike = SpikeEvent(now, signature, iaq, voc, co2, pm25)
            self._emit(f"🚨 POLLUTION SPIKE DETECTED! Signature: {signature}")
            self._emit(f"   VOC: {voc:.3f} ppm, CO2: {co2:.0f} ppm, IAQ: {iaq:.1f}")
            if not _is_nan(pm25):
                self._emit(f"   PM2.5: {pm25:.1f} µg/m³")
        elif not spike_now and self.in_spike:
            spike = self.current_spike
            duration = now - spike.start_time
            if duration >= MIN_SPIKE_DURATION_MS:
                self.total_spikes += 1
                spike.end_time = now
                self._history.append(spike)
                self._emit(f"✅ Spike ended after {duration} ms (Total: {self.total_spikes})")
                self._emit(f"   Duration: {duration / 1000.0:.1f} seconds")
                self._emit(self._peak_line("   Peak Values - ", spike, " "))
            self.in_spike = False
            self.current_spike = None
        elif self.in_spike:
            spike = self.current_spike
            spike.max_iaq = max(spike.max_iaq, iaq)
            spike.max_voc = max(spike.max_voc, voc)
            spike.max_co2 = max(spike.max_co2, co2)
            if not _is_nan(pm25):
                spike.max_pm25 = _nan_max(spike.max_pm25, pm25)

        row = (
            f"{self._timestamp()},{self.latest_temp:.2f},{self.latest_humidity:.2f},"
            f"{self.latest_pressure:.2f},{iaq:.2f},{co2:.0f},{voc:.3f},"
        )
        pm = self.particulates
        if pm is not None and not _is_nan(pm.pm1_0):
            row += f"{pm.pm1_0:.1f},{pm.pm2_5:.1f},{pm.pm10_0:.1f},"
        else:
            row += ",,,"

        ready = "YES" if self.baseline.ready else "NO"
        if self.in_spike:
            duration = (self._clock() - self.current_spike.start_time) / 1000.0
            row += f"{ready},YES,{signature},{duration:.1f},{self.total_spikes}"
        else:
            row += f"{ready},NO,{signature},,{self.total_spikes}"
        return row

    def spike_history(self) -> list[str]:
        """Describe the completed spikes, most recent first, two lines each."""
        lines: list[str] = []
        for number, spike in enumerate(reversed(self._history), 1):
            lines.append(
                f"{number}. {spike.signature} - Duration: {spike.duration_ms / 1000.0:.1f}s"
            )
            lines.append(self._peak_line("   Peak - ", spike, ""))
        return lines

    def csv_header(self) -> str:
        """Return the header line of the CSV output."""
        return CSV_HEADER