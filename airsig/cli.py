"""Command line front end: classify sensor readings from a JSON-lines stream."""

from __future__ import annotations

import argparse
import contextlib
import json
import math
import sys
from typing import Iterator, TextIO

from airsig.monitor import (
    READING_INTERVAL_MS,
    AirMonitor,
    ParticulateReading,
    SensorOutput,
)
from airsig.signatures import get_signatures

_SENSOR_KEYS = frozenset(member.value for member in SensorOutput)


class _SimulatedClock:
    def __init__(self) -> None:
        self.ms = 0

    def __call__(self) -> int:
        return self.ms


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airsig",
        description="Detect pollution spikes and signatures in air-quality readings "
                    "given as JSON lines.",
    )
    parser.add_argument("input", nargs="?", default="-",
                        help="file of JSON readings, one per line ('-' for stdin)")
    parser.add_argument("--list-signatures", action="store_true",
                        help="print the known pollution signatures and exit")
    parser.add_argument("--history", action="store_true",
                        help="print the spike history after the last reading")
    return parser


def _print_signatures() -> None:
    print("🔍 Available Pollution Signatures (VOC in ppm):")
    for number, pattern in enumerate(get_signatures(), 1):
        print(f"  {number}. {pattern.name} - VOC: {pattern.min_voc:.1f}-"
              f"{pattern.max_voc:.1f} ppm - {pattern.description}")


@contextlib.contextmanager
def _open_input(path: str) -> Iterator[TextIO]:
    if path == "-":
        yield sys.stdin
    else:
        with open(path, encoding="utf-8") as handle:
            yield handle


def _apply_record(monitor: AirMonitor, clock: _SimulatedClock, record: object) -> str | None:
    if not isinstance(record, dict):
        raise ValueError("reading must be a JSON object")
    clock.ms = int(record["ms"]) if "ms" in record else clock.ms + READING_INTERVAL_MS
    outputs = {SensorOutput(key): float(value)
               for key, value in record.items() if key in _SENSOR_KEYS}
    monitor.handle_outputs(outputs)
    if "pm2_5" in record:
        monitor.set_particulates(ParticulateReading(
            float(record.get("pm1_0", math.nan)),
            float(record["pm2_5"]),
            float(record.get("pm10_0", math.nan)),
        ))
    return monitor.process_reading()


def main(argv: list[str] | None = None) -> int:
    """Run the monitor over a stream of readings and print CSV rows."""
    args = _build_parser().parse_args(argv)

    if args.list_signatures:
        _print_signatures()
        return 0

    clock = _SimulatedClock()
    monitor = AirMonitor(clock=clock, emit=print)
    print(monitor.csv_header())

    try:
        with _open_input(args.input) as stream:
            for line_number, line in enumerate(stream, 1):
                if not line.strip():
                    continue
                try:
                    row = _apply_record(monitor, clock, json.loads(line))
                except (ValueError, TypeError, KeyError) as exc:
                    print(f"line {line_number}: {exc}", file=sys.stderr)
                    return 1
                if row is not None:
                    print(row)
    except OSError as exc:
        print(f"cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    if args.history:
        print()
        print("=== SPIKE HISTORY ===")
        for entry in monitor.spike_history():
            print(entry)
    return 0


if __name__ == "__main__":
    sys.exit(main())