# airsig

`airsig` turns a stream of indoor air-quality readings into a CSV log. It
keeps a rolling baseline of clean-air samples, reports when readings rise
above it, and names the likely source by matching each reading against a
table of pollution signatures.

It works with the values that an environmental gas sensor and a
particulate sensor report:

- IAQ index
- CO2 equivalent (ppm)
- breath-VOC equivalent (ppm)
- temperature, relative humidity and pressure
- PM1.0, PM2.5 and PM10 (µg/m³)

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package adds the `airsig` command:

```
airsig readings.jsonl
airsig --history readings.jsonl
airsig --list-signatures
```

The input is a file of JSON objects, one per line (`-` or no argument
reads standard input). Blank lines are skipped. Each object may hold:

- `iaq`, `co2`, `voc`, `temperature`, `humidity`, `pressure`,
  `compensated_temperature`, `compensated_humidity`: gas-sensor outputs
- `pm2_5`, and optionally `pm1_0` and `pm10_0`: a particulate reading
- `ms`: the time of the reading in milliseconds; without it, each reading
  comes 10,000 ms after the one before

The command prints the CSV header and then one line per reading once a
valid IAQ value has been seen. Each line holds the timestamp
(`Boot+HH:MM:SS`, counted from the first reading's clock), temperature,
humidity, pressure, IAQ, CO2, VOC, the three PM values (empty when there
is no particulate reading), whether the baseline is ready, whether a spike
is in progress, the matched signature, how long the spike has lasted so
far in seconds, and the number of completed spikes. Status messages, such
as spike start and end and the baseline being established, are printed
between the rows.

Options:

- `--list-signatures` prints the signature table and exits.
- `--history` prints the spike history after the last reading.

A line that is not a JSON object, or holds a value that is not a number,
stops the run with a message on standard error and exit status 1; so does
an input file that cannot be read.

## Library use

### Signatures

`airsig.signatures.get_signatures()` returns the signature table as a
tuple of `PollutionPattern` records, and
`airsig.signatures.signature_count()` gives their number. Each pattern
has a `name`, a `priority` (1 is the highest), IAQ, VOC, CO2 and
temperature ranges (`min_iaq`, `max_iaq` and so on), a `description`, and
an `is_threat` flag.

### Matching a reading

```python
from airsig.detector import PollutionDetector

detector = PollutionDetector()
result = detector.detect(iaq=20, voc=0.2, co2=450, temp=24, humidity=45, in_spike=False)
print(result.signature)  # Clean_Air
```

`detect` returns a `DetectionResult` with `signature`, `is_threat` and
`is_spike`. Outside a spike, a reading with IAQ below 50, VOC below
0.5 ppm and CO2 below 800 ppm is `Clean_Air` straight away. Otherwise a
pattern matches when at least three of its ranges fit the reading. Threat
patterns are considered only during a spike, and humidity between 20 % and
60 % counts as one more fitting range for them. The best (lowest)
priority wins; if several patterns share it, their names are joined with
`+`. A match at priority 1 or 2 marks the result as a threat. When nothing
matches, the reading is described by its own band, for example
`Moderate_Air_IAQ75_VOC0.80ppm` or `High_VOC_3.4ppm`.

`PollutionDetector(iaq_threshold=10.0, voc_threshold=0.05,
co2_threshold=50.0, pm25_threshold=25.0)` holds the spike thresholds.
`is_spike(current_value, baseline_value, threshold)` tells whether a value
is more than `threshold` above its baseline, and
`set_thresholds(iaq, voc, co2, pm25)` replaces all four thresholds.

### Monitoring

`airsig.monitor.AirMonitor(detector=None, clock=None, wall_clock=None,
emit=None)` holds the state of a monitoring run. `clock` returns
milliseconds (a monotonic clock by default), `wall_clock` returns a
`datetime` for timestamps (without it, timestamps are `Boot+HH:MM:SS`),
and `emit` receives status messages (`print` by default).

- `handle_outputs(outputs)` takes a mapping of `SensorOutput` members, or
  their string values, to numbers. Once a positive IAQ is present, missing
  values are filled with defaults (VOC 0.5 ppm, CO2 500 ppm, 25 °C, 50 %,
  1000 hPa) and the data counts as valid.
- `set_particulates(reading)` takes a `ParticulateReading(pm1_0, pm2_5,
  pm10_0)`.
- `process_reading()` updates the baseline, checks for a spike, matches a
  signature and returns the CSV line for the reading, or `None` when no
  valid data has been seen.
- `detect_spike(iaq, voc, co2)` compares a reading with the baseline
  averages using the detector's thresholds; a PM2.5 level above the PM2.5
  threshold also counts. It is always `False` before the baseline is
  ready.
- `spike_history()` describes the last ten completed spikes, newest
  first, as two text lines each. A spike is completed only if it lasted at
  least one second.
- `csv_header()` returns the header line of the CSV log.

`Baseline` is a ring of ten samples. `add(iaq, voc, co2)` ignores samples
with a missing value or a non-positive IAQ and returns `True` for the
sample that first fills the ring; `averages()` returns the mean IAQ, VOC
and CO2. The monitor adds samples only outside a spike.

`format_boot_timestamp(elapsed_ms)` formats time since start as
`Boot+HH:MM:SS` and rejects negative times. `bsec_status_messages(status,
sensor_status)` explains the error and warning codes of the gas sensor's
processing library as a list of lines.

## What it does not do

`airsig` does not talk to sensors. It does not read a gas sensor over
I2C or a particulate sensor over a serial line, drive status LEDs, join a
wireless network or synchronise the clock. Readings must be supplied to
`AirMonitor` or to the `airsig` command by whatever collects them.