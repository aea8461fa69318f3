import json

from airsig.cli import main
from airsig.monitor import CSV_HEADER
from airsig.signatures import get_signatures


def write_readings(path, readings):
    path.write_text("\n".join(json.dumps(r) for r in readings) + "\n", encoding="utf-8")
    return str(path)


def reading(iaq, **extra):
    record = {"iaq": iaq, "voc": 0.4, "co2": 450.0,
              "temperature": 25.0, "humidity": 50.0, "pressure": 1000.0}
    record.update(extra)
    return record


def test_rows_for_each_reading(tmp_path, capsys):
    path = write_readings(tmp_path / "in.jsonl", [reading(40.0) for _ in range(5)])
    assert main([path]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == CSV_HEADER
    rows = [line for line in lines if line.startswith("Boot+")]
    assert len(rows) == 5
    assert all(row.split(",")[-5:] == ["NO", "NO", "Clean_Air", "", "0"] for row in rows)


def test_spike_and_history(tmp_path, capsys):
    readings = [reading(40.0) for _ in range(10)] + [reading(100.0), reading(40.0)]
    path = write_readings(tmp_path / "in.jsonl", readings)
    assert main([path, "--history"]) == 0
    out = capsys.readouterr().out
    assert "POLLUTION SPIKE DETECTED" in out
    assert "=== SPIKE HISTORY ===" in out
    history = out.split("=== SPIKE HISTORY ===")[1].strip().splitlines()
    assert history[0].startswith("1. ")
    rows = [line for line in out.splitlines() if line.startswith("Boot+")]
    assert rows[-1].split(",")[-1] == "1"


def test_explicit_ms_and_particulates(tmp_path, capsys):
    readings = [reading(40.0, ms=5000, pm1_0=5.0, pm2_5=10.0, pm10_0=12.0)]
    path = write_readings(tmp_path / "in.jsonl", readings)
    assert main([path]) == 0
    rows = [l for l in capsys.readouterr().out.splitlines() if l.startswith("Boot+")]
    assert rows[0].startswith("Boot+00:00:05,")
    assert rows[0].split(",")[7:10] == ["5.0", "10.0", "12.0"]


def test_invalid_json_fails(tmp_path, capsys):
    path = tmp_path / "bad.jsonl"
    path.write_text("not json\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "line 1" in capsys.readouterr().err


def test_non_object_reading_fails(tmp_path, capsys):
    path = write_readings(tmp_path / "in.jsonl", [[1, 2, 3]])
    assert main([path]) == 1
    assert "JSON object" in capsys.readouterr().err


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.jsonl")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_list_signatures(capsys):
    assert main(["--list-signatures"]) == 0
    out = capsys.readouterr().out
    for pattern in get_signatures():
        assert f". {pattern.name} - VOC:" in out
    assert len(out.splitlines()) == len(get_signatures()) + 1