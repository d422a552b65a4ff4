#!/usr/bin/env python3
"""
Weather Analyzer: integration test.

Runs the full pipeline on CSV files written to a temporary directory:
  load file → build record store → print table → print statistics.

Also checks the fatal paths (missing file, malformed line) end in a non-zero
exit status with nothing printed to stdout.
"""
import contextlib
import io
import sys
import tempfile
import traceback
from pathlib import Path

import config
import main as entry
from services.aggregator import summarize
from services.reporter import print_weather_report
from utils.weather_csv import RecordFormatError, load_records

HEADER = "Date,Temperature (C),Humidity (%),Precipitation (mm)"

FIXTURE_ROWS = [
    "2024-08-01,20,50,0",
    "2024-08-02,25,60,5",
]


def _write_csv(directory: Path, rows, name="weather.csv") -> Path:
    path = directory / name
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


def _run_main(args):
    out = io.StringIO()
    with contextlib.redirect_stdout(out):
        status = entry.main(args)
    return status, out.getvalue()


def test_end_to_end_statistics():
    with tempfile.TemporaryDirectory() as tmp:
        store = load_records(_write_csv(Path(tmp), FIXTURE_ROWS))
    summary = summarize(store, month=8, threshold_f=70)
    assert summary.average_temperature_f == 72.5, f"Got {summary.average_temperature_f}"
    assert summary.rainy_days == 1
    assert summary.days_above_threshold == 1
    assert store.source is not None and store.source.endswith("weather.csv")


def test_end_to_end_report_output():
    with tempfile.TemporaryDirectory() as tmp:
        store = load_records(_write_csv(Path(tmp), FIXTURE_ROWS))
    out = io.StringIO()
    print_weather_report(store, out=out)
    lines = out.getvalue().splitlines()
    assert lines[-3:] == [
        "Average Temperature for August: 72.50°F",
        "Total Rainy Days: 1",
        "Days Above 86°F: 0",
    ], f"Got {lines[-3:]}"
    assert lines[-4] == "", "blank line between table and statistics"
    assert any("2024-08-01" in line and "68.0°F" in line for line in lines)
    assert any("2024-08-02" in line and "77.0°F" in line for line in lines)


def test_main_success():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_csv(Path(tmp), FIXTURE_ROWS + ["8/3/24,31,40,0", "someday,35,40,2"])
        status, output = _run_main([str(path)])
    assert status == 0, f"Expected exit 0, got {status}"
    assert "someday" in output, "records with unknown dates stay in the table"
    assert "Average Temperature for August: 77.60°F" in output, output
    assert "Total Rainy Days: 2" in output
    assert "Days Above 86°F: 2" in output


def test_main_missing_file():
    with tempfile.TemporaryDirectory() as tmp:
        status, output = _run_main([str(Path(tmp) / "missing.csv")])
    assert status == 1
    assert output == "", "no partial report on failure"


def test_main_malformed_line():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_csv(Path(tmp), FIXTURE_ROWS + ["2024-08-03,hot,40,0"])
        status, output = _run_main([str(path)])
    assert status == 1
    assert output == ""


def test_load_records_wrong_arity_raises():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_csv(Path(tmp), ["2024-08-01,20,50"])
        try:
            load_records(path)
        except RecordFormatError as exc:
            assert exc.line_number == 2
            return
    raise AssertionError("Expected RecordFormatError")


def _write_bytes(directory: Path, data: bytes) -> Path:
    path = directory / "weather.csv"
    path.write_bytes(HEADER.encode("utf-8") + b"\n" + data)
    return path


def test_load_records_invalid_utf8_raises_format_error():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_bytes(Path(tmp), b"2024-08-01,2\xff,50,0\n")
        try:
            load_records(path)
        except RecordFormatError as exc:
            assert isinstance(exc.__cause__, UnicodeDecodeError)
            return
    raise AssertionError("Expected RecordFormatError")


def test_main_invalid_utf8():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write_bytes(Path(tmp), b"2024-08-01,20,50,0\n2024-08-02,2\xff,60,5\n")
        status, output = _run_main([str(path)])
    assert status == 1, f"Expected exit 1, got {status}"
    assert output == "", "no partial report on failure"


def test_load_records_missing_file_raises_oserror():
    with tempfile.TemporaryDirectory() as tmp:
        try:
            load_records(Path(tmp) / "nope.csv")
        except OSError:
            return
    raise AssertionError("Expected OSError")


def test_bundled_sample_data():
    """The sample file shipped in data/ loads and reports cleanly."""
    path = config.PROJECT_ROOT / "data" / "weatherdata.csv"
    store = load_records(path)
    assert len(store) == 11
    assert store.unparsed_dates() == ["Aug 10 2024"]
    summary = summarize(store)
    assert abs(summary.average_temperature_f - 83.975) < 1e-9, summary
    assert summary.rainy_days == 5
    assert summary.days_above_threshold == 3


# ═══════════════════════════════════════════════════════════════════════════════
# Script runner
# ═══════════════════════════════════════════════════════════════════════════════

passed = 0
failed = 0


def run_test(name, fn):
    global passed, failed
    try:
        fn()
        print(f"  PASS: {name}")
        passed += 1
    except Exception:
        print(f"  FAIL: {name}")
        traceback.print_exc()
        failed += 1


if __name__ == "__main__":
    for _name, _fn in list(globals().items()):
        if _name.startswith("test_") and callable(_fn):
            run_test(_name[5:].replace("_", " "), _fn)

    print(f"\n{'='*60}")
    print(f"  RESULTS: {passed} passed, {failed} failed out of {passed + failed} tests")
    print(f"{'='*60}")
    sys.exit(1 if failed else 0)
