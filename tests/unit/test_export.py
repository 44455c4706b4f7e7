import csv
import json
import tracemalloc
from datetime import date
from pathlib import Path
from time import sleep

from impact_dashboard.utils import profiler
from scripts import generate_data

START = date(2025, 6, 2)
END = date(2025, 6, 9)
# Two post-cursor week anchors at 15 records each
EXPECTED_RECORDS = 30


def test_profile_block_measures_time():
    with profiler.profile_block("sleep") as stats:
        sleep(0.05)
    assert stats.duration_seconds >= 0.05
    assert stats.rss_bytes is not None and stats.rss_bytes > 0
    assert stats.peak_traced_bytes is not None
    assert stats.as_dict()["label"] == "sleep"


def test_profile_block_without_tracemalloc():
    with profiler.profile_block("quick", enable_tracemalloc=False) as stats:
        pass
    assert stats.peak_traced_bytes is None


def test_profile_block_reports_its_own_peak_when_already_tracing():
    big_block = 10_000_000
    tracemalloc.start()
    try:
        buffer = bytearray(big_block)
        del buffer
        with profiler.profile_block("inner") as stats:
            pass
        assert tracemalloc.is_tracing()
    finally:
        tracemalloc.stop()
    assert stats.peak_traced_bytes is not None
    assert stats.peak_traced_bytes < big_block


def test_generate_data_writes_csv(tmp_path: Path):
    csv_path = tmp_path / "records.csv"
    records = generate_data._generate_records(123, START, END)
    written = generate_data._write_records_csv(csv_path, records, batch_size=7)
    assert written == EXPECTED_RECORDS
    with csv_path.open("r", newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    # header + records
    assert len(rows) == EXPECTED_RECORDS + 1
    assert rows[0] == generate_data.CSV_COLUMNS
    first = dict(zip(rows[0], rows[1]))
    assert first["phase"] == "post-cursor"
    assert 1 <= int(first["impact_score"]) <= 5


def test_generate_data_writes_jsonl(tmp_path: Path):
    path = tmp_path / "records.jsonl"
    records = generate_data._generate_records(123, START, END)
    assert generate_data._write_records_jsonl(path, records) == EXPECTED_RECORDS
    lines = path.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[0])["id"] == records[0].id
