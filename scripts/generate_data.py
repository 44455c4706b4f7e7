"""
Dataset export script for the Impact Dashboard.

Generates a seeded synthetic pull request dataset and writes it as CSV (or
JSON lines) for use outside the dashboard, e.g. in notebooks or spreadsheets.
"""

from __future__ import annotations

import csv
import json
import sys
import tempfile
import time
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional

import typer

from impact_dashboard.domain.models import Record
from impact_dashboard.generation.builder import DEFAULT_END, DEFAULT_START, build_dataset
from impact_dashboard.generation.random_source import make_random_source

app = typer.Typer(help="Generate a synthetic pull request dataset and export it.")

CSV_COLUMNS: List[str] = [
    "id",
    "date",
    "created_at",
    "developer",
    "team",
    "project",
    "impact_score",
    "ai_usage",
    "quarter",
    "phase",
    "lines_changed",
    "files_modified",
    "title",
    "description",
    "explanation",
]


def _record_row(record: Record) -> List[str]:
    data = record.model_dump(mode="json")
    return [str(data[column]) for column in CSV_COLUMNS]


def _write_records_csv(csv_path: Path, records: Iterable[Record], batch_size: int) -> int:
    written = 0
    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)

        buffer: List[List[str]] = []
        for record in records:
            buffer.append(_record_row(record))
            written += 1
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)
    return written


def _write_records_jsonl(path: Path, records: Iterable[Record]) -> int:
    written = 0
    with path.open("w", encoding="utf-8") as f:
        for record in records:
            f.write(json.dumps(record.model_dump(mode="json")) + "\n")
            written += 1
    return written


def _generate_records(seed: int, start: date = DEFAULT_START, end: date = DEFAULT_END) -> List[Record]:
    return build_dataset(start, end, rng=make_random_source(seed))


@app.command()
def main(
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    start: str = typer.Option(
        DEFAULT_START.isoformat(),
        "--start",
        help="First week anchor (YYYY-MM-DD).",
    ),
    end: str = typer.Option(
        DEFAULT_END.isoformat(),
        "--end",
        help="Last possible week anchor (YYYY-MM-DD).",
    ),
    batch_size: int = typer.Option(
        500,
        "--batch-size",
        "-b",
        help="Batch size for CSV buffering.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (if omitted, a temp file will be used).",
    ),
    jsonl: bool = typer.Option(
        False,
        "--jsonl",
        help="Write JSON lines instead of CSV.",
    ),
) -> None:
    """
    Generate a dataset and write it to disk.
    """
    try:
        window = (date.fromisoformat(start), date.fromisoformat(end))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None

    began = time.perf_counter()
    if output:
        out_path = output
        out_path.parent.mkdir(parents=True, exist_ok=True)
    else:
        tmpdir = Path(tempfile.mkdtemp(prefix="impact_dataset_"))
        out_path = tmpdir / ("records.jsonl" if jsonl else "records.csv")

    typer.echo(f"Generating dataset {window[0]}..{window[1]} -> {out_path} (seed={seed})")
    records = _generate_records(seed, *window)
    if jsonl:
        written = _write_records_jsonl(out_path, records)
    else:
        written = _write_records_csv(out_path, records, batch_size=batch_size)
    duration = time.perf_counter() - began
    typer.echo(f"Wrote {written:,} records in {duration:.2f}s")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
