"""CSV import/export helpers for point sets and hull segments.

Points are stored as an ``x,y`` table and segments as ``x1,y1,x2,y2``.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import List, Sequence

from models import LineSegment, Point

POINT_FIELDS = ["x", "y"]
SEGMENT_FIELDS = ["x1", "y1", "x2", "y2"]


class CsvFormatError(ValueError):
    """Raised when the CSV contents are invalid."""


def _read_csv_rows(path: str) -> List[dict]:
    try:
        with open(path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            rows = list(reader)
            fieldnames = [name.strip().lower() for name in (reader.fieldnames or [])]
    except FileNotFoundError:
        raise
    except OSError as exc:  # pragma: no cover - surfaced to caller
        raise OSError(f"Failed to read CSV '{path}': {exc}") from exc
    missing = [name for name in POINT_FIELDS if name not in fieldnames]
    if rows and missing:
        raise CsvFormatError(f"Missing column(s) {missing} in '{path}'.")
    return rows


def _get(row: dict, field: str) -> str:
    for key, value in row.items():
        if key is not None and key.strip().lower() == field:
            return (value or "").strip()
    return ""


def _parse_int(row: dict, field: str, *, row_number: int) -> int:
    raw = _get(row, field)
    if raw == "":
        raise CsvFormatError(f"Missing value for '{field}' in row {row_number}.")
    try:
        value = float(raw)
    except ValueError as exc:
        raise CsvFormatError(
            f"Invalid integer for '{field}' in row {row_number}: {raw!r}"
        ) from exc
    if not value.is_integer():
        raise CsvFormatError(
            f"Non-integer coordinate for '{field}' in row {row_number}: {raw!r}"
        )
    return int(value)


def load_points_csv(path: str) -> List[Point]:
    """Load points from an ``x,y`` CSV file. Blank rows are skipped."""

    points: List[Point] = []
    for index, row in enumerate(_read_csv_rows(path), start=2):
        if not any((value or "").strip() for value in row.values() if isinstance(value, str)):
            continue
        points.append(
            Point(
                _parse_int(row, "x", row_number=index),
                _parse_int(row, "y", row_number=index),
            )
        )
    return points


def write_points_csv(path: str, points: Sequence[Point]) -> None:
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with open(path_obj, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=POINT_FIELDS)
        writer.writeheader()
        for pt in points:
            writer.writerow({"x": pt.x, "y": pt.y})


def write_segments_csv(path: str, segments: Sequence[LineSegment]) -> None:
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with open(path_obj, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=SEGMENT_FIELDS)
        writer.writeheader()
        for seg in segments:
            writer.writerow(
                {"x1": seg.start.x, "y1": seg.start.y, "x2": seg.end.x, "y2": seg.end.y}
            )


__all__ = [
    "CsvFormatError",
    "load_points_csv",
    "write_points_csv",
    "write_segments_csv",
]
