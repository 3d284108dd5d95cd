"""Loading junction points from ``x,y,z`` text."""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Tuple

import pandas as pd

from .structures import Point

_COORDINATE_PATTERN = re.compile(r"[0-9]+")
_AXES = ("x", "y", "z")


class PointFormatError(ValueError):
    """Raised for input rows that are not three non-negative integers."""


def parse_points(text: str) -> Tuple[Point, ...]:
    """Parse one ``x,y,z`` point per line. Blank lines are skipped."""

    if not text.strip():
        return ()
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            skip_blank_lines=True,
            skipinitialspace=True,
        )
    except pd.errors.ParserError as exc:
        raise PointFormatError(f"inconsistent number of fields: {exc}") from exc
    return _frame_to_points(frame)


def load_points(path: str | Path) -> Tuple[Point, ...]:
    """Read points from ``path``. Raises ``FileNotFoundError`` if it is missing."""

    path = Path(path)
    return parse_points(path.read_text(encoding="utf-8-sig"))


def _frame_to_points(frame: pd.DataFrame) -> Tuple[Point, ...]:
    if frame.shape[1] != len(_AXES):
        raise PointFormatError(f"expected {len(_AXES)} fields per row, found {frame.shape[1]}")

    points = []
    for row_number, row in enumerate(frame.itertuples(index=False, name=None), start=1):
        values = []
        for axis, raw in zip(_AXES, row):
            if pd.isna(raw):
                raise PointFormatError(f"row {row_number}: missing {axis} coordinate")
            field = str(raw).strip()
            if not _COORDINATE_PATTERN.fullmatch(field):
                raise PointFormatError(f"row {row_number}: {axis} coordinate {field!r} is not a non-negative integer")
            values.append(int(field))
        points.append(Point(*values))
    return tuple(points)
