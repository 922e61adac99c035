"""
xyz-geojson — XYZ Record Parser
===============================
Turns line-oriented XYZ text into validated :class:`~xyz_geojson.models.Point`
records.

Accepted line formats::

    440287.50 4431748.25 125.3        space separated
    440287.50,4431748.25,125.3        comma separated
    440287.50\t4431748.25\t125.3      tab separated
    440287.50, 4431748.25 ,125.3, 7   mixed, extra tokens ignored

Blank lines are skipped silently.  Any other line that does not give at
least three numeric tokens is skipped with a warning; parsing never stops
on a bad line.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Iterator

from xyz_geojson.models import Point, SkippedLine

logger = logging.getLogger("xyz_geojson.parser")

# One or more spaces, tabs or commas form a single delimiter run.
_DELIMITERS = re.compile(r"[\s,]+")

# Plain decimal or scientific notation.  Keeps out what float() would also
# accept but an XYZ export never contains: "nan", "inf", "1_000" and
# non-ASCII digits such as "３４".
_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

MIN_TOKENS = 3


@dataclass(frozen=True)
class RawRecord:
    """One non-blank input line, trimmed, with its 1-based line number."""

    text: str
    line_number: int


def iter_records(text: str) -> Iterator[RawRecord]:
    """Yield a :class:`RawRecord` for every non-blank line of *text*."""
    for index, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if stripped:
            yield RawRecord(stripped, index)


def split_tokens(line: str) -> list[str]:
    """Split *line* on runs of whitespace and commas, dropping empty tokens."""
    return [token for token in _DELIMITERS.split(line) if token]


def _to_number(token: str) -> float | None:
    if not _NUMBER.fullmatch(token):
        return None
    value = float(token)
    # Literals like "1e999" overflow to inf.
    return value if math.isfinite(value) else None


def parse_record(record: RawRecord) -> Point | SkippedLine:
    """Parse one record into a :class:`Point`, or explain why it was rejected."""
    tokens = split_tokens(record.text)
    if len(tokens) < MIN_TOKENS:
        return SkippedLine(
            record.line_number,
            record.text,
            f"expected at least {MIN_TOKENS} values, found {len(tokens)}",
        )

    values = []
    for token in tokens:
        value = _to_number(token)
        if value is None:
            return SkippedLine(
                record.line_number, record.text, f"non-numeric value {token!r}"
            )
        values.append(value)

    x, y, z = values[:MIN_TOKENS]
    return Point(x=x, y=y, z=z, line_number=record.line_number)


def parse_xyz(
    text: str,
    *,
    on_skip: Callable[[SkippedLine], None] | None = None,
) -> list[Point]:
    """Parse XYZ text into points, in input order.

    Args:
        text: Multi-line XYZ text.
        on_skip: Optional callback receiving a :class:`SkippedLine` for
                 every rejected line, in addition to the logged warning.

    Returns:
        One :class:`Point` per valid line.
    """
    points: list[Point] = []
    for record in iter_records(text):
        parsed = parse_record(record)
        if isinstance(parsed, SkippedLine):
            logger.warning("Skipping invalid line %d: %s", parsed.line_number, parsed.text)
            if on_skip is not None:
                on_skip(parsed)
            continue
        points.append(parsed)

    logger.debug("Parsed %d point(s)", len(points))
    return points
