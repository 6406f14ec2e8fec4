"""Parsing of fixed-layout bearing measurement lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

# Column offsets of the fields in a measurement line.
_SENSOR_COLUMN = 8
_BEARING_COLUMN = 10


@dataclass(frozen=True)
class Measurement:
    """A single bearing observation reported by one sensor."""

    timestamp: float
    sensor_id: int
    bearing: float


def _leading_float(text: str, what: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no {what} found in {text!r}")
    return float(match.group(1))


def _leading_int(text: str, what: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no {what} found in {text!r}")
    return int(match.group(1))


def parse_measurement(line: str) -> Measurement:
    """Parse a line laid out as ``timestamp(7) sensor(1) bearing(10)``.

    The timestamp starts the line, the sensor id starts at column 8 and the
    bearing (in degrees) at column 10. Each field is read as the longest
    numeric prefix at its position; a field with no number raises ValueError.
    """
    return Measurement(
        timestamp=_leading_float(line, "timestamp"),
        sensor_id=_leading_int(line[_SENSOR_COLUMN:], "sensor id"),
        bearing=_leading_float(line[_BEARING_COLUMN:], "bearing"),
    )