"""Live tracking of a target from a growing file of bearing measurements."""

from __future__ import annotations

import argparse
import os
import sys
import time
from collections.abc import Iterator
from dataclasses import replace
from typing import BinaryIO, TextIO

import numpy as np

from bearingtrack.ekf import step
from bearingtrack.gauss import gauss_newton
from bearingtrack.model import FilterState
from bearingtrack.parser import Measurement, parse_measurement

_READ_SIZE = 22
_BOOTSTRAP_COUNT = 3
HEADER = "Timestamp | x_estimate | y_estimate | vx_estimate | vy_estimate"


class Tracker:
    """Bootstraps a position fix from three bearings, then runs the EKF."""

    def __init__(self, log: TextIO | None = None):
        self.log = log
        self.state = FilterState()
        self._bootstrap: list[Measurement] = []
        self._last: Measurement | None = None

    @property
    def ready(self) -> bool:
        """True once the initial position fix has been made."""
        return self._last is not None

    def feed(self, line: str) -> str | None:
        """Process one measurement line.

        Returns the estimate row written for the measurement, or None while
        the first measurements are still being collected.
        """
        measurement = parse_measurement(line)
        self.state.sensor(measurement.sensor_id)

        if self._last is None:
            self._bootstrap.append(measurement)
            if len(self._bootstrap) == _BOOTSTRAP_COUNT:
                x, y = gauss_newton(self.state.sensors, self._bootstrap)
                self.state = replace(self.state, x=np.array([x, y, 0.0, 0.0]))
                print(f"Initial position: x = {x:.2f}, y = {y:.2f}")
                print(HEADER)
                self._last = self._bootstrap[-1]
            return None

        self.state = step(self.state, measurement, self._last)
        self._last = measurement
        x, y, vx, vy = (float(v) for v in self.state.x)
        row = (
            f"{measurement.timestamp:<9.2f}   {x:<10.4f}   {y:<10.4f}   "
            f"{vx:<11.4f}   {vy:<11.4f}\n"
        )
        print(row, end="")
        if self.log is not None:
            self.log.write(row)
            self.log.flush()
        return row


def follow(path, poll_interval: float = 0.1) -> Iterator[str]:
    """Yield data appended to ``path`` after this call.

    The file is opened and its current end recorded immediately. Each time the
    file has grown, at most 21 bytes from the previous end are yielded and the
    new end becomes the reference point.
    """
    handle = open(path, "rb")
    start = handle.seek(0, os.SEEK_END)
    return _tail(handle, start, poll_interval)


def _tail(handle: BinaryIO, last: int, poll_interval: float) -> Iterator[str]:
    with handle:
        while True:
            current = handle.seek(0, os.SEEK_END)
            if current > last:
                handle.seek(last)
                chunk = handle.read(_READ_SIZE)[: _READ_SIZE - 1]
                last = current
                yield chunk.decode("ascii", errors="replace")
            else:
                time.sleep(poll_interval)


def main(argv=None) -> int:
    """Follow a measurement file and print filtered position estimates."""
    parser = argparse.ArgumentParser(
        prog="bearingtrack-filter",
        description="Track a target from bearing measurements appended to a file.",
    )
    parser.add_argument("--data", default="data.txt", help="measurement file to follow")
    parser.add_argument("--log", default="log.txt", help="file receiving the estimates")
    parser.add_argument(
        "--interval", type=float, default=0.1, help="polling interval in seconds"
    )
    args = parser.parse_args(argv)

    with open(args.log, "w", encoding="ascii") as log:
        try:
            lines = follow(args.data, args.interval)
        except OSError as exc:
            print(f"cannot read {args.data}: {exc}", file=sys.stderr)
            return 1
        tracker = Tracker(log)
        try:
            for line in lines:
                try:
                    tracker.feed(line)
                except ValueError as exc:
                    print(f"skipping measurement: {exc}", file=sys.stderr)
        except KeyboardInterrupt:
            pass
    return 0