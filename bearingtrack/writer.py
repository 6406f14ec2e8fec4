"""Replay of simulated measurements into a data file in real time."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from collections.abc import Callable, Sequence

from bearingtrack.simulation import SimMeasurement, Simulation

_LINE_LIMIT = 21
_DROP_ONE_IN = 10
_NOISE = {1: 0.5, 2: 1.0, 3: 1.5}


def noise_stddev(sensor_id: int) -> float:
    """Standard deviation in degrees of a sensor's bearing noise."""
    return _NOISE.get(sensor_id, 0.0)


def randn(sensor_id: int, rng: random.Random | None = None) -> float:
    """Draw Gaussian bearing noise for a sensor (Box-Muller)."""
    if rng is None:
        rng = random.Random()
    u1 = 1.0 - rng.random()
    u2 = 1.0 - rng.random()
    z = math.sqrt(-2.0 * math.log(u1)) * math.cos(2 * math.pi * u2)
    return z * noise_stddev(sensor_id)


def format_measurement(measurement: SimMeasurement, noise: float = 0.0) -> str:
    """Render a measurement as a fixed-layout line of at most 21 characters."""
    line = (
        f"{measurement.timestamp:<7.2f} {measurement.sensor_id:d} "
        f"{measurement.bearing + noise:10.4f}\n"
    )
    return line[:_LINE_LIMIT]


def write_measurements(
    measurements: Sequence[SimMeasurement],
    path,
    rng: random.Random | None = None,
    sleep: Callable[[float], object] | None = None,
    start_delay: float = 3.0,
) -> list[str]:
    """Write noisy measurements to ``path`` paced by their timestamps.

    About one measurement in ten is dropped. Each written line is flushed at
    once and echoed to standard error. Returns the lines written.
    """
    if rng is None:
        rng = random.Random()
    if sleep is None:
        sleep = time.sleep

    written = []
    with open(path, "w", encoding="ascii") as out:
        print(f"Simulation starting in {start_delay:g} seconds...")
        sleep(start_delay)
        print("Simulation started with timestamp 0.0.")
        previous = 0.0
        for measurement in measurements:
            sleep(measurement.timestamp - previous)
            previous = measurement.timestamp
            if rng.randrange(_DROP_ONE_IN) == 0:
                continue
            line = format_measurement(measurement, randn(measurement.sensor_id, rng))
            out.write(line)
            out.flush()
            sys.stderr.write(line)
            written.append(line)
    return written


def main(argv=None) -> int:
    """Simulate the scenario and replay its measurements into a data file."""
    parser = argparse.ArgumentParser(
        prog="bearingtrack-simulate",
        description="Simulate bearing measurements of a moving ship.",
    )
    parser.add_argument("--output", default="data.txt", help="file to write")
    parser.add_argument("--count", type=int, default=100, help="measurements to simulate")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--delay", type=float, default=3.0, help="seconds to wait before replaying"
    )
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    simulation = Simulation(rng)
    measurements = simulation.record(limit=args.count)
    write_measurements(measurements, args.output, rng=rng, start_delay=args.delay)
    print("Simulation completed successfully.")
    return 0