"""Simulation of a moving ship observed by rotating bearing sensors."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

_ALIGNMENT = 1e-4


@dataclass(frozen=True)
class Sensor:
    """A bearing sensor at a fixed position."""

    id: int
    x: float
    y: float


@dataclass
class Ship:
    """The tracked ship and the angular speed of the radar sweep."""

    x: float = 100.0
    y: float = 200.0
    vx: float = 5.0
    vy: float = 3.0
    w: float = math.pi / 3


@dataclass(frozen=True)
class SimMeasurement:
    """A noise-free bearing (degrees) taken by a sensor at a time."""

    timestamp: float
    bearing: float
    sensor_id: int


def default_sensors() -> tuple[Sensor, ...]:
    """The three sensors of the standard scenario."""
    return (Sensor(1, 0, 0), Sensor(2, 500, 0), Sensor(3, 250, 400))


class Simulation:
    """Ship moving at constant velocity, swept by a shared radar bearing."""

    def __init__(self, rng: random.Random | None = None):
        if rng is None:
            rng = random.Random()
        self.sensors = default_sensors()
        self.ship = Ship()
        self.timestamp = 0.0
        self.radar_bearing = rng.random() * 2 * math.pi
        self.measurements: list[SimMeasurement] = []

    def sensor_control(self) -> list[SimMeasurement]:
        """Record a bearing for every sensor the radar sweep points through.

        A sensor never records twice in a row. Returns the new measurements.
        """
        added = []
        for sensor in self.sensors:
            ship_bearing = math.atan2(self.ship.y - sensor.y, self.ship.x - sensor.x)
            if abs(ship_bearing - self.radar_bearing) >= _ALIGNMENT:
                continue
            if self.measurements and self.measurements[-1].sensor_id == sensor.id:
                continue
            measurement = SimMeasurement(
                timestamp=self.timestamp,
                bearing=math.degrees(ship_bearing),
                sensor_id=sensor.id,
            )
            self.measurements.append(measurement)
            added.append(measurement)
        return added

    def advance(self, dt: float) -> None:
        """Move the clock, the ship and the radar sweep forward by ``dt``."""
        self.timestamp += dt
        self.ship.x += self.ship.vx * dt
        self.ship.y += self.ship.vy * dt
        self.radar_bearing += self.ship.w * dt
        if self.radar_bearing > math.pi:
            self.radar_bearing -= 2 * math.pi

    def record(self, limit: int = 100, dt: float = 0.0001) -> list[SimMeasurement]:
        """Run the simulation until ``limit`` measurements have been taken."""
        if dt <= 0:
            raise ValueError("time step must be positive")
        while True:
            self.sensor_control()
            if len(self.measurements) >= limit:
                break
            self.advance(dt)
        del self.measurements[max(limit, 0):]
        return list(self.measurements)