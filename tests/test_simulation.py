import math
import random

import pytest

from bearingtrack.simulation import (
    Sensor,
    Ship,
    SimMeasurement,
    Simulation,
    default_sensors,
)


def test_default_sensors():
    assert default_sensors() == (
        Sensor(1, 0, 0),
        Sensor(2, 500, 0),
        Sensor(3, 250, 400),
    )


def test_initial_state():
    sim = Simulation(random.Random(1))
    assert sim.ship == Ship()
    assert sim.timestamp == 0.0
    assert sim.measurements == []
    assert 0.0 <= sim.radar_bearing <= 2 * math.pi


def test_same_seed_same_radar_bearing():
    first = Simulation(random.Random(9)).radar_bearing
    second = Simulation(random.Random(9)).radar_bearing
    assert first == pytest.approx(second)
    assert 0.0 <= first <= 2 * math.pi


def test_advance_moves_ship_and_clock():
    sim = Simulation(random.Random(1))
    sim.radar_bearing = 0.0
    before = Ship(**vars(sim.ship))
    sim.advance(0.5)
    assert sim.timestamp == pytest.approx(0.5)
    assert sim.ship.x == pytest.approx(before.x + before.vx * 0.5)
    assert sim.ship.y == pytest.approx(before.y + before.vy * 0.5)
    assert sim.radar_bearing == pytest.approx(before.w * 0.5)


def test_advance_wraps_radar():
    sim = Simulation(random.Random(1))
    start = math.pi - 0.001
    sim.radar_bearing = start
    sim.advance(0.01)
    assert sim.radar_bearing == pytest.approx(start + sim.ship.w * 0.01 - 2 * math.pi)
    assert -math.pi < sim.radar_bearing <= math.pi


def test_sensor_control_records_aligned_sensor():
    sim = Simulation(random.Random(1))
    sim.radar_bearing = math.atan2(sim.ship.y, sim.ship.x)
    added = sim.sensor_control()
    assert added == [SimMeasurement(0.0, math.degrees(sim.radar_bearing), 1)]
    assert sim.measurements == added
    assert sim.sensor_control() == []
    assert len(sim.measurements) == 1


def test_sensor_control_ignores_unaligned():
    sim = Simulation(random.Random(1))
    sim.radar_bearing = math.atan2(sim.ship.y, sim.ship.x) + 0.01
    assert sim.sensor_control() == []
    assert sim.measurements == []


def test_record_invariants():
    sim = Simulation(random.Random(7))
    measurements = sim.record(limit=4)
    assert len(measurements) == 4
    times = [m.timestamp for m in measurements]
    assert times == sorted(times)
    ids = [m.sensor_id for m in measurements]
    assert all(a != b for a, b in zip(ids, ids[1:]))
    start = Ship()
    sensors = {s.id: s for s in default_sensors()}
    for m in measurements:
        sensor = sensors[m.sensor_id]
        px = start.x + start.vx * m.timestamp
        py = start.y + start.vy * m.timestamp
        expected = math.degrees(math.atan2(py - sensor.y, px - sensor.x))
        assert m.bearing == pytest.approx(expected, abs=1e-3)


def test_record_rejects_nonpositive_step():
    with pytest.raises(ValueError):
        Simulation(random.Random(1)).record(limit=1, dt=0.0)