"""Filter state and the fixed model matrices of the bearing tracker."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


def sensor_positions() -> np.ndarray:
    """Positions of the three bearing sensors, one row ``(x, y)`` each."""
    return np.array([[0.0, 0.0], [500.0, 0.0], [250.0, 400.0]])


def initial_covariance() -> np.ndarray:
    """Initial state covariance for ``(x, y, vx, vy)``."""
    return np.diag([10.0, 10.0, 100.0, 100.0])


def process_noise() -> np.ndarray:
    """Process noise covariance."""
    return np.eye(4) * 10.0


def transition_matrix(dt: float) -> np.ndarray:
    """Constant-velocity transition over a time step ``dt``."""
    F = np.eye(4)
    F[0, 2] = dt
    F[1, 3] = dt
    return F


def bearing_jacobian(state, sensor) -> np.ndarray:
    """Jacobian of the bearing from ``sensor`` to the position in ``state``."""
    dx = float(state[0]) - float(sensor[0])
    dy = float(state[1]) - float(sensor[1])
    r2 = np.float64(dx * dx + dy * dy)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.array([-dy / r2, dx / r2, 0.0, 0.0])


def measurement_noise(sensor_id: int) -> float:
    """Bearing noise variance of a sensor; grows with the sensor id."""
    sigma = sensor_id * 0.5
    return sigma * sigma


@dataclass(eq=False)
class FilterState:
    """State estimate, its covariance and the tracker's fixed setup."""

    x: np.ndarray = field(default_factory=lambda: np.zeros(4))
    P: np.ndarray = field(default_factory=initial_covariance)
    Q: np.ndarray = field(default_factory=process_noise)
    sensors: np.ndarray = field(default_factory=sensor_positions)

    def sensor(self, sensor_id: int) -> np.ndarray:
        """Position of the sensor with the given 1-based id."""
        if not 1 <= sensor_id <= len(self.sensors):
            raise ValueError(f"unknown sensor id {sensor_id}")
        return self.sensors[sensor_id - 1]