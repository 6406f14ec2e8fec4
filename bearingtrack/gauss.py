"""Gauss-Newton position fix from a set of bearing measurements."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from bearingtrack.parser import Measurement

_SINGULAR = 1e-12


def wrap_angle(angle: float) -> float:
    """Wrap an angle in radians into ``[-pi, pi)``."""
    wrapped = math.fmod(angle + math.pi, 2 * math.pi)
    if wrapped < 0:
        wrapped += 2 * math.pi
    return wrapped - math.pi


def gauss_newton(
    sensors,
    measurements: Sequence[Measurement],
    max_iter: int = 100,
    tol: float = 1e-6,
) -> tuple[float, float]:
    """Estimate the target position that best explains the bearings.

    Starts from the centroid of the sensors and iterates until the step is
    shorter than ``tol``, the normal matrix becomes singular, or ``max_iter``
    iterations have run.
    """
    sensors = np.asarray(sensors, dtype=float)
    x, y = (float(v) for v in sensors.mean(axis=0))

    positions = np.array([sensors[m.sensor_id - 1] for m in measurements])
    observed = np.array([m.bearing * math.pi / 180.0 for m in measurements])

    for _ in range(max_iter):
        dx = x - positions[:, 0]
        dy = y - positions[:, 1]
        r2 = dx * dx + dy * dy
        residuals = np.array(
            [wrap_angle(p - o) for p, o in zip(np.arctan2(dy, dx), observed)]
        )
        with np.errstate(divide="ignore", invalid="ignore"):
            H = np.column_stack((-dy / r2, dx / r2))
        HtH = H.T @ H
        Htf = H.T @ residuals

        det = HtH[0, 0] * HtH[1, 1] - HtH[0, 1] * HtH[1, 0]
        if abs(det) < _SINGULAR:
            break
        inverse = np.array([[HtH[1, 1], -HtH[0, 1]], [-HtH[1, 0], HtH[0, 0]]]) / det

        delta_x, delta_y = -(inverse @ Htf)
        x += float(delta_x)
        y += float(delta_y)
        if math.hypot(delta_x, delta_y) < tol:
            break

    return x, y