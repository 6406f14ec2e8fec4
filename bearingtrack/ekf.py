"""Extended Kalman filter steps for bearing-only tracking."""

from __future__ import annotations

import math
from dataclasses import replace

import numpy as np

from bearingtrack.model import (
    FilterState,
    bearing_jacobian,
    measurement_noise,
    transition_matrix,
)
from bearingtrack.parser import Measurement


def predict(state: FilterState, dt: float) -> FilterState:
    """Propagate the state and covariance forward by ``dt``."""
    F = transition_matrix(dt)
    return replace(state, x=F @ state.x, P=F @ state.P @ F.T + state.Q)


def update(state: FilterState, measurement: Measurement) -> FilterState:
    """Correct the state with one bearing measurement.

    The covariance is updated as ``(I - KH)`` scaled elementwise by the
    column sums of the prior covariance.
    """
    sensor = state.sensor(measurement.sensor_id)
    predicted = math.atan2(state.x[1] - sensor[1], state.x[0] - sensor[0])
    innovation = measurement.bearing * math.pi / 180.0 - predicted

    H = bearing_jacobian(state.x, sensor)
    S = H @ state.P @ H + measurement_noise(measurement.sensor_id)
    K = (state.P @ H) / S

    x = state.x + K * innovation
    P = (np.eye(4) - np.outer(K, H)) * state.P.sum(axis=0)
    return replace(state, x=x, P=P)


def step(state: FilterState, measurement: Measurement, previous: Measurement) -> FilterState:
    """Predict up to ``measurement`` from ``previous``, then update with it."""
    dt = measurement.timestamp - previous.timestamp
    return update(predict(state, dt), measurement)