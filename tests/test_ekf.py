import math

import numpy as np
import pytest

from bearingtrack.ekf import predict, step, update
from bearingtrack.model import FilterState, initial_covariance, process_noise
from bearingtrack.parser import Measurement


def _state(x):
    return FilterState(x=np.array(x, dtype=float))


def _bearing_deg(state, sensor_id):
    sx, sy = state.sensor(sensor_id)
    return math.degrees(math.atan2(state.x[1] - sy, state.x[0] - sx))


def test_predict_zero_step_adds_process_noise():
    state = _state([100.0, 200.0, 5.0, 3.0])
    result = predict(state, 0.0)
    assert np.array_equal(result.x, state.x)
    assert np.allclose(result.P, initial_covariance() + process_noise())


def test_predict_moves_with_velocity():
    state = _state([100.0, 200.0, 5.0, 3.0])
    result = predict(state, 2.0)
    assert result.x[0] == pytest.approx(state.x[0] + 2.0 * state.x[2])
    assert result.x[1] == pytest.approx(state.x[1] + 2.0 * state.x[3])
    assert result.x[2:].tolist() == state.x[2:].tolist()


def test_predict_keeps_covariance_symmetric_and_growing():
    state = _state([100.0, 200.0, 5.0, 3.0])
    result = predict(state, 1.7)
    assert np.allclose(result.P, result.P.T)
    assert np.all(np.diag(result.P) > np.diag(state.P))


def test_predict_does_not_mutate_input():
    state = _state([1.0, 2.0, 3.0, 4.0])
    predict(state, 1.0)
    assert state.x.tolist() == [1.0, 2.0, 3.0, 4.0]
    assert np.array_equal(state.P, initial_covariance())


@pytest.mark.parametrize("sensor_id", [1, 2, 3])
def test_update_with_matching_bearing_keeps_position(sensor_id):
    state = _state([120.0, 180.0, 5.0, 3.0])
    m = Measurement(1.0, sensor_id, _bearing_deg(state, sensor_id))
    result = update(state, m)
    assert np.allclose(result.x, state.x, atol=1e-9)


@pytest.mark.parametrize("sensor_id", [1, 2, 3])
def test_update_moves_toward_measured_bearing(sensor_id):
    state = _state([120.0, 180.0, 5.0, 3.0])
    before = _bearing_deg(state, sensor_id)
    measured = before + 1.0
    result = update(state, Measurement(1.0, sensor_id, measured))
    after = _bearing_deg(result, sensor_id)
    assert before < after < measured


def test_update_unknown_sensor_raises():
    state = _state([120.0, 180.0, 5.0, 3.0])
    with pytest.raises(ValueError):
        update(state, Measurement(1.0, 7, 10.0))


def test_step_is_predict_then_update():
    state = _state([120.0, 180.0, 5.0, 3.0])
    previous = Measurement(1.0, 1, 50.0)
    current = Measurement(1.5, 2, 120.0)
    combined = step(state, current, previous)
    manual = update(predict(state, 0.5), current)
    assert np.allclose(combined.x, manual.x)
    assert np.allclose(combined.P, manual.P)


def test_step_keeps_sensor_setup():
    state = _state([120.0, 180.0, 5.0, 3.0])
    result = step(state, Measurement(2.0, 3, -60.0), Measurement(1.0, 2, 100.0))
    assert np.array_equal(result.sensors, state.sensors)
    assert np.array_equal(result.Q, state.Q)