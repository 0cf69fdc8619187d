import math

import numpy as np
import pytest

from rainwalk.model.exposure import (
    ExposureOverflowError,
    ExposureResult,
    InvalidParameterError,
    InvalidWalkingSpeedError,
    best_result,
    chart_series,
    evaluate,
    simulate_rain_hit,
    validate_walking_speeds,
)
from rainwalk.model.state import SimulationParameters

BASE = dict(distance=10.0, rain_fall_speed=5.0, head_area=0.1, body_area=0.5, rain_density=1000.0)


def test_worked_example_speed_2():
    r = simulate_rain_hit(walking_speed=2.0, **BASE)
    assert r.time_walk == pytest.approx(5.0)
    assert r.rain_on_head == pytest.approx(2500.0)
    assert r.rain_on_body == pytest.approx(5000.0)
    assert r.total_rain == pytest.approx(7500.0)


def test_worked_example_speed_4_halves_head_rain():
    slow = simulate_rain_hit(walking_speed=2.0, **BASE)
    fast = simulate_rain_hit(walking_speed=4.0, **BASE)
    assert fast.rain_on_head == pytest.approx(1250.0)
    assert fast.rain_on_body == pytest.approx(5000.0)
    assert fast.total_rain == pytest.approx(6250.0)
    assert fast.rain_on_head == pytest.approx(slow.rain_on_head / 2)


@pytest.mark.parametrize("speed", [0.5, 1.0, 2.0, 3.0, 4.0, 7.3])
@pytest.mark.parametrize("rain_fall_speed", [0.5, 5.0, 9.0])
def test_body_rain_independent_of_speeds(speed, rain_fall_speed):
    params = dict(BASE, rain_fall_speed=rain_fall_speed)
    r = simulate_rain_hit(walking_speed=speed, **params)
    assert r.rain_on_body == pytest.approx(BASE["body_area"] * BASE["distance"] * BASE["rain_density"])


@pytest.mark.parametrize("speed", [0.5, 1.0, 2.0, 3.0, 4.0])
def test_head_rain_closed_form_and_total_exact(speed):
    r = simulate_rain_hit(walking_speed=speed, **BASE)
    expected = BASE["head_area"] * BASE["rain_fall_speed"] * BASE["distance"] / speed * BASE["rain_density"]
    assert r.rain_on_head == pytest.approx(expected)
    assert r.total_rain == r.rain_on_head + r.rain_on_body


def test_head_rain_decreases_with_speed():
    heads = [simulate_rain_hit(walking_speed=v, **BASE).rain_on_head for v in (0.5, 1, 2, 3, 4)]
    assert all(a > b for a, b in zip(heads, heads[1:]))


def test_default_rain_density_is_1000():
    params = {k: v for k, v in BASE.items() if k != "rain_density"}
    r = simulate_rain_hit(walking_speed=2.0, **params)
    assert r.total_rain == pytest.approx(7500.0)


def test_result_is_immutable():
    r = simulate_rain_hit(walking_speed=2.0, **BASE)
    with pytest.raises(AttributeError):
        r.total_rain = 0.0


@pytest.mark.parametrize("name", ["distance", "rain_fall_speed", "head_area", "body_area", "rain_density"])
@pytest.mark.parametrize("bad", [-1.0, 0.0, float("nan"), float("inf")])
def test_invalid_parameter_refused(name, bad):
    params = dict(BASE, **{name: bad})
    with pytest.raises(InvalidParameterError) as exc:
        simulate_rain_hit(walking_speed=2.0, **params)
    assert exc.value.name == name
    assert name in str(exc.value)


def test_negative_distance_is_a_value_error():
    with pytest.raises(ValueError):
        simulate_rain_hit(walking_speed=1.0, **dict(BASE, distance=-1.0))


@pytest.mark.parametrize("speed", [0.0, -2.0, float("nan"), float("inf")])
def test_invalid_walking_speed_refused(speed):
    with pytest.raises(InvalidWalkingSpeedError):
        simulate_rain_hit(walking_speed=speed, **BASE)


def test_evaluate_uses_parameter_object():
    r = evaluate(SimulationParameters(), 2.0)
    assert r == simulate_rain_hit(walking_speed=2.0, **BASE)


def test_evaluate_accepts_snapshot():
    snap = SimulationParameters(distance=20.0).snapshot()
    assert evaluate(snap, 4.0).rain_on_body == pytest.approx(10000.0)


def test_chart_series_parallel_arrays():
    results = [simulate_rain_hit(walking_speed=v, **BASE) for v in (0.5, 1.0, 2.0)]
    data = chart_series(results)
    assert set(data) == {"walking_speed", "rain_on_head", "rain_on_body", "total_rain"}
    np.testing.assert_allclose(data["walking_speed"], [0.5, 1.0, 2.0])
    np.testing.assert_allclose(data["rain_on_body"], [5000.0] * 3)
    np.testing.assert_allclose(data["total_rain"], data["rain_on_head"] + data["rain_on_body"])


def test_chart_series_empty():
    data = chart_series([])
    assert all(len(v) == 0 for v in data.values())


def test_best_result_lowest_total():
    results = [simulate_rain_hit(walking_speed=v, **BASE) for v in (0.5, 1.0, 2.0, 3.0, 4.0)]
    best = best_result(results)
    assert best.walking_speed == 4.0
    assert best.total_rain == pytest.approx(6250.0)


def test_best_result_first_on_ties():
    a = ExposureResult(1.0, 1.0, 1.0, 2.0, 1.0)
    b = ExposureResult(2.0, 1.0, 1.0, 2.0, 1.0)
    assert best_result([a, b]) is a
    assert best_result([]) is None


def test_validate_walking_speeds():
    assert validate_walking_speeds([0.5, 1, 2]) == (0.5, 1.0, 2.0)


@pytest.mark.parametrize("speeds", [[], [1.0, 0.0], [1.0, -1.0], [1.0, math.inf], [1.0, 2.0, 1.0]])
def test_validate_walking_speeds_fails_fast(speeds):
    with pytest.raises(InvalidWalkingSpeedError):
        validate_walking_speeds(speeds)


def test_overflowing_result_refused():
    with pytest.raises(ExposureOverflowError) as exc:
        simulate_rain_hit(distance=1e300, rain_fall_speed=1e10, walking_speed=0.5, head_area=0.1, body_area=0.5)
    assert exc.value.name == "rain_on_head"
    assert isinstance(exc.value, ValueError)


def test_overflowing_time_walk_refused():
    with pytest.raises(ExposureOverflowError) as exc:
        simulate_rain_hit(**dict(BASE, distance=1e300), walking_speed=1e-10)
    assert exc.value.name == "time_walk"
