import math

import numpy as np
import pytest

from local_planner.types import State, Command
from local_planner.vehicles.ackermann import AckermannVehicle
from local_planner.vehicles.config import AckermannConfig


@pytest.fixture
def vehicle():
    config = AckermannConfig(
        wheelbase=2.5,        # 轴距 [m]
        collision_radius=0.3,
        max_steer_deg=35.0    # 最大转角 [deg]
    )
    return AckermannVehicle(config)


def test_make_state_is_settled(vehicle):
    state = vehicle.make_state(1.0, 2.0, math.radians(30), velocity=3.0)
    assert state.axis_length == pytest.approx(2.5)
    assert state.front_x == pytest.approx(1.0 + 2.5 * math.cos(math.radians(30)))
    assert state.velocity == 3.0


def test_straight_motion(vehicle):
    state = vehicle.make_state(0.0, 0.0, 0.0)
    new_state = vehicle.kinematic_propagate(state, Command(5.0, 0.0), 0.1)
    assert new_state.x == pytest.approx(0.5)
    assert new_state.y == pytest.approx(0.0)
    assert new_state.front_x == pytest.approx(3.0)
    assert new_state.theta_rad == 0.0
    assert new_state.velocity == 5.0


def test_straight_motion_follows_reference_points(vehicle):
    # 直线运动的方向由两个参考点决定
    state = vehicle.make_state(0.0, 0.0, math.pi / 4)
    new_state = vehicle.kinematic_propagate(state, Command(2.0, 0.0), 0.5)
    assert new_state.x == pytest.approx(math.sqrt(0.5))
    assert new_state.y == pytest.approx(math.sqrt(0.5))


def test_left_quarter_turn(vehicle):
    steer = math.radians(20)
    radius = 2.5 / math.tan(steer)
    state = vehicle.make_state(0.0, 0.0, 0.0)

    icm = vehicle.get_icm(state, steer)
    assert np.allclose(icm, [0.0, radius])

    # 行驶四分之一圆周: 后轴中心从 (0, 0) 到 (R, R)，航向 +90 度
    dt = 1.0
    velocity = 0.5 * math.pi * radius
    new_state = vehicle.kinematic_propagate(state, Command(velocity, steer), dt)
    assert new_state.x == pytest.approx(radius)
    assert new_state.y == pytest.approx(radius)
    assert new_state.theta_rad == pytest.approx(math.pi / 2)
    assert new_state.axis_length == pytest.approx(2.5)


def test_right_quarter_turn(vehicle):
    steer = math.radians(-20)
    radius = 2.5 / math.tan(-steer)
    state = vehicle.make_state(0.0, 0.0, 0.0)

    new_state = vehicle.kinematic_propagate(state, Command(0.5 * math.pi * radius, steer), 1.0)
    assert new_state.x == pytest.approx(radius)
    assert new_state.y == pytest.approx(-radius)
    assert new_state.theta_rad == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize("steer", [1e-6, 1e-12, 3.1003275537854505e-17, -1e-12])
def test_tiny_steer_is_a_very_large_arc(vehicle, steer):
    # 极小转角: ICM 远在 1e16 m 量级之外，位姿仍然要和直线结果一致
    state = vehicle.make_state(2.462, -0.365, -0.27, velocity=5.0)
    curved = vehicle.kinematic_propagate(state, Command(5.0, steer), 0.1)
    straight = vehicle.kinematic_propagate(state, Command(5.0, 0.0), 0.1)

    assert curved.x == pytest.approx(straight.x, abs=1e-6)
    assert curved.y == pytest.approx(straight.y, abs=1e-6)
    assert curved.front_x == pytest.approx(straight.front_x, abs=1e-6)
    assert curved.front_y == pytest.approx(straight.front_y, abs=1e-6)
    assert curved.axis_length == pytest.approx(2.5, abs=1e-9)


def test_reverse_arc(vehicle):
    steer = math.radians(20)
    radius = 2.5 / math.tan(steer)
    state = vehicle.make_state(0.0, 0.0, 0.0)

    # 倒车左打方向: 后轴沿同一个圆向后走，航向减小
    new_state = vehicle.kinematic_propagate(state, Command(-5.0, steer), 0.1)
    alpha = -0.5 / radius
    assert new_state.x == pytest.approx(radius * math.sin(alpha))
    assert new_state.y == pytest.approx(radius * (1 - math.cos(alpha)))
    assert new_state.theta_rad == pytest.approx(alpha)
    assert new_state.axis_length == pytest.approx(2.5)


def test_saturate_limits_speed_and_steer():
    vehicle = AckermannVehicle(AckermannConfig(max_steer_deg=35.0, max_velocity=3.0))
    command = vehicle.saturate(Command(5.0, math.radians(40)))
    assert command.velocity == 3.0
    assert command.steer_rad == pytest.approx(math.radians(35))

    command = vehicle.saturate(Command(-5.0, math.radians(-10)))
    assert command.velocity == -3.0
    assert command.steer_rad == math.radians(-10)


def test_icm_absent_for_zero_steer(vehicle):
    state = vehicle.make_state(0.0, 0.0, 0.0)
    assert vehicle.get_icm(state, 0.0) is None


def test_steering_is_clamped(vehicle):
    state = vehicle.make_state(0.0, 0.0, 0.0)
    over = vehicle.kinematic_propagate(state, Command(3.0, math.radians(60)), 0.2)
    limit = vehicle.kinematic_propagate(state, Command(3.0, math.radians(35)), 0.2)
    assert over.x == pytest.approx(limit.x)
    assert over.y == pytest.approx(limit.y)
    assert over.theta_rad == pytest.approx(limit.theta_rad)


def test_footprint_invariant_over_long_run(vehicle):
    state = vehicle.make_state(0.0, 0.0, 0.0)
    steers = [math.radians(d) for d in (15, 0, -20, 1e-6, 30)]
    for i in range(200):
        state = vehicle.kinematic_propagate(state, Command(3.0, steers[i % len(steers)]), 0.1)
        assert state.axis_length == pytest.approx(2.5, abs=1e-9)
        # 航向与两点方向保持一致
        assert math.atan2(state.front_y - state.y, state.front_x - state.x) == \
            pytest.approx(state.theta_rad, abs=1e-9)


def test_propagate_does_not_mutate_input(vehicle):
    state = vehicle.make_state(0.0, 0.0, 0.0)
    before = (state.x, state.y, state.front_x, state.front_y, state.theta_rad)
    vehicle.kinematic_propagate(state, Command(5.0, math.radians(10)), 0.1)
    assert (state.x, state.y, state.front_x, state.front_y, state.theta_rad) == before


def test_degenerate_heading_is_no_motion(vehicle):
    state = State(x=1.0, y=1.0, theta_rad=0.0, front_x=1.0, front_y=1.0)
    new_state = vehicle.kinematic_propagate(state, Command(5.0, 0.0), 0.1)
    assert (new_state.x, new_state.y) == (1.0, 1.0)


def test_settle_restores_wheelbase(vehicle):
    stretched = State(x=0.0, y=0.0, theta_rad=0.0, front_x=3.0, front_y=0.0)
    settled = vehicle.settle(stretched)
    assert settled.front_x == pytest.approx(2.5)
    assert settled.axis_length == pytest.approx(2.5)


def test_collision_circles(vehicle):
    state = vehicle.make_state(0.0, 0.0, math.pi / 2)
    circles = vehicle.get_collision_circles(state)
    assert len(circles) == 3
    assert circles[0].y == pytest.approx(2.5)
    assert circles[2].y == pytest.approx(1.25)
    assert all(c.radius == 0.3 for c in circles)


@pytest.mark.parametrize("kwargs", [
    {"wheelbase": 0.0},
    {"collision_radius": -0.1},
    {"max_steer_deg": 90.0},
    {"max_velocity": 0.0},
])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        AckermannConfig(**kwargs)
