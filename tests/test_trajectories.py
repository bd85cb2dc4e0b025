import math

import pytest

from motionplan.avoidance import AvoidanceState, Twist
from motionplan.trajectories import (
    CircleTrajectory,
    SpiralTrajectory,
    SquareTrajectory,
)


class FakeClock:
    def __init__(self, start=0.0):
        self.value = start

    def __call__(self):
        return self.value

    def advance(self, seconds):
        self.value += seconds


def clear_scan():
    return [math.inf] * 16


def test_circle_parameters_and_command():
    clock = FakeClock()
    circle = CircleTrajectory(lambda twist: None, clock)
    assert circle.radius == 0.3
    twist = circle.calculate_trajectory()
    assert twist.linear == circle.linear
    assert twist.angular * circle.radius == pytest.approx(circle.linear)


def test_circle_tick_publishes():
    clock = FakeClock()
    published = []
    circle = CircleTrajectory(published.append, clock)
    circle.scan_callback(clear_scan())
    twist = circle.tick()
    assert published == [twist]
    assert twist.angular > 0


def test_circle_avoidance_overrides_trajectory():
    clock = FakeClock()
    circle = CircleTrajectory(lambda twist: None, clock)
    ranges = clear_scan()
    ranges[8] = 0.2
    circle.scan_callback(ranges)
    assert circle.state is AvoidanceState.BACKING_FRONT
    assert circle.tick() == Twist(circle.linear, 0.0)


def test_spiral_starts_at_base_radius():
    clock = FakeClock(10.0)
    spiral = SpiralTrajectory(lambda twist: None, clock)
    twist = spiral.calculate_trajectory()
    assert twist.linear == spiral.linear
    assert twist.angular * SpiralTrajectory.BASE_RADIUS == pytest.approx(spiral.linear)


def test_spiral_turn_rate_decreases_over_time():
    clock = FakeClock()
    spiral = SpiralTrajectory(lambda twist: None, clock)
    rates = []
    for _ in range(5):
        rates.append(spiral.calculate_trajectory().angular)
        clock.advance(10.0)
    assert rates == sorted(rates, reverse=True)
    assert len(set(rates)) == len(rates)


def test_spiral_resets_past_max_radius():
    clock = FakeClock()
    spiral = SpiralTrajectory(lambda twist: None, clock)
    first = spiral.calculate_trajectory()
    clock.advance(150.0)
    wide = spiral.calculate_trajectory()
    assert wide.angular < first.angular
    assert spiral.spiral_time == clock()
    assert spiral.calculate_trajectory() == first


def test_spiral_no_reset_below_max_radius():
    clock = FakeClock()
    spiral = SpiralTrajectory(lambda twist: None, clock)
    clock.advance(100.0)
    spiral.calculate_trajectory()
    assert spiral.spiral_time == 0.0


def test_square_starts_straight():
    clock = FakeClock()
    square = SquareTrajectory(lambda twist: None, clock)
    assert square.side == 0.3
    assert square.calculate_trajectory() == Twist(square.linear, 0.0)


def test_square_turns_after_side():
    clock = FakeClock()
    square = SquareTrajectory(lambda twist: None, clock)
    clock.advance(square.side / square.linear + 0.1)
    assert square.calculate_trajectory() == Twist(0.0, square.angular)


def test_square_only_emits_two_commands():
    clock = FakeClock()
    square = SquareTrajectory(lambda twist: None, clock)
    seen = set()
    for _ in range(400):
        seen.add(square.calculate_trajectory())
        clock.advance(0.1)
    assert seen == {Twist(square.linear, 0.0), Twist(0.0, square.angular)}


def test_square_tick_stops_without_scan():
    clock = FakeClock()
    published = []
    square = SquareTrajectory(published.append, clock)
    clock.advance(3.0)
    assert square.tick() == Twist()
    assert published == [Twist()]