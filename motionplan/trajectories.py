"""Concrete trajectories: circle, spiral and square."""

from __future__ import annotations

import logging
import math
import time

from motionplan.avoidance import Clock, Publisher, TrajectoryBase, Twist

logger = logging.getLogger(__name__)


class CircleTrajectory(TrajectoryBase):
    """Constant speed along a circle of fixed radius."""

    def __init__(self, publish: Publisher, clock: Clock = time.monotonic) -> None:
        super().__init__("circle_trajectory", publish, clock)
        self.radius = 0.3
        logger.info(
            "Parameters: speed=%.2f, radius=%.2f, obstacle threshold=%.2f",
            self.linear,
            self.radius,
            self.obstacle_distance,
        )

    def calculate_trajectory(self) -> Twist:
        return Twist(self.linear, self.linear / self.radius)


class SpiralTrajectory(TrajectoryBase):
    """Outward spiral whose radius grows with time and restarts past 1.5 m."""

    MAX_RADIUS = 1.5
    BASE_RADIUS = 0.1

    def __init__(self, publish: Publisher, clock: Clock = time.monotonic) -> None:
        super().__init__("spiral_trajectory", publish, clock)
        self.spiral_factor = 0.1
        self.spiral_time = self.now()
        logger.info(
            "Parameters: speed=%.2f, spiral factor=%.2f, obstacle threshold=%.2f",
            self.linear,
            self.spiral_factor,
            self.obstacle_distance,
        )

    def calculate_trajectory(self) -> Twist:
        t = self.now() - self.spiral_time
        r = self.BASE_RADIUS * (1.0 + self.spiral_factor * t)
        twist = Twist(self.linear, self.linear / r)
        if r > self.MAX_RADIUS:
            self.spiral_time = self.now()
            logger.info("Spiral reset")
        return twist


class SquareTrajectory(TrajectoryBase):
    """Alternates straight runs along a side with in-place quarter turns."""

    TURN_CORRECTION = 1.23

    def __init__(self, publish: Publisher, clock: Clock = time.monotonic) -> None:
        super().__init__("square_trajectory", publish, clock)
        self.side = 0.3
        logger.info(
            "Parameters: speed=%.2f, side=%.2f, obstacle threshold=%.2f",
            self.linear,
            self.side,
            self.obstacle_distance,
        )

    def calculate_trajectory(self) -> Twist:
        t = self.now() - self.start_time
        move_time = self.side / self.linear
        turn_time = (math.pi / 2 / self.angular) * self.TURN_CORRECTION
        step_time = move_time + turn_time
        full_cycle = 4 * step_time
        phase_time = math.fmod(math.fmod(t, full_cycle), step_time)
        if phase_time < move_time:
            return Twist(self.linear, 0.0)
        return Twist(0.0, self.angular)