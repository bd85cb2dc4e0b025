"""Obstacle avoidance state machine shared by the trajectory generators."""

from __future__ import annotations

import enum
import logging
import math
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
Publisher = Callable[["Twist"], None]


class AvoidanceState(enum.IntEnum):
    """Phases of the obstacle avoidance manoeuvre."""

    NONE = 0
    BACKING_FRONT = 1
    BACKING_BACK = 2
    ROTATING = 3


@dataclass(frozen=True)
class Twist:
    """Velocity command: forward speed (m/s) and yaw rate (rad/s)."""

    linear: float = 0.0
    angular: float = 0.0


def detect_obstacles(ranges: Sequence[float], threshold: float) -> tuple[bool, bool]:
    """Return ``(front, back)`` flags for a laser scan.

    The front sector spans a quarter of the scan around its centre, the back
    sector a quarter of the scan half a turn away. Non-finite readings are ignored.
    """
    n = len(ranges)
    if n == 0:
        return False, False
    center = n // 2
    delta = n // 8

    def blocked(start: int) -> bool:
        return any(
            math.isfinite(r) and r < threshold
            for r in (ranges[(start + i) % n] for i in range(2 * delta))
        )

    front = blocked(center - delta)
    back = blocked(center + n // 2 - delta)
    return front, back


class TrajectoryBase(ABC):
    """Drives a trajectory and overrides it when the lidar reports obstacles.

    ``tick`` is meant to be called every ``TICK_PERIOD`` seconds and
    ``debug_info`` every ``DEBUG_PERIOD`` seconds; ``scan_callback`` receives
    each laser scan.
    """

    TICK_PERIOD = 0.1
    DEBUG_PERIOD = 2.0
    SCAN_TIMEOUT = 2.0
    WARN_THROTTLE = 5.0

    def __init__(self, name: str, publish: Publisher, clock: Clock = time.monotonic) -> None:
        self.name = name
        self._publish = publish
        self._clock = clock

        self.linear = 0.1
        self.angular = 0.3
        self.obstacle_distance = 0.35
        self.rotation_angle = math.pi / 4.0
        self.debug_obstacles = False

        self.obstacle_front = False
        self.obstacle_back = False
        self.state = AvoidanceState.NONE

        self.start_time = clock()
        self.last_scan_time = clock()
        self.rotation_start_time = 0.0
        self._last_warning: float | None = None

        logger.info("%s started", name)

    def now(self) -> float:
        """Current time from the node's clock, in seconds."""
        return self._clock()

    @abstractmethod
    def calculate_trajectory(self) -> Twist:
        """Velocity command for normal driving, with no obstacle in the way."""

    def scan_callback(self, ranges: Sequence[float]) -> None:
        """Process one laser scan and advance the avoidance state."""
        self.last_scan_time = self.now()
        if not ranges:
            return
        self.obstacle_front, self.obstacle_back = detect_obstacles(
            ranges, self.obstacle_distance
        )
        self.update_avoidance_state()

    def update_avoidance_state(self) -> None:
        """Move between avoidance phases according to the obstacle flags."""
        if self.state is AvoidanceState.NONE:
            if self.obstacle_front:
                self.state = AvoidanceState.BACKING_FRONT
                logger.info("Obstacle ahead - backing off")
            elif self.obstacle_back:
                self.state = AvoidanceState.BACKING_BACK
                logger.info("Obstacle behind - driving forward")
        elif self.state is AvoidanceState.BACKING_FRONT and not self.obstacle_front:
            self.state = AvoidanceState.ROTATING
            self.rotation_start_time = self.now()
            logger.info("BACKING_FRONT finished - rotating 45 degrees")
        elif self.state is AvoidanceState.BACKING_BACK and not self.obstacle_back:
            self.state = AvoidanceState.ROTATING
            self.rotation_start_time = self.now()
            logger.info("BACKING_BACK finished - rotating 45 degrees")

    def tick(self) -> Twist:
        """Compute, publish and return the next velocity command."""
        now = self.now()
        if now - self.last_scan_time > self.SCAN_TIMEOUT:
            if self._last_warning is None or now - self._last_warning >= self.WARN_THROTTLE:
                self._last_warning = now
                logger.warning("No lidar data. Stopping.")
            twist = Twist()
            self._publish(twist)
            return twist

        if self.state is AvoidanceState.BACKING_FRONT:
            twist = Twist(self.linear, 0.0)
        elif self.state is AvoidanceState.BACKING_BACK:
            twist = Twist(-self.linear, 0.0)
        elif self.state is AvoidanceState.ROTATING:
            twist = Twist(0.0, -self.angular)
            if now - self.rotation_start_time >= self.rotation_angle / self.angular:
                self.state = AvoidanceState.NONE
                logger.info("Rotation finished - resuming trajectory")
        else:
            twist = self.calculate_trajectory()

        self._publish(twist)
        return twist

    def debug_info(self) -> str | None:
        """Log and return the obstacle summary when debugging is enabled."""
        if not self.debug_obstacles:
            return None
        message = "obstacles: front={}, back={}, state={}".format(
            "yes" if self.obstacle_front else "no",
            "yes" if self.obstacle_back else "no",
            int(self.state),
        )
        logger.info(message)
        return message