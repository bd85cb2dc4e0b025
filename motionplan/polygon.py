"""Goal generation along a regular polygon with intermediate waypoints."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Goal:
    """A planar goal pose: position in metres and heading in radians."""

    x: float
    y: float
    angle: float
    frame_id: str = "map"

    def orientation(self) -> tuple[float, float, float, float]:
        """Heading as a quaternion ``(x, y, z, w)`` rotating about the z axis."""
        half = self.angle / 2.0
        return 0.0, 0.0, math.sin(half), math.cos(half)


GoalPublisher = Callable[[Goal], None]


def polygon_vertices(sides: int, length: float) -> list[tuple[float, float]]:
    """Vertices of a regular polygon centred on the origin, the first on the x axis."""
    if sides < 1:
        raise ValueError(f"a polygon needs at least one side, got {sides}")
    central_angle = 2.0 * math.pi / sides
    radius = length / (2.0 * math.sin(central_angle / 2.0))
    logger.info("Radius: %.2f m", radius)
    vertices = []
    for i in range(sides):
        angle = i * central_angle
        x, y = radius * math.cos(angle), radius * math.sin(angle)
        logger.info("Vertex %d: (%.2f, %.2f)", i, x, y)
        vertices.append((x, y))
    return vertices


def polygon_goals(sides: int, length: float, intermediate_points: int) -> list[Goal]:
    """Goals along every side of the polygon, closing back on the first vertex.

    Each side contributes its starting vertex followed by
    ``intermediate_points`` evenly spaced points, all headed along the side.
    The final goal repeats the first vertex, headed towards the second.
    """
    vertices = polygon_vertices(sides, length)
    closed = [*vertices, vertices[0]]
    goals: list[Goal] = []
    for (x1, y1), (x2, y2) in zip(closed, closed[1:]):
        angle = math.atan2(y2 - y1, x2 - x1)
        goals.append(Goal(x1, y1, angle))
        for j in range(1, intermediate_points + 1):
            t = j / (intermediate_points + 1)
            goals.append(Goal(x1 + t * (x2 - x1), y1 + t * (y2 - y1), angle))

    x_end, y_end = closed[-1]
    x_next, y_next = closed[1]
    goals.append(Goal(x_end, y_end, math.atan2(y_next - y_end, x_next - x_end)))
    logger.info("Generated %d waypoints", len(goals))
    return goals


class PolygonPlanner:
    """Hands out polygon goals one at a time.

    ``publish_next_goal`` is meant to be called every ``interval`` seconds;
    once every goal has been sent, ``finished`` becomes true.
    """

    def __init__(
        self,
        publish: GoalPublisher,
        sides: int = 4,
        length: float = 1.0,
        interval: float = 5.0,
        intermediate_points: int = 5,
    ) -> None:
        self._publish = publish
        self.sides = sides
        self.length = length
        self.interval = interval
        self.intermediate_points = intermediate_points
        self.goals = polygon_goals(sides, length, intermediate_points)
        self.current_index = 0
        self.finished = False

        logger.info("Polygon planner started with parameters:")
        logger.info("- sides: %d", sides)
        logger.info("- side length: %.2f m", length)
        logger.info("- intermediate points per side: %d", intermediate_points)
        logger.info("- publish interval: %.2f s", interval)
        logger.info("- total points: %d", len(self.goals))

    def publish_next_goal(self) -> Goal | None:
        """Publish and return the next goal, or ``None`` once all have been sent."""
        if self.current_index >= len(self.goals):
            if not self.finished:
                logger.info("All goals sent. Finishing.")
            self.finished = True
            return None
        goal = self.goals[self.current_index]
        self._publish(goal)
        self.current_index += 1
        logger.info(
            "Sent goal %d/%d: (%.2f, %.2f)",
            self.current_index,
            len(self.goals),
            goal.x,
            goal.y,
        )
        return goal