# motionplan

Small, dependency-free building blocks for driving a differential-drive
robot:

- **Velocity trajectories** with lidar obstacle avoidance:
  `CircleTrajectory`, `SpiralTrajectory` and `SquareTrajectory` in
  `motionplan.trajectories`, all built on `TrajectoryBase` from
  `motionplan.avoidance`.
- **Polygon goal planning** in `motionplan.polygon`: the vertices of a
  regular polygon, with evenly spaced intermediate waypoints along each side,
  handed out one goal at a time.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Velocity trajectories

```python
import time
from motionplan.trajectories import CircleTrajectory

controller = CircleTrajectory(publish=print, clock=time.monotonic)

# feed every lidar scan (a sequence of ranges in metres)
controller.scan_callback([1.0] * 360)

# call periodically, e.g. every TrajectoryBase.TICK_PERIOD (0.1 s)
twist = controller.tick()
print(twist.linear, twist.angular)
```

Every trajectory takes a `publish` callable, which receives each `Twist`,
and a `clock` callable returning the current time in seconds (it defaults to
`time.monotonic`). A `Twist` is a frozen dataclass with `linear` (m/s) and
`angular` (rad/s) fields.

Each call to `tick()` computes a `Twist`, passes it to `publish` and returns
it:

- If no scan has arrived for more than `SCAN_TIMEOUT` (2 s), a zero `Twist`
  is published and a warning is logged, at most once every `WARN_THROTTLE`
  (5 s).
- `scan_callback(ranges)` checks two sectors of the scan with
  `detect_obstacles(ranges, threshold)`: a quarter of the readings around the
  middle of the scan (`obstacle_front`) and a quarter half a turn away
  (`obstacle_back`). Readings below `obstacle_distance` (0.35 m) count;
  non-finite readings are ignored. An empty scan only refreshes the time of
  the last scan.
- The state (`AvoidanceState`) then moves as follows: from `NONE`, a front
  obstacle gives `BACKING_FRONT` and otherwise a back obstacle gives
  `BACKING_BACK`. `BACKING_FRONT` publishes `linear` forward speed until the
  front sector is clear; `BACKING_BACK` publishes `-linear` until the back
  sector is clear. Both then go to `ROTATING`, which publishes an angular
  speed of `-angular` until `rotation_angle / angular` seconds have passed
  (a 45-degree turn), and returns to `NONE`.
- In `NONE`, the subclass's `calculate_trajectory()` gives the `Twist`.

The defaults are `linear = 0.1`, `angular = 0.3`, `obstacle_distance = 0.35`
and `rotation_angle = pi / 4`; they are plain attributes and can be changed.

`debug_info()` logs and returns a summary of the obstacle flags and state
when `debug_obstacles` is true, and returns `None` otherwise. It is meant to
be called every `DEBUG_PERIOD` (2 s).

Available trajectories:

| Class              | Behaviour                                                                 |
|--------------------|---------------------------------------------------------------------------|
| `CircleTrajectory` | speed `linear` with yaw rate `linear / radius`, `radius = 0.3` m           |
| `SpiralTrajectory` | radius `0.1 * (1 + spiral_factor * t)`; restarts once it exceeds 1.5 m     |
| `SquareTrajectory` | drives `side = 0.3` m straight, then turns at `+angular` for a quarter turn scaled by `TURN_CORRECTION` (1.23), in a repeating cycle |

To add a trajectory, subclass `TrajectoryBase`, pass a name, `publish` and
`clock` to its constructor, and implement `calculate_trajectory()` so that
it returns a `Twist`.

## Polygon goals

```python
from motionplan.polygon import PolygonPlanner, polygon_goals, polygon_vertices

vertices = polygon_vertices(4, 1.0)   # corners of a square with 1 m sides
goals = polygon_goals(4, 1.0, 5)      # corners plus 5 waypoints per side, closed loop

for goal in goals:
    print(goal.x, goal.y, goal.angle, goal.orientation())

planner = PolygonPlanner(publish=print, sides=4, length=1.0, interval=5.0,
                         intermediate_points=5)
while planner.publish_next_goal() is not None:
    pass
print(planner.finished)   # True
```

- `polygon_vertices(sides, length)` places the polygon around the origin
  with its first vertex on the positive x axis; it raises `ValueError` when
  `sides` is less than 1.
- `polygon_goals(sides, length, intermediate_points)` gives, for each side,
  its starting vertex and `intermediate_points` evenly spaced points, all
  headed along the side, and ends with the first vertex again, headed
  towards the second.
- A `Goal` is a frozen dataclass with `x`, `y`, `angle` (radians) and
  `frame_id` (`"map"`). `orientation()` returns the heading as an
  `(x, y, z, w)` quaternion about the z axis.
- `PolygonPlanner.publish_next_goal()` passes the next goal to `publish` and
  returns it; once every goal has been sent it returns `None` and sets
  `finished`. `interval` is the number of seconds meant to pass between
  calls.

## What it does not do

The package has no command-line program and does not connect to any robot
middleware, lidar or motor driver. It runs no timers or event loop of its
own: your code must call `tick()`, `scan_callback()`, `debug_info()` and
`publish_next_goal()` at the intended rates and deliver what `publish`
receives to the robot. Log messages go through the standard `logging`
module.