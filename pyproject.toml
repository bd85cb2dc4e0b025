[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motionplan"
version = "0.1.0"
description = "Simple mobile-robot motion planning: circle, spiral and square velocity trajectories with lidar obstacle avoidance, and regular-polygon goal generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "motion planning", "trajectory", "obstacle avoidance", "lidar", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["motionplan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
