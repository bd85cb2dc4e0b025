"""Velocity trajectories with obstacle avoidance and polygon goal planning for mobile robots."""

__version__ = "0.1.0"
__all__ = ["avoidance", "trajectories", "polygon"]