"""Roborock device family."""

from .robot import RoborockRobot

__all__ = ["RoborockRobot"]
