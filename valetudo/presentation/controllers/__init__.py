"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) with a fixed set of
routes. Per-capability routes live in the capability_routers package.
"""

from .robot_controller import router as robot_router

__all__ = ["robot_router"]
