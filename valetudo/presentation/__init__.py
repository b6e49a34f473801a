"""
Presentation Layer Package

This package contains the presentation layer components, which are
responsible for handling HTTP requests and responses: the fixed robot
routes and the routers mounted per registered capability.
"""

from valetudo.presentation import capability_routers, controllers

__all__ = ["capability_routers", "controllers"]
