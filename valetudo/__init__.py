"""
Valetudo Capability Service Root Module

This module serves as the root for the source code of the application:
a registry of optional robot capabilities, each exposed dynamically as a
REST resource, plus the tagged-attribute container used to model robot state.

Layer Structure:
- Domain: Entities, capability contracts, registry and ports
- Application: Use cases and DTOs
- Infrastructure: Config stores, device transport and device families
- Presentation: Controllers and capability routers for the REST API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
