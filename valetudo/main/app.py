"""
Main Application - Main Layer

This module serves as the entry point for the FastAPI application.
It initializes the container, creates the FastAPI app, includes the
robot router and mounts one router per registered capability.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from valetudo.main.config import AppSettings, get_settings
from valetudo.main.container import app_lifespan, init_container
from valetudo.presentation.capability_routers import mount_capability_routers
from valetudo.presentation.controllers import robot_router
from valetudo.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first - before configuration is loaded
# This ensures we have logging during the configuration loading process
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

# Get structured logger
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.

    This context manager is called when the application starts up,
    and when it shuts down. It uses the container's app_lifespan
    to properly manage application resources.
    """
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("Application starting up")

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("Application shutting down")


def create_app(app_settings: Optional[AppSettings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to build the app from; loaded from the
            environment when omitted

    Returns:
        FastAPI: The configured FastAPI application
    """
    app_settings = app_settings or get_settings()

    # Initialize dependency injection container
    container = init_container(app_settings)

    app = FastAPI(
        title=app_settings.api.title,
        description=app_settings.api.description,
        version=app_settings.api.version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Set up CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(robot_router)

    mounted = mount_capability_routers(
        app,
        robot=container.robot(),
        config_store=container.config_store(),
        prefix=app_settings.api.capabilities_prefix,
    )
    logger.info("app.capability_routers.mounted", capabilities=mounted)

    return app


app = create_app(settings)
