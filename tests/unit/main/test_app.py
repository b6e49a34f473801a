from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from valetudo.main import app as module_app
from valetudo.main.app import create_app
from valetudo.main.config import AppSettings, RobotSettings
from valetudo.shared import EnumConfigBackend


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app(
        AppSettings(robot=RobotSettings(config_backend=EnumConfigBackend.MEMORY))
    )
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_create_app_mounts_capabilities_under_prefix() -> None:
    settings = AppSettings(robot=RobotSettings(config_backend=EnumConfigBackend.MEMORY))
    settings.api.capabilities_prefix = "/caps"

    app = create_app(settings)

    with TestClient(app) as client:
        assert client.get("/api/v2/robot").status_code == 200
        assert client.get("/caps/ZoneCleaningCapability/presets").status_code == 200
        assert client.get("/caps/ZoneCleaningCapability/presets").json() == {}
        assert (
            client.get(
                "/api/v2/robot/capabilities/ZoneCleaningCapability/presets"
            ).status_code
            == 404
        )
