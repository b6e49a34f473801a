from __future__ import annotations

import pytest

from valetudo.application.dtos.zone_dto import ZonePresetCreateDTO
from valetudo.application.use_cases.zone_preset_use_cases import ZonePresetUseCases
from valetudo.domain.entities.errors import ZonePresetNotFoundError
from valetudo.domain.entities.zone import Zone, ZonePreset
from valetudo.shared import ZONE_PRESETS_CONFIG_KEY
from tests.conftest import make_zone


def _preset_dto(name: str, *zones, preset_id=None) -> ZonePresetCreateDTO:
    return ZonePresetCreateDTO.model_validate(
        {"name": name, "id": preset_id, "zones": list(zones)}
    )


@pytest.mark.asyncio
async def test_create_then_get_round_trip(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)

    created = await use_cases.create_preset(
        _preset_dto("Kitchen", make_zone(0, 0, 100, 100))
    )
    fetched = await use_cases.get_preset(created["id"])

    assert fetched == created
    assert fetched["name"] == "Kitchen"
    assert fetched["zones"] == [make_zone(0, 0, 100, 100)]


@pytest.mark.asyncio
async def test_create_with_existing_id_overwrites(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(_preset_dto("Old", make_zone(0, 0, 1, 1), preset_id="p"))

    await use_cases.create_preset(_preset_dto("New", make_zone(0, 0, 2, 2), preset_id="p"))

    presets = await use_cases.list_presets()
    assert list(presets) == ["p"]
    assert presets["p"]["name"] == "New"


@pytest.mark.asyncio
async def test_update_keeps_path_id(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(_preset_dto("Hall", make_zone(0, 0, 1, 1), preset_id="hall"))

    updated = await use_cases.update_preset(
        "hall", _preset_dto("Hallway", make_zone(5, 5, 9, 9), preset_id="other")
    )

    assert updated["id"] == "hall"
    assert (await use_cases.get_preset("hall"))["name"] == "Hallway"
    assert "other" not in await use_cases.list_presets()


@pytest.mark.asyncio
async def test_update_and_delete_unknown_raise(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)

    with pytest.raises(ZonePresetNotFoundError):
        await use_cases.update_preset("nope", _preset_dto("X", make_zone(0, 0, 1, 1)))
    with pytest.raises(ZonePresetNotFoundError):
        await use_cases.delete_preset("nope")
    with pytest.raises(ZonePresetNotFoundError):
        await use_cases.get_preset("nope")


@pytest.mark.asyncio
async def test_delete_removes_preset(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(_preset_dto("A", make_zone(0, 0, 1, 1), preset_id="a"))
    await use_cases.create_preset(_preset_dto("B", make_zone(0, 0, 1, 1), preset_id="b"))

    await use_cases.delete_preset("a")

    assert list(await config_store.get(ZONE_PRESETS_CONFIG_KEY)) == ["b"]


@pytest.mark.asyncio
async def test_resolve_zones_concatenates_in_request_order(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(
        _preset_dto("A", make_zone(0, 0, 1, 1), make_zone(2, 2, 3, 3), preset_id="a")
    )
    await use_cases.create_preset(_preset_dto("B", make_zone(4, 4, 5, 5), preset_id="b"))

    zones = await use_cases.resolve_zones(["b", "a", "b"])

    assert [zone.to_legacy_area()[0] for zone in zones] == [4, 0, 2, 4]


@pytest.mark.asyncio
async def test_resolve_zones_fails_on_any_unknown_id(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(_preset_dto("A", make_zone(0, 0, 1, 1), preset_id="a"))

    with pytest.raises(ZonePresetNotFoundError) as exc:
        await use_cases.resolve_zones(["a", "missing"])

    assert exc.value.preset_id == "missing"


@pytest.mark.asyncio
async def test_legacy_listing_and_replace_all(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    await use_cases.create_preset(_preset_dto("Old", make_zone(0, 0, 1, 1), preset_id="old"))

    await use_cases.replace_all(
        [
            ZonePreset.create(
                name="Hall",
                zones=[Zone.from_legacy_area([10, 20, 30, 40, 2])],
                preset_id="hall",
            )
        ]
    )

    assert await use_cases.list_legacy() == [
        {"name": "Hall", "id": "hall", "areas": [[10, 20, 30, 40, 2]]}
    ]


@pytest.mark.asyncio
async def test_stored_map_is_not_mutated_through_results(config_store) -> None:
    use_cases = ZonePresetUseCases(config_store)
    created = await use_cases.create_preset(
        _preset_dto("A", make_zone(0, 0, 1, 1), preset_id="a")
    )

    created["name"] = "changed"

    assert (await use_cases.get_preset("a"))["name"] == "A"
