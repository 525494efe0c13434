"""DungeonItemService integration (catalog + session + EventBus)"""

import random

import pytest

from src.config import Settings
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.item.catalog import ItemCatalog
from src.core.item.pickup import PickupOutcome
from src.core.tile_map import FLOOR, TileMap
from src.services.item_service import DungeonItemService


@pytest.fixture()
def setup(catalog: ItemCatalog):
    """Service with a seeded RNG and an event recorder"""
    bus = EventBus()
    events: list[GameEvent] = []
    for event_type in (
        EventTypes.ITEMS_DISTRIBUTED,
        EventTypes.ITEMS_RESET,
        EventTypes.ITEM_PICKED_UP,
        EventTypes.ITEM_RECOVERED,
        EventTypes.ITEM_EQUIPPED,
        EventTypes.EQUIP_FAILED,
    ):
        bus.subscribe(event_type, events.append)
    service = DungeonItemService(catalog, bus, rng=random.Random(7))
    return service, events


# ── Level lifecycle ──────────────────────────────────────────


class TestLevel:
    def test_start_level_places_and_emits(self, setup) -> None:
        service, events = setup
        tile_map = TileMap.filled(10, 10)

        report = service.start_level(tile_map)

        placed = service.placed_items()
        assert len(placed) >= 10
        assert report.placed == len(placed)
        assert service.tile_map is tile_map
        assert [e.event_type for e in events] == [EventTypes.ITEMS_DISTRIBUTED]
        assert events[0].data == {"placed": len(placed), "skipped": 0}
        assert events[0].source == "item_service"

    def test_start_level_replaces_previous(self, setup) -> None:
        service, _ = setup
        service.start_level(TileMap.filled(10, 10))
        second = TileMap.filled(3, 1)

        service.start_level(second)

        assert all(p.y == 0 and p.x < 3 for p in service.placed_items())

    def test_reset_before_start(self, setup) -> None:
        service, events = setup
        assert service.reset_level(force=True) is False
        assert events == []

    def test_reset_keeps_items_unless_forced(self, setup) -> None:
        service, events = setup
        service.start_level(TileMap.filled(8, 8))

        assert service.reset_level() is False
        assert service.reset_level(force=True) is True
        assert events[-1].event_type == EventTypes.ITEMS_RESET
        assert events[-1].data["placed"] == len(service.placed_items())


# ── Player interaction ───────────────────────────────────────


class TestPlayer:
    def test_pickup_emits_picked_up(self, setup) -> None:
        service, events = setup
        service.start_level(TileMap.filled(6, 6))
        target = service.placed_items()[0]
        player = service.new_player(target.x, target.y)

        result = service.pickup(player)

        assert result.outcome is PickupOutcome.PICKED_UP
        assert events[-1].event_type == EventTypes.ITEM_PICKED_UP
        assert events[-1].data == {
            "item_id": target.item.item_id,
            "x": target.x,
            "y": target.y,
        }

    def test_pickup_glyph_emits_recovered(self, setup) -> None:
        service, events = setup
        tile_map = TileMap.filled(4, 4, "#")
        service.start_level(tile_map)
        tile_map.set(1, 1, "&")

        result = service.pickup(service.new_player(1, 1))

        assert result.outcome is PickupOutcome.RECOVERED
        assert tile_map.get(1, 1) == FLOOR
        assert events[-1].event_type == EventTypes.ITEM_RECOVERED

    def test_pickup_nothing_emits_nothing(self, setup) -> None:
        service, events = setup
        service.start_level(TileMap.filled(4, 4, "#"))
        events.clear()

        result = service.pickup(service.new_player(0, 0))

        assert result.outcome is PickupOutcome.NOTHING_HERE
        assert events == []

    def test_equip_success_and_failure(self, setup, catalog: ItemCatalog) -> None:
        service, events = setup
        player = service.new_player()
        helm = catalog.find_item_by_id("helm_iron")

        assert service.equip(player, helm)
        assert not service.equip(player, catalog.find_item_by_id("crown_mage"))

        assert [e.event_type for e in events] == [
            EventTypes.ITEM_EQUIPPED,
            EventTypes.EQUIP_FAILED,
        ]
        assert events[0].data == {
            "item_id": "helm_iron",
            "slot": "head",
            "outcome": "equipped",
        }
        assert events[1].data["outcome"] == "slot_occupied"

    def test_equip_none(self, setup) -> None:
        service, events = setup
        assert not service.equip(service.new_player(), None)
        assert events[-1].data["item_id"] is None

    def test_equip_non_item(self, setup) -> None:
        service, events = setup
        result = service.equip(service.new_player(), {"type": "weapon"})
        assert not result
        assert events[-1].event_type == EventTypes.EQUIP_FAILED
        assert events[-1].data["item_id"] is None

    def test_render_inventory(self, setup, catalog: ItemCatalog) -> None:
        service, _ = setup
        player = service.new_player()
        assert service.render_inventory(player) == "| INVENTORY: Empty"
        player.add_to_inventory(catalog.find_item_by_id("ring_luck"))
        assert service.render_inventory(player) == "| INVENTORY: Fortune's Favor"


# ── Settings ─────────────────────────────────────────────────


class TestSettings:
    def test_slot_counts_from_settings(self, catalog: ItemCatalog) -> None:
        settings = Settings(RING_SLOTS=4, TALISMAN_SLOTS=1)
        service = DungeonItemService(catalog, EventBus(), settings=settings)

        player = service.new_player(2, 3)

        assert (player.x, player.y) == (2, 3)
        assert player.equipment.rings == [None] * 4
        assert player.equipment.talismans == [None]

    def test_default_slots_without_settings(self, catalog: ItemCatalog) -> None:
        service = DungeonItemService(catalog, EventBus())
        player = service.new_player()
        assert len(player.equipment.rings) == 2
        assert len(player.equipment.talismans) == 2

    def test_seed_makes_distribution_repeatable(self, catalog: ItemCatalog) -> None:
        settings = Settings(ITEM_SEED=99)
        first = DungeonItemService(catalog, EventBus(), settings=settings)
        second = DungeonItemService(catalog, EventBus(), settings=settings)

        first.start_level(TileMap.filled(12, 12))
        second.start_level(TileMap.filled(12, 12))

        assert [(p.x, p.y, p.item.item_id) for p in first.placed_items()] == [
            (p.x, p.y, p.item.item_id) for p in second.placed_items()
        ]

    def test_blank_map_size(self, catalog: ItemCatalog) -> None:
        settings = Settings(MAP_WIDTH=12, MAP_HEIGHT=5)
        service = DungeonItemService(catalog, EventBus(), settings=settings)

        tile_map = service.blank_map()

        assert (tile_map.width, tile_map.height) == (12, 5)
        assert tile_map.count(FLOOR) == 60
