"""Item Service - binds catalog, map session, RNG and EventBus

Service -> Core is allowed; the service owns the single active MapItemSession.
"""

import random
from typing import Optional

from src.config import Settings
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.item.catalog import ItemCatalog
from src.core.item.equipment import EquipResult, Equipment, auto_equip_item
from src.core.item.inventory import render_inventory
from src.core.item.models import Item
from src.core.item.pickup import PickupOutcome, PickupResult, pickup_item
from src.core.item.placement import (
    MapItemSession,
    PlacedItem,
    ProjectionReport,
    distribute_items,
    reset_and_distribute_items,
    update_map_with_items,
)
from src.core.logging import get_logger
from src.core.player import Player
from src.core.tile_map import TileMap

logger = get_logger(__name__)

SOURCE = "item_service"


class DungeonItemService:
    """Level item lifecycle: distribute -> project -> pickup -> equip"""

    def __init__(
        self,
        catalog: ItemCatalog,
        event_bus: EventBus,
        rng: Optional[random.Random] = None,
        settings: Optional[Settings] = None,
    ):
        self._catalog = catalog
        self._bus = event_bus
        self._settings = settings
        if rng is None:
            seed = settings.ITEM_SEED if settings is not None else None
            rng = random.Random(seed)
        self._rng = rng
        self._session = MapItemSession()
        self._tile_map: Optional[TileMap] = None

    @property
    def catalog(self) -> ItemCatalog:
        return self._catalog

    @property
    def tile_map(self) -> Optional[TileMap]:
        return self._tile_map

    def placed_items(self) -> list[PlacedItem]:
        return self._session.items

    def blank_map(self) -> TileMap:
        """All-floor map of the configured MAP_WIDTH x MAP_HEIGHT."""
        settings = self._settings or Settings()
        return TileMap.filled(settings.MAP_WIDTH, settings.MAP_HEIGHT)

    def new_player(self, x: int = 0, y: int = 0) -> Player:
        """Player with equipment slot arrays sized from settings."""
        if self._settings is None:
            return Player(x=x, y=y)
        equipment = Equipment.with_slots(
            self._settings.RING_SLOTS, self._settings.TALISMAN_SLOTS
        )
        return Player(x=x, y=y, equipment=equipment)

    # === Level lifecycle ===

    def start_level(self, tile_map: TileMap) -> ProjectionReport:
        """Replace the session with a fresh distribution and draw it on the map."""
        self._tile_map = tile_map
        placed = distribute_items(tile_map, self._catalog, self._session, self._rng)
        report = update_map_with_items(tile_map, self._session)
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.ITEMS_DISTRIBUTED,
                data={"placed": len(placed), "skipped": len(report.skipped)},
                source=SOURCE,
            )
        )
        return report

    def reset_level(self, force: bool = False) -> bool:
        if self._tile_map is None:
            logger.warning("reset_level called before start_level")
            return False
        redistributed = reset_and_distribute_items(
            self._tile_map, self._catalog, self._session, self._rng, force=force
        )
        if redistributed:
            self._bus.emit(
                GameEvent(
                    event_type=EventTypes.ITEMS_RESET,
                    data={"placed": len(self._session)},
                    source=SOURCE,
                )
            )
        return redistributed

    # === Player interaction ===

    def pickup(self, player: Player) -> PickupResult:
        result = pickup_item(
            player, self._tile_map, self._session, self._catalog, self._rng
        )
        if result.item is not None:
            event_type = (
                EventTypes.ITEM_RECOVERED
                if result.outcome is PickupOutcome.RECOVERED
                else EventTypes.ITEM_PICKED_UP
            )
            self._bus.emit(
                GameEvent(
                    event_type=event_type,
                    data={"item_id": result.item.item_id, "x": player.x, "y": player.y},
                    source=SOURCE,
                )
            )
        return result

    def equip(self, player: Player, item: Optional[Item]) -> EquipResult:
        result = auto_equip_item(player, item)
        event_type = EventTypes.ITEM_EQUIPPED if result else EventTypes.EQUIP_FAILED
        self._bus.emit(
            GameEvent(
                event_type=event_type,
                data={
                    "item_id": getattr(item, "item_id", None),
                    "slot": result.slot,
                    "outcome": result.outcome.value,
                },
                source=SOURCE,
            )
        )
        return result

    def render_inventory(self, player: Player) -> str:
        return render_inventory(player)
