"""Pickup - moves the item under the player from the map into the inventory"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from src.core.tile_map import (
    ARMOR_SYMBOL,
    FLOOR,
    TRINKET_SYMBOL,
    WEAPON_SYMBOL,
    TileMap,
)

from .catalog import ItemCatalog
from .models import Item, ItemKind
from .placement import MapItemSession

logger = logging.getLogger(__name__)


class PickupOutcome(str, Enum):
    PICKED_UP = "picked_up"  # session entry consumed
    RECOVERED = "recovered"  # glyph on map without session entry; item synthesized
    NOTHING_HERE = "nothing_here"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class PickupResult:
    outcome: PickupOutcome
    item: Optional[Item] = None

    @property
    def success(self) -> bool:
        return self.outcome in (PickupOutcome.PICKED_UP, PickupOutcome.RECOVERED)

    def __bool__(self) -> bool:
        return self.success


def _coordinate(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    return int(value)


def kind_for_symbol(symbol: Optional[str], rng: random.Random) -> Optional[ItemKind]:
    """Map glyph -> item kind. "$" is a ring or talisman at 50/50."""
    if symbol == WEAPON_SYMBOL:
        return ItemKind.WEAPON
    if symbol == ARMOR_SYMBOL:
        return ItemKind.ARMOR
    if symbol == TRINKET_SYMBOL:
        return ItemKind.RING if rng.random() < 0.5 else ItemKind.TALISMAN
    return None


def synthesize_item_for_symbol(
    symbol: Optional[str],
    catalog: ItemCatalog,
    rng: random.Random,
) -> Optional[Item]:
    """Random catalog item matching a map glyph. None for non-item glyphs."""
    kind = kind_for_symbol(symbol, rng)
    if kind is None:
        return None
    candidates = catalog.get_items_by_type(kind.value)
    if not candidates:
        return None
    return rng.choice(candidates)


def pickup_item(
    player: Any,
    tile_map: Optional[TileMap],
    session: MapItemSession,
    catalog: ItemCatalog,
    rng: random.Random,
) -> PickupResult:
    """Pick up whatever lies at the player's position.

    A session entry at the position wins. Without one, an item glyph in the
    cell still yields a random item of that kind (RECOVERED). On success the
    item is appended to the inventory and the cell becomes floor.
    """
    if not isinstance(tile_map, TileMap) or not tile_map.is_valid():
        logger.error("Invalid map passed to pickup_item: %r", tile_map)
        return PickupResult(PickupOutcome.INVALID_INPUT)

    x = _coordinate(getattr(player, "x", None))
    y = _coordinate(getattr(player, "y", None))
    if x is None or y is None or not callable(getattr(player, "add_to_inventory", None)):
        logger.error("Invalid player passed to pickup_item: %r", player)
        return PickupResult(PickupOutcome.INVALID_INPUT)
    if not tile_map.in_bounds(x, y):
        logger.error("Player position (%s, %s) is outside the map", x, y)
        return PickupResult(PickupOutcome.INVALID_INPUT)

    outcome = PickupOutcome.PICKED_UP
    item = session.take_item_at(x, y)

    if item is None:
        cell = tile_map.get(x, y)
        item = synthesize_item_for_symbol(cell, catalog, rng)
        if item is None:
            logger.debug("No item at (%d, %d)", x, y)
            return PickupResult(PickupOutcome.NOTHING_HERE)
        outcome = PickupOutcome.RECOVERED
        logger.warning(
            "Map shows %r at (%d, %d) with no placed item; synthesized %s",
            cell,
            x,
            y,
            item.item_id,
        )

    player.add_to_inventory(item)
    tile_map.set(x, y, FLOOR)
    logger.info("Picked up %s (%s) at (%d, %d)", item.name, item.kind.value, x, y)
    return PickupResult(outcome, item)
