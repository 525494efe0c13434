"""Item distribution - random placement of catalog items on floor tiles

The placed-item registry is an owned MapItemSession value, one per active map.
Distribution replaces its contents; pickup consumes from it.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from src.core.tile_map import (
    ARMOR_SYMBOL,
    FLOOR,
    ITEM_SYMBOLS,
    TRINKET_SYMBOL,
    WEAPON_SYMBOL,
    TileMap,
)

from .catalog import ItemCatalog
from .models import Item, ItemKind

logger = logging.getLogger(__name__)

MIN_ITEMS = 10
MAX_ITEMS = 40
ATTEMPTS_PER_ITEM = 10  # total attempt cap = target * ATTEMPTS_PER_ITEM

# type roll thresholds: weapon 40%, armor 30%, ring/talisman 30%
WEAPON_ROLL = 0.40
ARMOR_ROLL = 0.70

SYMBOL_BY_KIND: dict[ItemKind, str] = {
    ItemKind.WEAPON: WEAPON_SYMBOL,
    ItemKind.ARMOR: ARMOR_SYMBOL,
    ItemKind.RING: TRINKET_SYMBOL,
    ItemKind.TALISMAN: TRINKET_SYMBOL,
}


@dataclass(frozen=True)
class PlacedItem:
    x: int
    y: int
    item: Item
    symbol: str


class MapItemSession:
    """Placed items of the current map. At most one entry per coordinate."""

    def __init__(self) -> None:
        self._items: list[PlacedItem] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[PlacedItem]:
        return list(self._items)

    def replace(self, items: list[PlacedItem]) -> None:
        self._items = list(items)

    def clear(self) -> None:
        self._items = []

    def item_at(self, x: int, y: int) -> Optional[PlacedItem]:
        for placed in self._items:
            if placed.x == x and placed.y == y:
                return placed
        return None

    def take_item_at(self, x: int, y: int) -> Optional[Item]:
        """Remove and return the item at (x, y). None when nothing is there."""
        placed = self.item_at(x, y)
        if placed is None:
            return None
        self._items.remove(placed)
        logger.debug(
            "Took %s at (%d, %d); %d items remaining",
            placed.item.item_id,
            x,
            y,
            len(self._items),
        )
        return placed.item


@dataclass
class ProjectionReport:
    """Result of writing session symbols onto a map."""

    placed: int = 0
    skipped: list[PlacedItem] = field(default_factory=list)  # tile no longer floor
    symbol_counts: dict[str, int] = field(default_factory=dict)


def compute_item_budget(navigable: int, total_cells: int, rng: random.Random) -> int:
    """clamp(10 + floor(navigable / total * 30) + randint(-5, 4), 10, 40)"""
    ratio = navigable / total_cells if total_cells > 0 else 0.0
    base = MIN_ITEMS + int(ratio * (MAX_ITEMS - MIN_ITEMS))
    jitter = rng.randint(-5, 4)
    return max(MIN_ITEMS, min(MAX_ITEMS, base + jitter))


def roll_item_kind(rng: random.Random) -> ItemKind:
    roll = rng.random()
    if roll < WEAPON_ROLL:
        return ItemKind.WEAPON
    if roll < ARMOR_ROLL:
        return ItemKind.ARMOR
    return ItemKind.RING if rng.random() < 0.5 else ItemKind.TALISMAN


def distribute_items(
    tile_map: Optional[TileMap],
    catalog: ItemCatalog,
    session: MapItemSession,
    rng: random.Random,
) -> list[PlacedItem]:
    """Scatter random catalog items over empty floor tiles.

    The session is cleared first and then holds exactly the returned
    placements. May place fewer than the target when floor is scarce;
    a map without floor places nothing.
    """
    session.clear()

    if not isinstance(tile_map, TileMap) or not tile_map.is_valid():
        logger.error("Invalid map passed to distribute_items: %r", tile_map)
        return []

    navigable = tile_map.count(FLOOR)
    target = compute_item_budget(navigable, tile_map.total_cells, rng)
    max_attempts = target * ATTEMPTS_PER_ITEM
    logger.info(
        "Map has %d navigable tiles; placing up to %d items", navigable, target
    )

    placed: list[PlacedItem] = []
    claimed: set[tuple[int, int]] = set()
    attempts = 0

    while len(placed) < target and attempts < max_attempts:
        attempts += 1
        x = rng.randrange(tile_map.width)
        y = rng.randrange(tile_map.height)

        if (x, y) in claimed or not tile_map.is_floor(x, y):
            continue

        kind = roll_item_kind(rng)
        candidates = catalog.get_items_by_type(kind.value)
        if not candidates:
            continue

        item = rng.choice(candidates)
        placed.append(PlacedItem(x=x, y=y, item=item, symbol=SYMBOL_BY_KIND[kind]))
        claimed.add((x, y))
        logger.debug("Placed %s at (%d, %d)", item.item_id, x, y)

    session.replace(placed)
    logger.info("Placed %d items after %d attempts", len(placed), attempts)
    return session.items


def update_map_with_items(
    tile_map: Optional[TileMap],
    session: MapItemSession,
) -> ProjectionReport:
    """Write each placed item's symbol onto its tile.

    Entries whose tile is no longer floor are skipped and reported;
    the session keeps them.
    """
    report = ProjectionReport()
    if not isinstance(tile_map, TileMap) or not tile_map.is_valid():
        logger.error("Invalid map passed to update_map_with_items: %r", tile_map)
        return report

    for placed in session.items:
        if tile_map.is_floor(placed.x, placed.y):
            tile_map.set(placed.x, placed.y, placed.symbol)
            report.placed += 1
        else:
            logger.warning(
                "Cannot place %s at (%d, %d): tile is %r",
                placed.item.item_id,
                placed.x,
                placed.y,
                tile_map.get(placed.x, placed.y),
            )
            report.skipped.append(placed)

    report.symbol_counts = {
        symbol: tile_map.count(symbol) for symbol in sorted(ITEM_SYMBOLS)
    }
    logger.info(
        "Map now shows %d weapons, %d armor, %d trinkets",
        report.symbol_counts.get(WEAPON_SYMBOL, 0),
        report.symbol_counts.get(ARMOR_SYMBOL, 0),
        report.symbol_counts.get(TRINKET_SYMBOL, 0),
    )
    return report


def reset_and_distribute_items(
    tile_map: Optional[TileMap],
    catalog: ItemCatalog,
    session: MapItemSession,
    rng: random.Random,
    force: bool = False,
) -> bool:
    """Clear item glyphs and redistribute when the session is empty or forced.

    Returns True when a redistribution happened.
    """
    if not isinstance(tile_map, TileMap) or not tile_map.is_valid():
        logger.error("Invalid map passed to reset_and_distribute_items: %r", tile_map)
        return False

    if len(session) > 0 and not force:
        logger.info("Keeping existing %d items", len(session))
        return False

    cleared = tile_map.clear_item_symbols()
    logger.debug("Cleared %d item symbols", cleared)
    session.clear()
    distribute_items(tile_map, catalog, session, rng)
    update_map_with_items(tile_map, session)
    logger.info("Items redistributed; %d on map", len(session))
    return True
