"""Inventory text rendering and carried weight"""

import logging
from typing import Any

from .models import ItemBase

logger = logging.getLogger(__name__)

INVENTORY_PREFIX = "| INVENTORY: "
INVENTORY_ERROR = INVENTORY_PREFIX + "Error"
INVENTORY_EMPTY = INVENTORY_PREFIX + "Empty"
ITEM_SEPARATOR = ", "


def format_item_label(item: ItemBase) -> str:
    """Display label: name, plus " (qty)" for stacks."""
    if item.quantity > 1:
        return f"{item.name} ({item.quantity})"
    return item.name


def render_inventory(player: Any) -> str:
    """One-line inventory listing.

    Items are grouped by kind, kinds ordered by first appearance.
    Entries that are not items are skipped.
    """
    inventory = getattr(player, "inventory", None)
    if player is None or not isinstance(inventory, list):
        logger.error("Invalid player or inventory in render_inventory")
        return INVENTORY_ERROR

    if not inventory:
        return INVENTORY_EMPTY

    grouped: dict[str, list[ItemBase]] = {}
    for entry in inventory:
        if not isinstance(entry, ItemBase):
            logger.error("Skipping non-item inventory entry: %r", entry)
            continue
        grouped.setdefault(entry.kind.value, []).append(entry)

    labels = [format_item_label(item) for items in grouped.values() for item in items]
    return INVENTORY_PREFIX + ITEM_SEPARATOR.join(labels)


def calculate_total_weight(items: list[ItemBase]) -> float:
    """Sum of weight * quantity."""
    return sum(item.weight * item.quantity for item in items)
