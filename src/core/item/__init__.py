"""Item system core - pure Python, storage-agnostic"""

from .catalog import CatalogLoadError, ItemCatalog
from .equipment import EquipOutcome, EquipResult, Equipment, auto_equip_item
from .inventory import render_inventory
from .models import (
    Armor,
    ArmorSlot,
    DamageType,
    Item,
    ItemKind,
    Rarity,
    Ring,
    Talisman,
    Weapon,
)
from .pickup import PickupOutcome, PickupResult, pickup_item
from .placement import (
    MapItemSession,
    PlacedItem,
    distribute_items,
    reset_and_distribute_items,
    update_map_with_items,
)

__all__ = [
    "Armor",
    "ArmorSlot",
    "CatalogLoadError",
    "DamageType",
    "EquipOutcome",
    "EquipResult",
    "Equipment",
    "Item",
    "ItemCatalog",
    "ItemKind",
    "MapItemSession",
    "PickupOutcome",
    "PickupResult",
    "PlacedItem",
    "Rarity",
    "Ring",
    "Talisman",
    "Weapon",
    "auto_equip_item",
    "distribute_items",
    "pickup_item",
    "render_inventory",
    "reset_and_distribute_items",
    "update_map_with_items",
]
