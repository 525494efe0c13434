"""Item catalog - JSON load + runtime registration"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from .models import (
    Armor,
    ArmorSlot,
    DamageType,
    Item,
    ItemKind,
    Rarity,
    Ring,
    StatusApplication,
    StatusModifier,
    Talisman,
    Weapon,
)
from .status_effects import STATUS_EFFECTS

logger = logging.getLogger(__name__)

# JSON table name -> kind
TABLE_KINDS: dict[str, ItemKind] = {
    "weapons": ItemKind.WEAPON,
    "armor": ItemKind.ARMOR,
    "rings": ItemKind.RING,
    "talismans": ItemKind.TALISMAN,
}


class CatalogLoadError(Exception):
    """Raised when the catalog file is missing or is not valid JSON."""


class ItemCatalog:
    """
    Read-only store of weapon/armor/ring/talisman definitions.
    Keyed by item_id, grouped by kind in definition order.
    """

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}
        self._by_kind: dict[ItemKind, list[Item]] = {kind: [] for kind in ItemKind}

    def load_from_json(self, path: str | Path) -> int:
        """Load items.json. Returns the number of items loaded.

        The file holds one array per table (weapons, armor, rings, talismans).
        Malformed entries are logged and skipped.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as f:
                raw_tables: dict[str, list[dict]] = json.load(f)
        except OSError as e:
            raise CatalogLoadError(f"Unable to read item catalog: {path}") from e
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(raw_tables, dict):
            raise CatalogLoadError(f"Item catalog must be a JSON object: {path}")

        count = 0
        for table, kind in TABLE_KINDS.items():
            for raw in raw_tables.get(table) or []:
                if not isinstance(raw, dict):
                    logger.warning("Skipping non-object %s entry: %r", kind.value, raw)
                    continue
                try:
                    item = _build_item(kind, raw)
                except (KeyError, ValueError, TypeError) as e:
                    logger.warning(
                        "Failed to load %s: %s - %s", kind.value, raw.get("item_id", "?"), e
                    )
                    continue
                if item.item_id in self._items:
                    logger.warning("Duplicate item id skipped: %s", item.item_id)
                    continue
                self._add(item)
                count += 1

        logger.info("Loaded %d items from %s", count, path)
        return count

    def register(self, item: Item) -> None:
        """Runtime registration. An existing item_id is replaced with a warning."""
        existing = self._items.get(item.item_id)
        if existing is not None:
            logger.warning("Overwriting existing item: %s", item.item_id)
            self._by_kind[existing.kind].remove(existing)
        self._add(item)

    def find_item_by_id(self, item_id: str) -> Optional[Item]:
        return self._items.get(item_id)

    def get_items_by_type(self, item_type: Optional[str]) -> list[Item]:
        """Items of one kind, case-insensitive ("Weapon", "ARMOR", ...).

        Empty or unknown type strings return [] and log an error.
        """
        if not item_type:
            logger.error("get_items_by_type called with empty type: %r", item_type)
            return []

        try:
            kind = ItemKind(str(getattr(item_type, "value", item_type)).lower())
        except ValueError:
            logger.error("Unknown item type: %s", item_type)
            return []

        result = list(self._by_kind[kind])
        logger.debug("Found %d items of type %s", len(result), kind.value)
        return result

    def get_all(self) -> list[Item]:
        return list(self._items.values())

    def count(self) -> int:
        return len(self._items)

    def _add(self, item: Item) -> None:
        self._items[item.item_id] = item
        self._by_kind[item.kind].append(item)


def _build_item(kind: ItemKind, raw: dict[str, Any]) -> Item:
    """Raw JSON object -> typed item. Raises KeyError/ValueError on bad data."""
    base = dict(
        item_id=raw["item_id"],
        name=raw["name"],
        description=raw.get("description", ""),
        value=int(raw["value"]),
        weight=float(raw["weight"]),
        rarity=Rarity(raw.get("rarity", "common")),
        quantity=max(1, int(raw.get("quantity", 1))),
    )

    if kind is ItemKind.WEAPON:
        return Weapon(
            **base,
            damage_type=DamageType(raw["damage_type"]),
            base_damage=float(raw["base_damage"]),
            stat_scaling={k: float(v) for k, v in raw.get("stat_scaling", {}).items()},
            status_effects=tuple(
                StatusApplication(
                    effect=_require_effect(e["effect"]),
                    chance=float(e["chance"]),
                    power=float(e.get("power", 1)),
                )
                for e in raw.get("status_effects", [])
            ),
            two_handed=bool(raw.get("two_handed", False)),
        )
    if kind is ItemKind.ARMOR:
        slot = raw.get("slot")
        return Armor(
            **base,
            slot=ArmorSlot(slot) if slot else None,
            defense=float(raw["defense"]),
            stat_modifiers=dict(raw.get("stat_modifiers", {})),
        )
    if kind is ItemKind.RING:
        return Ring(
            **base,
            stat_modifiers=dict(raw.get("stat_modifiers", {})),
            special_effect=raw.get("special_effect"),
        )
    return Talisman(
        **base,
        stat_modifiers=dict(raw.get("stat_modifiers", {})),
        status_modifiers=tuple(
            StatusModifier(
                effect=_require_effect(m["effect"]),
                boost=float(m.get("boost", 0.0)),
                resistance=float(m.get("resistance", 0.0)),
            )
            for m in raw.get("status_modifiers", [])
        ),
    )


def _require_effect(key: str) -> str:
    if key not in STATUS_EFFECTS:
        raise ValueError(f"unknown status effect {key!r}")
    return key
