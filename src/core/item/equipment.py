"""Equipment slots and auto-equip

Slot vocabulary: right_hand, left_hand (lists), head, chest, legs, arms
(one Armor each), rings, talismans (fixed-size lists).
An occupied slot is never swapped out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .models import Armor, Item, ItemBase, ItemKind, Ring, Talisman, Weapon

logger = logging.getLogger(__name__)

DEFAULT_RING_SLOTS = 2
DEFAULT_TALISMAN_SLOTS = 2


@dataclass
class Equipment:
    right_hand: list[Weapon] = field(default_factory=list)
    left_hand: list[Weapon] = field(default_factory=list)
    head: Optional[Armor] = None
    chest: Optional[Armor] = None
    legs: Optional[Armor] = None
    arms: Optional[Armor] = None
    rings: list[Optional[Ring]] = field(
        default_factory=lambda: [None] * DEFAULT_RING_SLOTS
    )
    talismans: list[Optional[Talisman]] = field(
        default_factory=lambda: [None] * DEFAULT_TALISMAN_SLOTS
    )

    @classmethod
    def with_slots(cls, ring_slots: int, talisman_slots: int) -> "Equipment":
        return cls(rings=[None] * ring_slots, talismans=[None] * talisman_slots)

    def equipped_items(self) -> list[Item]:
        """Every equipped item, hands first."""
        items: list[Item] = [*self.right_hand, *self.left_hand]
        items.extend(a for a in (self.head, self.chest, self.legs, self.arms) if a)
        items.extend(r for r in self.rings if r)
        items.extend(t for t in self.talismans if t)
        return items

    def to_dict(self) -> dict[str, Any]:
        """Slot name -> item_id(s), for display and API payloads."""

        def _id(item: Optional[Item]) -> Optional[str]:
            return item.item_id if item else None

        return {
            "right_hand": [w.item_id for w in self.right_hand],
            "left_hand": [w.item_id for w in self.left_hand],
            "head": _id(self.head),
            "chest": _id(self.chest),
            "legs": _id(self.legs),
            "arms": _id(self.arms),
            "rings": [_id(r) for r in self.rings],
            "talismans": [_id(t) for t in self.talismans],
        }


class EquipOutcome(str, Enum):
    EQUIPPED = "equipped"
    SLOT_OCCUPIED = "slot_occupied"  # no free slot of the right kind
    INVALID_INPUT = "invalid_input"  # no item, or armor without a slot


@dataclass(frozen=True)
class EquipResult:
    outcome: EquipOutcome
    slot: Optional[str] = None  # "right_hand", "head", "rings[1]", ...

    @property
    def success(self) -> bool:
        return self.outcome is EquipOutcome.EQUIPPED

    def __bool__(self) -> bool:
        return self.success


def auto_equip_item(player: Any, item: Optional[Item]) -> EquipResult:
    """Put an item into the first free matching slot of player.equipment.

    weapon   -> right hand, then left hand
    armor    -> its declared slot
    ring     -> first empty ring index
    talisman -> first empty talisman index

    The inventory is left untouched.
    """
    equipment = getattr(player, "equipment", None)
    if not isinstance(equipment, Equipment):
        logger.error("Invalid player passed to auto_equip_item: %r", player)
        return EquipResult(EquipOutcome.INVALID_INPUT)
    if not isinstance(item, ItemBase):
        logger.error("Invalid item passed to auto_equip_item: %r", item)
        return EquipResult(EquipOutcome.INVALID_INPUT)

    kind = item.kind

    if kind is ItemKind.WEAPON:
        if not equipment.right_hand:
            equipment.right_hand.append(item)
            return _equipped(item, "right_hand")
        if not equipment.left_hand:
            equipment.left_hand.append(item)
            return _equipped(item, "left_hand")
        return _occupied(item, "hands")

    if kind is ItemKind.ARMOR:
        if item.slot is None:
            logger.warning("Armor %s declares no slot", item.item_id)
            return EquipResult(EquipOutcome.INVALID_INPUT)
        slot_name = item.slot.value
        if getattr(equipment, slot_name) is not None:
            return _occupied(item, slot_name)
        setattr(equipment, slot_name, item)
        return _equipped(item, slot_name)

    if kind is ItemKind.RING:
        return _equip_first_free(equipment.rings, item, "rings")

    if kind is ItemKind.TALISMAN:
        return _equip_first_free(equipment.talismans, item, "talismans")

    logger.error("Unhandled item kind: %s", kind)
    return EquipResult(EquipOutcome.INVALID_INPUT)


def _equip_first_free(slots: list, item: Item, slot_name: str) -> EquipResult:
    for i, current in enumerate(slots):
        if current is None:
            slots[i] = item
            return _equipped(item, f"{slot_name}[{i}]")
    return _occupied(item, slot_name)


def _equipped(item: Item, slot: str) -> EquipResult:
    logger.debug("Equipped %s in %s", item.item_id, slot)
    return EquipResult(EquipOutcome.EQUIPPED, slot)


def _occupied(item: Item, slot: str) -> EquipResult:
    logger.info("Cannot equip %s: %s occupied", item.item_id, slot)
    return EquipResult(EquipOutcome.SLOT_OCCUPIED, slot)
