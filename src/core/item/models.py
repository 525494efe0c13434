"""Item domain models (storage-agnostic)"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Optional, Union


class ItemKind(str, Enum):
    WEAPON = "weapon"
    ARMOR = "armor"
    RING = "ring"
    TALISMAN = "talisman"


class Rarity(str, Enum):
    """Ordered rarity tiers: common < uncommon < rare < epic < legendary."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @property
    def rank(self) -> int:
        return _RARITY_ORDER.index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        return self.rank >= other.rank


_RARITY_ORDER: tuple[Rarity, ...] = tuple(Rarity)


class DamageType(str, Enum):
    SLASH = "slash"
    PIERCE = "pierce"
    BLUNT = "blunt"
    MAGIC = "magic"


class ArmorSlot(str, Enum):
    HEAD = "head"
    CHEST = "chest"
    LEGS = "legs"
    ARMS = "arms"


@dataclass(frozen=True)
class StatusApplication:
    """A weapon's on-hit effect: triggers with `chance`, applied at `power`."""

    effect: str  # STATUS_EFFECTS key, "POISON"
    chance: float
    power: float = 1


@dataclass(frozen=True)
class StatusModifier:
    """A talisman's boost or resistance fraction for one status effect."""

    effect: str
    boost: float = 0.0
    resistance: float = 0.0


@dataclass(frozen=True, kw_only=True)
class ItemBase:
    """Fields shared by every catalog item. Immutable once defined."""

    kind: ClassVar[ItemKind]

    item_id: str  # "sword_short"
    name: str
    description: str
    value: int  # gold
    weight: float
    rarity: Rarity = Rarity.COMMON
    quantity: int = 1

    def with_quantity(self, quantity: int) -> "ItemBase":
        """Copy with a new stack size (minimum 1)."""
        return replace(self, quantity=max(1, quantity))


@dataclass(frozen=True, kw_only=True)
class Weapon(ItemBase):
    kind: ClassVar[ItemKind] = ItemKind.WEAPON

    damage_type: DamageType
    base_damage: float
    stat_scaling: dict[str, float] = field(default_factory=dict)  # {"strength": 0.5}
    status_effects: tuple[StatusApplication, ...] = ()
    two_handed: bool = False


@dataclass(frozen=True, kw_only=True)
class Armor(ItemBase):
    kind: ClassVar[ItemKind] = ItemKind.ARMOR

    slot: Optional[ArmorSlot]
    defense: float
    stat_modifiers: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True)
class Ring(ItemBase):
    kind: ClassVar[ItemKind] = ItemKind.RING

    stat_modifiers: dict[str, int] = field(default_factory=dict)
    special_effect: Optional[str] = None  # descriptive only


@dataclass(frozen=True, kw_only=True)
class Talisman(ItemBase):
    kind: ClassVar[ItemKind] = ItemKind.TALISMAN

    stat_modifiers: dict[str, int] = field(default_factory=dict)
    status_modifiers: tuple[StatusModifier, ...] = ()


Item = Union[Weapon, Armor, Ring, Talisman]

ITEM_CLASSES: dict[ItemKind, type] = {
    ItemKind.WEAPON: Weapon,
    ItemKind.ARMOR: Armor,
    ItemKind.RING: Ring,
    ItemKind.TALISMAN: Talisman,
}
