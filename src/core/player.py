"""Player state consumed by the item core (position, inventory, equipment, debuffs)"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.core.item.equipment import Equipment
from src.core.item.models import Item
from src.core.logging import get_logger

logger = get_logger(__name__)

DEFAULT_STATS: dict[str, float] = {
    "health": 100,
    "stamina": 100,
    "strength": 10,
    "dexterity": 10,
    "intelligence": 10,
    "vitality": 10,
    "endurance": 10,
    "faith": 10,
    "luck": 10,
}


@dataclass
class ActiveDebuff:
    stat_name: str
    delta: float
    remaining_ticks: int


@dataclass
class Player:
    x: int = 0
    y: int = 0
    inventory: list[Item] = field(default_factory=list)
    equipment: Equipment = field(default_factory=Equipment)
    stats: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_STATS))
    debuffs: list[ActiveDebuff] = field(default_factory=list)

    def add_to_inventory(self, item: Item) -> None:
        self.inventory.append(item)
        logger.debug("Added %s to inventory (%d items)", item.item_id, len(self.inventory))

    def apply_debuff(self, stat_name: str, delta: float, duration_ticks: int) -> None:
        """Status-effect hook: records a timed stat delta."""
        if duration_ticks <= 0:
            return
        self.debuffs.append(ActiveDebuff(stat_name, delta, duration_ticks))

    def effective_stat(self, stat_name: str) -> float:
        base = self.stats.get(stat_name, 0)
        return base + sum(d.delta for d in self.debuffs if d.stat_name == stat_name)

    def tick_debuffs(self) -> None:
        """Advance one tick; expired debuffs are dropped."""
        for debuff in self.debuffs:
            debuff.remaining_ticks -= 1
        self.debuffs = [d for d in self.debuffs if d.remaining_ticks > 0]
