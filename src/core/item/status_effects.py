"""Status effect table

Each effect applies timed stat debuffs to a target that exposes
`apply_debuff(stat_name, delta, duration_ticks)`.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Debuffable(Protocol):
    def apply_debuff(self, stat_name: str, delta: float, duration_ticks: int) -> None: ...


@dataclass(frozen=True)
class StatusEffect:
    key: str  # "POISON"
    name: str
    description: str
    apply: Callable[[Debuffable, float, random.Random], None]


def _poison(target: Debuffable, power: float, rng: random.Random) -> None:
    target.apply_debuff("health", -power, 5)


def _freeze(target: Debuffable, power: float, rng: random.Random) -> None:
    target.apply_debuff("dexterity", -power * 3, 3)


def _flame(target: Debuffable, power: float, rng: random.Random) -> None:
    target.apply_debuff("health", -power * 2, 3)


def _dismemberment(target: Debuffable, power: float, rng: random.Random) -> None:
    # 5% per point of power
    if rng.random() < 0.05 * power:
        target.apply_debuff("strength", -power * 5, 10)
        target.apply_debuff("dexterity", -power * 5, 10)


def _bleed(target: Debuffable, power: float, rng: random.Random) -> None:
    target.apply_debuff("health", -power * 1.5, 4)


def _stun(target: Debuffable, power: float, rng: random.Random) -> None:
    # approximated as a heavy, short dexterity debuff
    target.apply_debuff("dexterity", -power * 8, 1)


def _weaken(target: Debuffable, power: float, rng: random.Random) -> None:
    target.apply_debuff("strength", -power * 2, 4)
    target.apply_debuff("stamina", -power * 10, 4)


STATUS_EFFECTS: dict[str, StatusEffect] = {
    effect.key: effect
    for effect in (
        StatusEffect("POISON", "Poison", "Deals damage over time", _poison),
        StatusEffect("FREEZE", "Freeze", "Slows movement and attack speed", _freeze),
        StatusEffect(
            "FLAME", "Flame", "Burns the target, dealing damage over time", _flame
        ),
        StatusEffect(
            "DISMEMBERMENT",
            "Dismemberment",
            "Chance to sever limbs, severely reducing combat effectiveness",
            _dismemberment,
        ),
        StatusEffect(
            "BLEED", "Bleeding", "Causes blood loss and continuous damage", _bleed
        ),
        StatusEffect(
            "STUN", "Stun", "Temporarily prevents the target from acting", _stun
        ),
        StatusEffect(
            "WEAKEN", "Weaken", "Reduces the target's strength and stamina", _weaken
        ),
    )
}


def get_status_effect(key: str) -> Optional[StatusEffect]:
    """Case-insensitive lookup. None for unknown keys."""
    if not key:
        return None
    return STATUS_EFFECTS.get(key.upper())


def apply_status_effect(
    key: str,
    target: Debuffable,
    power: float = 1,
    rng: Optional[random.Random] = None,
) -> bool:
    """Apply one effect by key. Returns False for an unknown key."""
    effect = get_status_effect(key)
    if effect is None:
        logger.warning("Unknown status effect: %s", key)
        return False
    effect.apply(target, power, rng or random.Random())
    return True
