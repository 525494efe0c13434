"""Weapon damage and on-hit status effects"""

import logging
import random
from typing import Mapping

from .models import Weapon
from .status_effects import Debuffable, get_status_effect

logger = logging.getLogger(__name__)


def calculate_damage(weapon: Weapon, stats: Mapping[str, float]) -> float:
    """Base damage + sum(stat * scaling).

    Stats the wielder lacks (or has at 0) add nothing.
    """
    total = weapon.base_damage
    for stat, scaling in weapon.stat_scaling.items():
        value = stats.get(stat)
        if value:
            total += value * scaling
    return total


def apply_status_effects(
    weapon: Weapon,
    target: Debuffable,
    rng: random.Random,
) -> list[str]:
    """Roll each on-hit effect. Returns the keys that triggered."""
    triggered: list[str] = []
    for application in weapon.status_effects:
        if rng.random() >= application.chance:
            continue
        effect = get_status_effect(application.effect)
        if effect is None:
            logger.warning(
                "Weapon %s references unknown effect %s",
                weapon.item_id,
                application.effect,
            )
            continue
        effect.apply(target, application.power, rng)
        triggered.append(effect.key)
    return triggered
