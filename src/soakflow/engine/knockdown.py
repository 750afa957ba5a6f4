"""Knockdown: whether soaked damage knocks the defender off their feet.

Damage above the defender's physical limit, or damage of 10 or more,
knocks down (SR5 194). Gel rounds and impact dispersion ammunition lower
the limit for this check.

Not modeled: the called shot knockdown for melee attacks (SR5 195). It
needs the attacker's strength and a declared called shot, neither of
which is known when damage is soaked.
"""

from __future__ import annotations

from soakflow.core import constants
from soakflow.core.config import SoakSettings, get_settings
from soakflow.core.logging import get_logger
from soakflow.models.actors import Actor
from soakflow.models.damage import DamageData
from soakflow.models.world import WorldContext, find_damage_source


logger = get_logger(__name__)


def is_damage_from_gel_rounds(damage: DamageData, world: WorldContext) -> bool:
    """Check whether the damage came from a weapon loaded with gel rounds.

    Any failed lookup along the source chain counts as no gel rounds.

    Args:
        damage: Damage record with its weak source reference.
        world: World to resolve the source in.

    Returns:
        True if the source item has an equipped gel rounds modification.
    """
    item = find_damage_source(world, damage)
    if item is None:
        return False

    gel_rounds = world.localize(constants.LABEL_GEL_ROUNDS).casefold()
    return any(mod.name.casefold() == gel_rounds for mod in item.equipped_modifications)


def is_damage_from_impact_dispersion(damage: DamageData, world: WorldContext) -> bool:
    """Check whether the damage came from impact dispersion ammunition (FA 52).

    Always False: ammunition cannot carry modifications yet, so there is
    nothing to look the alteration up on.
    """
    return False


def effective_physical_limit(
    damage: DamageData,
    actor: Actor,
    world: WorldContext,
    *,
    settings: SoakSettings | None = None,
) -> int:
    """Physical limit of the defender after ammunition penalties."""
    settings = settings or get_settings().soak
    gel_rounds = settings.gel_rounds_penalty if is_damage_from_gel_rounds(damage, world) else 0
    impact_dispersion = (
        settings.impact_dispersion_penalty
        if is_damage_from_impact_dispersion(damage, world)
        else 0
    )
    return actor.physical_limit + gel_rounds + impact_dispersion


def knocks_down(
    damage: DamageData,
    actor: Actor,
    world: WorldContext,
    *,
    settings: SoakSettings | None = None,
) -> bool:
    """Decide whether modified damage knocks the defender down.

    Args:
        damage: Damage after the soak roll.
        actor: The defender.
        world: World used to resolve the damage source.
        settings: Soak settings; the application settings when omitted.

    Returns:
        True if the damage exceeds the effective physical limit or reaches
        the absolute knockdown threshold.
    """
    settings = settings or get_settings().soak
    limit = effective_physical_limit(damage, actor, world, settings=settings)
    knocked_down = damage.value > limit or damage.value >= settings.knockdown_threshold
    logger.debug(
        "Knockdown evaluated",
        damage=damage.value,
        effective_limit=limit,
        knocked_down=knocked_down,
    )
    return knocked_down


__all__ = [
    "is_damage_from_gel_rounds",
    "is_damage_from_impact_dispersion",
    "effective_physical_limit",
    "knocks_down",
]
