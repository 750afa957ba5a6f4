"""Soak rules: which parts make up a soak pool and how damage changes.

The rule provider is called twice per soak test, once to preview the
pool for the damage prompt and once with the operator-confirmed damage.
It only ever extends the parts list it is handed.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from soakflow.core import constants
from soakflow.core.logging import get_logger
from soakflow.models.actors import Actor
from soakflow.models.damage import DamageData, ResolvedDamage, calc_total
from soakflow.models.enums import ActorType, DamageElement, DamageType, SpellType
from soakflow.models.parts import PartsList, add_unique_part
from soakflow.models.world import WorldContext, find_damage_source


logger = get_logger(__name__)


@runtime_checkable
class SoakRuleProvider(Protocol):
    """Rule catalog consumed by the soak flow."""

    def apply_all_soak_parts(
        self,
        parts: PartsList,
        actor: Actor,
        damage: DamageData,
    ) -> None:
        """Append every applicable mitigation part to ``parts``."""
        ...

    def modify_damage_type(self, damage: DamageData, actor: Actor) -> DamageData:
        """Return a copy of ``damage`` with the actor's type transform applied."""
        ...

    def reduce_damage(self, actor: Actor, damage: DamageData, hits: int) -> ResolvedDamage:
        """Reduce ``damage`` by the soak test's net hits."""
        ...


def element_part_label(element: DamageElement) -> str:
    """Translation key of the armor part for a damage element."""
    return f"{constants.LABEL_ELEMENT_PREFIX}.{element.value}"


def modified_armor_value(actor: Actor, damage: DamageData) -> int:
    """Armor value after AP and elemental protection (SR5 169)."""
    armor = actor.armor.total + damage.ap.value
    armor += actor.armor.element_rating(damage.element.value)
    return max(0, armor)


def reduce_damage_by_hits(damage: DamageData, hits: int, label: str) -> ResolvedDamage:
    """Reduce a damage record by hits under a unique part label.

    Negative hits count as zero and the modified value never drops below 0.

    Args:
        damage: Damage to reduce; left untouched.
        hits: Net hits of the resisting test.
        label: Label of the reduction part.

    Returns:
        The incoming record and its reduced copy.
    """
    hits = max(0, hits)
    modified = damage.model_copy(deep=True)
    modified.mod = add_unique_part(modified.mod, label, -hits)
    modified.value = calc_total(modified, minimum=0)
    return ResolvedDamage(incoming=damage, modified=modified)


class SoakRules:
    """Default soak rule catalog (SR5 152, 169, 228).

    Args:
        world: World context, used to resolve the damage source item.
    """

    def __init__(self, world: WorldContext) -> None:
        self.world = world

    # -------------------------------------------------------------------------
    # Pool parts
    # -------------------------------------------------------------------------

    def apply_all_soak_parts(
        self,
        parts: PartsList,
        actor: Actor,
        damage: DamageData,
    ) -> None:
        if damage.type.base == DamageType.MATRIX:
            self.apply_matrix_soak_parts(parts, actor)
        else:
            self.apply_physical_and_stun_soak_parts(parts, actor, damage)

    def apply_physical_and_stun_soak_parts(
        self,
        parts: PartsList,
        actor: Actor,
        damage: DamageData,
    ) -> None:
        """Body, armor, AP, elemental armor and soak bonus."""
        source_item = find_damage_source(self.world, damage)
        if source_item is not None and source_item.is_direct_combat_spell:
            # Direct combat spells ignore armor (SR5 283)
            spell = source_item.spell
            if spell is not None and spell.type == SpellType.MANA:
                parts.add_unique_part(constants.LABEL_WILLPOWER, actor.attributes.willpower)
            else:
                parts.add_unique_part(constants.LABEL_BODY, actor.attributes.body)
            return

        parts.add_unique_part(constants.LABEL_BODY, actor.attributes.body)
        self.apply_armor_parts(parts, actor, damage)

        if actor.modifiers.soak:
            parts.add_unique_part(constants.LABEL_SOAK_BONUS, actor.modifiers.soak)

    def apply_armor_parts(self, parts: PartsList, actor: Actor, damage: DamageData) -> None:
        """Armor with AP applied, plus elemental protection."""
        armor = actor.armor.total
        parts.add_unique_part(constants.LABEL_ARMOR, armor)

        # AP cannot remove more dice than the armor provides
        if damage.ap.value:
            parts.add_unique_part(constants.LABEL_AP, max(-armor, damage.ap.value))

        element = damage.element.value
        rating = actor.armor.element_rating(element)
        if rating:
            parts.add_unique_part(element_part_label(element), rating)

    def apply_matrix_soak_parts(self, parts: PartsList, actor: Actor) -> None:
        """Device rating and firewall (SR5 228)."""
        parts.add_unique_part(constants.LABEL_DEVICE_RATING, actor.matrix.device_rating)
        parts.add_unique_part(constants.LABEL_FIREWALL, actor.matrix.firewall)

    # -------------------------------------------------------------------------
    # Damage transforms
    # -------------------------------------------------------------------------

    def modify_damage_type(self, damage: DamageData, actor: Actor) -> DamageData:
        updated = damage.model_copy(deep=True)

        if actor.type == ActorType.VEHICLE:
            # Vehicles only take stun from electricity, as physical (SR5 170)
            if (
                updated.type.value == DamageType.STUN
                and updated.element.value == DamageElement.ELECTRICITY
            ):
                updated.type.value = DamageType.PHYSICAL
            return updated

        if not actor.type.is_living:
            return updated

        # Armor converts physical damage below its value to stun (SR5 168)
        if updated.type.value == DamageType.PHYSICAL:
            armor = modified_armor_value(actor, updated)
            if updated.value < armor:
                logger.debug(
                    "Physical damage converted to stun",
                    damage=updated.value,
                    modified_armor=armor,
                )
                updated.type.value = DamageType.STUN
        return updated

    def reduce_damage(self, actor: Actor, damage: DamageData, hits: int) -> ResolvedDamage:
        return reduce_damage_by_hits(damage, hits, constants.LABEL_SOAK_TEST)


__all__ = [
    "SoakRuleProvider",
    "SoakRules",
    "element_part_label",
    "modified_armor_value",
    "reduce_damage_by_hits",
]
