"""Enumeration types for the soak test engine."""

from __future__ import annotations

from enum import StrEnum


class DamageType(StrEnum):
    """Damage track the incoming harm is applied to."""

    PHYSICAL = "physical"
    STUN = "stun"
    MATRIX = "matrix"
    NONE = ""


class DamageElement(StrEnum):
    """Elemental tag carried by a damage event (SR5 170)."""

    FIRE = "fire"
    COLD = "cold"
    ACID = "acid"
    ELECTRICITY = "electricity"
    RADIATION = "radiation"
    NONE = ""


class ActorType(StrEnum):
    """Kind of actor, used by the damage type transforms."""

    CHARACTER = "character"
    CRITTER = "critter"
    SPIRIT = "spirit"
    VEHICLE = "vehicle"
    DEVICE = "device"
    SPRITE = "sprite"
    IC = "ic"

    @property
    def is_living(self) -> bool:
        """Whether the actor converts physical damage to stun under armor.

        Returns:
            True for characters, critters and spirits.
        """
        return self in {ActorType.CHARACTER, ActorType.CRITTER, ActorType.SPIRIT}


class ItemType(StrEnum):
    """Kind of item carried by an actor."""

    WEAPON = "weapon"
    AMMO = "ammo"
    ARMOR = "armor"
    SPELL = "spell"
    DEVICE = "device"
    MODIFICATION = "modification"
    EQUIPMENT = "equipment"


class SpellCategory(StrEnum):
    """Spell categories (SR5 283)."""

    COMBAT = "combat"
    DETECTION = "detection"
    HEALTH = "health"
    ILLUSION = "illusion"
    MANIPULATION = "manipulation"


class SpellType(StrEnum):
    """Whether a spell is mana or physical."""

    MANA = "mana"
    PHYSICAL = "physical"


class CombatSpellDirectness(StrEnum):
    """Direct or indirect combat spell (SR5 283)."""

    DIRECT = "direct"
    INDIRECT = "indirect"


__all__ = [
    "DamageType",
    "DamageElement",
    "ActorType",
    "ItemType",
    "SpellCategory",
    "SpellType",
    "CombatSpellDirectness",
]
