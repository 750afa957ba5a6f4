"""Pydantic V2 schemas for the soak test engine.

Submodules:
    enums: Damage types, elements, actor and item kinds.
    parts: Modifier parts and the keyed PartsList accumulator.
    damage: Damage records and the resolved damage package.
    actors: Actors, their components and items.
    world: World context protocol and in-memory registry.
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from soakflow.models.enums import (
    ActorType,
    CombatSpellDirectness,
    DamageElement,
    DamageType,
    ItemType,
    SpellCategory,
    SpellType,
)

# =============================================================================
# Parts
# =============================================================================
from soakflow.models.parts import (
    ModifierPart,
    PartsList,
    add_unique_part,
    parts_total,
)

# =============================================================================
# Damage
# =============================================================================
from soakflow.models.damage import (
    DamageData,
    DamageElementField,
    DamageSource,
    DamageTypeField,
    ModifiableValue,
    ResolvedDamage,
    calc_total,
    default_damage_data,
)

# =============================================================================
# Actors & World
# =============================================================================
from soakflow.models.actors import (
    Actor,
    ArmorComponent,
    AttributesComponent,
    Item,
    ItemModification,
    LimitsComponent,
    MatrixComponent,
    ModifiersComponent,
    SpellData,
)
from soakflow.models.world import World, WorldContext, find_damage_source


__all__ = [
    # Enumerations
    "ActorType",
    "CombatSpellDirectness",
    "DamageElement",
    "DamageType",
    "ItemType",
    "SpellCategory",
    "SpellType",
    # Parts
    "ModifierPart",
    "PartsList",
    "add_unique_part",
    "parts_total",
    # Damage
    "DamageData",
    "DamageElementField",
    "DamageSource",
    "DamageTypeField",
    "ModifiableValue",
    "ResolvedDamage",
    "calc_total",
    "default_damage_data",
    # Actors & World
    "Actor",
    "ArmorComponent",
    "AttributesComponent",
    "Item",
    "ItemModification",
    "LimitsComponent",
    "MatrixComponent",
    "ModifiersComponent",
    "SpellData",
    "World",
    "WorldContext",
    "find_damage_source",
]
