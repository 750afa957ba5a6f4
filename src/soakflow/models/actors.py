"""Actor and item models consumed by the soak rules.

Actors are composed of small components, following the composition
over inheritance pattern. Only the data the soak test reads is modeled:
attributes for the soak pool and physical limit, armor with its
elemental ratings, matrix attributes, and carried items with their
modifications.

Example:
    >>> actor = Actor(
    ...     name="Street Samurai",
    ...     attributes=AttributesComponent(body=5, strength=5, reaction=4),
    ...     armor=ArmorComponent(value=12),
    ... )
    >>> actor.physical_limit
    7
"""

from __future__ import annotations

import math
from typing import Annotated
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field

from soakflow.models.enums import (
    ActorType,
    CombatSpellDirectness,
    DamageElement,
    ItemType,
    SpellCategory,
    SpellType,
)
from soakflow.models.parts import ModifierPart, parts_total


# =============================================================================
# Type Definitions
# =============================================================================


AttributeRating = Annotated[int, Field(ge=0, le=20, description="Attribute rating")]


def _new_id() -> str:
    return uuid4().hex[:16]


# =============================================================================
# Components
# =============================================================================


class AttributesComponent(BaseModel):
    """Physical and mental attributes (SR5 52)."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    body: AttributeRating = 1
    agility: AttributeRating = 1
    reaction: AttributeRating = 1
    strength: AttributeRating = 1
    willpower: AttributeRating = 1
    logic: AttributeRating = 1
    intuition: AttributeRating = 1
    charisma: AttributeRating = 1


class LimitsComponent(BaseModel):
    """Modifiers applied on top of the derived limits."""

    model_config = ConfigDict(extra="forbid")

    physical_mod: list[ModifierPart] = Field(default_factory=list)


class ArmorComponent(BaseModel):
    """Worn armor and its elemental protection (SR5 169).

    Attributes:
        value: Base armor rating.
        mod: Armor modifier parts (accessories, spells, ...).
        fire: Additional armor against fire damage.
        cold: Additional armor against cold damage.
        acid: Additional armor against acid damage.
        electricity: Additional armor against electricity damage.
        radiation: Additional armor against radiation damage.
    """

    model_config = ConfigDict(extra="forbid")

    value: int = Field(default=0, ge=0)
    mod: list[ModifierPart] = Field(default_factory=list)
    fire: int = Field(default=0, ge=0)
    cold: int = Field(default=0, ge=0)
    acid: int = Field(default=0, ge=0)
    electricity: int = Field(default=0, ge=0)
    radiation: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        """Armor rating including modifier parts."""
        return self.value + parts_total(self.mod)

    def element_rating(self, element: DamageElement) -> int:
        """Additional armor against a damage element, 0 when not elemental."""
        if element == DamageElement.NONE:
            return 0
        return getattr(self, element.value)


class MatrixComponent(BaseModel):
    """Matrix attributes used to soak matrix damage."""

    model_config = ConfigDict(extra="forbid")

    device_rating: int = Field(default=0, ge=0)
    firewall: int = Field(default=0, ge=0)


class ModifiersComponent(BaseModel):
    """Situational modifiers of an actor."""

    model_config = ConfigDict(extra="forbid")

    soak: int = Field(default=0, description="Bonus dice on soak tests")


# =============================================================================
# Items
# =============================================================================


class ItemModification(BaseModel):
    """A modification or ammunition loaded into an item.

    Attributes:
        id: Unique identifier.
        name: Display name, matched against translated labels.
        equipped: Whether the modification is currently active.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1)
    equipped: bool = False


class SpellData(BaseModel):
    """Spell details needed by the soak rules."""

    model_config = ConfigDict(extra="forbid")

    category: SpellCategory = SpellCategory.COMBAT
    type: SpellType = SpellType.PHYSICAL
    directness: CombatSpellDirectness = CombatSpellDirectness.INDIRECT


class Item(BaseModel):
    """An item owned by an actor."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1)
    type: ItemType = ItemType.WEAPON
    modifications: list[ItemModification] = Field(default_factory=list)
    spell: SpellData | None = None

    @property
    def equipped_modifications(self) -> list[ItemModification]:
        return [mod for mod in self.modifications if mod.equipped]

    @property
    def is_direct_combat_spell(self) -> bool:
        """Whether the item is a direct combat spell (SR5 283)."""
        return (
            self.type == ItemType.SPELL
            and self.spell is not None
            and self.spell.category == SpellCategory.COMBAT
            and self.spell.directness == CombatSpellDirectness.DIRECT
        )


# =============================================================================
# Actor
# =============================================================================


class Actor(BaseModel):
    """An entity that can be targeted by damage.

    Attributes:
        id: Unique identifier, the key used by damage sources.
        name: Display name.
        type: Actor type.
        attributes: Attribute ratings.
        limits: Limit modifiers.
        armor: Worn armor.
        matrix: Matrix attributes.
        modifiers: Situational modifiers.
        items: Owned items.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(default_factory=_new_id)
    name: str = Field(min_length=1, max_length=100)
    type: ActorType = ActorType.CHARACTER
    attributes: AttributesComponent = Field(default_factory=AttributesComponent)
    limits: LimitsComponent = Field(default_factory=LimitsComponent)
    armor: ArmorComponent = Field(default_factory=ArmorComponent)
    matrix: MatrixComponent = Field(default_factory=MatrixComponent)
    modifiers: ModifiersComponent = Field(default_factory=ModifiersComponent)
    items: list[Item] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def physical_limit(self) -> int:
        """Physical limit: [(STR x 2) + BOD + REA] / 3, rounded up (SR5 101)."""
        attrs = self.attributes
        base = math.ceil((attrs.strength * 2 + attrs.body + attrs.reaction) / 3)
        return base + parts_total(self.limits.physical_mod)

    def get_item(self, item_id: str) -> Item | None:
        """Find an owned item by id."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


__all__ = [
    "AttributesComponent",
    "LimitsComponent",
    "ArmorComponent",
    "MatrixComponent",
    "ModifiersComponent",
    "ItemModification",
    "SpellData",
    "Item",
    "Actor",
]
