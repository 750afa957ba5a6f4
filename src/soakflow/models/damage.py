"""Damage records for soak test resolution.

A damage record carries the magnitude and armor penetration (AP) of an
incoming hit as ``base`` plus named modifier parts, together with its
damage type, element and a weak reference to where it came from.

INVARIANT:
After any reconciliation step ``value == base + total(mod)`` and
``ap.value == ap.base + total(ap.mod)``. The displayed totals never
diverge from their parts breakdown.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soakflow.models.enums import DamageElement, DamageType
from soakflow.models.parts import ModifierPart, parts_total


class ModifiableValue(BaseModel):
    """A numeric value derived from a base and modifier parts.

    Attributes:
        base: Unmodified value.
        value: Current total.
        mod: Named contributions on top of the base.
    """

    model_config = ConfigDict(extra="forbid")

    base: int = Field(default=0, description="Unmodified value")
    value: int = Field(default=0, description="Current total")
    mod: list[ModifierPart] = Field(default_factory=list, description="Modifier parts")


def calc_total(value: ModifiableValue, *, minimum: int | None = None) -> int:
    """Compute ``base + sum(mod)`` for a modifiable value.

    Args:
        value: The value to total.
        minimum: Optional lower clamp.

    Returns:
        The computed total.
    """
    total = value.base + parts_total(value.mod)
    if minimum is not None:
        total = max(minimum, total)
    return total


class DamageTypeField(BaseModel):
    """Damage type with its unmodified origin and current effective type."""

    model_config = ConfigDict(extra="forbid")

    base: DamageType = DamageType.PHYSICAL
    value: DamageType = DamageType.PHYSICAL


class DamageElementField(BaseModel):
    """Elemental tag of the damage."""

    model_config = ConfigDict(extra="forbid")

    base: DamageElement = DamageElement.NONE
    value: DamageElement = DamageElement.NONE


class DamageSource(BaseModel):
    """Weak reference to the actor and item that caused the damage.

    These are lookup keys into the world registry, never owned references.
    """

    model_config = ConfigDict(extra="forbid")

    actor_id: str = ""
    item_id: str = ""
    item_name: str = ""
    item_type: str = ""

    @property
    def is_resolvable(self) -> bool:
        """Whether both lookup keys are present."""
        return bool(self.actor_id and self.item_id)


class DamageData(ModifiableValue):
    """One instance of incoming harm.

    Attributes:
        type: Damage type (origin and effective).
        element: Elemental tag.
        ap: Armor penetration, same base/mod relationship as magnitude.
        attribute: Attribute the damage was derived from, if any.
        source: Weak reference to the originating actor/item.
    """

    type: DamageTypeField = Field(default_factory=DamageTypeField)
    element: DamageElementField = Field(default_factory=DamageElementField)
    ap: ModifiableValue = Field(default_factory=ModifiableValue)
    attribute: str = ""
    source: DamageSource | None = None

    def is_consistent(self) -> bool:
        """Check that both totals match their parts breakdown."""
        return self.value == calc_total(self) and self.ap.value == calc_total(self.ap)

    def summary(self) -> str:
        """Short human-readable form, e.g. ``'6P AP -2 (fire)'``."""
        letter = self.type.value.value[:1].upper() or "-"
        text = f"{self.value}{letter} AP {self.ap.value:+d}"
        if self.element.value:
            text += f" ({self.element.value.value})"
        return text


def default_damage_data(**overrides: Any) -> DamageData:
    """Build the zeroed default damage record.

    Args:
        **overrides: Field values to set on the default record.

    Returns:
        A new physical damage record with value 0 and AP 0.
    """
    return DamageData.model_validate(overrides)


class ResolvedDamage(BaseModel):
    """Pre-roll and post-roll damage records of one soak test.

    Both records are deep copied in, so later changes to the records the
    package was built from never reach a published package. The copies
    themselves are plain records; consumers treat them as read-only.

    Attributes:
        incoming: Reconciled damage before the soak roll.
        modified: Damage after the type transform and net hits reduction.
    """

    model_config = ConfigDict(frozen=True)

    incoming: DamageData
    modified: DamageData

    @field_validator("incoming", "modified")
    @classmethod
    def copy_record(cls, record: DamageData) -> DamageData:
        return record.model_copy(deep=True)


__all__ = [
    "ModifiableValue",
    "DamageTypeField",
    "DamageElementField",
    "DamageSource",
    "DamageData",
    "ResolvedDamage",
    "calc_total",
    "default_damage_data",
]
