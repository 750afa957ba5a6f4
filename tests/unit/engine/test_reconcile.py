"""Tests for folding operator input into damage records."""

from __future__ import annotations

from soakflow.engine.soak_flow import update_damage_with_user_data
from soakflow.models import (
    DamageData,
    DamageElement,
    DamageType,
    ModifierPart,
    default_damage_data,
)


def _parts(damage_parts: list[ModifierPart]) -> dict[str, int]:
    return {part.name: part.value for part in damage_parts}


class TestDamageDiff:
    """Tests for the damage value diff."""

    def test_increase_adds_user_input(self) -> None:
        """Raising 5 to 8 adds a UserInput part of 3."""
        initial = default_damage_data(base=5, value=5)

        updated = update_damage_with_user_data(initial, 8, DamageType.PHYSICAL, 0)

        assert _parts(updated.mod) == {"UserInput": 3}
        assert updated.value == 8
        assert updated.base == 5

    def test_decrease_keeps_existing_parts(self, incoming_damage: DamageData) -> None:
        """Existing parts keep their values next to a negative correction."""
        updated = update_damage_with_user_data(incoming_damage, 4, DamageType.PHYSICAL, -2)

        assert _parts(updated.mod) == {"SR5.NetHits": 1, "UserInput": -2}
        assert updated.value == 4

    def test_unchanged_total_adds_nothing(self, incoming_damage: DamageData) -> None:
        """Confirming the computed total adds no part."""
        updated = update_damage_with_user_data(incoming_damage, 6, DamageType.PHYSICAL, -2)

        assert _parts(updated.mod) == {"SR5.NetHits": 1}
        assert _parts(updated.ap.mod) == {}

    def test_stale_value_is_recomputed(self) -> None:
        """A stored value that disagrees with its parts is recomputed."""
        initial = DamageData(base=5, value=9)

        updated = update_damage_with_user_data(initial, 5, DamageType.PHYSICAL, 0)

        assert updated.value == 5
        assert updated.mod == []

    def test_earlier_correction_replaced(self, incoming_damage: DamageData) -> None:
        """A second correction replaces the first instead of stacking."""
        first = update_damage_with_user_data(incoming_damage, 8, DamageType.PHYSICAL, -2)
        second = update_damage_with_user_data(first, 10, DamageType.PHYSICAL, -2)

        assert _parts(second.mod) == {"SR5.NetHits": 1, "UserInput": 4}
        assert second.value == 10


class TestApDiff:
    """Tests for the AP diff."""

    def test_ap_change(self, incoming_damage: DamageData) -> None:
        """A changed AP gets its own UserInput part."""
        updated = update_damage_with_user_data(incoming_damage, 6, DamageType.PHYSICAL, -4)

        assert _parts(updated.ap.mod) == {"UserInput": -2}
        assert updated.ap.value == -4
        assert updated.ap.base == -2


class TestTypeAndElement:
    """Tests for the absolute fields."""

    def test_type_change_sets_base_and_value(self, incoming_damage: DamageData) -> None:
        """A changed type overwrites both origin and effective type."""
        updated = update_damage_with_user_data(incoming_damage, 6, DamageType.STUN, -2)

        assert updated.type.base == DamageType.STUN
        assert updated.type.value == DamageType.STUN

    def test_same_type_keeps_effective_value(self) -> None:
        """Confirming the origin type keeps an already transformed value."""
        initial = default_damage_data(type={"base": "physical", "value": "stun"})

        updated = update_damage_with_user_data(initial, 0, DamageType.PHYSICAL, 0)

        assert updated.type.value == DamageType.STUN

    def test_element_set_when_given(self, incoming_damage: DamageData) -> None:
        """A confirmed element replaces the current one."""
        updated = update_damage_with_user_data(
            incoming_damage, 6, DamageType.PHYSICAL, -2, DamageElement.FIRE
        )

        assert updated.element.value == DamageElement.FIRE

    def test_empty_element_keeps_current(self) -> None:
        """An empty element leaves the record's element alone."""
        initial = default_damage_data(element={"base": "acid", "value": "acid"})

        updated = update_damage_with_user_data(initial, 0, DamageType.PHYSICAL, 0, "")

        assert updated.element.value == DamageElement.ACID


class TestReconciliationProperties:
    """Properties that hold for every reconciliation."""

    def test_input_not_mutated(self, incoming_damage: DamageData) -> None:
        """The initial record is never changed."""
        before = incoming_damage.model_dump()

        update_damage_with_user_data(
            incoming_damage, 11, DamageType.STUN, -6, DamageElement.COLD
        )

        assert incoming_damage.model_dump() == before

    def test_idempotent(self, incoming_damage: DamageData) -> None:
        """Reconciling a reconciled record with the same totals changes nothing."""
        once = update_damage_with_user_data(incoming_damage, 9, DamageType.STUN, -3)
        twice = update_damage_with_user_data(once, 9, DamageType.STUN, -3)

        assert twice == once

    def test_totals_match_parts(self, incoming_damage: DamageData) -> None:
        """Value and AP always equal base plus parts afterwards."""
        for value, ap in [(0, 0), (3, -1), (6, -2), (14, -8)]:
            updated = update_damage_with_user_data(
                incoming_damage, value, DamageType.PHYSICAL, ap
            )

            assert updated.is_consistent()
            assert updated.value == value
            assert updated.ap.value == ap
