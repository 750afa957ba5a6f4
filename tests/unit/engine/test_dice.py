"""Tests for dice pool rolling."""

from __future__ import annotations

import asyncio

import pytest

from soakflow.core.config import DiceSettings
from soakflow.core.exceptions import DiceRollError
from soakflow.engine.dice import AdvancedRollOptions, DiceResolver, PoolRoller, SoakRoll
from soakflow.models import Actor, ModifierPart


class TestPoolRoller:
    """Tests for the PoolRoller class."""

    def test_roll_pool(self, pool_roller: PoolRoller) -> None:
        """A pool rolls one d6 per die and counts hits."""
        roll = pool_roller.roll_pool(12)

        assert roll.pool == 12
        assert roll.expression == "12d6"
        assert len(roll.dice) == 12
        assert all(1 <= face <= 6 for face in roll.dice)
        assert roll.hits == sum(1 for face in roll.dice if face >= 5)
        assert roll.ones == roll.dice.count(1)

    def test_zero_pool_rolls_nothing(self, pool_roller: PoolRoller) -> None:
        """An empty pool scores no hits."""
        roll = pool_roller.roll_pool(0)

        assert roll.dice == []
        assert roll.hits == 0
        assert not roll.glitch

    def test_negative_pool_clamped(self, pool_roller: PoolRoller) -> None:
        """A negative pool is treated as zero dice."""
        roll = pool_roller.roll_pool(-3)

        assert roll.pool == 0
        assert roll.expression == "0d6"

    def test_custom_hit_threshold(self) -> None:
        """A lower threshold counts more faces as hits."""
        roller = PoolRoller(hit_threshold=4, seed=7)
        roll = roller.roll_pool(20)

        assert roll.hits == sum(1 for face in roll.dice if face >= 4)

    @pytest.mark.parametrize("threshold", [1, 7])
    def test_invalid_hit_threshold(self, threshold: int) -> None:
        """Thresholds outside the die faces are rejected."""
        with pytest.raises(DiceRollError):
            PoolRoller(hit_threshold=threshold)

    def test_from_settings(self) -> None:
        """Rollers pick up the configured threshold."""
        roller = PoolRoller.from_settings(DiceSettings(hit_threshold=3, seed=1))

        assert roller.hit_threshold == 3

    def test_from_application_settings(self, mock_env_vars: dict[str, str]) -> None:
        """Without explicit settings the environment is used."""
        roller = PoolRoller.from_settings()

        assert roller.hit_threshold == 4

    def test_title_and_parts_kept(self, pool_roller: PoolRoller) -> None:
        """The roll reports its title and the parts it came from."""
        parts = [ModifierPart(name="SR5.Body", value=3)]
        roll = pool_roller.roll_pool(3, title="Soak Test", parts=parts)

        assert roll.title == "Soak Test"
        assert roll.parts == parts


class TestResolve:
    """Tests for the async resolver interface."""

    def test_satisfies_protocol(self, pool_roller: PoolRoller) -> None:
        """PoolRoller can be used as a DiceResolver."""
        assert isinstance(pool_roller, DiceResolver)

    def test_pool_from_parts(self, pool_roller: PoolRoller) -> None:
        """The pool size is the total of the option's parts."""
        options = AdvancedRollOptions(
            actor=Actor(name="Runner"),
            parts=[
                ModifierPart(name="SR5.Body", value=5),
                ModifierPart(name="SR5.Armor", value=9),
                ModifierPart(name="SR5.AP", value=-2),
            ],
            title="Soak Test",
        )

        roll = asyncio.run(pool_roller.resolve(options))

        assert roll is not None
        assert roll.pool == 12
        assert len(roll.dice) == 12
        assert roll.title == "Soak Test"
        assert [p.name for p in roll.parts] == ["SR5.Body", "SR5.Armor", "SR5.AP"]


class TestSoakRoll:
    """Tests for glitch detection."""

    def test_glitch(self) -> None:
        """More than half ones is a glitch."""
        roll = SoakRoll(pool=4, dice=[1, 1, 1, 5], hits=1, ones=3, expression="4d6")

        assert roll.glitch
        assert not roll.critical_glitch

    def test_critical_glitch(self) -> None:
        """A glitch without hits is critical."""
        roll = SoakRoll(pool=3, dice=[1, 1, 2], hits=0, ones=2, expression="3d6")

        assert roll.critical_glitch

    def test_exactly_half_is_not_a_glitch(self) -> None:
        """Exactly half the pool showing ones is not a glitch."""
        roll = SoakRoll(pool=4, dice=[1, 1, 3, 6], hits=1, ones=2, expression="4d6")

        assert not roll.glitch
