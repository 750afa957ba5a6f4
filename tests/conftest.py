"""Pytest configuration and shared fixtures.

This module provides common fixtures for the soakflow test suite:
actors, damage records, a world registry and recording collaborators
for the soak flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from soakflow.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "SOAKFLOW_DEBUG": "true",
        "SOAKFLOW_LOG_LEVEL": "DEBUG",
        "SOAKFLOW_DICE_HIT_THRESHOLD": "4",
        "SOAKFLOW_SOAK_KNOCKDOWN_THRESHOLD": "12",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def defender() -> Any:
    """A character with body 6, armor 12 and a physical limit of 8.

    Returns:
        Actor instance.
    """
    from soakflow.models import Actor, ArmorComponent, AttributesComponent

    return Actor(
        name="Street Samurai",
        attributes=AttributesComponent(body=6, strength=6, reaction=6, willpower=3),
        armor=ArmorComponent(value=12, fire=4),
    )


@pytest.fixture
def gel_rounds_pistol() -> Any:
    """A heavy pistol loaded with gel rounds.

    Returns:
        Item instance.
    """
    from soakflow.models import Item, ItemModification, ItemType

    return Item(
        name="Ares Predator V",
        type=ItemType.WEAPON,
        modifications=[ItemModification(name="Gel Rounds", equipped=True)],
    )


@pytest.fixture
def attacker(gel_rounds_pistol: Any) -> Any:
    """An attacker carrying the gel rounds pistol.

    Returns:
        Actor instance.
    """
    from soakflow.models import Actor

    return Actor(name="Lone Star Officer", items=[gel_rounds_pistol])


@pytest.fixture
def world(defender: Any, attacker: Any) -> Any:
    """A world holding the defender and the attacker.

    Returns:
        World instance.
    """
    from soakflow.models import World

    registry = World()
    registry.add_actor(defender)
    registry.add_actor(attacker)
    return registry


@pytest.fixture
def incoming_damage() -> Any:
    """Six physical damage with AP -2 built from base and one part.

    Returns:
        DamageData instance.
    """
    from soakflow.models import ModifierPart, ModifiableValue, default_damage_data

    return default_damage_data(
        base=5,
        value=6,
        mod=[ModifierPart(name="SR5.NetHits", value=1)],
        ap=ModifiableValue(base=-2, value=-2),
    )


# =============================================================================
# Collaborator Fixtures
# =============================================================================


class RecordingPublisher:
    """Publisher that keeps every published options object."""

    def __init__(self) -> None:
        self.published: list[Any] = []

    async def publish(self, options: Any) -> None:
        self.published.append(options)


class FixedResolver:
    """Resolver that returns a fixed number of hits, or aborts."""

    def __init__(self, hits: int | None) -> None:
        self.hits = hits
        self.requests: list[Any] = []

    async def resolve(self, options: Any) -> Any:
        from soakflow.engine.dice import SoakRoll

        self.requests.append(options)
        if self.hits is None:
            return None
        pool = sum(part.value for part in options.parts)
        return SoakRoll(
            pool=pool,
            dice=[],
            hits=self.hits,
            ones=0,
            expression=f"{pool}d6",
            title=options.title,
            parts=options.parts,
        )


@pytest.fixture
def publisher() -> RecordingPublisher:
    """Create a publisher that records published results."""
    return RecordingPublisher()


@pytest.fixture
def fixed_resolver() -> FixedResolver:
    """Create a resolver that always scores two hits."""
    return FixedResolver(hits=2)


@pytest.fixture
def make_resolver() -> type[FixedResolver]:
    """Give tests access to the FixedResolver class."""
    return FixedResolver


@pytest.fixture
def pool_roller() -> Any:
    """Create a PoolRoller with a fixed seed for reproducible tests.

    Returns:
        PoolRoller instance with fixed seed.
    """
    from soakflow.engine.dice import PoolRoller

    return PoolRoller(seed=42)
