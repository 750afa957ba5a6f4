"""World context: read-only access to actors and translated labels.

The soak engine never reaches into global state. Anything it needs to
look up (the actor behind a damage source, a translated item name) goes
through an injected ``WorldContext``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from soakflow.core.constants import DEFAULT_TRANSLATIONS
from soakflow.core.logging import get_logger
from soakflow.models.actors import Actor, Item


if TYPE_CHECKING:
    from soakflow.models.damage import DamageData

logger = get_logger(__name__)


@runtime_checkable
class WorldContext(Protocol):
    """Read-only lookup capability over the game world."""

    def get_actor(self, actor_id: str) -> Actor | None:
        """Return the actor with the given id, or None."""
        ...

    def localize(self, key: str) -> str:
        """Return the translated label for a key, or the key itself."""
        ...


class World(BaseModel):
    """In-memory world registry.

    Attributes:
        actors: Registered actors by id.
        translations: Label translations by key.
    """

    model_config = ConfigDict(extra="forbid")

    actors: dict[str, Actor] = Field(default_factory=dict)
    translations: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_TRANSLATIONS))

    def add_actor(self, actor: Actor) -> Actor:
        """Register an actor under its id."""
        self.actors[actor.id] = actor
        return actor

    def get_actor(self, actor_id: str) -> Actor | None:
        return self.actors.get(actor_id)

    def localize(self, key: str) -> str:
        return self.translations.get(key, key)


def find_damage_source(world: WorldContext, damage: DamageData) -> Item | None:
    """Resolve the item that caused a damage event.

    Every link of the lookup may miss: no source recorded, the attacking
    actor is gone, or it no longer owns the item. Any miss yields None.

    Args:
        world: World to look the source up in.
        damage: Damage record carrying the weak source reference.

    Returns:
        The originating item, or None.
    """
    source = damage.source
    if source is None or not source.is_resolvable:
        return None

    attacker = world.get_actor(source.actor_id)
    if attacker is None:
        logger.debug("Damage source actor not found", actor_id=source.actor_id)
        return None

    item = attacker.get_item(source.item_id)
    if item is None:
        logger.debug(
            "Damage source item not found",
            actor_id=source.actor_id,
            item_id=source.item_id,
        )
    return item


__all__ = [
    "WorldContext",
    "World",
    "find_damage_source",
]
