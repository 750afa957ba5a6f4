"""Publishing soak test results.

The publisher receives the finished roll and damage package. The default
``ChatLog`` keeps a structured message per soak test and writes it to the
application log.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from soakflow.core.logging import get_logger
from soakflow.engine.dice import SoakRoll
from soakflow.models.actors import Actor
from soakflow.models.damage import ResolvedDamage


logger = get_logger(__name__)


@dataclass(frozen=True)
class SoakChatOptions:
    """Everything the publisher gets about one soak test."""

    title: str
    roll: SoakRoll
    actor: Actor
    damage: ResolvedDamage
    knocked_down: bool = False


@runtime_checkable
class ResultPublisher(Protocol):
    """Renders a finished soak test for audit and display."""

    async def publish(self, options: SoakChatOptions) -> None:
        ...


class SoakChatMessage(BaseModel):
    """A rendered soak test result.

    Attributes:
        title: Test title.
        actor_id: Defender id.
        actor_name: Defender name.
        pool: Dice rolled.
        hits: Net hits.
        glitch: Whether the roll glitched.
        incoming: Summary of the damage before the roll.
        modified: Summary of the damage after the roll.
        knocked_down: Whether the defender is knocked down.
        damage: The full damage package.
        created_at: When the message was created.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    actor_id: str
    actor_name: str
    pool: int
    hits: int
    glitch: bool
    incoming: str
    modified: str
    knocked_down: bool = False
    damage: ResolvedDamage
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def text(self) -> str:
        """Plain text rendering of the message."""
        lines = [
            f"{self.title}: {self.actor_name}",
            f"Pool {self.pool}, hits {self.hits}" + (" (glitch)" if self.glitch else ""),
            f"Incoming {self.incoming} -> {self.modified}",
        ]
        if self.knocked_down:
            lines.append("Knocked down")
        return "\n".join(lines)


class ChatLog:
    """In-memory chat log publisher."""

    def __init__(self) -> None:
        self.messages: list[SoakChatMessage] = []

    async def publish(self, options: SoakChatOptions) -> None:
        message = SoakChatMessage(
            title=options.title,
            actor_id=options.actor.id,
            actor_name=options.actor.name,
            pool=options.roll.pool,
            hits=options.roll.hits,
            glitch=options.roll.glitch,
            incoming=options.damage.incoming.summary(),
            modified=options.damage.modified.summary(),
            knocked_down=options.knocked_down,
            damage=options.damage,
        )
        self.messages.append(message)
        logger.info(
            "Soak result published",
            title=message.title,
            actor=message.actor_name,
            hits=message.hits,
            incoming=message.incoming,
            modified=message.modified,
            knocked_down=message.knocked_down,
        )

    @property
    def last(self) -> SoakChatMessage | None:
        return self.messages[-1] if self.messages else None


__all__ = [
    "SoakChatOptions",
    "ResultPublisher",
    "SoakChatMessage",
    "ChatLog",
]
