"""Dice pool resolution for soak tests.

Soak tests roll a pool of six-sided dice sized by the total of the soak
parts and count hits. Rolling goes through the d20 library so pools are
parsed, rolled and reported the same way as any other dice expression.

Example:
    >>> roller = PoolRoller(seed=42)
    >>> roll = roller.roll_pool(8)
    >>> 0 <= roll.hits <= 8
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from soakflow.core import constants
from soakflow.core.config import DiceSettings, get_settings
from soakflow.core.exceptions import DiceRollError
from soakflow.core.logging import get_logger
from soakflow.models.parts import ModifierPart, PartsList


if TYPE_CHECKING:
    from soakflow.models.actors import Actor

logger = get_logger(__name__)


@dataclass(frozen=True)
class AdvancedRollOptions:
    """Everything a dice resolver needs to run one test.

    Attributes:
        actor: Actor rolling the test.
        parts: Final modifier parts forming the pool.
        title: Display title of the test.
        event: Triggering UI event token, passed through untouched.
        extended: Whether this is an extended test.
        wounds: Whether wound modifiers apply.
        hide_roll_message: Whether the resolver should skip its own message.
    """

    actor: Actor
    parts: list[ModifierPart]
    title: str
    event: Any = None
    extended: bool = False
    wounds: bool = False
    hide_roll_message: bool = True


@dataclass(frozen=True)
class SoakRoll:
    """Result of one dice pool trial.

    Attributes:
        pool: Number of dice rolled.
        dice: Individual die faces.
        hits: Net hits (dice at or above the hit threshold).
        ones: Number of dice showing a one.
        expression: The dice expression that was rolled.
        title: Display title of the test.
        parts: Parts the pool was built from.
    """

    pool: int
    dice: list[int]
    hits: int
    ones: int
    expression: str
    title: str = ""
    parts: list[ModifierPart] = field(default_factory=list)

    @property
    def glitch(self) -> bool:
        """More than half the pool shows ones (SR5 45)."""
        return self.pool > 0 and self.ones > self.pool / 2

    @property
    def critical_glitch(self) -> bool:
        """A glitch with no hits."""
        return self.glitch and self.hits == 0


@runtime_checkable
class DiceResolver(Protocol):
    """Performs one probabilistic trial for a soak test."""

    async def resolve(self, options: AdvancedRollOptions) -> SoakRoll | None:
        """Roll the test, or return None if the operator aborts."""
        ...


class PoolRoller:
    """Roll d6 pools through the d20 library and count hits.

    Example:
        >>> roller = PoolRoller()
        >>> roll = roller.roll_pool(12)
        >>> print(f"Hits: {roll.hits}")
    """

    def __init__(
        self,
        *,
        hit_threshold: int = constants.HIT_THRESHOLD,
        seed: int | None = None,
    ) -> None:
        """Initialize the pool roller.

        Args:
            hit_threshold: Lowest die face counted as a hit.
            seed: Optional random seed for reproducible rolls.
        """
        if not 2 <= hit_threshold <= constants.DICE_SIDES:
            raise DiceRollError(
                f"Hit threshold must be between 2 and {constants.DICE_SIDES}",
                details={"hit_threshold": hit_threshold},
            )
        self.hit_threshold = hit_threshold
        if seed is not None:
            import random

            random.seed(seed)
        logger.info("PoolRoller initialized", hit_threshold=hit_threshold, seed=seed)

    @classmethod
    def from_settings(cls, settings: DiceSettings | None = None) -> PoolRoller:
        """Build a roller from dice settings.

        Args:
            settings: Dice settings; the application settings when omitted.

        Returns:
            A configured PoolRoller.
        """
        settings = settings or get_settings().dice
        return cls(hit_threshold=settings.hit_threshold, seed=settings.seed)

    def roll_pool(
        self,
        pool: int,
        *,
        title: str = "",
        parts: list[ModifierPart] | None = None,
    ) -> SoakRoll:
        """Roll a pool of d6 and count hits.

        A pool of zero or fewer dice rolls nothing and scores no hits.

        Args:
            pool: Number of dice.
            title: Display title of the test.
            parts: Parts the pool was built from.

        Returns:
            SoakRoll with the individual dice and hit count.

        Raises:
            DiceRollError: If the dice library fails.
        """
        pool = max(0, pool)
        expression = f"{pool}d{constants.DICE_SIDES}"
        dice: list[int] = []

        if pool:
            try:
                import d20
            except ImportError as exc:
                raise DiceRollError(
                    "d20 library not installed. Install with: pip install d20",
                    expression=expression,
                ) from exc

            try:
                result = d20.roll(expression)
            except Exception as exc:
                raise DiceRollError(
                    f"Invalid dice expression: {exc}",
                    expression=expression,
                ) from exc
            dice = self._extract_dice_values(result.expr)

        roll = SoakRoll(
            pool=pool,
            dice=dice,
            hits=sum(1 for face in dice if face >= self.hit_threshold),
            ones=sum(1 for face in dice if face == constants.GLITCH_FACE),
            expression=expression,
            title=title,
            parts=list(parts or []),
        )
        logger.info(
            "Pool rolled",
            expression=expression,
            hits=roll.hits,
            glitch=roll.glitch,
        )
        return roll

    def _extract_dice_values(self, expr: Any) -> list[int]:
        """Extract kept die faces from a d20 expression tree."""
        import d20

        values: list[int] = []

        def traverse(node: Any) -> None:
            if isinstance(node, d20.Dice):
                for die in node.values:
                    if getattr(die, "kept", True):
                        values.append(die.number)
            elif hasattr(node, "children"):
                for child in node.children:
                    traverse(child)

        traverse(expr)
        return values

    async def resolve(self, options: AdvancedRollOptions) -> SoakRoll | None:
        """Roll the pool formed by the option's parts.

        The default roller has no interactive step and never aborts.
        """
        parts = PartsList(options.parts)
        return self.roll_pool(parts.total, title=options.title, parts=parts.list)


__all__ = [
    "AdvancedRollOptions",
    "SoakRoll",
    "DiceResolver",
    "PoolRoller",
]
