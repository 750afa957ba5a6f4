"""Soak Flow - resolving one incoming damage event.

This module sequences a soak test:
1. PREVIEW: Build the soak pool for the incoming damage (display only)
2. PROMPT: Operator confirms or corrects damage, AP, type and element
3. RECONCILE: Fold the corrections into the damage record as parts
4. ROLL: Build the final pool from scratch and roll it
5. EFFECTS: Transform the damage type, reduce by hits, check knockdown
6. PUBLISH: Hand the result to the publisher

Canceling the prompt or aborting the roll ends the flow with ``None``.
Nothing is published in that case.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from soakflow.core import constants
from soakflow.core.config import Settings, get_settings
from soakflow.core.exceptions import InvalidGameStateError
from soakflow.core.logging import bind_context, get_logger, unbind_context
from soakflow.engine.chat import ResultPublisher, SoakChatOptions
from soakflow.engine.dice import AdvancedRollOptions, DiceResolver, SoakRoll
from soakflow.engine.knockdown import knocks_down
from soakflow.engine.prompts import DamagePromptFactory
from soakflow.engine.soak_rules import SoakRuleProvider, SoakRules
from soakflow.models.actors import Actor
from soakflow.models.damage import (
    DamageData,
    ModifiableValue,
    ResolvedDamage,
    calc_total,
    default_damage_data,
)
from soakflow.models.enums import DamageElement, DamageType
from soakflow.models.parts import ModifierPart, PartsInput, PartsList, add_unique_part
from soakflow.models.world import WorldContext


logger = get_logger(__name__)


# =============================================================================
# Options & State
# =============================================================================


@dataclass
class SoakRollOptions:
    """Information about the incoming damage, if already known.

    Attributes:
        damage: Incoming damage record; a zeroed default is used when None.
        event: Triggering UI event token, passed to the dice resolver.
    """

    damage: DamageData | None = None
    event: Any = None


class SoakState(StrEnum):
    """Progress of a single soak test."""

    START = "start"
    PREVIEW_COMPUTED = "preview_computed"
    AWAITING_USER_INPUT = "awaiting_user_input"
    CANCELED = "canceled"
    RECONCILED = "reconciled"
    ROLL_REQUESTED = "roll_requested"
    ROLL_ABORTED = "roll_aborted"
    ROLL_RESOLVED = "roll_resolved"
    EFFECTS_APPLIED = "effects_applied"

    @property
    def is_terminal(self) -> bool:
        return self in {SoakState.CANCELED, SoakState.ROLL_ABORTED, SoakState.EFFECTS_APPLIED}


_TRANSITIONS: dict[SoakState, frozenset[SoakState]] = {
    SoakState.START: frozenset({SoakState.PREVIEW_COMPUTED}),
    SoakState.PREVIEW_COMPUTED: frozenset({SoakState.AWAITING_USER_INPUT}),
    SoakState.AWAITING_USER_INPUT: frozenset({SoakState.CANCELED, SoakState.RECONCILED}),
    SoakState.RECONCILED: frozenset({SoakState.ROLL_REQUESTED}),
    SoakState.ROLL_REQUESTED: frozenset({SoakState.ROLL_ABORTED, SoakState.ROLL_RESOLVED}),
    SoakState.ROLL_RESOLVED: frozenset({SoakState.EFFECTS_APPLIED}),
}


@dataclass
class SoakTestRun:
    """State of one soak test invocation."""

    actor_id: str
    state: SoakState = SoakState.START
    history: list[SoakState] = field(default_factory=lambda: [SoakState.START])

    def advance(self, new_state: SoakState) -> None:
        """Move to ``new_state``.

        Raises:
            InvalidGameStateError: If the transition is not allowed.
        """
        allowed = _TRANSITIONS.get(self.state, frozenset())
        if new_state not in allowed:
            raise InvalidGameStateError(
                f"Cannot move soak test from {self.state} to {new_state}",
                current_state=self.state.value,
                expected_states=sorted(s.value for s in allowed),
            )
        self.state = new_state
        self.history.append(new_state)
        logger.debug("Soak test state changed", state=new_state.value)


# =============================================================================
# Reconciliation
# =============================================================================


def _fold_user_input(value: ModifiableValue, confirmed: int) -> None:
    """Make ``value`` total ``confirmed`` through its UserInput part."""
    total = calc_total(value)
    if total != confirmed:
        # An earlier correction is replaced, not stacked
        previous = PartsList(value.mod).get_part_value(constants.USER_INPUT_PART) or 0
        value.mod = add_unique_part(
            value.mod,
            constants.USER_INPUT_PART,
            confirmed - (total - previous),
        )
    value.value = calc_total(value)


def update_damage_with_user_data(
    initial_damage: DamageData,
    incoming_damage: int,
    damage_type: DamageType,
    ap: int,
    element: DamageElement | str = DamageElement.NONE,
) -> DamageData:
    """Fold operator-confirmed totals into a damage record.

    Damage and AP are diffed, not replaced: when a confirmed total differs
    from the record's computed total, a single ``UserInput`` part carries
    the difference, so every existing part keeps its provenance. Type and
    element are absolute. Running this again with the same totals adds
    nothing, since the difference is then zero.

    Args:
        initial_damage: Damage before the operator's input; left untouched.
        incoming_damage: Confirmed damage value.
        damage_type: Confirmed damage type.
        ap: Confirmed AP.
        element: Confirmed element; empty keeps the record's element.

    Returns:
        A reconciled copy of the damage record.
    """
    damage = initial_damage.model_copy(deep=True)

    _fold_user_input(damage, incoming_damage)

    if initial_damage.type.base != damage_type:
        damage.type.base = DamageType(damage_type)
        damage.type.value = DamageType(damage_type)

    _fold_user_input(damage.ap, ap)

    if element:
        damage.element.value = DamageElement(element)

    return damage


# =============================================================================
# Soak Flow
# =============================================================================


class SoakFlow:
    """Runs soak tests with operator interaction.

    Args:
        world: Read-only world context for source and label lookups.
        prompts: Builds the damage prompt.
        resolver: Rolls the soak pool.
        publisher: Receives finished results.
        rules: Soak rule catalog; ``SoakRules(world)`` when omitted.
        settings: Application settings; loaded when omitted.

    Example:
        >>> flow = SoakFlow(world, AutoConfirmPromptFactory(), PoolRoller(), ChatLog())
        >>> roll = asyncio.run(flow.run_soak_test(actor, SoakRollOptions(damage)))
    """

    def __init__(
        self,
        world: WorldContext,
        prompts: DamagePromptFactory,
        resolver: DiceResolver,
        publisher: ResultPublisher,
        *,
        rules: SoakRuleProvider | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.world = world
        self.prompts = prompts
        self.resolver = resolver
        self.publisher = publisher
        self.rules = rules if rules is not None else SoakRules(world)
        self.settings = settings or get_settings()
        self.runs: list[SoakTestRun] = []

    @property
    def last_run(self) -> SoakTestRun | None:
        """The most recently started run.

        Diagnostic only: with concurrent soak tests this is whichever run
        started last. Use ``runs`` to find a particular invocation.
        """
        return self.runs[-1] if self.runs else None

    async def run_soak_test(
        self,
        actor: Actor,
        soak_options: SoakRollOptions | None = None,
        parts: PartsInput | None = None,
    ) -> SoakRoll | None:
        """Run the soak flow for one damage event.

        Args:
            actor: The actor doing the soaking.
            soak_options: Incoming damage (if already known) and event token.
            parts: Extra modifiers for the soak test; copied, never mutated.

        Returns:
            The soak roll, or None if the operator canceled the prompt or
            aborted the roll.
        """
        soak_options = soak_options or SoakRollOptions()
        base_parts: list[ModifierPart] = PartsList(parts).list
        # Each invocation owns its run; the list is only ever appended to
        run = SoakTestRun(actor_id=actor.id)
        self.runs.append(run)

        bind_context(soak_actor_id=actor.id)
        try:
            initial_damage = self._initial_damage(soak_options)

            preview_parts = PartsList(base_parts)
            self.rules.apply_all_soak_parts(preview_parts, actor, initial_damage)
            run.advance(SoakState.PREVIEW_COMPUTED)

            run.advance(SoakState.AWAITING_USER_INPUT)
            damage = await self.prompt_damage_data(soak_options, preview_parts)
            if damage is None:
                run.advance(SoakState.CANCELED)
                logger.info("Soak test canceled at damage prompt", actor=actor.name)
                return None
            run.advance(SoakState.RECONCILED)

            final_parts = PartsList(base_parts)
            self.rules.apply_all_soak_parts(final_parts, actor, damage)

            title = self.world.localize(self.settings.soak.title_key)
            run.advance(SoakState.ROLL_REQUESTED)
            roll = await self.resolver.resolve(
                AdvancedRollOptions(
                    actor=actor,
                    parts=final_parts.list,
                    title=title,
                    event=soak_options.event,
                    extended=False,
                    wounds=False,
                    hide_roll_message=True,
                )
            )
            if roll is None:
                run.advance(SoakState.ROLL_ABORTED)
                logger.info("Soak test aborted at roll", actor=actor.name)
                return None
            run.advance(SoakState.ROLL_RESOLVED)

            incoming = damage.model_copy(deep=True)
            modified = self.rules.modify_damage_type(incoming, actor)
            resolved = self.rules.reduce_damage(actor, modified, roll.hits)
            package = ResolvedDamage(incoming=incoming, modified=resolved.modified)

            knocked_down = knocks_down(
                package.modified,
                actor,
                self.world,
                settings=self.settings.soak,
            )
            run.advance(SoakState.EFFECTS_APPLIED)

            await self.publisher.publish(
                SoakChatOptions(
                    title=title,
                    roll=roll,
                    actor=actor,
                    damage=package,
                    knocked_down=knocked_down,
                )
            )
            logger.info(
                "Soak test resolved",
                actor=actor.name,
                hits=roll.hits,
                incoming=package.incoming.value,
                modified=package.modified.value,
                knocked_down=knocked_down,
            )
            return roll
        finally:
            logger.debug("Soak test finished", state=run.state.value)
            unbind_context("soak_actor_id")

    async def prompt_damage_data(
        self,
        soak_options: SoakRollOptions,
        preview_parts: PartsList,
    ) -> DamageData | None:
        """Ask the operator for damage, AP, type and element.

        Returns:
            The reconciled damage record, or None if the prompt was canceled.
        """
        dialog = await self.prompts.create_soak_dialog(soak_options, preview_parts)
        user_data = await dialog.select()
        if dialog.canceled:
            return None

        return update_damage_with_user_data(
            self._initial_damage(soak_options),
            user_data.incoming_damage,
            user_data.damage_type,
            user_data.ap,
            user_data.element,
        )

    @staticmethod
    def _initial_damage(soak_options: SoakRollOptions) -> DamageData:
        if soak_options.damage is not None:
            return soak_options.damage.model_copy(deep=True)
        return default_damage_data()


__all__ = [
    "SoakRollOptions",
    "SoakState",
    "SoakTestRun",
    "SoakFlow",
    "update_damage_with_user_data",
]
