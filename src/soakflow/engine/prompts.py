"""Damage prompts: the operator's chance to confirm or correct damage.

A prompt is shown with the incoming damage and a preview of the soak
pool. It resolves to the confirmed totals, or reports that the operator
canceled. Rendering is up to the embedding application; this module
defines the contract and two non-interactive prompts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from soakflow.core.logging import get_logger
from soakflow.models.damage import calc_total, default_damage_data
from soakflow.models.enums import DamageElement, DamageType


if TYPE_CHECKING:
    from soakflow.engine.soak_flow import SoakRollOptions
    from soakflow.models.parts import PartsList

logger = get_logger(__name__)


@dataclass(frozen=True)
class SoakDialogData:
    """Operator-confirmed damage totals.

    Attributes:
        incoming_damage: Confirmed damage value.
        damage_type: Confirmed damage type.
        ap: Confirmed armor penetration.
        element: Confirmed element, NONE to keep the record's element.
    """

    incoming_damage: int
    damage_type: DamageType
    ap: int
    element: DamageElement = DamageElement.NONE


@runtime_checkable
class DamagePrompt(Protocol):
    """A cancelable query for damage totals.

    ``canceled`` is only meaningful after ``select`` has resolved.
    """

    canceled: bool

    async def select(self) -> SoakDialogData:
        ...


@runtime_checkable
class DamagePromptFactory(Protocol):
    """Builds the damage prompt for one soak test."""

    async def create_soak_dialog(
        self,
        options: SoakRollOptions,
        preview_parts: PartsList,
    ) -> DamagePrompt:
        ...


class ScriptedSoakDialog:
    """Prompt that answers with a fixed response.

    Args:
        response: Totals to confirm, or None to cancel.
    """

    def __init__(self, response: SoakDialogData | None) -> None:
        self._response = response
        self.canceled = False

    async def select(self) -> SoakDialogData:
        if self._response is None:
            self.canceled = True
            return SoakDialogData(incoming_damage=0, damage_type=DamageType.PHYSICAL, ap=0)
        return self._response


class AutoConfirmSoakDialog:
    """Prompt that confirms the incoming damage unchanged.

    Used for actors that soak without operator input, such as NPCs.
    """

    def __init__(self, options: SoakRollOptions) -> None:
        self.damage = options.damage or default_damage_data()
        self.canceled = False

    async def select(self) -> SoakDialogData:
        return SoakDialogData(
            incoming_damage=calc_total(self.damage),
            damage_type=self.damage.type.base,
            ap=calc_total(self.damage.ap),
            element=self.damage.element.value,
        )


class ScriptedPromptFactory:
    """Hands out scripted dialogs and records what each was shown with."""

    def __init__(self, response: SoakDialogData | None) -> None:
        self.response = response
        self.previews: list[PartsList] = []

    async def create_soak_dialog(
        self,
        options: SoakRollOptions,
        preview_parts: PartsList,
    ) -> ScriptedSoakDialog:
        self.previews.append(preview_parts)
        logger.debug("Soak dialog created", preview_total=preview_parts.total)
        return ScriptedSoakDialog(self.response)


class AutoConfirmPromptFactory:
    """Hands out dialogs that confirm the incoming damage unchanged."""

    async def create_soak_dialog(
        self,
        options: SoakRollOptions,
        preview_parts: PartsList,
    ) -> AutoConfirmSoakDialog:
        logger.debug("Auto-confirming soak dialog", preview_total=preview_parts.total)
        return AutoConfirmSoakDialog(options)


__all__ = [
    "SoakDialogData",
    "DamagePrompt",
    "DamagePromptFactory",
    "ScriptedSoakDialog",
    "AutoConfirmSoakDialog",
    "ScriptedPromptFactory",
    "AutoConfirmPromptFactory",
]
