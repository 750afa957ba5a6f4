"""Tests for the non-interactive damage prompts."""

from __future__ import annotations

import asyncio

from soakflow.engine.prompts import (
    AutoConfirmPromptFactory,
    AutoConfirmSoakDialog,
    DamagePrompt,
    DamagePromptFactory,
    ScriptedPromptFactory,
    ScriptedSoakDialog,
    SoakDialogData,
)
from soakflow.engine.soak_flow import SoakRollOptions
from soakflow.models import DamageData, DamageElement, DamageType, PartsList


class TestScriptedSoakDialog:
    """Tests for ScriptedSoakDialog."""

    def test_returns_response(self) -> None:
        """The scripted response is confirmed."""
        response = SoakDialogData(incoming_damage=7, damage_type=DamageType.STUN, ap=-1)
        dialog = ScriptedSoakDialog(response)

        assert asyncio.run(dialog.select()) == response
        assert not dialog.canceled

    def test_none_cancels(self) -> None:
        """A missing response cancels after select resolves."""
        dialog = ScriptedSoakDialog(None)

        assert not dialog.canceled
        asyncio.run(dialog.select())
        assert dialog.canceled

    def test_satisfies_protocol(self) -> None:
        """Scripted dialogs are damage prompts."""
        assert isinstance(ScriptedSoakDialog(None), DamagePrompt)


class TestAutoConfirmSoakDialog:
    """Tests for AutoConfirmSoakDialog."""

    def test_confirms_incoming_damage(self, incoming_damage: DamageData) -> None:
        """The computed totals of the incoming damage are confirmed."""
        incoming_damage.element.value = DamageElement.ACID
        dialog = AutoConfirmSoakDialog(SoakRollOptions(damage=incoming_damage))

        data = asyncio.run(dialog.select())

        assert data == SoakDialogData(
            incoming_damage=6,
            damage_type=DamageType.PHYSICAL,
            ap=-2,
            element=DamageElement.ACID,
        )
        assert not dialog.canceled

    def test_without_damage(self) -> None:
        """Without incoming damage the zeroed default is confirmed."""
        data = asyncio.run(AutoConfirmSoakDialog(SoakRollOptions()).select())

        assert data.incoming_damage == 0
        assert data.ap == 0


class TestPromptFactories:
    """Tests for the prompt factories."""

    def test_scripted_factory_records_previews(self) -> None:
        """Each created dialog records the preview it was shown with."""
        factory = ScriptedPromptFactory(None)
        preview = PartsList([{"name": "SR5.Body", "value": 4}])

        dialog = asyncio.run(factory.create_soak_dialog(SoakRollOptions(), preview))

        assert isinstance(dialog, ScriptedSoakDialog)
        assert factory.previews == [preview]

    def test_auto_confirm_factory(self, incoming_damage: DamageData) -> None:
        """The auto-confirm factory hands out auto-confirm dialogs."""
        factory = AutoConfirmPromptFactory()

        dialog = asyncio.run(
            factory.create_soak_dialog(SoakRollOptions(damage=incoming_damage), PartsList())
        )

        assert isinstance(dialog, AutoConfirmSoakDialog)
        assert isinstance(factory, DamagePromptFactory)
