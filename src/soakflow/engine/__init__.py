"""Soak test engine.

Submodules:
    dice: Dice pool resolution on the d20 library.
    soak_rules: Soak pool parts and damage transforms.
    prompts: Damage prompt contract and non-interactive prompts.
    knockdown: Knockdown evaluation after the soak roll.
    chat: Result publishing.
    soak_flow: The soak test orchestrator.

Example:
    >>> import asyncio
    >>> from soakflow.engine import (
    ...     AutoConfirmPromptFactory, ChatLog, PoolRoller, SoakFlow, SoakRollOptions
    ... )
    >>> flow = SoakFlow(world, AutoConfirmPromptFactory(), PoolRoller(), ChatLog())
    >>> roll = asyncio.run(flow.run_soak_test(defender, SoakRollOptions(damage=damage)))
"""

from __future__ import annotations

# =============================================================================
# Dice
# =============================================================================
from soakflow.engine.dice import (
    AdvancedRollOptions,
    DiceResolver,
    PoolRoller,
    SoakRoll,
)

# =============================================================================
# Rules
# =============================================================================
from soakflow.engine.soak_rules import (
    SoakRuleProvider,
    SoakRules,
    element_part_label,
    modified_armor_value,
    reduce_damage_by_hits,
)
from soakflow.engine.knockdown import (
    effective_physical_limit,
    is_damage_from_gel_rounds,
    is_damage_from_impact_dispersion,
    knocks_down,
)

# =============================================================================
# Collaborators
# =============================================================================
from soakflow.engine.prompts import (
    AutoConfirmPromptFactory,
    AutoConfirmSoakDialog,
    DamagePrompt,
    DamagePromptFactory,
    ScriptedPromptFactory,
    ScriptedSoakDialog,
    SoakDialogData,
)
from soakflow.engine.chat import (
    ChatLog,
    ResultPublisher,
    SoakChatMessage,
    SoakChatOptions,
)

# =============================================================================
# Soak Flow
# =============================================================================
from soakflow.engine.soak_flow import (
    SoakFlow,
    SoakRollOptions,
    SoakState,
    SoakTestRun,
    update_damage_with_user_data,
)


__all__ = [
    # Dice
    "AdvancedRollOptions",
    "DiceResolver",
    "PoolRoller",
    "SoakRoll",
    # Rules
    "SoakRuleProvider",
    "SoakRules",
    "element_part_label",
    "modified_armor_value",
    "reduce_damage_by_hits",
    "effective_physical_limit",
    "is_damage_from_gel_rounds",
    "is_damage_from_impact_dispersion",
    "knocks_down",
    # Collaborators
    "AutoConfirmPromptFactory",
    "AutoConfirmSoakDialog",
    "DamagePrompt",
    "DamagePromptFactory",
    "ScriptedPromptFactory",
    "ScriptedSoakDialog",
    "SoakDialogData",
    "ChatLog",
    "ResultPublisher",
    "SoakChatMessage",
    "SoakChatOptions",
    # Soak Flow
    "SoakFlow",
    "SoakRollOptions",
    "SoakState",
    "SoakTestRun",
    "update_damage_with_user_data",
]
