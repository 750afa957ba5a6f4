"""soakflow - soak test resolution for tabletop combat.

Given an incoming damage event, soakflow builds the defender's soak pool,
lets the operator confirm or correct the damage, rolls the pool, reduces
the damage by the net hits and decides whether the defender is knocked
down. Every correction is kept as a named modifier part, so each point of
damage and AP can be traced to where it came from.

Example:
    >>> import asyncio
    >>> from soakflow import (
    ...     Actor, AutoConfirmPromptFactory, ChatLog, PoolRoller, SoakFlow,
    ...     SoakRollOptions, World, default_damage_data,
    ... )
    >>> world = World()
    >>> defender = world.add_actor(Actor(name="Troll Bouncer"))
    >>> flow = SoakFlow(world, AutoConfirmPromptFactory(), PoolRoller(), ChatLog())
    >>> damage = default_damage_data(base=8, value=8)
    >>> roll = asyncio.run(flow.run_soak_test(defender, SoakRollOptions(damage=damage)))

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas for parts, damage, actors and the world.
    engine: Dice, soak rules, prompts, knockdown and the soak flow.
"""

from __future__ import annotations

# Core
from soakflow.core.config import Settings, get_settings
from soakflow.core.exceptions import SoakFlowError
from soakflow.core.logging import configure_logging, get_logger

# Models
from soakflow.models import (
    Actor,
    ActorType,
    DamageData,
    DamageElement,
    DamageType,
    Item,
    ItemModification,
    ModifierPart,
    PartsList,
    ResolvedDamage,
    World,
    WorldContext,
    default_damage_data,
)

# Engine
from soakflow.engine import (
    AutoConfirmPromptFactory,
    ChatLog,
    PoolRoller,
    SoakDialogData,
    SoakFlow,
    SoakRoll,
    SoakRollOptions,
    SoakRules,
    knocks_down,
    update_damage_with_user_data,
)


__all__ = [
    # Core
    "Settings",
    "get_settings",
    "SoakFlowError",
    "configure_logging",
    "get_logger",
    # Models
    "Actor",
    "ActorType",
    "DamageData",
    "DamageElement",
    "DamageType",
    "Item",
    "ItemModification",
    "ModifierPart",
    "PartsList",
    "ResolvedDamage",
    "World",
    "WorldContext",
    "default_damage_data",
    # Engine
    "AutoConfirmPromptFactory",
    "ChatLog",
    "PoolRoller",
    "SoakDialogData",
    "SoakFlow",
    "SoakRoll",
    "SoakRollOptions",
    "SoakRules",
    "knocks_down",
    "update_damage_with_user_data",
]

__version__ = "0.1.0"
