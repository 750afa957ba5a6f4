"""Application-wide constants for the soak test engine.

This module defines rule constants (with their rulebook page where one
exists) and the translation keys used for modifier part labels.
"""

from __future__ import annotations

# =============================================================================
# Dice Pool Constants
# =============================================================================

DICE_SIDES = 6
"""Soak pools are rolled with six-sided dice."""

HIT_THRESHOLD = 5
"""Lowest die face that counts as a hit (SR5 44)."""

GLITCH_FACE = 1
"""Die face counted towards a glitch."""

# =============================================================================
# Knockdown Constants (SR5 194)
# =============================================================================

KNOCKDOWN_DAMAGE_THRESHOLD = 10
"""Damage at or above this value knocks down regardless of physical limit."""

GEL_ROUNDS_LIMIT_MODIFIER = -2
"""Physical limit modifier against gel rounds damage (SR5 434)."""

IMPACT_DISPERSION_LIMIT_MODIFIER = -2
"""Physical limit modifier against impact dispersion damage (FA 52)."""

# =============================================================================
# Part Labels (translation keys)
# =============================================================================

USER_INPUT_PART = "UserInput"
"""Label of the correction part added when the operator changes a total."""

LABEL_SOAK_TEST = "SR5.SoakTest"
LABEL_BODY = "SR5.Body"
LABEL_WILLPOWER = "SR5.Willpower"
LABEL_ARMOR = "SR5.Armor"
LABEL_AP = "SR5.AP"
LABEL_ELEMENT_PREFIX = "SR5.Element"
LABEL_SOAK_BONUS = "SR5.Bonus"
LABEL_DEVICE_RATING = "SR5.DeviceRating"
LABEL_FIREWALL = "SR5.Firewall"
LABEL_GEL_ROUNDS = "SR5.AmmoGelRounds"

DEFAULT_TRANSLATIONS: dict[str, str] = {
    LABEL_SOAK_TEST: "Soak Test",
    LABEL_BODY: "Body",
    LABEL_WILLPOWER: "Willpower",
    LABEL_ARMOR: "Armor",
    LABEL_AP: "AP",
    LABEL_SOAK_BONUS: "Bonus",
    LABEL_DEVICE_RATING: "Device Rating",
    LABEL_FIREWALL: "Firewall",
    LABEL_GEL_ROUNDS: "Gel Rounds",
    USER_INPUT_PART: "User Input",
    f"{LABEL_ELEMENT_PREFIX}.fire": "Fire Resistance",
    f"{LABEL_ELEMENT_PREFIX}.cold": "Cold Resistance",
    f"{LABEL_ELEMENT_PREFIX}.acid": "Acid Resistance",
    f"{LABEL_ELEMENT_PREFIX}.electricity": "Electricity Resistance",
    f"{LABEL_ELEMENT_PREFIX}.radiation": "Radiation Resistance",
}
"""English labels for every translation key the engine emits."""
