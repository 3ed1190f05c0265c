"""Skills system for charforge.

Each skill is governed by one of the eight attributes and carries two foci.
A skill's dice equal its attribute's dice plus the training bonus; each
focus adds its own focus level on top. Training also caps how high a focus
may be raised.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from enum import StrEnum

from charforge.character.attributes import ATTRIBUTE_INDEX, AttributeName
from charforge.config import get_settings


class TrainingLevel(StrEnum):
    """Skill training ranks, lowest to highest."""

    UNTRAINED = "Untrained"
    CURSORY = "Cursory"
    SKILLED = "Skilled"
    ADEPT = "Adept"
    EXPERT = "Expert"


class SkillCategory(StrEnum):
    """Skill groupings used for display."""

    FIELD = "Field"
    MAGIC = "Magic"
    MELEE = "Melee"
    RANGED = "Ranged"


@dataclass(frozen=True)
class SkillTraining:
    """Bonus dice and focus cap granted by a training level."""

    level: TrainingLevel
    bonus_dice: int
    max_focus_level: int


SKILL_TRAINING: tuple[SkillTraining, ...] = (
    SkillTraining(TrainingLevel.UNTRAINED, bonus_dice=0, max_focus_level=0),
    SkillTraining(TrainingLevel.CURSORY, bonus_dice=1, max_focus_level=1),
    SkillTraining(TrainingLevel.SKILLED, bonus_dice=2, max_focus_level=2),
    SkillTraining(TrainingLevel.ADEPT, bonus_dice=3, max_focus_level=3),
    SkillTraining(TrainingLevel.EXPERT, bonus_dice=4, max_focus_level=4),
)


@dataclass(frozen=True)
class FocusOption:
    """A specialization within a skill."""

    focus: str
    dice: int = 0
    threshold: int = 0
    focus_level: int = 0


@dataclass(frozen=True)
class SkillTemplate:
    """Catalog entry a Skill is stamped from."""

    name: str
    attribute: AttributeName
    category: SkillCategory
    focus_options: tuple[FocusOption, ...]
    training: TrainingLevel = TrainingLevel.UNTRAINED


@dataclass(frozen=True)
class Skill:
    """A skill with attribute values applied.

    Attributes:
        attribute_value: Current dice (base plus training bonus)
        attribute_threshold: Success threshold taken from the attribute
        base_attribute_value: Dice before the training bonus
    """

    name: str
    attribute: AttributeName
    category: SkillCategory
    attribute_value: int
    attribute_threshold: int
    base_attribute_value: int
    training: TrainingLevel
    focus_options: tuple[FocusOption, ...]


def _template(
    name: str, attribute: AttributeName, category: SkillCategory, *foci: str
) -> SkillTemplate:
    return SkillTemplate(
        name=name,
        attribute=attribute,
        category=category,
        focus_options=tuple(FocusOption(focus) for focus in foci),
    )


_A = AttributeName
_C = SkillCategory

SKILL_TEMPLATES: tuple[SkillTemplate, ...] = (
    _template("Agility", _A.COORDINATION, _C.FIELD, "Acrobatics", "Escape"),
    _template("Athletics", _A.STRENGTH, _C.FIELD, "Grapple", "Prowess"),
    _template("Axiomatic Magic", _A.INTELLECT, _C.MAGIC, "Formulae", "Ritual"),
    _template("Blood Magic", _A.ENDURANCE, _C.MAGIC, "Inherited", "Morphic"),
    _template("Bonds Magic", _A.CHARISMA, _C.MAGIC, "Ego", "Spirit"),
    _template("Close Weapons", _A.QUICKNESS, _C.MELEE, "Slice", "Stab"),
    _template("Command", _A.CHARISMA, _C.FIELD, "Inspire", "Intimidate"),
    _template("Cunning", _A.INTELLECT, _C.FIELD, "Discern", "Plan"),
    _template("Dexterity", _A.COORDINATION, _C.FIELD, "Finesse", "Pilfer"),
    _template("Flexible Weapons", _A.QUICKNESS, _C.MELEE, "Arc", "Lash"),
    _template("Focus Magic", _A.WILLPOWER, _C.MAGIC, "Banish", "Manipulate"),
    _template("Gunnery", _A.INTELLECT, _C.RANGED, "Direct", "Indirect"),
    _template("Hafted Weapons", _A.STRENGTH, _C.MELEE, "Impale", "Strike"),
    _template("Long Arms", _A.SENSITIVITY, _C.RANGED, "Crossbow", "Rifle"),
    _template("Missile Weapons", _A.COORDINATION, _C.RANGED, "Archery", "Throw"),
    _template("Mobility", _A.QUICKNESS, _C.FIELD, "Chase", "Skirmish"),
    _template("Observation", _A.SENSITIVITY, _C.FIELD, "Search", "Survey"),
    _template("Persuade", _A.CHARISMA, _C.FIELD, "Con", "Handle"),
    _template("Pistols", _A.COORDINATION, _C.RANGED, "Handgun", "Mechanical"),
    _template("Stealth", _A.COORDINATION, _C.FIELD, "Hide", "Infiltration"),
    _template("Swords", _A.COORDINATION, _C.MELEE, "Cut", "Thrust"),
    _template("Unarmed Combat", _A.COORDINATION, _C.MELEE, "Kick", "Punch"),
)


# ============================================================================
# Lookups
# ============================================================================


def get_skill_training(level: TrainingLevel | str) -> SkillTraining | None:
    """Get the training row for a level, or None if the level is unknown."""
    for training in SKILL_TRAINING:
        if training.level == level:
            return training
    return None


def get_skill_template(name: str) -> SkillTemplate | None:
    """Get a skill template by name, or None if not in the catalog."""
    for template in SKILL_TEMPLATES:
        if template.name == name:
            return template
    return None


def get_skill_templates_by_category(category: SkillCategory | str) -> list[SkillTemplate]:
    """All templates in a category, in catalog order."""
    return [t for t in SKILL_TEMPLATES if t.category == category]


def get_skill_templates_by_attribute(attribute: AttributeName | str) -> list[SkillTemplate]:
    """All templates governed by an attribute, in catalog order."""
    return [t for t in SKILL_TEMPLATES if t.attribute == attribute]


# ============================================================================
# Derivation
# ============================================================================


def update_focus_options(
    focus_options: Iterable[FocusOption], dice: int, threshold: int
) -> tuple[FocusOption, ...]:
    """Restamp foci with a skill's dice and threshold, keeping focus levels."""
    return tuple(
        replace(focus, dice=dice + focus.focus_level, threshold=threshold)
        for focus in focus_options
    )


def create_skill(template: SkillTemplate, dice: int, threshold: int) -> Skill:
    """Create a Skill from a template and its governing attribute's values."""
    return Skill(
        name=template.name,
        attribute=template.attribute,
        category=template.category,
        attribute_value=dice,
        attribute_threshold=threshold,
        base_attribute_value=dice,
        training=template.training,
        focus_options=update_focus_options(template.focus_options, dice, threshold),
    )


def calculate_skills(
    dice_values: Sequence[int], thresholds: Sequence[int]
) -> tuple[Skill, ...]:
    """Build every catalog skill from attribute dice and thresholds.

    Args:
        dice_values: Dice per attribute, in attribute order
        thresholds: Threshold per attribute, in attribute order

    Returns:
        One Skill per template, in catalog order. Missing attribute values
        count as 0.
    """
    slots = len(AttributeName)
    dice = list(dice_values[:slots])
    dice += [0] * (slots - len(dice))
    thresh = list(thresholds[:slots])
    thresh += [0] * (slots - len(thresh))

    return tuple(
        create_skill(
            template,
            dice[ATTRIBUTE_INDEX[template.attribute]],
            thresh[ATTRIBUTE_INDEX[template.attribute]],
        )
        for template in SKILL_TEMPLATES
    )


def build_complete_skill_list(
    default_dice: int | None = None, default_threshold: int | None = None
) -> tuple[Skill, ...]:
    """Build all skills with uniform placeholder attribute values.

    Useful for listing skills without a character. Defaults come from
    Settings.placeholder_dice and Settings.placeholder_threshold.
    """
    settings = get_settings()
    if default_dice is None:
        default_dice = settings.placeholder_dice
    if default_threshold is None:
        default_threshold = settings.placeholder_threshold

    slots = len(AttributeName)
    return calculate_skills([default_dice] * slots, [default_threshold] * slots)


# ============================================================================
# Training and focus changes
# ============================================================================


def update_skill_training(skill: Skill, level: TrainingLevel | str) -> Skill:
    """Return a copy of the skill at a new training level.

    The training bonus is added to the base dice and every focus is
    recomputed. An unknown level returns the skill unchanged.
    """
    training = get_skill_training(level)
    if training is None:
        return skill

    new_value = skill.base_attribute_value + training.bonus_dice
    return replace(
        skill,
        training=training.level,
        attribute_value=new_value,
        focus_options=update_focus_options(
            skill.focus_options, new_value, skill.attribute_threshold
        ),
    )


def update_focus_level(skill: Skill, focus_name: str, focus_level: int) -> Skill:
    """Return a copy of the skill with one focus set to a new level.

    The level is capped at the training's max focus level. Other foci are
    untouched; an unknown focus name changes nothing.
    """
    training = get_skill_training(skill.training)
    if training is None:
        return skill

    level = min(focus_level, training.max_focus_level)
    return replace(
        skill,
        focus_options=tuple(
            replace(focus, focus_level=level, dice=skill.attribute_value + level)
            if focus.focus == focus_name
            else focus
            for focus in skill.focus_options
        ),
    )


def update_skill_training_in_list(
    skills: Sequence[Skill], skill_name: str, level: TrainingLevel | str
) -> tuple[Skill, ...]:
    """Set the training on every skill with the given name."""
    return tuple(
        update_skill_training(skill, level) if skill.name == skill_name else skill
        for skill in skills
    )


def find_skill_with_focus(skills: Sequence[Skill], focus_name: str) -> int | None:
    """Index of the first skill holding the focus, or None."""
    for i, skill in enumerate(skills):
        if any(focus.focus == focus_name for focus in skill.focus_options):
            return i
    return None


def update_focus_level_in_list(
    skills: Sequence[Skill], focus_name: str, focus_level: int
) -> tuple[Skill, ...]:
    """Set a focus level on the first skill that has the focus.

    If several skills share a focus name, only the first in list order
    changes.
    """
    index = find_skill_with_focus(skills, focus_name)
    if index is None:
        return tuple(skills)

    updated = list(skills)
    updated[index] = update_focus_level(skills[index], focus_name, focus_level)
    return tuple(updated)


# ============================================================================
# Catalog introspection
# ============================================================================


def get_all_skill_names() -> list[str]:
    """Names of all catalog skills, in catalog order."""
    return [template.name for template in SKILL_TEMPLATES]


def get_all_focus_names() -> list[str]:
    """Names of all catalog foci, in catalog order."""
    return [focus.focus for template in SKILL_TEMPLATES for focus in template.focus_options]


def get_skill_to_focus_mapping() -> dict[str, list[str]]:
    """Map each skill name to its focus names."""
    return {
        template.name: [focus.focus for focus in template.focus_options]
        for template in SKILL_TEMPLATES
    }


def get_skills_by_category() -> dict[str, list[str]]:
    """Group skill names by category, in the order categories first appear."""
    grouped: dict[str, list[str]] = {}
    for template in SKILL_TEMPLATES:
        grouped.setdefault(template.category.value, []).append(template.name)
    return grouped


def find_duplicate_focus_names(
    templates: Iterable[SkillTemplate] = SKILL_TEMPLATES,
) -> list[str]:
    """List focus names that appear in more than one template."""
    owners: dict[str, set[str]] = {}
    for template in templates:
        for focus in template.focus_options:
            owners.setdefault(focus.focus, set()).add(template.name)
    return sorted(name for name, skills in owners.items() if len(skills) > 1)


def extract_all_foci(skills: Iterable[Skill]) -> list[FocusOption]:
    """Flatten the focus options of every skill into one list."""
    return [focus for skill in skills for focus in skill.focus_options]


def format_roll(dice: int, threshold: int) -> str:
    """Format a roll shape, e.g. "7d10 (5+)"."""
    return f"{dice}{get_settings().die_label} ({threshold}+)"


def get_foci_rolls(skills: Iterable[Skill]) -> list[tuple[str, str]]:
    """List (focus name, roll string) pairs sorted by focus name."""
    foci = sorted(extract_all_foci(skills), key=lambda focus: focus.focus)
    return [(focus.focus, format_roll(focus.dice, focus.threshold)) for focus in foci]
