"""Character creation and skill/focus changes.

A Character is a frozen snapshot. Applying trainings or focus levels returns
a new Character with a new skills tuple; attributes, pools, statistics and
defenses carry over unchanged.
"""

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import NamedTuple

import structlog

from charforge.character.attributes import CharacterAttributes
from charforge.character.derived import (
    Defenses,
    Pools,
    Statistics,
    calculate_defenses,
    calculate_pools,
    calculate_statistics,
)
from charforge.character.skills import (
    Skill,
    TrainingLevel,
    calculate_skills,
    find_skill_with_focus,
    update_focus_level_in_list,
    update_skill_training_in_list,
)

logger = structlog.get_logger(__name__)


class SkillTrainingChange(NamedTuple):
    """Request to set a skill's training level."""

    skill_name: str
    level: TrainingLevel | str


class FocusLevelChange(NamedTuple):
    """Request to set a focus level."""

    focus_name: str
    level: int


@dataclass(frozen=True)
class Character:
    """A character's attributes and everything derived from them."""

    attributes: CharacterAttributes
    pools: Pools
    statistics: Statistics
    defenses: Defenses
    skills: tuple[Skill, ...]

    def get_skill(self, name: str) -> Skill | None:
        """Get a skill by name, or None if the character has no such skill."""
        for skill in self.skills:
            if skill.name == name:
                return skill
        return None


def create_character(attributes: CharacterAttributes) -> Character:
    """Derive a complete Character from its attributes.

    Args:
        attributes: The eight resolved attributes

    Returns:
        Character with pools, statistics, defenses and untrained skills
    """
    return Character(
        attributes=attributes,
        pools=calculate_pools(attributes.pool_values()),
        statistics=calculate_statistics(attributes.statistic_values()),
        defenses=calculate_defenses(attributes.defense_values()),
        skills=calculate_skills(attributes.dice_values(), attributes.thresholds()),
    )


def apply_skill_trainings(
    character: Character, skill_trainings: Iterable[tuple[str, TrainingLevel | str]]
) -> Character:
    """Apply training levels to a character's skills, in order.

    Args:
        character: Character to update
        skill_trainings: (skill name, training level) pairs; SkillTrainingChange works

    Returns:
        New Character with the updated skills. Unknown skill names are skipped.
    """
    skills = character.skills
    for skill_name, level in skill_trainings:
        if character.get_skill(skill_name) is None:
            logger.debug("skill_training_skipped", skill=skill_name, reason="unknown_skill")
            continue
        skills = update_skill_training_in_list(skills, skill_name, level)

    return replace(character, skills=skills)


def apply_focus_levels(
    character: Character, focus_levels: Iterable[tuple[str, int]]
) -> Character:
    """Apply focus levels to a character's skills, in order.

    Each focus level goes to the first skill holding that focus, capped by the
    skill's training.

    Args:
        character: Character to update
        focus_levels: (focus name, level) pairs; FocusLevelChange works

    Returns:
        New Character with the updated skills. Unknown focus names are skipped.
    """
    skills = character.skills
    for focus_name, level in focus_levels:
        if find_skill_with_focus(skills, focus_name) is None:
            logger.debug("focus_level_skipped", focus=focus_name, reason="unknown_focus")
            continue
        skills = update_focus_level_in_list(skills, focus_name, level)

    return replace(character, skills=skills)


class CharacterBuilder:
    """Fluent builder collecting skill and focus changes before building.

    Example:
        >>> character = (
        ...     CharacterBuilder(attributes)
        ...     .with_skill_trainings([("Agility", TrainingLevel.SKILLED)])
        ...     .with_focus_levels([("Acrobatics", 2)])
        ...     .build()
        ... )

    All trainings are applied before any focus levels, so a focus cap always
    reflects the final training.
    """

    def __init__(self, attributes: CharacterAttributes) -> None:
        self._attributes = attributes
        self._skill_trainings: list[SkillTrainingChange] = []
        self._focus_levels: list[FocusLevelChange] = []

    def with_skill_trainings(
        self, skill_trainings: Iterable[tuple[str, TrainingLevel | str]]
    ) -> "CharacterBuilder":
        self._skill_trainings.extend(
            SkillTrainingChange(name, level) for name, level in skill_trainings
        )
        return self

    def with_focus_levels(self, focus_levels: Iterable[tuple[str, int]]) -> "CharacterBuilder":
        self._focus_levels.extend(FocusLevelChange(name, level) for name, level in focus_levels)
        return self

    def build(self) -> Character:
        """Create the character and apply every pending change."""
        logger.debug(
            "character_build",
            skill_trainings=len(self._skill_trainings),
            focus_levels=len(self._focus_levels),
        )
        character = create_character(self._attributes)
        character = apply_skill_trainings(character, self._skill_trainings)
        return apply_focus_levels(character, self._focus_levels)


def character_builder(attributes: CharacterAttributes) -> CharacterBuilder:
    """Start a CharacterBuilder for the given attributes."""
    return CharacterBuilder(attributes)
