#!/usr/bin/env python3
"""
Example script for charforge.

Builds a character from tiers and modifiers, trains a few skills and prints
the resulting sheet.
"""

from charforge.character import (
    TrainingLevel,
    character_builder,
    create_character_attributes_from_tiers,
    get_foci_rolls,
    get_skills_by_category,
)
from charforge.character.skills import format_roll
from charforge.log import configure_logging


def main():
    """Main example function."""
    configure_logging()

    print("=" * 70)
    print("charforge - Character Sheet")
    print("=" * 70)

    attributes = create_character_attributes_from_tiers(
        strength=("Deficit", 4),
        endurance=("Deficit", 3),
        coordination=("Remarkable", 6),
        quickness=("Exceptional", 4),
        willpower=("Common", 3),
        intellect=("Common", 4),
        charisma=("Common", 3),
        sensitivity=("Exceptional", 3),
    )
    if attributes is None:
        print("\nCould not resolve attributes")
        return

    character = (
        character_builder(attributes)
        .with_skill_trainings(
            [
                ("Agility", TrainingLevel.SKILLED),
                ("Swords", TrainingLevel.EXPERT),
                ("Observation", TrainingLevel.CURSORY),
            ]
        )
        .with_focus_levels([("Acrobatics", 2), ("Thrust", 4), ("Search", 3)])
        .build()
    )

    print("\nPools:")
    for name, value in vars(character.pools).items():
        print(f"   {name}: {value}")

    print("\nDefenses:")
    for name, value in vars(character.defenses).items():
        print(f"   {name}: {value}")

    stats = character.statistics
    print("\nStatistics:")
    print(f"   body power: {stats.body_power} {vars(stats.body_statistics)}")
    print(f"   magic power: {stats.magic_power} {vars(stats.magic_statistics)}")
    print(f"   reflexes: {stats.reflexes}, speed: {stats.speed}, stability: {stats.stability}")
    print(f"   movement: {vars(stats.movement)}")

    print("\nSkills:")
    for category, names in get_skills_by_category().items():
        print(f"   {category}")
        for name in names:
            skill = character.get_skill(name)
            print(
                f"     - {skill.name}: "
                f"{format_roll(skill.attribute_value, skill.attribute_threshold)} [{skill.training}]"
            )

    print("\nFoci:")
    for focus, roll in get_foci_rolls(character.skills):
        print(f"   {focus}: {roll}")


if __name__ == "__main__":
    main()
