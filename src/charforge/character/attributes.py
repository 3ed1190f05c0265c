"""Attribute tiers, level coefficients and the attribute resolver.

An attribute is described by a tier name (e.g. "Common") and a modifier. The
tier's base level plus the modifier gives an attribute level between 0 and 30,
and that level indexes a fixed table of five coefficients: dice count,
defense, pool, statistic and success threshold.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, fields
from enum import StrEnum

MIN_ATTRIBUTE_LEVEL = 0
MAX_ATTRIBUTE_LEVEL = 30


class AttributeName(StrEnum):
    """The eight governing attributes, in derivation order."""

    STRENGTH = "Strength"
    ENDURANCE = "Endurance"
    COORDINATION = "Coordination"
    QUICKNESS = "Quickness"
    WILLPOWER = "Willpower"
    INTELLECT = "Intellect"
    CHARISMA = "Charisma"
    SENSITIVITY = "Sensitivity"


# Constant attribute names for easy import
ATTRIBUTE_NAMES = [attr.value for attr in AttributeName]

# Slot index of each attribute within CharacterAttributes
ATTRIBUTE_INDEX: dict[AttributeName, int] = {attr: i for i, attr in enumerate(AttributeName)}


@dataclass(frozen=True)
class AttributeLevelRow:
    """One row of the attribute level table."""

    level: int
    dice: int
    defense: int
    pool: int
    statistic: int
    threshold: int


@dataclass(frozen=True)
class Tier:
    """A named band of attribute levels."""

    name: str
    base_level: int


@dataclass(frozen=True)
class Attribute:
    """Resolved attribute coefficients."""

    dice: int
    threshold: int
    pool: int
    statistic: int
    defense: int

    @classmethod
    def zero(cls) -> "Attribute":
        """Attribute used to fill empty slots."""
        return cls(dice=0, threshold=0, pool=0, statistic=0, defense=0)

    @classmethod
    def from_row(cls, row: AttributeLevelRow) -> "Attribute":
        """Copy the coefficients out of a level table row."""
        return cls(
            dice=row.dice,
            threshold=row.threshold,
            pool=row.pool,
            statistic=row.statistic,
            defense=row.defense,
        )


# (level, dice, defense, pool, statistic, threshold)
ATTRIBUTE_LEVELS: tuple[AttributeLevelRow, ...] = tuple(
    AttributeLevelRow(*row)
    for row in (
        (0, 1, -1, 0, 0, 10),
        (1, 2, 0, 0, 1, 9),
        (2, 2, 0, 1, 1, 8),
        (3, 3, 1, 1, 2, 7),
        (4, 4, 2, 2, 2, 6),
        (5, 4, 2, 3, 3, 6),
        (6, 5, 3, 3, 4, 6),
        (7, 5, 3, 4, 4, 6),
        (8, 5, 3, 4, 5, 5),
        (9, 6, 4, 4, 5, 5),
        (10, 6, 4, 5, 5, 5),
        (11, 7, 5, 5, 6, 5),
        (12, 7, 5, 6, 6, 4),
        (13, 8, 6, 6, 7, 4),
        (14, 8, 6, 7, 7, 4),
        (15, 9, 7, 7, 7, 4),
        (16, 9, 7, 8, 8, 4),
        (17, 10, 8, 8, 8, 3),
        (18, 10, 8, 9, 9, 3),
        (19, 11, 9, 9, 9, 3),
        (20, 11, 9, 10, 10, 3),
        (21, 12, 10, 10, 11, 3),
        (22, 12, 10, 11, 11, 3),
        (23, 13, 11, 11, 12, 2),
        (24, 13, 11, 12, 12, 2),
        (25, 14, 12, 12, 13, 2),
        (26, 14, 12, 13, 13, 2),
        (27, 15, 13, 13, 14, 2),
        (28, 15, 13, 14, 14, 2),
        (29, 16, 14, 14, 15, 2),
        (30, 16, 14, 15, 15, 2),
    )
)

_ROWS_BY_LEVEL: dict[int, AttributeLevelRow] = {row.level: row for row in ATTRIBUTE_LEVELS}

ATTRIBUTE_TIERS: tuple[Tier, ...] = (
    Tier("Deficit", 0),
    Tier("Poor", 4),
    Tier("Common", 8),
    Tier("Exceptional", 12),
    Tier("Remarkable", 16),
    Tier("Heroic", 20),
    Tier("Legendary", 24),
)

TIER_NAMES = tuple(tier.name for tier in ATTRIBUTE_TIERS)


def get_attribute_by_level(level: int) -> AttributeLevelRow | None:
    """Look up the coefficient row for an attribute level.

    Args:
        level: Attribute level (0-30)

    Returns:
        The matching row, or None if the level is not in the table
    """
    return _ROWS_BY_LEVEL.get(level)


def get_attribute_tier_by_name(tier_name: str) -> Tier | None:
    """Find a tier by its name, or None if there is no such tier."""
    for tier in ATTRIBUTE_TIERS:
        if tier.name == tier_name:
            return tier
    return None


def combine_tier_and_modifier(tier_name: str, modifier: int) -> Attribute | None:
    """Resolve a tier and modifier into an Attribute.

    Args:
        tier_name: Name of the attribute tier (e.g. "Common")
        modifier: Value added to the tier's base level

    Returns:
        The resolved Attribute, or None if the tier is unknown or the
        resulting level falls outside 0-30

    Examples:
        >>> combine_tier_and_modifier("Common", 3)
        Attribute(dice=7, threshold=5, pool=5, statistic=6, defense=5)
        >>> combine_tier_and_modifier("Legendary", 7) is None
        True
    """
    tier = get_attribute_tier_by_name(tier_name)
    if tier is None:
        return None

    row = get_attribute_by_level(tier.base_level + modifier)
    if row is None:
        return None

    return Attribute.from_row(row)


def combine_attributes(a: Attribute, b: Attribute) -> Attribute:
    """Sum two attributes.

    Threshold takes the lower of the two, so a combined roll is never harder
    than either source.
    """
    return Attribute(
        dice=a.dice + b.dice,
        threshold=min(a.threshold, b.threshold),
        pool=a.pool + b.pool,
        statistic=a.statistic + b.statistic,
        defense=a.defense + b.defense,
    )


@dataclass(frozen=True)
class CharacterAttributes:
    """The eight attribute slots of a character, in fixed order."""

    strength: Attribute
    endurance: Attribute
    coordination: Attribute
    quickness: Attribute
    willpower: Attribute
    intellect: Attribute
    charisma: Attribute
    sensitivity: Attribute

    @classmethod
    def from_sequence(cls, attributes: Iterable[Attribute]) -> "CharacterAttributes":
        """Build from an ordered sequence, padding with zero attributes or truncating to 8."""
        values = list(attributes)[: len(AttributeName)]
        values += [Attribute.zero()] * (len(AttributeName) - len(values))
        return cls(*values)

    def __iter__(self) -> Iterator[Attribute]:
        return (getattr(self, f.name) for f in fields(self))

    def get(self, name: AttributeName | str) -> Attribute:
        """Get an attribute slot by its name ("Strength" or "strength").

        Raises:
            KeyError: If the name is not one of the eight attributes
        """
        try:
            attr = AttributeName(str(name).capitalize())
        except ValueError:
            raise KeyError(name) from None
        return getattr(self, attr.value.lower())

    def dice_values(self) -> tuple[int, ...]:
        """Dice count of each slot, in attribute order."""
        return tuple(attr.dice for attr in self)

    def thresholds(self) -> tuple[int, ...]:
        """Success threshold of each slot, in attribute order."""
        return tuple(attr.threshold for attr in self)

    def pool_values(self) -> tuple[int, ...]:
        """Pool coefficient of each slot, in attribute order."""
        return tuple(attr.pool for attr in self)

    def statistic_values(self) -> tuple[int, ...]:
        """Statistic coefficient of each slot, in attribute order."""
        return tuple(attr.statistic for attr in self)

    def defense_values(self) -> tuple[int, ...]:
        """Defense coefficient of each slot, in attribute order."""
        return tuple(attr.defense for attr in self)


def create_character_attributes(
    strength: Attribute,
    endurance: Attribute,
    coordination: Attribute,
    quickness: Attribute,
    willpower: Attribute,
    intellect: Attribute,
    charisma: Attribute,
    sensitivity: Attribute,
) -> CharacterAttributes:
    """Group eight resolved attributes into a CharacterAttributes record."""
    return CharacterAttributes(
        strength=strength,
        endurance=endurance,
        coordination=coordination,
        quickness=quickness,
        willpower=willpower,
        intellect=intellect,
        charisma=charisma,
        sensitivity=sensitivity,
    )


def create_character_attributes_from_tiers(
    strength: tuple[str, int],
    endurance: tuple[str, int],
    coordination: tuple[str, int],
    quickness: tuple[str, int],
    willpower: tuple[str, int],
    intellect: tuple[str, int],
    charisma: tuple[str, int],
    sensitivity: tuple[str, int],
) -> CharacterAttributes | None:
    """Resolve eight (tier name, modifier) pairs into CharacterAttributes.

    Returns:
        The attributes, or None if any pair fails to resolve
    """
    resolved = [
        combine_tier_and_modifier(tier_name, modifier)
        for tier_name, modifier in (
            strength,
            endurance,
            coordination,
            quickness,
            willpower,
            intellect,
            charisma,
            sensitivity,
        )
    ]
    if any(attr is None for attr in resolved):
        return None

    return CharacterAttributes(*resolved)
