"""Pools, defenses and statistics derived from the eight attributes.

Every calculation takes one column of attribute values (pool, defense or
statistic) in the fixed attribute order:

    strength, endurance, coordination, quickness,
    willpower, intellect, charisma, sensitivity
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

ATTRIBUTE_SLOTS = 8


@dataclass(frozen=True)
class Pools:
    """Resource pools."""

    life_pool: int
    action_pool: int
    reserve_pool: int
    fate_pool: int


@dataclass(frozen=True)
class Defenses:
    """Defense values."""

    body: int
    evasion: int
    awareness: int
    grit: int
    spirit: int


@dataclass(frozen=True)
class BodyStats:
    """Multiples of body power."""

    half: int
    base: int
    extra: int
    double: int


@dataclass(frozen=True)
class MagicStats:
    """Multiples of magic power."""

    half: int
    base: int
    extra: int
    double: int


@dataclass(frozen=True)
class MovementStats:
    """Distances per movement rate."""

    advance: int
    hustle: int
    dash: int
    sprint: int


@dataclass(frozen=True)
class Statistics:
    """Aggregate statistics with body, magic and movement sub-stats."""

    body_power: int
    body_statistics: BodyStats
    magic_power: int
    magic_statistics: MagicStats
    reflexes: int
    speed: int
    movement: MovementStats
    stability: int


def _normalize(values: Sequence[int]) -> list[int]:
    """Pad with zeros or truncate to exactly eight values."""
    padded = list(values[:ATTRIBUTE_SLOTS])
    return padded + [0] * (ATTRIBUTE_SLOTS - len(padded))


def calculate_pools(pool_values: Sequence[int]) -> Pools:
    """Calculate pools from the attribute pool column.

    - life: strength + endurance
    - action: coordination + quickness
    - reserve: willpower + intellect
    - fate: charisma + sensitivity
    """
    v = _normalize(pool_values)
    return Pools(
        life_pool=v[0] + v[1],
        action_pool=v[2] + v[3],
        reserve_pool=v[4] + v[5],
        fate_pool=v[6] + v[7],
    )


def calculate_defenses(defense_values: Sequence[int]) -> Defenses:
    """Calculate defenses from the attribute defense column.

    Awareness and grit come from a single attribute each (willpower and
    intellect), the rest from a pair.
    """
    v = _normalize(defense_values)
    return Defenses(
        body=v[0] + v[1],
        evasion=v[2] + v[3],
        awareness=v[4],
        grit=v[5],
        spirit=v[6] + v[7],
    )


def calculate_body_stats(body_power: int) -> BodyStats:
    """Split body power into half, base, extra and double values."""
    return BodyStats(
        half=body_power // 2,
        base=body_power,
        extra=math.floor(body_power * 1.5),
        double=body_power * 2,
    )


def calculate_magic_stats(magic_power: int) -> MagicStats:
    """Split magic power into half, base, extra and double values."""
    return MagicStats(
        half=magic_power // 2,
        base=magic_power,
        extra=math.floor(magic_power * 1.5),
        double=magic_power * 2,
    )


def calculate_movement_stats(speed: int) -> MovementStats:
    """Movement distances per action, scaling with speed + 1."""
    step = speed + 1
    return MovementStats(
        advance=step,
        hustle=step * 2,
        dash=step * 3,
        sprint=step * 4,
    )


def calculate_statistics(statistic_values: Sequence[int]) -> Statistics:
    """Calculate statistics from the attribute statistic column.

    Endurance feeds both body power and stability.

    Args:
        statistic_values: Statistic column in attribute order

    Returns:
        Statistics including body, magic and movement sub-stats
    """
    v = _normalize(statistic_values)

    body_power = v[0] + v[1]
    reflexes = v[2] + v[3]
    speed = reflexes // 2
    magic_power = v[4] + v[5]
    stability = v[1] + v[4]

    return Statistics(
        body_power=body_power,
        body_statistics=calculate_body_stats(body_power),
        magic_power=magic_power,
        magic_statistics=calculate_magic_stats(magic_power),
        reflexes=reflexes,
        speed=speed,
        movement=calculate_movement_stats(speed),
        stability=stability,
    )
