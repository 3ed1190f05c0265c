"""Shared fixtures for all tests."""

import pytest

from charforge.character import (
    CharacterAttributes,
    combine_tier_and_modifier,
    create_character,
    create_character_attributes,
)
from charforge.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def common_attribute():
    """A Common+0 attribute (level 8: 5d10, threshold 5)."""
    return combine_tier_and_modifier("Common", 0)


@pytest.fixture
def common_attributes(common_attribute) -> CharacterAttributes:
    """Eight identical Common+0 attributes."""
    return create_character_attributes(*[common_attribute] * 8)


@pytest.fixture
def common_character(common_attributes):
    """An untrained character built from eight Common+0 attributes."""
    return create_character(common_attributes)


@pytest.fixture
def varied_attributes() -> CharacterAttributes:
    """Attributes spread across several tiers.

    Levels: STR 4, END 3, COO 22, QUI 16, WIL 11, INT 12, CHA 11, SEN 15.
    """
    return create_character_attributes(
        combine_tier_and_modifier("Deficit", 4),
        combine_tier_and_modifier("Deficit", 3),
        combine_tier_and_modifier("Remarkable", 6),
        combine_tier_and_modifier("Exceptional", 4),
        combine_tier_and_modifier("Common", 3),
        combine_tier_and_modifier("Common", 4),
        combine_tier_and_modifier("Common", 3),
        combine_tier_and_modifier("Exceptional", 3),
    )
