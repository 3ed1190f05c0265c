"""Character attributes, derived stats, skills and validation."""

from .attributes import (
    ATTRIBUTE_LEVELS,
    ATTRIBUTE_NAMES,
    ATTRIBUTE_TIERS,
    TIER_NAMES,
    Attribute,
    AttributeLevelRow,
    AttributeName,
    CharacterAttributes,
    Tier,
    combine_attributes,
    combine_tier_and_modifier,
    create_character_attributes,
    create_character_attributes_from_tiers,
    get_attribute_by_level,
    get_attribute_tier_by_name,
)
from .character import (
    Character,
    CharacterBuilder,
    FocusLevelChange,
    SkillTrainingChange,
    apply_focus_levels,
    apply_skill_trainings,
    character_builder,
    create_character,
)
from .derived import (
    BodyStats,
    Defenses,
    MagicStats,
    MovementStats,
    Pools,
    Statistics,
    calculate_defenses,
    calculate_pools,
    calculate_statistics,
)
from .skills import (
    SKILL_TEMPLATES,
    SKILL_TRAINING,
    FocusOption,
    Skill,
    SkillCategory,
    SkillTemplate,
    SkillTraining,
    TrainingLevel,
    build_complete_skill_list,
    get_all_focus_names,
    get_all_skill_names,
    get_foci_rolls,
    get_skill_template,
    get_skill_templates_by_attribute,
    get_skill_templates_by_category,
    get_skill_to_focus_mapping,
    get_skills_by_category,
    update_focus_level,
    update_skill_training,
)
from .validation import (
    ValidationIssue,
    ValidationResult,
    get_tier_for_attribute_level,
    validate_attribute,
    validate_attribute_level,
    validate_attribute_level_for_tier,
    validate_character_attributes,
    validate_tier_modifier,
)

__all__ = [
    "ATTRIBUTE_LEVELS",
    "ATTRIBUTE_NAMES",
    "ATTRIBUTE_TIERS",
    "SKILL_TEMPLATES",
    "SKILL_TRAINING",
    "TIER_NAMES",
    "Attribute",
    "AttributeLevelRow",
    "AttributeName",
    "BodyStats",
    "Character",
    "CharacterAttributes",
    "CharacterBuilder",
    "Defenses",
    "FocusLevelChange",
    "FocusOption",
    "MagicStats",
    "MovementStats",
    "Pools",
    "Skill",
    "SkillCategory",
    "SkillTemplate",
    "SkillTraining",
    "SkillTrainingChange",
    "Statistics",
    "Tier",
    "TrainingLevel",
    "ValidationIssue",
    "ValidationResult",
    "apply_focus_levels",
    "apply_skill_trainings",
    "build_complete_skill_list",
    "calculate_defenses",
    "calculate_pools",
    "calculate_statistics",
    "character_builder",
    "combine_attributes",
    "combine_tier_and_modifier",
    "create_character",
    "create_character_attributes",
    "create_character_attributes_from_tiers",
    "get_all_focus_names",
    "get_all_skill_names",
    "get_attribute_by_level",
    "get_attribute_tier_by_name",
    "get_foci_rolls",
    "get_skill_template",
    "get_skill_templates_by_attribute",
    "get_skill_templates_by_category",
    "get_skill_to_focus_mapping",
    "get_skills_by_category",
    "get_tier_for_attribute_level",
    "update_focus_level",
    "update_skill_training",
    "validate_attribute",
    "validate_attribute_level",
    "validate_attribute_level_for_tier",
    "validate_character_attributes",
    "validate_tier_modifier",
]
