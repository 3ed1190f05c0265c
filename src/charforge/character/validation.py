"""Advisory validation for attributes, tiers and levels.

The schemas are Pydantic models over the same static tables the resolver
uses. The validate_* helpers never raise: they return a ValidationResult
carrying either the validated data or a list of issues, each with a field
path and a message.
"""

from dataclasses import asdict, is_dataclass
from typing import Any, Literal

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from charforge.character.attributes import (
    ATTRIBUTE_LEVELS,
    ATTRIBUTE_TIERS,
    MAX_ATTRIBUTE_LEVEL,
    MIN_ATTRIBUTE_LEVEL,
    get_attribute_by_level,
    get_attribute_tier_by_name,
)

logger = structlog.get_logger(__name__)

TierNameLiteral = Literal[
    "Deficit", "Poor", "Common", "Exceptional", "Remarkable", "Heroic", "Legendary"
]


class AttributeSchema(BaseModel):
    """Shape and ranges of a resolved Attribute."""

    model_config = ConfigDict(frozen=True)

    dice: StrictInt = Field(..., gt=0, description="Number of dice rolled")
    threshold: StrictInt = Field(..., gt=0, description="Minimum die face counted as a success")
    pool: StrictInt = Field(..., ge=0, description="Contribution to resource pools")
    statistic: StrictInt = Field(..., ge=0, description="Contribution to statistics")
    defense: StrictInt = Field(..., description="Contribution to defenses")


class AttributeTierSchema(BaseModel):
    """A tier name and its base level."""

    model_config = ConfigDict(frozen=True)

    name: TierNameLiteral
    base_level: StrictInt = Field(..., ge=0)


class AttributeLevelRowSchema(BaseModel):
    """One row of the attribute level table."""

    model_config = ConfigDict(frozen=True)

    level: StrictInt = Field(..., ge=MIN_ATTRIBUTE_LEVEL, le=MAX_ATTRIBUTE_LEVEL)
    dice: StrictInt = Field(..., gt=0)
    defense: StrictInt
    pool: StrictInt = Field(..., ge=0)
    statistic: StrictInt = Field(..., ge=0)
    threshold: StrictInt = Field(..., gt=0, le=10)


class CharacterAttributesSchema(BaseModel):
    """All eight attribute slots."""

    model_config = ConfigDict(frozen=True)

    strength: AttributeSchema
    endurance: AttributeSchema
    coordination: AttributeSchema
    quickness: AttributeSchema
    willpower: AttributeSchema
    intellect: AttributeSchema
    charisma: AttributeSchema
    sensitivity: AttributeSchema


class TierModifierCombination(BaseModel):
    """A tier name and modifier whose sum must be a valid attribute level."""

    model_config = ConfigDict(frozen=True)

    tier_name: TierNameLiteral
    modifier: StrictInt

    @field_validator("modifier")
    @classmethod
    def check_level_in_range(cls, modifier: int, info: ValidationInfo) -> int:
        tier_name = info.data.get("tier_name")
        if tier_name is None:
            return modifier

        level = get_attribute_tier_by_name(tier_name).base_level + modifier
        if not MIN_ATTRIBUTE_LEVEL <= level <= MAX_ATTRIBUTE_LEVEL:
            raise ValueError(
                "The combination of tier and modifier results in an invalid attribute level"
            )
        return modifier


class ValidationIssue(BaseModel):
    """A single validation failure."""

    path: tuple[str | int, ...]
    message: str


class ValidationResult(BaseModel):
    """Outcome of a validation helper."""

    success: bool
    data: Any = None
    errors: list[ValidationIssue] = Field(default_factory=list)


def _as_mapping(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


def _ok(data: Any) -> ValidationResult:
    return ValidationResult(success=True, data=data)


def _fail(issues: list[ValidationIssue], check: str) -> ValidationResult:
    logger.debug(
        "validation_failed",
        check=check,
        errors=[f"{'.'.join(map(str, i.path))}: {i.message}" for i in issues],
    )
    return ValidationResult(success=False, errors=issues)


def _from_error(error: ValidationError, check: str) -> ValidationResult:
    issues = [ValidationIssue(path=tuple(e["loc"]), message=e["msg"]) for e in error.errors()]
    return _fail(issues, check)


def _validate(model: type[BaseModel], value: Any, check: str) -> ValidationResult:
    try:
        return _ok(model.model_validate(_as_mapping(value)))
    except ValidationError as e:
        return _from_error(e, check)


def validate_attribute(attribute: Any) -> ValidationResult:
    """Validate a single Attribute (dataclass or mapping)."""
    return _validate(AttributeSchema, attribute, "attribute")


def validate_character_attributes(attributes: Any) -> ValidationResult:
    """Validate a full CharacterAttributes set (dataclass or mapping)."""
    return _validate(CharacterAttributesSchema, attributes, "character_attributes")


def validate_tier_modifier(tier_name: str, modifier: int) -> ValidationResult:
    """Check that a tier exists and tier base + modifier lands in 0-30."""
    return _validate(
        TierModifierCombination,
        {"tier_name": tier_name, "modifier": modifier},
        "tier_modifier",
    )


def validate_attribute_level(level: Any) -> ValidationResult:
    """Check that a level is an integer present in the level table."""
    if isinstance(level, bool) or not isinstance(level, int):
        return _fail(
            [ValidationIssue(path=("level",), message="Attribute level must be an integer")],
            "attribute_level",
        )

    if not MIN_ATTRIBUTE_LEVEL <= level <= MAX_ATTRIBUTE_LEVEL:
        return _fail(
            [
                ValidationIssue(
                    path=("level",),
                    message=(
                        f"Attribute level must be between {MIN_ATTRIBUTE_LEVEL} "
                        f"and {MAX_ATTRIBUTE_LEVEL}"
                    ),
                )
            ],
            "attribute_level",
        )

    if get_attribute_by_level(level) is None:
        levels = ", ".join(str(row.level) for row in ATTRIBUTE_LEVELS)
        return _fail(
            [
                ValidationIssue(
                    path=("level",),
                    message=f"Attribute level must be one of the predefined levels: {levels}",
                )
            ],
            "attribute_level",
        )

    return _ok(level)


def tier_level_range(tier_name: str) -> tuple[int, int] | None:
    """Inclusive (min, max) levels of a tier, or None for an unknown tier.

    A tier ends one below the next tier's base level; the last tier ends at
    the maximum attribute level.
    """
    for i, tier in enumerate(ATTRIBUTE_TIERS):
        if tier.name == tier_name:
            if i < len(ATTRIBUTE_TIERS) - 1:
                return tier.base_level, ATTRIBUTE_TIERS[i + 1].base_level - 1
            return tier.base_level, MAX_ATTRIBUTE_LEVEL
    return None


def validate_attribute_level_for_tier(tier_name: str, level: Any) -> ValidationResult:
    """Check that a level falls inside the named tier's band."""
    band = tier_level_range(tier_name)
    if band is None:
        valid = ", ".join(tier.name for tier in ATTRIBUTE_TIERS)
        return _fail(
            [
                ValidationIssue(
                    path=("tier_name",),
                    message=f"{tier_name} is not a valid tier name. Valid tiers are: {valid}",
                )
            ],
            "attribute_level_for_tier",
        )

    if isinstance(level, bool) or not isinstance(level, int):
        return _fail(
            [ValidationIssue(path=("level",), message="Attribute level must be an integer")],
            "attribute_level_for_tier",
        )

    min_level, max_level = band
    if not min_level <= level <= max_level:
        return _fail(
            [
                ValidationIssue(
                    path=("level",),
                    message=(
                        f"Level {level} is outside the valid range for tier "
                        f"{tier_name} ({min_level}-{max_level})"
                    ),
                )
            ],
            "attribute_level_for_tier",
        )

    return _ok({"tier_name": tier_name, "level": level})


def get_tier_for_attribute_level(level: Any) -> str | None:
    """Name of the tier containing a level, or None for an invalid level."""
    if not validate_attribute_level(level).success:
        return None

    for tier in reversed(ATTRIBUTE_TIERS):
        if level >= tier.base_level:
            return tier.name
    return None


def validate_level_table() -> ValidationResult:
    """Check the built-in level table: rows valid, levels contiguous from 0 to 30."""
    issues: list[ValidationIssue] = []
    for i, row in enumerate(ATTRIBUTE_LEVELS):
        result = _validate(AttributeLevelRowSchema, row, "level_table_row")
        issues.extend(
            ValidationIssue(path=(i, *issue.path), message=issue.message)
            for issue in result.errors
        )
        if row.level != MIN_ATTRIBUTE_LEVEL + i:
            issues.append(
                ValidationIssue(path=(i, "level"), message=f"Expected level {i}, got {row.level}")
            )

    if len(ATTRIBUTE_LEVELS) != MAX_ATTRIBUTE_LEVEL - MIN_ATTRIBUTE_LEVEL + 1:
        issues.append(
            ValidationIssue(path=(), message=f"Expected 31 levels, got {len(ATTRIBUTE_LEVELS)}")
        )

    if issues:
        return _fail(issues, "level_table")
    return _ok(ATTRIBUTE_LEVELS)
