"""Tests for the skills system."""

from dataclasses import replace

import pytest

from charforge.character.attributes import ATTRIBUTE_NAMES, AttributeName
from charforge.character.skills import (
    SKILL_TEMPLATES,
    SKILL_TRAINING,
    FocusOption,
    SkillCategory,
    SkillTemplate,
    TrainingLevel,
    build_complete_skill_list,
    calculate_skills,
    create_skill,
    extract_all_foci,
    find_duplicate_focus_names,
    get_all_focus_names,
    get_all_skill_names,
    get_foci_rolls,
    get_skill_template,
    get_skill_templates_by_attribute,
    get_skill_templates_by_category,
    get_skill_to_focus_mapping,
    get_skill_training,
    get_skills_by_category,
    update_focus_level,
    update_focus_level_in_list,
    update_skill_training,
    update_skill_training_in_list,
)


@pytest.fixture
def agility(common_character):
    """Untrained Agility on a Common+0 character (5d10, 5+)."""
    return common_character.get_skill("Agility")


class TestTrainingTable:
    """Test training levels and their bonuses."""

    def test_bonuses_and_caps(self):
        """Each rank adds one die and one focus level over the last."""
        rows = {t.level: (t.bonus_dice, t.max_focus_level) for t in SKILL_TRAINING}
        assert rows == {
            TrainingLevel.UNTRAINED: (0, 0),
            TrainingLevel.CURSORY: (1, 1),
            TrainingLevel.SKILLED: (2, 2),
            TrainingLevel.ADEPT: (3, 3),
            TrainingLevel.EXPERT: (4, 4),
        }

    def test_lookup_accepts_strings(self):
        """Training lookup accepts plain strings."""
        assert get_skill_training("Adept").bonus_dice == 3
        assert get_skill_training("Grandmaster") is None


class TestCatalog:
    """Test the skill template catalog."""

    def test_catalog_size(self):
        """Twenty-two skills, two foci each."""
        assert len(SKILL_TEMPLATES) == 22
        assert all(len(t.focus_options) == 2 for t in SKILL_TEMPLATES)

    def test_governing_attributes_are_known(self):
        """Every template is governed by one of the eight attributes."""
        for template in SKILL_TEMPLATES:
            assert template.attribute in ATTRIBUTE_NAMES

    def test_skill_names_unique(self):
        """No two templates share a name."""
        names = get_all_skill_names()
        assert len(names) == len(set(names))

    def test_focus_names_unique_within_skill(self):
        """A skill's two foci have different names."""
        for focus_names in get_skill_to_focus_mapping().values():
            assert len(set(focus_names)) == 2

    def test_no_duplicate_focus_names(self):
        """The shipped catalog has globally unique focus names."""
        assert find_duplicate_focus_names() == []

    def test_duplicate_focus_detection(self):
        """Focus names shared across templates are reported."""
        templates = [
            SKILL_TEMPLATES[0],
            SkillTemplate(
                "Tumbling",
                AttributeName.QUICKNESS,
                SkillCategory.FIELD,
                (FocusOption("Acrobatics"), FocusOption("Roll")),
            ),
        ]
        assert find_duplicate_focus_names(templates) == ["Acrobatics"]

    def test_templates_start_untrained(self):
        """Template foci start at zero."""
        for template in SKILL_TEMPLATES:
            assert template.training == TrainingLevel.UNTRAINED
            for focus in template.focus_options:
                assert (focus.dice, focus.threshold, focus.focus_level) == (0, 0, 0)


class TestCatalogIntrospection:
    """Test catalog lookup helpers."""

    def test_get_all_skill_names(self):
        """Skill names come back in catalog order."""
        names = get_all_skill_names()
        assert names[0] == "Agility"
        assert names[-1] == "Unarmed Combat"
        assert "Axiomatic Magic" in names
        assert "Blood Magic" in names

    def test_get_all_focus_names(self):
        """Focus names include both foci of every skill."""
        names = get_all_focus_names()
        assert len(names) == 44
        assert {"Cut", "Thrust", "Formulae"} <= set(names)

    def test_skill_to_focus_mapping(self):
        """Each skill maps to its two foci in order."""
        mapping = get_skill_to_focus_mapping()
        assert mapping["Swords"] == ["Cut", "Thrust"]
        assert mapping["Blood Magic"] == ["Inherited", "Morphic"]

    def test_skills_by_category(self):
        """Skills are grouped into the four categories."""
        grouped = get_skills_by_category()
        assert set(grouped) == {"Field", "Magic", "Melee", "Ranged"}
        assert "Swords" in grouped["Melee"]
        assert grouped["Magic"] == ["Axiomatic Magic", "Blood Magic", "Bonds Magic", "Focus Magic"]
        assert sum(len(names) for names in grouped.values()) == 22

    def test_get_skill_template(self):
        """A template is found by exact name."""
        swords = get_skill_template("Swords")
        assert swords.attribute == AttributeName.COORDINATION
        assert swords.category == SkillCategory.MELEE
        assert [f.focus for f in swords.focus_options] == ["Cut", "Thrust"]

    def test_get_unknown_skill_template(self):
        """Unknown names give None."""
        assert get_skill_template("NonExistentSkill") is None

    def test_templates_by_category(self):
        """Category filter accepts enum or string."""
        melee = get_skill_templates_by_category("Melee")
        assert melee == get_skill_templates_by_category(SkillCategory.MELEE)
        assert all(t.category == SkillCategory.MELEE for t in melee)
        assert "Swords" in [t.name for t in melee]

    def test_templates_by_attribute(self):
        """Attribute filter returns only matching templates."""
        charisma = get_skill_templates_by_attribute("Charisma")
        assert [t.name for t in charisma] == ["Bonds Magic", "Command", "Persuade"]
        assert get_skill_templates_by_attribute("Luck") == []


class TestSkillDerivation:
    """Test stamping attribute values onto skills."""

    def test_create_skill(self):
        """Dice and threshold flow into the skill and its foci."""
        skill = create_skill(get_skill_template("Athletics"), 6, 4)
        assert skill.attribute_value == 6
        assert skill.base_attribute_value == 6
        assert skill.attribute_threshold == 4
        assert skill.training == TrainingLevel.UNTRAINED
        assert all(f.dice == 6 and f.threshold == 4 for f in skill.focus_options)

    def test_calculate_skills_uses_governing_attribute(self, varied_attributes):
        """Each skill reads its governing attribute's slot."""
        skills = calculate_skills(varied_attributes.dice_values(), varied_attributes.thresholds())
        by_name = {s.name: s for s in skills}
        assert [s.name for s in skills] == get_all_skill_names()
        assert by_name["Athletics"].attribute_value == 4  # strength
        assert by_name["Blood Magic"].attribute_value == 3  # endurance
        assert by_name["Swords"].attribute_value == 12  # coordination
        assert by_name["Swords"].attribute_threshold == 3
        assert by_name["Long Arms"].attribute_value == 9  # sensitivity
        assert by_name["Focus Magic"].attribute_threshold == 5  # willpower

    def test_calculate_skills_pads_missing_values(self):
        """Skills governed by missing slots get zero."""
        skills = {s.name: s for s in calculate_skills([5, 5], [5, 5])}
        assert skills["Athletics"].attribute_value == 5
        assert skills["Agility"].attribute_value == 0
        assert skills["Agility"].attribute_threshold == 0

    def test_build_complete_skill_list_defaults(self):
        """Placeholder skills default to zero dice and threshold."""
        skills = build_complete_skill_list()
        assert len(skills) == 22
        first = skills[0]
        assert first.attribute_value == 0
        assert first.attribute_threshold == 0
        assert first.base_attribute_value == 0
        assert first.training == TrainingLevel.UNTRAINED

    def test_build_complete_skill_list_custom(self):
        """Explicit placeholder values are stamped on every skill."""
        skills = build_complete_skill_list(2, 6)
        assert all(s.attribute_value == 2 and s.attribute_threshold == 6 for s in skills)
        assert skills[0].focus_options[0].dice == 2
        assert skills[0].focus_options[0].threshold == 6

    def test_build_complete_skill_list_from_settings(self, monkeypatch):
        """Placeholder defaults come from settings."""
        monkeypatch.setenv("CHARFORGE_PLACEHOLDER_DICE", "3")
        monkeypatch.setenv("CHARFORGE_PLACEHOLDER_THRESHOLD", "7")
        skills = build_complete_skill_list()
        assert skills[0].attribute_value == 3
        assert skills[0].attribute_threshold == 7


class TestSkillTraining:
    """Test training changes on a single skill."""

    def test_training_adds_bonus(self, agility):
        """Skilled adds two dice to the base."""
        trained = update_skill_training(agility, TrainingLevel.SKILLED)
        assert trained.training == TrainingLevel.SKILLED
        assert trained.attribute_value == 7
        assert trained.base_attribute_value == 5
        assert trained.attribute_threshold == 5
        assert all(f.dice == 7 and f.threshold == 5 for f in trained.focus_options)

    def test_training_does_not_stack(self, agility):
        """Retraining replaces the bonus rather than adding to it."""
        skilled = update_skill_training(agility, TrainingLevel.SKILLED)
        cursory = update_skill_training(skilled, TrainingLevel.CURSORY)
        assert cursory.attribute_value == 6

    def test_training_keeps_focus_levels(self, agility):
        """Focus dice follow the new value plus their own level."""
        skilled = update_skill_training(agility, TrainingLevel.SKILLED)
        focused = update_focus_level(skilled, "Acrobatics", 2)
        expert = update_skill_training(focused, TrainingLevel.EXPERT)
        acrobatics, escape = expert.focus_options
        assert acrobatics.focus_level == 2
        assert acrobatics.dice == 11
        assert escape.dice == 9

    def test_unknown_training_is_noop(self, agility):
        """An unknown level returns the skill unchanged."""
        assert update_skill_training(agility, "Grandmaster") is agility

    def test_training_is_idempotent(self, agility):
        """Applying the same training twice equals applying it once."""
        once = update_skill_training(agility, TrainingLevel.ADEPT)
        assert update_skill_training(once, TrainingLevel.ADEPT) == once

    def test_original_skill_untouched(self, agility):
        """Training returns a copy."""
        update_skill_training(agility, TrainingLevel.EXPERT)
        assert agility.attribute_value == 5
        assert agility.training == TrainingLevel.UNTRAINED


class TestFocusLevel:
    """Test focus level changes on a single skill."""

    def test_focus_within_cap(self, agility):
        """Focus dice = skill dice + focus level."""
        skilled = update_skill_training(agility, TrainingLevel.SKILLED)
        focused = update_focus_level(skilled, "Acrobatics", 2)
        acrobatics, escape = focused.focus_options
        assert acrobatics.focus_level == 2
        assert acrobatics.dice == 9
        assert escape == skilled.focus_options[1]

    def test_focus_capped_by_training(self, agility):
        """Cursory caps focus level at 1."""
        cursory = update_skill_training(agility, TrainingLevel.CURSORY)
        focused = update_focus_level(cursory, "Acrobatics", 3)
        acrobatics = focused.focus_options[0]
        assert acrobatics.focus_level == 1
        assert acrobatics.dice == cursory.attribute_value + 1

    def test_untrained_caps_at_zero(self, agility):
        """Untrained skills cannot raise a focus."""
        focused = update_focus_level(agility, "Escape", 4)
        assert focused.focus_options[1].focus_level == 0
        assert focused.focus_options[1].dice == 5

    def test_unknown_focus_is_noop(self, agility):
        """An unknown focus name leaves every focus alone."""
        skilled = update_skill_training(agility, TrainingLevel.SKILLED)
        assert update_focus_level(skilled, "Juggling", 2) == skilled

    def test_focus_does_not_touch_attribute_values(self, agility):
        """Only the focus changes."""
        skilled = update_skill_training(agility, TrainingLevel.EXPERT)
        focused = update_focus_level(skilled, "Escape", 4)
        assert focused.attribute_value == skilled.attribute_value
        assert focused.base_attribute_value == skilled.base_attribute_value

    def test_focus_is_idempotent(self, agility):
        """Setting the same focus level twice equals setting it once."""
        skilled = update_skill_training(agility, TrainingLevel.SKILLED)
        once = update_focus_level(skilled, "Acrobatics", 2)
        assert update_focus_level(once, "Acrobatics", 2) == once

    def test_focus_can_be_lowered(self, agility):
        """A lower level replaces a higher one."""
        expert = update_skill_training(agility, TrainingLevel.EXPERT)
        high = update_focus_level(expert, "Acrobatics", 4)
        low = update_focus_level(high, "Acrobatics", 1)
        assert low.focus_options[0].focus_level == 1
        assert low.focus_options[0].dice == 10


class TestSkillListUpdates:
    """Test updates applied across a list of skills."""

    def test_training_in_list(self, common_character):
        """Only the named skill is trained."""
        skills = update_skill_training_in_list(
            common_character.skills, "Athletics", TrainingLevel.ADEPT
        )
        by_name = {s.name: s for s in skills}
        assert by_name["Athletics"].attribute_value == 8
        assert by_name["Agility"] == common_character.get_skill("Agility")

    def test_training_unknown_skill(self, common_character):
        """An unknown skill name changes nothing."""
        skills = update_skill_training_in_list(
            common_character.skills, "Juggling", TrainingLevel.ADEPT
        )
        assert skills == common_character.skills

    def test_focus_in_list(self, common_character):
        """The skill holding the focus is updated."""
        skills = update_skill_training_in_list(
            common_character.skills, "Athletics", TrainingLevel.ADEPT
        )
        skills = update_focus_level_in_list(skills, "Prowess", 3)
        athletics = {s.name: s for s in skills}["Athletics"]
        assert athletics.focus_options[1].focus_level == 3
        assert athletics.focus_options[1].dice == 11

    def test_focus_unknown_name(self, common_character):
        """An unknown focus name changes nothing."""
        skills = update_focus_level_in_list(common_character.skills, "Juggling", 2)
        assert skills == common_character.skills

    def test_duplicate_focus_updates_first_skill_only(self, common_character):
        """A focus shared by two skills is only set on the first in order."""
        agility = update_skill_training(
            common_character.get_skill("Agility"), TrainingLevel.EXPERT
        )
        tumbling = replace(
            agility,
            name="Tumbling",
            focus_options=(FocusOption("Acrobatics", 9, 5), FocusOption("Roll", 9, 5)),
        )
        skills = update_focus_level_in_list([agility, tumbling], "Acrobatics", 3)
        assert skills[0].focus_options[0].focus_level == 3
        assert skills[1] == tumbling


class TestFociRolls:
    """Test focus extraction and roll strings."""

    def test_extract_all_foci(self, common_character):
        """Every skill contributes its two foci."""
        foci = extract_all_foci(common_character.skills)
        assert len(foci) == 44
        assert foci[0].focus == "Acrobatics"

    def test_roll_strings_sorted(self, common_character):
        """Rolls are sorted by focus name and formatted as NdD (T+)."""
        rolls = get_foci_rolls(common_character.skills)
        names = [focus for focus, _ in rolls]
        assert names == sorted(names)
        assert dict(rolls)["Cut"] == "5d10 (5+)"

    def test_roll_strings_follow_training(self, common_character):
        """Trained foci show their extra dice."""
        skills = update_skill_training_in_list(
            common_character.skills, "Swords", TrainingLevel.EXPERT
        )
        skills = update_focus_level_in_list(skills, "Thrust", 4)
        assert dict(get_foci_rolls(skills))["Thrust"] == "13d10 (5+)"

    def test_die_label_from_settings(self, common_character, monkeypatch):
        """The die suffix is configurable."""
        monkeypatch.setenv("CHARFORGE_DIE_LABEL", "d6")
        assert dict(get_foci_rolls(common_character.skills))["Cut"] == "5d6 (5+)"
