"""Tests for child and parent theme generation."""

import pytest
from pydantic import ValidationError

from kidspoints_theme.theme_engine.colors import GAMIFICATION_COLORS
from kidspoints_theme.theme_engine.generators import (
    AGE_CONFIGURATIONS,
    BOUNCE_EASING,
    SMOOTH_EASING,
    ChildThemeGenerator,
    ParentThemeGenerator,
)
from kidspoints_theme.theme_engine.schema import (
    AgeGroup,
    FontFamilies,
    LineHeights,
    Persona,
    TYPE_SCALE_KEYS,
    Typography,
    UniverseKey,
)


class TestChildThemeGenerator:
    """Test child theme generation per age group and universe."""

    def test_default_theme(self):
        """Test the default child theme."""
        theme = ChildThemeGenerator.generate()

        assert theme.mode == Persona.CHILD
        assert theme.age_group == AgeGroup.CHILD
        assert theme.universe is None
        assert theme.palette is None
        assert theme.metadata.name == 'child-child'
        assert theme.metadata.display_name == 'Child Mode'
        assert theme.colors.primary == '#0D47A1'
        assert theme.colors.on_primary == '#FFFFFF'
        assert theme.colors.text == '#000000'
        assert 'teal' in theme.colors.extended

    @pytest.mark.parametrize('age_group, touch, md_size', [
        (AgeGroup.YOUNG, 72, 22),
        (AgeGroup.CHILD, 60, 19),
        (AgeGroup.TEEN, 48, 18),
    ])
    def test_age_adaptation(self, age_group, touch, md_size):
        """Test touch targets and type scale per age group."""
        theme = ChildThemeGenerator.generate(age_group)

        assert theme.spacing.touch_target.min == touch
        assert theme.typography.sizes['md'] == md_size
        assert theme.metadata.accessibility.touch_target_size == touch
        assert theme.animations.durations['normal'] == AGE_CONFIGURATIONS[age_group].animation_duration

    def test_all_type_sizes_present(self):
        theme = ChildThemeGenerator.generate('teen')

        assert set(theme.typography.sizes) == set(TYPE_SCALE_KEYS)

    def test_young_specifics(self):
        """Test playful details reserved for the youngest children."""
        theme = ChildThemeGenerator.generate(AgeGroup.YOUNG)

        assert theme.typography.font_families.regular.startswith('Fredoka One')
        assert theme.effects.patterns == ('dots', 'stars', 'confetti')
        assert theme.effects.active_shadow == 'lg'
        assert theme.spacing.border_radius['md'] == 32

    def test_teen_has_no_bounce(self):
        theme = ChildThemeGenerator.generate(AgeGroup.TEEN)

        assert theme.animations.easings['bounce'] == SMOOTH_EASING
        assert theme.effects.patterns is None

    def test_child_bounce(self):
        theme = ChildThemeGenerator.generate(AgeGroup.CHILD)

        assert theme.animations.easings['bounce'] == BOUNCE_EASING
        assert theme.animations.celebration
        assert not theme.animations.reduced_motion

    def test_universe_theme(self):
        """Test that a universe palette colors the theme."""
        theme = ChildThemeGenerator.generate(AgeGroup.CHILD, UniverseKey.AQUA)

        assert theme.universe == UniverseKey.AQUA
        assert theme.palette is not None
        assert theme.colors.primary == '#009688'
        assert theme.colors.background == theme.palette.backgrounds.primary
        assert theme.metadata.name == 'child-child-aqua'
        assert theme.metadata.display_name == 'Child - Aqua'
        assert 'Immersive aqua universe' in theme.metadata.features

    def test_average_contrast(self):
        theme = ChildThemeGenerator.generate()
        expected = ChildThemeGenerator.calculate_average_contrast(theme.colors)

        assert theme.metadata.accessibility.contrast_ratio == expected
        assert expected > 7.0

    def test_shadows_and_glow(self):
        theme = ChildThemeGenerator.generate()

        assert {'sm', 'md', 'lg', 'xl', 'primary'} <= set(theme.effects.shadows)
        assert theme.effects.glow['primary'].color == theme.colors.primary

    def test_unknown_inputs(self):
        with pytest.raises(ValueError):
            ChildThemeGenerator.generate('toddler')
        with pytest.raises(ValueError):
            ChildThemeGenerator.generate(AgeGroup.CHILD, 'desert')


class TestParentThemeGenerator:
    """Test the professional parent theme."""

    def test_parent_theme(self):
        theme = ParentThemeGenerator.generate()

        assert theme.mode == Persona.PARENT
        assert theme.age_group is None
        assert theme.metadata.name == 'parent-professional'
        assert theme.colors.text == '#000000'
        assert theme.colors.background == '#FFFFFF'
        assert theme.colors.on_primary == '#FFFFFF'

    def test_professional_settings(self):
        """Test the calmer, denser parent settings."""
        theme = ParentThemeGenerator.generate()

        assert theme.spacing.touch_target.min == 44
        assert theme.typography.sizes['md'] == 16
        assert theme.animations.durations['normal'] == 200
        assert theme.animations.reduced_motion
        assert not theme.animations.celebration
        assert 'Inter' in theme.typography.font_families.regular
        assert theme.metadata.accessibility.keyboard_navigation

    def test_gamification_toned_down(self):
        theme = ParentThemeGenerator.generate()

        assert theme.colors.points != GAMIFICATION_COLORS['points']
        assert theme.colors.gray[900] == '#212121'
        assert theme.colors.dark['background'] == '#121212'
        assert 'homework' in theme.colors.semantics

    def test_focus_ring(self):
        theme = ParentThemeGenerator.generate()

        assert 'focus_ring' in theme.effects.glow


class TestTypographySchema:
    """Test typography model validation."""

    def test_missing_sizes_rejected(self):
        with pytest.raises(ValidationError):
            Typography(
                font_families=FontFamilies(
                    regular='Inter', medium='Inter', semi_bold='Inter', bold='Inter', extra_bold='Inter'
                ),
                sizes={'md': 16},
                line_heights=LineHeights(tight=1.2, normal=1.5, relaxed=1.7),
                weights={},
            )
