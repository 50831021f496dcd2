"""Tests for ThemeValidator reports."""

import logging

from kidspoints_theme.theme_engine import (
    AgeGroup,
    Persona,
    ThemeEngine,
    ThemeValidator,
    WCAGLevel,
)
from kidspoints_theme.theme_engine.schema import TouchTargets
from kidspoints_theme.theme_engine.validator import GLOBAL_RECOMMENDATIONS


def _with_colors(theme, **colors):
    return theme.model_copy(update={'colors': theme.colors.model_copy(update=colors)})


class TestAccessibility:
    """Test the accessibility sub-report."""

    def setup_method(self):
        self.engine = ThemeEngine()

    def test_parent_is_aaa(self):
        """Test that the parent theme rates AAA with white on deep blue."""
        report = ThemeValidator.validate_theme(self.engine.create_parent_theme())

        assert report.theme_name == 'parent-professional'
        assert report.category == Persona.PARENT
        assert report.wcag_level == WCAGLevel.AAA
        assert report.score == 100
        assert report.accessibility.contrast_ratio == 21.0
        assert report.accessibility.touch_target_compliance
        assert report.issues == []

    def test_child_themes_are_aaa(self):
        for age_group in AgeGroup:
            report = ThemeValidator.validate_theme(self.engine.create_child_theme(age_group))

            assert report.wcag_level == WCAGLevel.AAA

    def test_teen_touch_recommendation(self):
        """Test that 48px targets pass but are flagged for children."""
        report = ThemeValidator.validate_accessibility(self.engine.create_child_theme('teen'))

        assert report.overall_score == 100
        assert report.recommendations == ['Raise touch targets to 60px+ for children']

    def test_penalties_are_independent(self):
        """Test that every failing rule is reported with its weight."""
        theme = self.engine.create_child_theme()
        theme = _with_colors(theme, text='#CCCCCC', on_primary=theme.colors.primary)
        theme = theme.model_copy(update={
            'spacing': theme.spacing.model_copy(update={
                'touch_target': TouchTargets(min=40, comfortable=40, generous=40)
            }),
            'typography': theme.typography.model_copy(update={
                'sizes': dict(theme.typography.sizes, md=12)
            }),
        })
        report = ThemeValidator.validate_accessibility(theme)

        # 25 + 20 + 15 + 10
        assert report.overall_score == 30
        assert report.wcag_level == WCAGLevel.AA
        assert len(report.issues) == 4
        assert not report.touch_target_compliance
        assert len(report.recommendations) == 2

    def test_single_issue_drops_to_aa(self):
        theme = _with_colors(self.engine.create_child_theme(), text='#CCCCCC')
        report = ThemeValidator.validate_accessibility(theme)

        assert report.overall_score == 75
        assert report.wcag_level == WCAGLevel.AA

    def test_stricter_than_factory_for_universe(self):
        """Test that a universe failing text-on-primary loses 20 points."""
        report = ThemeValidator.validate_theme(self.engine.create_child_theme('child', 'candy'))

        assert report.score == 80
        assert report.wcag_level == WCAGLevel.AA

    def test_parent_motion_recommendation(self):
        theme = self.engine.create_parent_theme()
        theme = theme.model_copy(update={
            'animations': theme.animations.model_copy(update={'reduced_motion': False})
        })

        assert ThemeValidator.validate_accessibility(theme).recommendations == [
            'Enable reduced motion by default in parent mode'
        ]


class TestColorHarmony:
    """Test the color harmony sub-report."""

    def setup_method(self):
        self.engine = ThemeEngine()

    def test_child_primary(self):
        report = ThemeValidator.validate_color_harmony(self.engine.create_child_theme())

        assert report.score == 100
        assert report.primary_hue == 216
        assert report.saturation_balance == 85
        assert report.brightness_range == 34
        assert report.notes == []

    def test_parent_saturation_penalty(self):
        report = ThemeValidator.validate_color_harmony(self.engine.create_parent_theme())

        assert report.score == 85
        assert report.notes == ['High saturation for professional mode']

    def test_low_saturation_child(self):
        theme = _with_colors(self.engine.create_child_theme(), primary='#808080')
        report = ThemeValidator.validate_color_harmony(theme)

        assert report.score == 90
        assert 'Low saturation for child mode' in report.notes

    def test_dark_and_close_hues(self):
        """Test the dark primary and similar secondary penalties together."""
        theme = _with_colors(self.engine.create_child_theme(), primary='#080845', secondary='#0A0A80')
        report = ThemeValidator.validate_color_harmony(theme)

        # 20 (dark) + 5 (same hue)
        assert report.score == 75

    def test_complementary_note(self):
        """Test the note for hues more than 180 degrees apart."""
        theme = _with_colors(self.engine.create_child_theme(), primary='#0D47A1', secondary='#E65100')
        report = ThemeValidator.validate_color_harmony(theme)

        assert 'Complementary colors, strong contrast' in report.notes
        assert report.score == 100

    def test_unparseable_primary(self):
        theme = _with_colors(self.engine.create_child_theme(), primary='bogus')
        report = ThemeValidator.validate_color_harmony(theme)

        assert report.score == 0
        assert report.notes == ['Unable to parse the primary color']

    def test_unparseable_primary_full_report(self):
        """Test that a broken theme still yields a report."""
        theme = _with_colors(self.engine.create_child_theme(), primary='bogus')
        report = ThemeValidator.validate_theme(theme)

        assert report.color_harmony.score == 0
        assert report.wcag_level == WCAGLevel.AA


class TestUsability:
    """Test persona fit scores."""

    def setup_method(self):
        self.engine = ThemeEngine()

    def test_child_scores(self):
        scores = ThemeValidator.validate_usability(self.engine.create_child_theme())

        assert scores.child_friendly == 100
        assert scores.parent_professional == 20
        assert scores.cross_platform == 100
        assert scores.performance == 85

    def test_teen_performance(self):
        scores = ThemeValidator.validate_usability(self.engine.create_child_theme('teen'))

        assert scores.performance == 95

    def test_young_font_is_not_system(self):
        scores = ThemeValidator.validate_usability(self.engine.create_child_theme('young'))

        assert scores.cross_platform == 90

    def test_parent_scores(self):
        scores = ThemeValidator.validate_usability(self.engine.create_parent_theme())

        assert scores.child_friendly == 20
        assert scores.parent_professional == 100
        assert scores.cross_platform == 90
        assert scores.performance == 95


class TestCompleteReport:
    """Test the aggregated report."""

    def test_all_predefined(self):
        report = ThemeValidator.generate_complete_report()

        assert report.summary.total_themes == 12
        assert len(report.themes) == 12
        assert report.recommendations == list(GLOBAL_RECOMMENDATIONS)
        assert report.summary.wcag_aaa_compliant >= 4
        assert report.summary.best_theme == 'child-young'

    def test_average_is_rounded(self):
        report = ThemeValidator.generate_complete_report()
        scores = [r.score for r in report.themes]

        assert abs(report.summary.average_score - sum(scores) / len(scores)) <= 0.05
        assert round(report.summary.average_score, 1) == report.summary.average_score

    def test_best_and_worst(self):
        engine = ThemeEngine()
        weak = _with_colors(engine.create_child_theme(), text='#CCCCCC')
        report = ThemeValidator.generate_complete_report([weak, engine.create_parent_theme()])

        assert report.summary.best_theme == 'parent-professional'
        assert report.summary.worst_theme == 'child-child'
        assert report.summary.average_score == 87.5
        assert report.summary.wcag_aaa_compliant == 1

    def test_empty(self):
        report = ThemeValidator.generate_complete_report([])

        assert report.summary.total_themes == 0
        assert report.summary.best_theme == 'None'
        assert report.summary.average_score == 0.0

    def test_log_report(self, caplog):
        engine = ThemeEngine()
        weak = _with_colors(engine.create_child_theme(), text='#CCCCCC')

        with caplog.at_level(logging.INFO, logger='kidspoints_theme.theme_engine.validator'):
            report = ThemeValidator.log_report([weak])

        assert report.summary.total_themes == 1
        assert 'Theme validation: 1 themes' in caplog.text
        assert 'Insufficient main text contrast' in caplog.text
