"""Theme validation reports.

ThemeValidator scores a theme on three axes: accessibility (contrast, touch
targets, text size), color harmony of the primary/secondary pair and
persona fit. Its accessibility weights are stricter than the quick
ThemeFactory check; both are kept as separate checks.
"""

import logging
from typing import Iterable, List, Optional

from .engine import get_engine
from .schema import (
    AccessibilityReport,
    ColorHarmonyReport,
    CompleteReport,
    Persona,
    ReportSummary,
    ThemeBundle,
    UsabilityScores,
    ValidationReport,
    WCAGLevel,
)
from .utils import WCAG_AAA_RATIO, calculate_contrast_ratio, hex_to_rgb, rgb_to_hsl, round_half_up

logger = logging.getLogger(__name__)


GLOBAL_RECOMMENDATIONS = (
    'Keep a minimum contrast of 7:1 for WCAG AAA',
    'Use touch targets of at least 44px (60px+ for children)',
    'Test every theme with screen readers',
    'Check colors with color blindness simulations',
    'Respect system preferences (prefers-reduced-motion)',
)


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return min(high, max(low, value))


class ThemeValidator:
    """Accessibility, harmony and usability scoring for themes."""

    TEXT_CONTRAST_PENALTY = 25
    ON_PRIMARY_CONTRAST_PENALTY = 20
    TOUCH_TARGET_PENALTY = 15
    FONT_SIZE_PENALTY = 10

    # Minimum accessibility score rated AAA
    AAA_SCORE = 95

    @classmethod
    def validate_theme(cls, theme: ThemeBundle) -> ValidationReport:
        """Build the full validation report of a theme.

        Args:
            theme: Theme to validate

        Returns:
            ValidationReport combining the three sub-reports
        """
        return ValidationReport(
            theme_name=theme.metadata.name,
            category=theme.mode,
            accessibility=cls.validate_accessibility(theme),
            color_harmony=cls.validate_color_harmony(theme),
            usability=cls.validate_usability(theme),
        )

    @classmethod
    def validate_accessibility(cls, theme: ThemeBundle) -> AccessibilityReport:
        """Score contrast, touch target and text size.

        All four rules are evaluated so every issue is reported at once.
        """
        issues = []
        recommendations = []
        score = 100

        text_contrast = calculate_contrast_ratio(theme.colors.text, theme.colors.background)
        if text_contrast < WCAG_AAA_RATIO:
            issues.append(f"Insufficient main text contrast: {text_contrast:.1f}:1")
            score -= cls.TEXT_CONTRAST_PENALTY

        on_primary_contrast = calculate_contrast_ratio(theme.colors.on_primary, theme.colors.primary)
        if on_primary_contrast < WCAG_AAA_RATIO:
            issues.append(f"Insufficient contrast on primary color: {on_primary_contrast:.1f}:1")
            score -= cls.ON_PRIMARY_CONTRAST_PENALTY

        touch_target = theme.spacing.touch_target.min
        if touch_target < 44:
            issues.append(f"Touch target too small: {touch_target:g}px (minimum: 44px)")
            score -= cls.TOUCH_TARGET_PENALTY

        base_size = theme.typography.sizes['md']
        if base_size < 14:
            issues.append(f"Base font too small: {base_size}px")
            score -= cls.FONT_SIZE_PENALTY

        if theme.mode == Persona.CHILD:
            if touch_target < 60:
                recommendations.append('Raise touch targets to 60px+ for children')
            if base_size < 16:
                recommendations.append('Consider a larger base font for children (16px+)')

        if theme.mode == Persona.PARENT and not theme.animations.reduced_motion:
            recommendations.append('Enable reduced motion by default in parent mode')

        return AccessibilityReport(
            wcag_level=WCAGLevel.AAA if score >= cls.AAA_SCORE else WCAGLevel.AA,
            overall_score=max(0, score),
            contrast_ratio=round_half_up(text_contrast * 10) / 10,
            touch_target_compliance=touch_target >= 44,
            issues=issues,
            recommendations=recommendations,
        )

    @staticmethod
    def validate_color_harmony(theme: ThemeBundle) -> ColorHarmonyReport:
        """Score saturation and lightness of the primary and its hue distance to the secondary."""
        primary_rgb = hex_to_rgb(theme.colors.primary)
        if primary_rgb is None:
            return ColorHarmonyReport(
                score=0,
                primary_hue=0,
                saturation_balance=0,
                brightness_range=0,
                notes=['Unable to parse the primary color'],
            )

        score = 100
        notes = []
        primary_h, primary_s, primary_l = rgb_to_hsl(*primary_rgb)

        if theme.mode == Persona.CHILD:
            if primary_s < 60:
                notes.append('Low saturation for child mode')
                score -= 10
            if primary_s > 95:
                notes.append('Very high saturation, may be tiring')
                score -= 5
        elif primary_s > 70:
            notes.append('High saturation for professional mode')
            score -= 15

        if primary_l < 20:
            notes.append('Very dark color, contrast is hard to reach')
            score -= 20
        if primary_l > 80:
            notes.append('Very light color, may lack presence')
            score -= 10

        secondary_rgb = hex_to_rgb(theme.colors.secondary)
        if secondary_rgb is not None:
            secondary_h = rgb_to_hsl(*secondary_rgb)[0]
            # Plain difference, not the circular distance
            hue_difference = abs(primary_h - secondary_h)

            if hue_difference < 15:
                notes.append('Primary and secondary colors are very close')
                score -= 5
            if hue_difference > 180:
                notes.append('Complementary colors, strong contrast')

        return ColorHarmonyReport(
            score=max(0, score),
            primary_hue=primary_h,
            saturation_balance=primary_s,
            brightness_range=primary_l,
            notes=notes,
        )

    @staticmethod
    def validate_usability(theme: ThemeBundle) -> UsabilityScores:
        """Score how well the theme fits each persona and platform."""
        child_friendly = 50
        parent_professional = 50
        cross_platform = 80
        performance = 80

        touch_target = theme.spacing.touch_target.min
        regular_font = theme.typography.font_families.regular

        if theme.mode == Persona.CHILD:
            child_friendly += 30
            if touch_target >= 60:
                child_friendly += 10
            if theme.typography.sizes['md'] >= 16:
                child_friendly += 10
            if theme.animations.celebration:
                child_friendly += 5
            if theme.spacing.border_radius.get('md', 0) >= 16:
                child_friendly += 5

            parent_professional -= 20
            if theme.animations.celebration:
                parent_professional -= 10
        else:
            parent_professional += 30
            if theme.animations.reduced_motion:
                parent_professional += 10
            if touch_target == 44:
                parent_professional += 5
            if 'Inter' in regular_font:
                parent_professional += 10

            child_friendly -= 30

        if 'system-ui' in regular_font:
            cross_platform += 10
        if touch_target >= 44:
            cross_platform += 10

        if theme.animations.durations.get('normal', 0) <= 300:
            performance += 10
        if theme.effects.shadows:
            performance += 5

        return UsabilityScores(
            child_friendly=_clamp(child_friendly),
            parent_professional=_clamp(parent_professional),
            cross_platform=_clamp(cross_platform),
            performance=_clamp(performance),
        )

    @classmethod
    def generate_complete_report(cls, themes: Optional[Iterable[ThemeBundle]] = None) -> CompleteReport:
        """Validate a set of themes and summarize the results.

        Args:
            themes: Themes to validate (default: every predefined theme)

        Returns:
            CompleteReport with summary, per-theme reports and global recommendations
        """
        if themes is None:
            themes = [entry.theme for entry in get_engine().iter_themes()]

        reports = [cls.validate_theme(theme) for theme in themes]

        if reports:
            average_score = sum(r.score for r in reports) / len(reports)
            # Stable sort keeps catalog order among equal scores
            ranked = sorted(reports, key=lambda r: r.score, reverse=True)
            best_theme = ranked[0].theme_name
            worst_theme = ranked[-1].theme_name
        else:
            average_score = 0.0
            best_theme = worst_theme = 'None'

        summary = ReportSummary(
            total_themes=len(reports),
            wcag_aaa_compliant=sum(1 for r in reports if r.wcag_level == WCAGLevel.AAA),
            average_score=round_half_up(average_score * 10) / 10,
            best_theme=best_theme,
            worst_theme=worst_theme,
        )

        return CompleteReport(
            summary=summary,
            themes=reports,
            recommendations=list(GLOBAL_RECOMMENDATIONS),
        )

    @classmethod
    def log_report(cls, themes: Optional[Iterable[ThemeBundle]] = None) -> CompleteReport:
        """Generate the complete report and write it to the log."""
        report = cls.generate_complete_report(themes)
        summary = report.summary

        logger.info(f"Theme validation: {summary.total_themes} themes, "
                    f"{summary.wcag_aaa_compliant}/{summary.total_themes} WCAG AAA, "
                    f"average score {summary.average_score}%")
        logger.info(f"Best theme: {summary.best_theme}, worst theme: {summary.worst_theme}")

        for theme_report in report.themes:
            logger.info(f"{theme_report.theme_name}: {theme_report.score}% "
                        f"({theme_report.wcag_level.value})")
            for issue in theme_report.issues:
                logger.warning(f"{theme_report.theme_name}: {issue}")

        for recommendation in report.recommendations:
            logger.debug(f"Recommendation: {recommendation}")

        return report
