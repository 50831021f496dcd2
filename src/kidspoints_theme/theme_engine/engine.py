"""Core theme engine for the Kids Points theming system.

This module provides the ThemeEngine class that builds and caches theme
bundles per (persona, age group, universe), the ThemeFactory with its
accessibility check, the ThemeSelector helpers and the explicit
validate_all_themes() health check.
"""

from typing import Any, Dict, List, Optional, Tuple, Union
import logging

from .generators import ChildThemeGenerator, ParentThemeGenerator
from .registry import ThemeRegistry
from .schema import (
    AgeGroup,
    FactoryValidation,
    Persona,
    SystemHealth,
    ThemeBundle,
    ThemeEntry,
    ThemeHealth,
    UniverseKey,
)
from .utils import WCAG_AAA_RATIO, calculate_contrast_ratio

logger = logging.getLogger(__name__)

CacheKey = Tuple[Persona, Optional[AgeGroup], Optional[UniverseKey]]


class ThemeEngine:
    """Builds theme bundles and memoizes them per generator inputs."""

    def __init__(self, cache_enabled: bool = True):
        """Initialize the theme engine.

        Args:
            cache_enabled: Keep built themes for reuse
        """
        self.registry = ThemeRegistry()
        self.cache_enabled = cache_enabled

        # Built theme cache (persona, age group, universe) -> theme
        self._theme_cache: Dict[CacheKey, ThemeBundle] = {}

        logger.debug(f"ThemeEngine initialized (cache {'on' if cache_enabled else 'off'})")

    @classmethod
    def from_config(cls, config) -> 'ThemeEngine':
        """Create theme engine from application config.

        Args:
            config: Application configuration object

        Returns:
            ThemeEngine instance
        """
        return cls(cache_enabled=getattr(config, 'cache_themes', True))

    def get_theme(self, persona: Union[Persona, str] = Persona.CHILD,
                  age_group: Optional[Union[AgeGroup, str]] = None,
                  universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        """Get the theme for a persona, age group and universe.

        The parent theme ignores age group and universe; a child theme
        without an age group uses the 'child' group.

        Raises:
            ValueError: If any input is not a known value
        """
        try:
            cache_key = self._normalize_key(persona, age_group, universe)
        except ValueError as e:
            logger.error(f"Invalid theme selection: {e}")
            raise ValueError(f"Failed to build theme: {e}") from e

        if cache_key in self._theme_cache:
            logger.debug(f"Theme cache hit for {self._describe(cache_key)}")
            return self._theme_cache[cache_key]

        theme = self._build(cache_key)

        if self.cache_enabled:
            self._theme_cache[cache_key] = theme

        logger.debug(f"Built theme '{theme.metadata.name}'")
        return theme

    def create_child_theme(self, age_group: Union[AgeGroup, str] = AgeGroup.CHILD,
                           universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        return self.get_theme(Persona.CHILD, age_group, universe)

    def create_parent_theme(self) -> ThemeBundle:
        return self.get_theme(Persona.PARENT)

    def load_theme(self, key: str) -> ThemeBundle:
        """Build a predefined theme by catalog key."""
        entry = self.registry.get(key)
        return self.get_theme(*entry.cache_key)

    def list_themes(self) -> List[Dict[str, Any]]:
        """List all predefined themes."""
        return self.registry.list_available_themes()

    def theme_exists(self, key: str) -> bool:
        return self.registry.theme_exists(key)

    def iter_themes(self) -> List[ThemeEntry]:
        """All predefined themes, built, in catalog order."""
        return [
            ThemeEntry(key=entry.key, category=entry.category, theme=self.load_theme(entry.key))
            for entry in self.registry.entries()
        ]

    def get_theme_info(self, key: str) -> Dict[str, Any]:
        """Get detailed information about a predefined theme.

        Args:
            key: Catalog key of the theme

        Returns:
            Theme information dictionary
        """
        try:
            entry = self.registry.get(key)
            theme = self.load_theme(key)
            validation = ThemeFactory.validate_theme(theme)

            return {
                'key': key,
                'name': theme.metadata.name,
                'display_name': theme.metadata.display_name,
                'description': theme.metadata.description,
                'category': entry.category.value,
                'persona': theme.mode.value,
                'age_group': theme.age_group.value if theme.age_group else None,
                'universe': theme.universe.value if theme.universe else None,
                'features': list(theme.metadata.features),
                'contrast_ratio': theme.metadata.accessibility.contrast_ratio,
                'touch_target_size': theme.metadata.accessibility.touch_target_size,
                'score': validation.score,
                'validation_issues': list(validation.issues),
            }

        except ValueError as e:
            return {
                'key': key,
                'error': str(e),
            }

    def clear_cache(self) -> None:
        """Clear all built themes."""
        self._theme_cache.clear()
        logger.debug("Theme engine cache cleared")

    @property
    def cache_size(self) -> int:
        return len(self._theme_cache)

    @staticmethod
    def _normalize_key(persona, age_group, universe) -> CacheKey:
        persona = Persona(persona)
        if persona == Persona.PARENT:
            return (persona, None, None)

        age_group = AgeGroup(age_group) if age_group is not None else AgeGroup.CHILD
        universe = UniverseKey(universe) if universe is not None else None
        return (persona, age_group, universe)

    @staticmethod
    def _build(cache_key: CacheKey) -> ThemeBundle:
        persona, age_group, universe = cache_key
        if persona == Persona.PARENT:
            return ParentThemeGenerator.generate()
        return ChildThemeGenerator.generate(age_group, universe)

    @staticmethod
    def _describe(cache_key: CacheKey) -> str:
        return '/'.join(part.value for part in cache_key if part is not None)


_default_engine: Optional[ThemeEngine] = None


def get_engine() -> ThemeEngine:
    """Get the shared theme engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = ThemeEngine()
    return _default_engine


class ThemeFactory:
    """Theme creation and the factory-level accessibility check."""

    # Penalties of the factory-level check
    TEXT_CONTRAST_PENALTY = 20
    ON_PRIMARY_CONTRAST_PENALTY = 15
    TOUCH_TARGET_PENALTY = 10
    FONT_SIZE_PENALTY = 5

    MIN_TOUCH_TARGET = 44
    MIN_FONT_SIZE = 14

    @staticmethod
    def create_child_theme(age_group: Union[AgeGroup, str] = AgeGroup.CHILD,
                           universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        return get_engine().create_child_theme(age_group, universe)

    @staticmethod
    def create_parent_theme() -> ThemeBundle:
        return get_engine().create_parent_theme()

    @classmethod
    def validate_theme(cls, theme: ThemeBundle) -> FactoryValidation:
        """Validate a theme against WCAG contrast, touch and text size rules.

        Every rule is evaluated; the score starts at 100 and loses a fixed
        penalty per failed rule.

        Args:
            theme: Theme to validate

        Returns:
            FactoryValidation with score, issues and recommendations
        """
        issues = []
        recommendations = []
        score = 100

        text_contrast = calculate_contrast_ratio(theme.colors.text, theme.colors.background)
        if text_contrast < WCAG_AAA_RATIO:
            issues.append(f"Insufficient text/background contrast: {text_contrast:.1f}:1 (required: 7:1)")
            score -= cls.TEXT_CONTRAST_PENALTY

        on_primary_contrast = calculate_contrast_ratio(theme.colors.on_primary, theme.colors.primary)
        if on_primary_contrast < WCAG_AAA_RATIO:
            issues.append(f"Insufficient text contrast on primary color: {on_primary_contrast:.1f}:1")
            score -= cls.ON_PRIMARY_CONTRAST_PENALTY

        touch_target = theme.spacing.touch_target.min
        if touch_target < cls.MIN_TOUCH_TARGET:
            issues.append(f"Touch target too small: {touch_target:g}px (minimum: 44px)")
            score -= cls.TOUCH_TARGET_PENALTY

        base_size = theme.typography.sizes['md']
        if base_size < cls.MIN_FONT_SIZE:
            issues.append(f"Base text too small: {base_size}px (recommended minimum: 14px)")
            score -= cls.FONT_SIZE_PENALTY

        if theme.mode == Persona.CHILD and touch_target < 60:
            recommendations.append('Increase touch targets for children (60px+ recommended)')

        if theme.mode == Persona.PARENT and not theme.animations.reduced_motion:
            recommendations.append('Consider enabling reduced motion by default for parents')

        return FactoryValidation(
            is_valid=not issues,
            score=max(0, score),
            issues=issues,
            recommendations=recommendations,
        )

    @classmethod
    def compare_themes(cls, theme1: ThemeBundle, theme2: ThemeBundle) -> Dict[str, Any]:
        """Compare two themes by factory validation score."""
        validation1 = cls.validate_theme(theme1)
        validation2 = cls.validate_theme(theme2)

        return {
            'theme1': {
                'name': theme1.metadata.name,
                'score': validation1.score,
                'accessibility': theme1.metadata.accessibility,
            },
            'theme2': {
                'name': theme2.metadata.name,
                'score': validation2.score,
                'accessibility': theme2.metadata.accessibility,
            },
            'recommendation': (
                theme1.metadata.name if validation1.score >= validation2.score else theme2.metadata.name
            ),
            'score_difference': abs(validation1.score - validation2.score),
        }


class ThemeSelector:
    """Automatic theme selection helpers."""

    @staticmethod
    def age_group_for(age: int) -> AgeGroup:
        if age <= 6:
            return AgeGroup.YOUNG
        if age <= 10:
            return AgeGroup.CHILD
        return AgeGroup.TEEN

    @classmethod
    def select_by_age(cls, age: int,
                      universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        """Pick the child theme matching an age in years."""
        return get_engine().create_child_theme(cls.age_group_for(age), universe)

    @classmethod
    def select_by_role(cls, role: Union[Persona, str], child_age: Optional[int] = None,
                       universe: Optional[Union[UniverseKey, str]] = None) -> ThemeBundle:
        """Pick a theme from the user's role, and age for children."""
        if Persona(role) == Persona.PARENT:
            return get_engine().create_parent_theme()

        if child_age:
            return cls.select_by_age(child_age, universe)

        return get_engine().create_child_theme(AgeGroup.CHILD, universe)

    @staticmethod
    def get_all_available_themes() -> List[ThemeEntry]:
        return get_engine().iter_themes()


def validate_all_themes(engine: Optional[ThemeEngine] = None) -> SystemHealth:
    """Run the factory check over every predefined theme.

    Meant to be called by application startup code or tooling; it has no
    side effects besides logging and returns the same result on every call.

    Returns:
        SystemHealth with per-theme results and the average score
    """
    engine = engine or get_engine()

    results = [
        ThemeHealth(key=entry.key, category=entry.category,
                    validation=ThemeFactory.validate_theme(entry.theme))
        for entry in engine.iter_themes()
    ]

    for result in results:
        validation = result.validation
        logger.info(f"{'OK' if validation.is_valid else 'FAIL'} {result.key}: "
                    f"{validation.score}% - {len(validation.issues)} issues")
        for issue in validation.issues:
            logger.warning(f"{result.key}: {issue}")

    all_valid = all(r.validation.is_valid for r in results)
    average_score = sum(r.validation.score for r in results) / len(results) if results else 0.0

    logger.info(f"Overall theme system health: {average_score:.1f}% "
                f"({'all themes valid' if all_valid else 'some issues found'})")

    return SystemHealth(results=results, all_valid=all_valid, average_score=average_score)
