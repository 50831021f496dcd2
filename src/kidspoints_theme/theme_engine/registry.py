"""Theme registry for the predefined theme catalog.

This module provides the ThemeRegistry class listing the built-in themes
(one per child age group, one per universe and the parent theme) and the
inputs each one is generated from.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any
import logging

from .schema import AgeGroup, Persona, ThemeCategory, UniverseKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PredefinedTheme:
    """Catalog entry: a theme key and the generator inputs behind it"""
    key: str
    category: ThemeCategory
    persona: Persona
    age_group: Optional[AgeGroup] = None
    universe: Optional[UniverseKey] = None

    @property
    def cache_key(self):
        return (self.persona, self.age_group, self.universe)


def _builtin_catalog() -> List[PredefinedTheme]:
    catalog = [
        PredefinedTheme(age.value, ThemeCategory.CHILD_AGE, Persona.CHILD, age)
        for age in AgeGroup
    ]
    catalog.extend(
        PredefinedTheme(universe.value, ThemeCategory.CHILD_UNIVERSE, Persona.CHILD,
                        AgeGroup.CHILD, universe)
        for universe in UniverseKey
    )
    catalog.append(PredefinedTheme('parent', ThemeCategory.PARENT, Persona.PARENT))
    return catalog


class ThemeRegistry:
    """Registry of the predefined themes."""

    def __init__(self):
        self._themes: Dict[str, PredefinedTheme] = {}
        for entry in _builtin_catalog():
            self._themes[entry.key] = entry
            logger.debug(f"Registered built-in theme: {entry.key}")

    def list_available_themes(self) -> List[Dict[str, Any]]:
        """List all predefined themes with their generator inputs.

        Returns:
            List of theme info dictionaries in catalog order
        """
        return [
            {
                'key': entry.key,
                'category': entry.category.value,
                'persona': entry.persona.value,
                'age_group': entry.age_group.value if entry.age_group else None,
                'universe': entry.universe.value if entry.universe else None,
            }
            for entry in self._themes.values()
        ]

    def theme_exists(self, key: str) -> bool:
        """Check if a predefined theme exists."""
        return key in self._themes

    def get(self, key: str) -> PredefinedTheme:
        """Look up a predefined theme.

        Raises:
            ValueError: If the key is not in the catalog
        """
        try:
            return self._themes[key]
        except KeyError:
            raise ValueError(
                f"Theme '{key}' not found (available: {', '.join(self._themes)})"
            ) from None

    def keys(self) -> List[str]:
        return list(self._themes)

    def entries(self) -> List[PredefinedTheme]:
        return list(self._themes.values())

    def by_category(self, category: ThemeCategory) -> List[PredefinedTheme]:
        category = ThemeCategory(category)
        return [entry for entry in self._themes.values() if entry.category == category]

    def __len__(self) -> int:
        return len(self._themes)
