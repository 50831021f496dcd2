"""Kids Points Theme - color science and theming for the Kids Points app."""

__version__ = "2.0.0"
__author__ = "Kids Points Team"

from .theme_engine import (
    ThemeEngine,
    ThemeFactory,
    ThemeSelector,
    ThemeValidator,
    Persona,
    AgeGroup,
    UniverseKey,
)

__all__ = [
    "ThemeEngine",
    "ThemeFactory",
    "ThemeSelector",
    "ThemeValidator",
    "Persona",
    "AgeGroup",
    "UniverseKey",
    "__version__",
]
