"""Kids Points Theme Engine Package.

This package provides the color science and theming system for Kids Points:
color space conversion, WCAG contrast evaluation, harmonious universe
palettes, child and parent theme generation, and theme validation reports.
"""

from .engine import (
    ThemeEngine,
    ThemeFactory,
    ThemeSelector,
    get_engine,
    validate_all_themes,
)
from .registry import ThemeRegistry, PredefinedTheme
from .validator import ThemeValidator
from .generators import ChildThemeGenerator, ParentThemeGenerator
from .palette import (
    generate_harmonious_palette,
    generate_universe_palette,
    get_universe_config,
    validate_palette,
    validate_universe_palettes,
)
from .colors import validate_color_systems
from .schema import (
    # Core models
    ThemeBundle,
    ThemeColors,
    Palette,
    UniverseConfig,
    ColorValue,
    ContrastingText,

    # Configuration models
    Typography,
    Spacing,
    Animations,
    Effects,
    Shadow,
    ThemeMetadata,

    # Reports
    FactoryValidation,
    ValidationReport,
    CompleteReport,
    SystemHealth,

    # Enums
    Persona,
    AgeGroup,
    UniverseKey,
    HarmonyRule,
    WCAGLevel,
    ThemeCategory,
    TextPath,
)
from .utils import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    calculate_luminance,
    calculate_contrast_ratio,
    meets_wcag_contrast,
    adjust_brightness,
    adjust_saturation,
    generate_color_variations,
    select_contrasting_text,
    generate_contrasting_text,
)

__version__ = "2.0.0"

__all__ = [
    # Main classes
    "ThemeEngine",
    "ThemeFactory",
    "ThemeSelector",
    "ThemeRegistry",
    "PredefinedTheme",
    "ThemeValidator",
    "ChildThemeGenerator",
    "ParentThemeGenerator",
    "get_engine",
    "validate_all_themes",

    # Palettes
    "generate_harmonious_palette",
    "generate_universe_palette",
    "get_universe_config",
    "validate_palette",
    "validate_universe_palettes",
    "validate_color_systems",

    # Schema models
    "ThemeBundle",
    "ThemeColors",
    "Palette",
    "UniverseConfig",
    "ColorValue",
    "ContrastingText",
    "Typography",
    "Spacing",
    "Animations",
    "Effects",
    "Shadow",
    "ThemeMetadata",
    "FactoryValidation",
    "ValidationReport",
    "CompleteReport",
    "SystemHealth",

    # Enums
    "Persona",
    "AgeGroup",
    "UniverseKey",
    "HarmonyRule",
    "WCAGLevel",
    "ThemeCategory",
    "TextPath",

    # Utilities
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "calculate_luminance",
    "calculate_contrast_ratio",
    "meets_wcag_contrast",
    "adjust_brightness",
    "adjust_saturation",
    "generate_color_variations",
    "select_contrasting_text",
    "generate_contrasting_text",
]
