"""Harmonious palette generation and universe palettes.

Universes are the eight immersive child themes. Each one is a base color
plus a harmony rule; the palette builder derives secondary and accent hues,
a tint/shade ramp, light backgrounds and text colors from it.
"""

import logging
from functools import lru_cache
from typing import Dict, List, Union

from .schema import (
    HarmonyRule,
    Palette,
    PaletteBackgrounds,
    PaletteText,
    PaletteValidation,
    UniverseConfig,
    UniverseKey,
)
from .utils import (
    adjust_brightness,
    generate_color_variations,
    generate_contrasting_text,
    hex_to_rgb,
    hsl_to_hex,
    meets_aaa,
    rgb_to_hex,
    rgb_to_hsl,
)

logger = logging.getLogger(__name__)


HARMONY_OFFSETS: Dict[HarmonyRule, tuple] = {
    HarmonyRule.ANALOGOUS: (30, -30),
    HarmonyRule.COMPLEMENTARY: (180,),
    HarmonyRule.TRIADIC: (120, 240),
    HarmonyRule.TETRADIC: (90, 180, 270),
}

BACKGROUND_LIGHTEN = 45
ACCENT_FALLBACK_LIGHTEN = 20
TEXT_SECONDARY_LIGHTEN = 20

SURFACE_BACKGROUND = '#FFFFFF'
ELEVATED_BACKGROUND = '#F5F5F5'


UNIVERSE_BASE_PALETTES: Dict[UniverseKey, UniverseConfig] = {
    UniverseKey.AQUA: UniverseConfig(
        key=UniverseKey.AQUA, primary='#009688',
        harmony=HarmonyRule.ANALOGOUS, saturation=85, brightness=45,
    ),
    UniverseKey.FANTASY: UniverseConfig(
        key=UniverseKey.FANTASY, primary='#9C27B0',
        harmony=HarmonyRule.TRIADIC, saturation=75, brightness=50,
    ),
    UniverseKey.SPACE: UniverseConfig(
        key=UniverseKey.SPACE, primary='#3F51B5',
        harmony=HarmonyRule.COMPLEMENTARY, saturation=80, brightness=35,
    ),
    UniverseKey.JUNGLE: UniverseConfig(
        key=UniverseKey.JUNGLE, primary='#4CAF50',
        harmony=HarmonyRule.ANALOGOUS, saturation=90, brightness=55,
    ),
    UniverseKey.CANDY: UniverseConfig(
        key=UniverseKey.CANDY, primary='#E91E63',
        harmony=HarmonyRule.COMPLEMENTARY, saturation=95, brightness=60,
    ),
    UniverseKey.VOLCANO: UniverseConfig(
        key=UniverseKey.VOLCANO, primary='#FF5722',
        harmony=HarmonyRule.ANALOGOUS, saturation=100, brightness=45,
    ),
    UniverseKey.ICE: UniverseConfig(
        key=UniverseKey.ICE, primary='#00BCD4',
        harmony=HarmonyRule.ANALOGOUS, saturation=60, brightness=70,
    ),
    UniverseKey.RAINBOW: UniverseConfig(
        key=UniverseKey.RAINBOW, primary='#FF9800',
        harmony=HarmonyRule.TETRADIC, saturation=85, brightness=55,
    ),
}


def generate_harmonious_palette(base_color: str,
                                rule: Union[HarmonyRule, str] = HarmonyRule.ANALOGOUS) -> List[str]:
    """Derive harmonious colors from a base color by hue rotation.

    Args:
        base_color: Base hex color, always first in the result
        rule: Harmony rule (enum or its string value)

    Returns:
        List of hex colors; saturation and lightness of the base are kept

    Raises:
        ValueError: If rule is not a known harmony rule
    """
    rule = HarmonyRule(rule)

    rgb = hex_to_rgb(base_color)
    if rgb is None:
        return [base_color]

    h, s, l = rgb_to_hsl(*rgb)
    colors = [rgb_to_hex(*rgb)]
    for offset in HARMONY_OFFSETS[rule]:
        colors.append(hsl_to_hex((h + offset) % 360, s, l))

    return colors


def get_universe_config(universe: Union[UniverseKey, str]) -> UniverseConfig:
    """Look up the base configuration of a universe.

    Raises:
        ValueError: If universe is not one of the eight known keys
    """
    return UNIVERSE_BASE_PALETTES[UniverseKey(universe)]


@lru_cache(maxsize=None)
def _build_universe_palette(universe: UniverseKey) -> Palette:
    config = UNIVERSE_BASE_PALETTES[universe]
    harmony = generate_harmonious_palette(config.primary, config.harmony)

    primary = config.primary
    secondary = harmony[1] if len(harmony) > 1 else primary
    accent = harmony[2] if len(harmony) > 2 else adjust_brightness(primary, ACCENT_FALLBACK_LIGHTEN)

    text_primary = generate_contrasting_text(SURFACE_BACKGROUND)

    palette = Palette(
        primary=primary,
        secondary=secondary,
        accent=accent,
        variations=generate_color_variations(primary),
        backgrounds=PaletteBackgrounds(
            primary=adjust_brightness(primary, BACKGROUND_LIGHTEN),
            secondary=adjust_brightness(secondary, BACKGROUND_LIGHTEN),
            surface=SURFACE_BACKGROUND,
            elevated=ELEVATED_BACKGROUND,
        ),
        text=PaletteText(
            primary=text_primary,
            secondary=adjust_brightness(text_primary, TEXT_SECONDARY_LIGHTEN),
            on_primary=generate_contrasting_text(primary),
            on_secondary=generate_contrasting_text(secondary),
        ),
    )
    logger.debug(f"Built palette for universe '{universe.value}'")
    return palette


def generate_universe_palette(universe: Union[UniverseKey, str]) -> Palette:
    """Generate the complete palette of a universe.

    Args:
        universe: Universe key (enum or its string value)

    Returns:
        Palette instance (cached per universe)

    Raises:
        ValueError: If universe is not one of the eight known keys
    """
    return _build_universe_palette(UniverseKey(universe))


def validate_palette(palette: Palette) -> PaletteValidation:
    """Check the text pairs of a palette against WCAG AAA.

    All failing pairs are reported; nothing is raised.
    """
    errors = []

    if not meets_aaa(palette.text.primary, palette.backgrounds.surface):
        errors.append('Primary text on surface background does not meet WCAG AAA')

    if not meets_aaa(palette.text.on_primary, palette.primary):
        errors.append('Text on primary color does not meet WCAG AAA')

    if not meets_aaa(palette.text.on_secondary, palette.secondary):
        errors.append('Text on secondary color does not meet WCAG AAA')

    return PaletteValidation(is_valid=not errors, errors=errors)


def validate_universe_palettes() -> Dict[UniverseKey, PaletteValidation]:
    """Validate the palettes of all universes in one pass."""
    results = {}
    for universe in UniverseKey:
        result = validate_palette(generate_universe_palette(universe))
        results[universe] = result
        if not result.is_valid:
            logger.warning(f"Universe '{universe.value}' palette: {'; '.join(result.errors)}")

    valid_count = sum(1 for r in results.values() if r.is_valid)
    logger.info(f"Universe palettes validated: {valid_count}/{len(results)} meet WCAG AAA")
    return results
